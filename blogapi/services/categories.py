# blogapi/services/categories.py
from flask import current_app
from sqlalchemy.exc import IntegrityError

from blogapi.errors import ValidationError
from blogapi.extensions import db
from blogapi.models import Category

NAME_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 500


def list_categories():
    return Category.query.order_by(Category.name.asc()).all()


def create_category(name, description=None):
    name = (name or "").strip()
    description = (description or "").strip() or None

    if not name:
        raise ValidationError.from_fields({"name": "Category name is required"})
    if len(name) > NAME_MAX_LENGTH:
        raise ValidationError.from_fields({"name": f"Name cannot be more than {NAME_MAX_LENGTH} characters"})
    if description and len(description) > DESCRIPTION_MAX_LENGTH:
        raise ValidationError.from_fields(
            {"description": f"Description cannot be more than {DESCRIPTION_MAX_LENGTH} characters"}
        )
    if Category.query.filter_by(name=name).first():
        raise ValidationError.from_fields({"name": "Category already exists"})

    category = Category(name=name, description=description)
    db.session.add(category)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ValidationError.from_fields({"name": "Category already exists"})

    current_app.logger.info("📁 Categoría creada: %s", category.name)
    return category
