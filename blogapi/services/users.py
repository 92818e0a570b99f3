# blogapi/services/users.py
from flask import current_app
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from blogapi.errors import Unauthenticated, ValidationError
from blogapi.extensions import db
from blogapi.models import User
from blogapi.utils.validators import validate_email, validate_password, validate_username


def find_by_email(email):
    return User.query.filter(func.lower(User.email) == email.strip().lower()).first()


def register_user(username, email, password, role="user"):
    username = (username or "").strip()
    email = (email or "").strip()

    errors = {}
    for field, error in (
        ("username", validate_username(username)),
        ("email", validate_email(email)),
        ("password", validate_password(password)),
    ):
        if error:
            errors[field] = error
    if errors:
        raise ValidationError.from_fields(errors)

    if User.query.filter_by(username=username).first():
        raise ValidationError.from_fields({"username": "Username already taken"}, "User already exists")
    if find_by_email(email):
        raise ValidationError.from_fields({"email": "Email already registered"}, "User already exists")

    user = User(username=username, email=email.lower(), role=role)
    user.set_password(password)
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        # otro request registró el mismo usuario entre la validación y el commit
        db.session.rollback()
        raise ValidationError("User already exists")

    current_app.logger.info("✅ Usuario registrado: %s", user.username)
    return user


def authenticate(email, password):
    if not email or not password:
        raise ValidationError.from_fields(
            {k: f"{k.capitalize()} is required" for k, v in (("email", email), ("password", password)) if not v}
        )
    user = find_by_email(email)
    if user is None or not user.check_password(password):
        current_app.logger.warning("⚠️ Login fallido para %s", email)
        raise Unauthenticated("Invalid credentials")
    return user
