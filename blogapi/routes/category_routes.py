# blogapi/routes/category_routes.py
from flask import Blueprint

from blogapi.auth.decorators import login_required
from blogapi.services import categories
from blogapi.utils.responses import request_payload, success

category_bp = Blueprint("categories", __name__)


@category_bp.route("", methods=["GET"])
def get_categories():
    return success([c.to_dict() for c in categories.list_categories()])


@category_bp.route("", methods=["POST"])
@login_required
def create_category():
    data = request_payload()
    category = categories.create_category(data.get("name"), data.get("description"))
    return success(category.to_dict(), status=201)
