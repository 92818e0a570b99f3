# blogapi/routes/auth.py
from flask import Blueprint, g

from blogapi.auth.decorators import login_required
from blogapi.auth.tokens import create_token
from blogapi.services import users
from blogapi.utils.responses import request_payload, success
from blogapi.utils.validators import check_password_strength

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/register", methods=["POST"])
def register():
    data = request_payload()
    password = data.get("password")
    user = users.register_user(data.get("username"), data.get("email"), password)

    return success({
        "token": create_token(user),
        "user": user.to_dict(),
        "password_strength": check_password_strength(password),
    }, status=201)


@auth_bp.route("/login", methods=["POST"])
def login():
    data = request_payload()
    user = users.authenticate(data.get("email"), data.get("password"))

    return success({"token": create_token(user), "user": user.to_dict()})


@auth_bp.route("/me", methods=["GET"])
@login_required
def me():
    return success(g.current_user.to_dict())


@auth_bp.route("/password-strength", methods=["POST"])
def password_strength():
    return success(check_password_strength(request_payload().get("password")))
