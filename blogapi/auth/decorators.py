# blogapi/auth/decorators.py
from functools import wraps

from flask import g, request

from blogapi.auth.tokens import decode_token
from blogapi.errors import Unauthenticated
from blogapi.extensions import db
from blogapi.models import User


def bearer_token():
    auth_header = request.headers.get("Authorization", "")
    if not auth_header.startswith("Bearer "):
        return None
    return auth_header[len("Bearer "):].strip() or None


def load_user_from_token(token):
    payload = decode_token(token)
    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise Unauthenticated("Invalid token")

    # El rol se lee de la base, no del token, para que un cambio de rol aplique ya
    user = db.session.get(User, user_id)
    if user is None:
        raise Unauthenticated("User no longer exists")
    return user


def login_required(f):
    """Exige ``Authorization: Bearer <token>`` y deja el usuario en ``g.current_user``."""
    @wraps(f)
    def decorated(*args, **kwargs):
        token = bearer_token()
        if not token:
            raise Unauthenticated("Not authorized, token required")
        g.current_user = load_user_from_token(token)
        return f(*args, **kwargs)
    return decorated
