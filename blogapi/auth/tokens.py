# blogapi/auth/tokens.py
from datetime import datetime, timedelta, timezone

import jwt
from flask import current_app

from blogapi.errors import Unauthenticated

ALGORITHM = "HS256"


def create_token(user):
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user.id),
        "username": user.username,
        "role": user.role,
        "iat": now,
        "exp": now + timedelta(days=current_app.config["JWT_EXPIRES_DAYS"]),
    }
    return jwt.encode(payload, current_app.config["JWT_SECRET_KEY"], algorithm=ALGORITHM)


def decode_token(token):
    try:
        return jwt.decode(token, current_app.config["JWT_SECRET_KEY"], algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError:
        current_app.logger.warning("⚠️ Token expirado")
        raise Unauthenticated("Token expired")
    except jwt.InvalidTokenError as e:
        current_app.logger.warning("❌ Token inválido: %s", e)
        raise Unauthenticated("Invalid token")
