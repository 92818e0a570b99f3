# blogapi/models/__init__.py
"""
Paquete de modelos de la aplicación.
Importa aquí los modelos para que puedan ser referenciados como:
from blogapi.models import Post
"""
from datetime import datetime, timezone


def utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


def isoformat(value):
    return value.isoformat() if value else None


from .user import User  # noqa: E402
from .category import Category  # noqa: E402
from .post import Post  # noqa: E402
from .comment import Comment  # noqa: E402

__all__ = ["User", "Category", "Post", "Comment"]
