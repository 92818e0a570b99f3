from sqlalchemy.orm import validates

from blogapi.extensions import db
from blogapi.models import isoformat, utcnow
from blogapi.utils.content_rules import SLUG_MAX_LENGTH, count_words, reading_time


# blogapi/models/post.py
class Post(db.Model):
    __tablename__ = "posts"

    id = db.Column(db.Integer, primary_key=True)

    # 🧠 Contenido principal
    title = db.Column(db.String(100), nullable=False)
    slug = db.Column(db.String(SLUG_MAX_LENGTH), unique=True, nullable=False, index=True)
    content = db.Column(db.Text, nullable=False)
    excerpt = db.Column(db.String(255), nullable=True)
    tags = db.Column(db.JSON, nullable=False, default=list)
    # copia plana de las etiquetas, una por línea, para buscar por substring
    tags_text = db.Column(db.Text, nullable=False, default="")

    # 🖼️ Imagen destacada
    featured_image = db.Column(db.String, nullable=True)
    featured_image_public_id = db.Column(db.String, nullable=True)

    # 👤 Autor y categoría
    author_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    author = db.relationship("User", lazy="joined")
    category_id = db.Column(db.Integer, db.ForeignKey("categories.id"), nullable=False, index=True)
    category = db.relationship("Category", lazy="joined")

    # 📣 Estado y métricas
    is_published = db.Column(db.Boolean, nullable=False, default=False)
    views = db.Column(db.Integer, nullable=False, default=0)

    comments = db.relationship(
        "Comment",
        backref="post",
        cascade="all, delete-orphan",
        order_by="Comment.id",
    )

    # ⏰ Timestamps
    created_at = db.Column(db.DateTime, default=utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    @validates("tags")
    def _sync_tags_text(self, key, value):
        self.tags_text = "\n".join(value or [])
        return value

    def can_be_modified_by(self, user):
        """Solo el dueño o un admin."""
        return user is not None and (self.author_id == user.id or user.is_admin)

    # ✅ Método para devolverlo como JSON-friendly dict
    def to_dict(self, with_comments=False):
        words = count_words(self.content)
        data = {
            "id": self.id,
            "title": self.title,
            "slug": self.slug,
            "content": self.content,
            "excerpt": self.excerpt,
            "tags": list(self.tags or []),
            "featured_image": self.featured_image,
            "author": self.author.to_public_dict() if self.author else None,
            "category": self.category.to_ref() if self.category else None,
            "is_published": self.is_published,
            "views": self.views,
            "word_count": words,
            "reading_time": reading_time(words),
            "comment_count": len(self.comments),
            "created_at": isoformat(self.created_at),
            "updated_at": isoformat(self.updated_at),
        }
        if with_comments:
            data["comments"] = [c.to_dict() for c in self.comments]
        return data

    def __repr__(self):
        return f"<Post {self.title}>"
