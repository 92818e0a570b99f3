from blogapi.extensions import db
from blogapi.models import isoformat, utcnow


class Category(db.Model):
    __tablename__ = "categories"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(50), nullable=False, unique=True)
    description = db.Column(db.String(500), nullable=True)
    created_at = db.Column(db.DateTime, default=utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "created_at": isoformat(self.created_at),
        }

    def to_ref(self):
        return {"id": self.id, "name": self.name}

    def __repr__(self):
        return f"<Category {self.name}>"
