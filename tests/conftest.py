import io

import pytest

from blogapi import create_app
from blogapi.config import TestingConfig
from blogapi.extensions import db
from blogapi.models import Category, User


@pytest.fixture
def app(tmp_path):
    class Config(TestingConfig):
        UPLOAD_FOLDER = str(tmp_path / "uploads")

    app = create_app(Config)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_user(client):
    """Registra un usuario por la API y devuelve ``(user_id, headers)``."""
    def _make(username, email=None, password="password123", role="user"):
        resp = client.post("/auth/register", json={
            "username": username,
            "email": email or f"{username}@example.com",
            "password": password,
        })
        assert resp.status_code == 201, resp.get_json()
        data = resp.get_json()["data"]
        if role != "user":
            user = db.session.get(User, data["user"]["id"])
            user.role = role
            db.session.commit()
        return data["user"]["id"], bearer(data["token"])
    return _make


@pytest.fixture
def author(make_user):
    return make_user("johndoe", "john@example.com")


@pytest.fixture
def category(app):
    cat = Category(name="Tech", description="Technology")
    db.session.add(cat)
    db.session.commit()
    return cat.id


@pytest.fixture
def create_post(client, category):
    def _create(headers, expect=201, **fields):
        payload = {"title": "A post", "content": "Some content", "category": category}
        payload.update(fields)
        resp = client.post("/posts", json=payload, headers=headers)
        assert resp.status_code == expect, resp.get_json()
        return resp.get_json()["data"]
    return _create


def image_bytes(fmt="PNG", color="red"):
    """Imagen real de 2x2 en el formato pedido."""
    from PIL import Image

    buf = io.BytesIO()
    Image.new("RGB", (2, 2), color).save(buf, format=fmt)
    return buf.getvalue()
