import io

from tests.conftest import image_bytes


def test_upload_image_returns_url(client, author):
    _, headers = author
    gif = image_bytes("GIF")
    resp = client.post("/upload-image", data={
        "image": (io.BytesIO(gif), "inline.gif"),
    }, headers=headers, content_type="multipart/form-data")

    assert resp.status_code == 201
    url = resp.get_json()["data"]["url"]
    assert url.startswith("/uploads/") and url.endswith(".gif")
    assert client.get(url).data == gif


def test_upload_image_requires_file(client, author):
    _, headers = author
    resp = client.post("/upload-image", data={}, headers=headers, content_type="multipart/form-data")

    assert resp.status_code == 400
    assert resp.get_json()["errors"][0]["field"] == "image"


def test_upload_image_requires_auth(client):
    resp = client.post("/upload-image", data={
        "image": (io.BytesIO(b"x"), "a.png"),
    }, content_type="multipart/form-data")
    assert resp.status_code == 401


def test_missing_upload_is_404_envelope(client):
    resp = client.get("/uploads/nope.png")

    assert resp.status_code == 404
    assert resp.get_json()["success"] is False


def test_unknown_route_uses_envelope(client):
    resp = client.get("/does-not-exist")

    assert resp.status_code == 404
    assert resp.get_json()["success"] is False


def test_health(client):
    assert client.get("/health").get_json() == {"success": True, "data": {"status": "ok"}}


def test_upload_image_checks_content(client, author):
    _, headers = author
    resp = client.post("/upload-image", data={
        "image": (io.BytesIO(b"<html>not an image</html>"), "page.png"),
    }, headers=headers, content_type="multipart/form-data")

    assert resp.status_code == 400
    assert resp.get_json()["errors"] == [{"field": "image", "message": "File is not a valid image"}]
