# blogapi/routes/upload_routes.py
from flask import Blueprint, current_app, request, send_from_directory

from blogapi.auth.decorators import login_required
from blogapi.errors import ValidationError
from blogapi.utils.responses import success
from blogapi.utils.storage import save_upload

upload_bp = Blueprint("upload", __name__)


@upload_bp.route("/upload-image", methods=["POST"])
@login_required
def upload_image():
    file = request.files.get("image")
    if file is None or not file.filename:
        raise ValidationError.from_fields({"image": "No image file provided"})

    stored = save_upload(file, field="image")
    return success({"url": stored.path, "public_id": stored.public_id}, status=201)


@upload_bp.route("/uploads/<path:filename>", methods=["GET"])
def uploaded_file(filename):
    return send_from_directory(current_app.config["UPLOAD_FOLDER"], filename)


@upload_bp.route("/health", methods=["GET"])
def health():
    return success({"status": "ok"})
