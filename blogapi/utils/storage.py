# blogapi/utils/storage.py
"""
Almacenamiento de imágenes subidas.

Por defecto se guardan en disco (``UPLOAD_FOLDER``) y se sirven desde
``/uploads/<filename>``. Con ``STORAGE_BACKEND = "cloudinary"`` se suben a
Cloudinary y se guarda la URL segura + el ``public_id`` para poder borrarlas.
"""
import os
import uuid
from collections import namedtuple

import cloudinary
import cloudinary.uploader
from flask import current_app
from PIL import Image, UnidentifiedImageError
from werkzeug.utils import secure_filename

from blogapi.errors import ValidationError

UPLOAD_URL_PREFIX = "/uploads/"

# formatos que reporta Pillow al abrir la imagen
IMAGE_FORMATS = {"jpeg", "png", "gif", "webp"}

StoredFile = namedtuple("StoredFile", ["path", "public_id"])


def init_storage(app):
    if app.config["STORAGE_BACKEND"] == "cloudinary":
        cloudinary.config(
            cloud_name=app.config["CLOUDINARY_CLOUD_NAME"],
            api_key=app.config["CLOUDINARY_API_KEY"],
            api_secret=app.config["CLOUDINARY_API_SECRET"],
            secure=True,
        )
    else:
        os.makedirs(app.config["UPLOAD_FOLDER"], exist_ok=True)


def _extension(filename):
    if "." not in filename:
        return ""
    return filename.rsplit(".", 1)[1].lower()


def validate_image(file, field="featuredImage"):
    """Valida extensión, tamaño y contenido. Devuelve la extensión normalizada."""
    filename = secure_filename(file.filename or "")
    ext = _extension(filename)
    allowed = current_app.config["ALLOWED_IMAGE_EXTENSIONS"]
    if ext not in allowed:
        raise ValidationError.from_fields(
            {field: f"Image type not allowed, use one of: {', '.join(allowed)}"}
        )

    # Validar tamaño
    file.stream.seek(0, os.SEEK_END)
    size = file.stream.tell()
    file.stream.seek(0)
    max_size = current_app.config["MAX_IMAGE_SIZE"]
    if size > max_size:
        raise ValidationError.from_fields(
            {field: f"File size must be less than {max_size // (1024 * 1024)}MB"}
        )

    # El contenido tiene que ser una imagen real, no solo el nombre
    try:
        with Image.open(file.stream) as img:
            img.verify()
            image_format = (img.format or "").lower()
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError):
        image_format = None
    finally:
        file.stream.seek(0)
    if image_format not in IMAGE_FORMATS:
        raise ValidationError.from_fields({field: "File is not a valid image"})
    return ext


def save_upload(file, field="featuredImage"):
    ext = validate_image(file, field)

    if current_app.config["STORAGE_BACKEND"] == "cloudinary":
        result = cloudinary.uploader.upload(
            file,
            folder=current_app.config["CLOUDINARY_FOLDER"],
            resource_type="image",
        )
        url = result.get("secure_url")
        if not url:
            raise RuntimeError("Cloudinary did not return an URL")
        current_app.logger.info("🖼️ Imagen subida a Cloudinary: %s", result.get("public_id"))
        return StoredFile(url, result.get("public_id"))

    filename = f"{uuid.uuid4().hex}.{ext}"
    file.save(os.path.join(current_app.config["UPLOAD_FOLDER"], filename))
    current_app.logger.info("🖼️ Imagen guardada: %s", filename)
    return StoredFile(UPLOAD_URL_PREFIX + filename, None)


def delete_upload(path, public_id=None):
    """Borra un archivo guardado previamente. Ausente = nada que hacer."""
    if public_id:
        cloudinary.uploader.destroy(public_id)
        return
    if not path or not path.startswith(UPLOAD_URL_PREFIX):
        return
    filename = secure_filename(path[len(UPLOAD_URL_PREFIX):])
    full_path = os.path.join(current_app.config["UPLOAD_FOLDER"], filename)
    if os.path.exists(full_path):
        os.remove(full_path)
