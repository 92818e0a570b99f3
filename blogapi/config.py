# blogapi/config.py
import os
import tempfile

BASE_DIR = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret")

    # Tokens
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", "supersecret")
    JWT_EXPIRES_DAYS = int(os.environ.get("JWT_EXPIRES_DAYS", 30))

    # Database
    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", "sqlite:///blog.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Uploads
    STORAGE_BACKEND = os.environ.get("STORAGE_BACKEND", "local")
    UPLOAD_FOLDER = os.environ.get("UPLOAD_FOLDER", os.path.join(BASE_DIR, "uploads"))
    MAX_IMAGE_SIZE = 5 * 1024 * 1024
    MAX_CONTENT_LENGTH = 6 * 1024 * 1024
    ALLOWED_IMAGE_EXTENSIONS = ("jpg", "jpeg", "png", "gif", "webp")

    CLOUDINARY_CLOUD_NAME = os.environ.get("CLOUDINARY_CLOUD_NAME")
    CLOUDINARY_API_KEY = os.environ.get("CLOUDINARY_API_KEY")
    CLOUDINARY_API_SECRET = os.environ.get("CLOUDINARY_API_SECRET")
    CLOUDINARY_FOLDER = os.environ.get("CLOUDINARY_FOLDER", "blog_featured_images")

    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Listing
    DEFAULT_PAGE_SIZE = 10
    MAX_PAGE_SIZE = 100
    SEARCH_RESULT_LIMIT = 20


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    JWT_SECRET_KEY = "test-secret"
    STORAGE_BACKEND = "local"
    UPLOAD_FOLDER = os.path.join(tempfile.gettempdir(), "blogapi-test-uploads")
    LOG_LEVEL = "WARNING"
