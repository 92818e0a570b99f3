# blogapi/__init__.py
from flask import Flask

from blogapi.commands import register_commands
from blogapi.config import Config
from blogapi.errors import register_error_handlers
from blogapi.extensions import cors, db, migrate
from blogapi.routes import register_routes  # <- usar el init de routes
from blogapi.utils.storage import init_storage


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # Inicializar extensiones
    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(
        app,
        resources={r"/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
        allow_headers=["Content-Type", "Authorization"],
    )
    init_storage(app)

    # Registrar blueprints centralizado
    register_routes(app)
    register_error_handlers(app)
    register_commands(app)

    return app
