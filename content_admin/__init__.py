# content_admin/__init__.py
import logging

from flask import Flask

from content_admin.auth.gate import SessionGate
from content_admin.auth.session_store import build_session_store
from content_admin.cli import register_commands
from content_admin.config import Config
from content_admin.errors import register_error_handlers
from content_admin.extensions import cors, db, migrate
from content_admin.routes import register_routes  # <- usar el init de routes


def configure_logging(app):
    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger("content_admin").setLevel(app.config.get("LOG_LEVEL", "INFO"))


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    configure_logging(app)

    # Inicializar extensiones
    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
        allow_headers=["Content-Type"],
    )

    app.extensions["session_gate"] = SessionGate(
        build_session_store(app.config),
        lifetime=app.config["SESSION_LIFETIME"],
    )

    register_error_handlers(app)
    # Registrar blueprints centralizado
    register_routes(app)
    register_commands(app)

    return app
