# content_admin/config.py
import os
from datetime import timedelta


def _database_url():
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        return "sqlite:///content_admin.db"
    # Heroku/Render style URLs are not accepted by SQLAlchemy 1.4+
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    return url


def _env_bool(name, default=False):
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-change-this-secret")

    SQLALCHEMY_DATABASE_URI = _database_url()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # "memory" or "database"
    SESSION_STORE = os.environ.get("SESSION_STORE", "memory").strip().lower()
    SESSION_LIFETIME = timedelta(hours=int(os.environ.get("SESSION_LIFETIME_HOURS", "24")))

    AUTH_COOKIE_NAME = os.environ.get("AUTH_COOKIE_NAME", "admin_sid")
    AUTH_COOKIE_SECURE = _env_bool("AUTH_COOKIE_SECURE")
    AUTH_COOKIE_SAMESITE = os.environ.get("AUTH_COOKIE_SAMESITE", "Lax")

    CORS_ORIGINS = os.environ.get("MAIN_APP_URL", "*")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SESSION_STORE = "memory"
    LOG_LEVEL = "WARNING"
