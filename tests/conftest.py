import pytest

from content_admin import create_app
from content_admin.auth.passwords import hash_password
from content_admin.config import TestConfig
from content_admin.extensions import db
from content_admin.models import Account


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin(app):
    account = Account(username="admin", password_hash=hash_password("admin-pass"), is_admin=True)
    db.session.add(account)
    db.session.commit()
    return account


@pytest.fixture()
def editor(app):
    account = Account(username="editor", password_hash=hash_password("editor-pass"), is_admin=False)
    db.session.add(account)
    db.session.commit()
    return account


def login(client, username, password):
    return client.post("/api/login", json={"username": username, "password": password})


@pytest.fixture()
def admin_client(client, admin):
    r = login(client, "admin", "admin-pass")
    assert r.status_code == 200
    return client


@pytest.fixture()
def editor_client(client, editor):
    r = login(client, "editor", "editor-pass")
    assert r.status_code == 200
    return client
