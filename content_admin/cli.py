# content_admin/cli.py
import click
from flask import Flask

from content_admin.auth.passwords import hash_password
from content_admin.extensions import db
from content_admin.models import Account


def register_commands(app: Flask):
    @app.cli.command("init-db")
    def init_db():
        """Create every table that does not exist yet."""
        db.create_all()
        click.echo("Database tables created")

    @app.cli.command("create-admin")
    @click.option("--username", required=True)
    @click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
    def create_admin(username, password):
        """Create an admin account, or promote and reset an existing one."""
        account = Account.query.filter_by(username=username).first()
        if account is None:
            account = Account(username=username)
            db.session.add(account)
            message = f"Admin {username} created"
        else:
            message = f"Existing user {username} promoted to admin"
        account.password_hash = hash_password(password)
        account.is_admin = True
        db.session.commit()
        click.echo(message)
