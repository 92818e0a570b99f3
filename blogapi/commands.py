# blogapi/commands.py
import click
from flask import Flask

from blogapi.extensions import db
from blogapi.services.users import find_by_email, register_user


def register_commands(app: Flask):
    @app.cli.command("init-db")
    def init_db():
        """Crea las tablas que falten."""
        db.create_all()
        click.echo("✅ Tablas creadas")

    @app.cli.command("create-admin")
    @click.argument("username")
    @click.argument("email")
    @click.argument("password")
    def create_admin(username, email, password):
        """Crea un admin, o promueve al usuario si el email ya existe."""
        user = find_by_email(email)
        if user is None:
            user = register_user(username, email, password, role="admin")
            click.echo(f"✅ Admin creado: {user.username}")
            return
        user.role = "admin"
        db.session.commit()
        click.echo(f"✅ {user.username} ahora es admin")
