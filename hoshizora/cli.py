# hoshizora/cli.py

import click
from flask.cli import with_appcontext
from sqlalchemy.exc import SQLAlchemyError

from hoshizora.extensions import db
from hoshizora.models import User


@click.group()
def init():
    """Database and account setup commands."""
    pass


@init.command("db")
@click.option('--drop', is_flag=True, help='Drop all tables before creating them.')
@with_appcontext
def init_db(drop):
    """Create the database tables."""
    if drop:
        click.echo("Dropping existing tables...")
        db.drop_all()
    click.echo("Creating tables...")
    db.create_all()
    click.echo("Database ready.")


@init.command("admin-user")
@click.option('--username', default='admin', help='Administrator username.')
@click.option('--email', default='admin@example.com', help='Administrator email address.')
@click.option('--display-name', default='Administrator', help='Name shown on posts.')
@click.option('--password', prompt=True, hide_input=True, confirmation_prompt=True,
              help='Administrator password.')
@with_appcontext
def init_admin_user(username, email, display_name, password):
    """Create an administrator account."""
    if User.query.filter((User.username == username) | (User.email == email)).first():
        click.echo(f"User '{username}' or '{email}' already exists. Skipping.", err=True)
        return

    user = User(username=username, email=email, display_name=display_name, is_admin=True)
    user.set_password(password)
    try:
        db.session.add(user)
        db.session.commit()
        click.echo(f"Administrator '{username}' ({email}) created.")
    except SQLAlchemyError as e:
        db.session.rollback()
        click.echo(f"Failed to create administrator: {e}", err=True)
        click.echo("The database transaction was rolled back.", err=True)
        raise click.Abort() from e
