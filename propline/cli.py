import click
from flask import current_app
from flask.cli import with_appcontext
from .extensions import db
from .models import User
from .services.seed_service import seed_database


def register_commands(app):
    app.cli.add_command(seed_db_command)
    app.cli.add_command(create_admin_command)


@click.command('seed-db')
@with_appcontext
def seed_db_command():
    """Create tables and insert baseline rows into any empty table."""
    result = seed_database()
    for table, inserted in result.items():
        if inserted:
            click.echo(f"{table}: inserted {inserted}")
        else:
            click.echo(f"{table}: already populated, skipped")
    current_app.logger.info(f"Seed finished, {result.total} new row(s).")


@click.command('create-admin')
@click.argument('username')
@click.option('--password', prompt=True, hide_input=True, confirmation_prompt=True)
@click.option('--email', default=None)
@with_appcontext
def create_admin_command(username, password, email):
    """Create an additional admin user."""
    db.create_all()
    if User.query.filter_by(username=username).first():
        raise click.UsageError(f"User '{username}' already exists.")
    if email and User.query.filter_by(email=email).first():
        raise click.UsageError(f"Email '{email}' is already in use.")

    user = User(username=username, name=username, email=email, role='admin', is_default_password=False)
    user.set_password(password)
    db.session.add(user)
    db.session.commit()
    click.echo(f"Created admin '{username}'.")
