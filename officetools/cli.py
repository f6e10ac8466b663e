import click
from flask import current_app
from flask.cli import with_appcontext

from officetools.domain.registry import TOOLS
from officetools.extensions import db
from officetools.models import Tool
from officetools.services.sharing import purge_expired
from officetools.services.tracking import seed_tools


@click.command('seed-tools')
@with_appcontext
def seed_tools_command() -> None:
    """Insert registry tools that are missing from the database."""
    created = seed_tools()
    click.echo(f"Seeded {created} tools. Total tools: {Tool.query.count()} (registry: {len(TOOLS)})")


@click.command('purge-expired-shares')
@with_appcontext
def purge_expired_shares_command() -> None:
    """Delete expired shared files and texts."""
    files, texts = purge_expired(current_app.config['SHARED_UPLOAD_FOLDER'])
    click.echo(f"Removed {files} expired files and {texts} expired texts.")


@click.command('init-db')
@with_appcontext
def init_db_command() -> None:
    """Create all tables (development only; use `flask db upgrade` elsewhere)."""
    if current_app.config.get('ENV_NAME') == 'production':
        raise click.ClickException('Refusing to run create_all() in production. Use flask db upgrade.')
    db.create_all()
    click.echo('✓ Tables created')


COMMANDS = (
    seed_tools_command,
    purge_expired_shares_command,
    init_db_command,
)
