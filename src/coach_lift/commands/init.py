"""Initialize project command."""

import click

from ..db import get_db_path, init_db
from ..db.engine import get_data_dir
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the coach-lift database.

    Creates the data directory and the tables for programs and workout logs.
    Running it again is harmless.
    """
    data_dir = get_data_dir()
    db_path = get_db_path(data_dir)

    echo_info(f"Initializing coach-lift in {data_dir}")

    await init_db(db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("coach-lift is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Generate a program:")
    click.echo("     coach-lift generate --interactive --save")
    click.echo()
    click.echo("  2. Log your sets:")
    click.echo("     coach-lift log set <program_id> -w 1 -d 1 -e 'Squat barre' -s 1 --weight 100 --reps 5")
