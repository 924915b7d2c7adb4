"""Program management commands."""

import click

from ..db import ProgramRepository, get_db_path
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    user_option,
)


@click.group()
@click.pass_context
def programs(ctx):
    """Manage stored programs.

    Commands for listing, viewing, and deleting programs.
    """
    ensure_initialized(ctx)


@programs.command(name="list")
@user_option
@click.pass_context
@async_command
async def list_programs(ctx, user_id: str):
    """List a user's programs, newest first."""
    repo = ProgramRepository(get_db_path())

    stored_programs = await repo.list_for_user(user_id)

    if not stored_programs:
        echo_info("No programs found. Generate one with 'coach-lift generate --save'")
        return

    headers = ["ID", "Name", "Days", "Weeks", "Created"]
    rows = []

    for stored in stored_programs:
        name = stored.program_name or stored.program.title
        created = stored.created_at.strftime("%Y-%m-%d") if stored.created_at else "N/A"
        rows.append([
            stored.id,
            name[:40] + "..." if len(name) > 40 else name,
            str(stored.days_per_week),
            str(stored.duration_weeks),
            created,
        ])

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(stored_programs)} program(s)")


@programs.command()
@click.argument("program_id")
@user_option
@click.pass_context
@async_command
async def show(ctx, program_id: str, user_id: str):
    """Show details of a specific program."""
    repo = ProgramRepository(get_db_path())

    stored = await repo.get(program_id, user_id)
    if not stored:
        echo_error(f"Program ID {program_id} not found")
        ctx.exit(1)

    click.echo()
    click.echo("=" * 60)
    click.echo(f"Program ID: {stored.id}")
    click.echo(f"Created: {stored.created_at}")
    click.echo("=" * 60)
    click.echo()
    click.echo(stored.program.get_summary())


@programs.command()
@click.argument("program_id")
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@user_option
@click.pass_context
@async_command
async def delete(ctx, program_id: str, force: bool, user_id: str):
    """Delete a program and its workout logs."""
    repo = ProgramRepository(get_db_path())

    stored = await repo.get(program_id, user_id)
    if not stored:
        echo_error(f"Program ID {program_id} not found")
        ctx.exit(1)

    if not force:
        click.echo(f"Program: {stored.program.title}")
        if not click.confirm("Are you sure you want to delete this program and its logs?"):
            echo_info("Cancelled")
            return

    await repo.delete(program_id)
    echo_success(f"Program {program_id} deleted")
