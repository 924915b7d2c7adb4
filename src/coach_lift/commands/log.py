"""Workout logging commands."""

import click

from ..db import ProgramRepository, WorkoutLogRepository, get_db_path
from ..db.models import StoredProgram
from ..services import WorkoutEditSession, WorkoutLogService
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
def log(ctx):
    """Log performed sets against a stored program."""
    ensure_initialized(ctx)


async def _open_session(
    ctx: click.Context, program_id: str, user_id: str, week: int, day: int
) -> WorkoutEditSession:
    db_path = get_db_path()
    stored: StoredProgram | None = await ProgramRepository(db_path).get(program_id, user_id)
    if not stored:
        echo_error(f"Program ID {program_id} not found")
        ctx.exit(1)

    session = WorkoutEditSession(WorkoutLogService(WorkoutLogRepository(db_path)), user_id)
    result = await session.select(stored, week, day)
    if not result.ok:
        echo_error(result.error)
        ctx.exit(1)
    return session


@log.command(name="set")
@click.argument("program_id")
@click.option("--week", "-w", type=int, required=True, help="Week number (1-based)")
@click.option("--day", "-d", type=int, required=True, help="Day number (1-based)")
@click.option("--exercise", "-e", required=True, help="Exercise name as shown in the program")
@click.option("--set-number", "-s", type=int, default=1, show_default=True)
@click.option("--weight", help="Weight in kg (set 1 fills the following sets)")
@click.option("--reps", help="Reps performed")
@click.option("--notes", "-n", help="Note for the exercise")
@user_option
@click.pass_context
@async_command
async def set_(
    ctx,
    program_id: str,
    week: int,
    day: int,
    exercise: str,
    set_number: int,
    weight: str | None,
    reps: str | None,
    notes: str | None,
    user_id: str,
):
    """Record one set and save the day."""
    if weight is None and reps is None and notes is None:
        echo_error("Nothing to log: pass --weight, --reps or --notes")
        ctx.exit(1)

    session = await _open_session(ctx, program_id, user_id, week, day)
    if exercise not in session.day.exercise_names:
        echo_error(f"'{exercise}' is not part of week {week} day {day}")
        ctx.exit(1)

    if weight is not None:
        session.set_value(exercise, set_number, "weight", weight)
    if reps is not None:
        session.set_value(exercise, set_number, "reps", reps)
    if notes is not None:
        session.set_notes(exercise, notes)

    result = await session.save()
    if not result.ok:
        echo_error(result.error)
        ctx.exit(1)

    echo_success(f"Saved {len(result.data)} set(s) for week {week} day {day}")


@log.command()
@click.argument("program_id")
@click.option("--week", "-w", type=int, required=True, help="Week number (1-based)")
@click.option("--day", "-d", type=int, required=True, help="Day number (1-based)")
@user_option
@click.pass_context
@async_command
async def show(ctx, program_id: str, week: int, day: int, user_id: str):
    """Show a program day next to what was logged for it."""
    session = await _open_session(ctx, program_id, user_id, week, day)

    if not session.day.exercises:
        echo_info(f"Week {week} day {day} is a rest day")
        return

    headers = ["Exercise", "Set", "Target", "Weight", "Reps"]
    rows = []
    for slot in session.day.log_slots():
        target = slot.target_reps
        if slot.target_weight is not None:
            target += f" @ {slot.target_weight:g} kg"
        exercise_log = session.data.get(slot.exercise_name)
        performance = exercise_log.get_set(slot.set_number) if exercise_log else None
        rows.append([
            slot.exercise_name,
            str(slot.set_number),
            target,
            performance.weight if performance else "",
            performance.reps if performance else "",
        ])

    click.echo()
    click.echo(f"Week {week} - Day {day}")
    click.echo()
    click.echo(format_table(headers, rows))

    noted = [(name, ex.notes) for name, ex in session.data.items() if ex.notes]
    if noted:
        click.echo()
        click.echo("Notes:")
        for name, text in noted:
            click.echo(f"  - {name}: {text}")
