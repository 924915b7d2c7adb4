"""Generate program command."""

import json

import click
import structlog

from ..clients import QuestionnaireClient
from ..db import ProgramRepository, get_db_path
from ..generators import generate_program
from ..models.exercises import Equipment
from ..models.questionnaire import ExperienceLevel, Objective, ProgramFormData, SplitType
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    user_option,
)

logger = structlog.get_logger(__name__)


def _choices(enum_cls) -> click.Choice:
    return click.Choice([m.name.lower() for m in enum_cls], case_sensitive=False)


@click.command()
@click.option("--interactive", "-i", is_flag=True, help="Answer the questionnaire interactively")
@click.option("--objective", "-o", type=_choices(Objective), default="mass_gain", show_default=True)
@click.option(
    "--experience", "-x", type=_choices(ExperienceLevel), default="beginner", show_default=True
)
@click.option("--split", "-s", type=_choices(SplitType), default="full_body", show_default=True)
@click.option("--days", "-d", "training_days", type=int, default=3, show_default=True,
              help="Training days per week (1-7)")
@click.option("--duration", "max_duration", type=int, default=60, show_default=True,
              help="Max session duration in minutes (15-180)")
@click.option("--equipment", "-e", type=_choices(Equipment), multiple=True,
              help="Available equipment (repeatable; none = bodyweight)")
@click.option("--squat", "squat_1rm", type=float, help="Squat 1RM in kg")
@click.option("--bench", "bench_1rm", type=float, help="Bench press 1RM in kg")
@click.option("--deadlift", "deadlift_1rm", type=float, help="Deadlift 1RM in kg")
@click.option("--ohp", "ohp_1rm", type=float, help="Overhead press 1RM in kg")
@click.option("--save", is_flag=True, help="Store the program for --user")
@click.option("--json", "as_json", is_flag=True, help="Print the program as JSON")
@user_option
@click.pass_context
@async_command
async def generate(
    ctx,
    interactive: bool,
    save: bool,
    as_json: bool,
    user_id: str,
    **answers,
):
    """Generate a training program from questionnaire answers.

    Powerlifting and powerbuilding objectives produce a 4-week 5/3/1 cycle
    and need all four one-rep maxes; other objectives produce a split
    program built from the exercise catalog.

    Examples:

        # Answer the questionnaire
        coach-lift generate --interactive --save

        # Fat loss, push/pull/legs, bodyweight only
        coach-lift generate -o fat_loss -s push_pull_legs -d 3

        # 5/3/1 with one-rep maxes
        coach-lift generate -o powerlifting -d 4 -e barbell_dumbbells \\
            --squat 150 --bench 100 --deadlift 180 --ohp 60
    """
    if save:
        ensure_initialized(ctx)

    if interactive:
        try:
            form = await QuestionnaireClient().collect_form()
        except KeyboardInterrupt:
            echo_info("Cancelled")
            return
        except ValueError as e:
            echo_error(str(e))
            ctx.exit(1)
    else:
        try:
            form = ProgramFormData.from_dict(answers)
        except ValueError as e:
            echo_error(str(e))
            ctx.exit(1)

    program = generate_program(form)
    if program.is_error:
        echo_error(f"{program.title}: {program.description}")
        ctx.exit(1)

    if as_json:
        click.echo(json.dumps(program.to_dict(), ensure_ascii=False, indent=2))
    else:
        click.echo()
        click.echo("=" * 60)
        click.echo(program.get_summary())
        click.echo("=" * 60)

    if not save:
        return

    repo = ProgramRepository(get_db_path())
    program_id = await repo.create(user_id, program)
    logger.info("program_saved", program_id=program_id, user_id=user_id)

    click.echo()
    echo_success(f"Program saved (ID: {program_id})")
    click.echo()
    click.echo("Next steps:")
    click.echo(f"  - View program: coach-lift programs show {program_id} --user {user_id}")
    click.echo(f"  - Log a day:    coach-lift log show {program_id} -w 1 -d 1 --user {user_id}")
