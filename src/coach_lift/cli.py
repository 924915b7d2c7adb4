"""CLI entry point for coach-lift."""

import click

from . import __version__
from .commands import generate, init, log, programs, serve
from .logging_config import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="coach-lift")
@click.option("--log-level", default=None, help="Log level (default: COACH_LIFT_LOG_LEVEL or INFO)")
def main(log_level: str | None):
    """coach-lift: training program generator and workout log.

    Generate a multi-week program from questionnaire answers, either a
    split program for mass gain or fat loss, or a 5/3/1 cycle computed
    from your one-rep maxes, then log your sets day by day.

    Example usage:

        # Initialize the database
        coach-lift init

        # Generate and store a program
        coach-lift generate --interactive --save

        # View programs and log a workout
        coach-lift programs list
        coach-lift log show <program_id> --week 1 --day 1
    """
    configure_logging(log_level)


# Register commands
main.add_command(init)
main.add_command(generate)
main.add_command(programs)
main.add_command(log)
main.add_command(serve)


def run():
    """Run the CLI (handles async event loop)."""
    main()


if __name__ == "__main__":
    run()
