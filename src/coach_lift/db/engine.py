"""Database engine setup and initialization."""

import os
from pathlib import Path

import aiosqlite
import structlog

logger = structlog.get_logger(__name__)

# Default data directory
DATA_DIR = Path(__file__).parent.parent.parent.parent / "data"
DATA_DIR_ENV = "COACH_LIFT_DATA_DIR"
DB_FILENAME = "coach_lift.db"


def get_data_dir() -> Path:
    """Data directory, overridable through COACH_LIFT_DATA_DIR."""
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else DATA_DIR


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = get_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / DB_FILENAME


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        # Generated programs, stored verbatim as JSON
        await db.execute("""
            CREATE TABLE IF NOT EXISTS training_programs (
                id TEXT PRIMARY KEY,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                user_id TEXT NOT NULL,
                program TEXT NOT NULL,
                duration_weeks INTEGER,
                days_per_week INTEGER,
                program_name TEXT
            )
        """)

        # One row per performed set; reps is untyped to keep "8-12" as text
        await db.execute("""
            CREATE TABLE IF NOT EXISTS workout_logs (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                user_id TEXT NOT NULL,
                program_id TEXT NOT NULL,
                week INTEGER NOT NULL,
                day INTEGER NOT NULL,
                exercise_name TEXT NOT NULL,
                set_number INTEGER NOT NULL,
                weight REAL,
                reps,
                notes TEXT
            )
        """)

        # One note per exercise per logged day
        await db.execute("""
            CREATE TABLE IF NOT EXISTS workout_notes (
                user_id TEXT NOT NULL,
                program_id TEXT NOT NULL,
                week INTEGER NOT NULL,
                day INTEGER NOT NULL,
                exercise_name TEXT NOT NULL,
                notes TEXT NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                PRIMARY KEY (user_id, program_id, week, day, exercise_name)
            )
        """)

        await db.execute("""
            CREATE UNIQUE INDEX IF NOT EXISTS idx_workout_logs_set
            ON workout_logs(user_id, program_id, week, day, exercise_name, set_number)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workout_logs_program
            ON workout_logs(user_id, program_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_training_programs_user
            ON training_programs(user_id)
        """)

        await db.commit()

    logger.info("database_initialized", path=str(db_path))
