"""Database layer for coach-lift."""

from .engine import get_db_path, init_db
from .models import StoredProgram
from .repositories import ProgramRepository, WorkoutLogRepository

__all__ = [
    "get_db_path",
    "init_db",
    "ProgramRepository",
    "StoredProgram",
    "WorkoutLogRepository",
]
