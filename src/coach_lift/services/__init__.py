"""Services for coach-lift."""

from .session import SessionState, WorkoutEditSession
from .workout_log import StoreResult, WorkoutLogService

__all__ = [
    "SessionState",
    "StoreResult",
    "WorkoutEditSession",
    "WorkoutLogService",
]
