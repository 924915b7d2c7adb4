"""Workout log reconciliation between stored rows and the edit state."""

from dataclasses import dataclass
from typing import Any

import aiosqlite
import structlog

from ..db.repositories import WorkoutLogRepository
from ..models.workout_log import DayWorkoutData, flatten_day, group_rows

logger = structlog.get_logger(__name__)

STORAGE_ERRORS = (aiosqlite.Error, OSError)


@dataclass
class StoreResult:
    """Outcome of a store call: `data` on success, `error` otherwise."""

    data: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class WorkoutLogService:
    """Saves and loads a day's performed sets."""

    def __init__(self, repository: WorkoutLogRepository):
        self.repository = repository

    async def save(
        self,
        program_id: str,
        user_id: str,
        week: int,
        day: int,
        state: DayWorkoutData,
    ) -> StoreResult:
        """Replace the stored logs of one day with the given edit state.

        An edit state without any filled set is a no-op: nothing is deleted
        and an empty result is returned.

        Returns:
            StoreResult with the stored rows, or the storage error message
        """
        rows = flatten_day(state, user_id, program_id, week, day)
        if not rows:
            logger.info(
                "workout_log_save_skipped",
                program_id=program_id,
                user_id=user_id,
                week=week,
                day=day,
            )
            return StoreResult(data=[])

        notes = {name: log.notes.strip() for name, log in state.items() if log.notes.strip()}
        try:
            stored = await self.repository.replace_day(
                user_id, program_id, week, day, rows, notes
            )
        except STORAGE_ERRORS as e:
            logger.error(
                "workout_log_save_failed",
                program_id=program_id,
                week=week,
                day=day,
                error=str(e),
            )
            return StoreResult(error=f"Erreur lors de la sauvegarde: {e}")

        logger.info(
            "workout_log_saved",
            program_id=program_id,
            user_id=user_id,
            week=week,
            day=day,
            rows=len(stored),
        )
        return StoreResult(data=stored)

    async def load(
        self,
        program_id: str,
        user_id: str,
        week: int | None = None,
        day: int | None = None,
    ) -> StoreResult:
        """Load logged sets grouped per exercise.

        Without a week/day scope every row of the program is grouped
        together and an exercise's note is the note of its last row. With
        a full scope the note stored for that day wins.

        Returns:
            StoreResult whose data is a DayWorkoutData
        """
        try:
            rows = await self.repository.list_for_program(user_id, program_id, week, day)
            notes = {}
            if week is not None and day is not None:
                notes = await self.repository.get_notes(user_id, program_id, week, day)
        except STORAGE_ERRORS as e:
            logger.error("workout_log_load_failed", program_id=program_id, error=str(e))
            return StoreResult(error=f"Erreur lors du chargement: {e}")

        state = group_rows(rows)
        for exercise_name, text in notes.items():
            if exercise_name in state:
                state[exercise_name].notes = text

        logger.debug(
            "workout_log_loaded",
            program_id=program_id,
            week=week,
            day=day,
            exercises=len(state),
        )
        return StoreResult(data=state)

    async def delete_program_logs(self, program_id: str, user_id: str) -> StoreResult:
        """Delete every log of a program; data is the number of rows removed."""
        try:
            deleted = await self.repository.delete_for_program(user_id, program_id)
        except STORAGE_ERRORS as e:
            logger.error("workout_log_delete_failed", program_id=program_id, error=str(e))
            return StoreResult(error=f"Erreur lors de la suppression: {e}")
        return StoreResult(data=deleted)
