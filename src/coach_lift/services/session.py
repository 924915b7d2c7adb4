"""Editing session for logging one program day."""

from enum import Enum

import structlog

from ..db.models import StoredProgram
from ..models.program import GenericExercise, ProgramDay
from ..models.workout_log import DayWorkoutData, ExerciseLog, SetPerformance, select_day_view
from .workout_log import StoreResult, WorkoutLogService

logger = structlog.get_logger(__name__)

EDITABLE_FIELDS = ("weight", "reps")


class SessionState(str, Enum):
    """Lifecycle of an editing session."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    SAVING = "saving"
    ERROR = "error"


class WorkoutEditSession:
    """Holds the edit state of one (program, week, day) for one user.

    Idle -> Loading -> Ready -> Saving -> Ready, with Error reachable from
    Loading and Saving. Selecting another day starts over from Loading.
    Only one save may be in flight at a time.
    """

    def __init__(self, service: WorkoutLogService, user_id: str):
        self.service = service
        self.user_id = user_id
        self.state = SessionState.IDLE
        self.error: str | None = None
        self.stored: StoredProgram | None = None
        self.week: int | None = None
        self.day: ProgramDay | None = None
        self.data: DayWorkoutData = {}

    @property
    def program_id(self) -> str | None:
        return self.stored.id if self.stored else None

    async def select(self, stored: StoredProgram, week: int, day_number: int) -> StoreResult:
        """Switch to a program day and load what was logged for it."""
        self.state = SessionState.LOADING
        self.error = None
        self.stored = stored
        self.week = week
        self.day = None
        self.data = {}

        day = stored.program.get_day(week, day_number)
        if day is None:
            return self._fail(f"Jour {day_number} de la semaine {week} introuvable")

        result = await self.service.load(stored.id, self.user_id, week, day_number)
        if not result.ok:
            return self._fail(result.error)

        self.day = day
        self.data = select_day_view(result.data, day)
        self.state = SessionState.READY
        return StoreResult(data=self.data)

    def set_value(self, exercise_name: str, set_number: int, field: str, value: str) -> None:
        """Record a weight or reps input.

        Typing the weight of set 1 of a generic exercise copies it onto the
        exercise's remaining sets.
        """
        self._require_day()
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"Unknown field: {field}")

        setattr(self._get_set(exercise_name, set_number), field, value)

        if field == "weight" and set_number == 1:
            entry = self._generic_entry(exercise_name)
            if entry is not None:
                for following in range(2, entry.set_count + 1):
                    self._get_set(exercise_name, following).weight = value

    def set_notes(self, exercise_name: str, text: str) -> None:
        self._require_day()
        self.data.setdefault(exercise_name, ExerciseLog()).notes = text

    async def save(self) -> StoreResult:
        """Persist the current edit state."""
        if self.state == SessionState.SAVING:
            return StoreResult(error="Une sauvegarde est déjà en cours")
        if self.day is None:
            return StoreResult(error="Aucun jour sélectionné")

        self.state = SessionState.SAVING
        self.error = None
        result = await self.service.save(
            self.stored.id, self.user_id, self.week, self.day.day_number, self.data
        )
        if not result.ok:
            return self._fail(result.error)

        self.state = SessionState.READY
        return result

    def _fail(self, message: str) -> StoreResult:
        self.state = SessionState.ERROR
        self.error = message
        logger.warning(
            "workout_session_error",
            program_id=self.program_id,
            week=self.week,
            error=message,
        )
        return StoreResult(error=message)

    def _require_day(self) -> None:
        if self.day is None or self.state in (SessionState.IDLE, SessionState.LOADING):
            raise RuntimeError("No program day is loaded")

    def _generic_entry(self, exercise_name: str) -> GenericExercise | None:
        for entry in self.day.exercises:
            if isinstance(entry, GenericExercise) and entry.name == exercise_name:
                return entry
        return None

    def _get_set(self, exercise_name: str, set_number: int) -> SetPerformance:
        exercise_log = self.data.setdefault(exercise_name, ExerciseLog())
        performance = exercise_log.get_set(set_number)
        if performance is None:
            performance = SetPerformance(set=set_number)
            exercise_log.sets.append(performance)
            exercise_log.sets.sort(key=lambda s: s.set)
        return performance
