"""Workout log models and the row/edit-state reconciliation functions.

The persisted shape is one `WorkoutLogRow` per performed set. The editing
shape (`DayWorkoutData`) groups sets by exercise name and carries one note
per exercise; `flatten_day` and `group_rows` convert between the two.
"""

from dataclasses import dataclass, field
from datetime import datetime

from .program import ProgramDay


@dataclass
class SetPerformance:
    """Raw input for one set, as typed by the user."""

    set: int
    weight: str = ""
    reps: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.weight.strip() and not self.reps.strip()

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"set": self.set, "weight": self.weight, "reps": self.reps}

    @classmethod
    def from_dict(cls, data: dict) -> "SetPerformance":
        """Create from dictionary."""
        return cls(
            set=int(data["set"]),
            weight=_as_input(data.get("weight")),
            reps=_as_input(data.get("reps")),
        )


@dataclass
class ExerciseLog:
    """Sets and the free-text note logged for one exercise."""

    sets: list[SetPerformance] = field(default_factory=list)
    notes: str = ""

    def get_set(self, set_number: int) -> SetPerformance | None:
        for performance in self.sets:
            if performance.set == set_number:
                return performance
        return None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"sets": [s.to_dict() for s in self.sets], "notes": self.notes}

    @classmethod
    def from_dict(cls, data: dict) -> "ExerciseLog":
        """Create from dictionary."""
        return cls(
            sets=[SetPerformance.from_dict(s) for s in data.get("sets", [])],
            notes=data.get("notes") or "",
        )


# Exercise name -> logged sets and note
DayWorkoutData = dict[str, ExerciseLog]


def state_to_dict(state: DayWorkoutData) -> dict:
    return {name: log.to_dict() for name, log in state.items()}


def state_from_dict(data: dict) -> DayWorkoutData:
    return {name: ExerciseLog.from_dict(log) for name, log in data.items()}


@dataclass
class WorkoutLogRow:
    """Persisted performance of one set."""

    user_id: str
    program_id: str
    week: int
    day: int
    exercise_name: str
    set_number: int
    weight: float | None = None
    reps: int | float | str | None = None
    notes: str | None = None
    id: int | None = None
    created_at: datetime | None = None

    @property
    def key(self) -> tuple[str, str, int, int, str, int]:
        """Unique identity of the row."""
        return (
            self.user_id,
            self.program_id,
            self.week,
            self.day,
            self.exercise_name,
            self.set_number,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "user_id": self.user_id,
            "program_id": self.program_id,
            "week": self.week,
            "day": self.day,
            "exercise_name": self.exercise_name,
            "set_number": self.set_number,
            "weight": self.weight,
            "reps": self.reps,
            "notes": self.notes,
        }


def _as_input(value) -> str:
    """Render a stored value back into an input string."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def parse_weight(value: str | None) -> float | None:
    """Parse a weight input; blanks and non-numbers become None."""
    if value is None:
        return None
    text = str(value).strip().replace(",", ".")
    if not text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def parse_reps(value: str | None) -> int | float | str | None:
    """Parse a reps input.

    Fully numeric input becomes a number; anything else ("8-12", "5+")
    is kept as the stripped string; blanks become None.
    """
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return text
    return int(number) if number.is_integer() else number


def flatten_day(
    state: DayWorkoutData,
    user_id: str,
    program_id: str,
    week: int,
    day: int,
) -> list[WorkoutLogRow]:
    """Flatten an edit state into rows, one per non-empty set.

    Sets without a usable weight or reps are dropped. The exercise note is
    copied onto every row of that exercise.
    """
    rows: list[WorkoutLogRow] = []
    for exercise_name, exercise_log in state.items():
        notes = exercise_log.notes.strip() or None
        for performance in exercise_log.sets:
            if performance.is_empty:
                continue
            weight = parse_weight(performance.weight)
            reps = parse_reps(performance.reps)
            if weight is None and reps is None:
                continue
            rows.append(
                WorkoutLogRow(
                    user_id=user_id,
                    program_id=program_id,
                    week=week,
                    day=day,
                    exercise_name=exercise_name,
                    set_number=performance.set,
                    weight=weight,
                    reps=reps,
                    notes=notes,
                )
            )
    return rows


def group_rows(rows: list[WorkoutLogRow]) -> DayWorkoutData:
    """Group rows into the per-exercise edit state.

    Rows are taken in the given order (exercise name, then set number).
    The exercise note is the note of the last row seen for that exercise.
    """
    state: DayWorkoutData = {}
    for row in rows:
        exercise_log = state.setdefault(row.exercise_name, ExerciseLog())
        exercise_log.sets.append(
            SetPerformance(
                set=row.set_number,
                weight=_as_input(row.weight),
                reps=_as_input(row.reps),
            )
        )
        exercise_log.notes = row.notes or ""
    return state


def select_day_view(state: DayWorkoutData, day: ProgramDay) -> DayWorkoutData:
    """Keep only the sets that belong to the given program day.

    Loaded state spans every week and day of a program; the day's log slots
    decide which exercise names and set numbers are shown.
    """
    wanted: dict[str, set[int]] = {}
    for slot in day.log_slots():
        wanted.setdefault(slot.exercise_name, set()).add(slot.set_number)

    view: DayWorkoutData = {}
    for exercise_name, set_numbers in wanted.items():
        exercise_log = state.get(exercise_name)
        if exercise_log is None:
            continue
        sets = [s for s in exercise_log.sets if s.set in set_numbers]
        view[exercise_name] = ExerciseLog(sets=sets, notes=exercise_log.notes)
    return view
