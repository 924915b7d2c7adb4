"""Training program data models."""

from dataclasses import dataclass, field
from typing import Union

GENERIC_EXERCISE = "generic-exercise"
MAIN_LIFT_SET = "main-lift-set"


@dataclass(frozen=True)
class SetDetail:
    """Prescription for one working set of a percentage-based lift."""

    set_number: int
    percentage: float  # fraction of training max, e.g. 0.65
    calculated_weight: float  # kg, rounded to the plate increment
    reps: str  # "5", "3" or "1+" etc.
    is_amrap: bool = False

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "set_number": self.set_number,
            "percentage": self.percentage,
            "calculated_weight": self.calculated_weight,
            "reps": self.reps,
            "is_amrap": self.is_amrap,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SetDetail":
        """Create from dictionary."""
        return cls(
            set_number=int(data["set_number"]),
            percentage=float(data["percentage"]),
            calculated_weight=float(data["calculated_weight"]),
            reps=str(data["reps"]),
            is_amrap=bool(data.get("is_amrap", False)),
        )


@dataclass(frozen=True)
class GenericExercise:
    """An exercise performed for `sets` identical sets."""

    name: str
    sets: str  # count, e.g. "3"
    reps: str  # "8-12", "12-15", ...
    notes: str = ""
    muscles: tuple[str, ...] = ()
    category: str | None = None

    kind = GENERIC_EXERCISE

    @property
    def set_count(self) -> int:
        try:
            return int(self.sets)
        except ValueError:
            return 0

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "kind": self.kind,
            "name": self.name,
            "sets": self.sets,
            "reps": self.reps,
            "notes": self.notes,
            "muscles": list(self.muscles),
            "category": self.category,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GenericExercise":
        """Create from dictionary."""
        return cls(
            name=data["name"],
            sets=str(data.get("sets", "")),
            reps=str(data.get("reps", "")),
            notes=data.get("notes") or "",
            muscles=tuple(data.get("muscles") or []),
            category=data.get("category"),
        )


@dataclass(frozen=True)
class MainLiftSet:
    """A single working set of a main lift in a 5/3/1 week.

    Each set of a main lift is its own day entry; the week's whole scheme
    is kept alongside (`total_sets`, `scheme_reps`) for display.
    """

    name: str
    detail: SetDetail
    total_sets: int
    scheme_reps: str  # e.g. "5/5/5+"
    training_max: float
    notes: str = ""
    muscles: tuple[str, ...] = ()

    kind = MAIN_LIFT_SET

    @property
    def set_number(self) -> int:
        return self.detail.set_number

    @property
    def sets(self) -> str:
        """Set index, as the display string used for generic entries."""
        return str(self.detail.set_number)

    @property
    def reps(self) -> str:
        return self.detail.reps

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "kind": self.kind,
            "name": self.name,
            "sets": self.sets,
            "reps": self.reps,
            "total_sets": self.total_sets,
            "scheme_reps": self.scheme_reps,
            "training_max": self.training_max,
            "notes": self.notes,
            "muscles": list(self.muscles),
            "sets_details": [self.detail.to_dict()],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "MainLiftSet":
        """Create from dictionary."""
        details = data.get("sets_details") or []
        if not details:
            raise ValueError(f"Main lift entry {data.get('name')!r} has no set details")
        return cls(
            name=data["name"],
            detail=SetDetail.from_dict(details[0]),
            total_sets=int(data.get("total_sets", len(details))),
            scheme_reps=str(data.get("scheme_reps", data.get("reps", ""))),
            training_max=float(data.get("training_max", 0.0)),
            notes=data.get("notes") or "",
            muscles=tuple(data.get("muscles") or []),
        )


DayEntry = Union[GenericExercise, MainLiftSet]


def entry_from_dict(data: dict) -> DayEntry:
    """Rebuild a day entry, dispatching on its `kind`."""
    kind = data.get("kind")
    if kind is None:
        # Payloads without a discriminant: set details mark a main lift
        kind = MAIN_LIFT_SET if data.get("sets_details") else GENERIC_EXERCISE
    if kind == MAIN_LIFT_SET:
        return MainLiftSet.from_dict(data)
    if kind == GENERIC_EXERCISE:
        return GenericExercise.from_dict(data)
    raise ValueError(f"Unknown exercise entry kind: {kind!r}")


@dataclass(frozen=True)
class LogSlot:
    """One row the user fills in when logging a day."""

    exercise_name: str
    set_number: int
    target_reps: str
    target_weight: float | None = None
    notes: str = ""


@dataclass
class ProgramDay:
    """A single training day."""

    day_number: int
    exercises: list[DayEntry] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "day_number": self.day_number,
            "exercises": [ex.to_dict() for ex in self.exercises],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ProgramDay":
        """Create from dictionary."""
        return cls(
            day_number=int(data["day_number"]),
            exercises=[entry_from_dict(ex) for ex in data.get("exercises", [])],
        )

    @property
    def exercise_names(self) -> list[str]:
        """Distinct exercise names, in order of first appearance."""
        return list(dict.fromkeys(ex.name for ex in self.exercises))

    def log_slots(self) -> list[LogSlot]:
        """Expand the day into loggable rows.

        A generic exercise becomes `sets` rows numbered from 1; a main-lift
        set is a single row carrying its own set number and target weight.
        """
        slots: list[LogSlot] = []
        for entry in self.exercises:
            if isinstance(entry, MainLiftSet):
                slots.append(
                    LogSlot(
                        exercise_name=entry.name,
                        set_number=entry.set_number,
                        target_reps=entry.reps,
                        target_weight=entry.detail.calculated_weight,
                        notes=entry.notes,
                    )
                )
            else:
                for set_number in range(1, entry.set_count + 1):
                    slots.append(
                        LogSlot(
                            exercise_name=entry.name,
                            set_number=set_number,
                            target_reps=entry.reps,
                            notes=entry.notes,
                        )
                    )
        return slots


@dataclass
class ProgramWeek:
    """A week of the program."""

    week_number: int
    days: list[ProgramDay] = field(default_factory=list)
    deload: bool = False

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "week_number": self.week_number,
            "days": [day.to_dict() for day in self.days],
            "deload": self.deload,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ProgramWeek":
        """Create from dictionary."""
        return cls(
            week_number=int(data["week_number"]),
            days=[ProgramDay.from_dict(day) for day in data.get("days", [])],
            deload=data.get("deload", False),
        )


@dataclass
class Program:
    """A generated training program.

    A program with no weeks is the generator's error sentinel: its title
    and description explain what went wrong.
    """

    title: str
    description: str
    weeks: list[ProgramWeek] = field(default_factory=list)
    is_531: bool = False
    objective: str | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "title": self.title,
            "description": self.description,
            "is_531": self.is_531,
            "objective": self.objective,
            "weeks": [week.to_dict() for week in self.weeks],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Program":
        """Create from dictionary."""
        return cls(
            title=data["title"],
            description=data.get("description", ""),
            weeks=[ProgramWeek.from_dict(week) for week in data.get("weeks", [])],
            is_531=data.get("is_531", False),
            objective=data.get("objective"),
        )

    @property
    def is_error(self) -> bool:
        """True for the generator's error sentinel."""
        return not self.weeks

    @property
    def days_per_week(self) -> int:
        """Get the number of training days per week."""
        if not self.weeks:
            return 0
        return len(self.weeks[0].days)

    @property
    def total_weeks(self) -> int:
        """Get total number of weeks."""
        return len(self.weeks)

    def get_day(self, week_number: int, day_number: int) -> ProgramDay | None:
        """Find a day by its 1-indexed week and day numbers."""
        for week in self.weeks:
            if week.week_number != week_number:
                continue
            for day in week.days:
                if day.day_number == day_number:
                    return day
        return None

    def get_summary(self) -> str:
        """Generate a text summary of the program."""
        summary = f"Program: {self.title}\n"
        summary += f"Description: {self.description}\n"
        if self.is_error:
            return summary
        summary += f"Duration: {self.total_weeks} weeks, {self.days_per_week} days/week\n\n"

        for week in self.weeks:
            week_label = f"Week {week.week_number}"
            if week.deload:
                week_label += " (Deload)"
            summary += f"{week_label}:\n"

            for day in week.days:
                summary += f"  Day {day.day_number}:\n"
                if not day.exercises:
                    summary += "    (rest / no exercise available)\n"
                for ex in day.exercises:
                    summary += f"    - {self._format_entry(ex)}\n"

            summary += "\n"

        return summary

    @staticmethod
    def _format_entry(entry: DayEntry) -> str:
        if isinstance(entry, MainLiftSet):
            detail = entry.detail
            amrap = " (AMRAP)" if detail.is_amrap else ""
            return (
                f"{entry.name} set {detail.set_number}/{entry.total_sets}: "
                f"{detail.reps} @ {detail.calculated_weight:g} kg "
                f"({detail.percentage:.0%}){amrap}"
            )
        line = f"{entry.name}: {entry.sets}x{entry.reps}"
        if entry.notes:
            line += f" [{entry.notes}]"
        return line
