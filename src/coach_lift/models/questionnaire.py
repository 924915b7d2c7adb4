"""Questionnaire answers used as program generator input."""

from dataclasses import dataclass, field
from enum import Enum

from .exercises import Equipment

MIN_TRAINING_DAYS = 1
MAX_TRAINING_DAYS = 7
MIN_DURATION = 15  # minutes
MAX_DURATION = 180


class Objective(str, Enum):
    """Training objective."""

    MASS_GAIN = "Prise de Masse"
    FAT_LOSS = "Sèche / Perte de Gras"
    POWERLIFTING = "Powerlifting"
    POWERBUILDING = "Powerbuilding"

    @property
    def is_percentage_based(self) -> bool:
        """True for objectives generated as a 5/3/1 cycle."""
        return self in (Objective.POWERLIFTING, Objective.POWERBUILDING)


class ExperienceLevel(str, Enum):
    """Training experience level."""

    BEGINNER = "Débutant (< 1 an)"
    INTERMEDIATE = "Intermédiaire (1-3 ans)"
    ADVANCED = "Avancé (3+ ans)"


class SplitType(str, Enum):
    """Preferred split."""

    FULL_BODY = "Full Body (Tout le corps)"
    HALF_BODY = "Half Body (Haut / Bas)"
    PUSH_PULL_LEGS = "Push Pull Legs"
    NO_PREFERENCE = "Autre / Pas de préférence"


def _parse_enum(enum_cls, value):
    """Accept an enum member, its value (label) or its name (any case)."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        for member in enum_cls:
            if value == member.value or value.upper() == member.name:
                return member
    raise ValueError(f"Invalid {enum_cls.__name__}: {value!r}")


def _parse_int(name: str, value, low: int, high: int) -> int:
    try:
        number = int(float(value))
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"{name} must be a number, got {value!r}") from None
    if number < low or number > high:
        raise ValueError(f"{name} must be between {low} and {high}, got {number}")
    return number


def _parse_equipment(value) -> list[Equipment]:
    if not value:
        return []
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"equipment must be a list, got {value!r}")
    return [_parse_enum(Equipment, eq) for eq in value]


def _parse_optional_float(value) -> float | None:
    """Coerce an optional numeric answer; blanks become None."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"One-rep max must be a number, got {value!r}") from None


@dataclass
class ProgramFormData:
    """Answers to the program questionnaire.

    One-rep maxes are optional here; the 5/3/1 generator checks them and
    reports problems through its sentinel program instead of raising.
    """

    objective: Objective
    experience: ExperienceLevel
    split: SplitType
    training_days: int
    max_duration: int = 60
    equipment: list[Equipment] = field(default_factory=list)
    squat_1rm: float | None = None
    bench_1rm: float | None = None
    deadlift_1rm: float | None = None
    ohp_1rm: float | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "objective": self.objective.value,
            "experience": self.experience.value,
            "split": self.split.value,
            "training_days": self.training_days,
            "max_duration": self.max_duration,
            "equipment": [eq.value for eq in self.equipment],
            "squat_1rm": self.squat_1rm,
            "bench_1rm": self.bench_1rm,
            "deadlift_1rm": self.deadlift_1rm,
            "ohp_1rm": self.ohp_1rm,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ProgramFormData":
        """Create from a questionnaire payload.

        Raises:
            ValueError: on unknown labels or out-of-range numbers
        """
        missing = [k for k in ("objective", "experience", "split", "training_days") if k not in data]
        if missing:
            raise ValueError(f"Missing questionnaire fields: {', '.join(missing)}")

        return cls(
            objective=_parse_enum(Objective, data["objective"]),
            experience=_parse_enum(ExperienceLevel, data["experience"]),
            split=_parse_enum(SplitType, data["split"]),
            training_days=_parse_int(
                "training_days", data["training_days"], MIN_TRAINING_DAYS, MAX_TRAINING_DAYS
            ),
            max_duration=_parse_int(
                "max_duration", data.get("max_duration", 60), MIN_DURATION, MAX_DURATION
            ),
            equipment=_parse_equipment(data.get("equipment")),
            squat_1rm=_parse_optional_float(data.get("squat_1rm")),
            bench_1rm=_parse_optional_float(data.get("bench_1rm")),
            deadlift_1rm=_parse_optional_float(data.get("deadlift_1rm")),
            ohp_1rm=_parse_optional_float(data.get("ohp_1rm")),
        )

    @property
    def one_rep_maxes(self) -> dict[str, float | None]:
        """One-rep maxes keyed by lift, in squat/bench/deadlift/OHP order."""
        return {
            "squat": self.squat_1rm,
            "bench": self.bench_1rm,
            "deadlift": self.deadlift_1rm,
            "ohp": self.ohp_1rm,
        }

    def get_summary(self) -> str:
        """One-paragraph summary of the answers."""
        summary = f"Objective: {self.objective.value}\n"
        summary += f"Experience: {self.experience.value}\n"
        summary += f"Split: {self.split.value}\n"
        summary += f"Training days: {self.training_days}/week, {self.max_duration} min/session\n"
        equipment = ", ".join(eq.value for eq in self.equipment) or "none"
        summary += f"Equipment: {equipment}\n"
        if self.objective.is_percentage_based:
            maxes = ", ".join(
                f"{lift}={value if value is not None else '-'}"
                for lift, value in self.one_rep_maxes.items()
            )
            summary += f"1RM: {maxes}\n"
        return summary
