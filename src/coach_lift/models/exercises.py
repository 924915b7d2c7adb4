"""Exercise definitions and the built-in catalog."""

from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import Iterable, Iterator


class ExerciseCategory(str, Enum):
    """Exercise categories, in generation priority order."""

    POWERLIFTING_MAIN = "powerlifting-main"
    SECONDARY_COMPOUND = "secondary-compound"
    HEAVY_ISOLATION = "heavy-isolation"
    LIGHT_ISOLATION = "light-isolation"


class MuscleGroup(str, Enum):
    """Coarse muscle groups used for split targeting and volume capping."""

    LEGS = "legs"
    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    ABS = "abs"
    CALVES = "calves"
    FOREARMS = "forearms"
    LOWER_BACK = "lower_back"


# Groups subject to the weekly volume cap
LARGE_MUSCLE_GROUPS: frozenset[MuscleGroup] = frozenset(
    {MuscleGroup.LEGS, MuscleGroup.CHEST, MuscleGroup.BACK, MuscleGroup.SHOULDERS}
)


class Equipment(str, Enum):
    """Equipment tags offered by the questionnaire."""

    BARBELL_DUMBBELLS = "barre-halteres"
    BODYWEIGHT_STATION = "poids-corps"  # pull-up bar, dip station
    MACHINES = "machines-guidees"


class MainLift(str, Enum):
    """The four lifts driving a 5/3/1 cycle, valued by catalog name."""

    SQUAT = "Squat barre"
    BENCH = "Développé couché"
    DEADLIFT = "Soulevé de terre"
    OVERHEAD_PRESS = "Développé militaire barre"


@dataclass(frozen=True)
class Exercise:
    """A catalog entry."""

    name: str
    category: ExerciseCategory
    muscle_group: MuscleGroup
    muscles: tuple[str, ...] = ()
    equipment: frozenset[Equipment] = field(default_factory=frozenset)

    @property
    def is_bodyweight(self) -> bool:
        """True when the exercise needs no equipment at all."""
        return not self.equipment

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "category": self.category.value,
            "muscle_group": self.muscle_group.value,
            "muscles": list(self.muscles),
            "equipment": sorted(eq.value for eq in self.equipment),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Exercise":
        """Create from dictionary."""
        return cls(
            name=data["name"],
            category=ExerciseCategory(data["category"]),
            muscle_group=MuscleGroup(data["muscle_group"]),
            muscles=tuple(data.get("muscles", [])),
            equipment=frozenset(Equipment(eq) for eq in data.get("equipment", [])),
        )


class ExerciseCatalog:
    """Immutable, ordered collection of exercises with unique names.

    Order matters: generators walk the catalog front to back when picking
    exercises, so the first entries of each category are preferred.
    """

    def __init__(self, exercises: Iterable[Exercise]):
        self._exercises: tuple[Exercise, ...] = tuple(exercises)
        self._by_name: dict[str, Exercise] = {}
        for exercise in self._exercises:
            if exercise.name in self._by_name:
                raise ValueError(f"Duplicate exercise in catalog: {exercise.name}")
            self._by_name[exercise.name] = exercise

    def __iter__(self) -> Iterator[Exercise]:
        return iter(self._exercises)

    def __len__(self) -> int:
        return len(self._exercises)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    @property
    def exercises(self) -> tuple[Exercise, ...]:
        return self._exercises

    def get(self, name: str) -> Exercise | None:
        """Look an exercise up by name."""
        return self._by_name.get(name)

    def by_category(self, category: ExerciseCategory) -> list[Exercise]:
        """All exercises of a category, in catalog order."""
        return [ex for ex in self._exercises if ex.category == category]

    def require_main_lifts(self) -> None:
        """Raise KeyError if any 5/3/1 main lift is missing."""
        missing = [lift.value for lift in MainLift if lift.value not in self._by_name]
        if missing:
            raise KeyError(f"Catalog is missing main lifts: {', '.join(missing)}")


def _ex(
    name: str,
    category: ExerciseCategory,
    group: MuscleGroup,
    muscles: list[str],
    equipment: list[Equipment],
) -> Exercise:
    return Exercise(
        name=name,
        category=category,
        muscle_group=group,
        muscles=tuple(muscles),
        equipment=frozenset(equipment),
    )


_PL = ExerciseCategory.POWERLIFTING_MAIN
_SC = ExerciseCategory.SECONDARY_COMPOUND
_HI = ExerciseCategory.HEAVY_ISOLATION
_LI = ExerciseCategory.LIGHT_ISOLATION

_BAR = Equipment.BARBELL_DUMBBELLS
_BW = Equipment.BODYWEIGHT_STATION
_MACH = Equipment.MACHINES

DEFAULT_EXERCISES: tuple[Exercise, ...] = (
    # Powerlifting main lifts
    _ex(MainLift.SQUAT.value, _PL, MuscleGroup.LEGS, ["quadriceps", "fessiers", "ischios"], [_BAR]),
    _ex(MainLift.BENCH.value, _PL, MuscleGroup.CHEST, ["pectoraux", "triceps", "épaules antérieures"], [_BAR]),
    _ex(MainLift.DEADLIFT.value, _PL, MuscleGroup.BACK, ["ischios", "fessiers", "lombaires", "dorsaux"], [_BAR]),
    _ex(MainLift.OVERHEAD_PRESS.value, _PL, MuscleGroup.SHOULDERS, ["épaules", "triceps"], [_BAR]),
    # Secondary compounds
    _ex("Développé incliné haltères", _SC, MuscleGroup.CHEST, ["pectoraux supérieurs", "triceps", "épaules"], [_BAR]),
    _ex("Rowing barre", _SC, MuscleGroup.BACK, ["dorsaux", "trapèzes", "biceps"], [_BAR]),
    _ex("Tractions", _SC, MuscleGroup.BACK, ["dorsaux", "biceps"], [_BW]),
    _ex("Dips", _SC, MuscleGroup.CHEST, ["pectoraux", "triceps", "épaules"], [_BW]),
    _ex("Presse à cuisses", _SC, MuscleGroup.LEGS, ["quadriceps", "fessiers"], [_MACH]),
    _ex("Fentes haltères", _SC, MuscleGroup.LEGS, ["quadriceps", "fessiers", "ischios"], [_BAR]),
    _ex("Tirage vertical machine", _SC, MuscleGroup.BACK, ["dorsaux", "biceps"], [_MACH]),
    _ex("Pompes", _SC, MuscleGroup.CHEST, ["pectoraux", "triceps", "épaules"], []),
    _ex("Tractions australiennes", _SC, MuscleGroup.BACK, ["dorsaux", "biceps", "trapèzes"], [_BW]),
    _ex("Split squat bulgare", _SC, MuscleGroup.LEGS, ["quadriceps", "fessiers", "ischios"], [_BAR]),
    # Heavy isolation
    _ex("Leg extension", _HI, MuscleGroup.LEGS, ["quadriceps"], [_MACH]),
    _ex("Leg curl", _HI, MuscleGroup.LEGS, ["ischios"], [_MACH]),
    _ex("Écartés poulie", _HI, MuscleGroup.CHEST, ["pectoraux"], [_MACH]),
    _ex("Curl biceps barre", _HI, MuscleGroup.BICEPS, ["biceps"], [_BAR]),
    _ex("Extension triceps poulie haute", _HI, MuscleGroup.TRICEPS, ["triceps"], [_MACH]),
    _ex("Curl incliné haltères", _HI, MuscleGroup.BICEPS, ["biceps (longue portion)"], [_BAR]),
    _ex("Preacher curl", _HI, MuscleGroup.BICEPS, ["biceps (courte portion)"], [_BAR, _MACH]),
    _ex("Reverse curls", _HI, MuscleGroup.FOREARMS, ["brachial", "avant-bras"], [_BAR]),
    # Light isolation
    _ex("Élévations latérales haltères", _LI, MuscleGroup.SHOULDERS, ["deltoïdes moyens"], [_BAR]),
    _ex("Crunchs", _LI, MuscleGroup.ABS, ["abdominaux (grand droit)"], []),
    _ex("Leg raises", _LI, MuscleGroup.ABS, ["abdominaux inférieurs", "fléchisseurs de hanches"], []),
    _ex("Calf raises", _LI, MuscleGroup.CALVES, ["mollets"], []),
    _ex("Face pulls", _LI, MuscleGroup.BACK, ["deltoïdes postérieurs", "trapèzes", "rotateurs externes"], [_MACH]),
    _ex("Pushdowns à la corde", _LI, MuscleGroup.TRICEPS, ["triceps"], [_MACH]),
    _ex("Élévations latérales à la poulie basse", _LI, MuscleGroup.SHOULDERS, ["deltoïdes moyens"], [_MACH]),
    _ex("Hyperextensions", _LI, MuscleGroup.LOWER_BACK, ["lombaires", "fessiers"], [_MACH]),
)


@lru_cache(maxsize=1)
def default_catalog() -> ExerciseCatalog:
    """The built-in catalog, constructed once per process."""
    return ExerciseCatalog(DEFAULT_EXERCISES)
