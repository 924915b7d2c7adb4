"""Configuration for program generation."""

import math
from dataclasses import dataclass, field

from ..models.exercises import ExerciseCategory

PROGRAM_WEEKS = 4


@dataclass(frozen=True)
class GeneratorConfig:
    """Constants shared by the program generators."""

    sets_per_exercise: int = 3
    weekly_volume_cap: int = 15  # sets per large muscle group
    max_exercises_per_day: int = 8
    category_caps: dict[ExerciseCategory, int] = field(
        default_factory=lambda: {
            ExerciseCategory.POWERLIFTING_MAIN: 2,
            ExerciseCategory.SECONDARY_COMPOUND: 3,
            ExerciseCategory.HEAVY_ISOLATION: 2,
            ExerciseCategory.LIGHT_ISOLATION: 2,
        }
    )
    hypertrophy_reps: str = "8-12"
    fat_loss_reps: str = "12-15"
    # 5/3/1
    training_max_ratio: float = 0.9
    weight_increment: float = 2.5  # kg, smallest plate pair
    accessory_caps: dict[ExerciseCategory, int] = field(
        default_factory=lambda: {
            ExerciseCategory.SECONDARY_COMPOUND: 1,
            ExerciseCategory.HEAVY_ISOLATION: 1,
            ExerciseCategory.LIGHT_ISOLATION: 2,
        }
    )
    max_accessories_per_day: int = 4
    accessory_sets: str = "3"
    accessory_reps: str = "8-12"
    accessory_notes: str = "Accessoire"


def round_to_increment(weight: float, increment: float = 2.5) -> float:
    """Round a weight to the nearest increment, halves rounding up."""
    return math.floor(weight / increment + 0.5) * increment
