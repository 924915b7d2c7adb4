"""Catalog selection by equipment, muscle group and category."""

from typing import Iterable

from ..models.exercises import Equipment, Exercise, ExerciseCategory, MuscleGroup


def filter_by_equipment(
    exercises: Iterable[Exercise],
    available_equipment: Iterable[Equipment] | None,
) -> list[Exercise]:
    """Filter exercises to those the user can perform.

    Args:
        exercises: Exercises to filter, order is preserved
        available_equipment: Equipment the user has; empty or None means
            bodyweight only

    Returns:
        Exercises needing no equipment, plus those sharing at least one
        tag with the available equipment
    """
    available = frozenset(available_equipment or ())
    if not available:
        return [ex for ex in exercises if not ex.equipment]
    return [ex for ex in exercises if not ex.equipment or ex.equipment & available]


def filter_by_muscle_groups(
    exercises: Iterable[Exercise],
    target_groups: Iterable[MuscleGroup] | None,
) -> list[Exercise]:
    """Filter exercises to the targeted muscle groups (all if none given)."""
    targets = frozenset(target_groups or ())
    if not targets:
        return list(exercises)
    return [ex for ex in exercises if ex.muscle_group in targets]


def filter_by_category(
    exercises: Iterable[Exercise],
    category: ExerciseCategory,
) -> list[Exercise]:
    """Filter exercises to a single category."""
    return [ex for ex in exercises if ex.category == category]
