"""Generic hypertrophy / fat-loss program generator."""

from dataclasses import dataclass, field
from functools import reduce
from typing import Mapping

import structlog

from ..models.exercises import (
    LARGE_MUSCLE_GROUPS,
    Exercise,
    ExerciseCatalog,
    ExerciseCategory,
    MuscleGroup,
)
from ..models.program import GenericExercise, Program, ProgramDay, ProgramWeek
from ..models.questionnaire import Objective, ProgramFormData, SplitType
from .config import PROGRAM_WEEKS, GeneratorConfig
from .filters import filter_by_category, filter_by_equipment, filter_by_muscle_groups

logger = structlog.get_logger(__name__)

_ALL_GROUPS = [
    MuscleGroup.LEGS,
    MuscleGroup.CHEST,
    MuscleGroup.BACK,
    MuscleGroup.SHOULDERS,
    MuscleGroup.BICEPS,
    MuscleGroup.TRICEPS,
    MuscleGroup.ABS,
    MuscleGroup.CALVES,
    MuscleGroup.FOREARMS,
    MuscleGroup.LOWER_BACK,
]

# Target groups per day; day N uses template[N % len(template)]
SPLIT_TEMPLATES: dict[SplitType, list[list[MuscleGroup]]] = {
    SplitType.FULL_BODY: [
        [
            MuscleGroup.LEGS,
            MuscleGroup.CHEST,
            MuscleGroup.BACK,
            MuscleGroup.SHOULDERS,
            MuscleGroup.BICEPS,
            MuscleGroup.TRICEPS,
            MuscleGroup.ABS,
        ],
    ],
    SplitType.HALF_BODY: [
        [
            MuscleGroup.CHEST,
            MuscleGroup.BACK,
            MuscleGroup.SHOULDERS,
            MuscleGroup.BICEPS,
            MuscleGroup.TRICEPS,
        ],
        [MuscleGroup.LEGS, MuscleGroup.ABS, MuscleGroup.CALVES],
    ],
    SplitType.PUSH_PULL_LEGS: [
        [MuscleGroup.CHEST, MuscleGroup.SHOULDERS, MuscleGroup.TRICEPS],
        [MuscleGroup.BACK, MuscleGroup.BICEPS, MuscleGroup.FOREARMS],
        [MuscleGroup.LEGS, MuscleGroup.ABS, MuscleGroup.CALVES],
    ],
    SplitType.NO_PREFERENCE: [_ALL_GROUPS],
}

# Category -> week number -> RPE target
RPE_TABLE: dict[ExerciseCategory, dict[int, float]] = {
    ExerciseCategory.POWERLIFTING_MAIN: {1: 6, 2: 7, 3: 8, 4: 10},
    ExerciseCategory.SECONDARY_COMPOUND: {1: 7, 2: 7.5, 3: 8, 4: 9},
    ExerciseCategory.HEAVY_ISOLATION: {1: 8, 2: 8.5, 3: 9, 4: 10},
    ExerciseCategory.LIGHT_ISOLATION: {1: 10, 2: 10, 3: 10, 4: 10},  # to failure
}

PRIORITY_ORDER = [
    ExerciseCategory.POWERLIFTING_MAIN,
    ExerciseCategory.SECONDARY_COMPOUND,
    ExerciseCategory.HEAVY_ISOLATION,
    ExerciseCategory.LIGHT_ISOLATION,
]


def target_groups_for_day(split: SplitType, day_index: int) -> list[MuscleGroup]:
    """Muscle groups targeted on a 0-indexed training day."""
    template = SPLIT_TEMPLATES.get(split, SPLIT_TEMPLATES[SplitType.NO_PREFERENCE])
    return template[day_index % len(template)]


def rpe_note(category: ExerciseCategory, week_number: int) -> str:
    """RPE note for an exercise category in a given week."""
    by_week = RPE_TABLE[category]
    rpe = by_week.get(week_number, by_week[1])
    return f"RPE {rpe:g}"


@dataclass(frozen=True)
class _Selection:
    """Accumulator for one day's pick, carrying the week's running volume."""

    exercises: tuple[Exercise, ...] = ()
    volume: Mapping[MuscleGroup, int] = field(default_factory=dict)

    @property
    def names(self) -> set[str]:
        return {ex.name for ex in self.exercises}


def _consider(selection: _Selection, exercise: Exercise, config: GeneratorConfig) -> _Selection:
    """Add an exercise if the daily cap, uniqueness and weekly volume allow it."""
    if len(selection.exercises) >= config.max_exercises_per_day:
        return selection
    if exercise.name in selection.names:
        return selection

    volume = selection.volume
    group = exercise.muscle_group
    if group in LARGE_MUSCLE_GROUPS:
        used = volume.get(group, 0)
        if used + config.sets_per_exercise > config.weekly_volume_cap:
            return selection
        volume = {**volume, group: used + config.sets_per_exercise}

    return _Selection(exercises=selection.exercises + (exercise,), volume=volume)


def _prioritized_candidates(pool: list[Exercise], config: GeneratorConfig) -> list[Exercise]:
    """Candidates in category priority order, each category truncated to its cap."""
    candidates: list[Exercise] = []
    for category in PRIORITY_ORDER:
        cap = config.category_caps.get(category, 0)
        candidates.extend(filter_by_category(pool, category)[:cap])
    return candidates


def select_day(
    pool: list[Exercise],
    week_volume: Mapping[MuscleGroup, int],
    config: GeneratorConfig,
) -> _Selection:
    """Select a day's exercises from its candidate pool.

    First come, first served: no backtracking when the volume cap rejects
    an exercise.
    """
    return reduce(
        lambda selection, exercise: _consider(selection, exercise, config),
        _prioritized_candidates(pool, config),
        _Selection(volume=week_volume),
    )


class GenericProgramGenerator:
    """Builds a 4-week split program for mass-gain and fat-loss objectives."""

    def __init__(self, catalog: ExerciseCatalog, config: GeneratorConfig | None = None):
        self.catalog = catalog
        self.config = config or GeneratorConfig()

    def generate(self, form: ProgramFormData) -> Program:
        """Generate the program for the given answers."""
        available = filter_by_equipment(self.catalog, form.equipment)
        reps = (
            self.config.fat_loss_reps
            if form.objective == Objective.FAT_LOSS
            else self.config.hypertrophy_reps
        )

        weeks = [
            self._build_week(week_number, form, available, reps)
            for week_number in range(1, PROGRAM_WEEKS + 1)
        ]

        equipment = ", ".join(eq.value for eq in form.equipment) or "poids du corps"
        program = Program(
            title=f"Programme {form.objective.value} - {form.split.value}",
            description=(
                f"Programme de {PROGRAM_WEEKS} semaines, {form.training_days} jours/semaine "
                f"({form.experience.value}). Matériel : {equipment}."
            ),
            weeks=weeks,
            is_531=False,
            objective=form.objective.value,
        )
        logger.info(
            "generic_program_generated",
            objective=form.objective.value,
            split=form.split.value,
            days=form.training_days,
            candidates=len(available),
        )
        return program

    def _build_week(
        self,
        week_number: int,
        form: ProgramFormData,
        available: list[Exercise],
        reps: str,
    ) -> ProgramWeek:
        # Volume tracker starts empty every week and flows from day to day
        volume: Mapping[MuscleGroup, int] = {}
        days: list[ProgramDay] = []
        for day_index in range(form.training_days):
            pool = filter_by_muscle_groups(available, target_groups_for_day(form.split, day_index))
            selection = select_day(pool, volume, self.config)
            volume = selection.volume
            days.append(
                ProgramDay(
                    day_number=day_index + 1,
                    exercises=[
                        self._to_entry(ex, week_number, reps) for ex in selection.exercises
                    ],
                )
            )
        return ProgramWeek(week_number=week_number, days=days)

    def _to_entry(self, exercise: Exercise, week_number: int, reps: str) -> GenericExercise:
        return GenericExercise(
            name=exercise.name,
            sets=str(self.config.sets_per_exercise),
            reps=reps,
            notes=rpe_note(exercise.category, week_number),
            muscles=exercise.muscles,
            category=exercise.category.value,
        )
