"""5/3/1 program generator (Jim Wendler's percentage-based cycle).

Training maxes are 90% of the one-rep maxes. Each week prescribes three
working sets at fixed percentages of the training max:

    Week 1: 65/75/85%  5/5/5+
    Week 2: 70/80/90%  3/3/3+
    Week 3: 75/85/95%  5/3/1+
    Week 4: 40/50/60%  5/5/5 (deload, no AMRAP)

The last set of weeks 1-3 is taken for as many reps as possible.
"""

import math
from dataclasses import dataclass

import structlog

from ..models.exercises import Exercise, ExerciseCatalog, ExerciseCategory, MainLift
from ..models.program import GenericExercise, MainLiftSet, Program, ProgramDay, ProgramWeek, SetDetail
from ..models.questionnaire import ProgramFormData
from .config import GeneratorConfig, round_to_increment
from .filters import filter_by_category, filter_by_equipment

logger = structlog.get_logger(__name__)

ERROR_TITLE = "Erreur de Génération"
ERROR_DESCRIPTION = (
    "Impossible de générer le programme 5/3/1. Veuillez vérifier vos valeurs de 1RM."
)


@dataclass(frozen=True)
class CycleWeek:
    """Prescription for one week of the cycle."""

    week_number: int
    percentages: tuple[float, ...]
    set_reps: tuple[str, ...]  # base reps per set, without the AMRAP "+"
    amrap_set: int | None  # 1-indexed set taken to failure
    deload: bool = False

    @property
    def scheme(self) -> str:
        """Whole-week rep scheme, e.g. "5/5/5+"."""
        return "/".join(self.reps_for(i) for i in range(1, len(self.set_reps) + 1))

    def reps_for(self, set_number: int) -> str:
        reps = self.set_reps[set_number - 1]
        return f"{reps}+" if set_number == self.amrap_set else reps


CYCLE: tuple[CycleWeek, ...] = (
    CycleWeek(1, (0.65, 0.75, 0.85), ("5", "5", "5"), amrap_set=3),
    CycleWeek(2, (0.70, 0.80, 0.90), ("3", "3", "3"), amrap_set=3),
    CycleWeek(3, (0.75, 0.85, 0.95), ("5", "3", "1"), amrap_set=3),
    CycleWeek(4, (0.40, 0.50, 0.60), ("5", "5", "5"), amrap_set=None, deload=True),
)

MAIN_LIFT_ORDER = [MainLift.SQUAT, MainLift.BENCH, MainLift.DEADLIFT, MainLift.OVERHEAD_PRESS]

# Fixed schedules for 1-3 training days
_SHORT_SCHEDULES: dict[int, list[list[MainLift]]] = {
    1: [MAIN_LIFT_ORDER],
    2: [
        [MainLift.SQUAT, MainLift.OVERHEAD_PRESS],
        [MainLift.BENCH, MainLift.DEADLIFT],
    ],
    3: [
        [MainLift.SQUAT],
        [MainLift.BENCH],
        [MainLift.DEADLIFT, MainLift.OVERHEAD_PRESS],
    ],
}


def compute_training_max(one_rep_max: float, config: GeneratorConfig | None = None) -> float:
    """Training max: a fraction of the one-rep max, rounded to the plate increment."""
    config = config or GeneratorConfig()
    return round_to_increment(one_rep_max * config.training_max_ratio, config.weight_increment)


def lifts_for_day(training_days: int, day_index: int) -> list[MainLift]:
    """Main lifts scheduled on a 0-indexed day."""
    if training_days in _SHORT_SCHEDULES:
        schedule = _SHORT_SCHEDULES[training_days]
        return schedule[day_index] if day_index < len(schedule) else []
    # Four days or more: one lift per day, cycling past day 4
    return [MAIN_LIFT_ORDER[day_index % len(MAIN_LIFT_ORDER)]]


def has_valid_maxes(form: ProgramFormData) -> bool:
    """True when all four one-rep maxes are present, finite and positive."""
    return all(
        value is not None and math.isfinite(value) and value > 0
        for value in form.one_rep_maxes.values()
    )


def error_program() -> Program:
    """Sentinel returned when the one-rep maxes are unusable."""
    return Program(
        title=ERROR_TITLE,
        description=ERROR_DESCRIPTION,
        weeks=[],
        is_531=True,
    )


class FiveThreeOneGenerator:
    """Builds a 4-week 5/3/1 cycle with accessory work."""

    def __init__(self, catalog: ExerciseCatalog, config: GeneratorConfig | None = None):
        catalog.require_main_lifts()
        self.catalog = catalog
        self.config = config or GeneratorConfig()

    def generate(self, form: ProgramFormData) -> Program:
        """Generate the cycle, or the error sentinel if a 1RM is missing."""
        if not has_valid_maxes(form):
            logger.warning(
                "five_three_one_invalid_maxes",
                objective=form.objective.value,
                maxes=form.one_rep_maxes,
            )
            return error_program()

        training_maxes = self.training_maxes(form)
        accessories = self._accessory_candidates(form)

        weeks = [
            self._build_week(cycle_week, form.training_days, training_maxes, accessories)
            for cycle_week in CYCLE
        ]

        program = Program(
            title=f"Programme 5/3/1 - {form.objective.value}",
            description=(
                "Programme basé sur la méthode 5/3/1 de Jim Wendler pour "
                f"{form.training_days} jours/semaine."
            ),
            weeks=weeks,
            is_531=True,
            objective=form.objective.value,
        )
        logger.info(
            "five_three_one_generated",
            objective=form.objective.value,
            days=form.training_days,
            training_maxes={lift.name.lower(): tm for lift, tm in training_maxes.items()},
        )
        return program

    def training_maxes(self, form: ProgramFormData) -> dict[MainLift, float]:
        """Training max per main lift."""
        one_rep_maxes = {
            MainLift.SQUAT: form.squat_1rm,
            MainLift.BENCH: form.bench_1rm,
            MainLift.DEADLIFT: form.deadlift_1rm,
            MainLift.OVERHEAD_PRESS: form.ohp_1rm,
        }
        return {
            lift: compute_training_max(one_rm, self.config)
            for lift, one_rm in one_rep_maxes.items()
        }

    def _accessory_candidates(self, form: ProgramFormData) -> list[Exercise]:
        """Equipment-filtered accessories in the order they are offered to each day."""
        main_names = {lift.value for lift in MainLift}
        available = [
            ex for ex in filter_by_equipment(self.catalog, form.equipment)
            if ex.name not in main_names
        ]
        candidates: list[Exercise] = []
        for category in (
            ExerciseCategory.SECONDARY_COMPOUND,
            ExerciseCategory.HEAVY_ISOLATION,
            ExerciseCategory.LIGHT_ISOLATION,
        ):
            cap = self.config.accessory_caps.get(category, 0)
            candidates.extend(filter_by_category(available, category)[:cap])
        return candidates

    def _build_week(
        self,
        cycle_week: CycleWeek,
        training_days: int,
        training_maxes: dict[MainLift, float],
        accessories: list[Exercise],
    ) -> ProgramWeek:
        days = []
        for day_index in range(training_days):
            lifts = lifts_for_day(training_days, day_index)
            exercises = []
            for lift in lifts:
                exercises.extend(self._main_lift_sets(lift, cycle_week, training_maxes[lift]))
            if lifts:
                exercises.extend(self._accessories(accessories))
            days.append(ProgramDay(day_number=day_index + 1, exercises=exercises))
        return ProgramWeek(week_number=cycle_week.week_number, days=days, deload=cycle_week.deload)

    def _main_lift_sets(
        self, lift: MainLift, cycle_week: CycleWeek, training_max: float
    ) -> list[MainLiftSet]:
        exercise = self.catalog.get(lift.value)
        total_sets = len(cycle_week.percentages)
        entries = []
        for set_number, percentage in enumerate(cycle_week.percentages, 1):
            detail = SetDetail(
                set_number=set_number,
                percentage=percentage,
                calculated_weight=round_to_increment(
                    training_max * percentage, self.config.weight_increment
                ),
                reps=cycle_week.reps_for(set_number),
                is_amrap=set_number == cycle_week.amrap_set,
            )
            entries.append(
                MainLiftSet(
                    name=lift.value,
                    detail=detail,
                    total_sets=total_sets,
                    scheme_reps=cycle_week.scheme,
                    training_max=training_max,
                    notes=f"TM: {training_max:g} kg",
                    muscles=exercise.muscles if exercise else (),
                )
            )
        return entries

    def _accessories(self, candidates: list[Exercise]) -> list[GenericExercise]:
        added: list[GenericExercise] = []
        names: set[str] = set()
        for exercise in candidates:
            if len(added) >= self.config.max_accessories_per_day:
                break
            if exercise.name in names:
                continue
            names.add(exercise.name)
            added.append(
                GenericExercise(
                    name=exercise.name,
                    sets=self.config.accessory_sets,
                    reps=self.config.accessory_reps,
                    notes=self.config.accessory_notes,
                    muscles=exercise.muscles,
                    category=exercise.category.value,
                )
            )
        return added
