"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path

from coach_lift.db import init_db
from coach_lift.db.models import StoredProgram
from coach_lift.generators import generate_program
from coach_lift.models.exercises import Equipment, default_catalog
from coach_lift.models.questionnaire import (
    ExperienceLevel,
    Objective,
    ProgramFormData,
    SplitType,
)
from coach_lift.models.workout_log import ExerciseLog, SetPerformance

ALL_EQUIPMENT = [Equipment.BARBELL_DUMBBELLS, Equipment.BODYWEIGHT_STATION, Equipment.MACHINES]


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
async def db_path(temp_db_path):
    """A temporary database with the schema created."""
    await init_db(temp_db_path)
    return temp_db_path


@pytest.fixture
def catalog():
    return default_catalog()


@pytest.fixture
def mass_gain_form():
    """Mass gain, full body, 3 days, full gym."""
    return ProgramFormData(
        objective=Objective.MASS_GAIN,
        experience=ExperienceLevel.INTERMEDIATE,
        split=SplitType.FULL_BODY,
        training_days=3,
        max_duration=60,
        equipment=list(ALL_EQUIPMENT),
    )


@pytest.fixture
def fat_loss_ppl_form():
    """Fat loss, push/pull/legs, 3 days, no equipment."""
    return ProgramFormData(
        objective=Objective.FAT_LOSS,
        experience=ExperienceLevel.BEGINNER,
        split=SplitType.PUSH_PULL_LEGS,
        training_days=3,
        equipment=[],
    )


@pytest.fixture
def powerlifting_form():
    """Powerlifting, 4 days, barbell only, squat 150 and 100 elsewhere."""
    return ProgramFormData(
        objective=Objective.POWERLIFTING,
        experience=ExperienceLevel.ADVANCED,
        split=SplitType.NO_PREFERENCE,
        training_days=4,
        equipment=[Equipment.BARBELL_DUMBBELLS],
        squat_1rm=150,
        bench_1rm=100,
        deadlift_1rm=100,
        ohp_1rm=100,
    )


@pytest.fixture
def stored_531_program(powerlifting_form):
    """A 5/3/1 program as if read back from storage."""
    return StoredProgram(
        id="prog-531",
        user_id="user-1",
        program=generate_program(powerlifting_form),
    )


@pytest.fixture
def stored_generic_program(mass_gain_form):
    return StoredProgram(
        id="prog-generic",
        user_id="user-1",
        program=generate_program(mass_gain_form),
    )


@pytest.fixture
def sample_day_state():
    """Edit state with a blank set and a note."""
    return {
        "Squat barre": ExerciseLog(
            sets=[
                SetPerformance(set=1, weight="87.5", reps="5"),
                SetPerformance(set=2, weight="102,5", reps="5"),
                SetPerformance(set=3, weight="115", reps="8"),
            ],
            notes="Bonne forme",
        ),
        "Rowing barre": ExerciseLog(
            sets=[
                SetPerformance(set=1, weight="60", reps="10"),
                SetPerformance(set=2, weight="", reps=""),
            ],
        ),
    }
