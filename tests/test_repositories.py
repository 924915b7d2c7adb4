"""Tests for the aiosqlite repositories."""

import aiosqlite
import pytest

from coach_lift.db import ProgramRepository, WorkoutLogRepository, init_db
from coach_lift.models.program import Program
from coach_lift.models.workout_log import WorkoutLogRow


def _row(exercise, set_number, weight=None, reps=None, notes=None, week=1, day=1, user="user-1"):
    return WorkoutLogRow(
        user_id=user,
        program_id="prog-1",
        week=week,
        day=day,
        exercise_name=exercise,
        set_number=set_number,
        weight=weight,
        reps=reps,
        notes=notes,
    )


class TestInitDb:
    async def test_idempotent(self, db_path):
        """Running init twice keeps the schema."""
        await init_db(db_path)

        async with aiosqlite.connect(db_path) as db:
            cursor = await db.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
            tables = {row[0] for row in await cursor.fetchall()}
        assert {"training_programs", "workout_logs", "workout_notes"} <= tables


class TestProgramRepository:
    """Tests for program storage."""

    async def test_create_and_get(self, db_path, stored_531_program):
        """Programs are stored verbatim with their metadata."""
        repo = ProgramRepository(db_path)
        program = stored_531_program.program

        program_id = await repo.create("user-1", program)
        stored = await repo.get(program_id)

        assert len(program_id) == 32
        assert stored.program == program
        assert stored.user_id == "user-1"
        assert stored.duration_weeks == 4
        assert stored.days_per_week == 4
        assert stored.program_name == program.title
        assert stored.created_at is not None

    async def test_get_checks_owner(self, db_path, stored_generic_program):
        repo = ProgramRepository(db_path)
        program_id = await repo.create("user-1", stored_generic_program.program)

        assert await repo.get(program_id, "user-1") is not None
        assert await repo.get(program_id, "user-2") is None
        assert await repo.get("missing") is None

    async def test_list_for_user(self, db_path, stored_generic_program, stored_531_program):
        """Listing is per user, newest first."""
        repo = ProgramRepository(db_path)
        first = await repo.create("user-1", stored_generic_program.program)
        second = await repo.create("user-1", stored_531_program.program)
        await repo.create("user-2", stored_generic_program.program)

        listed = await repo.list_for_user("user-1")

        assert [p.id for p in listed] == [second, first]

    async def test_refuses_error_program(self, db_path):
        """The error sentinel is never stored."""
        repo = ProgramRepository(db_path)
        with pytest.raises(ValueError):
            await repo.create("user-1", Program(title="Erreur", description="1RM"))

    async def test_delete_removes_logs(self, db_path, stored_generic_program):
        """Deleting a program deletes its logs and notes."""
        programs = ProgramRepository(db_path)
        logs = WorkoutLogRepository(db_path)
        program_id = await programs.create("user-1", stored_generic_program.program)
        row = _row("Dips", 1, 20.0, 10)
        row.program_id = program_id
        await logs.replace_day("user-1", program_id, 1, 1, [row], {"Dips": "ok"})

        assert await programs.delete(program_id)
        assert await programs.get(program_id) is None
        assert await logs.list_for_program("user-1", program_id) == []
        assert await logs.get_notes("user-1", program_id, 1, 1) == {}
        assert not await programs.delete(program_id)


class TestWorkoutLogRepository:
    """Tests for log storage."""

    async def test_replace_day(self, db_path):
        """Replacing a day swaps its rows and leaves other days alone."""
        repo = WorkoutLogRepository(db_path)
        await repo.replace_day("user-1", "prog-1", 1, 2, [_row("Dips", 1, 20.0, 10, day=2)])
        await repo.replace_day("user-1", "prog-1", 1, 1, [_row("Dips", 1, 20.0, 10)])

        stored = await repo.replace_day(
            "user-1", "prog-1", 1, 1, [_row("Squat barre", 1, 100.0, 5)]
        )

        assert [(r.exercise_name, r.day) for r in stored] == [("Squat barre", 1)]
        all_rows = await repo.list_for_program("user-1", "prog-1")
        assert sorted((r.exercise_name, r.day) for r in all_rows) == [
            ("Dips", 2),
            ("Squat barre", 1),
        ]

    async def test_reps_keep_their_type(self, db_path):
        """Numeric reps come back as numbers, ranges as text."""
        repo = WorkoutLogRepository(db_path)
        rows = [
            _row("Dips", 1, 20.0, 10),
            _row("Dips", 2, 22.5, "8-10"),
            _row("Dips", 3, None, 7.5),
        ]
        stored = await repo.replace_day("user-1", "prog-1", 1, 1, rows)

        assert [r.reps for r in stored] == [10, "8-10", 7.5]
        assert [r.weight for r in stored] == [20.0, 22.5, None]
        assert all(r.id is not None for r in stored)

    async def test_list_ordering_and_scope(self, db_path):
        """Rows are ordered by exercise name then set number."""
        repo = WorkoutLogRepository(db_path)
        await repo.replace_day(
            "user-1", "prog-1", 1, 1,
            [_row("Squat barre", 2, 100.0, 5), _row("Dips", 1, 20.0, 10), _row("Squat barre", 1, 100.0, 5)],
        )
        await repo.replace_day("user-1", "prog-1", 2, 1, [_row("Dips", 1, 25.0, 8, week=2)])

        rows = await repo.list_for_program("user-1", "prog-1")
        assert [(r.exercise_name, r.set_number, r.week) for r in rows] == [
            ("Dips", 1, 1),
            ("Dips", 1, 2),
            ("Squat barre", 1, 1),
            ("Squat barre", 2, 1),
        ]

        scoped = await repo.list_for_program("user-1", "prog-1", week=2, day=1)
        assert [(r.exercise_name, r.weight) for r in scoped] == [("Dips", 25.0)]
        assert await repo.list_for_program("user-2", "prog-1") == []

    async def test_notes(self, db_path):
        """Notes are stored once per exercise and replaced with the day."""
        repo = WorkoutLogRepository(db_path)
        await repo.replace_day(
            "user-1", "prog-1", 1, 1, [_row("Dips", 1, 20.0, 10, notes="a")], {"Dips": "a", "Crunchs": ""}
        )
        assert await repo.get_notes("user-1", "prog-1", 1, 1) == {"Dips": "a"}

        await repo.replace_day("user-1", "prog-1", 1, 1, [_row("Dips", 1, 20.0, 10)])
        assert await repo.get_notes("user-1", "prog-1", 1, 1) == {}

    async def test_duplicate_set_rolls_back(self, db_path):
        """A failing insert keeps the previous rows."""
        repo = WorkoutLogRepository(db_path)
        await repo.replace_day("user-1", "prog-1", 1, 1, [_row("Dips", 1, 20.0, 10)])

        with pytest.raises(aiosqlite.IntegrityError):
            await repo.replace_day(
                "user-1", "prog-1", 1, 1,
                [_row("Dips", 1, 30.0, 10), _row("Dips", 1, 30.0, 10)],
            )

        rows = await repo.list_for_program("user-1", "prog-1")
        assert [(r.exercise_name, r.weight) for r in rows] == [("Dips", 20.0)]

    async def test_delete_for_program(self, db_path):
        repo = WorkoutLogRepository(db_path)
        await repo.replace_day("user-1", "prog-1", 1, 1, [_row("Dips", 1, 20.0, 10), _row("Dips", 2, 20.0, 10)])
        await repo.replace_day("user-2", "prog-1", 1, 1, [_row("Dips", 1, 20.0, 10, user="user-2")])

        assert await repo.delete_for_program("user-1", "prog-1") == 2
        assert await repo.list_for_program("user-1", "prog-1") == []
        assert len(await repo.list_for_program("user-2", "prog-1")) == 1
