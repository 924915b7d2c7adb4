"""Data access layer for coach-lift."""

import json
from datetime import datetime
from pathlib import Path
from uuid import uuid4

import aiosqlite

from ..models.program import Program
from ..models.workout_log import WorkoutLogRow
from .engine import get_db_path
from .models import StoredProgram


def _parse_timestamp(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


class ProgramRepository:
    """Repository for generated programs."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, user_id: str, program: Program, program_name: str | None = None) -> str:
        """Store a program verbatim and return its new ID."""
        if program.is_error:
            raise ValueError(f"Refusing to store an error program: {program.title}")

        program_id = uuid4().hex
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO training_programs
                (id, user_id, program, duration_weeks, days_per_week, program_name)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    program_id,
                    user_id,
                    json.dumps(program.to_dict(), ensure_ascii=False),
                    program.total_weeks,
                    program.days_per_week,
                    program_name or program.title,
                ),
            )
            await db.commit()
        return program_id

    async def get(self, program_id: str, user_id: str | None = None) -> StoredProgram | None:
        """Get a program by ID, optionally restricted to its owner."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            if user_id is not None:
                cursor = await db.execute(
                    "SELECT * FROM training_programs WHERE id = ? AND user_id = ?",
                    (program_id, user_id),
                )
            else:
                cursor = await db.execute(
                    "SELECT * FROM training_programs WHERE id = ?", (program_id,)
                )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_program(row)

    async def list_for_user(self, user_id: str) -> list[StoredProgram]:
        """List a user's programs, newest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM training_programs
                WHERE user_id = ?
                ORDER BY created_at DESC, rowid DESC
                """,
                (user_id,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_program(row) for row in rows]

    async def delete(self, program_id: str) -> bool:
        """Delete a program together with its logs and notes.

        Returns:
            True if a program was deleted
        """
        async with aiosqlite.connect(self.db_path) as db:
            try:
                await db.execute("DELETE FROM workout_logs WHERE program_id = ?", (program_id,))
                await db.execute("DELETE FROM workout_notes WHERE program_id = ?", (program_id,))
                cursor = await db.execute(
                    "DELETE FROM training_programs WHERE id = ?", (program_id,)
                )
                await db.commit()
            except aiosqlite.Error:
                await db.rollback()
                raise
            return cursor.rowcount > 0

    def _row_to_program(self, row: aiosqlite.Row) -> StoredProgram:
        """Convert a database row to a StoredProgram."""
        return StoredProgram(
            id=row["id"],
            user_id=row["user_id"],
            program=Program.from_dict(json.loads(row["program"])),
            duration_weeks=row["duration_weeks"],
            days_per_week=row["days_per_week"],
            program_name=row["program_name"],
            created_at=_parse_timestamp(row["created_at"]),
        )


class WorkoutLogRepository:
    """Repository for per-set workout logs and per-exercise notes."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def replace_day(
        self,
        user_id: str,
        program_id: str,
        week: int,
        day: int,
        rows: list[WorkoutLogRow],
        notes: dict[str, str] | None = None,
    ) -> list[WorkoutLogRow]:
        """Replace every log of a (user, program, week, day) scope.

        Delete and insert run in one transaction: on failure the previous
        rows are kept.

        Returns:
            The rows now stored for the scope
        """
        scope = (user_id, program_id, week, day)
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            try:
                await db.execute(
                    """
                    DELETE FROM workout_logs
                    WHERE user_id = ? AND program_id = ? AND week = ? AND day = ?
                    """,
                    scope,
                )
                await db.execute(
                    """
                    DELETE FROM workout_notes
                    WHERE user_id = ? AND program_id = ? AND week = ? AND day = ?
                    """,
                    scope,
                )
                await db.executemany(
                    """
                    INSERT INTO workout_logs
                    (user_id, program_id, week, day, exercise_name, set_number, weight, reps, notes)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    [
                        (
                            row.user_id,
                            row.program_id,
                            row.week,
                            row.day,
                            row.exercise_name,
                            row.set_number,
                            row.weight,
                            row.reps,
                            row.notes,
                        )
                        for row in rows
                    ],
                )
                await db.executemany(
                    """
                    INSERT INTO workout_notes
                    (user_id, program_id, week, day, exercise_name, notes)
                    VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    [
                        (*scope, exercise_name, text)
                        for exercise_name, text in (notes or {}).items()
                        if text
                    ],
                )
                await db.commit()
            except aiosqlite.Error:
                await db.rollback()
                raise

            cursor = await db.execute(
                """
                SELECT * FROM workout_logs
                WHERE user_id = ? AND program_id = ? AND week = ? AND day = ?
                ORDER BY exercise_name, set_number
                """,
                scope,
            )
            return [self._row_to_log(row) for row in await cursor.fetchall()]

    async def list_for_program(
        self,
        user_id: str,
        program_id: str,
        week: int | None = None,
        day: int | None = None,
    ) -> list[WorkoutLogRow]:
        """Rows of a program, ordered by exercise name then set number."""
        query = "SELECT * FROM workout_logs WHERE user_id = ? AND program_id = ?"
        params: list = [user_id, program_id]
        if week is not None:
            query += " AND week = ?"
            params.append(week)
        if day is not None:
            query += " AND day = ?"
            params.append(day)
        query += " ORDER BY exercise_name, set_number, week, day"

        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(query, params)
            rows = await cursor.fetchall()
            return [self._row_to_log(row) for row in rows]

    async def get_notes(
        self, user_id: str, program_id: str, week: int, day: int
    ) -> dict[str, str]:
        """Per-exercise notes of one logged day."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT exercise_name, notes FROM workout_notes
                WHERE user_id = ? AND program_id = ? AND week = ? AND day = ?
                """,
                (user_id, program_id, week, day),
            )
            rows = await cursor.fetchall()
            return {row["exercise_name"]: row["notes"] for row in rows}

    async def delete_for_program(self, user_id: str, program_id: str) -> int:
        """Delete all of a user's logs for a program."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "DELETE FROM workout_logs WHERE user_id = ? AND program_id = ?",
                (user_id, program_id),
            )
            await db.execute(
                "DELETE FROM workout_notes WHERE user_id = ? AND program_id = ?",
                (user_id, program_id),
            )
            await db.commit()
            return cursor.rowcount

    def _row_to_log(self, row: aiosqlite.Row) -> WorkoutLogRow:
        """Convert a database row to a WorkoutLogRow."""
        return WorkoutLogRow(
            id=row["id"],
            created_at=_parse_timestamp(row["created_at"]),
            user_id=row["user_id"],
            program_id=row["program_id"],
            week=row["week"],
            day=row["day"],
            exercise_name=row["exercise_name"],
            set_number=row["set_number"],
            weight=row["weight"],
            reps=row["reps"],
            notes=row["notes"],
        )
