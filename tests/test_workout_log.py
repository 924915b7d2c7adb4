"""Tests for the workout log row/edit-state conversions."""

import pytest

from coach_lift.models.program import GenericExercise, ProgramDay
from coach_lift.models.workout_log import (
    ExerciseLog,
    SetPerformance,
    WorkoutLogRow,
    flatten_day,
    group_rows,
    parse_reps,
    parse_weight,
    select_day_view,
    state_from_dict,
    state_to_dict,
)


def _row(exercise, set_number, weight=None, reps=None, notes=None, week=1, day=1):
    return WorkoutLogRow(
        user_id="user-1",
        program_id="prog-1",
        week=week,
        day=day,
        exercise_name=exercise,
        set_number=set_number,
        weight=weight,
        reps=reps,
        notes=notes,
    )


class TestParsing:
    """Tests for input coercion."""

    @pytest.mark.parametrize(
        "value,expected",
        [("60", 60.0), ("62.5", 62.5), ("62,5", 62.5), (" 40 ", 40.0), ("", None), ("  ", None),
         (None, None), ("lourd", None)],
    )
    def test_parse_weight(self, value, expected):
        assert parse_weight(value) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [("8", 8), ("7.5", 7.5), ("8-12", "8-12"), (" 5+ ", "5+"), ("", None), (None, None)],
    )
    def test_parse_reps(self, value, expected):
        result = parse_reps(value)
        assert result == expected
        assert type(result) is type(expected)


class TestFlattenDay:
    """Tests for edit state -> rows."""

    def test_drops_empty_sets(self, sample_day_state):
        """Sets with neither weight nor reps are not saved."""
        rows = flatten_day(sample_day_state, "user-1", "prog-1", 1, 1)

        assert [(r.exercise_name, r.set_number) for r in rows] == [
            ("Squat barre", 1),
            ("Squat barre", 2),
            ("Squat barre", 3),
            ("Rowing barre", 1),
        ]
        assert len({r.key for r in rows}) == len(rows)

    def test_coerces_values(self, sample_day_state):
        rows = flatten_day(sample_day_state, "user-1", "prog-1", 1, 1)

        assert rows[1].weight == 102.5
        assert rows[1].reps == 5
        assert all(r.week == 1 and r.day == 1 and r.program_id == "prog-1" for r in rows)

    def test_notes_copied_to_every_row(self, sample_day_state):
        """The exercise note is duplicated onto each of its rows."""
        rows = flatten_day(sample_day_state, "user-1", "prog-1", 1, 1)

        assert [r.notes for r in rows if r.exercise_name == "Squat barre"] == ["Bonne forme"] * 3
        assert [r.notes for r in rows if r.exercise_name == "Rowing barre"] == [None]

    def test_weight_only_or_reps_only(self):
        """A single filled field is enough to keep the set."""
        state = {
            "Dips": ExerciseLog(sets=[
                SetPerformance(set=1, weight="", reps="12"),
                SetPerformance(set=2, weight="10", reps=""),
            ])
        }
        rows = flatten_day(state, "u", "p", 2, 3)

        assert [(r.weight, r.reps) for r in rows] == [(None, 12), (10.0, None)]

    def test_unparseable_weight_without_reps(self):
        """A set whose only value is not a number is not saved."""
        state = {
            "Dips": ExerciseLog(sets=[
                SetPerformance(set=1, weight="abc", reps=""),
                SetPerformance(set=2, weight="abc", reps="8"),
            ])
        }
        rows = flatten_day(state, "u", "p", 1, 1)

        assert [(r.set_number, r.weight, r.reps) for r in rows] == [(2, None, 8)]

    def test_empty_state(self):
        assert flatten_day({}, "u", "p", 1, 1) == []


class TestGroupRows:
    """Tests for rows -> edit state."""

    def test_groups_by_exercise(self):
        rows = [
            _row("Dips", 1, 20.0, 10),
            _row("Dips", 2, 20.0, "8-10"),
            _row("Squat barre", 1, 100.0, 5),
        ]
        state = group_rows(rows)

        assert list(state) == ["Dips", "Squat barre"]
        assert state["Dips"].sets == [
            SetPerformance(set=1, weight="20", reps="10"),
            SetPerformance(set=2, weight="20", reps="8-10"),
        ]

    def test_last_row_note_wins(self):
        """The exercise note is taken from the last row processed."""
        state = group_rows([
            _row("Dips", 1, 20.0, 10, notes="premier"),
            _row("Dips", 2, 20.0, 10, notes="dernier"),
        ])
        assert state["Dips"].notes == "dernier"

        state = group_rows([
            _row("Dips", 1, 20.0, 10, notes="premier"),
            _row("Dips", 2, 20.0, 10, notes=None),
        ])
        assert state["Dips"].notes == ""

    def test_renders_inputs(self):
        """Stored numbers come back as input strings."""
        state = group_rows([_row("Dips", 1, 62.5, None), _row("Dips", 2, None, 7.5)])

        assert state["Dips"].sets[0] == SetPerformance(set=1, weight="62.5", reps="")
        assert state["Dips"].sets[1] == SetPerformance(set=2, weight="", reps="7.5")

    def test_round_trip(self, sample_day_state):
        """Non-empty sets survive flatten then group."""
        state = group_rows(flatten_day(sample_day_state, "u", "p", 1, 1))

        assert state["Squat barre"].sets[1] == SetPerformance(set=2, weight="102.5", reps="5")
        assert state["Squat barre"].notes == "Bonne forme"
        assert [s.set for s in state["Rowing barre"].sets] == [1]


class TestSelectDayView:
    """Tests for cross-referencing logs with a program day."""

    def test_keeps_only_day_slots(self):
        day = ProgramDay(
            day_number=1,
            exercises=[GenericExercise(name="Dips", sets="2", reps="8-12")],
        )
        state = {
            "Dips": ExerciseLog(
                sets=[SetPerformance(set=n, weight="20", reps="8") for n in (1, 2, 3)],
                notes="ok",
            ),
            "Crunchs": ExerciseLog(sets=[SetPerformance(set=1, reps="20")]),
        }
        view = select_day_view(state, day)

        assert list(view) == ["Dips"]
        assert [s.set for s in view["Dips"].sets] == [1, 2]
        assert view["Dips"].notes == "ok"


class TestStateSerialization:
    def test_state_dict_round_trip(self, sample_day_state):
        assert state_from_dict(state_to_dict(sample_day_state)) == sample_day_state

    def test_numbers_in_payload(self):
        """Numeric payload values are taken as input strings."""
        state = state_from_dict({"Dips": {"sets": [{"set": "1", "weight": 20.0, "reps": 8}]}})
        assert state["Dips"].sets[0] == SetPerformance(set=1, weight="20", reps="8")
