"""Data models for coach-lift."""

from .exercises import (
    Equipment,
    Exercise,
    ExerciseCatalog,
    ExerciseCategory,
    MainLift,
    MuscleGroup,
    default_catalog,
)
from .program import GenericExercise, MainLiftSet, Program, ProgramDay, ProgramWeek, SetDetail
from .questionnaire import ExperienceLevel, Objective, ProgramFormData, SplitType
from .workout_log import DayWorkoutData, ExerciseLog, SetPerformance, WorkoutLogRow

__all__ = [
    "DayWorkoutData",
    "default_catalog",
    "Equipment",
    "Exercise",
    "ExerciseCatalog",
    "ExerciseCategory",
    "ExerciseLog",
    "ExperienceLevel",
    "GenericExercise",
    "MainLift",
    "MainLiftSet",
    "MuscleGroup",
    "Objective",
    "Program",
    "ProgramDay",
    "ProgramFormData",
    "ProgramWeek",
    "SetDetail",
    "SetPerformance",
    "SplitType",
    "WorkoutLogRow",
]
