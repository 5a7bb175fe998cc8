"""
Workout engine services.

Pure functions and stateless classes; every external read happens in the
application layer before these are called.
"""

from services.execution_method_resolver import ExecutionMethodResolver, gear_priority
from services.exercise_replacement import ExerciseReplacementService
from services.exercise_selector import ExerciseSelector, intensity_window, min_level
from services.gear_catalog import GearCatalog, GearDefinitionCache, TTLCache
from services.skill_model import effective_level, global_level_for_display
from services.workout_classifier import classification_label, classify_workout
from services.workout_composer import WorkoutComposer, interleave_by_domain

__all__ = [
    "ExecutionMethodResolver",
    "ExerciseReplacementService",
    "ExerciseSelector",
    "GearCatalog",
    "GearDefinitionCache",
    "TTLCache",
    "WorkoutComposer",
    "classification_label",
    "classify_workout",
    "effective_level",
    "gear_priority",
    "global_level_for_display",
    "interleave_by_domain",
    "intensity_window",
    "min_level",
]
