"""
Request/response models for workout generation, classification and swaps.

These models define the HTTP contract of the host service.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from models.exercise import ExecutionLocation, ExecutionMethod, Exercise
from models.workout import (
    ClassificationResult,
    WorkoutData,
    WorkoutIntensity,
    WorkoutPlan,
)


class GenerateWorkoutRequest(BaseModel):
    """Request model for generating a workout plan."""

    target_duration_minutes: Optional[int] = Field(
        None, ge=1, le=240, description="Target workout duration in minutes"
    )
    park_id: Optional[str] = Field(
        None, description="Park whose fixed equipment is available"
    )
    intensity: WorkoutIntensity = Field(
        WorkoutIntensity.NORMAL, description="Relative difficulty window"
    )
    location: Optional[ExecutionLocation] = Field(
        None,
        description="Where the workout happens. Defaults to 'park' when a park "
        "is given, otherwise 'street'.",
    )


class GenerateWorkoutResponse(BaseModel):
    """Response model for a generated workout plan."""

    plan: WorkoutPlan
    generation_metadata: dict = Field(default_factory=dict)


class ClassifyWorkoutRequest(BaseModel):
    """Request model for classifying an assembled workout."""

    workout: WorkoutData
    user_goals: List[str] = Field(default_factory=list)


class ClassifyWorkoutResponse(BaseModel):
    """Classification plus its display label."""

    result: ClassificationResult
    label: str


class ReplacementOption(BaseModel):
    """A candidate replacement for an exercise in a generated workout."""

    exercise: Exercise
    selected_execution_method: Optional[ExecutionMethod] = None
    level_comparison: Literal["lower", "same", "higher"]


class ExerciseAlternativesResponse(BaseModel):
    """Same-family variations and same-group alternatives."""

    exercise_id: str
    variations: List[ReplacementOption] = []
    alternatives: List[ReplacementOption] = []
