"""
Workout plan and classification models.

WorkoutPlan is created fresh on every generation call and is not
persisted here. WorkoutData is the assembled-workout structure the
classifier analyzes.
"""

from enum import Enum
from typing import List, Optional, Union
from uuid import uuid4

from pydantic import BaseModel, Field

from models.exercise import ExecutionMethod, Exercise
from models.profile import TrainingDomain


class WorkoutIntensity(str, Enum):
    """Relative difficulty window requested for exercise selection."""

    HIGH = "high"
    NORMAL = "normal"
    LOW = "low"


class ProgramShape(str, Enum):
    """Shape of the enrollment a plan was generated for."""

    NONE = "none"
    REGULAR = "regular"
    MASTER = "master"


class PlannedExercise(BaseModel):
    """A selected exercise paired with its resolved execution method."""

    exercise: Exercise
    domain: TrainingDomain
    min_level: int = Field(ge=1)
    execution_method: Optional[ExecutionMethod] = None
    gear_label: Optional[str] = None
    matches_user_equipment: bool = Field(
        default=False,
        description="Selected because of gear the user owns",
    )


class WorkoutPlan(BaseModel):
    """Ordered list of selected exercises for one session."""

    id: str = Field(default_factory=lambda: f"workout-{uuid4()}")
    name: str
    exercises: List[PlannedExercise] = []
    focus_domains: List[TrainingDomain] = []
    estimated_duration: int = Field(ge=1, description="Minutes")
    program_shape: ProgramShape = ProgramShape.NONE

    @property
    def is_empty(self) -> bool:
        return not self.exercises


class SegmentType(str, Enum):
    RUNNING = "running"
    STRENGTH = "strength"
    CARDIO = "cardio"
    FLEXIBILITY = "flexibility"


class WorkoutSegment(BaseModel):
    """One block of an assembled workout."""

    type: SegmentType
    reps_or_duration: Optional[Union[str, int]] = Field(
        None, description="e.g. '10 reps', '15 חזרות' or a bare number"
    )
    sets: Optional[int] = Field(None, ge=0)
    rest: Optional[float] = Field(None, ge=0, description="Seconds")
    tags: List[str] = []
    exercise_id: Optional[str] = None


class WorkoutData(BaseModel):
    """Assembled workout structure analyzed by the classifier."""

    segments: List[WorkoutSegment] = []
    difficulty: Optional[str] = None
    focus: Optional[str] = None
    focus_area: Optional[str] = None
    muscles: List[str] = []


class WorkoutClassification(str, Enum):
    """Training-style labels."""

    STRENGTH = "strength"
    VOLUME = "volume"
    ENDURANCE = "endurance"
    SKILLS = "skills"
    HIIT = "hiit"
    GENERAL = "general"


class UserGoal(str, Enum):
    """Goal vocabulary that workout focus is mapped onto."""

    GLUTES_ABS = "glutes_abs"
    SKILLS = "skills"
    MASS_BUILDING = "mass_building"
    FAT_LOSS = "fat_loss"


class ClassificationResult(BaseModel):
    """Training-style label plus goal alignment."""

    classification: WorkoutClassification
    is_personalized: bool = False
    matched_goals: Optional[List[str]] = None
