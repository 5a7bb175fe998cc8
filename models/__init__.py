"""Models package for the workout engine."""

from models.exercise import (
    AlternativeEquipmentRequirement,
    EquipmentRequirementType,
    ExecutionLocation,
    ExecutionMethod,
    Exercise,
    ExerciseType,
    GearDefinition,
    GymEquipment,
    Park,
    ParkEquipment,
    ProgramTemplate,
    RequiredGearType,
    TargetProgramRef,
)
from models.profile import (
    ActiveProgramEnrollment,
    DomainProgress,
    EquipmentProfile,
    MasterProgramSubLevels,
    TrainingDomain,
    UserProfile,
    UserProgression,
    parse_domain,
)
from models.workout import (
    ClassificationResult,
    PlannedExercise,
    ProgramShape,
    UserGoal,
    WorkoutClassification,
    WorkoutData,
    WorkoutIntensity,
    WorkoutPlan,
    WorkoutSegment,
)

__all__ = [
    # Exercise catalog
    "AlternativeEquipmentRequirement",
    "EquipmentRequirementType",
    "ExecutionLocation",
    "ExecutionMethod",
    "Exercise",
    "ExerciseType",
    "GearDefinition",
    "GymEquipment",
    "Park",
    "ParkEquipment",
    "ProgramTemplate",
    "RequiredGearType",
    "TargetProgramRef",
    # Profile
    "ActiveProgramEnrollment",
    "DomainProgress",
    "EquipmentProfile",
    "MasterProgramSubLevels",
    "TrainingDomain",
    "UserProfile",
    "UserProgression",
    "parse_domain",
    # Workout
    "ClassificationResult",
    "PlannedExercise",
    "ProgramShape",
    "UserGoal",
    "WorkoutClassification",
    "WorkoutData",
    "WorkoutIntensity",
    "WorkoutPlan",
    "WorkoutSegment",
]
