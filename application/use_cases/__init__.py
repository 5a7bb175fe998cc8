"""
Application use cases for the workout engine service.

Use cases are the entry points for business operations. They read from
the collaborator ports, run the pure engine services and translate
collaborator failures into application exceptions.

Usage:
    from application.use_cases import GenerateWorkoutUseCase

    use_case = GenerateWorkoutUseCase(
        profile_repo=profile_repo,
        program_repo=program_repo,
        exercise_repo=exercise_repo,
        park_repo=park_repo,
    )
    result = use_case.execute(user_id="user-123", park_id="park-1")
"""

from application.use_cases.generate_workout import (
    GenerateWorkoutResult,
    GenerateWorkoutUseCase,
)
from application.use_cases.swap_exercise import SwapExerciseUseCase

__all__ = [
    "GenerateWorkoutResult",
    "GenerateWorkoutUseCase",
    "SwapExerciseUseCase",
]
