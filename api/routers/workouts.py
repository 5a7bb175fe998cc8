"""
Workouts router for adaptive workout generation.

This router contains endpoints for:
- /users/{user_id}/workouts/generate - Generate a workout plan
- /users/{user_id}/exercises/{exercise_id}/alternatives - Smart swap lookup
- /workouts/classify - Classify an assembled workout
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.deps import (
    get_generate_workout_use_case,
    get_settings,
    get_swap_exercise_use_case,
)
from application.exceptions import (
    ExerciseNotFoundError,
    ProfileNotFoundError,
    WorkoutGenerationError,
)
from application.use_cases import GenerateWorkoutUseCase, SwapExerciseUseCase
from backend.settings import Settings
from models.exercise import ExecutionLocation
from models.generation import (
    ClassifyWorkoutRequest,
    ClassifyWorkoutResponse,
    ExerciseAlternativesResponse,
    GenerateWorkoutRequest,
    GenerateWorkoutResponse,
)
from services.workout_classifier import classification_label, classify_workout

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Workouts"],
)


@router.post(
    "/users/{user_id}/workouts/generate",
    response_model=GenerateWorkoutResponse,
)
def generate_workout_endpoint(
    user_id: str,
    request: GenerateWorkoutRequest,
    use_case: GenerateWorkoutUseCase = Depends(get_generate_workout_use_case),
):
    """
    Generate a workout plan for a user.

    An empty plan is a valid response; clients should check its exercises.
    """
    try:
        result = use_case.execute(
            user_id=user_id,
            target_duration=request.target_duration_minutes,
            park_id=request.park_id,
            intensity=request.intensity,
            location=request.location,
        )
    except ProfileNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except WorkoutGenerationError as e:
        raise HTTPException(status_code=503, detail=str(e))

    return GenerateWorkoutResponse(plan=result.plan, generation_metadata=result.metadata)


@router.get(
    "/users/{user_id}/exercises/{exercise_id}/alternatives",
    response_model=ExerciseAlternativesResponse,
)
def exercise_alternatives_endpoint(
    user_id: str,
    exercise_id: str,
    location: ExecutionLocation = Query(ExecutionLocation.PARK),
    park_id: Optional[str] = Query(None),
    use_case: SwapExerciseUseCase = Depends(get_swap_exercise_use_case),
):
    """Get same-family variations and same-group alternatives for an exercise."""
    try:
        return use_case.execute(
            user_id=user_id,
            exercise_id=exercise_id,
            location=location,
            park_id=park_id,
        )
    except (ProfileNotFoundError, ExerciseNotFoundError) as e:
        raise HTTPException(status_code=404, detail=str(e))
    except WorkoutGenerationError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.post("/workouts/classify", response_model=ClassifyWorkoutResponse)
def classify_workout_endpoint(
    request: ClassifyWorkoutRequest,
    language: Optional[str] = Query(None, pattern="^(he|en)$"),
    settings: Settings = Depends(get_settings),
):
    """Classify an assembled workout's training style and goal alignment."""
    result = classify_workout(request.workout, request.user_goals)
    label = classification_label(result.classification, language or settings.default_language)
    return ClassifyWorkoutResponse(result=result, label=label)
