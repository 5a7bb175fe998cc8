"""
Swap Exercise Use Case.

Finds replacement options for one exercise of a generated workout, at the
user's current location and park.
"""

import logging
from typing import Optional

from application.exceptions import (
    ExerciseNotFoundError,
    ProfileNotFoundError,
    WorkoutGenerationError,
)
from application.ports import (
    ExerciseRepository,
    ParkRepository,
    ProfileRepository,
)
from models.exercise import ExecutionLocation
from models.generation import ExerciseAlternativesResponse
from services.exercise_replacement import ExerciseReplacementService
from services.exercise_selector import min_level
from services.gear_catalog import GearDefinitionCache

logger = logging.getLogger(__name__)


class SwapExerciseUseCase:
    """Use case for looking up exercise replacements."""

    def __init__(
        self,
        profile_repo: ProfileRepository,
        exercise_repo: ExerciseRepository,
        park_repo: ParkRepository,
        replacement_service: Optional[ExerciseReplacementService] = None,
        gear_cache: Optional[GearDefinitionCache] = None,
    ):
        self._profile_repo = profile_repo
        self._exercise_repo = exercise_repo
        self._park_repo = park_repo
        self._replacements = replacement_service or ExerciseReplacementService()
        self._gear_cache = gear_cache

    def execute(
        self,
        user_id: str,
        exercise_id: str,
        location: ExecutionLocation | str = ExecutionLocation.PARK,
        park_id: Optional[str] = None,
    ) -> ExerciseAlternativesResponse:
        """
        Get variations and alternatives for an exercise.

        Raises:
            ProfileNotFoundError: If the user has no profile
            ExerciseNotFoundError: If the exercise is not in the catalog
            WorkoutGenerationError: If a collaborator read fails
        """
        try:
            profile = self._profile_repo.get_by_id(user_id)
            current = self._exercise_repo.get_by_id(exercise_id)
            park = self._park_repo.get_by_id(park_id) if park_id else None
            catalog = self._exercise_repo.get_all()
        except Exception as e:
            logger.exception(f"Replacement lookup failed for {exercise_id}: {e}")
            raise WorkoutGenerationError("Could not look up replacements") from e

        if profile is None:
            raise ProfileNotFoundError(f"Profile {user_id} not found")
        if current is None:
            raise ExerciseNotFoundError(f"Exercise {exercise_id} not found")

        gym_equipment = self._gear_cache.gym_equipment() if self._gear_cache else []
        enrollment = profile.progression.active_enrollment
        active_program_id = enrollment.program_key if enrollment else None
        current_level = min_level(current, active_program_id)

        common = dict(
            current=current,
            current_level=current_level,
            location=location,
            park=park,
            profile=profile,
            catalog=catalog,
            active_program_id=active_program_id,
            gym_equipment=gym_equipment,
        )
        return ExerciseAlternativesResponse(
            exercise_id=exercise_id,
            variations=self._replacements.get_exercise_variations(**common),
            alternatives=self._replacements.get_alternative_exercises(**common),
        )
