"""
Generate Workout Use Case.

Fetches everything the engine needs from the read-only collaborators
(profile, program template, park, per-domain catalogs), runs the pure
composer and decorates the plan with gear display labels.

Collaborator failures are caught here and surfaced as
WorkoutGenerationError. No retries are attempted.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from application.exceptions import ProfileNotFoundError, WorkoutGenerationError
from application.ports import (
    ExerciseRepository,
    ParkRepository,
    ProfileRepository,
    ProgramRepository,
)
from models.exercise import ExecutionLocation, Exercise, Park, ProgramTemplate
from models.profile import TrainingDomain, UserProfile
from models.workout import WorkoutIntensity, WorkoutPlan
from services.gear_catalog import GearCatalog
from services.skill_model import effective_level
from services.workout_composer import WorkoutComposer

logger = logging.getLogger(__name__)


@dataclass
class GenerateWorkoutResult:
    """Result of generating a workout plan."""
    plan: WorkoutPlan
    metadata: Dict[str, Any] = field(default_factory=dict)


class GenerateWorkoutUseCase:
    """
    Use case for generating a workout plan for a user.

    Reads are performed up front; the engine itself never does I/O.
    """

    def __init__(
        self,
        profile_repo: ProfileRepository,
        program_repo: ProgramRepository,
        exercise_repo: ExerciseRepository,
        park_repo: ParkRepository,
        composer: Optional[WorkoutComposer] = None,
        gear_catalog: Optional[GearCatalog] = None,
    ):
        """
        Initialize with required dependencies.

        Args:
            profile_repo: User profile reads
            program_repo: Program template reads
            exercise_repo: Exercise catalog reads
            park_repo: Park facility reads
            composer: Workout composer (default instance if omitted)
            gear_catalog: Gear label lookup; labels are skipped if omitted
        """
        self._profile_repo = profile_repo
        self._program_repo = program_repo
        self._exercise_repo = exercise_repo
        self._park_repo = park_repo
        self._composer = composer or WorkoutComposer()
        self._gear_catalog = gear_catalog

    def _load_profile(self, user_id: str) -> UserProfile:
        try:
            profile = self._profile_repo.get_by_id(user_id)
        except Exception as e:
            logger.exception(f"Profile read failed for user {user_id}: {e}")
            raise WorkoutGenerationError("Could not generate workout") from e
        if profile is None:
            raise ProfileNotFoundError(f"Profile {user_id} not found")
        return profile

    def _load_program(self, profile: UserProfile) -> Optional[ProgramTemplate]:
        enrollment = profile.progression.active_enrollment
        if enrollment is None:
            return None
        program = self._program_repo.get_by_id(enrollment.program_key)
        if program is None:
            logger.warning(
                f"Program template {enrollment.program_key} not found, "
                f"treating enrollment {enrollment.id} as a regular program"
            )
        return program

    def _load_park(self, park_id: Optional[str]) -> Optional[Park]:
        if not park_id:
            return None
        park = self._park_repo.get_by_id(park_id)
        if park is None:
            logger.warning(f"Park {park_id} not found, no fixed equipment available")
        return park

    def _label_gear(self, plan: WorkoutPlan) -> None:
        if self._gear_catalog is None:
            return
        for item in plan.exercises:
            method = item.execution_method
            if method is not None:
                item.gear_label = self._gear_catalog.gear_label(
                    method.required_gear_type, method.gear_id
                )

    def execute(
        self,
        user_id: str,
        target_duration: Optional[int] = None,
        park_id: Optional[str] = None,
        intensity: WorkoutIntensity | str = WorkoutIntensity.NORMAL,
        location: Optional[ExecutionLocation | str] = None,
    ) -> GenerateWorkoutResult:
        """
        Generate a workout plan.

        Args:
            user_id: User to generate for
            target_duration: Target minutes (engine default if None)
            park_id: Park the user trains at, if any
            intensity: Requested intensity bucket
            location: Workout location override

        Returns:
            GenerateWorkoutResult with the plan and generation metadata

        Raises:
            ProfileNotFoundError: If the user has no profile
            WorkoutGenerationError: If any collaborator read fails
        """
        intensity = WorkoutIntensity(intensity)
        profile = self._load_profile(user_id)

        try:
            program = self._load_program(profile)
            park = self._load_park(park_id)
            shape, domains = self._composer.resolve_focus(profile, program)
            catalog: Dict[TrainingDomain, List[Exercise]] = {
                domain: self._exercise_repo.get_by_domain(domain) for domain in domains
            }
        except Exception as e:
            logger.exception(f"Catalog read failed for user {user_id}: {e}")
            raise WorkoutGenerationError("Could not generate workout") from e

        plan = self._composer.generate_workout_plan(
            profile=profile,
            catalog=catalog,
            target_duration=target_duration,
            park=park,
            intensity=intensity,
            program=program,
            location=location,
        )
        self._label_gear(plan)

        metadata = {
            "program_shape": shape.value,
            "intensity": intensity.value,
            "park_id": park.id if park else None,
            "exercise_count": len(plan.exercises),
            "effective_levels": {
                domain.value: effective_level(profile, domain) for domain in domains
            },
        }
        return GenerateWorkoutResult(plan=plan, metadata=metadata)
