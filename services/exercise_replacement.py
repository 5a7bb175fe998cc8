"""
Exercise replacement (smart swap) lookup.

Finds replacements for an exercise in a generated workout:
- Variations: same movement family (base_movement_id), e.g. all pull-up
  variations
- Alternatives: different exercises of the same movement group

Both are limited to exercises within one level of the current level that
have a performable execution method at the current location.
"""

import logging
from typing import Iterable, List, Optional

from core.constants import SWAP_LEVEL_WINDOW
from models.exercise import ExecutionLocation, Exercise, GymEquipment, Park
from models.generation import ReplacementOption
from models.profile import UserProfile
from services.execution_method_resolver import ExecutionMethodResolver
from services.exercise_selector import min_level

logger = logging.getLogger(__name__)


class ExerciseReplacementService:
    """Looks up same-family variations and same-group alternatives."""

    def __init__(self, resolver: Optional[ExecutionMethodResolver] = None):
        self._resolver = resolver or ExecutionMethodResolver()

    def _collect(
        self,
        current: Exercise,
        same_kind,
        current_level: int,
        location: ExecutionLocation,
        park: Optional[Park],
        profile: UserProfile,
        catalog: Iterable[Exercise],
        active_program_id: Optional[str],
        gym_equipment: List[GymEquipment],
    ) -> List[ReplacementOption]:
        options = []
        for exercise in catalog:
            if exercise.id == current.id or not same_kind(exercise):
                continue

            level = min_level(exercise, active_program_id)
            if abs(level - current_level) > SWAP_LEVEL_WINDOW:
                continue

            if not exercise.methods_for(location):
                continue

            method = self._resolver.select_execution_method_with_brand(
                exercise, location, park, profile, gym_equipment
            )
            if method is None:
                continue

            if level < current_level:
                comparison = "lower"
            elif level > current_level:
                comparison = "higher"
            else:
                comparison = "same"

            options.append(
                (
                    level,
                    ReplacementOption(
                        exercise=exercise,
                        selected_execution_method=method,
                        level_comparison=comparison,
                    ),
                )
            )

        options.sort(key=lambda item: item[0])
        return [option for _, option in options]

    def get_exercise_variations(
        self,
        current: Exercise,
        current_level: int,
        location: ExecutionLocation | str,
        park: Optional[Park],
        profile: UserProfile,
        catalog: Iterable[Exercise],
        active_program_id: Optional[str] = None,
        gym_equipment: Iterable[GymEquipment] = (),
    ) -> List[ReplacementOption]:
        """
        Variations of the same movement family, sorted by level.

        Returns an empty list when the exercise has no base_movement_id.
        """
        if not current.base_movement_id:
            logger.warning(
                f"Exercise {current.id} has no base_movement_id, "
                f"cannot look up variations"
            )
            return []

        return self._collect(
            current,
            lambda ex: ex.base_movement_id == current.base_movement_id,
            current_level,
            ExecutionLocation(location),
            park,
            profile,
            catalog,
            active_program_id,
            list(gym_equipment),
        )

    def get_alternative_exercises(
        self,
        current: Exercise,
        current_level: int,
        location: ExecutionLocation | str,
        park: Optional[Park],
        profile: UserProfile,
        catalog: Iterable[Exercise],
        active_program_id: Optional[str] = None,
        gym_equipment: Iterable[GymEquipment] = (),
    ) -> List[ReplacementOption]:
        """
        Other exercises of the same movement group, sorted by level.

        Returns an empty list when the exercise has no movement_group.
        """
        if not current.movement_group:
            logger.debug(f"Exercise {current.id} has no movement_group, no alternatives")
            return []

        return self._collect(
            current,
            lambda ex: ex.movement_group == current.movement_group,
            current_level,
            ExecutionLocation(location),
            park,
            profile,
            catalog,
            active_program_id,
            list(gym_equipment),
        )
