"""
Eligibility and intensity selection.

Filters a domain's exercise catalog into a safety-bounded,
intensity-targeted candidate list:

1. Safety - an exercise whose entry level (min level) is more than one
   step above the user's effective level is never returned.
2. Intensity - candidates are bucketed by min level relative to the
   effective level (high / normal / low windows, inclusive).
3. Fallback - an empty bucket falls back to the full safe list.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from core.constants import DEFAULT_LEVEL, MAX_LEVEL_STEP_ABOVE
from models.exercise import Exercise
from models.profile import TrainingDomain, parse_domain
from models.workout import WorkoutIntensity

logger = logging.getLogger(__name__)


# Bucket offsets relative to the effective level: (lowest, highest), inclusive
INTENSITY_WINDOWS = {
    WorkoutIntensity.HIGH: (0, 1),
    WorkoutIntensity.NORMAL: (-2, 0),
    WorkoutIntensity.LOW: (-5, -3),
}


def min_level(exercise: Exercise, active_program_id: Optional[str]) -> int:
    """
    Minimum entry level of an exercise for the active program.

    Uses the program-specific target level recorded on the exercise, or
    the default level when the exercise declares none for that program.
    """
    if active_program_id:
        for target in exercise.target_programs:
            if target.program_id == active_program_id:
                return target.level
    return DEFAULT_LEVEL


def intensity_window(
    level: int,
    intensity: WorkoutIntensity | str,
) -> Tuple[int, int]:
    """Inclusive (low, high) min-level bounds for an intensity bucket."""
    low_offset, high_offset = INTENSITY_WINDOWS[WorkoutIntensity(intensity)]
    return level + low_offset, level + high_offset


def is_safe(exercise_min_level: int, level: int) -> bool:
    """Minimum-entry-level rule."""
    return exercise_min_level <= level + MAX_LEVEL_STEP_ABOVE


def belongs_to_domain(exercise: Exercise, domain: TrainingDomain) -> bool:
    """Exercises without program affinity are shared by every domain."""
    return not exercise.program_ids or domain.value in exercise.program_ids


class ExerciseSelector:
    """
    Selects eligible exercises for a domain at an effective level.

    Stateless; the catalog is passed on every call and never cached.
    """

    def select_candidates(
        self,
        domain: TrainingDomain | str,
        effective_level: int,
        intensity: WorkoutIntensity | str,
        active_program_id: Optional[str],
        catalog: Iterable[Exercise],
    ) -> List[Exercise]:
        """
        Filter and bucket a catalog into candidate exercises.

        Args:
            domain: Training domain being filled
            effective_level: User's effective level in the domain
            intensity: Requested intensity bucket
            active_program_id: Program id used to resolve min levels
            catalog: Exercises to choose from (catalog order is kept)

        Returns:
            Exercises in the intensity bucket, or every safe exercise when
            the bucket is empty. Empty only if nothing is safe.

        Raises:
            UnknownDomainError: If domain is not a TrainingDomain value
        """
        domain = parse_domain(domain)
        low, high = intensity_window(effective_level, intensity)

        safe: List[Tuple[Exercise, int]] = []
        for exercise in catalog:
            if not belongs_to_domain(exercise, domain):
                continue
            level = min_level(exercise, active_program_id)
            if is_safe(level, effective_level):
                safe.append((exercise, level))

        in_bucket = [ex for ex, level in safe if low <= level <= high]
        if in_bucket:
            return in_bucket

        if safe:
            logger.debug(
                f"No {WorkoutIntensity(intensity).value} candidates for "
                f"{domain.value} at level {effective_level}, "
                f"falling back to {len(safe)} safe exercises"
            )
        return [ex for ex, _ in safe]
