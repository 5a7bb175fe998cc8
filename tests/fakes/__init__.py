"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test objects

Usage:
    from tests.fakes import FakeExerciseRepository, make_exercise

    repo = FakeExerciseRepository()
    repo.seed([make_exercise("pushup", program_ids=["upper_body"])])
"""
from typing import Dict, List, Optional, Sequence

from models.exercise import (
    ExecutionLocation,
    ExecutionMethod,
    Exercise,
    Park,
    ParkEquipment,
    RequiredGearType,
    TargetProgramRef,
)
from models.profile import (
    ActiveProgramEnrollment,
    DomainProgress,
    MasterProgramSubLevels,
    TrainingDomain,
    UserProfile,
    UserProgression,
)

from tests.fakes.exercise_repository import FailingExerciseRepository, FakeExerciseRepository
from tests.fakes.gear_repository import FakeGearRepository
from tests.fakes.park_repository import FakeParkRepository
from tests.fakes.profile_repository import FakeProfileRepository
from tests.fakes.program_repository import FakeProgramRepository


# =============================================================================
# Factory Functions
# =============================================================================


def method(
    location: str = "park",
    gear_type: str = "improvised",
    gear_id: Optional[str] = None,
    video: Optional[str] = None,
) -> ExecutionMethod:
    """Build an execution method."""
    media = {"main_video_url": video} if video else {}
    return ExecutionMethod(
        location=ExecutionLocation(location),
        required_gear_type=RequiredGearType(gear_type),
        gear_id=gear_id,
        media=media,
    )


def make_exercise(
    exercise_id: str,
    *,
    program_ids: Sequence[str] = (),
    levels: Optional[Dict[str, int]] = None,
    methods: Optional[List[ExecutionMethod]] = None,
    **fields,
) -> Exercise:
    """
    Build a catalog exercise.

    Args:
        exercise_id: Exercise id (also used as the English name)
        program_ids: Domain affinity
        levels: program id -> min level
        methods: Execution methods (default: improvised anywhere outdoors)
        **fields: Any other Exercise field
    """
    if methods is None:
        methods = [method("park"), method("street"), method("home")]
    return Exercise(
        id=exercise_id,
        name={"en": exercise_id, "he": exercise_id},
        program_ids=list(program_ids),
        target_programs=[
            TargetProgramRef(program_id=pid, level=lvl)
            for pid, lvl in (levels or {}).items()
        ],
        execution_methods=methods,
        **fields,
    )


def make_profile(
    user_id: str = "user-1",
    *,
    domain_levels: Optional[Dict[str, int]] = None,
    enrollment: Optional[ActiveProgramEnrollment] = None,
    sub_levels: Optional[Dict[str, MasterProgramSubLevels]] = None,
    owned_gear: Sequence[str] = (),
    goals: Sequence[str] = (),
) -> UserProfile:
    """Build a user profile snapshot."""
    domains = {
        TrainingDomain(name): DomainProgress(current_level=level, max_level=max(level, 10))
        for name, level in (domain_levels or {}).items()
    }
    return UserProfile(
        id=user_id,
        name="Test User",
        progression=UserProgression(
            domains=domains,
            active_programs=[enrollment] if enrollment else [],
            master_program_sub_levels=sub_levels or {},
        ),
        equipment={"home": list(owned_gear)},
        goals=list(goals),
    )


def make_park(park_id: str = "park-1", *stations: str, brands: Optional[Dict[str, str]] = None) -> Park:
    """Build a park with the given installed equipment ids."""
    brands = brands or {}
    return Park(
        id=park_id,
        name="Test Park",
        gym_equipment=[
            ParkEquipment(equipment_id=station, brand_name=brands.get(station))
            for station in stations
        ],
    )


__all__ = [
    # Fakes
    "FakeProfileRepository",
    "FakeProgramRepository",
    "FakeExerciseRepository",
    "FailingExerciseRepository",
    "FakeParkRepository",
    "FakeGearRepository",
    # Factories
    "method",
    "make_exercise",
    "make_profile",
    "make_park",
]
