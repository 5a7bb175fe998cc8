"""
FastAPI Dependency Providers for the workout engine service.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- The gear cache is built once by create_app() and read from app.state
- Repository and use case providers create new instances per-request

Usage in routers:
    from api.deps import get_generate_workout_use_case
    from application.use_cases import GenerateWorkoutUseCase

    @router.post("/users/{user_id}/workouts/generate")
    def generate(
        user_id: str,
        use_case: GenerateWorkoutUseCase = Depends(get_generate_workout_use_case),
    ):
        return use_case.execute(user_id)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_profile_repo] = lambda: FakeProfileRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException, Request
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import (
    ExerciseRepository,
    ParkRepository,
    ProfileRepository,
    ProgramRepository,
)
from application.use_cases import GenerateWorkoutUseCase, SwapExerciseUseCase

# Concrete implementations
from infrastructure import (
    SupabaseExerciseRepository,
    SupabaseParkRepository,
    SupabaseProfileRepository,
    SupabaseProgramRepository,
)

from backend.settings import Settings, get_settings as _get_settings
from services.execution_method_resolver import ExecutionMethodResolver
from services.exercise_replacement import ExerciseReplacementService
from services.gear_catalog import GearCatalog, GearDefinitionCache
from services.workout_composer import WorkoutComposer


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings(request: Request) -> Settings:
    """
    Get application settings.

    Returns the Settings instance the app was created with, falling back
    to the cached instance from backend.settings.

    Returns:
        Settings: Application settings instance
    """
    settings = getattr(request.app.state, "settings", None)
    return settings if settings is not None else _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_profile_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ProfileRepository:
    """Get ProfileRepository implementation."""
    return SupabaseProfileRepository(client)


def get_program_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ProgramRepository:
    """Get ProgramRepository implementation."""
    return SupabaseProgramRepository(client)


def get_exercise_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ExerciseRepository:
    """Get ExerciseRepository implementation."""
    return SupabaseExerciseRepository(client)


def get_park_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ParkRepository:
    """Get ParkRepository implementation."""
    return SupabaseParkRepository(client)


# =============================================================================
# Engine Providers
# =============================================================================


def get_gear_cache(request: Request) -> GearDefinitionCache:
    """
    Get the process-wide gear cache built by create_app().

    Returns:
        GearDefinitionCache stored on app.state
    """
    return request.app.state.gear_cache


def get_gear_catalog(
    cache: GearDefinitionCache = Depends(get_gear_cache),
    settings: Settings = Depends(get_settings),
) -> GearCatalog:
    """Get GearCatalog bound to the shared cache."""
    return GearCatalog(cache, language=settings.default_language)


def get_resolver(settings: Settings = Depends(get_settings)) -> ExecutionMethodResolver:
    """Get ExecutionMethodResolver configured with the gear ownership policy."""
    return ExecutionMethodResolver(verify_user_gear=settings.verify_user_gear)


def get_workout_composer(
    resolver: ExecutionMethodResolver = Depends(get_resolver),
    settings: Settings = Depends(get_settings),
) -> WorkoutComposer:
    """Get WorkoutComposer."""
    return WorkoutComposer(
        resolver=resolver,
        default_duration=settings.default_workout_minutes,
    )


# =============================================================================
# Use Case Providers
# =============================================================================


def get_generate_workout_use_case(
    profile_repo: ProfileRepository = Depends(get_profile_repo),
    program_repo: ProgramRepository = Depends(get_program_repo),
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
    park_repo: ParkRepository = Depends(get_park_repo),
    composer: WorkoutComposer = Depends(get_workout_composer),
    gear_catalog: GearCatalog = Depends(get_gear_catalog),
) -> GenerateWorkoutUseCase:
    """
    Get GenerateWorkoutUseCase with injected dependencies.

    Returns:
        GenerateWorkoutUseCase: Use case for generating workout plans
    """
    return GenerateWorkoutUseCase(
        profile_repo=profile_repo,
        program_repo=program_repo,
        exercise_repo=exercise_repo,
        park_repo=park_repo,
        composer=composer,
        gear_catalog=gear_catalog,
    )


def get_swap_exercise_use_case(
    profile_repo: ProfileRepository = Depends(get_profile_repo),
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
    park_repo: ParkRepository = Depends(get_park_repo),
    resolver: ExecutionMethodResolver = Depends(get_resolver),
    gear_cache: GearDefinitionCache = Depends(get_gear_cache),
) -> SwapExerciseUseCase:
    """Get SwapExerciseUseCase with injected dependencies."""
    return SwapExerciseUseCase(
        profile_repo=profile_repo,
        exercise_repo=exercise_repo,
        park_repo=park_repo,
        replacement_service=ExerciseReplacementService(resolver),
        gear_cache=gear_cache,
    )


__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_profile_repo",
    "get_program_repo",
    "get_exercise_repo",
    "get_park_repo",
    # Engine
    "get_gear_cache",
    "get_gear_catalog",
    "get_resolver",
    "get_workout_composer",
    # Use cases
    "get_generate_workout_use_case",
    "get_swap_exercise_use_case",
]
