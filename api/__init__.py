"""
API package for the workout engine service.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

from api.deps import (
    get_exercise_repo,
    get_park_repo,
    get_profile_repo,
    get_program_repo,
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
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
]
