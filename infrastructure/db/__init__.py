"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository
interfaces defined in application.ports.

Usage:
    from supabase import create_client
    from infrastructure.db import SupabaseExerciseRepository

    client = create_client(SUPABASE_URL, SUPABASE_KEY)
    exercise_repo = SupabaseExerciseRepository(client)
"""

from infrastructure.db.exercise_repository import SupabaseExerciseRepository
from infrastructure.db.gear_repository import SupabaseGearRepository
from infrastructure.db.park_repository import SupabaseParkRepository
from infrastructure.db.profile_repository import SupabaseProfileRepository
from infrastructure.db.program_repository import SupabaseProgramRepository

__all__ = [
    # Catalog
    "SupabaseExerciseRepository",
    "SupabaseGearRepository",

    # Facilities
    "SupabaseParkRepository",

    # Users and programs
    "SupabaseProfileRepository",
    "SupabaseProgramRepository",
]
