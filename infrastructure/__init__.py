"""
Infrastructure Layer for the workout engine service.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

from infrastructure.db import (
    SupabaseExerciseRepository,
    SupabaseGearRepository,
    SupabaseParkRepository,
    SupabaseProfileRepository,
    SupabaseProgramRepository,
)

__all__ = [
    "SupabaseExerciseRepository",
    "SupabaseGearRepository",
    "SupabaseParkRepository",
    "SupabaseProfileRepository",
    "SupabaseProgramRepository",
]
