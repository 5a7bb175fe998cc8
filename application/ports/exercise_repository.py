"""
Exercise repository port (interface).

This Protocol defines the contract for exercise catalog reads.
Infrastructure implementations (e.g., Supabase) must satisfy this interface.
"""

from typing import List, Optional, Protocol

from models.exercise import Exercise
from models.profile import TrainingDomain


class ExerciseRepository(Protocol):
    """
    Repository interface for the exercise catalog.

    Exercises are read-only reference data owned by content management.
    """

    def get_by_id(self, exercise_id: str) -> Optional[Exercise]:
        """
        Get an exercise by its ID.

        Args:
            exercise_id: The exercise identifier

        Returns:
            Exercise if found, None otherwise
        """
        ...

    def get_by_domain(self, domain: TrainingDomain) -> List[Exercise]:
        """
        Get exercises with affinity to a training domain.

        Exercises without any program affinity are included.

        Args:
            domain: Training domain

        Returns:
            List of matching exercises
        """
        ...

    def get_all(self, limit: int = 1000) -> List[Exercise]:
        """
        Get all exercises.

        Args:
            limit: Maximum number of results

        Returns:
            List of all exercises
        """
        ...
