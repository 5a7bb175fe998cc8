"""
Fake Exercise Repository for Testing.

In-memory implementation of ExerciseRepository, plus a failing variant
for exercising error paths.
"""
from typing import Iterable, List, Optional

from models.exercise import Exercise
from models.profile import TrainingDomain


class FakeExerciseRepository:
    """
    In-memory fake implementation of ExerciseRepository.

    Keeps insertion order so catalog order is deterministic in tests.
    """

    def __init__(self, exercises: Optional[Iterable[Exercise]] = None):
        self._exercises: List[Exercise] = []
        if exercises:
            self.seed(exercises)

    def reset(self) -> None:
        """Clear all stored data."""
        self._exercises.clear()

    def seed(self, exercises: Iterable[Exercise]) -> None:
        self._exercises.extend(exercises)

    def get_by_id(self, exercise_id: str) -> Optional[Exercise]:
        for exercise in self._exercises:
            if exercise.id == exercise_id:
                return exercise
        return None

    def get_by_domain(self, domain: TrainingDomain) -> List[Exercise]:
        value = TrainingDomain(domain).value
        return [
            ex for ex in self._exercises
            if not ex.program_ids or value in ex.program_ids
        ]

    def get_all(self, limit: int = 1000) -> List[Exercise]:
        return self._exercises[:limit]


class FailingExerciseRepository:
    """ExerciseRepository whose every read fails, as on a lost connection."""

    def __init__(self, error: Optional[Exception] = None):
        self._error = error or ConnectionError("catalog unavailable")

    def get_by_id(self, exercise_id: str) -> Optional[Exercise]:
        raise self._error

    def get_by_domain(self, domain: TrainingDomain) -> List[Exercise]:
        raise self._error

    def get_all(self, limit: int = 1000) -> List[Exercise]:
        raise self._error
