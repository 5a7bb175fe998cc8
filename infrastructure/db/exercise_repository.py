"""
Supabase implementation of ExerciseRepository.

Reads the exercise catalog. Rows are validated into Exercise models;
rows that fail validation are logged and skipped.
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError
from supabase import Client

from models.exercise import Exercise
from models.profile import TrainingDomain

logger = logging.getLogger(__name__)


class SupabaseExerciseRepository:
    """
    Supabase implementation of ExerciseRepository protocol.

    Query errors are not caught here; callers decide how to surface them.
    """

    TABLE = "exercises"

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def _to_models(self, rows: List[Dict[str, Any]]) -> List[Exercise]:
        exercises = []
        for row in rows:
            try:
                exercises.append(Exercise.model_validate(row))
            except ValidationError as e:
                logger.warning(f"Skipping malformed exercise {row.get('id')}: {e}")
        return exercises

    def get_by_id(self, exercise_id: str) -> Optional[Exercise]:
        result = (
            self._client.table(self.TABLE)
            .select("*")
            .eq("id", exercise_id)
            .limit(1)
            .execute()
        )
        exercises = self._to_models(result.data or [])
        return exercises[0] if exercises else None

    def get_by_domain(self, domain: TrainingDomain) -> List[Exercise]:
        """
        Exercises whose program_ids contain the domain, or are empty.

        Args:
            domain: Training domain

        Returns:
            List of exercises
        """
        domain_value = TrainingDomain(domain).value
        result = (
            self._client.table(self.TABLE)
            .select("*")
            .or_(f"program_ids.cs.{{{domain_value}}},program_ids.eq.{{}}")
            .execute()
        )
        exercises = self._to_models(result.data or [])
        logger.debug(f"Loaded {len(exercises)} exercises for domain {domain_value}")
        return exercises

    def get_all(self, limit: int = 1000) -> List[Exercise]:
        result = self._client.table(self.TABLE).select("*").limit(limit).execute()
        return self._to_models(result.data or [])
