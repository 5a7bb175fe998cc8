"""
Supabase implementation of ProgramRepository.

Program templates are read-only; an enrollment references its template
by template_id (or by its own id for legacy enrollments).
"""

import logging
from typing import Optional

from supabase import Client

from models.exercise import ProgramTemplate

logger = logging.getLogger(__name__)


class SupabaseProgramRepository:
    """Supabase implementation of ProgramRepository protocol."""

    TABLE = "programs"

    def __init__(self, client: Client):
        self._client = client

    def get_by_id(self, program_id: str) -> Optional[ProgramTemplate]:
        """
        Get a program template by ID.

        Args:
            program_id: Template identifier

        Returns:
            ProgramTemplate if found, None otherwise
        """
        result = (
            self._client.table(self.TABLE)
            .select("id, name, is_master, sub_programs")
            .eq("id", program_id)
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return ProgramTemplate.model_validate(result.data[0])
