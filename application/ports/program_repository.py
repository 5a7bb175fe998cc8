"""
Program repository port (interface).

Read access to program templates, including the master flag and the
sub-program domains of composite programs.
"""

from typing import Optional, Protocol

from models.exercise import ProgramTemplate


class ProgramRepository(Protocol):
    """Repository interface for program templates."""

    def get_by_id(self, program_id: str) -> Optional[ProgramTemplate]:
        """
        Get a program template by ID.

        Args:
            program_id: The program template identifier

        Returns:
            ProgramTemplate if found, None otherwise
        """
        ...
