"""
Fake Program Repository for Testing.

In-memory implementation of ProgramRepository.
"""
from typing import Dict, Iterable, List, Optional

from models.exercise import ProgramTemplate


class FakeProgramRepository:
    """In-memory fake implementation of ProgramRepository."""

    def __init__(self, programs: Optional[Iterable[ProgramTemplate]] = None):
        self._programs: Dict[str, ProgramTemplate] = {}
        self.lookups: List[str] = []
        if programs:
            self.seed(programs)

    def reset(self) -> None:
        """Clear all stored data."""
        self._programs.clear()
        self.lookups.clear()

    def seed(self, programs: Iterable[ProgramTemplate]) -> None:
        for program in programs:
            self._programs[program.id] = program

    def get_by_id(self, program_id: str) -> Optional[ProgramTemplate]:
        self.lookups.append(program_id)
        return self._programs.get(program_id)
