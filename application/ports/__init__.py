"""
Port interfaces (Protocols) for the workout engine.

This package defines the read-only collaborator contracts that the
infrastructure layer must implement. Using Protocols enables:
- Clean separation of concerns
- Easy testing with in-memory fakes
- Dependency inversion (depend on abstractions, not concretions)
"""

from application.ports.exercise_repository import ExerciseRepository
from application.ports.gear_repository import GearRepository
from application.ports.park_repository import ParkRepository
from application.ports.profile_repository import ProfileRepository
from application.ports.program_repository import ProgramRepository

__all__ = [
    "ExerciseRepository",
    "GearRepository",
    "ParkRepository",
    "ProfileRepository",
    "ProgramRepository",
]
