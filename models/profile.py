"""
User profile and progression models.

Training domains are fixed at import time. A user's progression holds one
DomainProgress per domain, the list of program enrollments and, for
composite ("master") programs, hidden per-domain sub-levels.
"""

import logging
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Set

from pydantic import BaseModel, Field, model_validator

from application.exceptions import UnknownDomainError

logger = logging.getLogger(__name__)


class TrainingDomain(str, Enum):
    """Training focus areas, including named skill tracks."""

    UPPER_BODY = "upper_body"
    LOWER_BODY = "lower_body"
    FULL_BODY = "full_body"
    CORE = "core"
    FLEXIBILITY = "flexibility"
    RUNNING = "running"
    HANDSTAND = "handstand"
    PULL_UP_PRO = "pull_up_pro"


def parse_domain(value: "TrainingDomain | str") -> TrainingDomain:
    """
    Convert a raw value into a TrainingDomain.

    Raises:
        UnknownDomainError: If the value is not a known domain
    """
    if isinstance(value, TrainingDomain):
        return value
    try:
        return TrainingDomain(value)
    except ValueError as e:
        raise UnknownDomainError(value) from e


class DomainProgress(BaseModel):
    """Progress within a single training domain."""

    current_level: int = Field(default=1, ge=1)
    max_level: int = Field(default=1, ge=1)
    is_unlocked: bool = True

    @model_validator(mode="after")
    def check_level_bounds(self) -> "DomainProgress":
        if self.max_level < self.current_level:
            raise ValueError("max_level must be >= current_level")
        return self


class ActiveProgramEnrollment(BaseModel):
    """A user's enrollment in a program template."""

    id: str
    template_id: Optional[str] = None
    name: Optional[str] = None
    focus_domains: List[TrainingDomain] = []
    start_date: Optional[datetime] = None
    duration_weeks: Optional[int] = Field(None, ge=1)
    current_week: Optional[int] = Field(None, ge=1)

    @property
    def program_key(self) -> str:
        """Id used for program template lookup and program-specific levels."""
        return self.template_id or self.id


class MasterProgramSubLevels(BaseModel):
    """Hidden per-domain sub-levels inside a composite program."""

    upper_body_level: Optional[int] = Field(None, ge=1)
    lower_body_level: Optional[int] = Field(None, ge=1)
    core_level: Optional[int] = Field(None, ge=1)

    def for_domain(self, domain: TrainingDomain) -> Optional[int]:
        """Return the recorded sub-level for a domain, if any."""
        if domain == TrainingDomain.UPPER_BODY:
            return self.upper_body_level
        if domain == TrainingDomain.LOWER_BODY:
            return self.lower_body_level
        if domain == TrainingDomain.CORE:
            return self.core_level
        return None

    def recorded(self) -> List[int]:
        """All sub-levels that have been recorded."""
        values = [self.upper_body_level, self.lower_body_level, self.core_level]
        return [v for v in values if v is not None]


class UserProgression(BaseModel):
    """Split progression system: RPG level, domain levels, enrollments."""

    global_level: int = Field(default=1, ge=1)
    domains: Dict[TrainingDomain, DomainProgress] = {}
    active_programs: List[ActiveProgramEnrollment] = []
    master_program_sub_levels: Dict[str, MasterProgramSubLevels] = {}

    @property
    def active_enrollment(self) -> Optional[ActiveProgramEnrollment]:
        """
        The single enrollment the engine consults.

        Only the first enrollment is treated as active. Blending domains
        from several simultaneous programs is not supported.
        """
        if not self.active_programs:
            return None
        if len(self.active_programs) > 1:
            logger.debug(
                f"{len(self.active_programs)} enrollments found, "
                f"using {self.active_programs[0].id}"
            )
        return self.active_programs[0]

    def sub_levels_for(
        self, enrollment: ActiveProgramEnrollment
    ) -> Optional[MasterProgramSubLevels]:
        """Sub-levels recorded for an enrollment (by id, then template id)."""
        sub_levels = self.master_program_sub_levels.get(enrollment.id)
        if sub_levels is None and enrollment.template_id:
            sub_levels = self.master_program_sub_levels.get(enrollment.template_id)
        return sub_levels


class EquipmentProfile(BaseModel):
    """Gear definition ids the user owns, per context."""

    home: List[str] = []
    office: List[str] = []
    outdoor: List[str] = []

    def owned_gear_ids(self) -> Set[str]:
        return set(self.home) | set(self.office) | set(self.outdoor)


class UserProfile(BaseModel):
    """Immutable snapshot of a user's profile for one generation call."""

    id: str
    name: Optional[str] = None
    progression: UserProgression = Field(default_factory=UserProgression)
    equipment: EquipmentProfile = Field(default_factory=EquipmentProfile)
    goals: List[str] = Field(
        default_factory=list,
        description="Declared goal tags (e.g. 'fat_loss', 'skills', 'glutes_abs')",
    )

    model_config = {"frozen": True}
