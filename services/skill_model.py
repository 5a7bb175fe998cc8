"""
Skill model: effective per-domain levels.

A user's effective level in a domain is normally the domain's current
level. Composite ("master") programs track hidden sub-levels per domain
which, when recorded, take precedence. Missing data never blocks the user:
it degrades to the default level.
"""

from typing import List

from core.constants import BEGINNER_DISPLAY_LEVEL_CEILING, DEFAULT_LEVEL
from models.profile import TrainingDomain, UserProfile, parse_domain


def domain_level(profile: UserProfile, domain: TrainingDomain | str) -> int:
    """Raw DomainProgress level for a domain (default level if absent)."""
    domain = parse_domain(domain)
    progress = profile.progression.domains.get(domain)
    if progress is None:
        return DEFAULT_LEVEL
    return progress.current_level or DEFAULT_LEVEL


def effective_level(profile: UserProfile, domain: TrainingDomain | str) -> int:
    """
    Get the level used for eligibility decisions in a domain.

    Args:
        profile: User profile snapshot
        domain: Training domain

    Returns:
        Master-program sub-level when recorded for the active enrollment,
        otherwise the domain level. Always >= 1.

    Raises:
        UnknownDomainError: If domain is not a TrainingDomain value
    """
    domain = parse_domain(domain)
    enrollment = profile.progression.active_enrollment
    if enrollment is None:
        return domain_level(profile, domain)

    sub_levels = profile.progression.sub_levels_for(enrollment)
    if sub_levels is not None:
        sub_level = sub_levels.for_domain(domain)
        if sub_level is not None:
            return sub_level

    return domain_level(profile, domain)


def _rounded_mean(values: List[int]) -> int:
    # Half-up, not banker's rounding
    return int(sum(values) / len(values) + 0.5)


def _domain_mean(profile: UserProfile) -> int:
    levels = [
        progress.current_level or DEFAULT_LEVEL
        for progress in profile.progression.domains.values()
    ]
    if not levels:
        return DEFAULT_LEVEL
    return _rounded_mean(levels)


def global_level_for_display(profile: UserProfile) -> int:
    """
    Single level to show the user.

    Composite programs show the lowest sub-level to beginners (mean at or
    below level 5) and the mean sub-level to advanced users. Without
    sub-levels, the mean of all domain levels is shown.
    """
    enrollment = profile.progression.active_enrollment
    if enrollment is not None:
        sub_levels = profile.progression.sub_levels_for(enrollment)
        values = sub_levels.recorded() if sub_levels is not None else []
        if values:
            average = _rounded_mean(values)
            if average <= BEGINNER_DISPLAY_LEVEL_CEILING:
                return min(values)
            return average

    return _domain_mean(profile)
