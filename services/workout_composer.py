"""
Workout composer.

Orchestrates the skill model, eligibility selector and execution method
resolver per training domain, then merges the domains into one ordered
exercise list.

Program shapes:
- No active enrollment: default domains (full body, core)
- Regular enrollment: the enrollment's focus domains (default full body)
- Master enrollment: the template's sub-programs (default upper body,
  lower body, core), interleaved round-robin instead of concatenated

All catalog and program data must be fetched before calling the composer;
it performs no I/O and never raises for missing catalog data.
"""

import logging
from typing import Dict, List, Mapping, Optional, Sequence, Set, Tuple

from core.constants import (
    DEFAULT_MASTER_PLAN_NAME,
    DEFAULT_PLAN_NAME,
    DEFAULT_REGULAR_PLAN_NAME,
    DEFAULT_WORKOUT_MINUTES,
)
from models.exercise import ExecutionLocation, Exercise, Park, ProgramTemplate
from models.profile import TrainingDomain, UserProfile
from models.workout import PlannedExercise, ProgramShape, WorkoutIntensity, WorkoutPlan
from services.execution_method_resolver import ExecutionMethodResolver
from services.exercise_selector import ExerciseSelector, min_level
from services.skill_model import domain_level, effective_level

logger = logging.getLogger(__name__)


DEFAULT_DOMAINS: List[TrainingDomain] = [TrainingDomain.FULL_BODY, TrainingDomain.CORE]
DEFAULT_REGULAR_DOMAINS: List[TrainingDomain] = [TrainingDomain.FULL_BODY]
DEFAULT_MASTER_DOMAINS: List[TrainingDomain] = [
    TrainingDomain.UPPER_BODY,
    TrainingDomain.LOWER_BODY,
    TrainingDomain.CORE,
]


def interleave_by_domain(groups: Sequence[Sequence[PlannedExercise]]) -> List[PlannedExercise]:
    """
    Merge per-domain lists round-robin.

    Takes item 1 of every group, then item 2 of every group, and so on.
    Shorter groups simply drop out once exhausted.
    """
    mixed: List[PlannedExercise] = []
    longest = max((len(group) for group in groups), default=0)
    for i in range(longest):
        for group in groups:
            if i < len(group):
                mixed.append(group[i])
    return mixed


def _master_domains(program: ProgramTemplate) -> List[TrainingDomain]:
    domains: List[TrainingDomain] = []
    for sub_program in program.sub_programs:
        try:
            domain = TrainingDomain(sub_program)
        except ValueError:
            logger.warning(
                f"Master program {program.id} declares unknown sub-program "
                f"'{sub_program}', skipping"
            )
            continue
        if domain not in domains:
            domains.append(domain)
    return domains or list(DEFAULT_MASTER_DOMAINS)


class WorkoutComposer:
    """
    Builds a WorkoutPlan for one user at one moment.

    Safe to share between calls and users; holds no per-call state.
    """

    def __init__(
        self,
        selector: Optional[ExerciseSelector] = None,
        resolver: Optional[ExecutionMethodResolver] = None,
        default_duration: int = DEFAULT_WORKOUT_MINUTES,
    ):
        """
        Initialize the composer.

        Args:
            selector: Eligibility selector (default instance if omitted)
            resolver: Execution method resolver (default instance if omitted)
            default_duration: Estimated minutes when the caller gives none
        """
        self._selector = selector or ExerciseSelector()
        self._resolver = resolver or ExecutionMethodResolver()
        self._default_duration = default_duration

    def resolve_focus(
        self,
        profile: UserProfile,
        program: Optional[ProgramTemplate] = None,
    ) -> Tuple[ProgramShape, List[TrainingDomain]]:
        """
        Decide the program shape and focus domains for a profile.

        Args:
            profile: User profile snapshot
            program: Template of the active enrollment, if it could be read

        Returns:
            (shape, focus domains in generation order)
        """
        enrollment = profile.progression.active_enrollment
        if enrollment is None:
            return ProgramShape.NONE, list(DEFAULT_DOMAINS)

        if program is not None and program.is_master:
            return ProgramShape.MASTER, _master_domains(program)

        domains: List[TrainingDomain] = []
        for domain in enrollment.focus_domains or DEFAULT_REGULAR_DOMAINS:
            if domain not in domains:
                domains.append(domain)
        return ProgramShape.REGULAR, domains

    def _plan_name(
        self,
        shape: ProgramShape,
        profile: UserProfile,
        program: Optional[ProgramTemplate],
    ) -> str:
        if shape == ProgramShape.MASTER:
            return (program.name if program else None) or DEFAULT_MASTER_PLAN_NAME
        if shape == ProgramShape.REGULAR:
            enrollment = profile.progression.active_enrollment
            return (enrollment.name if enrollment else None) or DEFAULT_REGULAR_PLAN_NAME
        return DEFAULT_PLAN_NAME

    def exercises_for_domain(
        self,
        profile: UserProfile,
        domain: TrainingDomain,
        level: int,
        intensity: WorkoutIntensity,
        catalog: Sequence[Exercise],
        location: ExecutionLocation,
        park: Optional[Park],
    ) -> List[PlannedExercise]:
        """Selected, performable exercises for one domain."""
        enrollment = profile.progression.active_enrollment
        active_program_id = enrollment.program_key if enrollment else None

        candidates = self._selector.select_candidates(
            domain=domain,
            effective_level=level,
            intensity=intensity,
            active_program_id=active_program_id,
            catalog=catalog,
        )

        planned: List[PlannedExercise] = []
        for exercise in candidates:
            method = self._resolver.select_execution_method(
                exercise, location, park, profile
            )
            if method is None:
                logger.debug(
                    f"Dropping {exercise.id}: no execution method at {location.value}"
                )
                continue
            planned.append(
                PlannedExercise(
                    exercise=exercise,
                    domain=domain,
                    min_level=min_level(exercise, active_program_id),
                    execution_method=method,
                    matches_user_equipment=self._resolver.matches_user_equipment(
                        exercise, method, profile
                    ),
                )
            )
        return planned

    def generate_workout_plan(
        self,
        profile: UserProfile,
        catalog: Mapping[TrainingDomain, Sequence[Exercise]],
        target_duration: Optional[int] = None,
        park: Optional[Park] = None,
        intensity: WorkoutIntensity | str = WorkoutIntensity.NORMAL,
        program: Optional[ProgramTemplate] = None,
        location: Optional[ExecutionLocation | str] = None,
    ) -> WorkoutPlan:
        """
        Generate a workout plan.

        Args:
            profile: User profile snapshot
            catalog: Exercises per focus domain (missing domains contribute none)
            target_duration: Target minutes (default from constructor)
            park: Park whose fixed equipment is available, if any
            intensity: Requested intensity bucket
            program: Template of the active enrollment, if any
            location: Workout location (default park when a park is given,
                street otherwise)

        Returns:
            WorkoutPlan; may contain zero exercises, callers must check
            plan.is_empty.
        """
        intensity = WorkoutIntensity(intensity)
        if location is None:
            location = ExecutionLocation.PARK if park is not None else ExecutionLocation.STREET
        location = ExecutionLocation(location)

        shape, domains = self.resolve_focus(profile, program)

        groups: Dict[TrainingDomain, List[PlannedExercise]] = {}
        # Exercises without domain affinity are offered to every domain; plan each once
        seen: Set[str] = set()
        for domain in domains:
            if shape == ProgramShape.NONE:
                level = domain_level(profile, domain)
            else:
                level = effective_level(profile, domain)
            planned = self.exercises_for_domain(
                profile=profile,
                domain=domain,
                level=level,
                intensity=intensity,
                catalog=catalog.get(domain, []),
                location=location,
                park=park,
            )
            groups[domain] = [item for item in planned if item.exercise.id not in seen]
            seen.update(item.exercise.id for item in groups[domain])

        ordered_groups = [groups[d] for d in domains]
        if shape == ProgramShape.MASTER:
            exercises = interleave_by_domain(ordered_groups)
        else:
            exercises = [item for group in ordered_groups for item in group]

        plan = WorkoutPlan(
            name=self._plan_name(shape, profile, program),
            exercises=exercises,
            focus_domains=domains,
            estimated_duration=target_duration or self._default_duration,
            program_shape=shape,
        )

        logger.info(
            f"Generated {shape.value} plan for user {profile.id}: "
            f"{len(exercises)} exercises across {[d.value for d in domains]} "
            f"(intensity={intensity.value}, location={location.value})"
        )
        if plan.is_empty:
            logger.warning(f"Plan for user {profile.id} has no exercises")

        return plan
