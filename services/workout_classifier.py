"""
Workout classification.

Analyzes the structure of an assembled workout (reps, rest, sets, tags of
its strength segments) to assign a training-style label, and checks the
workout's focus against the user's declared goals.

Free-text tags and focus strings are normalized once through keyword
tables into WorkoutTag / UserGoal values; every decision below is made
over those enums.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Set, Tuple

from models.workout import (
    ClassificationResult,
    SegmentType,
    UserGoal,
    WorkoutClassification,
    WorkoutData,
    WorkoutSegment,
)

logger = logging.getLogger(__name__)


class WorkoutTag(str, Enum):
    """Segment tags that influence classification."""

    EXPLOSIVE = "explosive"
    SKILL = "skill"
    BALANCE = "balance"
    TECHNIQUE = "technique"
    STABILITY = "stability"


# Keyword (lowercase substring) -> tag. Hebrew keywords included.
TAG_KEYWORDS: Tuple[Tuple[str, WorkoutTag], ...] = (
    ("explosive", WorkoutTag.EXPLOSIVE),
    ("skill", WorkoutTag.SKILL),
    ("balance", WorkoutTag.BALANCE),
    ("איזון", WorkoutTag.BALANCE),
    ("technique", WorkoutTag.TECHNIQUE),
    ("טכניקה", WorkoutTag.TECHNIQUE),
    ("stability", WorkoutTag.STABILITY),
    ("יציבות", WorkoutTag.STABILITY),
)

# Any one of these marks a skills workout; plain "skill" tags need two segments
SKILL_TAGS: Set[WorkoutTag] = {
    WorkoutTag.BALANCE,
    WorkoutTag.TECHNIQUE,
    WorkoutTag.STABILITY,
}

# Workout focus keyword -> goal
FOCUS_GOAL_KEYWORDS: Tuple[Tuple[str, UserGoal], ...] = (
    ("abs", UserGoal.GLUTES_ABS),
    ("core", UserGoal.GLUTES_ABS),
    ("בטן", UserGoal.GLUTES_ABS),
    ("skill", UserGoal.SKILLS),
    ("technique", UserGoal.SKILLS),
    ("טכניקה", UserGoal.SKILLS),
    ("mass", UserGoal.MASS_BUILDING),
    ("bulk", UserGoal.MASS_BUILDING),
    ("מסה", UserGoal.MASS_BUILDING),
    ("fat", UserGoal.FAT_LOSS),
    ("loss", UserGoal.FAT_LOSS),
    ("חיטוב", UserGoal.FAT_LOSS),
)

# Targeted muscle keyword -> goal
MUSCLE_GOAL_KEYWORDS: Tuple[Tuple[str, UserGoal], ...] = (
    ("glutes", UserGoal.GLUTES_ABS),
    ("ישבן", UserGoal.GLUTES_ABS),
    ("core", UserGoal.GLUTES_ABS),
    ("בטן", UserGoal.GLUTES_ABS),
)

CLASSIFICATION_LABELS: Dict[str, Dict[WorkoutClassification, str]] = {
    "he": {
        WorkoutClassification.STRENGTH: "אימון כוח",
        WorkoutClassification.VOLUME: "אימון נפח",
        WorkoutClassification.ENDURANCE: "אימון סיבולת",
        WorkoutClassification.SKILLS: "אימון טכניקה",
        WorkoutClassification.HIIT: "אימון HIIT",
        WorkoutClassification.GENERAL: "אימון כללי",
    },
    "en": {
        WorkoutClassification.STRENGTH: "Strength workout",
        WorkoutClassification.VOLUME: "Volume workout",
        WorkoutClassification.ENDURANCE: "Endurance workout",
        WorkoutClassification.SKILLS: "Skills workout",
        WorkoutClassification.HIIT: "HIIT workout",
        WorkoutClassification.GENERAL: "General workout",
    },
}

_NUMBER = re.compile(r"(\d+)")


def parse_tags(raw_tags: Iterable[str]) -> Set[WorkoutTag]:
    """Normalize free-text tags into WorkoutTag values."""
    tags: Set[WorkoutTag] = set()
    for raw in raw_tags:
        lowered = raw.lower()
        for keyword, tag in TAG_KEYWORDS:
            if keyword in lowered:
                tags.add(tag)
    return tags


def parse_reps(reps_or_duration: Optional[str | int]) -> Optional[int]:
    """First integer in a reps string such as '15 חזרות' or '10 reps'."""
    if reps_or_duration is None:
        return None
    if isinstance(reps_or_duration, int):
        return reps_or_duration
    match = _NUMBER.search(reps_or_duration)
    return int(match.group(1)) if match else None


def _match_keywords(text: str, table: Tuple[Tuple[str, UserGoal], ...]) -> List[UserGoal]:
    lowered = text.lower()
    return [goal for keyword, goal in table if keyword in lowered]


def map_focus_to_goals(focus: str, muscles: Iterable[str] = ()) -> List[UserGoal]:
    """Goals implied by a workout's focus and targeted muscles (deduplicated)."""
    goals: List[UserGoal] = []
    candidates = _match_keywords(focus, FOCUS_GOAL_KEYWORDS) if focus else []
    for muscle in muscles:
        candidates.extend(_match_keywords(muscle, MUSCLE_GOAL_KEYWORDS))
    for goal in candidates:
        if goal not in goals:
            goals.append(goal)
    return goals


@dataclass
class StrengthProfile:
    """Aggregate statistics over a workout's strength segments."""

    mean_reps: float
    mean_rest: float
    has_rest: bool
    mean_sets: float
    explosive_count: int
    skill_count: int
    tags: Set[WorkoutTag]

    @classmethod
    def from_segments(cls, segments: List[WorkoutSegment]) -> "StrengthProfile":
        reps = [r for r in (parse_reps(s.reps_or_duration) for s in segments) if r is not None]
        rests = [s.rest for s in segments if s.rest is not None]
        total_sets = sum(s.sets or 0 for s in segments)

        all_tags: Set[WorkoutTag] = set()
        explosive_count = 0
        skill_count = 0
        for segment in segments:
            segment_tags = parse_tags(segment.tags)
            all_tags |= segment_tags
            if WorkoutTag.EXPLOSIVE in segment_tags:
                explosive_count += 1
            if WorkoutTag.SKILL in segment_tags:
                skill_count += 1

        return cls(
            mean_reps=sum(reps) / len(reps) if reps else 0.0,
            mean_rest=sum(rests) / len(rests) if rests else 0.0,
            has_rest=bool(rests),
            mean_sets=total_sets / len(segments) if segments else 0.0,
            explosive_count=explosive_count,
            skill_count=skill_count,
            tags=all_tags,
        )


def _structural_classification(stats: StrengthProfile) -> WorkoutClassification:
    # First match wins
    if stats.has_rest and stats.mean_rest < 30 and stats.explosive_count > 0:
        return WorkoutClassification.HIIT
    if stats.skill_count >= 2 or stats.tags & SKILL_TAGS:
        return WorkoutClassification.SKILLS
    if stats.mean_reps < 6 and stats.mean_rest > 90:
        return WorkoutClassification.STRENGTH
    if 8 <= stats.mean_reps <= 12 and stats.mean_sets > 3:
        return WorkoutClassification.VOLUME
    if stats.mean_reps > 15 or stats.mean_rest < 45:
        return WorkoutClassification.ENDURANCE
    return WorkoutClassification.GENERAL


# Goal that a matching classification adds when the user declared it
CLASSIFICATION_GOALS: Dict[WorkoutClassification, UserGoal] = {
    WorkoutClassification.HIIT: UserGoal.FAT_LOSS,
    WorkoutClassification.SKILLS: UserGoal.SKILLS,
}


def classify_workout(
    workout: WorkoutData,
    user_goals: Optional[Iterable[str]] = None,
) -> ClassificationResult:
    """
    Classify a workout's training style and goal alignment.

    Args:
        workout: Assembled workout structure
        user_goals: Goal tags the user declared

    Returns:
        ClassificationResult. matched_goals is None unless personalized.
    """
    declared = {str(getattr(g, "value", g)) for g in (user_goals or [])}

    focus = workout.focus or workout.focus_area or ""
    matched = [
        goal.value
        for goal in map_focus_to_goals(focus, workout.muscles)
        if goal.value in declared
    ]

    strength_segments = [s for s in workout.segments if s.type == SegmentType.STRENGTH]
    if not strength_segments:
        classification = WorkoutClassification.ENDURANCE
    else:
        stats = StrengthProfile.from_segments(strength_segments)
        classification = _structural_classification(stats)
        logger.debug(
            f"Workout stats: reps={stats.mean_reps:.1f} rest={stats.mean_rest:.0f}s "
            f"sets={stats.mean_sets:.1f} -> {classification.value}"
        )

    style_goal = CLASSIFICATION_GOALS.get(classification)
    if style_goal is not None and style_goal.value in declared:
        matched = [style_goal.value] + [g for g in matched if g != style_goal.value]

    return ClassificationResult(
        classification=classification,
        is_personalized=bool(matched),
        matched_goals=matched or None,
    )


def classification_label(
    classification: WorkoutClassification | str,
    language: str = "he",
) -> str:
    """Display label for a classification."""
    labels = CLASSIFICATION_LABELS.get(language, CLASSIFICATION_LABELS["he"])
    return labels.get(
        WorkoutClassification(classification),
        labels[WorkoutClassification.GENERAL],
    )
