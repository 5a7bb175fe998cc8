"""
Unit tests for services/exercise_selector.py
"""

import pytest

from application.exceptions import UnknownDomainError
from models.profile import TrainingDomain
from models.workout import WorkoutIntensity
from services.exercise_selector import ExerciseSelector, intensity_window, min_level
from tests.fakes import make_exercise

PROGRAM = "upper-program"


def ladder(max_level: int = 10):
    """One upper-body exercise per level, 1..max_level."""
    return [
        make_exercise(f"ex-{level}", program_ids=["upper_body"], levels={PROGRAM: level})
        for level in range(1, max_level + 1)
    ]


def ids(exercises):
    return [ex.id for ex in exercises]


@pytest.fixture
def selector():
    return ExerciseSelector()


@pytest.mark.unit
class TestMinLevel:
    """Program-specific entry level."""

    def test_program_level_used(self):
        exercise = make_exercise("dip", levels={PROGRAM: 5, "other": 2})
        assert min_level(exercise, PROGRAM) == 5

    def test_defaults_to_one_without_matching_program(self):
        exercise = make_exercise("dip", levels={"other": 8})
        assert min_level(exercise, PROGRAM) == 1

    def test_defaults_to_one_without_active_program(self):
        exercise = make_exercise("dip", levels={PROGRAM: 8})
        assert min_level(exercise, None) == 1


@pytest.mark.unit
class TestIntensityWindow:

    def test_windows(self):
        assert intensity_window(5, WorkoutIntensity.HIGH) == (5, 6)
        assert intensity_window(5, "normal") == (3, 5)
        assert intensity_window(5, WorkoutIntensity.LOW) == (0, 2)


@pytest.mark.unit
class TestSelectCandidates:
    """Safety, bucketing and fallback."""

    @pytest.mark.parametrize("intensity", list(WorkoutIntensity))
    @pytest.mark.parametrize("level", [1, 3, 6, 9])
    def test_never_returns_exercise_above_level_plus_one(self, selector, intensity, level):
        result = selector.select_candidates(
            TrainingDomain.UPPER_BODY, level, intensity, PROGRAM, ladder()
        )
        assert all(min_level(ex, PROGRAM) <= level + 1 for ex in result)

    def test_high_bucket_inclusive(self, selector):
        result = selector.select_candidates(
            TrainingDomain.UPPER_BODY, 3, WorkoutIntensity.HIGH, PROGRAM, ladder()
        )
        assert ids(result) == ["ex-3", "ex-4"]

    def test_normal_bucket_inclusive(self, selector):
        result = selector.select_candidates(
            TrainingDomain.UPPER_BODY, 3, WorkoutIntensity.NORMAL, PROGRAM, ladder()
        )
        assert ids(result) == ["ex-1", "ex-2", "ex-3"]

    def test_low_bucket(self, selector):
        result = selector.select_candidates(
            TrainingDomain.UPPER_BODY, 8, WorkoutIntensity.LOW, PROGRAM, ladder()
        )
        assert ids(result) == ["ex-3", "ex-4", "ex-5"]

    def test_empty_bucket_falls_back_to_safe_list(self, selector):
        result = selector.select_candidates(
            TrainingDomain.UPPER_BODY, 1, WorkoutIntensity.LOW, PROGRAM, ladder()
        )
        assert ids(result) == ["ex-1", "ex-2"]

    def test_nothing_safe_returns_empty(self, selector):
        catalog = [make_exercise("hard", program_ids=["upper_body"], levels={PROGRAM: 9})]
        result = selector.select_candidates(
            TrainingDomain.UPPER_BODY, 2, WorkoutIntensity.NORMAL, PROGRAM, catalog
        )
        assert result == []

    def test_filters_by_domain_affinity(self, selector):
        catalog = [
            make_exercise("pushup", program_ids=["upper_body"]),
            make_exercise("squat", program_ids=["lower_body"]),
            make_exercise("burpee"),
        ]
        result = selector.select_candidates(
            TrainingDomain.UPPER_BODY, 1, WorkoutIntensity.NORMAL, None, catalog
        )
        assert ids(result) == ["pushup", "burpee"]

    def test_unknown_domain_raises(self, selector):
        with pytest.raises(UnknownDomainError):
            selector.select_candidates("yoga", 1, WorkoutIntensity.NORMAL, None, [])
