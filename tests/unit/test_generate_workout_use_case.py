"""
Tests for GenerateWorkoutUseCase and SwapExerciseUseCase.
"""

import pytest

from application.exceptions import (
    ExerciseNotFoundError,
    ProfileNotFoundError,
    WorkoutGenerationError,
)
from application.use_cases import GenerateWorkoutUseCase, SwapExerciseUseCase
from models.exercise import GearDefinition, ProgramTemplate
from models.profile import ActiveProgramEnrollment, MasterProgramSubLevels
from models.workout import ProgramShape
from services.gear_catalog import GearCatalog, GearDefinitionCache
from tests.fakes import (
    FailingExerciseRepository,
    FakeExerciseRepository,
    FakeGearRepository,
    FakeParkRepository,
    FakeProfileRepository,
    FakeProgramRepository,
    make_exercise,
    make_park,
    make_profile,
    method,
)


@pytest.fixture
def gear_cache():
    repo = FakeGearRepository(
        gear_definitions=[GearDefinition(id="rings", name={"he": "טבעות", "en": "Rings"})]
    )
    return GearDefinitionCache(repo.get_all_gear_definitions, repo.get_all_gym_equipment)


@pytest.fixture
def master_profile():
    return make_profile(
        "user-1",
        enrollment=ActiveProgramEnrollment(id="enr-1", template_id="master-1"),
        sub_levels={"enr-1": MasterProgramSubLevels(upper_body_level=2)},
    )


@pytest.fixture
def repos(master_profile):
    return {
        "profile_repo": FakeProfileRepository([master_profile]),
        "program_repo": FakeProgramRepository([
            ProgramTemplate(
                id="master-1",
                name="Master",
                is_master=True,
                sub_programs=["upper_body", "lower_body"],
            )
        ]),
        "exercise_repo": FakeExerciseRepository([
            make_exercise("pushup", program_ids=["upper_body"]),
            make_exercise("ring-row", program_ids=["upper_body"], methods=[method("park", "user_gear", "rings")]),
            make_exercise("squat", program_ids=["lower_body"]),
        ]),
        "park_repo": FakeParkRepository([make_park("park-1", "dip-station")]),
    }


@pytest.mark.unit
class TestGenerateWorkoutUseCase:

    def test_generates_master_plan(self, repos, gear_cache):
        use_case = GenerateWorkoutUseCase(**repos, gear_catalog=GearCatalog(gear_cache, "en"))

        result = use_case.execute("user-1", park_id="park-1")

        assert result.plan.program_shape == ProgramShape.MASTER
        assert [i.exercise.id for i in result.plan.exercises] == ["pushup", "squat", "ring-row"]
        assert result.metadata["park_id"] == "park-1"
        assert result.metadata["effective_levels"] == {"upper_body": 2, "lower_body": 1}
        assert repos["program_repo"].lookups == ["master-1"]

    def test_gear_labels_applied(self, repos, gear_cache):
        use_case = GenerateWorkoutUseCase(**repos, gear_catalog=GearCatalog(gear_cache, "en"))

        result = use_case.execute("user-1", park_id="park-1")

        labels = {i.exercise.id: i.gear_label for i in result.plan.exercises}
        assert labels["ring-row"] == "Rings"
        assert labels["pushup"] == "No equipment"

    def test_missing_program_template_degrades_to_regular(self, repos):
        repos["program_repo"].reset()
        use_case = GenerateWorkoutUseCase(**repos)

        result = use_case.execute("user-1")

        assert result.plan.program_shape == ProgramShape.REGULAR

    def test_unknown_park_means_no_fixed_equipment(self, repos):
        use_case = GenerateWorkoutUseCase(**repos)

        result = use_case.execute("user-1", park_id="nowhere", location="park")

        assert result.metadata["park_id"] is None
        assert not result.plan.is_empty

    def test_missing_profile_raises(self, repos):
        use_case = GenerateWorkoutUseCase(**repos)

        with pytest.raises(ProfileNotFoundError):
            use_case.execute("ghost")

    def test_catalog_failure_surfaces_as_generation_error(self, repos):
        repos["exercise_repo"] = FailingExerciseRepository()
        use_case = GenerateWorkoutUseCase(**repos)

        with pytest.raises(WorkoutGenerationError) as exc_info:
            use_case.execute("user-1")

        assert str(exc_info.value) == "Could not generate workout"
        assert isinstance(exc_info.value.__cause__, ConnectionError)


@pytest.mark.unit
class TestSwapExerciseUseCase:

    @pytest.fixture
    def use_case(self, repos, gear_cache):
        repos["exercise_repo"].seed([
            make_exercise("pushup-wide", program_ids=["upper_body"], base_movement_id="push"),
            make_exercise("pushup-diamond", program_ids=["upper_body"], base_movement_id="push"),
            make_exercise("dip", program_ids=["upper_body"], movement_group="press"),
            make_exercise("pike-pushup", program_ids=["upper_body"], movement_group="press"),
        ])
        return SwapExerciseUseCase(
            profile_repo=repos["profile_repo"],
            exercise_repo=repos["exercise_repo"],
            park_repo=repos["park_repo"],
            gear_cache=gear_cache,
        )

    def test_returns_variations_and_alternatives(self, use_case):
        response = use_case.execute("user-1", "pushup-wide")

        assert [o.exercise.id for o in response.variations] == ["pushup-diamond"]
        assert response.alternatives == []

    def test_alternatives_by_movement_group(self, use_case):
        response = use_case.execute("user-1", "dip", location="street")

        assert [o.exercise.id for o in response.alternatives] == ["pike-pushup"]

    def test_unknown_exercise_raises(self, use_case):
        with pytest.raises(ExerciseNotFoundError):
            use_case.execute("user-1", "nope")

    def test_unknown_profile_raises(self, use_case):
        with pytest.raises(ProfileNotFoundError):
            use_case.execute("ghost", "dip")
