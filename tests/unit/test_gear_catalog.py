"""
Unit tests for services/gear_catalog.py
"""

import pytest

from models.exercise import GearDefinition, GymEquipment
from services.gear_catalog import GearCatalog, GearDefinitionCache, TTLCache
from tests.fakes import FakeGearRepository


class FakeClock:
    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def gear_repo():
    return FakeGearRepository(
        gear_definitions=[
            GearDefinition(id="g-rings", name={"he": "טבעות אולימפיות", "en": "Olympic rings"}),
        ],
        gym_equipment=[GymEquipment(id="eq-bar", name="Pull-up bar")],
    )


@pytest.fixture
def cache(gear_repo, clock):
    return GearDefinitionCache(
        load_gear_definitions=gear_repo.get_all_gear_definitions,
        load_gym_equipment=gear_repo.get_all_gym_equipment,
        ttl_seconds=60,
        clock=clock,
    )


@pytest.mark.unit
class TestTTLCache:

    def test_loads_once_within_ttl(self, gear_repo, cache, clock):
        cache.gear_definitions()
        clock.now = 59
        cache.gear_definitions()
        assert gear_repo.gear_loads == 1

    def test_reloads_after_ttl(self, gear_repo, cache, clock):
        cache.gear_definitions()
        clock.now = 61
        cache.gear_definitions()
        assert gear_repo.gear_loads == 2

    def test_invalidate_forces_reload(self, gear_repo, cache):
        cache.gear_definitions()
        cache.gym_equipment()
        cache.invalidate()
        cache.gear_definitions()
        cache.gym_equipment()
        assert gear_repo.gear_loads == 2
        assert gear_repo.gym_loads == 2

    def test_failed_load_is_not_cached(self, gear_repo, cache):
        gear_repo.fail = True
        assert cache.gear_definitions() == []
        gear_repo.fail = False
        assert len(cache.gear_definitions()) == 1
        assert gear_repo.gear_loads == 2


@pytest.mark.unit
class TestGearLabel:

    @pytest.fixture
    def catalog(self, cache):
        return GearCatalog(cache)

    def test_no_gear(self, catalog):
        assert catalog.gear_label("improvised", None) == "ללא ציוד"
        assert catalog.gear_label("user_gear", None, language="en") == "No equipment"

    def test_improvised_item(self, catalog):
        assert catalog.gear_label("improvised", "Chair", language="en") == "Chair"
        assert catalog.gear_label("improvised", "boulder") == "boulder"

    def test_user_gear_from_definitions(self, catalog):
        assert catalog.gear_label("user_gear", "g-rings") == "טבעות אולימפיות"
        assert catalog.gear_label("user_gear", "g-rings", language="en") == "Olympic rings"

    def test_user_gear_keyword_fallback(self, catalog):
        assert catalog.gear_label("user_gear", "dumbbell_set_5kg", language="en") == "Dumbbells"
        assert catalog.gear_label("user_gear", "mystery-item") == "mystery-item"

    def test_fixed_equipment_name(self, catalog):
        assert catalog.gear_label("fixed_equipment", "eq-bar") == "Pull-up bar"
        assert catalog.gear_label("fixed_equipment", "eq-unknown") == "eq-unknown"
