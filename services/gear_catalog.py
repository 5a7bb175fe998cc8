"""
Gear display labels.

Maps (gear type, gear id) pairs from execution methods to human-readable
labels. Gear definitions and gym equipment are read through an explicitly
owned cache with a TTL and an invalidation hook. The cache is built once at
service start and handed to whoever needs it; nothing here is module-global.

Labels are display-only; no selection logic depends on them.
"""

import logging
import threading
import time
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from models.exercise import GearDefinition, GymEquipment, RequiredGearType

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Improvised item id -> label
IMPROVISED_ITEMS: Dict[str, Dict[str, str]] = {
    "chair": {"he": "כיסא", "en": "Chair"},
    "door": {"he": "דלת", "en": "Door"},
    "wall": {"he": "קיר", "en": "Wall"},
    "stairs": {"he": "מדרגות", "en": "Stairs"},
    "bench": {"he": "ספסל", "en": "Bench"},
    "streetbench": {"he": "ספסל רחוב", "en": "Street bench"},
    "street_bench": {"he": "ספסל רחוב", "en": "Street bench"},
    "table": {"he": "שולחן", "en": "Table"},
}

# Equipment type keyword -> label, used when a gear definition is missing
EQUIPMENT_TYPE_LABELS: Dict[str, Dict[str, str]] = {
    "rings": {"he": "טבעות", "en": "Rings"},
    "dumbbell": {"he": "משקולות", "en": "Dumbbells"},
    "band": {"he": "גומיות התנגדות", "en": "Resistance bands"},
    "pullupbar": {"he": "מתח", "en": "Pull-up bar"},
    "mat": {"he": "מזרן", "en": "Mat"},
    "kettlebell": {"he": "כדור ברזל", "en": "Kettlebell"},
    "bench": {"he": "ספסל", "en": "Bench"},
    "lowbar": {"he": "מוט נמוך", "en": "Low bar"},
    "highbar": {"he": "מוט גבוה", "en": "High bar"},
    "dipstation": {"he": "מקבילים", "en": "Dip station"},
    "wall": {"he": "קיר", "en": "Wall"},
    "stairs": {"he": "מדרגות", "en": "Stairs"},
    "bar": {"he": "מוט", "en": "Bar"},
}

NO_GEAR_LABEL = {"he": "ללא ציוד", "en": "No equipment"}


class TTLCache(Generic[T]):
    """
    Single-value cache filled by a loader, expiring after ttl_seconds.

    A failed load is logged and yields an empty list without being cached,
    so the next access retries.
    """

    def __init__(
        self,
        loader: Callable[[], List[T]],
        ttl_seconds: float = 3600,
        clock: Callable[[], float] = time.monotonic,
        name: str = "cache",
    ):
        self._loader = loader
        self._ttl = ttl_seconds
        self._clock = clock
        self._name = name
        self._value: Optional[List[T]] = None
        self._loaded_at = 0.0
        self._lock = threading.Lock()

    def get(self) -> List[T]:
        with self._lock:
            if self._value is not None and self._clock() - self._loaded_at < self._ttl:
                return self._value
            try:
                value = self._loader()
            except Exception as e:
                logger.warning(f"Failed to load {self._name}: {e}")
                return []
            self._value = list(value)
            self._loaded_at = self._clock()
            logger.info(f"Loaded {len(self._value)} entries into {self._name}")
            return self._value

    def invalidate(self) -> None:
        with self._lock:
            self._value = None


class GearDefinitionCache:
    """Gear definitions and gym equipment, each behind its own TTL cache."""

    def __init__(
        self,
        load_gear_definitions: Callable[[], List[GearDefinition]],
        load_gym_equipment: Callable[[], List[GymEquipment]],
        ttl_seconds: float = 3600,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._gear = TTLCache(
            load_gear_definitions, ttl_seconds, clock, name="gear definitions cache"
        )
        self._gym = TTLCache(
            load_gym_equipment, ttl_seconds, clock, name="gym equipment cache"
        )

    def gear_definitions(self) -> List[GearDefinition]:
        return self._gear.get()

    def gym_equipment(self) -> List[GymEquipment]:
        return self._gym.get()

    def invalidate(self) -> None:
        """Drop cached data; the next access reloads."""
        self._gear.invalidate()
        self._gym.invalidate()


def _localized(labels: Dict[str, str], language: str) -> str:
    return labels.get(language) or labels.get("he") or next(iter(labels.values()), "")


class GearCatalog:
    """Resolves display labels for execution-method gear."""

    def __init__(self, cache: GearDefinitionCache, language: str = "he"):
        self._cache = cache
        self._language = language

    def gear_label(
        self,
        gear_type: RequiredGearType | str,
        gear_id: Optional[str],
        language: Optional[str] = None,
    ) -> str:
        """
        Display label for a piece of gear.

        Unknown ids fall back to the id itself.
        """
        language = language or self._language
        gear_type = RequiredGearType(gear_type)
        if not gear_id:
            return _localized(NO_GEAR_LABEL, language)

        key = gear_id.lower()

        if gear_type == RequiredGearType.IMPROVISED:
            if key in IMPROVISED_ITEMS:
                return _localized(IMPROVISED_ITEMS[key], language)
            return gear_id

        if gear_type == RequiredGearType.USER_GEAR:
            for gear in self._cache.gear_definitions():
                if gear.id == gear_id and gear.name:
                    return _localized(gear.name, language)
            compact = key.replace("_", "").replace("-", "")
            for keyword, labels in EQUIPMENT_TYPE_LABELS.items():
                if keyword in compact:
                    return _localized(labels, language)
            return gear_id

        for equipment in self._cache.gym_equipment():
            if equipment.id == gear_id:
                return equipment.name
        return gear_id
