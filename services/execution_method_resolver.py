"""
Execution method resolution.

Picks the single best performable variant of an exercise for a location,
given the park's installed equipment and the user's gear, or decides the
exercise cannot be performed there.

Gear categories are tried in a location-dependent order:
- home / office / school: user gear, then improvised
- park / gym: fixed equipment, then user gear, then improvised
- anywhere else (street): user gear, then improvised

User-gear ownership is only checked when verify_user_gear is enabled.
Until profiles reliably carry owned gear, the default accepts any
user-gear method.
"""

import logging
from typing import Dict, Iterable, List, Optional

from models.exercise import (
    EquipmentRequirementType,
    ExecutionLocation,
    ExecutionMethod,
    Exercise,
    GymEquipment,
    Park,
    RequiredGearType,
)
from models.profile import UserProfile

logger = logging.getLogger(__name__)


GEAR_PRIORITY: Dict[ExecutionLocation, List[RequiredGearType]] = {
    ExecutionLocation.HOME: [RequiredGearType.USER_GEAR, RequiredGearType.IMPROVISED],
    ExecutionLocation.OFFICE: [RequiredGearType.USER_GEAR, RequiredGearType.IMPROVISED],
    ExecutionLocation.SCHOOL: [RequiredGearType.USER_GEAR, RequiredGearType.IMPROVISED],
    ExecutionLocation.PARK: [
        RequiredGearType.FIXED_EQUIPMENT,
        RequiredGearType.USER_GEAR,
        RequiredGearType.IMPROVISED,
    ],
    ExecutionLocation.GYM: [
        RequiredGearType.FIXED_EQUIPMENT,
        RequiredGearType.USER_GEAR,
        RequiredGearType.IMPROVISED,
    ],
}

DEFAULT_GEAR_PRIORITY: List[RequiredGearType] = [
    RequiredGearType.USER_GEAR,
    RequiredGearType.IMPROVISED,
]

# Generic urban assets found in almost any public space
KNOWN_URBAN_ASSETS = ("bench", "step", "stairs", "wall", "bar")


def gear_priority(location: ExecutionLocation | str) -> List[RequiredGearType]:
    """Gear categories to try, in order, at a location."""
    return GEAR_PRIORITY.get(ExecutionLocation(location), DEFAULT_GEAR_PRIORITY)


class ExecutionMethodResolver:
    """
    Resolves execution methods and exercise feasibility.

    Stateless apart from the gear-ownership policy.
    """

    def __init__(self, verify_user_gear: bool = False):
        """
        Initialize the resolver.

        Args:
            verify_user_gear: Require the user to own user-gear items
                (set membership against the profile's equipment).
        """
        self._verify_user_gear = verify_user_gear

    def owns_gear(self, profile: Optional[UserProfile], gear_id: Optional[str]) -> bool:
        """Whether the user has a gear item, under the ownership policy."""
        if not self._verify_user_gear or not gear_id:
            return True
        if profile is None:
            return False
        return gear_id in profile.equipment.owned_gear_ids()

    def _accepts(
        self,
        method: ExecutionMethod,
        park: Optional[Park],
        profile: Optional[UserProfile],
    ) -> bool:
        if method.required_gear_type == RequiredGearType.FIXED_EQUIPMENT:
            return park is not None and park.has_equipment(method.gear_id)
        if method.required_gear_type == RequiredGearType.USER_GEAR:
            return self.owns_gear(profile, method.gear_id)
        # Improvised items (chair, door, wall) are always at hand
        return True

    def select_execution_method(
        self,
        exercise: Exercise,
        location: ExecutionLocation | str,
        park: Optional[Park],
        profile: Optional[UserProfile],
    ) -> Optional[ExecutionMethod]:
        """
        Pick the best performable execution method at a location.

        Args:
            exercise: Catalog exercise
            location: Where the workout happens
            park: Park whose fixed equipment is available, if any
            profile: User profile (gear ownership)

        Returns:
            The first acceptable method in gear-priority order, or None if
            the exercise cannot be performed at this location.
        """
        location = ExecutionLocation(location)
        location_methods = exercise.methods_for(location)
        if not location_methods:
            return None

        for gear_type in gear_priority(location):
            for method in location_methods:
                if method.required_gear_type != gear_type:
                    continue
                if self._accepts(method, park, profile):
                    return method

        return None

    def select_execution_method_with_brand(
        self,
        exercise: Exercise,
        location: ExecutionLocation | str,
        park: Optional[Park],
        profile: Optional[UserProfile],
        gym_equipment: Iterable[GymEquipment] = (),
    ) -> Optional[ExecutionMethod]:
        """
        Like select_execution_method, preferring brand-matched park equipment.

        At a park, a fixed-equipment method whose station is installed wins
        outright. When the installed brand has a brand-specific video in the
        equipment definition, a copy of the method with that video as main
        video is returned.
        """
        location = ExecutionLocation(location)
        if location == ExecutionLocation.PARK and park is not None:
            definitions = {eq.id: eq for eq in gym_equipment}
            for method in exercise.methods_for(location):
                if method.required_gear_type != RequiredGearType.FIXED_EQUIPMENT:
                    continue
                if not method.gear_id:
                    continue
                installed = park.find_equipment(method.gear_id)
                if installed is None:
                    continue

                definition = definitions.get(method.gear_id)
                brand = definition.brand(installed.brand_name) if definition else None
                if brand is not None and brand.video_url:
                    media = method.media.model_copy(
                        update={"main_video_url": brand.video_url}
                    )
                    return method.model_copy(update={"media": media})
                return method

        return self.select_execution_method(exercise, location, park, profile)

    def matches_user_equipment(
        self,
        exercise: Exercise,
        method: Optional[ExecutionMethod],
        profile: Optional[UserProfile],
    ) -> bool:
        """
        Whether an exercise is planned because of gear the user owns.

        Always checks real ownership, regardless of verify_user_gear.
        """
        if profile is None:
            return False
        owned = profile.equipment.owned_gear_ids()
        if not owned:
            return False

        if (
            method is not None
            and method.required_gear_type == RequiredGearType.USER_GEAR
            and method.gear_id in owned
        ):
            return True

        for requirement in exercise.alternative_equipment_requirements:
            if requirement.type == EquipmentRequirementType.USER_GEAR:
                if requirement.gear_id in owned:
                    return True
            elif requirement.type == EquipmentRequirementType.GYM_EQUIPMENT:
                if requirement.equipment_id in owned:
                    return True
        return False

    def can_perform_exercise(
        self,
        exercise: Exercise,
        park: Optional[Park],
        profile: Optional[UserProfile],
        location: ExecutionLocation | str = ExecutionLocation.PARK,
    ) -> bool:
        """
        Check whether an exercise is performable at all.

        True when an execution method resolves. Otherwise the alternative
        equipment requirements are checked in priority order and any one
        satisfied is enough. Exercises without alternatives fall back to
        the legacy single-field requirements; no requirement at all means
        the exercise is trivially performable.
        """
        if self.select_execution_method(exercise, location, park, profile):
            return True

        if exercise.alternative_equipment_requirements:
            requirements = sorted(
                exercise.alternative_equipment_requirements,
                key=lambda r: r.priority,
            )
            for requirement in requirements:
                if requirement.type == EquipmentRequirementType.GYM_EQUIPMENT:
                    if park is not None and park.has_equipment(requirement.equipment_id):
                        return True
                elif requirement.type == EquipmentRequirementType.URBAN_ASSET:
                    if requirement.urban_asset_name:
                        asset = requirement.urban_asset_name.lower()
                        if not any(known in asset for known in KNOWN_URBAN_ASSETS):
                            logger.debug(
                                f"Unrecognized urban asset '{requirement.urban_asset_name}' "
                                f"on {exercise.id}, assuming available"
                            )
                        return True
                elif requirement.type == EquipmentRequirementType.USER_GEAR:
                    if requirement.gear_id and self.owns_gear(profile, requirement.gear_id):
                        return True
            return False

        if exercise.required_gym_equipment:
            if park is None or not park.has_equipment(exercise.required_gym_equipment):
                return False

        for gear_id in exercise.required_user_gear:
            if not self.owns_gear(profile, gear_id):
                return False

        return True
