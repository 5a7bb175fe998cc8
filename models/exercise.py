"""
Exercise catalog, equipment and program template models.

Catalog entries are owned by the content-management side and treated as
immutable inputs for the duration of one generation call.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class ExerciseType(str, Enum):
    """How an exercise is measured."""

    REPS = "reps"
    TIME = "time"
    REST = "rest"


class ExecutionLocation(str, Enum):
    """Where an execution method can be performed."""

    HOME = "home"
    OFFICE = "office"
    SCHOOL = "school"
    PARK = "park"
    GYM = "gym"
    STREET = "street"


class RequiredGearType(str, Enum):
    """What kind of gear an execution method depends on."""

    FIXED_EQUIPMENT = "fixed_equipment"
    USER_GEAR = "user_gear"
    IMPROVISED = "improvised"


class EquipmentRequirementType(str, Enum):
    """Kinds of alternative equipment requirements."""

    GYM_EQUIPMENT = "gym_equipment"
    URBAN_ASSET = "urban_asset"
    USER_GEAR = "user_gear"


class InstructionalVideo(BaseModel):
    url: str
    language: Optional[str] = None
    title: Optional[str] = None


class ExecutionMedia(BaseModel):
    main_video_url: Optional[str] = None
    image_url: Optional[str] = None
    instructional_videos: List[InstructionalVideo] = []


class ExecutionMethod(BaseModel):
    """
    One concrete, location-specific way to perform an exercise.

    gear_id refers to a gym equipment id (fixed_equipment), a gear
    definition id (user_gear) or an improvised item name such as
    'chair' or 'door' (improvised).
    """

    location: ExecutionLocation
    required_gear_type: RequiredGearType
    gear_id: Optional[str] = None
    media: ExecutionMedia = Field(default_factory=ExecutionMedia)


class AlternativeEquipmentRequirement(BaseModel):
    """Equipment option checked in priority order (1 = highest)."""

    priority: int = Field(default=1, ge=1)
    type: EquipmentRequirementType
    equipment_id: Optional[str] = None
    gear_id: Optional[str] = None
    urban_asset_name: Optional[str] = None


class TargetProgramRef(BaseModel):
    """Program-specific target level recorded on an exercise."""

    program_id: str
    level: int = Field(ge=1)


class Exercise(BaseModel):
    """Exercise catalog entry."""

    id: str
    name: Dict[str, str] = Field(
        default_factory=dict,
        description="Localized name keyed by language code",
    )
    type: ExerciseType = ExerciseType.REPS
    program_ids: List[str] = []
    muscle_groups: List[str] = []
    equipment: List[str] = []
    tags: List[str] = []
    execution_methods: List[ExecutionMethod] = []
    target_programs: List[TargetProgramRef] = []
    # Legacy single-field requirements
    required_gym_equipment: Optional[str] = None
    required_user_gear: List[str] = []
    alternative_equipment_requirements: List[AlternativeEquipmentRequirement] = []
    movement_group: Optional[str] = None
    base_movement_id: Optional[str] = None

    def methods_for(self, location: ExecutionLocation) -> List[ExecutionMethod]:
        """Execution methods available at a location."""
        return [m for m in self.execution_methods if m.location == location]


class ParkEquipment(BaseModel):
    """A fixed equipment station installed in a park."""

    equipment_id: str
    brand_name: Optional[str] = None


class Park(BaseModel):
    """A park and its installed fixed equipment."""

    id: str
    name: Optional[str] = None
    gym_equipment: List[ParkEquipment] = []

    def has_equipment(self, equipment_id: Optional[str]) -> bool:
        if not equipment_id:
            return False
        return any(eq.equipment_id == equipment_id for eq in self.gym_equipment)

    def find_equipment(self, equipment_id: str) -> Optional[ParkEquipment]:
        for eq in self.gym_equipment:
            if eq.equipment_id == equipment_id:
                return eq
        return None


class EquipmentBrand(BaseModel):
    brand_name: str
    video_url: Optional[str] = None


class GymEquipment(BaseModel):
    """Fixed gym equipment definition with brand-specific media."""

    id: str
    name: str
    brands: List[EquipmentBrand] = []

    def brand(self, brand_name: Optional[str]) -> Optional[EquipmentBrand]:
        if not brand_name:
            return None
        for brand in self.brands:
            if brand.brand_name == brand_name:
                return brand
        return None


class GearDefinition(BaseModel):
    """Personal gear a user can own (used for display labels)."""

    id: str
    name: Dict[str, str] = {}
    category: Optional[str] = None


class ProgramTemplate(BaseModel):
    """Program template from the program catalog."""

    id: str
    name: Optional[str] = None
    is_master: bool = False
    sub_programs: List[str] = []
