from pydantic import BaseModel, ConfigDict, Field

from src.showdown_predictor.enums import MoveCategory, MoveFlag, Type


class MoveSpec(BaseModel):
    """Static move record - read-only reference data"""

    model_config = ConfigDict(frozen=True)

    name: str
    power: int = Field(ge=0, le=300)  # base power, 0 for status and variable-power moves
    type: Type
    category: MoveCategory
    priority: int = Field(ge=-7, le=5)
    accuracy: int = Field(ge=0, le=100)
    flags: MoveFlag = MoveFlag.NONE

    # Set on placeholder records returned for unknown names
    isUnknown: bool = False
    note: str = ""

    # =========================================================================
    # FLAG CHECK METHODS
    # =========================================================================

    def has_flag(self, flag: MoveFlag) -> bool:
        return bool(self.flags & flag)

    @property
    def is_status(self) -> bool:
        return self.category == MoveCategory.STATUS

    @property
    def is_physical(self) -> bool:
        return self.category == MoveCategory.PHYSICAL

    @property
    def is_setup(self) -> bool:
        return self.has_flag(MoveFlag.SETUP)

    @property
    def is_recovery(self) -> bool:
        return self.has_flag(MoveFlag.RECOVERY)

    @property
    def is_pivot(self) -> bool:
        return self.has_flag(MoveFlag.PIVOT)

    @property
    def is_hazard(self) -> bool:
        return self.has_flag(MoveFlag.HAZARD)

    @property
    def is_priority(self) -> bool:
        return self.priority > 0
