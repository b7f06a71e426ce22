from pydantic import BaseModel, ConfigDict, Field

from src.showdown_predictor.enums import Type


class CommonSet(BaseModel):
    """A typical competitive set for a species"""

    model_config = ConfigDict(frozen=True)

    item: str = ""
    nature: str = "Serious"
    moves: list[str] = Field(default_factory=list, max_length=4)


class SpeciesInfo(BaseModel):
    """Static species record - read-only reference data"""

    model_config = ConfigDict(frozen=True)

    name: str

    # Types
    types: list[Type] = Field(min_length=1, max_length=2)

    # Base stats
    baseHP: int = Field(ge=1, le=255)
    baseAttack: int = Field(ge=1, le=255)
    baseDefense: int = Field(ge=1, le=255)
    baseSpAttack: int = Field(ge=1, le=255)
    baseSpDefense: int = Field(ge=1, le=255)
    baseSpeed: int = Field(ge=1, le=255)

    abilities: list[str] = Field(default_factory=list)
    commonSets: list[CommonSet] = Field(default_factory=list)

    # Set on placeholder records returned for unknown names
    isUnknown: bool = False
    note: str = ""

    @property
    def default_ability(self) -> str:
        return self.abilities[0] if self.abilities else ""

    @property
    def bulk(self) -> int:
        return self.baseHP + self.baseDefense + self.baseSpDefense

    def base_stat(self, key: str) -> int:
        """Base stat by short key ("hp", "atk", "def", "spa", "spd", "spe")"""
        return {
            "hp": self.baseHP,
            "atk": self.baseAttack,
            "def": self.baseDefense,
            "spa": self.baseSpAttack,
            "spd": self.baseSpDefense,
            "spe": self.baseSpeed,
        }[key]
