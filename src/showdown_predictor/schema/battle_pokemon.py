from typing import Optional

from pydantic import BaseModel, Field

from src.showdown_predictor.constants import DEFAULT_BOOST_STAGE, MAX_BOOST_STAGE, MAX_HP_PERCENT, MIN_BOOST_STAGE, NUM_STATS
from src.showdown_predictor.enums import Status, Type
from src.showdown_predictor.schema.species_info import SpeciesInfo


def clamp_stage(stage: int) -> int:
    return max(MIN_BOOST_STAGE, min(MAX_BOOST_STAGE, stage))


class RosterEntry(BaseModel):
    """One creature on one team, as reconstructed from observations"""

    name: str  # canonical name, also the Team key

    # Health as a percentage of max HP
    hp: float = Field(ge=0.0, le=MAX_HP_PERCENT, default=MAX_HP_PERCENT)
    status: Status = Status.NONE

    # Append-only within a battle
    moves: list[str] = Field(default_factory=list)

    item: str = ""
    ability: str = ""

    # Terastallization
    teraType: Optional[Type] = None
    terastallized: bool = False

    # Boost stages (-6..+6) indexed by STAT_* constants, HP slot unused
    statStages: list[int] = Field(default_factory=lambda: [DEFAULT_BOOST_STAGE] * NUM_STATS, min_length=NUM_STATS, max_length=NUM_STATS)

    # Actual stats read from a tooltip ("atk", "def", "spa", "spd", "spe")
    stats: Optional[dict[str, int]] = None

    # Seen on the field, not just listed in the own switch menu
    revealed: bool = False

    # =========================================================================
    # STATE CHECK METHODS
    # =========================================================================

    @property
    def fainted(self) -> bool:
        return self.status.is_fainted() or self.hp <= 0

    def knows_move(self, move_name: str) -> bool:
        lowered = move_name.lower()
        return any(m.lower() == lowered for m in self.moves)

    # =========================================================================
    # MUTATION METHODS - each is idempotent for a repeated identical reading
    # =========================================================================

    def learn_move(self, move_name: str) -> bool:
        """Record a sighted move, returns True if it was new"""
        move_name = move_name.strip()
        if not move_name or self.knows_move(move_name):
            return False
        self.moves.append(move_name)
        return True

    def set_hp(self, hp: float) -> None:
        # Reaching 0 reads as fainted, only faint() makes it permanent
        self.hp = max(0.0, min(MAX_HP_PERCENT, hp))

    def take_damage(self, percent: float) -> None:
        self.set_hp(self.hp - max(0.0, percent))

    def heal(self, percent: float) -> None:
        if self.fainted:
            return
        self.set_hp(self.hp + max(0.0, percent))

    def faint(self) -> None:
        self.hp = 0.0
        self.status = Status.FAINTED

    def set_status(self, status: Status) -> None:
        # A fainted creature keeps its fainted marker
        if self.fainted and status is not Status.FAINTED:
            return
        if status is Status.FAINTED:
            self.faint()
            return
        self.status = status

    def terastallize(self, tera_type: Type) -> None:
        self.teraType = tera_type
        self.terastallized = True

    def stage(self, stat_index: int) -> int:
        return self.statStages[stat_index]

    def change_stage(self, stat_index: int, delta: int) -> None:
        self.statStages[stat_index] = clamp_stage(self.statStages[stat_index] + delta)

    def reset_stages(self) -> None:
        self.statStages = [DEFAULT_BOOST_STAGE] * NUM_STATS


class Combatant(BaseModel):
    """Everything the damage formula needs to know about one side of an exchange"""

    species: SpeciesInfo
    types: list[Type] = Field(min_length=1, max_length=2)
    stats: Optional[dict[str, int]] = None
    statStages: list[int] = Field(default_factory=lambda: [DEFAULT_BOOST_STAGE] * NUM_STATS, min_length=NUM_STATS, max_length=NUM_STATS)
    ability: str = ""
    item: str = ""
    hp: float = Field(ge=0.0, le=MAX_HP_PERCENT, default=MAX_HP_PERCENT)
    status: Status = Status.NONE
    teraType: Optional[Type] = None
    terastallized: bool = False

    @property
    def effective_types(self) -> list[Type]:
        """Defensive typing - a terastallized combatant has only its tera type"""
        if self.terastallized and self.teraType is not None:
            return [self.teraType]
        return self.types
