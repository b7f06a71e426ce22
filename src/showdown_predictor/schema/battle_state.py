from typing import Optional

from pydantic import BaseModel, Field

from src.showdown_predictor.constants import MAX_SPIKES_LAYERS, MAX_TEAM_SIZE, MAX_TOXIC_SPIKES_LAYERS
from src.showdown_predictor.enums import Hazard, Side, Terrain, Weather
from src.showdown_predictor.name_canonicalizer import same
from src.showdown_predictor.schema.battle_pokemon import RosterEntry


class HazardState(BaseModel):
    """Entry hazards laid on one side of the field"""

    stealthRock: bool = False
    spikes: int = Field(ge=0, le=MAX_SPIKES_LAYERS, default=0)
    toxicSpikes: int = Field(ge=0, le=MAX_TOXIC_SPIKES_LAYERS, default=0)
    stickyWeb: bool = False

    def add(self, hazard: Hazard) -> None:
        """Lay one layer, saturating at the game maximum"""
        match hazard:
            case Hazard.STEALTH_ROCK:
                self.stealthRock = True
            case Hazard.SPIKES:
                self.spikes = min(MAX_SPIKES_LAYERS, self.spikes + 1)
            case Hazard.TOXIC_SPIKES:
                self.toxicSpikes = min(MAX_TOXIC_SPIKES_LAYERS, self.toxicSpikes + 1)
            case Hazard.STICKY_WEB:
                self.stickyWeb = True

    def remove(self, hazard: Optional[Hazard] = None) -> None:
        """Clear one hazard kind, or all of them when hazard is None"""
        if hazard in (None, Hazard.STEALTH_ROCK):
            self.stealthRock = False
        if hazard in (None, Hazard.SPIKES):
            self.spikes = 0
        if hazard in (None, Hazard.TOXIC_SPIKES):
            self.toxicSpikes = 0
        if hazard in (None, Hazard.STICKY_WEB):
            self.stickyWeb = False


class FieldState(BaseModel):
    """Field-wide and side-bound conditions - side lists are indexed by Side.SELF / Side.OPPONENT"""

    weather: Weather = Weather.NONE
    terrain: Terrain = Terrain.NONE
    hazards: list[HazardState] = Field(default_factory=lambda: [HazardState(), HazardState()], min_length=2, max_length=2)
    trickRoom: bool = False
    tailwind: list[bool] = Field(default_factory=lambda: [False, False], min_length=2, max_length=2)

    def hazards_on(self, side: Side) -> HazardState:
        return self.hazards[side]

    def tailwind_on(self, side: Side) -> bool:
        return self.tailwind[side]


class MoveOption(BaseModel):
    """One button of the own move menu"""

    name: str
    type: str = ""
    disabled: bool = False


class Team(BaseModel):
    """Discovery-ordered roster for one side, keyed by canonical name"""

    side: Side
    members: dict[str, RosterEntry] = Field(default_factory=dict)

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def __len__(self) -> int:
        return len(self.members)

    @property
    def names(self) -> list[str]:
        return list(self.members)

    def entries(self) -> list[RosterEntry]:
        return list(self.members.values())

    def is_full(self) -> bool:
        return len(self.members) >= MAX_TEAM_SIZE

    def find(self, name: str) -> Optional[str]:
        """Key of the member matching name exactly or as a form of the same creature"""
        if not name:
            return None
        if name in self.members:
            return name
        for key in self.members:
            if same(key, name):
                return key
        return None

    def get(self, name: Optional[str]) -> Optional[RosterEntry]:
        if not name:
            return None
        key = self.find(name)
        return self.members[key] if key is not None else None

    def add(self, entry: RosterEntry) -> bool:
        if entry.name in self.members or self.is_full():
            return False
        self.members[entry.name] = entry
        return True

    def pop(self, key: str) -> RosterEntry:
        return self.members.pop(key)

    def rename(self, old_key: str, new_key: str) -> None:
        """Re-key a member in place, keeping discovery order and all other fields"""
        rebuilt: dict[str, RosterEntry] = {}
        for key, entry in self.members.items():
            if key == old_key:
                entry.name = new_key
                rebuilt[new_key] = entry
            else:
                rebuilt[key] = entry
        self.members = rebuilt

    def healthy_members(self, exclude: Optional[str] = None) -> list[RosterEntry]:
        return [m for m in self.members.values() if m.name != exclude and not m.fainted]


class BattleState(BaseModel):
    """Aggregate root of one battle"""

    selfTeam: Team = Field(default_factory=lambda: Team(side=Side.SELF))
    opponentTeam: Team = Field(default_factory=lambda: Team(side=Side.OPPONENT))
    selfActive: Optional[str] = None
    opponentActive: Optional[str] = None
    field: FieldState = Field(default_factory=FieldState)
    turn: int = Field(ge=0, default=0)
    forcedSwitch: bool = False
    legalMoves: list[MoveOption] = Field(default_factory=list)
    legalSwitches: list[str] = Field(default_factory=list)

    # Display names captured for narration matching
    selfPlayerName: Optional[str] = None
    opponentPlayerName: Optional[str] = None

    def team(self, side: Side) -> Team:
        if side is Side.SELF:
            return self.selfTeam
        if side is Side.OPPONENT:
            return self.opponentTeam
        raise ValueError("Side must be SELF or OPPONENT")

    def active(self, side: Side) -> Optional[str]:
        return self.selfActive if side is Side.SELF else self.opponentActive

    def set_active(self, side: Side, name: Optional[str]) -> None:
        if side is Side.SELF:
            self.selfActive = name
        elif side is Side.OPPONENT:
            self.opponentActive = name

    def active_entry(self, side: Side) -> Optional[RosterEntry]:
        return self.team(side).get(self.active(side))

    def snapshot(self) -> "BattleState":
        """Independent deep copy for the read-only analysis path"""
        return self.model_copy(deep=True)
