"""
Observation channel contract

The Observation Source delivers these as a closed tagged union. Every kind
carries a literal ``kind`` discriminator so raw payloads can be validated with
``OBSERVATION_ADAPTER.validate_python(payload)``.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter

from src.showdown_predictor.enums import Hazard, LogEventKind, ScreenPosition, Side, Terrain, Weather
from src.showdown_predictor.schema.battle_state import MoveOption


class VisualSighting(BaseModel):
    """A creature seen on a status bar, team icon or tooltip"""

    kind: Literal["visual"] = "visual"
    side: Side = Side.UNKNOWN
    rawName: str

    # Physical slot ("p1" / "p2") and on-screen position when the surface exposes them
    slot: Optional[str] = None
    position: Optional[ScreenPosition] = None

    active: bool = False  # seen on an active status bar
    hp: Optional[float] = Field(default=None, ge=0.0, le=100.0)
    statusToken: Optional[str] = None
    item: Optional[str] = None
    ability: Optional[str] = None
    teraType: Optional[str] = None
    stats: Optional[dict[str, int]] = None
    moves: list[str] = Field(default_factory=list)
    fainted: Optional[bool] = None


class LogLine(BaseModel):
    """One line of battle narration at its 0-based position in the log"""

    kind: Literal["log"] = "log"
    index: int = Field(ge=0)
    text: str


class SwitchCandidate(BaseModel):
    name: str


class MenuSnapshot(BaseModel):
    """Own move and switch menus - always belongs to the local player"""

    kind: Literal["menu"] = "menu"
    ownMoves: list[MoveOption] = Field(default_factory=list)
    ownSwitchCandidates: list[SwitchCandidate] = Field(default_factory=list)
    forcedSwitch: bool = False


class TurnMarker(BaseModel):
    kind: Literal["turn"] = "turn"
    turn: int = Field(ge=0)


class PlayerIdentity(BaseModel):
    """Display names shown on the battle surface"""

    kind: Literal["players"] = "players"
    selfName: Optional[str] = None
    opponentName: Optional[str] = None
    slotNames: dict[str, str] = Field(default_factory=dict)  # {"p1": "Alice", "p2": "Bob"}


Observation = Annotated[
    Union[VisualSighting, LogLine, MenuSnapshot, TurnMarker, PlayerIdentity],
    Field(discriminator="kind"),
]

OBSERVATION_ADAPTER: TypeAdapter[Observation] = TypeAdapter(Observation)


class LogEvent(BaseModel):
    """One template match extracted from a narration line"""

    kind: LogEventKind
    side: Side = Side.UNKNOWN
    subject: Optional[str] = None  # creature name as narrated, owner prefix removed
    playerName: Optional[str] = None  # owner named in the line, when any
    value: Optional[str] = None  # move, item, ability, tera type or status token
    amount: Optional[float] = None  # percent, boost stages or turn number

    stat: Optional[int] = None  # STAT_* index for boosts
    hazard: Optional[Hazard] = None
    weather: Optional[Weather] = None
    terrain: Optional[Terrain] = None
    on: Optional[bool] = None  # trick room / tailwind toggles
