from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.showdown_predictor.enums import Archetype, EffectivenessClass, SpeedVerdict, SwitchLikelihood
from src.showdown_predictor.schema.battle_state import FieldState


class Signal(BaseModel):
    """One named, weighted contribution to a heuristic score"""

    model_config = ConfigDict(frozen=True)

    name: str
    weight: float
    reason: str = ""
    override: bool = False  # replaces the running score instead of adding to it


class ScoreResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: float
    trail: tuple[Signal, ...] = ()

    @property
    def reasons(self) -> list[str]:
        return [s.reason for s in self.trail if s.reason]


class DamageEstimate(BaseModel):
    model_config = ConfigDict(frozen=True)

    minPercent: float = 0
    maxPercent: float = 0
    effectiveness: float = 1.0

    @property
    def effectiveness_class(self) -> EffectivenessClass:
        return EffectivenessClass.from_multiplier(self.effectiveness)


class SwitchPrediction(BaseModel):
    likelihood: SwitchLikelihood = SwitchLikelihood.LOW
    score: float = 0
    trail: tuple[Signal, ...] = ()


class MovePrediction(BaseModel):
    name: str
    probability: int = 0
    rawScore: float = 0
    damage: DamageEstimate = Field(default_factory=DamageEstimate)
    trail: tuple[Signal, ...] = ()


class ArchetypeResult(BaseModel):
    archetype: Archetype = Archetype.BALANCE
    fastMembers: int = 0
    bulkyMembers: int = 0
    setupSightings: int = 0
    recoverySightings: int = 0
    trail: tuple[Signal, ...] = ()


class SpeedRange(BaseModel):
    min: int
    max: int


class SpeedAnalysis(BaseModel):
    verdict: SpeedVerdict
    detail: str
    selfSpeed: SpeedRange
    opponentSpeed: SpeedRange
    selfPriority: bool = False
    opponentPriority: bool = False
    trickRoom: bool = False


class MoveRecommendation(BaseModel):
    name: str
    score: float
    damage: DamageEstimate = Field(default_factory=DamageEstimate)
    trail: tuple[Signal, ...] = ()


class SwitchRecommendation(BaseModel):
    name: str
    score: float
    bestDamage: float = 0
    maxIncomingDamage: float = 0
    trail: tuple[Signal, ...] = ()


class RecommendedAction(BaseModel):
    action: Literal["move", "switch"]
    name: str
    score: float


class Report(BaseModel):
    """Per-turn analysis handed to the presentation layer"""

    switchPrediction: SwitchPrediction
    opponentMovePredictions: list[MovePrediction] = Field(default_factory=list)
    selfArchetype: ArchetypeResult
    opponentArchetype: ArchetypeResult
    speedVerdict: Optional[SpeedAnalysis] = None
    moveRecommendations: list[MoveRecommendation] = Field(default_factory=list)
    switchRecommendations: list[SwitchRecommendation] = Field(default_factory=list)
    bestAction: Optional[RecommendedAction] = None
    forcedSwitch: bool = False
    turn: int = 0
    selfActive: Optional[str] = None
    opponentActive: Optional[str] = None
    field: FieldState = Field(default_factory=FieldState)
    notes: list[str] = Field(default_factory=list)
