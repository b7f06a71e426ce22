from src.showdown_predictor.enums.type import Type
from src.showdown_predictor.enums.status import Status
from src.showdown_predictor.enums.move import MoveCategory, MoveFlag
from src.showdown_predictor.enums.other import (
    Archetype,
    EffectivenessClass,
    EvidenceSource,
    Hazard,
    LogEventKind,
    ScreenPosition,
    Side,
    SideResolutionMethod,
    SpeedVerdict,
    SwitchLikelihood,
    Terrain,
    Weather,
)
