from typing import Optional

from src.showdown_predictor.enums import Side, SpeedVerdict
from src.showdown_predictor.knowledge_base import DEFAULT_KNOWLEDGE_BASE, KnowledgeBase
from src.showdown_predictor.schema.battle_pokemon import RosterEntry
from src.showdown_predictor.schema.battle_state import BattleState
from src.showdown_predictor.schema.report import SpeedAnalysis, SpeedRange
from src.showdown_predictor.utils.mon_factory import speed_bounds

TAILWIND_MULTIPLIER = 2


def speed_range(name: str, knowledge_base: Optional[KnowledgeBase] = None) -> SpeedRange:
    """Slowest and fastest plausible speed for a species"""
    kb = knowledge_base or DEFAULT_KNOWLEDGE_BASE
    slowest, fastest = speed_bounds(kb.species(name).baseSpeed)
    return SpeedRange(min=slowest, max=fastest)


def _has_priority(entry: Optional[RosterEntry], kb: KnowledgeBase) -> bool:
    return entry is not None and any(kb.move(m).is_priority for m in entry.moves)


def analyze_speed(state: BattleState, knowledge_base: Optional[KnowledgeBase] = None) -> Optional[SpeedAnalysis]:
    """Who moves first between the two actives, None until both are known"""
    kb = knowledge_base or DEFAULT_KNOWLEDGE_BASE
    own = state.active_entry(Side.SELF)
    their = state.active_entry(Side.OPPONENT)
    if own is None or their is None:
        return None

    own_range = speed_range(own.name, kb)
    their_range = speed_range(their.name, kb)

    # "Likely" speed assumes full investment
    own_likely = own_range.max * (TAILWIND_MULTIPLIER if state.field.tailwind_on(Side.SELF) else 1)
    their_likely = their_range.max * (TAILWIND_MULTIPLIER if state.field.tailwind_on(Side.OPPONENT) else 1)

    if own_likely > their_likely:
        verdict = SpeedVerdict.FASTER
        detail = "Likely faster (%d vs %d)" % (own_likely, their_likely)
    elif own_likely < their_likely:
        verdict = SpeedVerdict.OUTSPED
        detail = "Outsped (%d vs %d)" % (own_likely, their_likely)
    else:
        verdict = SpeedVerdict.SPEED_TIE
        detail = "Speed tie (%d vs %d)" % (own_likely, their_likely)

    detail += " [ranges: %d-%d vs %d-%d]" % (own_range.min, own_range.max, their_range.min, their_range.max)

    if state.field.trickRoom:
        if verdict is SpeedVerdict.FASTER:
            verdict = SpeedVerdict.OUTSPED
        elif verdict is SpeedVerdict.OUTSPED:
            verdict = SpeedVerdict.FASTER
        detail += " [Trick Room active]"

    return SpeedAnalysis(
        verdict=verdict,
        detail=detail,
        selfSpeed=own_range,
        opponentSpeed=their_range,
        selfPriority=_has_priority(own, kb),
        opponentPriority=_has_priority(their, kb),
        trickRoom=state.field.trickRoom,
    )
