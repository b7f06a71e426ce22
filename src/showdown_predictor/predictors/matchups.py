from typing import Iterable, Optional

from src.showdown_predictor.constants import MAX_MON_MOVES, TYPE_MUL_NOT_EFFECTIVE, TYPE_MUL_SUPER_EFFECTIVE
from src.showdown_predictor.enums import Side, Type
from src.showdown_predictor.knowledge_base import KnowledgeBase
from src.showdown_predictor.schema.battle_pokemon import Combatant, RosterEntry
from src.showdown_predictor.schema.battle_state import BattleState
from src.showdown_predictor.type_effectiveness import TypeEffectiveness
from src.showdown_predictor.utils.mon_factory import create_combatant, speed_bounds


def stab_types(entry: Optional[RosterEntry], kb: KnowledgeBase, name: Optional[str] = None) -> list[Type]:
    """Attacking types that carry STAB - the species types, plus the tera type once used"""
    info = kb.species(entry.name if entry is not None else name or "")
    types = list(info.types)
    if entry is not None and entry.terastallized and entry.teraType is not None and entry.teraType not in types:
        types.append(entry.teraType)
    return types


def defensive_types(entry: Optional[RosterEntry], kb: KnowledgeBase, name: Optional[str] = None) -> list[Type]:
    if entry is not None and entry.terastallized and entry.teraType is not None:
        return [entry.teraType]
    return list(kb.species(entry.name if entry is not None else name or "").types)


def hits_super_effectively(attacking: Iterable[Type], defending: Iterable[Type]) -> bool:
    """Any of the attacking types is super effective on the typing"""
    defending = list(defending)
    return any(TypeEffectiveness.calculate_effectiveness(t, defending) >= TYPE_MUL_SUPER_EFFECTIVE for t in attacking)


def resists_all(attacking: Iterable[Type], defending: Iterable[Type]) -> bool:
    """The typing resists (or is immune to) every attacking type"""
    attacking, defending = list(attacking), list(defending)
    if not attacking:
        return False
    return all(TypeEffectiveness.calculate_effectiveness(t, defending) <= TYPE_MUL_NOT_EFFECTIVE for t in attacking)


def likely_speed(entry: Optional[RosterEntry], kb: KnowledgeBase, name: Optional[str] = None) -> int:
    """Fastest plausible speed, or the tooltip reading when one was observed"""
    if entry is not None and entry.stats and entry.stats.get("spe"):
        return entry.stats["spe"]
    info = kb.species(entry.name if entry is not None else name or "")
    return speed_bounds(info.baseSpeed)[1]


def candidate_moves(entry: Optional[RosterEntry], kb: KnowledgeBase, name: Optional[str] = None) -> list[str]:
    """Known moves, padded from the species' common sets up to a full moveset"""
    moves = list(entry.moves) if entry is not None else []
    lowered = {m.lower() for m in moves}
    info = kb.species(entry.name if entry is not None else name or "")
    for common_set in info.commonSets:
        for move in common_set.moves:
            if len(moves) >= MAX_MON_MOVES:
                return moves
            if move.lower() not in lowered:
                moves.append(move)
                lowered.add(move.lower())
    return moves


class ActiveMatchup:
    """Both actives of a snapshot, resolved against the knowledge base"""

    def __init__(self, state: BattleState, kb: KnowledgeBase):
        self.state = state
        self.kb = kb
        self.own = state.active_entry(Side.SELF)
        self.their = state.active_entry(Side.OPPONENT)

    @property
    def complete(self) -> bool:
        return self.own is not None and self.their is not None

    def combatant(self, side: Side) -> Combatant:
        return create_combatant(self.own if side is Side.SELF else self.their, knowledge_base=self.kb)

    def bench(self, side: Side) -> list[RosterEntry]:
        team = self.state.team(side)
        return team.healthy_members(exclude=self.state.active(side))
