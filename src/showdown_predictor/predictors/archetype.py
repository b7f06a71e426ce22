from typing import Optional

from src.showdown_predictor.constants import (
    BULKY_STAT_SUM,
    FAST_BASE_SPEED,
    HO_MIN_FAST_MEMBERS,
    HO_MIN_SETUP_SIGHTINGS,
    STALL_MIN_BULKY_MEMBERS,
    STALL_MIN_RECOVERY_SIGHTINGS,
)
from src.showdown_predictor.enums import Archetype
from src.showdown_predictor.knowledge_base import DEFAULT_KNOWLEDGE_BASE, KnowledgeBase
from src.showdown_predictor.predictors.scoring import signal
from src.showdown_predictor.schema.battle_state import Team
from src.showdown_predictor.schema.report import ArchetypeResult


def classify_archetype(team: Team, knowledge_base: Optional[KnowledgeBase] = None) -> ArchetypeResult:
    """
    Classify a team from what has been seen of it so far

    Hyper Offense: enough fast members or enough setup moves sighted
    Stall: enough recovery moves sighted or enough bulky members
    Balance: everything else, including an empty roster
    """
    kb = knowledge_base or DEFAULT_KNOWLEDGE_BASE

    fast = bulky = setup = recovery = 0
    for entry in team.entries():
        info = kb.species(entry.name)
        if not info.isUnknown:
            if info.baseSpeed > FAST_BASE_SPEED:
                fast += 1
            if info.bulk > BULKY_STAT_SUM:
                bulky += 1
        for move_name in entry.moves:
            move = kb.move(move_name)
            if move.is_setup:
                setup += 1
            if move.is_recovery:
                recovery += 1

    counts = dict(fastMembers=fast, bulkyMembers=bulky, setupSightings=setup, recoverySightings=recovery)

    if fast >= HO_MIN_FAST_MEMBERS or setup >= HO_MIN_SETUP_SIGHTINGS:
        trail = (
            signal("fast_members", fast, "%d fast members" % fast) if fast >= HO_MIN_FAST_MEMBERS else None,
            signal("setup_sightings", setup, "%d setup moves seen" % setup) if setup >= HO_MIN_SETUP_SIGHTINGS else None,
        )
        return ArchetypeResult(archetype=Archetype.HYPER_OFFENSE, trail=tuple(s for s in trail if s), **counts)

    if recovery >= STALL_MIN_RECOVERY_SIGHTINGS or bulky >= STALL_MIN_BULKY_MEMBERS:
        trail = (
            signal("recovery_sightings", recovery, "%d recovery moves seen" % recovery) if recovery >= STALL_MIN_RECOVERY_SIGHTINGS else None,
            signal("bulky_members", bulky, "%d bulky members" % bulky) if bulky >= STALL_MIN_BULKY_MEMBERS else None,
        )
        return ArchetypeResult(archetype=Archetype.STALL, trail=tuple(s for s in trail if s), **counts)

    return ArchetypeResult(archetype=Archetype.BALANCE, **counts)
