from typing import Optional

from src.showdown_predictor.constants import (
    SWITCH_HIGH_THRESHOLD,
    SWITCH_LOW_HP_THRESHOLD,
    SWITCH_MEDIUM_THRESHOLD,
    SWITCH_SCORE_MAX,
    SWITCH_SCORE_MIN,
    SWITCH_WEIGHT_HYPER_OFFENSE,
    SWITCH_WEIGHT_LOW_HP_NO_COUNTER,
    SWITCH_WEIGHT_LOW_HP_WITH_COUNTER,
    SWITCH_WEIGHT_NO_BENCH_ANSWER,
    SWITCH_WEIGHT_RESISTED,
    SWITCH_WEIGHT_STALL,
    SWITCH_WEIGHT_TYPE_DISADVANTAGE,
)
from src.showdown_predictor.enums import Archetype, Side, SwitchLikelihood
from src.showdown_predictor.knowledge_base import DEFAULT_KNOWLEDGE_BASE, KnowledgeBase
from src.showdown_predictor.predictors.archetype import classify_archetype
from src.showdown_predictor.predictors.matchups import ActiveMatchup, defensive_types, hits_super_effectively, resists_all, stab_types
from src.showdown_predictor.predictors.scoring import fold_signals, signal
from src.showdown_predictor.schema.battle_state import BattleState
from src.showdown_predictor.schema.report import SwitchPrediction


def bucket(score: float) -> SwitchLikelihood:
    if score >= SWITCH_HIGH_THRESHOLD:
        return SwitchLikelihood.HIGH
    if score >= SWITCH_MEDIUM_THRESHOLD:
        return SwitchLikelihood.MEDIUM
    return SwitchLikelihood.LOW


def predict_switch(state: BattleState, knowledge_base: Optional[KnowledgeBase] = None) -> SwitchPrediction:
    """How likely the opponent is to switch out their active this turn"""
    kb = knowledge_base or DEFAULT_KNOWLEDGE_BASE
    matchup = ActiveMatchup(state, kb)
    if not matchup.complete:
        return SwitchPrediction()

    our_stab = stab_types(matchup.own, kb)
    their_typing = defensive_types(matchup.their, kb)
    counters = [m.name for m in matchup.bench(Side.OPPONENT) if resists_all(our_stab, defensive_types(m, kb))]
    archetype = classify_archetype(state.opponentTeam, kb).archetype

    low_hp = matchup.their.hp < SWITCH_LOW_HP_THRESHOLD
    signals = [
        signal("type_disadvantage", SWITCH_WEIGHT_TYPE_DISADVANTAGE, "%s is hit super effectively" % matchup.their.name)
        if hits_super_effectively(our_stab, their_typing)
        else None,
        signal("low_hp_with_counter", SWITCH_WEIGHT_LOW_HP_WITH_COUNTER, "low HP, %s can come in" % counters[0])
        if low_hp and counters
        else None,
        signal("low_hp", SWITCH_WEIGHT_LOW_HP_NO_COUNTER, "low HP (%d%%)" % matchup.their.hp) if low_hp and not counters else None,
        signal("stall_team", SWITCH_WEIGHT_STALL, "stall teams switch often") if archetype is Archetype.STALL else None,
        signal("offense_team", SWITCH_WEIGHT_HYPER_OFFENSE, "offensive teams stay in") if archetype is Archetype.HYPER_OFFENSE else None,
        signal("resisted", SWITCH_WEIGHT_RESISTED, "%s resists our attacks" % matchup.their.name) if resists_all(our_stab, their_typing) else None,
        signal("no_bench_answer", SWITCH_WEIGHT_NO_BENCH_ANSWER, "no known switch-in resists us") if not counters else None,
    ]

    result = fold_signals(0, signals, lower=SWITCH_SCORE_MIN, upper=SWITCH_SCORE_MAX)
    return SwitchPrediction(likelihood=bucket(result.score), score=result.score, trail=result.trail)
