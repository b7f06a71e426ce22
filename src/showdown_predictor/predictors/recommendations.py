"""
Move and switch recommendations for the local player

Both recommenders score every option with the same signal fold the
predictors use, so each score comes with the reasons behind it.
"""

import logging
from typing import Optional

from src.showdown_predictor.constants import (
    FORCED_OHKO_RISK_DAMAGE,
    FORCED_WALL_DAMAGE,
    FORCED_WEIGHT_FASTER,
    FORCED_WEIGHT_OHKO_RISK,
    FORCED_WEIGHT_SLOWER,
    FORCED_WEIGHT_WALLS,
    RECOMMEND_EARLY_HAZARD_TURN,
    RECOMMEND_IMMUNE_SCORE,
    RECOMMEND_RECOVERY_HP_THRESHOLD,
    RECOMMEND_SAFE_RECOVERY_DAMAGE,
    RECOMMEND_SAFE_SETUP_DAMAGE,
    RECOMMEND_WEIGHT_COVERAGE,
    RECOMMEND_WEIGHT_GUARANTEED_KO,
    RECOMMEND_WEIGHT_HAZARD,
    RECOMMEND_WEIGHT_PIVOT,
    RECOMMEND_WEIGHT_POSSIBLE_KO,
    RECOMMEND_WEIGHT_PRIORITY,
    RECOMMEND_WEIGHT_PRIORITY_KO,
    RECOMMEND_WEIGHT_RECOVERY,
    RECOMMEND_WEIGHT_SAFE_SETUP,
    RECOMMEND_WEIGHT_UNSAFE_SETUP,
    SWITCH_IN_BASE_SCORE,
    SWITCH_IN_DECENT_DAMAGE,
    SWITCH_IN_SIGNIFICANT_DAMAGE,
    SWITCH_IN_WEIGHT_DECENT,
    SWITCH_IN_WEIGHT_KO,
    SWITCH_IN_WEIGHT_RESISTS_STAB,
    SWITCH_IN_WEIGHT_SIGNIFICANT,
    SWITCH_IN_WEIGHT_WEAK_OFFENSE,
    SWITCH_IN_WEIGHT_WEAK_TO_STAB,
    VOLUNTARY_MODERATE_DAMAGE,
    VOLUNTARY_RESIST_DAMAGE,
    VOLUNTARY_WEIGHT_FASTER,
    VOLUNTARY_WEIGHT_HEAVY,
    VOLUNTARY_WEIGHT_MODERATE,
    VOLUNTARY_WEIGHT_RESISTS,
)
from src.showdown_predictor.damage_calculator import DamageCalculator
from src.showdown_predictor.enums import EffectivenessClass, Side, SwitchLikelihood
from src.showdown_predictor.knowledge_base import DEFAULT_KNOWLEDGE_BASE, KnowledgeBase
from src.showdown_predictor.predictors.matchups import ActiveMatchup, defensive_types, hits_super_effectively, likely_speed, resists_all, stab_types
from src.showdown_predictor.predictors.opponent_moves import predict_opponent_moves
from src.showdown_predictor.predictors.scoring import fold_signals, override, signal
from src.showdown_predictor.predictors.speed import speed_range
from src.showdown_predictor.predictors.switch_prediction import predict_switch
from src.showdown_predictor.schema.battle_pokemon import RosterEntry
from src.showdown_predictor.schema.battle_state import BattleState
from src.showdown_predictor.schema.report import MovePrediction, MoveRecommendation, SwitchPrediction, SwitchRecommendation
from src.showdown_predictor.utils.mon_factory import create_combatant

logger = logging.getLogger(__name__)

WAITING_REASON = "waiting for active data"


def _usable_moves(state: BattleState, own: Optional[RosterEntry]) -> list[str]:
    """Enabled menu moves, or the known moves of our active when no menu was seen"""
    menu = [option.name for option in state.legalMoves if not option.disabled]
    if menu:
        return menu
    return list(own.moves) if own is not None else []


def _moveset(entry: RosterEntry, kb: KnowledgeBase) -> list[str]:
    """Known moves, or the first common set when nothing has been seen yet"""
    if entry.moves:
        return list(entry.moves)
    common_sets = kb.species(entry.name).commonSets
    return list(common_sets[0].moves) if common_sets else []


def recommend_moves(
    state: BattleState,
    knowledge_base: Optional[KnowledgeBase] = None,
    calculator: Optional[DamageCalculator] = None,
    switch_prediction: Optional[SwitchPrediction] = None,
    opponent_moves: Optional[list[MovePrediction]] = None,
) -> list[MoveRecommendation]:
    kb = knowledge_base or DEFAULT_KNOWLEDGE_BASE
    calculator = calculator or DamageCalculator(kb)
    matchup = ActiveMatchup(state, kb)

    if not matchup.complete:
        enabled = [option.name for option in state.legalMoves if not option.disabled]
        if not enabled:
            return []
        return [MoveRecommendation(name=enabled[0], score=0, trail=(signal("waiting", 0, WAITING_REASON),))]

    if switch_prediction is None:
        switch_prediction = predict_switch(state, kb)
    if opponent_moves is None:
        opponent_moves = predict_opponent_moves(state, kb, calculator)

    attacker = matchup.combatant(Side.SELF)
    defender = matchup.combatant(Side.OPPONENT)
    their_hp = matchup.their.hp
    their_best_hit = max((p.damage.maxPercent for p in opponent_moves), default=0)
    outsped = speed_range(matchup.own.name, kb).max < speed_range(matchup.their.name, kb).min
    switch_expected = switch_prediction.likelihood is SwitchLikelihood.HIGH
    their_bench = matchup.bench(Side.OPPONENT)
    rocks_up = state.field.hazards_on(Side.OPPONENT).stealthRock

    recommendations = []
    for name in _usable_moves(state, matchup.own):
        move = kb.move(name)
        damage = calculator.estimate(attacker, defender, move, state.field)

        if not move.is_status and damage.effectiveness_class is EffectivenessClass.IMMUNE:
            result = fold_signals(damage.maxPercent, [override("immune", RECOMMEND_IMMUNE_SCORE, "%s is immune" % matchup.their.name)])
            recommendations.append(MoveRecommendation(name=name, score=result.score, damage=damage, trail=result.trail))
            continue

        guaranteed_ko = damage.maxPercent > 0 and damage.minPercent >= their_hp
        possible_ko = not guaranteed_ko and damage.maxPercent > 0 and damage.maxPercent >= their_hp
        coverage = switch_expected and not move.is_status and any(
            hits_super_effectively([move.type], defensive_types(member, kb)) for member in their_bench
        )
        stealth_rock_redundant = move.name == "Stealth Rock" and rocks_up

        signals = [
            signal("guaranteed_ko", RECOMMEND_WEIGHT_GUARANTEED_KO, "knocks out even on a low roll") if guaranteed_ko else None,
            signal("possible_ko", RECOMMEND_WEIGHT_POSSIBLE_KO, "may knock out") if possible_ko else None,
            signal("pivot", RECOMMEND_WEIGHT_PIVOT, "pivots on a likely switch") if move.is_pivot and switch_expected else None,
            signal("coverage", RECOMMEND_WEIGHT_COVERAGE, "hits a likely switch-in") if coverage else None,
            signal("priority_ko", RECOMMEND_WEIGHT_PRIORITY_KO, "priority knock out while outsped")
            if move.is_priority and outsped and (guaranteed_ko or possible_ko)
            else None,
            signal("priority", RECOMMEND_WEIGHT_PRIORITY, "moves first while outsped")
            if move.is_priority and outsped and not (guaranteed_ko or possible_ko)
            else None,
            signal("safe_setup", RECOMMEND_WEIGHT_SAFE_SETUP, "incoming damage is low") if move.is_setup and their_best_hit < RECOMMEND_SAFE_SETUP_DAMAGE else None,
            signal("unsafe_setup", RECOMMEND_WEIGHT_UNSAFE_SETUP, "incoming damage is high")
            if move.is_setup and their_best_hit >= RECOMMEND_SAFE_SETUP_DAMAGE
            else None,
            signal("recovery", RECOMMEND_WEIGHT_RECOVERY, "safe to recover")
            if move.is_recovery and matchup.own.hp < RECOMMEND_RECOVERY_HP_THRESHOLD and their_best_hit < RECOMMEND_SAFE_RECOVERY_DAMAGE
            else None,
            signal("early_hazard", RECOMMEND_WEIGHT_HAZARD, "hazards early")
            if move.is_hazard and state.turn <= RECOMMEND_EARLY_HAZARD_TURN and not stealth_rock_redundant
            else None,
        ]
        result = fold_signals(damage.maxPercent, signals)
        recommendations.append(MoveRecommendation(name=name, score=result.score, damage=damage, trail=result.trail))

    recommendations.sort(key=lambda r: r.score, reverse=True)
    return recommendations


def recommend_switches(
    state: BattleState,
    knowledge_base: Optional[KnowledgeBase] = None,
    forced: bool = False,
    calculator: Optional[DamageCalculator] = None,
) -> list[SwitchRecommendation]:
    """
    Score every healthy bench member as a switch-in

    A forced switch (our active fainted) brings the switch-in in for free, so
    speed dominates. A voluntary switch takes a hit on the way in, so the
    incoming damage dominates.
    """
    kb = knowledge_base or DEFAULT_KNOWLEDGE_BASE
    calculator = calculator or DamageCalculator(kb)
    matchup = ActiveMatchup(state, kb)
    if matchup.their is None:
        return []

    their = matchup.combatant(Side.OPPONENT)
    their_moves = _moveset(matchup.their, kb)
    their_stab = stab_types(matchup.their, kb)
    their_speed = likely_speed(matchup.their, kb)

    recommendations = []
    for candidate in matchup.bench(Side.SELF):
        own = create_combatant(candidate, knowledge_base=kb)
        best = max((calculator.estimate(own, their, kb.move(m), state.field).maxPercent for m in _moveset(candidate, kb)), default=0)
        incoming = max((calculator.estimate(their, own, kb.move(m), state.field).maxPercent for m in their_moves), default=0)
        own_speed = likely_speed(candidate, kb)
        faster = own_speed > their_speed
        slower = own_speed < their_speed
        typing = defensive_types(candidate, kb)
        weak = hits_super_effectively(their_stab, typing)

        if best >= matchup.their.hp:
            offense = signal("ko", SWITCH_IN_WEIGHT_KO, "threatens a knock out (%d%%)" % best)
        elif best >= SWITCH_IN_SIGNIFICANT_DAMAGE:
            offense = signal("significant_damage", SWITCH_IN_WEIGHT_SIGNIFICANT, "%d%% damage" % best)
        elif best >= SWITCH_IN_DECENT_DAMAGE:
            offense = signal("decent_damage", SWITCH_IN_WEIGHT_DECENT, "%d%% damage" % best)
        else:
            offense = signal("weak_offense", SWITCH_IN_WEIGHT_WEAK_OFFENSE, "little damage (%d%%)" % best)

        if forced:
            situational = [
                signal("faster", FORCED_WEIGHT_FASTER, "outspeeds %s" % matchup.their.name) if faster else None,
                signal("slower", FORCED_WEIGHT_SLOWER, "slower than %s" % matchup.their.name) if slower else None,
                signal("ohko_risk", FORCED_WEIGHT_OHKO_RISK, "knocked out before moving (%d%%)" % incoming)
                if slower and incoming >= FORCED_OHKO_RISK_DAMAGE
                else None,
                signal("walls", FORCED_WEIGHT_WALLS, "takes little damage (%d%%)" % incoming) if incoming < FORCED_WALL_DAMAGE else None,
            ]
        else:
            if incoming < VOLUNTARY_RESIST_DAMAGE:
                entry = signal("takes_little", VOLUNTARY_WEIGHT_RESISTS, "takes %d%% on entry" % incoming)
            elif incoming < VOLUNTARY_MODERATE_DAMAGE:
                entry = signal("takes_moderate", VOLUNTARY_WEIGHT_MODERATE, "takes %d%% on entry" % incoming)
            else:
                entry = signal("takes_heavy", VOLUNTARY_WEIGHT_HEAVY, "takes %d%% on entry" % incoming)
            situational = [entry, signal("faster", VOLUNTARY_WEIGHT_FASTER, "outspeeds %s" % matchup.their.name) if faster else None]

        signals = [
            offense,
            *situational,
            signal("weak_to_stab", SWITCH_IN_WEIGHT_WEAK_TO_STAB, "weak to %s's STAB" % matchup.their.name) if weak else None,
            signal("resists_stab", SWITCH_IN_WEIGHT_RESISTS_STAB, "resists %s's STAB" % matchup.their.name)
            if not weak and resists_all(their_stab, typing)
            else None,
        ]
        result = fold_signals(SWITCH_IN_BASE_SCORE, signals)
        recommendations.append(
            SwitchRecommendation(name=candidate.name, score=result.score, bestDamage=best, maxIncomingDamage=incoming, trail=result.trail)
        )

    recommendations.sort(key=lambda r: r.score, reverse=True)
    logger.debug("Switch recommendations (forced=%s): %s", forced, [(r.name, r.score) for r in recommendations])
    return recommendations
