import logging
from typing import Optional

from src.showdown_predictor.constants import (
    PREDICTION_BASE_SCORE,
    PREDICTION_HEAVY_DAMAGE,
    PREDICTION_RECOVERY_HP_THRESHOLD,
    PREDICTION_SCORE_MAX,
    PREDICTION_SCORE_MIN,
    PREDICTION_SOLID_DAMAGE,
    PREDICTION_WEIGHT_HEAVY_DAMAGE,
    PREDICTION_WEIGHT_IMMUNE,
    PREDICTION_WEIGHT_RECOVERY,
    PREDICTION_WEIGHT_RESISTED,
    PREDICTION_WEIGHT_SAFE_SETUP,
    PREDICTION_WEIGHT_SOLID_DAMAGE,
    PREDICTION_WEIGHT_STAB,
    PREDICTION_WEIGHT_STATUS_OPEN,
    PREDICTION_WEIGHT_STATUS_REDUNDANT,
    PREDICTION_WEIGHT_SUPER_EFFECTIVE,
    PREDICTION_WEIGHT_THREATENED_SETUP,
)
from src.showdown_predictor.damage_calculator import DamageCalculator
from src.showdown_predictor.enums import EffectivenessClass, MoveFlag, Side, Status
from src.showdown_predictor.knowledge_base import DEFAULT_KNOWLEDGE_BASE, KnowledgeBase
from src.showdown_predictor.predictors.matchups import ActiveMatchup, candidate_moves, defensive_types, hits_super_effectively, stab_types
from src.showdown_predictor.predictors.scoring import fold_signals, signal
from src.showdown_predictor.schema.battle_state import BattleState
from src.showdown_predictor.schema.report import MovePrediction

logger = logging.getLogger(__name__)


def predict_opponent_moves(
    state: BattleState,
    knowledge_base: Optional[KnowledgeBase] = None,
    calculator: Optional[DamageCalculator] = None,
) -> list[MovePrediction]:
    """
    Likely moves of the opponent's active, as probabilities summing to ~100

    Candidates are the moves already seen, padded from the species' common
    sets. Each is scored on the damage it would do to our active plus
    move-class bonuses, clamped, then normalized and sorted.
    """
    kb = knowledge_base or DEFAULT_KNOWLEDGE_BASE
    calculator = calculator or DamageCalculator(kb)
    matchup = ActiveMatchup(state, kb)
    if not matchup.complete:
        return []

    attacker = matchup.combatant(Side.OPPONENT)
    defender = matchup.combatant(Side.SELF)
    their_stab = stab_types(matchup.their, kb)
    # Setting up is safe when we have no super effective answer
    setup_safe = not hits_super_effectively(stab_types(matchup.own, kb), defensive_types(matchup.their, kb))
    target_statused = matchup.own.status is not Status.NONE

    predictions = []
    for name in candidate_moves(matchup.their, kb):
        move = kb.move(name)
        damage = calculator.estimate(attacker, defender, move, state.field)
        klass = damage.effectiveness_class
        damaging = not move.is_status

        signals = [
            signal("heavy_damage", PREDICTION_WEIGHT_HEAVY_DAMAGE, "%d%% damage" % damage.maxPercent) if damage.maxPercent >= PREDICTION_HEAVY_DAMAGE else None,
            signal("solid_damage", PREDICTION_WEIGHT_SOLID_DAMAGE, "%d%% damage" % damage.maxPercent)
            if PREDICTION_SOLID_DAMAGE <= damage.maxPercent < PREDICTION_HEAVY_DAMAGE
            else None,
            signal("stab", PREDICTION_WEIGHT_STAB, "STAB") if damaging and move.type in their_stab else None,
            signal("super_effective", PREDICTION_WEIGHT_SUPER_EFFECTIVE, "super effective") if damaging and klass is EffectivenessClass.SUPER_EFFECTIVE else None,
            signal("resisted", PREDICTION_WEIGHT_RESISTED, "resisted") if damaging and klass is EffectivenessClass.RESISTED else None,
            signal("immune", PREDICTION_WEIGHT_IMMUNE, "no effect") if damaging and klass is EffectivenessClass.IMMUNE else None,
            signal("recovery", PREDICTION_WEIGHT_RECOVERY, "low HP, likely to recover")
            if move.is_recovery and matchup.their.hp < PREDICTION_RECOVERY_HP_THRESHOLD
            else None,
            signal("safe_setup", PREDICTION_WEIGHT_SAFE_SETUP, "safe to set up") if move.is_setup and setup_safe else None,
            signal("threatened_setup", PREDICTION_WEIGHT_THREATENED_SETUP, "setting up under threat") if move.is_setup and not setup_safe else None,
            signal("status_open", PREDICTION_WEIGHT_STATUS_OPEN, "target can be statused")
            if move.has_flag(MoveFlag.STATUS) and not target_statused
            else None,
            signal("status_redundant", PREDICTION_WEIGHT_STATUS_REDUNDANT, "target already statused")
            if move.has_flag(MoveFlag.STATUS) and target_statused
            else None,
        ]
        result = fold_signals(PREDICTION_BASE_SCORE, signals, lower=PREDICTION_SCORE_MIN, upper=PREDICTION_SCORE_MAX)
        predictions.append(MovePrediction(name=move.name if not move.isUnknown else name, rawScore=result.score, damage=damage, trail=result.trail))

    total = sum(p.rawScore for p in predictions)
    for prediction in predictions:
        prediction.probability = round(prediction.rawScore / total * 100) if total else 0

    predictions.sort(key=lambda p: p.rawScore, reverse=True)
    logger.debug("Opponent move predictions: %s", [(p.name, p.probability) for p in predictions])
    return predictions
