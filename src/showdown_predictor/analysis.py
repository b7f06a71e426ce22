"""
Analysis orchestrator

analyze() is the read path of the predictor: it takes a BattleState
(normally RosterFusionEngine.snapshot()), runs every heuristic against a
private copy and assembles one Report. Nothing here mutates fusion state.
"""

import logging
from typing import Optional

from src.showdown_predictor.constants import SWITCH_PREFERENCE_MARGIN
from src.showdown_predictor.damage_calculator import DamageCalculator
from src.showdown_predictor.enums import Side
from src.showdown_predictor.knowledge_base import DEFAULT_KNOWLEDGE_BASE, KnowledgeBase, unknown_move, unknown_species
from src.showdown_predictor.predictors.archetype import classify_archetype
from src.showdown_predictor.predictors.opponent_moves import predict_opponent_moves
from src.showdown_predictor.predictors.recommendations import recommend_moves, recommend_switches
from src.showdown_predictor.predictors.speed import analyze_speed
from src.showdown_predictor.predictors.switch_prediction import predict_switch
from src.showdown_predictor.schema.battle_state import BattleState
from src.showdown_predictor.schema.report import MoveRecommendation, RecommendedAction, Report, SwitchRecommendation

logger = logging.getLogger(__name__)


def choose_action(
    moves: list[MoveRecommendation],
    switches: list[SwitchRecommendation],
    forced: bool,
) -> Optional[RecommendedAction]:
    """Best move, unless a switch beats it by the preference margin or the switch is forced"""
    top_switch = switches[0] if switches else None
    if forced:
        if top_switch is None:
            return None
        return RecommendedAction(action="switch", name=top_switch.name, score=top_switch.score)

    top_move = moves[0] if moves else None
    if top_move is None:
        if top_switch is None:
            return None
        return RecommendedAction(action="switch", name=top_switch.name, score=top_switch.score)

    if top_switch is not None and top_switch.score > top_move.score + SWITCH_PREFERENCE_MARGIN:
        return RecommendedAction(action="switch", name=top_switch.name, score=top_switch.score)
    return RecommendedAction(action="move", name=top_move.name, score=top_move.score)


def _notes(state: BattleState, kb: KnowledgeBase) -> list[str]:
    notes = []
    if state.selfActive is None:
        notes.append("insufficient data: own active unknown")
    if state.opponentActive is None:
        notes.append("insufficient data: opponent active unknown")
    for side in (Side.SELF, Side.OPPONENT):
        for entry in state.team(side).entries():
            if not kb.has_species(entry.name):
                notes.append(unknown_species(entry.name).note)
            notes.extend(unknown_move(m).note for m in entry.moves if not kb.has_move(m))
    return notes


def analyze(state: BattleState, knowledge_base: Optional[KnowledgeBase] = None) -> Report:
    kb = knowledge_base or DEFAULT_KNOWLEDGE_BASE
    state = state.snapshot()
    calculator = DamageCalculator(kb)

    own_active = state.active_entry(Side.SELF)
    forced = state.forcedSwitch or (own_active is not None and own_active.fainted)

    switch_prediction = predict_switch(state, kb)
    opponent_moves = predict_opponent_moves(state, kb, calculator)
    moves = recommend_moves(state, kb, calculator, switch_prediction=switch_prediction, opponent_moves=opponent_moves)
    switches = recommend_switches(state, kb, forced=forced, calculator=calculator)
    best = choose_action(moves, switches, forced)

    report = Report(
        switchPrediction=switch_prediction,
        opponentMovePredictions=opponent_moves,
        selfArchetype=classify_archetype(state.selfTeam, kb),
        opponentArchetype=classify_archetype(state.opponentTeam, kb),
        speedVerdict=analyze_speed(state, kb),
        moveRecommendations=moves,
        switchRecommendations=switches,
        bestAction=best,
        forcedSwitch=forced,
        turn=state.turn,
        selfActive=state.selfActive,
        opponentActive=state.opponentActive,
        field=state.field,
        notes=_notes(state, kb),
    )
    logger.debug("Turn %d analysis: best action %s", state.turn, best)
    return report
