from src.showdown_predictor.enums import Archetype, Side, SpeedVerdict, Status, SwitchLikelihood
from src.showdown_predictor.knowledge_base import DEFAULT_KNOWLEDGE_BASE
from src.showdown_predictor.predictors.archetype import classify_archetype
from src.showdown_predictor.predictors.opponent_moves import predict_opponent_moves
from src.showdown_predictor.predictors.scoring import fold_signals, override, signal
from src.showdown_predictor.predictors.speed import analyze_speed, speed_range
from src.showdown_predictor.predictors.switch_prediction import predict_switch
from src.showdown_predictor.schema.battle_pokemon import RosterEntry
from src.showdown_predictor.schema.battle_state import BattleState, Team

KB = DEFAULT_KNOWLEDGE_BASE


def make_team(side: Side, *entries: RosterEntry) -> Team:
    team = Team(side=side)
    for entry in entries:
        team.add(entry)
    return team


def make_state(own: list[RosterEntry], their: list[RosterEntry], **fields) -> BattleState:
    return BattleState(
        selfTeam=make_team(Side.SELF, *own),
        opponentTeam=make_team(Side.OPPONENT, *their),
        selfActive=own[0].name if own else None,
        opponentActive=their[0].name if their else None,
        **fields,
    )


# =============================================================================
# SCORING
# =============================================================================


def test_fold_adds_signals_and_keeps_the_trail():
    result = fold_signals(10, [signal("a", 5, "first"), None, signal("b", -3)])
    assert result.score == 12
    assert [s.name for s in result.trail] == ["a", "b"]
    assert result.reasons == ["first"]


def test_fold_override_replaces_and_bounds_clamp():
    assert fold_signals(80, [signal("a", 10), override("immune", -50)]).score == -50
    assert fold_signals(80, [signal("a", 50)], upper=100).score == 100
    assert fold_signals(0, [signal("a", -50)], lower=0).score == 0


# =============================================================================
# ARCHETYPE
# =============================================================================


def test_setup_sightings_make_hyper_offense():
    team = make_team(Side.OPPONENT, RosterEntry(name="Kingambit", moves=["Swords Dance"]), RosterEntry(name="Scizor", moves=["Swords Dance"]))
    result = classify_archetype(team, KB)
    assert result.archetype is Archetype.HYPER_OFFENSE
    assert result.setupSightings == 2


def test_fast_members_make_hyper_offense():
    team = make_team(Side.OPPONENT, RosterEntry(name="Dragapult"), RosterEntry(name="Weavile"), RosterEntry(name="Iron Valiant"))
    result = classify_archetype(team, KB)
    assert result.archetype is Archetype.HYPER_OFFENSE
    assert result.fastMembers == 3


def test_recovery_sightings_make_stall():
    team = make_team(
        Side.OPPONENT,
        RosterEntry(name="Amoonguss", moves=["Recover"]),
        RosterEntry(name="Gliscor", moves=["Roost"]),
        RosterEntry(name="Rotom-Wash", moves=["Soft-Boiled"]),
    )
    result = classify_archetype(team, KB)
    assert result.archetype is Archetype.STALL
    assert result.recoverySightings == 3
    assert result.bulkyMembers == 0


def test_bulky_members_make_stall():
    team = make_team(Side.OPPONENT, RosterEntry(name="Toxapex"), RosterEntry(name="Blissey"), RosterEntry(name="Corviknight"))
    assert classify_archetype(team, KB).archetype is Archetype.STALL


def test_everything_else_is_balance():
    assert classify_archetype(make_team(Side.OPPONENT), KB).archetype is Archetype.BALANCE
    team = make_team(Side.OPPONENT, RosterEntry(name="Clefable"), RosterEntry(name="Garchomp", moves=["Swords Dance"]))
    assert classify_archetype(team, KB).archetype is Archetype.BALANCE


# =============================================================================
# SWITCH PREDICTION
# =============================================================================


def test_type_disadvantage_with_a_counter_is_high():
    state = make_state([RosterEntry(name="Landorus-Therian")], [RosterEntry(name="Heatran"), RosterEntry(name="Corviknight")])
    prediction = predict_switch(state, KB)
    assert prediction.score == 40
    assert prediction.likelihood is SwitchLikelihood.HIGH
    assert [s.name for s in prediction.trail] == ["type_disadvantage"]


def test_no_bench_answer_lowers_the_score():
    state = make_state([RosterEntry(name="Landorus-Therian")], [RosterEntry(name="Heatran")])
    prediction = predict_switch(state, KB)
    assert prediction.score == 25
    assert prediction.likelihood is SwitchLikelihood.MEDIUM


def test_low_hp_with_counter():
    state = make_state([RosterEntry(name="Landorus-Therian")], [RosterEntry(name="Heatran", hp=20), RosterEntry(name="Corviknight")])
    prediction = predict_switch(state, KB)
    assert prediction.score == 65
    assert "low_hp_with_counter" in [s.name for s in prediction.trail]


def test_resisted_matchup_stays_in():
    state = make_state([RosterEntry(name="Heatran")], [RosterEntry(name="Toxapex")])
    prediction = predict_switch(state, KB)
    assert prediction.score == 0
    assert prediction.likelihood is SwitchLikelihood.LOW


def test_missing_active_is_low():
    prediction = predict_switch(make_state([], [RosterEntry(name="Heatran")]), KB)
    assert prediction.likelihood is SwitchLikelihood.LOW
    assert prediction.trail == ()


# =============================================================================
# OPPONENT MOVES
# =============================================================================


def test_predictions_are_padded_normalized_and_sorted():
    state = make_state([RosterEntry(name="Garchomp")], [RosterEntry(name="Heatran", moves=["Flamethrower"])])
    predictions = predict_opponent_moves(state, KB)
    assert len(predictions) == 4
    assert "Flamethrower" in [p.name for p in predictions]
    assert 97 <= sum(p.probability for p in predictions) <= 103
    raw = [p.rawScore for p in predictions]
    assert raw == sorted(raw, reverse=True)
    assert all(5 <= p.rawScore <= 95 for p in predictions)


def test_status_move_is_penalized_on_statused_target():
    healthy = make_state([RosterEntry(name="Garchomp")], [RosterEntry(name="Heatran", moves=["Toxic"])])
    burned = make_state([RosterEntry(name="Garchomp", status=Status.BURN)], [RosterEntry(name="Heatran", moves=["Toxic"])])
    open_score = next(p.rawScore for p in predict_opponent_moves(healthy, KB) if p.name == "Toxic")
    redundant_score = next(p.rawScore for p in predict_opponent_moves(burned, KB) if p.name == "Toxic")
    assert open_score == 30
    assert redundant_score == 10


def test_recovery_is_favoured_at_low_hp():
    state = make_state([RosterEntry(name="Garchomp")], [RosterEntry(name="Toxapex", hp=30, moves=["Recover"])])
    recover = next(p for p in predict_opponent_moves(state, KB) if p.name == "Recover")
    assert "recovery" in [s.name for s in recover.trail]


def test_no_predictions_without_both_actives():
    assert predict_opponent_moves(make_state([RosterEntry(name="Garchomp")], []), KB) == []


# =============================================================================
# SPEED
# =============================================================================


def test_speed_range_bounds():
    garchomp = speed_range("Garchomp", KB)
    assert (garchomp.min, garchomp.max) == (216, 333)


def test_faster_and_outsped():
    state = make_state([RosterEntry(name="Dragapult", moves=["Sucker Punch"])], [RosterEntry(name="Heatran")])
    analysis = analyze_speed(state, KB)
    assert analysis.verdict is SpeedVerdict.FASTER
    assert analysis.selfPriority
    assert not analysis.opponentPriority
    assert analysis.detail.startswith("Likely faster")


def test_trick_room_inverts_the_verdict():
    state = make_state([RosterEntry(name="Dragapult")], [RosterEntry(name="Heatran")])
    state.field.trickRoom = True
    analysis = analyze_speed(state, KB)
    assert analysis.verdict is SpeedVerdict.OUTSPED
    assert "Trick Room" in analysis.detail


def test_tailwind_doubles_speed():
    state = make_state([RosterEntry(name="Dragapult")], [RosterEntry(name="Heatran")])
    state.field.tailwind[Side.OPPONENT] = True
    assert analyze_speed(state, KB).verdict is SpeedVerdict.OUTSPED


def test_mirror_is_a_speed_tie():
    state = make_state([RosterEntry(name="Garchomp")], [RosterEntry(name="Garchomp")])
    assert analyze_speed(state, KB).verdict is SpeedVerdict.SPEED_TIE


def test_no_speed_verdict_without_both_actives():
    assert analyze_speed(make_state([RosterEntry(name="Garchomp")], []), KB) is None
