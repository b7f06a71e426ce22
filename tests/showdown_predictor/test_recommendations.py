from src.showdown_predictor.enums import Side, SwitchLikelihood
from src.showdown_predictor.knowledge_base import DEFAULT_KNOWLEDGE_BASE
from src.showdown_predictor.predictors.recommendations import WAITING_REASON, recommend_moves, recommend_switches
from src.showdown_predictor.schema.battle_pokemon import RosterEntry
from src.showdown_predictor.schema.battle_state import BattleState, MoveOption, Team
from src.showdown_predictor.schema.report import SwitchPrediction

KB = DEFAULT_KNOWLEDGE_BASE


def make_state(own: list[RosterEntry], their: list[RosterEntry], moves: list[str] = (), **fields) -> BattleState:
    self_team, opponent_team = Team(side=Side.SELF), Team(side=Side.OPPONENT)
    for entry in own:
        self_team.add(entry)
    for entry in their:
        opponent_team.add(entry)
    return BattleState(
        selfTeam=self_team,
        opponentTeam=opponent_team,
        selfActive=own[0].name if own else None,
        opponentActive=their[0].name if their else None,
        legalMoves=[MoveOption(name=m) for m in moves],
        **fields,
    )


def signal_names(recommendation) -> list[str]:
    return [s.name for s in recommendation.trail]


# =============================================================================
# MOVES
# =============================================================================


def test_guaranteed_knockout_tops_the_list():
    state = make_state([RosterEntry(name="Landorus-Therian")], [RosterEntry(name="Heatran")], moves=["U-turn", "Earthquake", "Stealth Rock"])
    recommendations = recommend_moves(state, KB)
    best = recommendations[0]
    assert best.name == "Earthquake"
    assert best.score == 166 + 50
    assert "guaranteed_ko" in signal_names(best)


def test_possible_knockout_only_on_the_high_roll():
    # Earthquake into Clefable rolls 43-51%
    state = make_state([RosterEntry(name="Landorus-Therian")], [RosterEntry(name="Clefable", hp=45)], moves=["Earthquake"])
    best = recommend_moves(state, KB)[0]
    assert (best.damage.minPercent, best.damage.maxPercent) == (43, 51)
    assert best.score == 51 + 30
    assert "possible_ko" in signal_names(best)


def test_immune_move_is_penalized():
    state = make_state([RosterEntry(name="Garchomp")], [RosterEntry(name="Corviknight")], moves=["Earthquake", "Swords Dance"])
    recommendations = {r.name: r for r in recommend_moves(state, KB)}
    assert recommendations["Earthquake"].score == -50
    assert signal_names(recommendations["Earthquake"]) == ["immune"]
    assert recommendations["Swords Dance"].score > -50


def test_disabled_moves_are_skipped():
    state = make_state([RosterEntry(name="Garchomp")], [RosterEntry(name="Clefable")])
    state.legalMoves = [MoveOption(name="Earthquake", disabled=True), MoveOption(name="Fire Fang")]
    assert [r.name for r in recommend_moves(state, KB)] == ["Fire Fang"]


def test_known_moves_are_used_without_a_menu():
    state = make_state([RosterEntry(name="Garchomp", moves=["Earthquake"])], [RosterEntry(name="Clefable")])
    assert [r.name for r in recommend_moves(state, KB)] == ["Earthquake"]


def test_waiting_for_active_data():
    state = make_state([], [], moves=["Earthquake", "Swords Dance"])
    state.legalMoves[0].disabled = True
    recommendations = recommend_moves(state, KB)
    assert len(recommendations) == 1
    assert recommendations[0].name == "Swords Dance"
    assert recommendations[0].score == 0
    assert recommendations[0].trail[0].reason == WAITING_REASON


def test_pivot_and_coverage_under_a_likely_switch():
    state = make_state(
        [RosterEntry(name="Landorus-Therian")],
        [RosterEntry(name="Heatran"), RosterEntry(name="Darkrai")],
        moves=["U-turn", "Stone Edge"],
    )
    expected = SwitchPrediction(likelihood=SwitchLikelihood.HIGH, score=60)
    recommendations = {r.name: r for r in recommend_moves(state, KB, switch_prediction=expected, opponent_moves=[])}
    assert "pivot" in signal_names(recommendations["U-turn"])
    assert "coverage" in signal_names(recommendations["U-turn"])

    calm = SwitchPrediction(likelihood=SwitchLikelihood.LOW)
    recommendations = {r.name: r for r in recommend_moves(state, KB, switch_prediction=calm, opponent_moves=[])}
    assert "pivot" not in signal_names(recommendations["U-turn"])


def test_priority_when_outsped():
    state = make_state([RosterEntry(name="Kingambit")], [RosterEntry(name="Dragapult")], moves=["Sucker Punch"])
    assert "priority" in signal_names(recommend_moves(state, KB)[0])

    state.opponentTeam.get("Dragapult").hp = 50
    names = signal_names(recommend_moves(state, KB)[0])
    assert "priority_ko" in names
    assert "guaranteed_ko" in names


def test_setup_depends_on_incoming_damage():
    state = make_state([RosterEntry(name="Garchomp")], [RosterEntry(name="Blissey", moves=["Soft-Boiled"])], moves=["Swords Dance"])
    assert "safe_setup" in signal_names(recommend_moves(state, KB)[0])

    state = make_state([RosterEntry(name="Garchomp")], [RosterEntry(name="Iron Bundle", moves=["Freeze-Dry"])], moves=["Swords Dance"])
    assert "unsafe_setup" in signal_names(recommend_moves(state, KB)[0])


def test_recovery_when_low_and_safe():
    state = make_state([RosterEntry(name="Toxapex", hp=40)], [RosterEntry(name="Blissey", moves=["Soft-Boiled"])], moves=["Recover"])
    assert "recovery" in signal_names(recommend_moves(state, KB)[0])


def test_early_hazards_unless_rocks_are_up():
    state = make_state([RosterEntry(name="Landorus-Therian")], [RosterEntry(name="Clefable")], moves=["Stealth Rock"], turn=1)
    assert signal_names(recommend_moves(state, KB)[0]) == ["early_hazard"]

    state.field.hazards_on(Side.OPPONENT).stealthRock = True
    assert signal_names(recommend_moves(state, KB)[0]) == []

    state.field.hazards_on(Side.OPPONENT).stealthRock = False
    state.turn = 10
    assert signal_names(recommend_moves(state, KB)[0]) == []


# =============================================================================
# SWITCHES
# =============================================================================


def test_forced_switch_prefers_the_faster_member():
    state = make_state(
        [RosterEntry(name="Garchomp", hp=0), RosterEntry(name="Amoonguss", moves=["Toxic"]), RosterEntry(name="Weavile", moves=["Toxic"])],
        [RosterEntry(name="Blissey", moves=["Seismic Toss"])],
    )
    recommendations = recommend_switches(state, KB, forced=True)
    assert [r.name for r in recommendations] == ["Weavile", "Amoonguss"]
    assert recommendations[0].score == 50 - 10 + 30 + 15
    assert recommendations[1].score == 50 - 10 - 15 + 15


def test_forced_switch_avoids_slower_member_that_would_be_knocked_out():
    state = make_state(
        [RosterEntry(name="Garchomp", hp=0), RosterEntry(name="Heatran"), RosterEntry(name="Corviknight")],
        [RosterEntry(name="Landorus-Therian", moves=["Earthquake"])],
    )
    recommendations = recommend_switches(state, KB, forced=True)
    assert recommendations[0].name == "Corviknight"
    heatran = next(r for r in recommendations if r.name == "Heatran")
    assert heatran.maxIncomingDamage >= 80
    assert "ohko_risk" in signal_names(heatran)


def test_forced_switch_speed_tie_is_neutral():
    state = make_state(
        [RosterEntry(name="Garchomp", hp=0), RosterEntry(name="Heatran", stats={"spe": 250})],
        [RosterEntry(name="Landorus-Therian", moves=["Earthquake"], stats={"spe": 250})],
    )
    heatran = recommend_switches(state, KB, forced=True)[0]
    assert heatran.maxIncomingDamage >= 80
    names = signal_names(heatran)
    assert "faster" not in names
    assert "slower" not in names
    assert "ohko_risk" not in names


def test_voluntary_switch_weighs_incoming_damage():
    state = make_state(
        [RosterEntry(name="Garchomp"), RosterEntry(name="Heatran"), RosterEntry(name="Corviknight")],
        [RosterEntry(name="Landorus-Therian", moves=["Earthquake"])],
    )
    recommendations = {r.name: r for r in recommend_switches(state, KB, forced=False)}
    assert "takes_little" in signal_names(recommendations["Corviknight"])
    assert "takes_heavy" in signal_names(recommendations["Heatran"])
    assert "Garchomp" not in recommendations


def test_fainted_members_are_not_candidates():
    state = make_state(
        [RosterEntry(name="Garchomp"), RosterEntry(name="Heatran", hp=0), RosterEntry(name="Toxapex")],
        [RosterEntry(name="Clefable")],
    )
    assert [r.name for r in recommend_switches(state, KB)] == ["Toxapex"]


def test_no_switches_without_an_opponent():
    state = make_state([RosterEntry(name="Garchomp"), RosterEntry(name="Toxapex")], [])
    assert recommend_switches(state, KB) == []
