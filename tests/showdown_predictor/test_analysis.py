from src.showdown_predictor.analysis import analyze, choose_action
from src.showdown_predictor.enums import Archetype, Side, SpeedVerdict
from src.showdown_predictor.roster_fusion import RosterFusionEngine
from src.showdown_predictor.schema.battle_state import BattleState, MoveOption
from src.showdown_predictor.schema.observations import LogLine, MenuSnapshot, SwitchCandidate, VisualSighting
from src.showdown_predictor.schema.report import MoveRecommendation, SwitchRecommendation


def make_engine(*observations) -> RosterFusionEngine:
    engine = RosterFusionEngine()
    for observation in observations:
        engine.apply(observation)
    return engine


def make_menu(moves=(), switches=(), forced: bool = False) -> MenuSnapshot:
    return MenuSnapshot(
        ownMoves=[MoveOption(name=m) for m in moves],
        ownSwitchCandidates=[SwitchCandidate(name=s) for s in switches],
        forcedSwitch=forced,
    )


def test_full_turn_report():
    engine = make_engine(
        VisualSighting(rawName="Landorus-Therian", side=Side.SELF, active=True),
        VisualSighting(rawName="the opposing Heatran", side=Side.OPPONENT, active=True),
        make_menu(moves=["Earthquake", "U-turn", "Stealth Rock", "Knock Off"], switches=["Landorus-Therian", "Toxapex"]),
        LogLine(index=0, text="Turn 2"),
    )
    report = analyze(engine.snapshot())

    assert report.turn == 2
    assert report.selfActive == "Landorus-Therian"
    assert report.opponentActive == "Heatran"
    assert not report.forcedSwitch
    assert report.speedVerdict.verdict is SpeedVerdict.FASTER
    assert report.moveRecommendations[0].name == "Earthquake"
    assert report.bestAction.action == "move"
    assert report.bestAction.name == "Earthquake"
    assert [s.name for s in report.switchRecommendations] == ["Toxapex"]
    assert len(report.opponentMovePredictions) == 4
    assert report.opponentArchetype.archetype is Archetype.BALANCE
    assert report.notes == []


def test_fainted_active_forces_a_switch():
    engine = make_engine(
        VisualSighting(rawName="Garchomp", side=Side.SELF, active=True),
        VisualSighting(rawName="Weavile", side=Side.SELF),
        VisualSighting(rawName="Amoonguss", side=Side.SELF),
        VisualSighting(rawName="Blissey", side=Side.OPPONENT, active=True, moves=["Seismic Toss"]),
        VisualSighting(rawName="Garchomp", side=Side.SELF, fainted=True),
    )
    report = analyze(engine.snapshot())
    assert report.forcedSwitch
    assert report.bestAction.action == "switch"
    assert report.bestAction.name in ("Weavile", "Amoonguss")


def test_menu_forced_switch_flag():
    engine = make_engine(
        VisualSighting(rawName="Garchomp", side=Side.SELF, active=True),
        VisualSighting(rawName="Clefable", side=Side.OPPONENT, active=True),
        make_menu(switches=["Garchomp", "Toxapex"], forced=True),
    )
    report = analyze(engine.snapshot())
    assert report.forcedSwitch
    assert report.bestAction.name == "Toxapex"


def test_empty_state_reports_insufficient_data():
    report = analyze(BattleState())
    assert report.bestAction is None
    assert report.speedVerdict is None
    assert report.opponentMovePredictions == []
    assert report.selfArchetype.archetype is Archetype.BALANCE
    assert any(note.startswith("insufficient data") for note in report.notes)


def test_unknown_species_and_moves_are_noted():
    engine = make_engine(
        VisualSighting(rawName="Garchomp", side=Side.SELF, active=True),
        VisualSighting(rawName="Fakemonster", side=Side.OPPONENT, active=True, moves=["Mystery Beam"]),
    )
    report = analyze(engine.snapshot())
    assert any("Fakemonster" in note for note in report.notes)
    assert any("Mystery Beam" in note for note in report.notes)
    assert report.speedVerdict is not None


def test_analysis_does_not_mutate_its_input():
    engine = make_engine(
        VisualSighting(rawName="Garchomp", side=Side.SELF, active=True),
        VisualSighting(rawName="Clefable", side=Side.OPPONENT, active=True),
    )
    before = engine.snapshot()
    analyze(engine.state)
    assert engine.state == before


def test_switch_needs_a_clear_margin():
    moves = [MoveRecommendation(name="Earthquake", score=60)]
    close = [SwitchRecommendation(name="Toxapex", score=75)]
    clear = [SwitchRecommendation(name="Toxapex", score=85)]
    assert choose_action(moves, close, forced=False).action == "move"
    assert choose_action(moves, clear, forced=False).action == "switch"
    assert choose_action(moves, close, forced=True).name == "Toxapex"
    assert choose_action([], [], forced=True) is None
    assert choose_action([], close, forced=False).action == "switch"
