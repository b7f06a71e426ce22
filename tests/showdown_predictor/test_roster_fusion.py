import pytest

from src.showdown_predictor.constants import MAX_TEAM_SIZE, STAT_ATK
from src.showdown_predictor.enums import EvidenceSource, LogEventKind, Side, Status, Terrain, Type, Weather
from src.showdown_predictor.roster_fusion import RosterFusionEngine
from src.showdown_predictor.schema.battle_state import MoveOption
from src.showdown_predictor.schema.observations import (
    OBSERVATION_ADAPTER,
    LogLine,
    MenuSnapshot,
    PlayerIdentity,
    SwitchCandidate,
    TurnMarker,
    VisualSighting,
)


def make_engine() -> RosterFusionEngine:
    return RosterFusionEngine()


def sight(name: str, side: Side, **fields) -> VisualSighting:
    return VisualSighting(rawName=name, side=side, **fields)


def feed_log(engine: RosterFusionEngine, *lines: str, start: int = 0) -> None:
    for offset, text in enumerate(lines):
        engine.apply(LogLine(index=start + offset, text=text))


def make_menu(moves=(), switches=(), forced: bool = False) -> MenuSnapshot:
    return MenuSnapshot(
        ownMoves=[MoveOption(name=m) for m in moves],
        ownSwitchCandidates=[SwitchCandidate(name=s) for s in switches],
        forcedSwitch=forced,
    )


def test_log_line_never_creates_a_member():
    engine = make_engine()
    feed_log(engine, "The opposing Heatran used Magma Storm!", "Go! Garchomp!", "The opposing Heatran lost 20% of its health!")
    state = engine.snapshot()
    assert len(state.opponentTeam) == 0
    assert len(state.selfTeam) == 0
    assert state.opponentActive is None


def test_visual_sighting_creates_and_updates():
    engine = make_engine()
    engine.apply(sight("the opposing Heatran", Side.OPPONENT, active=True, hp=64, statusToken="brn", item="Leftovers"))
    entry = engine.state.opponentTeam.get("Heatran")
    assert entry is not None
    assert entry.hp == 64
    assert entry.status is Status.BURN
    assert entry.item == "Leftovers"
    assert engine.state.opponentActive == "Heatran"


def test_unresolvable_name_is_dropped():
    engine = make_engine()
    engine.apply(sight("Tera Type", Side.OPPONENT))
    engine.apply(sight("tox", Side.SELF))
    assert len(engine.state.opponentTeam) == 0
    assert len(engine.state.selfTeam) == 0


def test_unknown_side_only_updates_existing_entries():
    engine = make_engine()
    engine.apply(sight("Garchomp", Side.UNKNOWN, hp=50))
    assert len(engine.state.selfTeam) == 0 and len(engine.state.opponentTeam) == 0

    engine.apply(sight("Garchomp", Side.SELF))
    engine.apply(sight("Garchomp", Side.UNKNOWN, hp=50))
    assert engine.state.selfTeam.get("Garchomp").hp == 50
    assert len(engine.state.opponentTeam) == 0


def test_replaying_observations_is_idempotent():
    observations = [
        PlayerIdentity(selfName="Alice", opponentName="Bob"),
        sight("Garchomp", Side.SELF, active=True, hp=100),
        sight("Heatran", Side.OPPONENT, active=True, hp=100),
        make_menu(moves=["Earthquake", "Swords Dance"], switches=["Garchomp", "Toxapex"]),
        LogLine(index=0, text="Turn 1"),
        LogLine(index=1, text="The opposing Heatran lost 50% of its health!"),
        LogLine(index=2, text="Garchomp's Attack rose sharply!"),
        LogLine(index=3, text="Spikes were scattered on the ground all around the opposing team!"),
        TurnMarker(turn=1),
    ]
    once = make_engine()
    for observation in observations:
        once.apply(observation)

    many = make_engine()
    for observation in observations:
        for _ in range(3):
            many.apply(observation)

    assert many.snapshot() == once.snapshot()
    assert once.state.opponentTeam.get("Heatran").hp == 50
    assert once.state.selfTeam.get("Garchomp").stage(STAT_ATK) == 2
    assert once.state.field.hazards_on(Side.OPPONENT).spikes == 1


def test_visual_evidence_relocates_between_teams():
    engine = make_engine()
    engine.apply(sight("Garchomp", Side.SELF, active=True))
    engine.apply(sight("Garchomp", Side.OPPONENT))
    assert "Garchomp" in engine.state.opponentTeam
    assert "Garchomp" not in engine.state.selfTeam
    assert engine.state.selfActive is None


def test_log_evidence_never_relocates():
    engine = make_engine()
    engine.apply(PlayerIdentity(selfName="Alice", opponentName="Bob"))
    engine.apply(sight("Garchomp", Side.SELF))
    feed_log(engine, "Bob sent out Garchomp!")
    assert "Garchomp" in engine.state.selfTeam
    assert "Garchomp" not in engine.state.opponentTeam
    assert engine.state.opponentActive is None


def test_a_name_is_on_at_most_one_team():
    engine = make_engine()
    for side in (Side.SELF, Side.OPPONENT, Side.SELF, Side.OPPONENT):
        engine.apply(sight("Dragapult", side))
        assert ("Dragapult" in engine.state.selfTeam) != ("Dragapult" in engine.state.opponentTeam)


def test_team_size_is_capped():
    engine = make_engine()
    names = ["Dragapult", "Gholdengo", "Great Tusk", "Kingambit", "Heatran", "Toxapex", "Clefable", "Garchomp"]
    for name in names:
        engine.apply(sight(name, Side.OPPONENT))
    assert len(engine.state.opponentTeam) == MAX_TEAM_SIZE
    assert "Garchomp" not in engine.state.opponentTeam


def test_relocation_into_full_team_is_refused():
    engine = make_engine()
    for name in ["Dragapult", "Gholdengo", "Great Tusk", "Kingambit", "Heatran", "Toxapex"]:
        engine.apply(sight(name, Side.OPPONENT))
    engine.apply(sight("Garchomp", Side.SELF))
    engine.apply(sight("Garchomp", Side.OPPONENT))
    assert "Garchomp" in engine.state.selfTeam
    assert len(engine.state.opponentTeam) == MAX_TEAM_SIZE


def test_cosmetic_forms_share_one_entry():
    engine = make_engine()
    engine.apply(sight("Gastrodon-East", Side.OPPONENT))
    engine.apply(sight("Gastrodon", Side.OPPONENT, hp=70))
    assert engine.state.opponentTeam.names == ["Gastrodon"]
    assert engine.state.opponentTeam.get("Gastrodon").hp == 70


def test_regional_forms_are_separate_entries():
    engine = make_engine()
    engine.apply(sight("Slowking", Side.OPPONENT))
    engine.apply(sight("Slowking-Galar", Side.OPPONENT))
    assert engine.state.opponentTeam.names == ["Slowking", "Slowking-Galar"]


def test_form_change_upgrades_key_in_place():
    engine = make_engine()
    engine.apply(sight("Palafin", Side.OPPONENT, active=True, hp=80))
    engine.apply(sight("Heatran", Side.OPPONENT))
    engine.apply(sight("Palafin-Hero", Side.OPPONENT, active=True))
    team = engine.state.opponentTeam
    assert team.names == ["Palafin-Hero", "Heatran"]
    assert team.get("Palafin-Hero").hp == 80
    assert engine.state.opponentActive == "Palafin-Hero"


def test_ensure_member_authority_rules():
    engine = make_engine()
    assert engine.ensure_member(Side.OPPONENT, "Heatran", EvidenceSource.LOG) is None
    assert engine.ensure_member(Side.SELF, "Garchomp", EvidenceSource.MENU) == "Garchomp"
    assert engine.ensure_member(Side.OPPONENT, "Garchomp", EvidenceSource.MENU) is None
    assert engine.ensure_member(Side.OPPONENT, "Garchomp", EvidenceSource.VISUAL) == "Garchomp"
    assert engine.ensure_member(Side.UNKNOWN, "Garchomp", EvidenceSource.VISUAL) == "Garchomp"
    assert engine.ensure_member(Side.OPPONENT, "", EvidenceSource.VISUAL) is None


def test_log_lines_apply_in_narration_order():
    engine = make_engine()
    engine.apply(sight("Dragonite", Side.OPPONENT, active=True))
    engine.apply(LogLine(index=1, text="The opposing Dragonite's stat changes were removed!"))
    assert engine.state.opponentTeam.get("Dragonite").stage(STAT_ATK) == 0

    engine.apply(LogLine(index=0, text="The opposing Dragonite's Attack rose!"))
    # The boost applies first, then the reset clears it
    assert engine.state.opponentTeam.get("Dragonite").stage(STAT_ATK) == 0


def test_redelivered_log_lines_are_skipped():
    engine = make_engine()
    engine.apply(sight("Heatran", Side.OPPONENT, active=True))
    line = LogLine(index=0, text="The opposing Heatran lost 30% of its health!")
    engine.apply(line)
    engine.apply(line)
    assert engine.state.opponentTeam.get("Heatran").hp == 70


def test_backlog_gap_is_skipped_when_too_long():
    engine = make_engine()
    engine.apply(sight("Heatran", Side.OPPONENT, active=True))
    for index in range(1, 53):
        engine.apply(LogLine(index=index, text="Turn %d" % index))
    assert engine.state.turn == 52


def test_faint_then_switch_in():
    engine = make_engine()
    engine.apply(sight("Heatran", Side.OPPONENT, active=True))
    engine.apply(sight("Toxapex", Side.OPPONENT))
    feed_log(engine, "The opposing Heatran fainted!", "The opposing Toxapex came out!")
    state = engine.state
    assert state.opponentTeam.get("Heatran").fainted
    assert state.opponentActive == "Toxapex"

    engine.apply(sight("Heatran", Side.OPPONENT, hp=50))
    assert state.opponentTeam.get("Heatran").fainted


def test_switch_in_resets_previous_boosts():
    engine = make_engine()
    engine.apply(sight("Garchomp", Side.SELF, active=True))
    engine.apply(sight("Toxapex", Side.SELF))
    feed_log(engine, "Garchomp's Attack rose sharply!", "Go! Toxapex!")
    assert engine.state.selfActive == "Toxapex"
    assert engine.state.selfTeam.get("Garchomp").stage(STAT_ATK) == 0


def test_named_player_switch_in():
    engine = make_engine()
    engine.apply(PlayerIdentity(selfName="Alice", opponentName="Bob"))
    engine.apply(sight("Toxapex", Side.OPPONENT))
    feed_log(engine, "Bob sent out Toxapex!")
    assert engine.state.opponentActive == "Toxapex"


def test_log_updates_existing_entries():
    engine = make_engine()
    engine.apply(sight("Dragonite", Side.OPPONENT, active=True))
    feed_log(
        engine,
        "The opposing Dragonite used Extreme Speed!",
        "The opposing Dragonite was burned!",
        "The opposing Dragonite has Terastallized into the Normal-type!",
        "The opposing Dragonite restored a little HP using its Leftovers!",
        "[The opposing Dragonite's Multiscale]",
        "The opposing Dragonite lost 40% of its health!",
        "The opposing Dragonite restored 25% of its HP",
    )
    entry = engine.state.opponentTeam.get("Dragonite")
    assert entry.moves == ["Extreme Speed"]
    assert entry.status is Status.BURN
    assert entry.terastallized and entry.teraType is Type.NORMAL
    assert entry.item == "Leftovers"
    assert entry.ability == "Multiscale"
    assert entry.hp == 85


def test_field_updates():
    engine = make_engine()
    feed_log(
        engine,
        "It started to rain!",
        "The sunlight turned harsh!",
        "Spikes were scattered on the ground all around your team!",
        "Spikes were scattered on the ground all around your team!",
        "Spikes were scattered on the ground all around your team!",
        "Spikes were scattered on the ground all around your team!",
        "The Tailwind blew from behind your team!",
        "The opposing Hatterene twisted the dimensions!",
    )
    field = engine.state.field
    assert field.weather is Weather.SUN
    assert field.hazards_on(Side.SELF).spikes == 3
    assert field.tailwind_on(Side.SELF)
    assert not field.tailwind_on(Side.OPPONENT)
    assert field.trickRoom

    feed_log(engine, "The spikes disappeared from the ground around your team!", start=8)
    assert engine.state.field.hazards_on(Side.SELF).spikes == 0


def test_surge_abilities_set_terrain():
    engine = make_engine()
    feed_log(engine, "[The opposing Rillaboom's Grassy Surge]", "Grass grew to cover the battlefield!")
    assert engine.state.field.terrain is Terrain.GRASSY

    feed_log(engine, "[Tapu Fini's Misty Surge]", "Mist swirled around the battlefield!", start=2)
    assert engine.state.field.terrain is Terrain.MISTY


def test_co_matching_lines_are_recorded():
    engine = make_engine()
    feed_log(engine, "[The opposing Pelipper's Drizzle]")
    assert (LogEventKind.WEATHER, LogEventKind.ABILITY_REVEALED) in engine.co_matches
    assert engine.state.field.weather is Weather.RAIN


def test_menu_snapshot_belongs_to_self():
    engine = make_engine()
    engine.apply(sight("Garchomp", Side.SELF, active=True))
    engine.apply(make_menu(moves=["Earthquake", "Swords Dance"], switches=["Toxapex", "Corviknight"], forced=False))
    state = engine.state
    assert state.selfTeam.names == ["Garchomp", "Toxapex", "Corviknight"]
    assert state.legalSwitches == ["Toxapex", "Corviknight"]
    assert [m.name for m in state.legalMoves] == ["Earthquake", "Swords Dance"]
    assert state.selfTeam.get("Garchomp").moves == ["Earthquake", "Swords Dance"]
    assert not state.forcedSwitch


def test_menu_members_are_unrevealed_until_sighted():
    engine = make_engine()
    engine.apply(make_menu(switches=["Garchomp", "Toxapex"]))
    assert not engine.state.selfTeam.get("Toxapex").revealed

    engine.apply(sight("Toxapex", Side.SELF, active=True))
    assert engine.state.selfTeam.get("Toxapex").revealed
    assert not engine.state.selfTeam.get("Garchomp").revealed


def test_tooltip_stats_and_moves():
    engine = make_engine()
    engine.apply(sight("Heatran", Side.OPPONENT, stats={"spe": 210}, moves=["Magma Storm"], teraType="Grass", ability="Not revealed"))
    entry = engine.state.opponentTeam.get("Heatran")
    assert entry.stats == {"spe": 210}
    assert entry.moves == ["Magma Storm"]
    assert entry.teraType is Type.GRASS
    assert not entry.terastallized
    assert entry.ability == ""


def test_turn_marker_is_monotonic():
    engine = make_engine()
    engine.apply(TurnMarker(turn=5))
    engine.apply(TurnMarker(turn=3))
    assert engine.state.turn == 5


def test_snapshot_is_independent():
    engine = make_engine()
    engine.apply(sight("Heatran", Side.OPPONENT))
    snapshot = engine.snapshot()
    snapshot.opponentTeam.get("Heatran").hp = 10
    assert engine.state.opponentTeam.get("Heatran").hp == 100


def test_reset_forgets_the_battle():
    engine = make_engine()
    engine.apply(sight("Heatran", Side.OPPONENT))
    feed_log(engine, "Turn 1")
    engine.reset()
    assert len(engine.state.opponentTeam) == 0
    feed_log(engine, "Turn 1")
    assert engine.state.turn == 1


def test_raw_payloads_validate_into_observations():
    observation = OBSERVATION_ADAPTER.validate_python({"kind": "log", "index": 0, "text": "Turn 1"})
    assert isinstance(observation, LogLine)
    engine = make_engine()
    engine.apply(observation)
    assert engine.state.turn == 1


def test_non_observation_raises():
    with pytest.raises(TypeError):
        make_engine().apply("Turn 1")
