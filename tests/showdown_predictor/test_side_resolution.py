from src.showdown_predictor.enums import ScreenPosition, Side, SideResolutionMethod
from src.showdown_predictor.schema.observations import PlayerIdentity, VisualSighting
from src.showdown_predictor.side_resolution import SideResolver, other_slot


def make_sighting(name: str, **fields) -> VisualSighting:
    return VisualSighting(rawName=name, **fields)


def test_other_slot():
    assert other_slot("p1") == "p2"
    assert other_slot("p2") == "p1"


def test_explicit_marker_resolves_slot():
    resolver = SideResolver()
    assert resolver.side_for(make_sighting("Garchomp", side=Side.OPPONENT, slot="p1")) is Side.OPPONENT
    assert resolver.self_slot == "p2"
    assert resolver.method is SideResolutionMethod.EXPLICIT_MARKER
    assert resolver.side_for(make_sighting("Heatran", slot="p2")) is Side.SELF


def test_display_name_resolves_slot():
    resolver = SideResolver()
    resolver.observe_players(PlayerIdentity(selfName="Alice", slotNames={"p1": "Bob", "p2": "alice"}))
    assert resolver.self_slot == "p2"
    assert resolver.method is SideResolutionMethod.DISPLAY_NAME
    assert resolver.side_for(make_sighting("Heatran", slot="p1")) is Side.OPPONENT


def test_opponent_display_name_places_self_in_other_slot():
    resolver = SideResolver()
    resolver.observe_players(PlayerIdentity(opponentName="Bob", slotNames={"p1": "Bob"}))
    assert resolver.self_slot == "p2"


def test_own_menu_names_resolve_structurally():
    resolver = SideResolver()
    resolver.observe_own_names(["Garchomp", "Toxapex"])
    assert resolver.side_for(make_sighting("Garchomp", slot="p1")) is Side.SELF
    assert resolver.method is SideResolutionMethod.STRUCTURAL
    assert resolver.side_for(make_sighting("Heatran", slot="p2")) is Side.OPPONENT


def test_positional_is_the_last_resort():
    resolver = SideResolver()
    assert resolver.side_for(make_sighting("Heatran", slot="p1", position=ScreenPosition.FAR)) is Side.OPPONENT
    assert resolver.self_slot == "p2"
    assert resolver.method is SideResolutionMethod.POSITIONAL


def test_resolution_is_cached():
    resolver = SideResolver()
    resolver.side_for(make_sighting("Garchomp", side=Side.SELF, slot="p1"))
    resolver.observe_players(PlayerIdentity(selfName="Alice", slotNames={"p2": "Alice"}))
    assert resolver.self_slot == "p1"
    assert resolver.method is SideResolutionMethod.EXPLICIT_MARKER


def test_no_evidence_is_unknown():
    resolver = SideResolver()
    assert resolver.side_for(make_sighting("Garchomp")) is Side.UNKNOWN
    assert resolver.side_for(make_sighting("Garchomp", slot="p1")) is Side.UNKNOWN
    assert not resolver.resolved


def test_position_without_slot():
    resolver = SideResolver()
    assert resolver.side_for(make_sighting("Garchomp", position=ScreenPosition.NEAR)) is Side.SELF
    assert resolver.side_for(make_sighting("Heatran", position=ScreenPosition.FAR)) is Side.OPPONENT
    assert not resolver.resolved


def test_side_for_player():
    resolver = SideResolver()
    resolver.observe_players(PlayerIdentity(selfName="Alice", opponentName="Bob"))
    assert resolver.side_for_player("alice") is Side.SELF
    assert resolver.side_for_player("Bob") is Side.OPPONENT
    assert resolver.side_for_player("Carol") is Side.UNKNOWN
    assert resolver.side_for_player(None) is Side.UNKNOWN
