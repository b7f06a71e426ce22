from src.showdown_predictor.enums import MoveCategory, Type
from src.showdown_predictor.knowledge_base import DEFAULT_KNOWLEDGE_BASE, KnowledgeBase
from src.showdown_predictor.schema.species_info import SpeciesInfo

KB = DEFAULT_KNOWLEDGE_BASE


def test_lookup_is_case_insensitive():
    assert KB.species("heatran").name == "Heatran"
    assert KB.move("EARTHQUAKE").name == "Earthquake"


def test_prefix_fallback_both_ways():
    assert KB.species("Landorus").name == "Landorus-Therian"
    assert KB.species("Urshifu-Rapid-Strike-Gmax").name == "Urshifu-Rapid-Strike"
    assert KB.species("Urshifu").name == "Urshifu"


def test_short_names_do_not_prefix_match():
    assert KB.species("Ga").isUnknown


def test_unknown_species_placeholder():
    info = KB.species("Fakemonster")
    assert info.isUnknown
    assert info.types == [Type.NORMAL]
    assert info.baseSpeed == 80
    assert "Fakemonster" in info.note
    assert not KB.has_species("Fakemonster")


def test_unknown_move_placeholder():
    move = KB.move("Mystery Beam")
    assert move.isUnknown
    assert move.category is MoveCategory.STATUS
    assert move.power == 0


def test_weights():
    assert KB.weight_kg("Hippowdon") == 300.0
    assert KB.weight_kg("Fakemonster") is None


def test_custom_tables_can_be_injected():
    dummy = SpeciesInfo(
        name="Testmon",
        types=[Type.FIRE],
        baseHP=50,
        baseAttack=50,
        baseDefense=50,
        baseSpAttack=50,
        baseSpDefense=50,
        baseSpeed=50,
    )
    kb = KnowledgeBase(species={"Testmon": dummy})
    assert kb.species("testmon") is dummy
    assert kb.species("Heatran").isUnknown
    assert kb.move("Earthquake").power == 100


def test_every_common_set_move_is_known():
    for name in ("Heatran", "Landorus-Therian", "Toxapex", "Dragapult", "Blissey", "Corviknight"):
        for common_set in KB.species(name).commonSets:
            for move in common_set.moves:
                assert KB.has_move(move), (name, move)
