import pytest

from src.showdown_predictor.schema.battle_pokemon import RosterEntry
from src.showdown_predictor.utils.mon_factory import assumed_stat, compute_stat, create_combatant, speed_bounds


def test_stat_formula():
    # Heatran at the assumed spread
    assert assumed_stat(91, is_hp=True) == 386
    assert assumed_stat(106) == 311
    assert compute_stat(77, 31, 252, 100, is_hp=False, nature_multiplier=1.1) == 278


def test_shedinja_hp_is_one():
    assert assumed_stat(1, is_hp=True) == 1


def test_speed_bounds():
    assert speed_bounds(102) == (216, 333)


def test_combatant_from_entry():
    entry = RosterEntry(name="Garchomp", hp=40, item="Choice Band", stats={"atk": 300}, statStages=[0, 1, 0, 0, 0, 0])
    combatant = create_combatant(entry)
    assert combatant.stats["atk"] == 300
    assert combatant.stats["hp"] == 420
    assert combatant.hp == 40
    assert combatant.item == "Choice Band"
    assert combatant.statStages[1] == 1
    assert combatant.ability == "Rough Skin"


def test_combatant_from_species_name():
    combatant = create_combatant(species_name="Toxapex")
    assert combatant.hp == 100
    assert combatant.ability == "Regenerator"


def test_combatant_needs_a_name():
    with pytest.raises(ValueError):
        create_combatant()
