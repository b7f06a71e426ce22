from src.showdown_predictor.damage_calculator import DamageCalculator, apply_stat_stage, estimate, weight_based_power
from src.showdown_predictor.enums import MoveCategory, MoveFlag, Status, Terrain, Type, Weather
from src.showdown_predictor.knowledge_base import DEFAULT_KNOWLEDGE_BASE
from src.showdown_predictor.schema.battle_move import MoveSpec
from src.showdown_predictor.schema.battle_pokemon import Combatant, RosterEntry
from src.showdown_predictor.schema.battle_state import FieldState
from src.showdown_predictor.utils.mon_factory import create_combatant

KB = DEFAULT_KNOWLEDGE_BASE


def make_combatant(name: str, **fields) -> Combatant:
    return create_combatant(RosterEntry(name=name, **fields), knowledge_base=KB)


def make_move(power: int, type_: Type = Type.GROUND, category: MoveCategory = MoveCategory.PHYSICAL) -> MoveSpec:
    return MoveSpec(name="Test Move", power=power, type=type_, category=category, priority=0, accuracy=100, flags=MoveFlag.NONE)


def test_stab_ground_move_into_fire_steel_is_4x():
    attacker = make_combatant("Landorus-Therian")
    defender = make_combatant("Heatran")

    result = estimate(attacker, defender, KB.move("Earthquake"))

    assert result.effectiveness == 4.0
    assert result.maxPercent > 80
    # 389 Atk into 311 Def, base 107, x1.5 STAB x4 = 642 against 386 HP
    assert result.maxPercent == 166
    assert result.minPercent == 141


def test_status_moves_do_no_damage():
    attacker = make_combatant("Garchomp")
    defender = make_combatant("Toxapex")
    for name in ("Swords Dance", "Toxic", "Stealth Rock", "Recover"):
        result = estimate(attacker, defender, KB.move(name))
        assert (result.minPercent, result.maxPercent) == (0, 0)
        assert result.effectiveness == 1.0


def test_unknown_move_does_no_damage():
    result = estimate(make_combatant("Garchomp"), make_combatant("Toxapex"), KB.move("Definitely Not A Move"))
    assert result.maxPercent == 0


def test_immunity_returns_zero_effectiveness():
    result = estimate(make_combatant("Garchomp"), make_combatant("Corviknight"), KB.move("Earthquake"))
    assert result.effectiveness == 0.0
    assert result.maxPercent == 0


def test_damage_is_monotonic_in_power():
    attacker = make_combatant("Garchomp")
    defender = make_combatant("Clefable")
    previous = -1
    for power in range(10, 260, 10):
        result = estimate(attacker, defender, make_move(power))
        assert result.maxPercent >= previous
        assert result.minPercent <= result.maxPercent
        previous = result.maxPercent


def test_boost_stage_ratios():
    assert apply_stat_stage(100, 0) == 100
    assert apply_stat_stage(100, 1) == 150
    assert apply_stat_stage(100, 2) == 200
    assert apply_stat_stage(100, -1) == 66
    assert apply_stat_stage(100, -2) == 50
    assert apply_stat_stage(100, 12) == apply_stat_stage(100, 6) == 400


def test_attack_boost_increases_damage():
    defender = make_combatant("Clefable")
    plain = estimate(make_combatant("Garchomp"), defender, KB.move("Earthquake"))
    boosted = estimate(make_combatant("Garchomp", statStages=[0, 2, 0, 0, 0, 0]), defender, KB.move("Earthquake"))
    assert boosted.maxPercent > plain.maxPercent


def test_seismic_toss_is_fixed_level_damage():
    result = estimate(make_combatant("Blissey"), make_combatant("Garchomp"), KB.move("Seismic Toss"))
    garchomp_hp = 2 * 108 + 31 + 63 + 110
    assert result.minPercent == result.maxPercent == 100 / garchomp_hp * 100


def test_knock_off_is_boosted_against_an_item():
    attacker = make_combatant("Weavile")
    plain = estimate(attacker, make_combatant("Clefable"), KB.move("Knock Off"))
    holding = estimate(attacker, make_combatant("Clefable", item="Leftovers"), KB.move("Knock Off"))
    assert holding.maxPercent > plain.maxPercent


def test_facade_and_hex_depend_on_status():
    defender = make_combatant("Clefable")
    assert estimate(make_combatant("Garchomp", status=Status.BURN), defender, KB.move("Facade")).maxPercent > estimate(
        make_combatant("Garchomp"), defender, KB.move("Facade")
    ).maxPercent
    attacker = make_combatant("Gengar")
    assert estimate(attacker, make_combatant("Clefable", status=Status.TOXIC), KB.move("Hex")).maxPercent > estimate(
        attacker, defender, KB.move("Hex")
    ).maxPercent


def test_low_kick_power_follows_weight():
    assert weight_based_power(5.0) == 20
    assert weight_based_power(95.0) == 80
    assert weight_based_power(400.0) == 120
    assert weight_based_power(None) == 60
    attacker = make_combatant("Iron Valiant")
    light = estimate(attacker, make_combatant("Clefable"), KB.move("Low Kick"))
    heavy = estimate(attacker, make_combatant("Hippowdon"), KB.move("Low Kick"))
    assert light.maxPercent > 0
    assert heavy.maxPercent > light.maxPercent


def test_body_press_uses_attacker_defense():
    defender = make_combatant("Clefable")
    plain = estimate(make_combatant("Corviknight"), defender, KB.move("Body Press"))
    defense_boosted = estimate(make_combatant("Corviknight", statStages=[0, 0, 2, 0, 0, 0]), defender, KB.move("Body Press"))
    attack_boosted = estimate(make_combatant("Corviknight", statStages=[0, 2, 0, 0, 0, 0]), defender, KB.move("Body Press"))
    assert defense_boosted.maxPercent > plain.maxPercent
    assert attack_boosted.maxPercent == plain.maxPercent


def test_psyshock_targets_physical_defense():
    attacker = make_combatant("Alakazam")
    psyshock = estimate(attacker, make_combatant("Blissey"), KB.move("Psyshock"))
    psychic_like = estimate(attacker, make_combatant("Blissey"), make_move(80, Type.PSYCHIC, MoveCategory.SPECIAL))
    assert psyshock.maxPercent > psychic_like.maxPercent


def test_terastallized_defender_uses_tera_type_only():
    attacker = make_combatant("Garchomp")
    result = estimate(attacker, make_combatant("Heatran", teraType=Type.FLYING, terastallized=True), KB.move("Earthquake"))
    assert result.effectiveness == 0.0


def test_tera_stab_into_original_type_is_doubled():
    calculator = DamageCalculator(KB)
    plain = make_combatant("Garchomp")
    tera = make_combatant("Garchomp", teraType=Type.GROUND, terastallized=True)
    assert calculator._stab(plain, Type.GROUND) == 1.5
    assert calculator._stab(tera, Type.GROUND) == 2.0
    assert calculator._stab(tera, Type.DRAGON) == 1.5


def test_tera_blast_takes_tera_type():
    defender = make_combatant("Heatran")
    attacker = make_combatant("Dragonite", teraType=Type.GROUND, terastallized=True)
    result = estimate(attacker, defender, KB.move("Tera Blast"))
    assert result.effectiveness == 4.0


def test_weather_and_terrain_modifiers():
    attacker = make_combatant("Heatran")
    defender = make_combatant("Clefable")
    flamethrower = KB.move("Flamethrower")
    neutral = estimate(attacker, defender, flamethrower).maxPercent
    assert estimate(attacker, defender, flamethrower, FieldState(weather=Weather.SUN)).maxPercent > neutral
    assert estimate(attacker, defender, flamethrower, FieldState(weather=Weather.RAIN)).maxPercent < neutral

    dragon = make_combatant("Garchomp")
    claw = make_move(80, Type.DRAGON)
    assert estimate(dragon, make_combatant("Heatran"), claw, FieldState(terrain=Terrain.MISTY)).maxPercent < estimate(
        dragon, make_combatant("Heatran"), claw
    ).maxPercent


def test_item_modifiers():
    defender = make_combatant("Clefable")
    plain = estimate(make_combatant("Garchomp"), defender, KB.move("Earthquake")).maxPercent
    banded = estimate(make_combatant("Garchomp", item="Choice Band"), defender, KB.move("Earthquake")).maxPercent
    specs = estimate(make_combatant("Garchomp", item="Choice Specs"), defender, KB.move("Earthquake")).maxPercent
    assert banded > plain
    assert specs == plain


def test_defender_modifiers():
    attacker = make_combatant("Heatran")
    plain = estimate(attacker, make_combatant("Clefable"), KB.move("Flamethrower")).maxPercent
    vest = estimate(attacker, make_combatant("Clefable", item="Assault Vest"), KB.move("Flamethrower")).maxPercent
    assert vest < plain

    dnite = make_combatant("Dragonite", ability="Multiscale")
    chipped = make_combatant("Dragonite", ability="Multiscale", hp=80)
    ice_beam = KB.move("Ice Beam")
    assert estimate(attacker, dnite, ice_beam).maxPercent < estimate(attacker, chipped, ice_beam).maxPercent


def test_observed_stats_replace_assumed_spread():
    defender = make_combatant("Clefable")
    assumed = estimate(make_combatant("Garchomp"), defender, KB.move("Earthquake")).maxPercent
    weak = estimate(make_combatant("Garchomp", stats={"atk": 150}), defender, KB.move("Earthquake")).maxPercent
    assert weak < assumed
