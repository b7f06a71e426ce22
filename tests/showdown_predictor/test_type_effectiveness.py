from src.showdown_predictor.enums import Type
from src.showdown_predictor.type_effectiveness import TypeEffectiveness, effectiveness_of


def test_single_type_lookups():
    assert TypeEffectiveness.get_effectiveness(Type.FIRE, Type.GRASS) == 2.0
    assert TypeEffectiveness.get_effectiveness(Type.FIRE, Type.WATER) == 0.5
    assert TypeEffectiveness.get_effectiveness(Type.NORMAL, Type.GHOST) == 0.0
    assert TypeEffectiveness.get_effectiveness(Type.NORMAL, Type.NORMAL) == 1.0


def test_dual_type_is_product_of_single_lookups():
    assert TypeEffectiveness.calculate_effectiveness(Type.WATER, [Type.FIRE, Type.STEEL]) == 2.0
    assert TypeEffectiveness.calculate_effectiveness(Type.GROUND, [Type.FIRE, Type.STEEL]) == 4.0
    assert TypeEffectiveness.calculate_effectiveness(Type.FAIRY, [Type.DRAGON, Type.DARK]) == 4.0
    assert TypeEffectiveness.calculate_effectiveness(Type.GRASS, [Type.FIRE, Type.FLYING]) == 0.25


def test_composition_holds_across_the_chart():
    for attacking in Type:
        for first in Type:
            for second in Type:
                if first == second:
                    continue
                expected = TypeEffectiveness.get_effectiveness(attacking, first) * TypeEffectiveness.get_effectiveness(attacking, second)
                assert TypeEffectiveness.calculate_effectiveness(attacking, [first, second]) == expected


def test_immunity_wins_over_weakness():
    assert TypeEffectiveness.calculate_effectiveness(Type.GROUND, [Type.ELECTRIC, Type.FLYING]) == 0.0
    assert TypeEffectiveness.get_effectiveness(Type.ELECTRIC, Type.GROUND) == 0.0


def test_freeze_dry_hits_water_super_effectively():
    assert effectiveness_of(Type.ICE, [Type.WATER]) == 0.5
    assert effectiveness_of(Type.ICE, [Type.WATER], freeze_dry=True) == 2.0
    assert effectiveness_of(Type.ICE, [Type.WATER, Type.GROUND], freeze_dry=True) == 4.0
