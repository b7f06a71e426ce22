from typing import Iterable

from src.showdown_predictor.constants import TYPE_MUL_NO_EFFECT, TYPE_MUL_NORMAL, TYPE_MUL_NOT_EFFECTIVE, TYPE_MUL_SUPER_EFFECTIVE
from src.showdown_predictor.enums import Type

# Current-generation type chart (Fairy included, Steel no longer resists Ghost/Dark)
# Format: (AttackingType, DefendingType, Multiplier) - pairs not listed are neutral
TYPE_EFFECTIVENESS_CHART = [
    # Normal
    (Type.NORMAL, Type.ROCK, TYPE_MUL_NOT_EFFECTIVE),
    (Type.NORMAL, Type.GHOST, TYPE_MUL_NO_EFFECT),
    (Type.NORMAL, Type.STEEL, TYPE_MUL_NOT_EFFECTIVE),
    # Fire
    (Type.FIRE, Type.FIRE, TYPE_MUL_NOT_EFFECTIVE),
    (Type.FIRE, Type.WATER, TYPE_MUL_NOT_EFFECTIVE),
    (Type.FIRE, Type.GRASS, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.FIRE, Type.ICE, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.FIRE, Type.BUG, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.FIRE, Type.ROCK, TYPE_MUL_NOT_EFFECTIVE),
    (Type.FIRE, Type.DRAGON, TYPE_MUL_NOT_EFFECTIVE),
    (Type.FIRE, Type.STEEL, TYPE_MUL_SUPER_EFFECTIVE),
    # Water
    (Type.WATER, Type.FIRE, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.WATER, Type.WATER, TYPE_MUL_NOT_EFFECTIVE),
    (Type.WATER, Type.GRASS, TYPE_MUL_NOT_EFFECTIVE),
    (Type.WATER, Type.GROUND, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.WATER, Type.ROCK, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.WATER, Type.DRAGON, TYPE_MUL_NOT_EFFECTIVE),
    # Electric
    (Type.ELECTRIC, Type.WATER, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.ELECTRIC, Type.ELECTRIC, TYPE_MUL_NOT_EFFECTIVE),
    (Type.ELECTRIC, Type.GRASS, TYPE_MUL_NOT_EFFECTIVE),
    (Type.ELECTRIC, Type.GROUND, TYPE_MUL_NO_EFFECT),
    (Type.ELECTRIC, Type.FLYING, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.ELECTRIC, Type.DRAGON, TYPE_MUL_NOT_EFFECTIVE),
    # Grass
    (Type.GRASS, Type.FIRE, TYPE_MUL_NOT_EFFECTIVE),
    (Type.GRASS, Type.WATER, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.GRASS, Type.GRASS, TYPE_MUL_NOT_EFFECTIVE),
    (Type.GRASS, Type.POISON, TYPE_MUL_NOT_EFFECTIVE),
    (Type.GRASS, Type.GROUND, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.GRASS, Type.FLYING, TYPE_MUL_NOT_EFFECTIVE),
    (Type.GRASS, Type.BUG, TYPE_MUL_NOT_EFFECTIVE),
    (Type.GRASS, Type.ROCK, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.GRASS, Type.DRAGON, TYPE_MUL_NOT_EFFECTIVE),
    (Type.GRASS, Type.STEEL, TYPE_MUL_NOT_EFFECTIVE),
    # Ice
    (Type.ICE, Type.FIRE, TYPE_MUL_NOT_EFFECTIVE),
    (Type.ICE, Type.WATER, TYPE_MUL_NOT_EFFECTIVE),
    (Type.ICE, Type.GRASS, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.ICE, Type.ICE, TYPE_MUL_NOT_EFFECTIVE),
    (Type.ICE, Type.GROUND, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.ICE, Type.FLYING, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.ICE, Type.DRAGON, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.ICE, Type.STEEL, TYPE_MUL_NOT_EFFECTIVE),
    # Fighting
    (Type.FIGHTING, Type.NORMAL, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.FIGHTING, Type.ICE, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.FIGHTING, Type.POISON, TYPE_MUL_NOT_EFFECTIVE),
    (Type.FIGHTING, Type.FLYING, TYPE_MUL_NOT_EFFECTIVE),
    (Type.FIGHTING, Type.PSYCHIC, TYPE_MUL_NOT_EFFECTIVE),
    (Type.FIGHTING, Type.BUG, TYPE_MUL_NOT_EFFECTIVE),
    (Type.FIGHTING, Type.ROCK, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.FIGHTING, Type.GHOST, TYPE_MUL_NO_EFFECT),
    (Type.FIGHTING, Type.DARK, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.FIGHTING, Type.STEEL, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.FIGHTING, Type.FAIRY, TYPE_MUL_NOT_EFFECTIVE),
    # Poison
    (Type.POISON, Type.GRASS, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.POISON, Type.POISON, TYPE_MUL_NOT_EFFECTIVE),
    (Type.POISON, Type.GROUND, TYPE_MUL_NOT_EFFECTIVE),
    (Type.POISON, Type.ROCK, TYPE_MUL_NOT_EFFECTIVE),
    (Type.POISON, Type.GHOST, TYPE_MUL_NOT_EFFECTIVE),
    (Type.POISON, Type.STEEL, TYPE_MUL_NO_EFFECT),
    (Type.POISON, Type.FAIRY, TYPE_MUL_SUPER_EFFECTIVE),
    # Ground
    (Type.GROUND, Type.FIRE, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.GROUND, Type.ELECTRIC, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.GROUND, Type.GRASS, TYPE_MUL_NOT_EFFECTIVE),
    (Type.GROUND, Type.POISON, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.GROUND, Type.FLYING, TYPE_MUL_NO_EFFECT),
    (Type.GROUND, Type.BUG, TYPE_MUL_NOT_EFFECTIVE),
    (Type.GROUND, Type.ROCK, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.GROUND, Type.STEEL, TYPE_MUL_SUPER_EFFECTIVE),
    # Flying
    (Type.FLYING, Type.ELECTRIC, TYPE_MUL_NOT_EFFECTIVE),
    (Type.FLYING, Type.GRASS, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.FLYING, Type.FIGHTING, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.FLYING, Type.BUG, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.FLYING, Type.ROCK, TYPE_MUL_NOT_EFFECTIVE),
    (Type.FLYING, Type.STEEL, TYPE_MUL_NOT_EFFECTIVE),
    # Psychic
    (Type.PSYCHIC, Type.FIGHTING, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.PSYCHIC, Type.POISON, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.PSYCHIC, Type.PSYCHIC, TYPE_MUL_NOT_EFFECTIVE),
    (Type.PSYCHIC, Type.DARK, TYPE_MUL_NO_EFFECT),
    (Type.PSYCHIC, Type.STEEL, TYPE_MUL_NOT_EFFECTIVE),
    # Bug
    (Type.BUG, Type.FIRE, TYPE_MUL_NOT_EFFECTIVE),
    (Type.BUG, Type.GRASS, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.BUG, Type.FIGHTING, TYPE_MUL_NOT_EFFECTIVE),
    (Type.BUG, Type.POISON, TYPE_MUL_NOT_EFFECTIVE),
    (Type.BUG, Type.FLYING, TYPE_MUL_NOT_EFFECTIVE),
    (Type.BUG, Type.PSYCHIC, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.BUG, Type.GHOST, TYPE_MUL_NOT_EFFECTIVE),
    (Type.BUG, Type.DARK, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.BUG, Type.STEEL, TYPE_MUL_NOT_EFFECTIVE),
    (Type.BUG, Type.FAIRY, TYPE_MUL_NOT_EFFECTIVE),
    # Rock
    (Type.ROCK, Type.FIRE, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.ROCK, Type.ICE, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.ROCK, Type.FIGHTING, TYPE_MUL_NOT_EFFECTIVE),
    (Type.ROCK, Type.GROUND, TYPE_MUL_NOT_EFFECTIVE),
    (Type.ROCK, Type.FLYING, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.ROCK, Type.BUG, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.ROCK, Type.STEEL, TYPE_MUL_NOT_EFFECTIVE),
    # Ghost
    (Type.GHOST, Type.NORMAL, TYPE_MUL_NO_EFFECT),
    (Type.GHOST, Type.PSYCHIC, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.GHOST, Type.GHOST, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.GHOST, Type.DARK, TYPE_MUL_NOT_EFFECTIVE),
    # Dragon
    (Type.DRAGON, Type.DRAGON, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.DRAGON, Type.STEEL, TYPE_MUL_NOT_EFFECTIVE),
    (Type.DRAGON, Type.FAIRY, TYPE_MUL_NO_EFFECT),
    # Dark
    (Type.DARK, Type.FIGHTING, TYPE_MUL_NOT_EFFECTIVE),
    (Type.DARK, Type.PSYCHIC, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.DARK, Type.GHOST, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.DARK, Type.DARK, TYPE_MUL_NOT_EFFECTIVE),
    (Type.DARK, Type.FAIRY, TYPE_MUL_NOT_EFFECTIVE),
    # Steel
    (Type.STEEL, Type.FIRE, TYPE_MUL_NOT_EFFECTIVE),
    (Type.STEEL, Type.WATER, TYPE_MUL_NOT_EFFECTIVE),
    (Type.STEEL, Type.ELECTRIC, TYPE_MUL_NOT_EFFECTIVE),
    (Type.STEEL, Type.ICE, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.STEEL, Type.ROCK, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.STEEL, Type.STEEL, TYPE_MUL_NOT_EFFECTIVE),
    (Type.STEEL, Type.FAIRY, TYPE_MUL_SUPER_EFFECTIVE),
    # Fairy
    (Type.FAIRY, Type.FIRE, TYPE_MUL_NOT_EFFECTIVE),
    (Type.FAIRY, Type.FIGHTING, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.FAIRY, Type.POISON, TYPE_MUL_NOT_EFFECTIVE),
    (Type.FAIRY, Type.DRAGON, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.FAIRY, Type.DARK, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.FAIRY, Type.STEEL, TYPE_MUL_NOT_EFFECTIVE),
]

_CHART_INDEX: dict[tuple[Type, Type], float] = {(atk, dfn): mul for atk, dfn, mul in TYPE_EFFECTIVENESS_CHART}


class TypeEffectiveness:
    """Type effectiveness lookups over the sparse chart above"""

    @staticmethod
    def get_effectiveness(attacking_type: Type, defending_type: Type) -> float:
        """
        Single-type multiplier.

        Returns:
            TYPE_MUL_NO_EFFECT (0.0), TYPE_MUL_NOT_EFFECTIVE (0.5),
            TYPE_MUL_NORMAL (1.0) or TYPE_MUL_SUPER_EFFECTIVE (2.0)
        """
        return _CHART_INDEX.get((attacking_type, defending_type), TYPE_MUL_NORMAL)

    @staticmethod
    def calculate_effectiveness(attacking_type: Type, defending_types: Iterable[Type]) -> float:
        """
        Combined multiplier against one or two defending types.

        The product of the per-type lookups, so dual typings yield
        0, 0.25, 0.5, 1, 2 or 4. A repeated type is only counted once.
        """
        multiplier = TYPE_MUL_NORMAL
        for defending_type in dict.fromkeys(defending_types):
            multiplier *= TypeEffectiveness.get_effectiveness(attacking_type, defending_type)
        return multiplier


def effectiveness_of(attacking_type: Type, defending_types: Iterable[Type], freeze_dry: bool = False) -> float:
    """Chart multiplier, with Freeze-Dry's super-effective hit on Water"""
    defending = list(dict.fromkeys(defending_types))
    if not freeze_dry:
        return TypeEffectiveness.calculate_effectiveness(attacking_type, defending)
    multiplier = TYPE_MUL_NORMAL
    for defending_type in defending:
        if defending_type == Type.WATER:
            multiplier *= TYPE_MUL_SUPER_EFFECTIVE
        else:
            multiplier *= TypeEffectiveness.get_effectiveness(attacking_type, defending_type)
    return multiplier

