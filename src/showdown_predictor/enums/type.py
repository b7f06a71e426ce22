from enum import IntEnum
from typing import Optional


class Type(IntEnum):
    """Elemental types - row/column order of the Gen 9 type chart"""

    NORMAL = 0
    FIRE = 1
    WATER = 2
    ELECTRIC = 3
    GRASS = 4
    ICE = 5
    FIGHTING = 6
    POISON = 7
    GROUND = 8
    FLYING = 9
    PSYCHIC = 10
    BUG = 11
    ROCK = 12
    GHOST = 13
    DRAGON = 14
    DARK = 15
    STEEL = 16
    FAIRY = 17

    @classmethod
    def from_name(cls, name: Optional[str]) -> Optional["Type"]:
        """Parse a type from UI or narration text, None when unrecognised"""
        if not name:
            return None
        key = name.strip().upper()
        if key.endswith("-TYPE"):
            key = key[: -len("-TYPE")]
        return cls.__members__.get(key)
