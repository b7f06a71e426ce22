from enum import IntEnum, IntFlag


class MoveCategory(IntEnum):
    PHYSICAL = 0
    SPECIAL = 1
    STATUS = 2


class MoveFlag(IntFlag):
    """Behaviour flags attached to move records"""

    NONE = 0
    CONTACT = 1 << 0
    RECOVERY = 1 << 1
    HAZARD = 1 << 2
    PIVOT = 1 << 3
    SETUP = 1 << 4
    PRIORITY = 1 << 5
    STATUS = 1 << 6  # inflicts a non-volatile status
    SOUND = 1 << 7
    WEATHER = 1 << 8
    TERRAIN = 1 << 9
    PUNCH = 1 << 10
    SLICING = 1 << 11
