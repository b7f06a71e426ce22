from enum import IntEnum


class Weather(IntEnum):
    NONE = 0
    SUN = 1
    RAIN = 2
    SAND = 3
    SNOW = 4


class Terrain(IntEnum):
    NONE = 0
    ELECTRIC = 1
    GRASSY = 2
    PSYCHIC = 3
    MISTY = 4


class Side(IntEnum):
    """Which roster an observation belongs to, from the local player's point of view"""

    SELF = 0
    OPPONENT = 1
    UNKNOWN = 2

    @property
    def other(self) -> "Side":
        if self is Side.SELF:
            return Side.OPPONENT
        if self is Side.OPPONENT:
            return Side.SELF
        return Side.UNKNOWN


class EvidenceSource(IntEnum):
    """Identity authority of an evidence channel - higher wins on conflicts"""

    LOG = 0  # battle narration
    MENU = 1  # own move/switch menus
    VISUAL = 2  # status bars, team icons, tooltips


class SideResolutionMethod(IntEnum):
    """How the self slot was established - lower values are more reliable"""

    EXPLICIT_MARKER = 0
    DISPLAY_NAME = 1
    STRUCTURAL = 2
    POSITIONAL = 3


class ScreenPosition(IntEnum):
    NEAR = 0  # bottom half of the battle surface
    FAR = 1  # top half of the battle surface


class Archetype(IntEnum):
    BALANCE = 0
    HYPER_OFFENSE = 1
    STALL = 2


class SwitchLikelihood(IntEnum):
    LOW = 0
    MEDIUM = 1
    HIGH = 2


class SpeedVerdict(IntEnum):
    FASTER = 0
    OUTSPED = 1
    SPEED_TIE = 2


class EffectivenessClass(IntEnum):
    IMMUNE = 0
    RESISTED = 1
    NEUTRAL = 2
    SUPER_EFFECTIVE = 3

    @classmethod
    def from_multiplier(cls, multiplier: float) -> "EffectivenessClass":
        if multiplier == 0:
            return cls.IMMUNE
        if multiplier < 1:
            return cls.RESISTED
        if multiplier > 1:
            return cls.SUPER_EFFECTIVE
        return cls.NEUTRAL


class LogEventKind(IntEnum):
    """Narration template catalogue entries"""

    TURN = 0
    SWITCH_IN = 1
    MOVE_USED = 2
    DAMAGE = 3
    HEALED = 4
    FAINTED = 5
    STATUS_INFLICTED = 6
    STATUS_CURED = 7
    TERASTALLIZED = 8
    WEATHER = 9
    TERRAIN = 10
    HAZARD_SET = 11
    HAZARD_REMOVED = 12
    TRICK_ROOM = 13
    TAILWIND = 14
    ITEM_REVEALED = 15
    ABILITY_REVEALED = 16
    BOOST = 17
    BOOST_RESET = 18


class Hazard(IntEnum):
    STEALTH_ROCK = 0
    SPIKES = 1
    TOXIC_SPIKES = 2
    STICKY_WEB = 3
