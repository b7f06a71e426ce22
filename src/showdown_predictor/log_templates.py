"""
Battle narration template catalogue

Every template is independent: ``classify`` runs all of them against a line and
returns one LogEvent per match. A single line can legitimately satisfy several
templates ("[Pelipper's Drizzle]" reveals an ability and starts rain), so callers
receive every match and can inspect ``co_matched_kinds`` for review.
"""

import logging
import re
from typing import Callable, Optional

from src.showdown_predictor.constants import MAX_BOOST_STAGE, STAT_ATK, STAT_DEF, STAT_SPATK, STAT_SPDEF, STAT_SPEED
from src.showdown_predictor.enums import Hazard, LogEventKind, Side, Terrain, Weather
from src.showdown_predictor.enums.status import Status
from src.showdown_predictor.schema.observations import LogEvent

logger = logging.getLogger(__name__)

OPPOSING_PREFIX = "the opposing "

STAT_NAMES = {
    "Attack": STAT_ATK,
    "Defense": STAT_DEF,
    "Sp. Atk": STAT_SPATK,
    "Special Attack": STAT_SPATK,
    "Sp. Def": STAT_SPDEF,
    "Special Defense": STAT_SPDEF,
    "Speed": STAT_SPEED,
}

BOOST_MAGNITUDES = {
    "": 1,
    " sharply": 2,
    " harshly": 2,
    " drastically": 3,
    " severely": 3,
}

_STAT_ALTERNATION = "|".join(re.escape(name) for name in sorted(STAT_NAMES, key=len, reverse=True))

Builder = Callable[[re.Match, str, "_Names"], Optional[LogEvent]]


class _Names:
    """Player display names known at classification time"""

    def __init__(self, self_name: Optional[str], opponent_name: Optional[str]):
        self.self_name = (self_name or "").strip().lower()
        self.opponent_name = (opponent_name or "").strip().lower()

    def side_of_player(self, player: str) -> Side:
        lowered = player.strip().lower()
        if self.self_name and lowered == self.self_name:
            return Side.SELF
        if self.opponent_name and lowered == self.opponent_name:
            return Side.OPPONENT
        # One known name is enough to place the other player
        if self.self_name and not self.opponent_name:
            return Side.OPPONENT
        if self.opponent_name and not self.self_name:
            return Side.SELF
        return Side.UNKNOWN


def split_subject(raw: str, names: _Names) -> tuple[Side, str, Optional[str]]:
    """(side, creature name, owning player) for a narrated subject"""
    raw = raw.strip()
    if raw.lower().startswith(OPPOSING_PREFIX):
        return Side.OPPONENT, raw[len(OPPOSING_PREFIX) :].strip(), None
    if "'s " in raw:
        player, name = raw.split("'s ", 1)
        return names.side_of_player(player), name.strip(), player.strip()
    return Side.UNKNOWN, raw, None


def _team_side(line: str) -> Side:
    """Side named by "your team" / "the opposing team" phrasing"""
    return Side.OPPONENT if "opposing" in line.lower() else Side.SELF


def _subject_event(kind: LogEventKind, match: re.Match, names: _Names, **fields) -> LogEvent:
    side, name, player = split_subject(match.group("subject"), names)
    return LogEvent(kind=kind, side=side, subject=name, playerName=player, **fields)


# =============================================================================
# BUILDERS
# =============================================================================


def _turn(match, line, names):
    return LogEvent(kind=LogEventKind.TURN, amount=float(match.group("turn")))


def _go(match, line, names):
    return LogEvent(kind=LogEventKind.SWITCH_IN, side=Side.SELF, subject=match.group("subject").strip())


def _sent_out(match, line, names):
    player = match.group("player").strip()
    return LogEvent(
        kind=LogEventKind.SWITCH_IN,
        side=names.side_of_player(player),
        subject=match.group("subject").strip(),
        playerName=player,
    )


def _came_out(match, line, names):
    return LogEvent(kind=LogEventKind.SWITCH_IN, side=Side.OPPONENT, subject=match.group("subject").strip())


def _move_used(match, line, names):
    return _subject_event(LogEventKind.MOVE_USED, match, names, value=match.group("move").strip())


def _damage(match, line, names):
    return _subject_event(LogEventKind.DAMAGE, match, names, amount=float(match.group("amount")))


def _healed(match, line, names):
    amount = match.groupdict().get("amount")
    return _subject_event(LogEventKind.HEALED, match, names, amount=float(amount) if amount else None)


def _fainted(match, line, names):
    return _subject_event(LogEventKind.FAINTED, match, names)


def _status(status: Status) -> Builder:
    def build(match, line, names):
        return _subject_event(LogEventKind.STATUS_INFLICTED, match, names, value=status.token)

    return build


def _cured(match, line, names):
    return _subject_event(LogEventKind.STATUS_CURED, match, names)


def _tera(match, line, names):
    return _subject_event(LogEventKind.TERASTALLIZED, match, names, value=match.group("type").strip())


def _weather(weather: Weather) -> Builder:
    def build(match, line, names):
        return LogEvent(kind=LogEventKind.WEATHER, weather=weather)

    return build


def _terrain(terrain: Terrain) -> Builder:
    def build(match, line, names):
        return LogEvent(kind=LogEventKind.TERRAIN, terrain=terrain)

    return build


def _hazard(kind: LogEventKind, hazard: Hazard) -> Builder:
    def build(match, line, names):
        return LogEvent(kind=kind, side=_team_side(line), hazard=hazard)

    return build


def _trick_room(on: bool) -> Builder:
    def build(match, line, names):
        return LogEvent(kind=LogEventKind.TRICK_ROOM, on=on)

    return build


def _tailwind(on: bool) -> Builder:
    def build(match, line, names):
        return LogEvent(kind=LogEventKind.TAILWIND, side=_team_side(line), on=on)

    return build


def _item(match, line, names):
    return _subject_event(LogEventKind.ITEM_REVEALED, match, names, value=match.group("item").strip())


def _ability(match, line, names):
    return _subject_event(LogEventKind.ABILITY_REVEALED, match, names, value=match.group("ability").strip())


def _boost(direction: int) -> Builder:
    def build(match, line, names):
        stages = BOOST_MAGNITUDES[match.group("magnitude") or ""] * direction
        return _subject_event(LogEventKind.BOOST, match, names, stat=STAT_NAMES[match.group("stat")], amount=float(stages))

    return build


def _belly_drum(match, line, names):
    return _subject_event(LogEventKind.BOOST, match, names, stat=STAT_ATK, amount=float(2 * MAX_BOOST_STAGE))


def _boost_reset(match, line, names):
    if "subject" in match.groupdict():
        return _subject_event(LogEventKind.BOOST_RESET, match, names)
    return LogEvent(kind=LogEventKind.BOOST_RESET, side=Side.UNKNOWN)


# =============================================================================
# CATALOGUE
# =============================================================================

SUBJECT = r"(?P<subject>.+?)"

TEMPLATES: list[tuple[LogEventKind, re.Pattern, Builder]] = [
    (LogEventKind.TURN, re.compile(r"^Turn (?P<turn>\d+)"), _turn),
    # Switch-ins
    (LogEventKind.SWITCH_IN, re.compile(r"^Go! (?P<subject>.+?)!$"), _go),
    (LogEventKind.SWITCH_IN, re.compile(r"^(?P<player>.+?) sent out (?P<subject>.+?)!$"), _sent_out),
    (LogEventKind.SWITCH_IN, re.compile(r"^The opposing (?P<subject>.+?) (?:came out|appeared)"), _came_out),
    # Moves and health
    (LogEventKind.MOVE_USED, re.compile(r"^%s used (?P<move>.+?)!$" % SUBJECT), _move_used),
    (LogEventKind.DAMAGE, re.compile(r"^%s lost (?P<amount>[\d.]+)%% of its health" % SUBJECT), _damage),
    (LogEventKind.HEALED, re.compile(r"^%s (?:restored|regained|healed) (?P<amount>[\d.]+)%% of its (?:health|HP)" % SUBJECT), _healed),
    (LogEventKind.HEALED, re.compile(r"^%s had its HP restored" % SUBJECT), _healed),
    (LogEventKind.FAINTED, re.compile(r"^%s fainted!" % SUBJECT), _fainted),
    # Status
    (LogEventKind.STATUS_INFLICTED, re.compile(r"^%s was burned" % SUBJECT), _status(Status.BURN)),
    (LogEventKind.STATUS_INFLICTED, re.compile(r"^%s was badly poisoned" % SUBJECT), _status(Status.TOXIC)),
    (LogEventKind.STATUS_INFLICTED, re.compile(r"^%s was poisoned" % SUBJECT), _status(Status.POISON)),
    (LogEventKind.STATUS_INFLICTED, re.compile(r"^%s (?:is|was) paralyzed" % SUBJECT), _status(Status.PARALYSIS)),
    (LogEventKind.STATUS_INFLICTED, re.compile(r"^%s fell asleep" % SUBJECT), _status(Status.SLEEP)),
    (LogEventKind.STATUS_INFLICTED, re.compile(r"^%s was frozen" % SUBJECT), _status(Status.FREEZE)),
    (LogEventKind.STATUS_CURED, re.compile(r"^%s (?:was cured of its \w+|woke up|thawed out)" % SUBJECT), _cured),
    # Terastallization
    (LogEventKind.TERASTALLIZED, re.compile(r"^%s has Terastallized into the (?P<type>\w+)-type" % SUBJECT, re.IGNORECASE), _tera),
    (LogEventKind.TERASTALLIZED, re.compile(r"^%s terastallized to the (?P<type>\w+) type" % SUBJECT, re.IGNORECASE), _tera),
    # Weather
    (LogEventKind.WEATHER, re.compile(r"sunlight turned harsh|Drought|Orichalcum Pulse"), _weather(Weather.SUN)),
    (LogEventKind.WEATHER, re.compile(r"started to rain|Drizzle"), _weather(Weather.RAIN)),
    (LogEventKind.WEATHER, re.compile(r"sandstorm (?:kicked|brewed)|Sand Stream"), _weather(Weather.SAND)),
    (LogEventKind.WEATHER, re.compile(r"started to (?:snow|hail)|Snow Warning"), _weather(Weather.SNOW)),
    (LogEventKind.WEATHER, re.compile(r"weather became clear|sunlight faded|rain stopped|sandstorm subsided|(?:snow|hail) stopped"), _weather(Weather.NONE)),
    # Terrain
    (LogEventKind.TERRAIN, re.compile(r"Electric Terrain|electric current ran|Hadron Engine", re.IGNORECASE), _terrain(Terrain.ELECTRIC)),
    (LogEventKind.TERRAIN, re.compile(r"Grassy Terrain|grass grew", re.IGNORECASE), _terrain(Terrain.GRASSY)),
    (LogEventKind.TERRAIN, re.compile(r"Psychic Terrain|battlefield got weird", re.IGNORECASE), _terrain(Terrain.PSYCHIC)),
    (LogEventKind.TERRAIN, re.compile(r"Misty Terrain|mist swirled", re.IGNORECASE), _terrain(Terrain.MISTY)),
    (LogEventKind.TERRAIN, re.compile(r"terrain (?:returned to normal|disappeared)|(?:electricity|grass|weirdness|mist) disappeared from the battlefield", re.IGNORECASE), _terrain(Terrain.NONE)),
    # Hazards
    (LogEventKind.HAZARD_SET, re.compile(r"Pointed stones float"), _hazard(LogEventKind.HAZARD_SET, Hazard.STEALTH_ROCK)),
    (LogEventKind.HAZARD_SET, re.compile(r"(?<!Poison )(?<!poison )Spikes were scattered"), _hazard(LogEventKind.HAZARD_SET, Hazard.SPIKES)),
    (LogEventKind.HAZARD_SET, re.compile(r"Poison spikes were scattered", re.IGNORECASE), _hazard(LogEventKind.HAZARD_SET, Hazard.TOXIC_SPIKES)),
    (LogEventKind.HAZARD_SET, re.compile(r"sticky web has been laid out", re.IGNORECASE), _hazard(LogEventKind.HAZARD_SET, Hazard.STICKY_WEB)),
    (LogEventKind.HAZARD_REMOVED, re.compile(r"pointed stones disappeared", re.IGNORECASE), _hazard(LogEventKind.HAZARD_REMOVED, Hazard.STEALTH_ROCK)),
    (LogEventKind.HAZARD_REMOVED, re.compile(r"^The spikes disappeared"), _hazard(LogEventKind.HAZARD_REMOVED, Hazard.SPIKES)),
    (LogEventKind.HAZARD_REMOVED, re.compile(r"poison spikes disappeared", re.IGNORECASE), _hazard(LogEventKind.HAZARD_REMOVED, Hazard.TOXIC_SPIKES)),
    (LogEventKind.HAZARD_REMOVED, re.compile(r"sticky web has disappeared", re.IGNORECASE), _hazard(LogEventKind.HAZARD_REMOVED, Hazard.STICKY_WEB)),
    # Trick Room and Tailwind
    (LogEventKind.TRICK_ROOM, re.compile(r"twisted the dimensions"), _trick_room(True)),
    (LogEventKind.TRICK_ROOM, re.compile(r"twisted dimensions returned to normal|Trick Room wore off"), _trick_room(False)),
    (LogEventKind.TAILWIND, re.compile(r"Tailwind blew from behind"), _tailwind(True)),
    (LogEventKind.TAILWIND, re.compile(r"Tailwind petered out"), _tailwind(False)),
    # Item reveals
    (LogEventKind.ITEM_REVEALED, re.compile(r"^%s restored a little HP using its (?P<item>.+?)!" % SUBJECT), _item),
    (LogEventKind.ITEM_REVEALED, re.compile(r"^%s ate its (?P<item>.+?)!" % SUBJECT), _item),
    (LogEventKind.ITEM_REVEALED, re.compile(r"^%s is holding an? (?P<item>.+?)!?$" % SUBJECT), _item),
    (LogEventKind.ITEM_REVEALED, re.compile(r"^%s floats in the air with its (?P<item>.+?)!" % SUBJECT), _item),
    (LogEventKind.ITEM_REVEALED, re.compile(r"^.+? frisked (?P<subject>.+?) and found its (?P<item>.+?)!"), _item),
    (LogEventKind.ITEM_REVEALED, re.compile(r"^%s's (?P<item>[^']+?) activated" % SUBJECT), _item),
    # Ability reveals
    (LogEventKind.ABILITY_REVEALED, re.compile(r"^\[%s's (?P<ability>[^\]']+)\]" % SUBJECT), _ability),
    (LogEventKind.ABILITY_REVEALED, re.compile(r"^\[(?P<ability>[^\]']+)\] of (?P<subject>.+)$"), _ability),
    # Boosts
    (LogEventKind.BOOST, re.compile(r"^%s's (?P<stat>%s) rose(?P<magnitude> sharply| drastically)?!" % (SUBJECT, _STAT_ALTERNATION)), _boost(1)),
    (LogEventKind.BOOST, re.compile(r"^%s's (?P<stat>%s) fell(?P<magnitude> harshly| severely)?!" % (SUBJECT, _STAT_ALTERNATION)), _boost(-1)),
    (LogEventKind.BOOST, re.compile(r"^%s cut its own HP and maximized its Attack" % SUBJECT), _belly_drum),
    (LogEventKind.BOOST_RESET, re.compile(r"^%s's stat changes were removed" % SUBJECT), _boost_reset),
    (LogEventKind.BOOST_RESET, re.compile(r"All stat changes were eliminated"), _boost_reset),
]


def clean_line(text: str) -> str:
    """Strip whitespace and the parentheses Showdown wraps minor lines in"""
    line = text.strip()
    if line.startswith("(") and line.endswith(")"):
        line = line[1:-1].strip()
    return line


def classify(text: str, self_name: Optional[str] = None, opponent_name: Optional[str] = None) -> list[LogEvent]:
    """Every template match for one narration line, in catalogue order. Unmatched text yields []"""
    line = clean_line(text)
    if not line:
        return []

    names = _Names(self_name, opponent_name)
    events: list[LogEvent] = []
    for kind, pattern, build in TEMPLATES:
        match = pattern.search(line)
        if not match:
            continue
        event = build(match, line, names)
        if event is not None and event not in events:
            events.append(event)

    logger.debug("Classified %r -> %s", line, [e.kind.name for e in events])
    return events


def co_matched_kinds(events: list[LogEvent]) -> Optional[tuple[LogEventKind, ...]]:
    """Distinct template kinds when one line satisfied more than one, else None"""
    kinds = tuple(dict.fromkeys(e.kind for e in events))
    return kinds if len(kinds) > 1 else None
