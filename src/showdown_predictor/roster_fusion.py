import logging
from typing import Optional

from src.showdown_predictor.constants import LOG_BACKLOG_LIMIT, MAX_HP_PERCENT, STAT_KEYS
from src.showdown_predictor.enums import EvidenceSource, LogEventKind, Side, Status, Type
from src.showdown_predictor.knowledge_base import DEFAULT_KNOWLEDGE_BASE, KnowledgeBase
from src.showdown_predictor.log_templates import classify, co_matched_kinds
from src.showdown_predictor.name_canonicalizer import is_more_specific, normalize
from src.showdown_predictor.schema.battle_pokemon import RosterEntry
from src.showdown_predictor.schema.battle_state import BattleState
from src.showdown_predictor.schema.observations import LogEvent, LogLine, MenuSnapshot, Observation, PlayerIdentity, TurnMarker, VisualSighting
from src.showdown_predictor.side_resolution import SideResolver

logger = logging.getLogger(__name__)

# Values the UI shows in place of an unknown item or ability
_UNREVEALED = {"", "not revealed", "unknown", "(exists)", "none"}


def _revealed(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return None if value.lower() in _UNREVEALED else value


class RosterFusionEngine:
    """
    Owns the BattleState of one battle and fuses the observation stream into it

    Observations arrive unordered and may be redelivered. Every handler is
    idempotent, narration lines are applied strictly in log order, and no
    handler raises for bad data - contradictory or unresolvable evidence is
    dropped with a log message.

    Identity authority: VisualSighting > MenuSnapshot > LogLine. Only visual
    and menu evidence may create roster entries, only visual evidence may move
    an entry between teams.
    """

    def __init__(self, knowledge_base: Optional[KnowledgeBase] = None):
        self.knowledge_base = knowledge_base or DEFAULT_KNOWLEDGE_BASE
        self.reset()

    def reset(self) -> None:
        """Forget everything - call between battles"""
        self.state = BattleState()
        self.sides = SideResolver()
        self.co_matches: set[tuple[LogEventKind, ...]] = set()
        self._next_log_index = 0
        self._pending_logs: dict[int, str] = {}

    def snapshot(self) -> BattleState:
        """Read-only copy for the analysis path"""
        return self.state.snapshot()

    def apply(self, observation: Observation) -> None:
        """Fuse one observation into the battle state"""
        match observation:
            case VisualSighting():
                self._apply_sighting(observation)
            case LogLine():
                self._apply_log_line(observation)
            case MenuSnapshot():
                self._apply_menu(observation)
            case TurnMarker():
                self.state.turn = max(self.state.turn, observation.turn)
            case PlayerIdentity():
                self._apply_players(observation)
            case _:
                raise TypeError("Not an observation: %r" % (observation,))

    # =========================================================================
    # ROSTER MEMBERSHIP
    # =========================================================================

    def ensure_member(self, side: Side, raw_name: str, source: EvidenceSource) -> Optional[str]:
        """
        Resolve raw_name to a member of side's team, creating or relocating it when allowed

        Args:
            side: SELF or OPPONENT - an unknown side never creates or relocates
            raw_name: name as observed
            source: evidence channel, decides what the call may do

        Returns:
            The member's canonical key, or None when nothing could be resolved

        1. An empty canonical name resolves to nothing
        2. A member of this team is returned, upgraded to a more specific form if one is observed
        3. A member of the other team only moves over on visual evidence
        4. A new creature is only created from visual or menu evidence, and only into a team with room
        """
        key = self._ensure_member(side, raw_name, source)
        if key is not None and side is not Side.UNKNOWN and source is EvidenceSource.VISUAL:
            self.state.team(side).get(key).revealed = True
        return key

    def _ensure_member(self, side: Side, raw_name: str, source: EvidenceSource) -> Optional[str]:
        name = normalize(raw_name)
        if not name:
            return None
        if side is Side.UNKNOWN:
            found = self._resolve(Side.UNKNOWN, name)
            return found[1].name if found else None

        team = self.state.team(side)
        key = team.find(name)
        if key is not None:
            if is_more_specific(name, key):
                team.rename(key, name)
                if self.state.active(side) == key:
                    self.state.set_active(side, name)
                logger.info("Form change on %s: %s -> %s", side.name, key, name)
                return name
            return key

        other = self.state.team(side.other)
        other_key = other.find(name)
        if other_key is not None:
            if source is not EvidenceSource.VISUAL:
                logger.warning("Refused to move %s to %s on %s evidence", other_key, side.name, source.name)
                return None
            if team.is_full():
                logger.warning("Refused to move %s to %s: team is full", other_key, side.name)
                return None
            entry = other.pop(other_key)
            if self.state.active(side.other) == other_key:
                self.state.set_active(side.other, None)
            team.add(entry)
            logger.info("Moved %s from %s to %s", other_key, side.other.name, side.name)
            return other_key

        if source is EvidenceSource.LOG:
            logger.debug("Narration names unseen creature %s, not creating it", name)
            return None
        if team.is_full():
            logger.warning("Refused to add %s to %s: team is full", name, side.name)
            return None

        team.add(RosterEntry(name=name))
        logger.debug("Added %s to %s team", name, side.name)
        return name

    def _resolve(self, side: Side, raw_name: Optional[str]) -> Optional[tuple[Side, RosterEntry]]:
        """Existing entry for a name - never creates. An unknown side searches self, then opponent"""
        name = normalize(raw_name)
        if not name:
            return None
        sides = (side,) if side is not Side.UNKNOWN else (Side.SELF, Side.OPPONENT)
        for candidate in sides:
            entry = self.state.team(candidate).get(name)
            if entry is not None:
                return candidate, entry
        return None

    def _set_active(self, side: Side, key: str) -> None:
        previous = self.state.active_entry(side)
        if previous is not None and previous.name != key:
            previous.reset_stages()
        self.state.set_active(side, key)

    # =========================================================================
    # VISUAL SIGHTINGS
    # =========================================================================

    def _apply_sighting(self, sighting: VisualSighting) -> None:
        side = self.sides.side_for(sighting)
        if side is Side.UNKNOWN:
            found = self._resolve(Side.UNKNOWN, sighting.rawName)
            if found is None:
                return
            side, entry = found
        else:
            key = self.ensure_member(side, sighting.rawName, EvidenceSource.VISUAL)
            if key is None:
                return
            entry = self.state.team(side).members[key]
            if sighting.active:
                self._set_active(side, key)

        self._update_from_sighting(entry, sighting)

    def _update_from_sighting(self, entry: RosterEntry, sighting: VisualSighting) -> None:
        if sighting.fainted:
            entry.faint()
        elif sighting.hp is not None and not entry.status.is_fainted():
            entry.set_hp(sighting.hp)

        if sighting.statusToken is not None:
            token = sighting.statusToken.strip()
            status = Status.from_token(token) if token else Status.NONE
            if status is not None:
                entry.set_status(status)

        item = _revealed(sighting.item)
        if item:
            entry.item = item
        ability = _revealed(sighting.ability)
        if ability:
            entry.ability = ability

        tera_type = Type.from_name(sighting.teraType)
        if tera_type is not None and not entry.terastallized:
            entry.teraType = tera_type

        if sighting.stats:
            known = {k: int(v) for k, v in sighting.stats.items() if k.lower() in STAT_KEYS.values()}
            if known:
                entry.stats = {**(entry.stats or {}), **{k.lower(): v for k, v in known.items()}}

        for move in sighting.moves:
            if entry.learn_move(move):
                logger.debug("%s learned %s from a tooltip", entry.name, move)

    # =========================================================================
    # MENUS AND PLAYERS
    # =========================================================================

    def _apply_menu(self, menu: MenuSnapshot) -> None:
        state = self.state
        candidates = [c.name for c in menu.ownSwitchCandidates]
        self.sides.observe_own_names(candidates)

        switches = []
        for raw_name in candidates:
            key = self.ensure_member(Side.SELF, raw_name, EvidenceSource.MENU)
            if key is not None and key not in switches:
                switches.append(key)

        state.legalMoves = [m.model_copy() for m in menu.ownMoves]
        state.legalSwitches = switches
        state.forcedSwitch = menu.forcedSwitch

        active = state.active_entry(Side.SELF)
        if active is not None:
            for option in menu.ownMoves:
                active.learn_move(option.name)

    def _apply_players(self, identity: PlayerIdentity) -> None:
        if identity.selfName:
            self.state.selfPlayerName = identity.selfName.strip()
        if identity.opponentName:
            self.state.opponentPlayerName = identity.opponentName.strip()
        self.sides.observe_players(identity)

    # =========================================================================
    # NARRATION
    # =========================================================================

    def _apply_log_line(self, line: LogLine) -> None:
        """Buffer a narration line and drain the backlog in order from the high-water mark"""
        if line.index < self._next_log_index:
            return  # already applied
        self._pending_logs[line.index] = line.text
        self._drain_logs()

        if len(self._pending_logs) > LOG_BACKLOG_LIMIT:
            resume_at = min(self._pending_logs)
            logger.warning("Skipping missing narration lines %d-%d", self._next_log_index, resume_at - 1)
            self._next_log_index = resume_at
            self._drain_logs()

    def _drain_logs(self) -> None:
        while self._next_log_index in self._pending_logs:
            text = self._pending_logs.pop(self._next_log_index)
            self._next_log_index += 1
            self._apply_log_text(text)

    def _apply_log_text(self, text: str) -> None:
        events = classify(text, self.state.selfPlayerName, self.state.opponentPlayerName)
        kinds = co_matched_kinds(events)
        if kinds is not None and kinds not in self.co_matches:
            self.co_matches.add(kinds)
            logger.warning("Narration line matched several templates %s: %r", [k.name for k in kinds], text)
        for event in events:
            self._apply_event(event)

    def _event_side(self, event: LogEvent) -> Side:
        if event.side is Side.UNKNOWN and event.playerName:
            return self.sides.side_for_player(event.playerName)
        return event.side

    def _apply_event(self, event: LogEvent) -> None:
        state = self.state
        side = self._event_side(event)

        match event.kind:
            case LogEventKind.TURN:
                state.turn = max(state.turn, int(event.amount or 0))
                return
            case LogEventKind.WEATHER:
                state.field.weather = event.weather
                return
            case LogEventKind.TERRAIN:
                state.field.terrain = event.terrain
                return
            case LogEventKind.TRICK_ROOM:
                state.field.trickRoom = bool(event.on)
                return
            case LogEventKind.TAILWIND:
                if side is not Side.UNKNOWN:
                    state.field.tailwind[side] = bool(event.on)
                return
            case LogEventKind.HAZARD_SET:
                if side is not Side.UNKNOWN and event.hazard is not None:
                    state.field.hazards_on(side).add(event.hazard)
                return
            case LogEventKind.HAZARD_REMOVED:
                if side is not Side.UNKNOWN and event.hazard is not None:
                    state.field.hazards_on(side).remove(event.hazard)
                return
            case LogEventKind.BOOST_RESET if event.subject is None:
                for active in (state.active_entry(Side.SELF), state.active_entry(Side.OPPONENT)):
                    if active is not None:
                        active.reset_stages()
                return
            case LogEventKind.SWITCH_IN:
                key = self.ensure_member(side, event.subject or "", EvidenceSource.LOG)
                if key is None:
                    return
                if side is Side.UNKNOWN:
                    found = self._resolve(Side.UNKNOWN, key)
                    if found is None:
                        return
                    side = found[0]
                self._set_active(side, key)
                return

        # Everything below updates one existing creature
        found = self._resolve(side, event.subject)
        if found is None:
            logger.debug("No roster entry for narrated %s (%s)", event.subject, event.kind.name)
            return
        _, entry = found

        match event.kind:
            case LogEventKind.MOVE_USED:
                if event.value and entry.learn_move(event.value):
                    logger.debug("%s learned %s", entry.name, event.value)
            case LogEventKind.DAMAGE:
                entry.take_damage(event.amount or 0.0)
            case LogEventKind.HEALED:
                if event.amount is not None:
                    entry.heal(min(event.amount, MAX_HP_PERCENT))
            case LogEventKind.FAINTED:
                entry.faint()
            case LogEventKind.STATUS_INFLICTED:
                status = Status.from_token(event.value)
                if status is not None:
                    entry.set_status(status)
            case LogEventKind.STATUS_CURED:
                if entry.status.is_major():
                    entry.set_status(Status.NONE)
            case LogEventKind.TERASTALLIZED:
                tera_type = Type.from_name(event.value)
                if tera_type is not None:
                    entry.terastallize(tera_type)
            case LogEventKind.ITEM_REVEALED:
                if event.value:
                    entry.item = event.value
            case LogEventKind.ABILITY_REVEALED:
                if event.value:
                    entry.ability = event.value
            case LogEventKind.BOOST:
                if event.stat is not None:
                    entry.change_stage(event.stat, int(event.amount or 0))
            case LogEventKind.BOOST_RESET:
                entry.reset_stages()
