import logging
from typing import Iterable, Optional

from src.showdown_predictor.enums import ScreenPosition, Side, SideResolutionMethod
from src.showdown_predictor.name_canonicalizer import normalize, same
from src.showdown_predictor.schema.observations import PlayerIdentity, VisualSighting

logger = logging.getLogger(__name__)

SLOTS = ("p1", "p2")


def other_slot(slot: str) -> str:
    return SLOTS[1] if slot == SLOTS[0] else SLOTS[0]


class SideResolver:
    """
    Works out which physical slot ("p1" / "p2") belongs to the local player.

    Resolution happens once per battle and is cached. Methods, most reliable first:
        1. an explicit self/opponent marker on an observation that also names its slot
        2. the captured local display name matching a slot's player name
        3. a creature from the own menus (which only ever show the local team) seen in a slot
        4. screen position - the near side is the local player
    """

    def __init__(self):
        self.self_slot: Optional[str] = None
        self.method: Optional[SideResolutionMethod] = None
        self.self_name: Optional[str] = None
        self.opponent_name: Optional[str] = None
        self._own_names: set[str] = set()

    @property
    def resolved(self) -> bool:
        return self.self_slot is not None

    def _establish(self, self_slot: str, method: SideResolutionMethod) -> None:
        if self.resolved or self_slot not in SLOTS:
            return
        self.self_slot = self_slot
        self.method = method
        logger.info("Side resolved: self is %s (%s)", self_slot, method.name)

    # =========================================================================
    # EVIDENCE
    # =========================================================================

    def observe_players(self, identity: PlayerIdentity) -> None:
        if identity.selfName:
            self.self_name = identity.selfName.strip()
        if identity.opponentName:
            self.opponent_name = identity.opponentName.strip()
        for slot, player in identity.slotNames.items():
            player = player.strip().lower()
            if self.self_name and player == self.self_name.lower():
                self._establish(slot, SideResolutionMethod.DISPLAY_NAME)
            elif self.opponent_name and player == self.opponent_name.lower():
                self._establish(other_slot(slot), SideResolutionMethod.DISPLAY_NAME)

    def observe_own_names(self, names: Iterable[str]) -> None:
        """Creature names taken from the own menus"""
        for name in names:
            canonical = normalize(name)
            if canonical:
                self._own_names.add(canonical)

    def _is_own(self, raw_name: str) -> bool:
        return any(same(raw_name, own) for own in self._own_names)

    # =========================================================================
    # LOOKUP
    # =========================================================================

    def side_for(self, sighting: VisualSighting) -> Side:
        """Side of a visual sighting, establishing the self slot from it when possible"""
        slot = sighting.slot if sighting.slot in SLOTS else None

        if sighting.side is not Side.UNKNOWN:
            if slot is not None:
                self._establish(slot if sighting.side is Side.SELF else other_slot(slot), SideResolutionMethod.EXPLICIT_MARKER)
            return sighting.side

        if slot is not None and not self.resolved:
            if self._is_own(sighting.rawName):
                self._establish(slot, SideResolutionMethod.STRUCTURAL)
            elif sighting.position is not None:
                near = sighting.position is ScreenPosition.NEAR
                self._establish(slot if near else other_slot(slot), SideResolutionMethod.POSITIONAL)

        if slot is not None and self.resolved:
            return Side.SELF if slot == self.self_slot else Side.OPPONENT

        # No slot: fall back to screen position on its own
        if sighting.position is ScreenPosition.NEAR:
            return Side.SELF
        if sighting.position is ScreenPosition.FAR:
            return Side.OPPONENT
        return Side.UNKNOWN

    def side_for_player(self, player: Optional[str]) -> Side:
        if not player:
            return Side.UNKNOWN
        lowered = player.strip().lower()
        if self.self_name and lowered == self.self_name.lower():
            return Side.SELF
        if self.opponent_name and lowered == self.opponent_name.lower():
            return Side.OPPONENT
        return Side.UNKNOWN
