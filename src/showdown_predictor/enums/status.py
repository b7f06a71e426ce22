from enum import IntEnum
from typing import Optional


class Status(IntEnum):
    """Non-volatile status conditions, plus the fainted marker shown on status bars"""

    NONE = 0
    BURN = 1
    POISON = 2
    TOXIC = 3
    PARALYSIS = 4
    SLEEP = 5
    FREEZE = 6
    FAINTED = 7

    # =========================================================================
    # TOKEN CONVERSION - three-letter tokens used by the battle UI
    # =========================================================================

    @classmethod
    def from_token(cls, token: Optional[str]) -> Optional["Status"]:
        """Map a status-bar token ("brn", "tox", ...) to a Status

        Returns None when the token carries no status information so callers
        can leave the stored status untouched.
        """
        if not token:
            return None
        text = token.strip().lower()
        for key, status in _TOKENS.items():
            if key in text:
                return status
        return None

    @property
    def token(self) -> str:
        for key, status in _TOKENS.items():
            if status is self:
                return key
        return ""

    # =========================================================================
    # STATUS CHECK METHODS
    # =========================================================================

    def is_major(self) -> bool:
        """True for a real non-volatile condition (not NONE, not FAINTED)"""
        return self not in (Status.NONE, Status.FAINTED)

    def is_fainted(self) -> bool:
        return self is Status.FAINTED


_TOKENS = {
    "brn": Status.BURN,
    "tox": Status.TOXIC,
    "psn": Status.POISON,
    "par": Status.PARALYSIS,
    "slp": Status.SLEEP,
    "frz": Status.FREEZE,
    "fnt": Status.FAINTED,
}
