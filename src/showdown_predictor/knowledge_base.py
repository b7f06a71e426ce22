import logging
from typing import Mapping, Optional

from src.showdown_predictor.constants import MIN_NAME_LENGTH
from src.showdown_predictor.data.moves import MOVE_DATA
from src.showdown_predictor.data.species import SPECIES_INFOS
from src.showdown_predictor.data.species_weights import SPECIES_WEIGHTS_KG
from src.showdown_predictor.enums import MoveCategory, Type
from src.showdown_predictor.schema.battle_move import MoveSpec
from src.showdown_predictor.schema.species_info import SpeciesInfo
from src.showdown_predictor.type_effectiveness import TypeEffectiveness

logger = logging.getLogger(__name__)

UNKNOWN_BASE_STAT = 80


def unknown_species(name: str) -> SpeciesInfo:
    """Placeholder record for a species missing from the data tables"""
    return SpeciesInfo(
        name=name,
        types=[Type.NORMAL],
        baseHP=UNKNOWN_BASE_STAT,
        baseAttack=UNKNOWN_BASE_STAT,
        baseDefense=UNKNOWN_BASE_STAT,
        baseSpAttack=UNKNOWN_BASE_STAT,
        baseSpDefense=UNKNOWN_BASE_STAT,
        baseSpeed=UNKNOWN_BASE_STAT,
        isUnknown=True,
        note="Unknown species '%s': assumed Normal type with base stats of %d" % (name, UNKNOWN_BASE_STAT),
    )


def unknown_move(name: str) -> MoveSpec:
    """Placeholder record for a move missing from the data tables"""
    return MoveSpec(
        name=name,
        power=0,
        type=Type.NORMAL,
        category=MoveCategory.STATUS,
        priority=0,
        accuracy=100,
        isUnknown=True,
        note="Unknown move '%s': treated as a non-damaging Normal move" % name,
    )


class _NameIndex:
    """Case-insensitive name lookup with prefix fallback in both directions"""

    def __init__(self, records: Mapping[str, object]):
        self._records = records
        self._by_lower = {key.lower(): key for key in records}
        # Longest keys first so "Urshifu-Rapid-Strike" wins over "Urshifu"
        self._ordered = sorted(self._by_lower, key=len, reverse=True)

    def resolve(self, name: str) -> Optional[str]:
        if not name:
            return None
        if name in self._records:
            return name
        lowered = name.strip().lower()
        if lowered in self._by_lower:
            return self._by_lower[lowered]
        if len(lowered) < MIN_NAME_LENGTH:
            return None
        for key in self._ordered:
            if lowered.startswith(key) or key.startswith(lowered):
                return self._by_lower[key]
        return None


class KnowledgeBase:
    """
    Static Knowledge Base: species records, move records and the type chart.

    Lookups never fail - a name missing from the tables resolves to an
    explicit placeholder flagged with isUnknown and a diagnostic note.
    """

    def __init__(
        self,
        species: Optional[Mapping[str, SpeciesInfo]] = None,
        moves: Optional[Mapping[str, MoveSpec]] = None,
        weights: Optional[Mapping[str, float]] = None,
    ):
        self._species = dict(SPECIES_INFOS if species is None else species)
        self._moves = dict(MOVE_DATA if moves is None else moves)
        self._weights = dict(SPECIES_WEIGHTS_KG if weights is None else weights)
        self._species_index = _NameIndex(self._species)
        self._move_index = _NameIndex(self._moves)
        self.effectiveness = TypeEffectiveness

    def has_species(self, name: str) -> bool:
        return self._species_index.resolve(name) is not None

    def has_move(self, name: str) -> bool:
        return self._move_index.resolve(name) is not None

    def species(self, name: str) -> SpeciesInfo:
        key = self._species_index.resolve(name)
        if key is None:
            logger.warning("Unknown species %r, using placeholder record", name)
            return unknown_species(name)
        return self._species[key]

    def move(self, name: str) -> MoveSpec:
        key = self._move_index.resolve(name)
        if key is None:
            logger.warning("Unknown move %r, using placeholder record", name)
            return unknown_move(name)
        return self._moves[key]

    def weight_kg(self, name: str) -> Optional[float]:
        key = self._species_index.resolve(name)
        if key is None:
            return None
        return self._weights.get(key)


DEFAULT_KNOWLEDGE_BASE = KnowledgeBase()
