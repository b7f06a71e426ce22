from typing import Optional

from src.showdown_predictor.constants import ASSUMED_EV, ASSUMED_IV, ASSUMED_LEVEL, MAX_SPEED_EV, MAX_SPEED_NATURE, MIN_SPEED_EV, MIN_SPEED_NATURE, NEUTRAL_NATURE, STAT_KEYS
from src.showdown_predictor.knowledge_base import DEFAULT_KNOWLEDGE_BASE, KnowledgeBase
from src.showdown_predictor.schema.battle_pokemon import Combatant, RosterEntry


def compute_stat(base: int, iv: int, ev: int, level: int, is_hp: bool, nature_multiplier: float = NEUTRAL_NATURE) -> int:
    # Gen 3+ stat formulas
    if is_hp:
        if base == 1:
            return 1  # Shedinja
        return ((2 * base + iv + ev // 4) * level) // 100 + level + 10
    raw = ((2 * base + iv + ev // 4) * level) // 100 + 5
    return int(raw * nature_multiplier)


def assumed_stat(base: int, is_hp: bool = False) -> int:
    """Stat at the competitive default spread (level 100, 252 EVs, 31 IVs, neutral nature)"""
    return compute_stat(base, ASSUMED_IV, ASSUMED_EV, ASSUMED_LEVEL, is_hp)


def speed_bounds(base_speed: int) -> tuple[int, int]:
    """(slowest, fastest) plausible speed for a base speed"""
    slowest = compute_stat(base_speed, ASSUMED_IV, MIN_SPEED_EV, ASSUMED_LEVEL, is_hp=False, nature_multiplier=MIN_SPEED_NATURE)
    fastest = compute_stat(base_speed, ASSUMED_IV, MAX_SPEED_EV, ASSUMED_LEVEL, is_hp=False, nature_multiplier=MAX_SPEED_NATURE)
    return slowest, fastest


def create_combatant(
    entry: Optional[RosterEntry] = None,
    species_name: Optional[str] = None,
    knowledge_base: Optional[KnowledgeBase] = None,
) -> Combatant:
    """
    Build the damage-formula view of a creature.

    Stats come from the tooltip reading on the entry when present, from the
    assumed spread otherwise. A bench creature with no entry can be built
    from its species name alone.
    """
    kb = knowledge_base or DEFAULT_KNOWLEDGE_BASE
    name = entry.name if entry is not None else species_name
    if not name:
        raise ValueError("create_combatant needs a roster entry or a species name")
    info = kb.species(name)

    stats = {key: assumed_stat(info.base_stat(key), is_hp=(key == "hp")) for key in STAT_KEYS.values()}
    if entry is None:
        return Combatant(species=info, types=list(info.types), stats=stats, ability=info.default_ability)

    if entry.stats:
        stats.update({k: v for k, v in entry.stats.items() if k in stats})

    return Combatant(
        species=info,
        types=list(info.types),
        stats=stats,
        statStages=list(entry.statStages),
        ability=entry.ability or info.default_ability,
        item=entry.item,
        hp=entry.hp,
        status=entry.status,
        teraType=entry.teraType,
        terastallized=entry.terastallized,
    )
