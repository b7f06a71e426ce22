"""
Damage estimation

Computes the damage range of one move as a percentage of the defender's max HP,
assuming competitive default spreads (level 100, 252 EVs, 31 IVs, neutral nature)
wherever real stats have not been observed.

Key design principles:
- Pure: no battle state is read or written, everything comes in as arguments
- Core formula and boost ratios match the games
- Every modifier is an independent multiplicative factor
- Unknown data degrades to fallback stats instead of failing
"""

import math
from typing import Optional

from src.showdown_predictor.constants import (
    ASSUMED_LEVEL,
    FALLBACK_MAX_HP,
    FALLBACK_STAT,
    FULL_HP_THRESHOLD,
    MAX_BOOST_STAGE,
    MIN_BOOST_STAGE,
    RANDOM_ROLL_MIN_PERCENT,
    STAT_ATK,
    STAT_DEF,
    STAT_KEYS,
    STAT_SPATK,
    STAT_SPDEF,
    TYPE_MUL_NO_EFFECT,
    TYPE_MUL_NORMAL,
    WEIGHT_POWER_FALLBACK,
    WEIGHT_POWER_MAX,
    WEIGHT_POWER_TABLE,
)
from src.showdown_predictor.data.items import ASSAULT_VEST, CHOICE_BAND, CHOICE_SPECS, EVIOLITE, EXPERT_BELT, LIFE_ORB, TYPE_BOOST_ITEMS, TYPE_BOOST_MULTIPLIER
from src.showdown_predictor.enums import MoveCategory, MoveFlag, Terrain, Type, Weather
from src.showdown_predictor.knowledge_base import DEFAULT_KNOWLEDGE_BASE, KnowledgeBase
from src.showdown_predictor.schema.battle_move import MoveSpec
from src.showdown_predictor.schema.battle_pokemon import Combatant
from src.showdown_predictor.schema.battle_state import FieldState
from src.showdown_predictor.schema.report import DamageEstimate
from src.showdown_predictor.type_effectiveness import effectiveness_of

# Moves whose power is fixed by circumstance rather than by the move record
KNOCK_OFF_BOOSTED_POWER = 97
ACROBATICS_ITEMLESS_POWER = 110
FACADE_STATUSED_POWER = 140
HEX_STATUSED_POWER = 130

# Multi-hit moves, total power across all hits
MULTI_HIT_TOTAL_POWER = {
    "Dragon Darts": 100,
    "Dual Wingbeat": 80,
    "Surging Strikes": 75,
    "Triple Axel": 120,
}

WEIGHT_BASED_MOVES = {"Low Kick", "Grass Knot"}
LEVEL_DAMAGE_MOVES = {"Seismic Toss", "Night Shade"}

# Zero-power moves that still deal damage
DAMAGING_EXCEPTIONS = set(MULTI_HIT_TOTAL_POWER) | WEIGHT_BASED_MOVES | LEVEL_DAMAGE_MOVES

TECHNICIAN_POWER_LIMIT = 60
TECHNICIAN_MULTIPLIER = 1.5
STAB_MULTIPLIER = 1.5
STRONG_STAB_MULTIPLIER = 2.0


def apply_stat_stage(stat: int, stage: int) -> int:
    """Boost-stage multiplier: +s gives (2+s)/2, -s gives 2/(2+s)"""
    stage = max(MIN_BOOST_STAGE, min(MAX_BOOST_STAGE, stage))
    if stage > 0:
        return (stat * (2 + stage)) // 2
    if stage < 0:
        return (stat * 2) // (2 - stage)
    return stat


def weight_based_power(weight_kg: Optional[float]) -> int:
    if weight_kg is None:
        return WEIGHT_POWER_FALLBACK
    for limit, power in WEIGHT_POWER_TABLE:
        if weight_kg < limit:
            return power
    return WEIGHT_POWER_MAX


def _stat(combatant: Combatant, stat_index: int) -> int:
    stats = combatant.stats or {}
    return stats.get(STAT_KEYS[stat_index], FALLBACK_STAT)


def max_hp_of(defender: Combatant) -> int:
    hp = (defender.stats or {}).get("hp")
    return hp if hp else FALLBACK_MAX_HP


class DamageCalculator:
    """
    Damage estimator for one attacker / defender / move / field combination

    estimate() flow:
    1. Resolve the move's effective type, category and power
    2. Return early for status moves, immunities and fixed-damage moves
    3. Pick offense and defense stats and apply boost stages
    4. Core formula
    5. Independent modifier stack (STAB, effectiveness, weather, terrain, abilities, items)
    6. Convert to a percentage of the defender's max HP over the 85-100% random roll
    """

    def __init__(self, knowledge_base: Optional[KnowledgeBase] = None):
        self.knowledge_base = knowledge_base or DEFAULT_KNOWLEDGE_BASE

    def estimate(self, attacker: Combatant, defender: Combatant, move: MoveSpec, field: Optional[FieldState] = None) -> DamageEstimate:
        field = field or FieldState()

        move_type, category = self._effective_type_and_category(attacker, move)
        if category == MoveCategory.STATUS or (move.power == 0 and move.name not in DAMAGING_EXCEPTIONS):
            return DamageEstimate(minPercent=0, maxPercent=0, effectiveness=TYPE_MUL_NORMAL)

        effectiveness = effectiveness_of(move_type, defender.effective_types, freeze_dry=(move.name == "Freeze-Dry"))
        if effectiveness == TYPE_MUL_NO_EFFECT:
            return DamageEstimate(minPercent=0, maxPercent=0, effectiveness=TYPE_MUL_NO_EFFECT)

        max_hp = max_hp_of(defender)

        # Level-based fixed damage ignores stats and modifiers
        if move.name in LEVEL_DAMAGE_MOVES:
            percent = ASSUMED_LEVEL / max_hp * 100
            return DamageEstimate(minPercent=percent, maxPercent=percent, effectiveness=TYPE_MUL_NORMAL)

        power = self._resolve_power(attacker, defender, move)
        is_physical = category == MoveCategory.PHYSICAL
        attack, defense = self._offense_and_defense(attacker, defender, move, is_physical)

        base_damage = math.floor(math.floor(math.floor(2 * ASSUMED_LEVEL / 5 + 2) * power * attack / defense) / 50 + 2)

        modifier = (
            self._stab(attacker, move_type)
            * effectiveness
            * self._weather_modifier(field.weather, move_type)
            * self._terrain_modifier(field.terrain, move_type)
            * self._attacker_ability_modifier(attacker, move, is_physical)
            * self._attacker_item_modifier(attacker, move_type, is_physical, effectiveness)
            * self._defender_modifier(defender, move_type, is_physical)
        )
        final_damage = math.floor(base_damage * modifier)

        max_percent = math.floor(final_damage / max_hp * 100)
        min_percent = math.floor(final_damage * RANDOM_ROLL_MIN_PERCENT / 100 / max_hp * 100)
        return DamageEstimate(minPercent=max(0, min_percent), maxPercent=max(0, max_percent), effectiveness=effectiveness)

    # =========================================================================
    # MOVE RESOLUTION
    # =========================================================================

    def _effective_type_and_category(self, attacker: Combatant, move: MoveSpec) -> tuple[Type, MoveCategory]:
        """Tera Blast takes the tera type and the higher offense stat once terastallized"""
        if move.name == "Tera Blast" and attacker.terastallized and attacker.teraType is not None:
            physical = _stat(attacker, STAT_ATK) > _stat(attacker, STAT_SPATK)
            return attacker.teraType, MoveCategory.PHYSICAL if physical else MoveCategory.SPECIAL
        return move.type, move.category

    def _resolve_power(self, attacker: Combatant, defender: Combatant, move: MoveSpec) -> int:
        power = move.power
        match move.name:
            case "Knock Off" if defender.item:
                power = KNOCK_OFF_BOOSTED_POWER
            case "Acrobatics" if not attacker.item:
                power = ACROBATICS_ITEMLESS_POWER
            case "Facade" if attacker.status.is_major():
                power = FACADE_STATUSED_POWER
            case "Hex" if defender.status.is_major():
                power = HEX_STATUSED_POWER
            case name if name in MULTI_HIT_TOTAL_POWER:
                power = MULTI_HIT_TOTAL_POWER[name]
            case name if name in WEIGHT_BASED_MOVES:
                power = weight_based_power(self.knowledge_base.weight_kg(defender.species.name))

        if attacker.ability == "Technician" and power <= TECHNICIAN_POWER_LIMIT:
            power = math.floor(power * TECHNICIAN_MULTIPLIER)
        return power

    def _offense_and_defense(self, attacker: Combatant, defender: Combatant, move: MoveSpec, is_physical: bool) -> tuple[int, int]:
        if move.name == "Body Press":
            offense_index = STAT_DEF
        else:
            offense_index = STAT_ATK if is_physical else STAT_SPATK

        # Psyshock is special but hits physical Defense
        defense_index = STAT_DEF if (is_physical or move.name == "Psyshock") else STAT_SPDEF

        attack = apply_stat_stage(_stat(attacker, offense_index), attacker.statStages[offense_index])
        defense = apply_stat_stage(_stat(defender, defense_index), defender.statStages[defense_index])
        return max(1, attack), max(1, defense)

    # =========================================================================
    # MODIFIERS
    # =========================================================================

    def _stab(self, attacker: Combatant, move_type: Type) -> float:
        stab = TYPE_MUL_NORMAL
        if attacker.terastallized and attacker.teraType is not None:
            if move_type in attacker.types:
                stab = STRONG_STAB_MULTIPLIER if attacker.teraType == move_type else STAB_MULTIPLIER
            elif attacker.teraType == move_type:
                stab = STAB_MULTIPLIER
        elif move_type in attacker.types:
            stab = STAB_MULTIPLIER

        if attacker.ability == "Adaptability" and stab > TYPE_MUL_NORMAL:
            stab = STRONG_STAB_MULTIPLIER
        return stab

    def _weather_modifier(self, weather: Weather, move_type: Type) -> float:
        match weather, move_type:
            case (Weather.SUN, Type.FIRE) | (Weather.RAIN, Type.WATER):
                return 1.5
            case (Weather.SUN, Type.WATER) | (Weather.RAIN, Type.FIRE):
                return 0.5
        return 1.0

    def _terrain_modifier(self, terrain: Terrain, move_type: Type) -> float:
        match terrain, move_type:
            case (Terrain.ELECTRIC, Type.ELECTRIC) | (Terrain.GRASSY, Type.GRASS) | (Terrain.PSYCHIC, Type.PSYCHIC):
                return 1.3
            case (Terrain.MISTY, Type.DRAGON):
                return 0.5
        return 1.0

    def _attacker_ability_modifier(self, attacker: Combatant, move: MoveSpec, is_physical: bool) -> float:
        match attacker.ability:
            case "Huge Power" | "Pure Power" if is_physical:
                return 2.0
            case "Sharpness" if move.has_flag(MoveFlag.SLICING):
                return 1.5
            case "Iron Fist" if move.has_flag(MoveFlag.PUNCH):
                return 1.2
            case "Punk Rock" if move.has_flag(MoveFlag.SOUND):
                return 1.3
            case "Tough Claws" if move.has_flag(MoveFlag.CONTACT):
                return 1.3
            case "Sword of Ruin" if is_physical:
                return 1.33
            case "Beads of Ruin" if not is_physical:
                return 1.33
        return 1.0

    def _attacker_item_modifier(self, attacker: Combatant, move_type: Type, is_physical: bool, effectiveness: float) -> float:
        item = attacker.item
        if item == CHOICE_BAND and is_physical:
            return 1.5
        if item == CHOICE_SPECS and not is_physical:
            return 1.5
        if item == LIFE_ORB:
            return 1.3
        if item == EXPERT_BELT and effectiveness > TYPE_MUL_NORMAL:
            return 1.2
        if TYPE_BOOST_ITEMS.get(item) == move_type:
            return TYPE_BOOST_MULTIPLIER
        return 1.0

    def _defender_modifier(self, defender: Combatant, move_type: Type, is_physical: bool) -> float:
        modifier = 1.0

        match defender.ability:
            case "Multiscale" | "Shadow Shield" if defender.hp >= FULL_HP_THRESHOLD:
                modifier *= 0.5
            case "Fur Coat" if is_physical:
                modifier *= 0.5
            case "Ice Scales" if not is_physical:
                modifier *= 0.5
            case "Thick Fat" if move_type in (Type.FIRE, Type.ICE):
                modifier *= 0.5
            case "Tablets of Ruin" if is_physical:
                modifier *= 0.75
            case "Vessel of Ruin" if not is_physical:
                modifier *= 0.75

        if defender.item == EVIOLITE:
            modifier *= 0.667
        elif defender.item == ASSAULT_VEST and not is_physical:
            modifier *= 0.667
        return modifier


_DEFAULT_CALCULATOR = DamageCalculator()


def estimate(attacker: Combatant, defender: Combatant, move: MoveSpec, field: Optional[FieldState] = None) -> DamageEstimate:
    """Damage range of move from attacker into defender using the default knowledge base"""
    return _DEFAULT_CALCULATOR.estimate(attacker, defender, move, field)
