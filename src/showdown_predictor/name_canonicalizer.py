"""
Name canonicalization

Turns raw on-screen text ("The opposing Ninetales (Alolan)", "Gastrodon-East L84",
"Sparky (Raichu) ♂") into the canonical species-form identity used as a roster
key. An empty string means "no creature": callers must not mutate anything for it.
"""

import logging
import re
from typing import Optional

from src.showdown_predictor.constants import MIN_NAME_LENGTH

logger = logging.getLogger(__name__)

# UI labels that show up next to names on the battle surface
BLOCKED_TOKENS = (
    "Tera Type",
    "Ability:",
    "Item:",
    "Stats:",
    "active",
    "Not revealed",
    "move",
    "Switch",
    "Turn",
    "Team",
    "Opponent",
    "fainted",
)

STATUS_KEYWORDS = ("tox", "psn", "brn", "par", "slp", "frz", "fnt")

# Every accepted spelling of a regional tag -> canonical suffix
REGIONAL_SPELLINGS = {
    "alola": "Alola",
    "alolan": "Alola",
    "galar": "Galar",
    "galarian": "Galar",
    "hisui": "Hisui",
    "hisuian": "Hisui",
    "paldea": "Paldea",
    "paldean": "Paldea",
}
REGIONAL_SUFFIXES = ("Alola", "Galar", "Hisui", "Paldea")

# Form suffixes that change stats, typing or abilities - never merged away
DISTINCT_SUFFIXES = {
    "Mega",
    "Mega-X",
    "Mega-Y",
    "Primal",
    "Alola",
    "Galar",
    "Hisui",
    "Paldea",
    "Paldea-Combat",
    "Paldea-Blaze",
    "Paldea-Aqua",
    "Therian",
    "Origin",
    "Rapid-Strike",
    "Single-Strike",
    "Crowned",
    "Bloodmoon",
    "Wellspring",
    "Hearthflame",
    "Cornerstone",
    "Hero",
    "Black",
    "White",
    "Dusk-Mane",
    "Dawn-Wings",
    "Ultra",
    "Eternal",
    "Attack",
    "Defense",
    "Speed",
    "Sky",
    "Heat",
    "Wash",
    "Frost",
    "Fan",
    "Mow",
    "Complete",
    "10%",
    "Gmax",
    "Terastal",
    "Stellar",
}

# Species whose alternate forms are purely cosmetic
COSMETIC_BASES = {
    "Alcremie",
    "Burmy",
    "Deerling",
    "Dudunsparce",
    "Flabébé",
    "Floette",
    "Florges",
    "Furfrou",
    "Gastrodon",
    "Genesect",
    "Keldeo",
    "Magearna",
    "Maushold",
    "Minior",
    "Pikachu",
    "Polteageist",
    "Poltchageist",
    "Sawsbuck",
    "Scatterbug",
    "Shellos",
    "Sinistcha",
    "Sinistea",
    "Spewpa",
    "Tatsugiri",
    "Unown",
    "Vivillon",
    "Xerneas",
    "Zarude",
}

# Suffixes that never identify a distinct creature on any species
COSMETIC_SUFFIXES = {"*", "Totem", "Starter", "Antique", "Phony", "Artisan", "Masterpiece", "Unremarkable"}

# Species whose hyphen is part of the base name
HYPHENATED_SPECIES = (
    "Ho-Oh",
    "Porygon-Z",
    "Chi-Yu",
    "Ting-Lu",
    "Chien-Pao",
    "Wo-Chien",
    "Jangmo-o",
    "Hakamo-o",
    "Kommo-o",
)

_OWNER_PREFIX = re.compile(r"^(?:the opposing |player \d+'s )", re.IGNORECASE)
_PARENTHETICAL = re.compile(r"^(?P<outer>.*?)\s*\((?P<inner>[^()]*)\)\s*$")
_LEVEL_SUFFIX = re.compile(r"\s+L\d+\b")
_GENDER = re.compile(r"[♂♀]")
_STATUS_SUFFIX = re.compile(r"\s+(?:%s)$" % "|".join(STATUS_KEYWORDS), re.IGNORECASE)
_REGIONAL_PREFIX = re.compile(r"^(?P<tag>Alolan|Galarian|Hisuian|Paldean)\s+(?P<species>.+)$", re.IGNORECASE)
_SPECIES_LIKE = re.compile(r"^[A-Z][A-Za-zé'.:% -]*$")


def _is_ui_debris(text: str) -> bool:
    lowered = text.lower()
    if lowered in STATUS_KEYWORDS:
        return True
    for token in BLOCKED_TOKENS:
        blocked = token.lower()
        if lowered == blocked:
            return True
        if blocked in lowered and len(text) < len(blocked) + 5:
            return True
    return " lost " in lowered or " health" in lowered


def _looks_like_species(token: str) -> bool:
    token = token.strip()
    if len(token) < MIN_NAME_LENGTH or _is_ui_debris(token):
        return False
    if _GENDER.fullmatch(token) or token.upper() in ("M", "F"):
        return False
    return bool(_SPECIES_LIKE.match(token))


def _split_base(name: str) -> tuple[str, str]:
    """(base species, form suffix) - suffix is "" for a base form"""
    for species in HYPHENATED_SPECIES:
        if name.lower() == species.lower():
            return name, ""
        if name.lower().startswith(species.lower() + "-"):
            return name[: len(species)], name[len(species) + 1 :]
    if "-" not in name:
        return name, ""
    base, suffix = name.split("-", 1)
    return base, suffix


def _canonical_regional(name: str) -> str:
    match = _REGIONAL_PREFIX.match(name)
    if match:
        name = "%s-%s" % (match.group("species"), match.group("tag"))

    base, suffix = _split_base(name)
    if not suffix:
        return name
    parts = suffix.split("-")
    parts = [REGIONAL_SPELLINGS.get(p.lower(), p) for p in parts]
    return "%s-%s" % (base, "-".join(parts))


def _merge_cosmetic(name: str) -> str:
    base, suffix = _split_base(name)
    if not suffix or suffix in DISTINCT_SUFFIXES or suffix.split("-")[0] in DISTINCT_SUFFIXES:
        return name
    if base in COSMETIC_BASES or suffix in COSMETIC_SUFFIXES:
        return base
    return name


def normalize(raw: Optional[str]) -> str:
    """Canonical species-form name, or "" when the text does not name a creature"""
    if not raw:
        return ""
    name = " ".join(raw.split())
    if not name or _is_ui_debris(name):
        return ""

    name = _OWNER_PREFIX.sub("", name)
    name = _GENDER.sub("", name)
    name = _LEVEL_SUFFIX.sub("", name).strip()

    # "Nickname (Species)" - the parenthesised part wins when it reads as a species
    match = _PARENTHETICAL.match(name)
    if match:
        inner = match.group("inner").strip()
        outer = match.group("outer").strip()
        inner_regional = REGIONAL_SPELLINGS.get(inner.lower())
        if inner_regional and outer:
            name = "%s-%s" % (outer, inner_regional)
        elif _looks_like_species(inner):
            name = inner
        else:
            name = outer

    name = name.replace(":", "").replace("!", "")
    name = _STATUS_SUFFIX.sub("", name.strip()).strip()

    name = _canonical_regional(name)
    name = _merge_cosmetic(name)

    if len(name) < MIN_NAME_LENGTH or _is_ui_debris(name) or not any(c.isalpha() for c in name):
        return ""
    return name


def base_species(name: str) -> str:
    """Base species of an already canonical name ("Landorus-Therian" -> "Landorus")"""
    return _split_base(name)[0]


def form_suffix(name: str) -> str:
    return _split_base(name)[1]


def regional_suffix(name: str) -> Optional[str]:
    suffix = form_suffix(name)
    for part in suffix.split("-"):
        if part in REGIONAL_SUFFIXES:
            return part
    return None


def same(a: Optional[str], b: Optional[str]) -> bool:
    """Whether two names denote the same creature (form changes included, regional variants excluded)"""
    left, right = normalize(a), normalize(b)
    if not left or not right:
        return False
    if left.lower() == right.lower():
        return True
    if base_species(left).lower() != base_species(right).lower():
        return False
    return regional_suffix(left) == regional_suffix(right)


def is_more_specific(new: str, old: str) -> bool:
    """True when new names a concrete form of the base-form creature stored as old"""
    new_name, old_name = normalize(new), normalize(old)
    if not same(new_name, old_name) or new_name.lower() == old_name.lower():
        return False
    return form_suffix(old_name) == "" and form_suffix(new_name) != ""
