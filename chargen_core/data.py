"""Domain constants, rule-set presets, and shared type aliases."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Final

ABILITIES: Final[list[str]] = [
    "Strength",
    "Intelligence",
    "Wisdom",
    "Dexterity",
    "Constitution",
    "Charisma",
]

ABILITY_ABBREVIATIONS: Final[dict[str, str]] = {
    "Strength": "Str",
    "Intelligence": "Int",
    "Wisdom": "Wis",
    "Dexterity": "Dex",
    "Constitution": "Con",
    "Charisma": "Cha",
}

NUM_ABILITIES: Final[int] = len(ABILITIES)

DIE_SIDES: Final[int] = 6
NAME_WIDTH: Final[int] = 16
DEFAULT_TRIALS: Final[int] = 10_000
REFERENCE_TRIALS: Final[int] = 1_000_000
BATCH_CHARACTERS: Final[int] = 12
NO_CLASS_LABEL: Final[str] = "NO CLASS"

ScoreSet = tuple[int, ...]
DieFn = Callable[[], int]
RawRequirement = tuple[str, tuple[int, int, int, int, int, int]]


class RuleSet(str, Enum):
    """Selectable class-requirement presets."""

    ODD = "odd"
    ADND_PHB = "adnd-phb"
    ADND_UA = "adnd-ua"


RULE_SET_LABELS: Final[dict[RuleSet, str]] = {
    RuleSet.ODD: "OD&D with supplements",
    RuleSet.ADND_PHB: "AD&D 1E Players Handbook",
    RuleSet.ADND_UA: "AD&D 1E with Unearthed Arcana",
}

DEFAULT_RULE_SET: Final[RuleSet] = RuleSet.ADND_PHB

# Minimum abilities per class, order: Str, Int, Wis, Dex, Con, Cha.
# Sub-class floors are assumed cumulative with their parent class floors
# (e.g. Paladin includes the Fighter minimums) unless otherwise noted.

# Core classes have no minimums; Paladin from Greyhawk, Ranger and
# Illusionist from The Strategic Review, Monk and Assassin from Blackmoor,
# Druid from Eldritch Wizardry.
ODD_CLASS_REQS: Final[tuple[RawRequirement, ...]] = (
    ("Cleric",       ( 3,  3,  3,  3,  3,  3)),
    ("Druid",        ( 3,  3, 12,  3,  3, 14)),
    ("Fighter",      ( 3,  3,  3,  3,  3,  3)),
    ("Paladin",      ( 3,  3,  3,  3,  3, 17)),
    ("Ranger",       ( 3, 12, 12,  3, 15,  3)),
    ("Magic-User",   ( 3,  3,  3,  3,  3,  3)),
    ("Illusionist",  ( 3, 15,  3, 16,  3,  3)),
    ("Thief",        ( 3,  3,  3,  3,  3,  3)),
    ("Assassin",     (12, 12,  3, 12,  3,  3)),
    ("Monk",         (12,  3, 15, 15,  3,  3)),
)

ADND_PHB_CLASS_REQS: Final[tuple[RawRequirement, ...]] = (
    ("Cleric",       ( 6,  6,  9,  3,  6,  6)),
    ("Druid",        ( 6,  6, 12,  3,  6, 15)),
    ("Fighter",      ( 9,  3,  6,  6,  7,  6)),
    ("Paladin",      (12,  9, 13,  6,  9, 17)),
    ("Ranger",       (13, 13, 14,  6, 14,  6)),
    ("Magic-User",   ( 3,  9,  6,  6,  6,  6)),
    ("Illusionist",  ( 3, 15,  6, 16,  3,  6)),
    ("Thief",        ( 6,  6,  3,  9,  6,  6)),
    ("Assassin",     (12, 11,  3, 12,  6,  3)),
    ("Monk",         (15,  6, 15, 15, 11,  6)),
)

# Paladin becomes a Cavalier sub-class and inherits its floors.
# Ability maximums (e.g. the Barbarian's Wisdom cap) are not modelled.
ADND_UA_CLASS_REQS: Final[tuple[RawRequirement, ...]] = (
    ("Cleric",       ( 6,  6,  9,  3,  6,  6)),
    ("Druid",        ( 6,  6, 12,  3,  6, 15)),
    ("Fighter",      ( 9,  3,  6,  6,  7,  6)),
    ("Barbarian",    (15,  3,  3, 14, 15,  3)),
    ("Ranger",       (13, 13, 14,  6, 14,  6)),
    ("Cavalier",     (15, 10, 10, 15, 15,  3)),
    ("Paladin",      (15, 10, 13, 15, 15, 17)),
    ("Magic-User",   ( 3,  9,  6,  6,  6,  6)),
    ("Illusionist",  ( 3, 15,  6, 16,  3,  6)),
    ("Thief",        ( 6,  6,  3,  9,  6,  6)),
    ("Thief-Acrobat", (15,  6,  3, 16,  6,  6)),
    ("Assassin",     (12, 11,  3, 12,  6,  3)),
    ("Monk",         (15,  6, 15, 15, 11,  6)),
)

CLASS_REQUIREMENT_TABLES: Final[dict[RuleSet, tuple[RawRequirement, ...]]] = {
    RuleSet.ODD: ODD_CLASS_REQS,
    RuleSet.ADND_PHB: ADND_PHB_CLASS_REQS,
    RuleSet.ADND_UA: ADND_UA_CLASS_REQS,
}


def parse_rule_set(value: RuleSet | str) -> RuleSet:
    """Return the preset named by ``value``.

    Raises
    ------
    ValueError
        If no preset carries that name.
    """

    if isinstance(value, RuleSet):
        return value
    try:
        return RuleSet(value)
    except ValueError as exc:
        choices = ", ".join(rule.value for rule in RuleSet)
        raise ValueError(f"Unknown rule set '{value}' (choose from {choices})") from exc
