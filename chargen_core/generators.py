"""Ability-score generation methods from the 1st-edition rules."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from typing import Final

from .data import BATCH_CHARACTERS, NUM_ABILITIES, DieFn, ScoreSet


class GenerationMethod(IntEnum):
    """Dice methods, numbered I-V in the books and 0-4 here."""

    IN_ORDER = 0
    FOUR_DROP_LOWEST = 1
    BEST_SIX_OF_TWELVE = 2
    BEST_OF_SIX_PER_ABILITY = 3
    BEST_OF_TWELVE_CHARACTERS = 4


@dataclass(frozen=True)
class MethodSpec:
    """Static description of a generation method."""

    label: str
    allows_reorder: bool
    characters: int = 1


METHOD_SPECS: Final[dict[GenerationMethod, MethodSpec]] = {
    GenerationMethod.IN_ORDER: MethodSpec("3d6 in order", allows_reorder=False),
    GenerationMethod.FOUR_DROP_LOWEST: MethodSpec("4d6 drop lowest", allows_reorder=True),
    GenerationMethod.BEST_SIX_OF_TWELVE: MethodSpec("Best 6 of 12", allows_reorder=True),
    GenerationMethod.BEST_OF_SIX_PER_ABILITY: MethodSpec(
        "Best of 6 per ability", allows_reorder=False
    ),
    GenerationMethod.BEST_OF_TWELVE_CHARACTERS: MethodSpec(
        "Best of 12 characters", allows_reorder=False, characters=BATCH_CHARACTERS
    ),
}

ALL_METHODS: Final[tuple[GenerationMethod, ...]] = tuple(GenerationMethod)


def parse_method(value: GenerationMethod | int | str) -> GenerationMethod:
    """Return the generation method for a number or enum name.

    Raises
    ------
    ValueError
        If ``value`` names no method.
    """

    if isinstance(value, GenerationMethod):
        return value
    if isinstance(value, str) and not value.strip().isdigit():
        try:
            return GenerationMethod[value.strip().upper()]
        except KeyError as exc:
            raise ValueError(f"Unknown generation method '{value}'") from exc
    try:
        return GenerationMethod(int(value))
    except ValueError as exc:
        raise ValueError(
            f"Generation method must be between 0 and {len(GenerationMethod) - 1}, "
            f"received {value}"
        ) from exc


def method_allows_reorder(method: GenerationMethod | int) -> bool:
    """Return whether rolled scores may be assigned to abilities freely."""

    return METHOD_SPECS[GenerationMethod(method)].allows_reorder


def roll_3d6(roll: DieFn) -> int:
    return roll() + roll() + roll()


def roll_4d6_drop_lowest(roll: DieFn) -> int:
    dice = [roll() for _ in range(4)]
    return sum(dice) - min(dice)


def roll_3d6_best_of_6(roll: DieFn) -> int:
    return max(roll_3d6(roll) for _ in range(6))


def make_scores_method_0(roll: DieFn) -> ScoreSet:
    return tuple(roll_3d6(roll) for _ in range(NUM_ABILITIES))


def make_scores_method_1(roll: DieFn) -> ScoreSet:
    return tuple(roll_4d6_drop_lowest(roll) for _ in range(NUM_ABILITIES))


def make_scores_method_2(roll: DieFn) -> ScoreSet:
    """Roll twelve 3d6 scores and keep the best six, highest first."""

    dozen = sorted((roll_3d6(roll) for _ in range(12)), reverse=True)
    return tuple(dozen[:NUM_ABILITIES])


def make_scores_method_3(roll: DieFn) -> ScoreSet:
    return tuple(roll_3d6_best_of_6(roll) for _ in range(NUM_ABILITIES))


def make_character_batch(roll: DieFn, count: int = BATCH_CHARACTERS) -> list[ScoreSet]:
    """Roll ``count`` complete characters in order for Method 4."""

    return [make_scores_method_0(roll) for _ in range(count)]


GENERATORS: Final[dict[GenerationMethod, Callable[[DieFn], ScoreSet]]] = {
    GenerationMethod.IN_ORDER: make_scores_method_0,
    GenerationMethod.FOUR_DROP_LOWEST: make_scores_method_1,
    GenerationMethod.BEST_SIX_OF_TWELVE: make_scores_method_2,
    GenerationMethod.BEST_OF_SIX_PER_ABILITY: make_scores_method_3,
}
