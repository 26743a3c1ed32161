"""Die rollers backed by seeded ``random.Random`` generators."""

from __future__ import annotations

import random
import time
from typing import Optional

from .data import DIE_SIDES, DieFn

_DEFAULT_RNG: random.Random = random.Random(time.time_ns())


def roll_die() -> int:
    """Roll one six-sided die on the process-wide generator."""

    return _DEFAULT_RNG.randint(1, DIE_SIDES)


def seed_default_roller(seed: Optional[int] = None) -> None:
    """Reseed the process-wide generator, from the clock when ``seed`` is None."""

    _DEFAULT_RNG.seed(time.time_ns() if seed is None else seed)


def make_die_roller(seed: Optional[int] = None, sides: int = DIE_SIDES) -> DieFn:
    """Return a die roller bound to its own generator.

    Parameters
    ----------
    seed:
        Seed for the private generator. ``None`` seeds from the current time.
    sides:
        Number of faces on the die.

    Raises
    ------
    ValueError
        If ``sides`` is smaller than one.
    """

    if sides < 1:
        raise ValueError(f"A die needs at least one side, received {sides}")
    rng = random.Random(time.time_ns() if seed is None else seed)

    def _roll() -> int:
        return rng.randint(1, sides)

    return _roll
