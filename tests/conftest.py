"""Shared fixtures: fixed-value die rollers and requirement tables."""
from collections.abc import Callable, Iterable
from itertools import cycle

import pytest

from chargen_core.data import RuleSet
from chargen_core.models import RequirementTables


def fixed_roller(value: int) -> Callable[[], int]:
    """Die roller that always shows the same face."""
    return lambda: value


def scripted_roller(faces: Iterable[int]) -> Callable[[], int]:
    """Die roller that repeats a fixed sequence of faces."""
    source = cycle(list(faces))
    return lambda: next(source)


@pytest.fixture
def always_six():
    return fixed_roller(6)


@pytest.fixture
def always_three():
    return fixed_roller(3)


@pytest.fixture
def phb_tables():
    return RequirementTables.from_rule_set(RuleSet.ADND_PHB)


@pytest.fixture
def open_door_tables():
    """One class anyone can enter and one nobody can."""
    return RequirementTables.from_requirements(
        [
            ("Commoner", (0, 0, 0, 0, 0, 0)),
            ("Demigod", (19, 19, 19, 19, 19, 19)),
        ]
    )
