"""High-level entry points used by the command line and other callers."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from time import perf_counter
from typing import Optional

from .data import DEFAULT_RULE_SET, DEFAULT_TRIALS, DieFn, RawRequirement, RuleSet
from .dice import make_die_roller
from .generators import GenerationMethod
from .models import ClassRequirement, MethodResult, RequirementTables
from .simulation import run_all_methods

logger = logging.getLogger(__name__)


@dataclass
class ClassOddsResult:
    """Bundle containing the requirement tables and per-method tallies."""

    tables: RequirementTables
    trials: int
    results: list[MethodResult]
    compute_seconds: float
    seed: Optional[int]  # None when a roller was injected

    def result_for(self, method: GenerationMethod | int) -> MethodResult:
        """Return the result for one method.

        Raises
        ------
        KeyError
            If the method was not part of this run.
        """

        for result in self.results:
            if result.method == int(method):
                return result
        raise KeyError(f"Method {int(method)} was not simulated")


def build_tables(
    rule_set: RuleSet | str = DEFAULT_RULE_SET,
    requirements: Optional[Sequence[ClassRequirement | RawRequirement]] = None,
) -> RequirementTables:
    """Return requirement tables for a preset or an explicit class list.

    Parameters
    ----------
    rule_set:
        Preset to use when ``requirements`` is not supplied.
    requirements:
        Optional replacement catalog, as records or ``(name, minimums)`` pairs.
    """

    if requirements is not None:
        return RequirementTables.from_requirements(requirements)
    return RequirementTables.from_rule_set(rule_set)


def compute_class_odds(
    rule_set: RuleSet | str = DEFAULT_RULE_SET,
    trials: int = DEFAULT_TRIALS,
    seed: Optional[int] = None,
    methods: Optional[Iterable[GenerationMethod | int | str]] = None,
    requirements: Optional[Sequence[ClassRequirement | RawRequirement]] = None,
    roll: Optional[DieFn] = None,
) -> ClassOddsResult:
    """Simulate every requested method and collect class pass counts.

    Parameters
    ----------
    rule_set:
        Class-requirement preset to simulate against.
    trials:
        Number of simulated characters per method.
    seed:
        Seed for the die roller (``None`` seeds from the clock). Ignored when
        ``roll`` is given.
    methods:
        Methods to run, in order. Defaults to all five.
    requirements:
        Optional replacement for the preset catalog.
    roll:
        Optional die roller overriding the seeded one.

    Returns
    -------
    ClassOddsResult
        Bundle with the tables used, per-method tallies and total timing.

    Raises
    ------
    ValueError
        If the rule set or a method is unknown, a catalog entry is invalid, or
        ``trials`` is negative.
    """

    if trials < 0:
        raise ValueError(f"Trial count must be non-negative, received {trials}")

    tables = build_tables(rule_set, requirements)
    roller = roll or make_die_roller(seed)

    compute_start = perf_counter()
    results = run_all_methods(tables, trials, roll=roller, methods=methods)
    compute_seconds = perf_counter() - compute_start

    logger.info(
        "Simulated %d method(s) x %d trials against %s in %.2fs",
        len(results),
        trials,
        tables.rule_set.value if tables.rule_set else "custom classes",
        compute_seconds,
    )
    return ClassOddsResult(
        tables=tables,
        trials=trials,
        results=results,
        compute_seconds=compute_seconds,
        seed=None if roll is not None else seed,
    )
