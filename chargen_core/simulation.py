"""Monte Carlo trial runners for the ability-score generation methods."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from time import perf_counter
from typing import Optional

from .data import BATCH_CHARACTERS, DieFn
from .dice import roll_die
from .generators import (
    ALL_METHODS,
    GENERATORS,
    METHOD_SPECS,
    GenerationMethod,
    make_character_batch,
    method_allows_reorder,
    parse_method,
)
from .models import MethodResult, PassTally, RequirementTables
from .qualification import class_allowed, qualifying_indices

logger = logging.getLogger(__name__)


def _check_trials(trials: int) -> None:
    if trials < 0:
        raise ValueError(f"Trial count must be non-negative, received {trials}")


def tally_single_sets(
    method: GenerationMethod | int,
    tables: RequirementTables,
    trials: int,
    roll: Optional[DieFn] = None,
) -> PassTally:
    """Tally class pass counts for a method that yields one score set per trial.

    Parameters
    ----------
    method:
        Any generation method except the twelve-character batch.
    tables:
        Requirement catalogs for the active rule set.
    trials:
        Number of simulated characters.
    roll:
        Die roller; defaults to the process-wide roller.
    """

    method = GenerationMethod(method)
    assert method is not GenerationMethod.BEST_OF_TWELVE_CHARACTERS, (
        "Method 4 rolls several characters per trial; use tally_character_batches"
    )
    _check_trials(trials)
    roll = roll or roll_die
    reorder = method_allows_reorder(method)
    requirements = tables.for_reorder(reorder)
    make_scores = GENERATORS[method]
    tally = PassTally.empty(tables.class_names)
    for _ in range(trials):
        scores = make_scores(roll)
        if reorder:
            scores = tuple(sorted(scores, reverse=True))
        tally.record(qualifying_indices(requirements, scores))
    return tally


def tally_character_batches(
    tables: RequirementTables,
    trials: int,
    roll: Optional[DieFn] = None,
    characters: int = BATCH_CHARACTERS,
) -> PassTally:
    """Tally pass counts when each trial rolls several characters in order.

    A class passes for a trial when any one of the characters qualifies for
    it, and the trial lands in the no-class bucket only when none of the
    characters qualifies for anything.
    """

    _check_trials(trials)
    roll = roll or roll_die
    requirements = tables.canonical
    tally = PassTally.empty(tables.class_names)
    for _ in range(trials):
        batch = make_character_batch(roll, characters)
        passed: list[int] = []
        for index, requirement in enumerate(requirements):
            for scores in batch:
                if class_allowed(requirement, scores):
                    passed.append(index)
                    break
        tally.record(passed)
    return tally


def run_method(
    method: GenerationMethod | int | str,
    tables: RequirementTables,
    trials: int,
    roll: Optional[DieFn] = None,
) -> MethodResult:
    """Run one generation method and return its tally with timing."""

    method = parse_method(method)
    start = perf_counter()
    if method is GenerationMethod.BEST_OF_TWELVE_CHARACTERS:
        tally = tally_character_batches(
            tables, trials, roll=roll, characters=METHOD_SPECS[method].characters
        )
    else:
        tally = tally_single_sets(method, tables, trials, roll=roll)
    seconds = perf_counter() - start
    logger.debug(
        "Method %d: %d trials in %.3fs, %d without a class",
        method,
        trials,
        seconds,
        tally.no_class,
    )
    return MethodResult(method=int(method), tally=tally, seconds=seconds)


def run_all_methods(
    tables: RequirementTables,
    trials: int,
    roll: Optional[DieFn] = None,
    methods: Optional[Iterable[GenerationMethod | int | str]] = None,
) -> list[MethodResult]:
    """Run each requested method in order (all five by default)."""

    selected = ALL_METHODS if methods is None else [parse_method(m) for m in methods]
    return [run_method(method, tables, trials, roll=roll) for method in selected]
