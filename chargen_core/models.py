"""Dataclasses shared across qualification, simulation, and reporting modules."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .data import (
    CLASS_REQUIREMENT_TABLES,
    NUM_ABILITIES,
    RawRequirement,
    RuleSet,
    parse_rule_set,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassRequirement:
    """Minimum ability scores a character needs to enter a class."""

    name: str
    minimums: tuple[int, ...]

    def __post_init__(self) -> None:
        minimums = tuple(self.minimums)
        if any(isinstance(value, bool) or not isinstance(value, int) for value in minimums):
            raise ValueError(f"Class '{self.name}' has a non-integer minimum: {minimums}")
        if len(minimums) != NUM_ABILITIES:
            raise ValueError(
                f"Class '{self.name}' needs {NUM_ABILITIES} minimums, received {len(minimums)}"
            )
        if any(value < 0 for value in minimums):
            raise ValueError(f"Class '{self.name}' has a negative minimum: {minimums}")
        object.__setattr__(self, "minimums", minimums)

    def sorted_descending(self) -> ClassRequirement:
        """Return a copy with the minimums ordered from highest to lowest."""

        return ClassRequirement(self.name, tuple(sorted(self.minimums, reverse=True)))


@dataclass(frozen=True)
class RequirementTables:
    """Canonical class catalog together with its rank-sorted derivative.

    The sorted catalog is used by generation methods that let the player
    arrange rolled scores to taste: comparing descending scores against
    descending minimums gives the most favourable assignment.
    """

    canonical: tuple[ClassRequirement, ...]
    ranked: tuple[ClassRequirement, ...] = field(init=False)
    rule_set: RuleSet | None = None

    def __post_init__(self) -> None:
        names = [requirement.name for requirement in self.canonical]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate class names: {', '.join(duplicates)}")
        object.__setattr__(
            self,
            "ranked",
            tuple(requirement.sorted_descending() for requirement in self.canonical),
        )

    @classmethod
    def from_requirements(
        cls,
        requirements: Iterable[ClassRequirement | RawRequirement],
        rule_set: RuleSet | None = None,
    ) -> RequirementTables:
        """Build tables from requirement records or ``(name, minimums)`` pairs."""

        canonical: list[ClassRequirement] = []
        for entry in requirements:
            if isinstance(entry, ClassRequirement):
                canonical.append(entry)
            else:
                name, minimums = entry
                canonical.append(ClassRequirement(name, tuple(minimums)))
        return cls(canonical=tuple(canonical), rule_set=rule_set)

    @classmethod
    def from_rule_set(cls, rule_set: RuleSet | str) -> RequirementTables:
        """Build tables for one of the built-in rule-set presets."""

        preset = parse_rule_set(rule_set)
        tables = cls.from_requirements(CLASS_REQUIREMENT_TABLES[preset], rule_set=preset)
        logger.debug("Built requirement tables for %s (%d classes)", preset.value, len(tables))
        return tables

    def __len__(self) -> int:
        return len(self.canonical)

    @property
    def class_names(self) -> list[str]:
        return [requirement.name for requirement in self.canonical]

    def for_reorder(self, allows_reorder: bool) -> tuple[ClassRequirement, ...]:
        """Return the catalog matching a method's reordering rule."""

        return self.ranked if allows_reorder else self.canonical


@dataclass
class PassTally:
    """Per-class success counts for one generation method."""

    class_names: list[str]
    counts: list[int] = field(default_factory=list)
    no_class: int = 0
    trials: int = 0

    def __post_init__(self) -> None:
        if not self.counts:
            self.counts = [0] * len(self.class_names)
        elif len(self.counts) != len(self.class_names):
            raise ValueError(
                f"Expected {len(self.class_names)} counts, received {len(self.counts)}"
            )

    @classmethod
    def empty(cls, class_names: Sequence[str]) -> PassTally:
        return cls(class_names=list(class_names))

    def record(self, passed: Iterable[int]) -> None:
        """Record one trial given the catalog indices that qualified."""

        self.trials += 1
        any_passed = False
        for index in passed:
            self.counts[index] += 1
            any_passed = True
        if not any_passed:
            self.no_class += 1

    @property
    def qualified_trials(self) -> int:
        """Return the number of trials where at least one class qualified."""

        return self.trials - self.no_class

    def count_for(self, class_name: str) -> int:
        return self.counts[self.class_names.index(class_name)]

    def percentages(self) -> list[float]:
        """Return the pass rate of each class as a percentage of all trials."""

        if self.trials <= 0:
            return [0.0 for _ in self.counts]
        return [count / self.trials * 100 for count in self.counts]

    def no_class_percentage(self) -> float:
        if self.trials <= 0:
            return 0.0
        return self.no_class / self.trials * 100


@dataclass
class MethodResult:
    """Tally and timing for one generation method run."""

    method: int
    tally: PassTally
    seconds: float
