"""Class qualification checks against minimum ability scores."""

from __future__ import annotations

from collections.abc import Sequence

from .models import ClassRequirement


def class_allowed(requirement: ClassRequirement, scores: Sequence[int]) -> bool:
    """Return True if every score meets the class minimum at the same index.

    Parameters
    ----------
    requirement:
        Class record from either the canonical or the rank-sorted catalog.
    scores:
        Ability scores aligned with ``requirement.minimums``. Pass them in
        ability order for the canonical catalog, or sorted descending for
        the rank-sorted one.
    """

    for score, minimum in zip(scores, requirement.minimums):
        if score < minimum:
            return False
    return True


def qualifying_indices(
    requirements: Sequence[ClassRequirement],
    scores: Sequence[int],
) -> list[int]:
    """Return the catalog indices of every class the scores qualify for."""

    return [
        index for index, requirement in enumerate(requirements) if class_allowed(requirement, scores)
    ]
