"""Plain-text and tabular rendering of simulated pass rates."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import pandas as pd

from .data import ABILITIES, ABILITY_ABBREVIATIONS, NAME_WIDTH, NO_CLASS_LABEL
from .generators import METHOD_SPECS, GenerationMethod
from .models import ClassRequirement, MethodResult, RequirementTables

PERCENT_WIDTH = 6
THRESHOLD_WIDTH = 4


def method_column(method: int) -> str:
    return f"Method {method}"


def format_rate_line(name: str, percent: float) -> str:
    """Return one ``<name><percentage> %`` row padded for console output."""

    return f"{name:<{NAME_WIDTH}}{percent:>{PERCENT_WIDTH}.2f} %"


def format_method_results(result: MethodResult, include_no_class: bool = False) -> str:
    """Render the pass rates of one method as a header plus one line per class.

    Parameters
    ----------
    result:
        Tally and timing returned by ``run_method``.
    include_no_class:
        Append a line for trials where no class qualified.
    """

    spec = METHOD_SPECS[GenerationMethod(result.method)]
    tally = result.tally
    lines = [f"# {method_column(result.method)} ({spec.label}) #"]
    for name, percent in zip(tally.class_names, tally.percentages()):
        lines.append(format_rate_line(name, percent))
    if include_no_class:
        lines.append(format_rate_line(NO_CLASS_LABEL, tally.no_class_percentage()))
    return "\n".join(lines)


def format_all_results(results: Sequence[MethodResult], include_no_class: bool = False) -> str:
    """Render every method block, separated by blank lines."""

    blocks = [format_method_results(result, include_no_class) for result in results]
    return "\n\n".join(blocks) + "\n"


def _format_requirement_rows(requirements: Sequence[ClassRequirement]) -> list[str]:
    rows: list[str] = []
    for requirement in requirements:
        values = "".join(f"{value:>{THRESHOLD_WIDTH}}" for value in requirement.minimums)
        rows.append(f"{requirement.name:<{NAME_WIDTH}}{values}")
    return rows


def format_ability_header() -> str:
    """Return the ``Class  Str  Int ...`` header aligned with requirement rows."""

    columns = "".join(f"{ABILITY_ABBREVIATIONS[name]:>{THRESHOLD_WIDTH}}" for name in ABILITIES)
    return f"{'Class':<{NAME_WIDTH}}{columns}"


def format_requirement_tables(tables: RequirementTables) -> str:
    """Render the canonical and rank-sorted catalogs as two blocks.

    Only the canonical block carries the ability header; the sorted block is
    ordered by rank, not by ability.
    """

    lines = ["# Normal Class Requisites #", format_ability_header()]
    lines.extend(_format_requirement_rows(tables.canonical))
    lines.append("")
    lines.append("# Sorted Class Requisites #")
    lines.extend(_format_requirement_rows(tables.ranked))
    return "\n".join(lines) + "\n"


def build_master_table(results: Sequence[MethodResult], tables: RequirementTables) -> pd.DataFrame:
    """Cross-tabulate percentages: one row per class plus NO CLASS, one column per method."""

    index = tables.class_names + [NO_CLASS_LABEL]
    data: dict[str, list[float]] = {}
    for result in results:
        tally = result.tally
        data[method_column(result.method)] = tally.percentages() + [tally.no_class_percentage()]
    frame = pd.DataFrame(data, index=pd.Index(index, name="Class"), dtype=float)
    return frame


def format_master_tsv(results: Sequence[MethodResult], tables: RequirementTables) -> str:
    """Return the master table as tab-separated whole-number percentages."""

    frame = build_master_table(results, tables)
    whole = pd.DataFrame(
        np.rint(frame.to_numpy()).astype(int),
        index=frame.index,
        columns=frame.columns,
    )
    return whole.to_csv(sep="\t", lineterminator="\n")
