"""Command-line driver that simulates every method and prints the pass rates."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable

from .api import compute_class_odds
from .data import DEFAULT_RULE_SET, DEFAULT_TRIALS, REFERENCE_TRIALS, RULE_SET_LABELS, RuleSet
from .generators import GenerationMethod
from .report import format_all_results, format_master_tsv, format_requirement_tables

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    rule_help = "; ".join(f"{rule.value} = {RULE_SET_LABELS[rule]}" for rule in RuleSet)
    parser = argparse.ArgumentParser(
        description="Estimate the odds of qualifying for each class under each dice method."
    )
    parser.add_argument(
        "--rules",
        choices=[rule.value for rule in RuleSet],
        default=DEFAULT_RULE_SET.value,
        help=f"Class-requirement preset (default: %(default)s). {rule_help}.",
    )
    parser.add_argument(
        "--trials",
        type=int,
        default=DEFAULT_TRIALS,
        help="Simulated characters per method (default: %(default)s).",
    )
    parser.add_argument(
        "--reference",
        action="store_true",
        help=f"Use the reference run size of {REFERENCE_TRIALS} trials, overriding --trials.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the die roller (default: seeded from the clock).",
    )
    parser.add_argument(
        "--method",
        dest="methods",
        type=int,
        action="append",
        choices=[int(method) for method in GenerationMethod],
        default=None,
        help="Generation method to run (can be repeated; default: all).",
    )
    parser.add_argument(
        "--tsv",
        action="store_true",
        help="Print one tab-separated master table with whole-number percentages.",
    )
    parser.add_argument(
        "--no-class",
        dest="no_class",
        action="store_true",
        help="Add a NO CLASS line to each method block.",
    )
    parser.add_argument(
        "--show-requirements",
        action="store_true",
        help="Print the normal and sorted class requisites before the results.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress to stderr.",
    )
    return parser.parse_args(list(argv) if argv is not None else None)


def resolve_trials(args: argparse.Namespace) -> int:
    return REFERENCE_TRIALS if args.reference else args.trials


def main(argv: Iterable[str] | None = None) -> None:
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        odds = compute_class_odds(
            rule_set=args.rules,
            trials=resolve_trials(args),
            seed=args.seed,
            methods=args.methods,
        )
    except ValueError as exc:
        raise SystemExit(f"error: {exc}") from exc

    if args.show_requirements:
        print(format_requirement_tables(odds.tables))
    if args.tsv:
        print(format_master_tsv(odds.results, odds.tables), end="")
    else:
        print(format_all_results(odds.results, include_no_class=args.no_class), end="")


if __name__ == "__main__":
    main(sys.argv[1:])
