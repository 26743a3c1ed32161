"""Monte Carlo odds of qualifying for each character class under the classic dice methods."""

from .api import ClassOddsResult, build_tables, compute_class_odds
from .data import (
    ABILITIES,
    CLASS_REQUIREMENT_TABLES,
    DEFAULT_RULE_SET,
    DEFAULT_TRIALS,
    NO_CLASS_LABEL,
    RULE_SET_LABELS,
    RuleSet,
)
from .dice import make_die_roller, roll_die, seed_default_roller
from .generators import METHOD_SPECS, GenerationMethod, method_allows_reorder
from .models import ClassRequirement, MethodResult, PassTally, RequirementTables
from .qualification import class_allowed, qualifying_indices
from .report import (
    build_master_table,
    format_all_results,
    format_master_tsv,
    format_method_results,
    format_requirement_tables,
)
from .simulation import run_all_methods, run_method

__all__ = [
    "ABILITIES",
    "CLASS_REQUIREMENT_TABLES",
    "ClassOddsResult",
    "ClassRequirement",
    "DEFAULT_RULE_SET",
    "DEFAULT_TRIALS",
    "GenerationMethod",
    "METHOD_SPECS",
    "MethodResult",
    "NO_CLASS_LABEL",
    "PassTally",
    "RULE_SET_LABELS",
    "RequirementTables",
    "RuleSet",
    "build_master_table",
    "build_tables",
    "class_allowed",
    "compute_class_odds",
    "format_all_results",
    "format_master_tsv",
    "format_method_results",
    "format_requirement_tables",
    "make_die_roller",
    "method_allows_reorder",
    "qualifying_indices",
    "roll_die",
    "run_all_methods",
    "run_method",
    "seed_default_roller",
]
