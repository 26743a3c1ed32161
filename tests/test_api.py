"""Scenario tests for the high-level API and the command-line driver."""
import logging

import pytest

from conftest import fixed_roller

from chargen_core.api import build_tables, compute_class_odds
from chargen_core.cli import main, parse_args, resolve_trials
from chargen_core.data import DEFAULT_TRIALS, REFERENCE_TRIALS, RuleSet


class TestComputeClassOdds:
    """Tests for the simulation façade."""

    def test_runs_all_methods_for_preset(self):
        odds = compute_class_odds(rule_set=RuleSet.ODD, trials=200, seed=1)
        assert [r.method for r in odds.results] == [0, 1, 2, 3, 4]
        assert odds.tables.rule_set is RuleSet.ODD
        assert odds.trials == 200
        assert odds.compute_seconds >= 0.0

    def test_odd_core_classes_always_qualify(self):
        """OD&D sets no minimums for the four core classes."""
        odds = compute_class_odds(rule_set="odd", trials=300, seed=2, methods=[0])
        tally = odds.result_for(0).tally
        for name in ("Cleric", "Fighter", "Magic-User", "Thief"):
            assert tally.count_for(name) == 300
        assert tally.no_class == 0

    def test_same_seed_same_counts(self):
        first = compute_class_odds(trials=300, seed=42)
        second = compute_class_odds(trials=300, seed=42)
        assert [r.tally.counts for r in first.results] == [r.tally.counts for r in second.results]

    def test_custom_requirements_override_preset(self):
        odds = compute_class_odds(
            trials=50,
            requirements=[("Anyone", (0, 0, 0, 0, 0, 0))],
            methods=[0, 4],
        )
        assert odds.tables.rule_set is None
        assert all(r.tally.count_for("Anyone") == 50 for r in odds.results)

    def test_injected_roller(self):
        odds = compute_class_odds(trials=4, methods=[0], roll=fixed_roller(3))
        tally = odds.result_for(0).tally
        assert tally.count_for("Paladin") == 0
        assert tally.count_for("Fighter") == 4

    def test_seed_recorded_when_used(self):
        odds = compute_class_odds(trials=1, seed=17, methods=[0])
        assert odds.seed == 17

    def test_injected_roller_reports_no_seed(self):
        odds = compute_class_odds(trials=1, seed=17, methods=[0], roll=fixed_roller(4))
        assert odds.seed is None

    def test_result_for_missing_method(self):
        odds = compute_class_odds(trials=1, seed=3, methods=[2])
        with pytest.raises(KeyError):
            odds.result_for(4)

    def test_negative_trials_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            compute_class_odds(trials=-5)

    def test_unknown_rule_set_rejected(self):
        with pytest.raises(ValueError, match="Unknown rule set"):
            build_tables("basic")

    def test_logs_summary(self, caplog):
        with caplog.at_level(logging.INFO, logger="chargen_core.api"):
            compute_class_odds(trials=10, seed=5, methods=[1])
        assert "Simulated 1 method(s) x 10 trials against adnd-phb" in caplog.text


class TestCommandLine:
    """Tests for the argparse driver."""

    def test_defaults(self):
        args = parse_args([])
        assert args.rules == "adnd-phb"
        assert args.trials == DEFAULT_TRIALS
        assert args.seed is None
        assert args.methods is None
        assert not args.tsv

    def test_trials_flag_used_by_default(self):
        assert resolve_trials(parse_args(["--trials", "250"])) == 250

    def test_reference_flag_overrides_trials(self):
        args = parse_args(["--trials", "250", "--reference"])
        assert resolve_trials(args) == REFERENCE_TRIALS == 1_000_000

    def test_repeated_methods(self):
        args = parse_args(["--method", "1", "--method", "3"])
        assert args.methods == [1, 3]

    def test_rejects_unknown_method(self):
        with pytest.raises(SystemExit):
            parse_args(["--method", "7"])

    def test_prints_method_blocks(self, capsys):
        main(["--trials", "50", "--seed", "9", "--no-class"])
        out = capsys.readouterr().out
        for method in range(5):
            assert f"# Method {method} (" in out
        assert out.count("NO CLASS") == 5
        assert "Monk" in out

    def test_prints_tsv(self, capsys):
        main(["--trials", "20", "--seed", "9", "--tsv", "--rules", "adnd-ua"])
        lines = capsys.readouterr().out.strip("\n").split("\n")
        assert lines[0].split("\t") == ["Class"] + [f"Method {m}" for m in range(5)]
        assert lines[-1].startswith("NO CLASS\t")
        assert any(line.startswith("Cavalier\t") for line in lines)

    def test_show_requirements(self, capsys):
        main(["--trials", "1", "--seed", "1", "--method", "0", "--show-requirements"])
        out = capsys.readouterr().out
        assert out.index("# Normal Class Requisites #") < out.index("# Method 0")

    def test_negative_trials_exit(self):
        with pytest.raises(SystemExit, match="non-negative"):
            main(["--trials", "-1"])
