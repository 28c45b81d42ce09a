"""End-to-end tests for the rectquad command line."""

import math

import pandas as pd
import pytest

from rectquad.cli import EXIT_ERROR, EXIT_OK, build_parser, main, problem_from_args


EXP_ARGS = ["--lo", "0", "--hi", "1", "--function", "exp(x)", "--derivative", "exp(x)"]


class TestRunCommand:
    def test_prints_steps_estimate_and_difference(self, capsys):
        code = main(["run", *EXP_ARGS, "--precision", "0.01"])
        out = capsys.readouterr().out.splitlines()

        assert code == EXIT_OK
        # M is just under e, so n = floor(M / 0.02) is just under 136
        steps = int(out[0].removeprefix("Steps: "))
        assert 130 <= steps <= 135
        estimate = float(out[1].removeprefix("My integral = "))
        difference = float(out[2].removeprefix("My integral - actual integral = "))
        assert abs(estimate - (math.e - 1)) < 0.01
        assert 0 < difference < 0.01

    def test_identity_example(self, capsys):
        code = main(["run", "--lo", "0", "--hi", "1", "--precision", "0.5",
                     "--function", "x", "--derivative", "1"])
        out = capsys.readouterr().out

        assert code == EXIT_OK
        assert "Steps: 1" in out
        assert "My integral = 1.000000" in out
        assert "My integral - actual integral = 0.500000" in out

    def test_missing_inputs_reported(self, capsys):
        code = main(["run", "--lo", "0", "--hi", "1", "--function", "x"])
        captured = capsys.readouterr()

        assert code == EXIT_ERROR
        assert "precision, derivative" in captured.err
        assert captured.out == ""

    def test_half_interval_counts_as_missing(self, capsys):
        code = main(["run", "--lo", "0", "--precision", "0.1",
                     "--function", "x", "--derivative", "1"])
        assert code == EXIT_ERROR
        assert "interval" in capsys.readouterr().err

    def test_invalid_interval_reported(self, capsys):
        code = main(["run", "--lo", "1", "--hi", "0", "--precision", "0.1",
                     "--function", "x", "--derivative", "1"])
        assert code == EXIT_ERROR
        assert "lo < hi" in capsys.readouterr().err

    def test_bad_expression_reported(self, capsys):
        code = main(["run", *EXP_ARGS[:4], "--function", "y*x", "--derivative", "1",
                     "--precision", "0.1"])
        assert code == EXIT_ERROR
        assert "unknown symbol" in capsys.readouterr().err

    def test_undefined_point_reported(self, capsys):
        """log(x) on [0, 1] is undefined where the reference integral samples x = 0."""
        code = main(["run", "--lo", "0", "--hi", "1", "--precision", "0.01",
                     "--function", "log(x)", "--derivative", "1/x"])
        captured = capsys.readouterr()

        assert code == EXIT_ERROR
        assert "Cannot evaluate 'log(x)' at x=0.0" in captured.err

    def test_overflow_reported(self, capsys):
        code = main(["run", "--lo", "0", "--hi", "800", "--precision", "0.01",
                     "--function", "exp(x)", "--derivative", "exp(x)"])
        captured = capsys.readouterr()

        assert code == EXIT_ERROR
        assert "Cannot evaluate 'exp(x)'" in captured.err

    def test_debug_logging_flag(self, capfd):
        main(["--log-level", "DEBUG", "run", *EXP_ARGS, "--precision", "0.1"])
        assert "raw partitions" in capfd.readouterr().err


class TestSweepCommand:
    def test_writes_csv(self, capsys, tmp_path):
        csv_path = tmp_path / "sweep.csv"
        code = main(["sweep", *EXP_ARGS, "--precisions", "0.1", "0.01", "--csv", str(csv_path)])

        assert code == EXIT_OK
        assert "Table saved to" in capsys.readouterr().out
        table = pd.read_csv(csv_path)
        assert table["precision"].tolist() == [0.1, 0.01]
        assert table["within_precision"].all()

    def test_requires_precisions(self):
        with pytest.raises(SystemExit):
            main(["sweep", *EXP_ARGS])


class TestProblemFromArgs:
    def test_absent_flags_become_none(self):
        args = build_parser().parse_args(["run"])
        problem = problem_from_args(args)
        assert problem.interval is None
        assert problem.precision is None
        assert problem.function is None
        assert problem.derivative is None

    def test_sweep_has_no_single_precision(self):
        args = build_parser().parse_args(["sweep", *EXP_ARGS, "--precisions", "0.1"])
        assert problem_from_args(args).precision is None
