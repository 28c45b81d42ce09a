"""Command line interface.

Usage:
    rectquad run --lo 0 --hi 1 --precision 1e-3 --function "exp(x)" --derivative "exp(x)"
    rectquad sweep --lo 0 --hi 3.14159 --function "sin(x)" --derivative "cos(x)" \\
        --precisions 1e-1 1e-2 1e-3 --csv output/sweep.csv --plot output/sweep.png

Inputs left off the command line reach the integrator as absent and are
reported together as missing.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from rectquad.core.problem import IntegrationProblem, Interval
from rectquad.errors import RectquadError
from rectquad.expressions import parse_function
from rectquad.logging_config import configure_from_env, enable_console_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rectquad",
        description="Integrate f over [lo, hi] to a given precision using right rectangles.",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Enable console logging at this level (default: RQ_LOGGING or off)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    run = subparsers.add_parser("run", help="Integrate once and compare with a reference value")
    _add_problem_arguments(run)
    run.add_argument("--precision", type=float, help="Maximum absolute error")

    sweep = subparsers.add_parser("sweep", help="Integrate for several precision targets")
    _add_problem_arguments(sweep)
    sweep.add_argument(
        "--precisions", type=float, nargs="+", required=True, help="Precision targets"
    )
    sweep.add_argument("--csv", help="Write the sweep table to this CSV file")
    sweep.add_argument("--plot", help="Write a convergence plot to this image file")

    return parser


def _add_problem_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--lo", type=float, help="Lower bound of the interval")
    parser.add_argument("--hi", type=float, help="Upper bound of the interval")
    parser.add_argument("--function", help="Integrand, e.g. 'sin(x) + x**2'")
    parser.add_argument("--derivative", help="First derivative of the integrand, e.g. 'cos(x) + 2*x'")


def problem_from_args(args: argparse.Namespace) -> IntegrationProblem:
    """Build an IntegrationProblem, leaving unsupplied inputs as None."""
    interval = None
    if args.lo is not None and args.hi is not None:
        interval = Interval(args.lo, args.hi)

    return IntegrationProblem(
        interval=interval,
        precision=getattr(args, "precision", None),
        function=parse_function(args.function) if args.function is not None else None,
        derivative=parse_function(args.derivative) if args.derivative is not None else None,
    )


def cmd_run(args: argparse.Namespace) -> int:
    from rectquad.analysis.comparison import compare_with_reference

    comparison = compare_with_reference(problem_from_args(args))
    print(f"Steps: {comparison.partitions}")
    print(f"My integral = {comparison.estimate:f}")
    print(f"My integral - actual integral = {comparison.difference:f}")
    return EXIT_OK


def cmd_sweep(args: argparse.Namespace) -> int:
    from rectquad.analysis.convergence import convergence_table, plot_convergence

    table = convergence_table(problem_from_args(args), args.precisions)
    print(table.to_string(index=False))

    if args.csv:
        table.to_csv(args.csv, index=False)
        print(f"\nTable saved to: {args.csv}")
    if args.plot:
        path = plot_convergence(table, args.plot, title=f"f(x) = {args.function}")
        print(f"Plot saved to: {path}")
    return EXIT_OK


COMMANDS = {
    "run": cmd_run,
    "sweep": cmd_sweep,
}


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        enable_console_logging(level=args.log_level)
    else:
        configure_from_env()

    try:
        return COMMANDS[args.command](args)
    except RectquadError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
