from __future__ import annotations

import argparse
import logging
from typing import List

from rich.console import Console
from rich.logging import RichHandler

from .algorithms import ALGORITHMS, DEFAULT_ORDER, DEFAULT_QUANTUM, run_algorithm
from .models import ScheduleResult
from .report import print_comparison, print_result
from .workload_io import load_workload


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schedsim",
        description="CPU scheduling simulator (FCFS, SJF, Priority, RR) reporting waiting and turnaround times.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Path to the workload file (.json, .csv, or 'pid burst arrival priority' lines).",
    )
    parser.add_argument(
        "--quantum",
        "-q",
        type=int,
        default=DEFAULT_QUANTUM,
        help=f"Time quantum for round robin, must be positive when rr runs (default: {DEFAULT_QUANTUM}).",
    )
    parser.add_argument(
        "--algorithms",
        "-a",
        nargs="+",
        default=list(DEFAULT_ORDER),
        help=f"Algorithms to run, in order (default: {' '.join(DEFAULT_ORDER)}).",
    )
    parser.add_argument(
        "--compare",
        action="store_true",
        help="Print a summary table comparing the averages of every algorithm run.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log scheduling decisions.",
    )
    return parser


def configure_logging(verbose: bool, console: Console) -> None:
    """
    Route the package logger through Rich on stderr.
    """
    pkg_logger = logging.getLogger("schedsim")
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for handler in list(pkg_logger.handlers):
        if isinstance(handler, RichHandler):
            pkg_logger.removeHandler(handler)
    pkg_logger.addHandler(RichHandler(console=console, show_path=False, markup=False))


def _error(console: Console, message: str) -> None:
    console.print(message, markup=False, highlight=False, soft_wrap=True)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    console = Console()
    err_console = Console(stderr=True)
    configure_logging(args.verbose, err_console)

    if args.input is None:
        _error(err_console, parser.format_usage().strip())
        return 1

    unknown = [alg for alg in args.algorithms if alg.lower() not in ALGORITHMS]
    if unknown:
        _error(err_console, f"Error: unknown algorithm(s) {', '.join(unknown)} (choose from {', '.join(ALGORITHMS)})")
        return 1

    if args.quantum <= 0 and "rr" in (alg.lower() for alg in args.algorithms):
        _error(err_console, f"Error: quantum must be a positive integer (got {args.quantum})")
        return 1

    try:
        processes = load_workload(args.input)
    except OSError as exc:
        _error(err_console, f"Error: Invalid filepath ({exc})")
        return 1
    except ValueError as exc:
        _error(err_console, f"Error: {exc}")
        return 1

    results: List[ScheduleResult] = []
    for alg in args.algorithms:
        result = run_algorithm(alg, processes, quantum=args.quantum)
        print_result(result, console)
        results.append(result)

    if args.compare:
        print_comparison(results, console)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
