from __future__ import annotations

from typing import Iterable

from rich import box
from rich.console import Console
from rich.table import Table

from .models import ScheduleResult


def build_process_table(result: ScheduleResult) -> Table:
    table = Table(box=box.SIMPLE_HEAVY)
    table.add_column("Process", justify="center")
    table.add_column("Burst time", justify="right")
    table.add_column("Waiting time", justify="right")
    table.add_column("Turn around time", justify="right")

    for p in result.processes:
        table.add_row(
            str(p.pid),
            str(p.burst_time),
            str(p.waiting_time),
            str(p.turnaround_time),
        )
    return table


def print_result(result: ScheduleResult, console: Console) -> None:
    """
    Print one labelled section: the per-process table and both averages.
    """
    console.print()
    console.rule(f"[bold]{result.label}[/bold]", align="left")
    console.print(build_process_table(result))
    console.print(f"Average waiting time = {result.avg_waiting_time:.2f}")
    console.print(f"Average turn around time = {result.avg_turnaround_time:.2f}")


def print_comparison(results: Iterable[ScheduleResult], console: Console) -> None:
    summary_table = Table(title="Algorithm comparison", box=box.SIMPLE_HEAVY)
    summary_table.add_column("Algorithm")
    summary_table.add_column("Quantum", justify="right")
    summary_table.add_column("Avg waiting", justify="right")
    summary_table.add_column("Avg turnaround", justify="right")

    for result in results:
        summary_table.add_row(
            result.algorithm,
            "" if result.quantum is None else str(result.quantum),
            f"{result.avg_waiting_time:.2f}",
            f"{result.avg_turnaround_time:.2f}",
        )

    console.print()
    console.print(summary_table)
