from __future__ import annotations

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from .models import ProcessRecord


def find_turnaround_time(processes: List[ProcessRecord]) -> None:
    """
    Fill in turnaround time as burst plus waiting time, for any algorithm.
    """
    for p in processes:
        p.turnaround_time = p.burst_time + p.waiting_time


def summarize_process_metrics(processes: List[ProcessRecord]) -> dict:
    """
    Return average waiting and turnaround time for quick comparison.
    """
    if not processes:
        return {"avg_waiting": 0.0, "avg_turnaround": 0.0}

    n = len(processes)
    return {
        "avg_waiting": sum(p.waiting_time for p in processes) / n,
        "avg_turnaround": sum(p.turnaround_time for p in processes) / n,
    }
