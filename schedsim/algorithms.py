from __future__ import annotations

import logging
from typing import List, Optional

from .metrics import find_turnaround_time
from .models import ProcessRecord, ScheduleResult, clone_records

logger = logging.getLogger(__name__)

DEFAULT_QUANTUM = 2
DEFAULT_ORDER = ("fcfs", "sjf", "priority", "rr")


def find_waiting_time_fcfs(processes: List[ProcessRecord]) -> None:
    """
    First-Come First-Serve waiting time, in the order given.

    The first record waits its own arrival time; every later record waits
    until its predecessor has finished. No reordering by arrival is done.
    """
    if not processes:
        return

    processes[0].waiting_time = processes[0].arrival_time
    for prev, p in zip(processes, processes[1:]):
        p.waiting_time = prev.waiting_time + prev.burst_time


def find_waiting_time_sjf(processes: List[ProcessRecord]) -> None:
    """
    Shortest Remaining Time First (preemptive SJF), one time unit per step.

    The running record keeps the CPU until an arrived record has strictly
    less remaining time; among challengers the lowest index wins.
    """
    remaining = [p.burst_time for p in processes]
    n = len(processes)

    time = 0
    complete = sum(1 for rt in remaining if rt <= 0)
    current: Optional[int] = None

    while complete < n:
        best = current
        best_remaining = remaining[current] if current is not None else None
        for i, p in enumerate(processes):
            if p.arrival_time > time or remaining[i] <= 0:
                continue
            if best_remaining is None or remaining[i] < best_remaining:
                best, best_remaining = i, remaining[i]

        if best is None:
            # Nothing has arrived yet; CPU idles for one unit.
            time += 1
            continue

        if best != current:
            logger.debug("SJF t=%d: P%d selected (remaining %d)", time, processes[best].pid, remaining[best])
        current = best
        remaining[current] -= 1

        if remaining[current] == 0:
            p = processes[current]
            finish_time = time + 1
            p.waiting_time = max(0, finish_time - p.burst_time - p.arrival_time)
            logger.debug("SJF t=%d: P%d finished, waiting %d", finish_time, p.pid, p.waiting_time)
            complete += 1
            current = None

        time += 1


def sort_by_priority(processes: List[ProcessRecord]) -> List[ProcessRecord]:
    """
    Order records by priority (lower value first), ties by input position.
    """
    ranked = sorted(enumerate(processes), key=lambda item: (item[1].priority, item[0]))
    return [p for _, p in ranked]


def find_waiting_time_rr(processes: List[ProcessRecord], quantum: int) -> None:
    """
    Round Robin over fixed input-order sweeps.

    Every record is eligible from t=0 regardless of arrival time; each sweep
    grants up to `quantum` units to every unfinished record in index order.
    """
    if quantum is None or quantum <= 0:
        raise ValueError("Round Robin requires a positive quantum (use --quantum)")

    remaining = [p.burst_time for p in processes]
    time = 0

    while any(rt > 0 for rt in remaining):
        for i, p in enumerate(processes):
            if remaining[i] <= 0:
                continue

            if remaining[i] > quantum:
                time += quantum
                remaining[i] -= quantum
                logger.debug("RR t=%d: P%d used full quantum (remaining %d)", time, p.pid, remaining[i])
            else:
                time += remaining[i]
                remaining[i] = 0
                p.waiting_time = max(0, time - p.burst_time - p.arrival_time)
                logger.debug("RR t=%d: P%d finished, waiting %d", time, p.pid, p.waiting_time)


def schedule_fcfs(processes: List[ProcessRecord], quantum: Optional[int] = None) -> ScheduleResult:
    """
    First-Come First-Serve (non-preemptive) scheduling.
    """
    records = clone_records(processes)
    find_waiting_time_fcfs(records)
    find_turnaround_time(records)
    return ScheduleResult(algorithm="FCFS", quantum=None, processes=records)


def schedule_sjf(processes: List[ProcessRecord], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Shortest Job First, preemptive on remaining time.
    """
    records = clone_records(processes)
    find_waiting_time_sjf(records)
    find_turnaround_time(records)
    return ScheduleResult(algorithm="SJF", quantum=None, processes=records)


def schedule_priority(processes: List[ProcessRecord], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Static Priority scheduling (non-preemptive).

    Lower numeric priority value means higher priority. After sorting, the
    FCFS waiting-time rule is applied to the new order, so arrival times of
    all but the first record are ignored.
    """
    records = sort_by_priority(clone_records(processes))
    logger.debug("Priority order: %s", [p.pid for p in records])
    find_waiting_time_fcfs(records)
    find_turnaround_time(records)
    return ScheduleResult(algorithm="Priority", quantum=None, processes=records)


def schedule_rr(processes: List[ProcessRecord], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Round Robin scheduling with a fixed time quantum.
    """
    if quantum is None:
        quantum = DEFAULT_QUANTUM

    records = clone_records(processes)
    find_waiting_time_rr(records, quantum)
    find_turnaround_time(records)
    return ScheduleResult(algorithm="RR", quantum=quantum, processes=records)


ALGORITHMS = {
    "fcfs": schedule_fcfs,
    "sjf": schedule_sjf,
    "priority": schedule_priority,
    "rr": schedule_rr,
}


def run_algorithm(name: str, processes: List[ProcessRecord], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Dispatch to the requested algorithm. Quantum only matters for round robin.
    """
    name = name.lower()
    if name not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm '{name}' (choose from {', '.join(ALGORITHMS)})")

    func = ALGORITHMS[name]
    logger.debug("Running %s on %d processes", name, len(processes))
    return func(processes, quantum=quantum)
