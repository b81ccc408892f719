from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional

from .metrics import summarize_process_metrics


@dataclass
class ProcessRecord:
    pid: int
    arrival_time: int
    burst_time: int
    priority: int = 0
    waiting_time: int = 0
    turnaround_time: int = 0


def clone_records(records: Iterable[ProcessRecord]) -> List[ProcessRecord]:
    """
    Copy a canonical record set for a single algorithm run.

    Computed fields are reset so nothing carries over from an earlier run.
    """
    return [replace(r, waiting_time=0, turnaround_time=0) for r in records]


@dataclass
class ScheduleResult:
    algorithm: str
    quantum: Optional[int]
    processes: List[ProcessRecord] = field(default_factory=list)

    @property
    def label(self) -> str:
        if self.quantum is None:
            return self.algorithm
        return f"{self.algorithm} Quantum = {self.quantum}"

    @property
    def avg_waiting_time(self) -> float:
        return summarize_process_metrics(self.processes)["avg_waiting"]

    @property
    def avg_turnaround_time(self) -> float:
        return summarize_process_metrics(self.processes)["avg_turnaround"]
