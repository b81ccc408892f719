from __future__ import annotations

import csv
import json
import logging
import re
from pathlib import Path
from typing import Iterable, List

from .models import ProcessRecord

logger = logging.getLogger(__name__)

_SEPARATOR_RE = re.compile(r"[\s,\[\]]+")


class WorkloadError(ValueError):
    """Raised when a workload file holds malformed or invalid process entries."""


def load_workload(path: str | Path) -> List[ProcessRecord]:
    """
    Load a workload file into a list of ProcessRecord objects.

    ``.json`` and ``.csv`` files use named fields; anything else is read as
    the line format ``pid burst arrival priority`` (brackets and commas are
    allowed, e.g. ``[1,10,0,2]``).
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        processes = _load_json(path)
    elif suffix == ".csv":
        processes = _load_csv(path)
    else:
        processes = _load_lines(path)

    validate_workload(processes)
    logger.info("Loaded %d processes from %s", len(processes), path)
    return processes


def _load_json(path: Path) -> List[ProcessRecord]:
    with path.open("r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as exc:
            raise WorkloadError(f"{path}: invalid JSON ({exc})") from exc

    if not isinstance(raw, list):
        raise WorkloadError("JSON workload must be a list of process objects")

    return [_process_from_mapping(entry) for entry in raw]


def _load_csv(path: Path) -> List[ProcessRecord]:
    processes: List[ProcessRecord] = []
    with path.open("r", encoding="utf-8-sig", newline="") as f:
        reader = csv.DictReader(f)
        for row in reader:
            processes.append(_process_from_mapping(row))
    return processes


def _load_lines(path: Path) -> List[ProcessRecord]:
    processes: List[ProcessRecord] = []
    with path.open("r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            processes.append(_process_from_line(line, f"{path}:{lineno}"))
    return processes


def _process_from_line(line: str, where: str) -> ProcessRecord:
    tokens = _SEPARATOR_RE.split(line.strip(" \t[]"))
    try:
        values = [int(tok) for tok in tokens]
    except ValueError as exc:
        raise WorkloadError(f"{where}: unexpected characters in {line!r}") from exc

    if len(values) != 4:
        raise WorkloadError(f"{where}: expected 4 integers (pid burst arrival priority), got {len(values)}")

    pid, burst_time, arrival_time, priority = values
    return ProcessRecord(
        pid=pid,
        arrival_time=arrival_time,
        burst_time=burst_time,
        priority=priority,
    )


def _process_from_mapping(mapping) -> ProcessRecord:
    try:
        pid = int(mapping["pid"])
        arrival_time = int(mapping["arrival_time"])
        burst_time = int(mapping["burst_time"])
    except (KeyError, TypeError, ValueError) as exc:
        raise WorkloadError(f"Invalid process entry: {mapping!r}") from exc

    priority_val = mapping.get("priority")
    try:
        priority = int(priority_val) if priority_val not in (None, "") else 0
    except (TypeError, ValueError) as exc:
        raise WorkloadError(f"Invalid priority in entry: {mapping!r}") from exc

    return ProcessRecord(
        pid=pid,
        arrival_time=arrival_time,
        burst_time=burst_time,
        priority=priority,
    )


def validate_workload(processes: Iterable[ProcessRecord]) -> None:
    """
    Reject records the schedulers cannot handle: non-positive bursts,
    negative arrivals and repeated PIDs.
    """
    seen: set[int] = set()
    for p in processes:
        if p.burst_time <= 0:
            raise WorkloadError(f"Process {p.pid}: burst time must be positive (got {p.burst_time})")
        if p.arrival_time < 0:
            raise WorkloadError(f"Process {p.pid}: arrival time must be non-negative (got {p.arrival_time})")
        if p.pid in seen:
            raise WorkloadError(f"Duplicate pid {p.pid}")
        seen.add(p.pid)
