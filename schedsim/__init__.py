"""
SchedSim package.

Simulates FCFS, preemptive SJF, priority and round-robin CPU scheduling over
a fixed set of processes and reports waiting and turnaround times.
"""

__all__ = ["algorithms", "cli", "metrics", "models", "report", "workload_io"]
