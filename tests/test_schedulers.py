import pytest

from schedsim.algorithms import (
    ALGORITHMS,
    find_waiting_time_fcfs,
    find_waiting_time_rr,
    find_waiting_time_sjf,
    run_algorithm,
    schedule_fcfs,
    schedule_priority,
    schedule_rr,
    schedule_sjf,
    sort_by_priority,
)
from schedsim.models import ProcessRecord


def _procs():
    return [
        ProcessRecord(1, arrival_time=0, burst_time=5, priority=3),
        ProcessRecord(2, arrival_time=0, burst_time=3, priority=1),
        ProcessRecord(3, arrival_time=0, burst_time=8, priority=2),
    ]


def _srtf_procs():
    return [
        ProcessRecord(1, arrival_time=0, burst_time=7),
        ProcessRecord(2, arrival_time=2, burst_time=4),
        ProcessRecord(3, arrival_time=4, burst_time=1),
        ProcessRecord(4, arrival_time=5, burst_time=4),
    ]


def test_fcfs_running_completion():
    res = schedule_fcfs(_procs())
    assert res.algorithm == "FCFS"
    assert [p.pid for p in res.processes] == [1, 2, 3]
    assert [p.waiting_time for p in res.processes] == [0, 5, 8]
    assert [p.turnaround_time for p in res.processes] == [5, 8, 16]


def test_fcfs_first_record_waits_its_arrival():
    procs = [
        ProcessRecord(1, arrival_time=3, burst_time=2),
        ProcessRecord(2, arrival_time=0, burst_time=4),
    ]
    find_waiting_time_fcfs(procs)
    # Input order is kept even though P2 arrived first.
    assert [p.waiting_time for p in procs] == [3, 5]


def test_fcfs_empty_is_noop():
    procs = []
    find_waiting_time_fcfs(procs)
    assert schedule_fcfs(procs).processes == []


def test_sjf_preemptive_textbook_case():
    res = schedule_sjf(_srtf_procs())
    assert res.algorithm == "SJF"
    assert [p.waiting_time for p in res.processes] == [9, 1, 0, 2]
    assert [p.turnaround_time for p in res.processes] == [16, 5, 1, 6]


def test_sjf_shortest_first_when_all_arrive_together():
    res = schedule_sjf(_procs())
    assert [p.waiting_time for p in res.processes] == [3, 0, 8]


def test_sjf_equal_remaining_earliest_index_wins():
    procs = [
        ProcessRecord(1, arrival_time=0, burst_time=3),
        ProcessRecord(2, arrival_time=0, burst_time=3),
    ]
    find_waiting_time_sjf(procs)
    assert [p.waiting_time for p in procs] == [0, 3]


def test_sjf_running_process_keeps_cpu_on_tie():
    procs = [
        ProcessRecord(1, arrival_time=1, burst_time=2),
        ProcessRecord(2, arrival_time=0, burst_time=3),
    ]
    find_waiting_time_sjf(procs)
    # At t=1 both have 2 units left; P2 is already running and is not displaced.
    assert [p.waiting_time for p in procs] == [2, 0]


def test_sjf_idles_until_first_arrival():
    procs = [ProcessRecord(1, arrival_time=4, burst_time=2)]
    find_waiting_time_sjf(procs)
    assert procs[0].waiting_time == 0


def test_priority_orders_by_priority_then_index():
    res = schedule_priority(_procs())
    assert res.algorithm == "Priority"
    assert [p.pid for p in res.processes] == [2, 3, 1]
    assert [p.waiting_time for p in res.processes] == [0, 3, 11]
    assert [p.turnaround_time for p in res.processes] == [3, 11, 16]


def test_priority_ties_keep_input_order():
    procs = [
        ProcessRecord(10, arrival_time=0, burst_time=1, priority=2),
        ProcessRecord(11, arrival_time=0, burst_time=1, priority=1),
        ProcessRecord(12, arrival_time=0, burst_time=1, priority=2),
        ProcessRecord(13, arrival_time=0, burst_time=1, priority=1),
    ]
    assert [p.pid for p in sort_by_priority(procs)] == [11, 13, 10, 12]


def test_rr_quantum_2_fixed_sweeps():
    res = schedule_rr(_procs(), quantum=2)
    assert res.algorithm == "RR"
    assert res.quantum == 2
    assert [p.pid for p in res.processes] == [1, 2, 3]
    assert [p.waiting_time for p in res.processes] == [7, 6, 8]
    assert [p.turnaround_time for p in res.processes] == [12, 9, 16]


def test_rr_ignores_arrival_but_clamps_waiting():
    procs = [
        ProcessRecord(1, arrival_time=10, burst_time=2),
        ProcessRecord(2, arrival_time=0, burst_time=2),
    ]
    find_waiting_time_rr(procs, quantum=4)
    # P1 runs at t=0 despite arriving at 10; 2 - 2 - 10 clamps to 0.
    assert [p.waiting_time for p in procs] == [0, 2]


def test_rr_defaults_quantum():
    assert schedule_rr(_procs()).quantum == 2


@pytest.mark.parametrize("quantum", [0, -1])
def test_rr_rejects_non_positive_quantum(quantum):
    with pytest.raises(ValueError):
        schedule_rr(_procs(), quantum=quantum)


@pytest.mark.parametrize("name", sorted(ALGORITHMS))
def test_turnaround_and_waiting_invariants(name):
    res = run_algorithm(name, _srtf_procs(), quantum=3)
    for p in res.processes:
        assert p.turnaround_time == p.burst_time + p.waiting_time
        assert p.waiting_time >= 0


@pytest.mark.parametrize("name", sorted(ALGORITHMS))
def test_canonical_input_untouched_and_runs_repeatable(name):
    canonical = _srtf_procs()
    first = run_algorithm(name, canonical, quantum=2)
    second = run_algorithm(name, canonical, quantum=2)

    assert canonical == _srtf_procs()
    assert first.processes == second.processes
    assert all(a is not b for a, b in zip(first.processes, second.processes))


def test_run_algorithm_is_case_insensitive():
    assert run_algorithm("FCFS", _procs()).algorithm == "FCFS"


def test_run_algorithm_unknown():
    with pytest.raises(ValueError, match="Unknown algorithm"):
        run_algorithm("mlfq", _procs())


def test_result_averages():
    res = schedule_fcfs(_procs())
    assert res.avg_waiting_time == pytest.approx(13 / 3)
    assert res.avg_turnaround_time == pytest.approx(29 / 3)


def test_result_averages_empty():
    res = schedule_rr([])
    assert res.avg_waiting_time == 0.0
    assert res.avg_turnaround_time == 0.0


@pytest.mark.parametrize("name", sorted(ALGORITHMS))
def test_empty_input_for_every_algorithm(name):
    res = run_algorithm(name, [], quantum=2)
    assert res.processes == []
    assert res.avg_waiting_time == 0.0
