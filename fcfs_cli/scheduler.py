from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from .errors import InvalidProcessError
from .metrics import compute_averages, compute_system_metrics
from .models import Process, ScheduledProcess, ScheduledSlice, ScheduleResult

logger = logging.getLogger(__name__)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_processes(processes: Sequence[Process]) -> None:
    """
    Raise InvalidProcessError for a negative or non-integer arrival, a burst
    below 1, or a repeated id.
    """
    seen = set()
    for p in processes:
        if not _is_int(p.arrival) or p.arrival < 0:
            raise InvalidProcessError(
                f"Process {p.id} has invalid arrival time {p.arrival!r} (must be an integer >= 0)"
            )
        if not _is_int(p.burst) or p.burst < 1:
            raise InvalidProcessError(
                f"Process {p.id} has invalid burst time {p.burst!r} (must be an integer >= 1)"
            )
        if p.id in seen:
            raise InvalidProcessError(f"Duplicate process id {p.id}")
        seen.add(p.id)


def schedule_fcfs(processes: Iterable[Process]) -> List[ScheduledProcess]:
    """
    First-Come First-Serve (non-preemptive) scheduling.

    Processes run in ascending arrival order; equal arrivals run in ascending
    id order, whatever their burst. The CPU idles until the next process
    arrives when nothing is ready. The input is left untouched and the result
    is returned in execution order.
    """
    processes = list(processes)
    validate_processes(processes)

    processes_sorted = sorted(processes, key=lambda p: (p.arrival, p.id))

    time = 0
    scheduled: List[ScheduledProcess] = []

    for p in processes_sorted:
        start = max(time, p.arrival)
        completion = start + p.burst
        turnaround = completion - p.arrival
        waiting = turnaround - p.burst

        scheduled.append(
            ScheduledProcess(
                id=p.id,
                name=p.name,
                arrival=p.arrival,
                burst=p.burst,
                start=start,
                completion=completion,
                turnaround=turnaround,
                waiting=waiting,
            )
        )

        time = completion

    return scheduled


def build_timeline(scheduled: Iterable[ScheduledProcess]) -> List[ScheduledSlice]:
    return [ScheduledSlice(id=p.id, name=p.name, start=p.start, end=p.completion) for p in scheduled]


def run_fcfs(processes: Iterable[Process]) -> ScheduleResult:
    """
    Schedule the processes and attach the timeline, averages and system metrics.
    """
    scheduled = schedule_fcfs(processes)
    result = ScheduleResult(
        processes=scheduled,
        timeline=build_timeline(scheduled),
        averages=compute_averages(scheduled),
        system=compute_system_metrics(scheduled),
    )
    logger.debug(
        "Scheduled %d process(es): avg turnaround=%.2f avg waiting=%.2f",
        len(scheduled),
        result.averages.average_turnaround,
        result.averages.average_waiting,
    )
    return result
