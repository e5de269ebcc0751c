from __future__ import annotations

from typing import Sequence

from .models import Averages, ScheduledProcess, SystemMetrics


def compute_averages(scheduled: Sequence[ScheduledProcess]) -> Averages:
    """
    Mean turnaround and mean waiting time; both zero for an empty schedule.
    """
    if not scheduled:
        return Averages(average_turnaround=0.0, average_waiting=0.0)

    n = len(scheduled)
    return Averages(
        average_turnaround=sum(p.turnaround for p in scheduled) / n,
        average_waiting=sum(p.waiting for p in scheduled) / n,
    )


def compute_system_metrics(scheduled: Sequence[ScheduledProcess]) -> SystemMetrics:
    """
    Compute makespan, idle time, throughput and CPU utilization for a schedule.
    """
    if not scheduled:
        return SystemMetrics()

    makespan = max(p.completion for p in scheduled)
    cpu_busy_time = sum(p.burst for p in scheduled)

    throughput = len(scheduled) / makespan if makespan > 0 else 0.0
    cpu_utilization = cpu_busy_time / makespan if makespan > 0 else 0.0

    return SystemMetrics(
        makespan=makespan,
        cpu_busy_time=cpu_busy_time,
        idle_time=makespan - cpu_busy_time,
        throughput=throughput,
        cpu_utilization=cpu_utilization,
    )
