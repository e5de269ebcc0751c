from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Process:
    id: int
    name: str
    arrival: int
    burst: int


@dataclass(frozen=True)
class ScheduledProcess:
    """
    A process annotated with the times assigned to it by the scheduler.
    """

    id: int
    name: str
    arrival: int
    burst: int
    start: int
    completion: int
    turnaround: int
    waiting: int


@dataclass(frozen=True)
class ScheduledSlice:
    """
    One contiguous slice of execution for a process in the Gantt chart.
    """

    id: int
    name: str
    start: int
    end: int


@dataclass(frozen=True)
class Averages:
    average_turnaround: float = 0.0
    average_waiting: float = 0.0


@dataclass(frozen=True)
class SystemMetrics:
    makespan: int = 0
    cpu_busy_time: int = 0
    idle_time: int = 0
    throughput: float = 0.0
    cpu_utilization: float = 0.0


@dataclass
class ScheduleResult:
    processes: List[ScheduledProcess] = field(default_factory=list)
    timeline: List[ScheduledSlice] = field(default_factory=list)
    averages: Averages = field(default_factory=Averages)
    system: Optional[SystemMetrics] = None
