from __future__ import annotations

import itertools
import logging
from typing import Iterable, Iterator, List, Tuple, Union

from .errors import InvalidProcessError
from .models import Process, ScheduleResult
from .scheduler import run_fcfs, validate_processes

logger = logging.getLogger(__name__)

INVALID_TIMES_MESSAGE = "Please ensure Arrival Time is non-negative and Burst Time is positive."

RawInt = Union[str, int]


def _parse_int(value: RawInt) -> int:
    if isinstance(value, bool):
        raise InvalidProcessError(INVALID_TIMES_MESSAGE)
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip(), 10)
    except ValueError as exc:
        raise InvalidProcessError(INVALID_TIMES_MESSAGE) from exc


class ProcessCollector:
    """
    Working set of validated processes.

    Ids come from the collector's own counter rather than the size of the
    set, so they stay unique after removals and clears.
    """

    def __init__(self) -> None:
        self._processes: List[Process] = []
        self._ids = itertools.count(1)

    def add(self, name: str, arrival: RawInt, burst: RawInt) -> Process:
        arrival_val = _parse_int(arrival)
        burst_val = _parse_int(burst)
        if arrival_val < 0 or burst_val <= 0:
            raise InvalidProcessError(INVALID_TIMES_MESSAGE)

        name = (name or "").strip() or f"P{len(self._processes) + 1}"
        process = Process(id=next(self._ids), name=name, arrival=arrival_val, burst=burst_val)
        self._processes.append(process)
        logger.info("Added process %s (id=%d, AT=%d, BT=%d)", name, process.id, arrival_val, burst_val)
        return process

    def extend(self, processes: Iterable[Process]) -> List[Process]:
        """
        Add already-parsed records, e.g. from a workload file. Records are
        taken in ascending id order and given ids from this collector's
        sequence, so their relative submission order is kept.
        Invalid or duplicate records reject the whole batch.
        """
        processes = list(processes)
        validate_processes(processes)
        return [self.add(p.name, p.arrival, p.burst) for p in sorted(processes, key=lambda p: p.id)]

    def remove(self, process_id: int) -> bool:
        for idx, p in enumerate(self._processes):
            if p.id == process_id:
                del self._processes[idx]
                logger.info("Removed process %s (id=%d)", p.name, p.id)
                return True
        return False

    def clear(self) -> None:
        self._processes.clear()
        logger.info("Cleared all processes")

    @property
    def processes(self) -> Tuple[Process, ...]:
        return tuple(self._processes)

    def schedule(self) -> ScheduleResult:
        return run_fcfs(self._processes)

    def __len__(self) -> int:
        return len(self._processes)

    def __iter__(self) -> Iterator[Process]:
        return iter(tuple(self._processes))
