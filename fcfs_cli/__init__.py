"""
FCFS CLI package.

Computes First-Come, First-Served CPU scheduling metrics for a set of
processes and renders them as a table and a Gantt chart in the terminal.
"""

from .models import Process, ScheduledProcess
from .scheduler import run_fcfs, schedule_fcfs

__all__ = ["cli", "Process", "ScheduledProcess", "run_fcfs", "schedule_fcfs"]
