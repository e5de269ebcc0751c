from __future__ import annotations

from typing import List, Optional, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import ScheduledProcess, ScheduledSlice
from .themes import DEFAULT_THEME, get_theme, process_colors

DEFAULT_GANTT_WIDTH = 60


def render_gantt(slices: Sequence[ScheduledSlice]) -> str:
    """
    Plain-text Gantt chart, one character per time unit. Idle gaps are dots.
    """
    if not slices:
        return "(no execution)"

    slices = sorted(slices, key=lambda s: (s.start, s.end))

    line = "|"
    labels = " "
    time_marks = "0"
    last_time = 0

    for sl in slices:
        idle_gap = sl.start - last_time
        if idle_gap > 0:
            line += "." * idle_gap
            labels += " " * idle_gap
            last_time = sl.start
            time_marks += f"{last_time:>{idle_gap}}"

        width = sl.end - sl.start
        line += "=" * width
        labels += sl.name[:width].ljust(width)
        last_time = sl.end
        time_marks += f"{last_time:>{width}}"

    line += "|"

    return "\n".join(
        [
            "Gantt Chart:",
            line,
            labels,
            time_marks,
        ]
    )


def timeline_markers(scheduled: Sequence[ScheduledProcess]) -> List[int]:
    """
    Sorted, de-duplicated start times plus the final completion time.
    """
    if not scheduled:
        return []
    total_time = max(p.completion for p in scheduled)
    return sorted({p.start for p in scheduled} | {total_time})


def _column(time: int, total_time: int, width: int) -> int:
    return round(time * width / total_time)


def build_rich_gantt(
    scheduled: Sequence[ScheduledProcess],
    theme: str = DEFAULT_THEME,
    width: int = DEFAULT_GANTT_WIDTH,
) -> tuple[Panel, str]:
    """
    Build a Rich Panel with bars proportional to each burst, plus a string of
    time markers aligned under the bars.
    """
    style = get_theme(theme)
    if not scheduled:
        return Panel("No execution", title="Gantt Chart (FCFS)", border_style=style.border), ""

    scheduled = sorted(scheduled, key=lambda p: p.start)
    total_time = max(p.completion for p in scheduled)
    colors = process_colors(scheduled)

    bars = Text()
    labels = Text()
    cursor = 0
    marker_cols = {}

    for p in scheduled:
        start_col = max(cursor, _column(p.start, total_time, width))
        gap = start_col - cursor
        if gap > 0:
            bars.append(" " * gap)
            labels.append(" " * gap)
        marker_cols.setdefault(p.start, start_col)

        # Short bursts still get one visible cell.
        bar_width = max(1, _column(p.completion, total_time, width) - start_col)
        bars.append(" " * bar_width, style=f"on {colors[p.id]}")
        labels.append(p.name[:bar_width].ljust(bar_width), style="bold")
        cursor = start_col + bar_width

    # The final completion is the only marker that is not a start time.
    marker_line = _marker_line({t: marker_cols.get(t, cursor) for t in timeline_markers(scheduled)})

    table = Table.grid(padding=(0, 0))
    table.add_row(bars)
    table.add_row(labels)

    panel = Panel.fit(table, title="Gantt Chart (FCFS)", border_style=style.border)
    return panel, marker_line


def _marker_line(marker_cols: dict) -> str:
    # Labels that would touch are pushed right to keep one blank column.
    chars: List[str] = []
    last_end: Optional[int] = None
    for time in sorted(marker_cols):
        col = marker_cols[time]
        label = str(time)
        if last_end is not None and col <= last_end + 1:
            col = last_end + 2
        if len(chars) < col:
            chars.extend(" " * (col - len(chars)))
        chars[col:] = list(label)
        last_end = col + len(label) - 1
    return "".join(chars)
