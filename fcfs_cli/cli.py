from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .collector import ProcessCollector
from .errors import InvalidProcessError
from .gantt import DEFAULT_GANTT_WIDTH, build_rich_gantt, render_gantt
from .logging_setup import configure_logging
from .models import ScheduleResult
from .scheduler import run_fcfs
from .themes import DEFAULT_THEME, THEMES, get_theme
from .workload_io import load_workload

logger = logging.getLogger(__name__)

DEFAULT_PRECISION = 2
EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fcfs-cli",
        description="First-Come, First-Served CPU scheduling simulator.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging level (default: WARNING).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Shortcut for --log-level DEBUG.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Schedule the processes in a workload file.")
    run_parser.add_argument(
        "--workload",
        "-w",
        required=True,
        help="Path to JSON or CSV workload file.",
    )
    _add_display_arguments(run_parser)
    run_parser.add_argument(
        "--no-gantt",
        action="store_true",
        help="Only print the process table and averages.",
    )

    menu_parser = subparsers.add_parser(
        "menu",
        help="Interactive session to add, remove and clear processes.",
    )
    menu_parser.add_argument(
        "--workload",
        "-w",
        default=None,
        help="Optional workload file to pre-load into the session.",
    )
    _add_display_arguments(menu_parser)

    return parser


def _add_display_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--theme",
        "-t",
        default=DEFAULT_THEME,
        choices=sorted(THEMES),
        help=f"Colour theme (default: {DEFAULT_THEME}).",
    )
    parser.add_argument(
        "--width",
        type=_positive_int,
        default=DEFAULT_GANTT_WIDTH,
        help=f"Gantt chart width in cells (default: {DEFAULT_GANTT_WIDTH}).",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Draw the Gantt chart as plain text, one character per time unit.",
    )


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def _print_result(
    result: ScheduleResult,
    console: Console,
    theme: str = DEFAULT_THEME,
    width: int = DEFAULT_GANTT_WIDTH,
    show_gantt: bool = True,
    plain: bool = False,
) -> None:
    style = get_theme(theme)

    console.print(" FCFS CPU SCHEDULING SIMULATOR ", style=style.header, justify="center")
    console.print("First-Come, First-Served Algorithm", style="dim", justify="center")
    console.print()

    headers = ["ID", "Name", "AT", "BT", "ST", "CT", "TAT", "WT"]

    proc_table = Table(
        title=f"Processes ({len(result.processes)})",
        box=box.SIMPLE_HEAVY,
        border_style=style.border,
        header_style=f"bold {style.accent_text}",
    )
    for h in headers:
        justify = "left" if h == "Name" else "right"
        proc_table.add_column(h, justify=justify)

    for p in result.processes:
        proc_table.add_row(
            str(p.id),
            p.name,
            str(p.arrival),
            str(p.burst),
            str(p.start),
            str(p.completion),
            str(p.turnaround),
            str(p.waiting),
        )

    console.print(proc_table)

    avg = result.averages
    console.print(
        f"[bold]Avg Turnaround Time:[/bold] {avg.average_turnaround:.{DEFAULT_PRECISION}f} units   "
        f"[bold]Avg Waiting Time:[/bold] {avg.average_waiting:.{DEFAULT_PRECISION}f} units"
    )

    if result.system:
        sys = result.system
        sys_table = Table(title="System metrics", box=box.SIMPLE_HEAVY, border_style=style.border)
        sys_table.add_column("Metric")
        sys_table.add_column("Value", justify="right")
        sys_table.add_row("Makespan", str(sys.makespan))
        sys_table.add_row("CPU busy time", str(sys.cpu_busy_time))
        sys_table.add_row("CPU idle time", str(sys.idle_time))
        sys_table.add_row("Throughput (proc/time)", f"{sys.throughput:.3f}")
        sys_table.add_row("CPU utilization", f"{sys.cpu_utilization*100:.1f}%")
        console.print(sys_table)

    if show_gantt and plain:
        console.print()
        console.print(render_gantt(result.timeline), markup=False, highlight=False)
    elif show_gantt:
        console.print()
        panel, time_marks = build_rich_gantt(result.processes, theme=theme, width=width)
        console.print(panel)
        if time_marks:
            # Offset by the panel border and padding.
            console.print("  " + time_marks)

    console.print()
    _print_legend(console, theme)


def _print_legend(console: Console, theme: str) -> None:
    accent = get_theme(theme).accent_text
    console.print("[bold]Formulas:[/bold] TAT = CT - AT, WT = TAT - BT")
    legend = [
        ("AT", "Arrival Time"),
        ("BT", "Burst Time (CPU Time)"),
        ("ST", "Start Time"),
        ("CT", "Completion Time"),
        ("TAT", "Turnaround Time"),
        ("WT", "Waiting Time"),
    ]
    console.print("  ".join(f"[bold {accent}]{abbr}:[/bold {accent}] {label}" for abbr, label in legend))


def _interactive_menu(
    collector: ProcessCollector,
    console: Console,
    theme: str = DEFAULT_THEME,
    width: int = DEFAULT_GANTT_WIDTH,
    plain: bool = False,
) -> None:
    """
    Menu loop over a process collector. The schedule is recomputed from the
    full working set after every change.
    """
    options = [
        ("1", "Add process"),
        ("2", "Remove process by id"),
        ("3", "Clear all processes"),
        ("4", "Show schedule"),
        ("5", "Change theme"),
    ]

    while True:
        accent = get_theme(theme).accent_text
        console.print(f"\n[bold {accent}]FCFS Scheduler Menu[/bold {accent}] [dim](q to quit)[/dim]")
        console.print(f"[bold]Processes:[/bold] {len(collector)}")
        for key, label in options:
            console.print(f"  [yellow]{key}[/yellow]. [white]{label}[/white]")

        choice = input("Choice [1-5 or q]: ").strip().lower()
        if choice in {"q", "quit", "exit"}:
            return

        changed = False
        if choice == "1":
            name = input(f"Name (optional) [P{len(collector) + 1}]: ")
            arrival = input("Arrival Time (AT): ")
            burst = input("Burst Time (BT): ")
            try:
                collector.add(name, arrival, burst)
            except InvalidProcessError as exc:
                console.print(f"[red]{escape(str(exc))}[/red]")
                continue
            changed = True
        elif choice == "2":
            raw_id = input("Process id to remove: ").strip()
            try:
                process_id = int(raw_id)
            except ValueError:
                console.print("[red]Invalid id.[/red]")
                continue
            if not collector.remove(process_id):
                console.print(f"[red]No process with id {process_id}.[/red]")
                continue
            changed = True
        elif choice == "3":
            collector.clear()
            console.print("[yellow]All processes cleared.[/yellow]")
            continue
        elif choice == "4":
            changed = True
        elif choice == "5":
            for theme_id, theme_style in THEMES.items():
                console.print(f"  [on {theme_style.accent}]  [/] {theme_id}")
            theme_in = input(f"Theme [{theme}]: ").strip().lower()
            if theme_in:
                try:
                    get_theme(theme_in)
                except ValueError as exc:
                    console.print(f"[red]{escape(str(exc))}[/red]")
                    continue
                theme = theme_in
            continue
        else:
            console.print("[red]Invalid selection.[/red]")
            continue

        if changed:
            if not len(collector):
                console.print("[dim]No processes yet.[/dim]")
                continue
            _print_result(collector.schedule(), console, theme=theme, width=width, plain=plain)


def main(argv: list[str] | None = None, console: Optional[Console] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else args.log_level)
    console = console or Console()

    try:
        if args.command == "run":
            result = run_fcfs(load_workload(Path(args.workload)))
            _print_result(
                result,
                console,
                theme=args.theme,
                width=args.width,
                show_gantt=not args.no_gantt,
                plain=args.plain,
            )
            return 0

        if args.command == "menu":
            collector = ProcessCollector()
            if args.workload:
                collector.extend(load_workload(Path(args.workload)))
            _interactive_menu(collector, console, theme=args.theme, width=args.width, plain=args.plain)
            return 0
    except (InvalidProcessError, OSError) as exc:
        logger.error("Failed to schedule workload: %s", exc)
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        return EXIT_INVALID_INPUT

    parser.error(f"Unknown command: {args.command}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
