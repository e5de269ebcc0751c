from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable

from .models import ScheduledProcess


@dataclass(frozen=True)
class ThemeStyle:
    accent: str
    header: str
    accent_text: str
    border: str


THEMES: Dict[str, ThemeStyle] = {
    "orange": ThemeStyle(accent="#FF5722", header="bold white on #c2410c", accent_text="#fb923c", border="#ea580c"),
    "sky": ThemeStyle(accent="#0EA5E9", header="bold white on #0369a1", accent_text="#38bdf8", border="#0284c7"),
    "emerald": ThemeStyle(accent="#10B981", header="bold white on #047857", accent_text="#34d399", border="#059669"),
    "rose": ThemeStyle(accent="#F43F5E", header="bold white on #be123c", accent_text="#fb7185", border="#e11d48"),
}

DEFAULT_THEME = "orange"

# Indigo, emerald, amber, red, sky, violet
PROCESS_PALETTE = ("#4F46E5", "#10B981", "#F59E0B", "#EF4444", "#0EA5E9", "#A855F7")


def get_theme(theme_id: str) -> ThemeStyle:
    try:
        return THEMES[theme_id]
    except KeyError:
        raise ValueError(f"Unknown theme '{theme_id}' (choose from {', '.join(THEMES)})") from None


def process_colors(scheduled: Iterable[ScheduledProcess]) -> Dict[int, str]:
    """
    Map each process id to a palette colour by its position in execution order.
    """
    return {p.id: PROCESS_PALETTE[idx % len(PROCESS_PALETTE)] for idx, p in enumerate(scheduled)}
