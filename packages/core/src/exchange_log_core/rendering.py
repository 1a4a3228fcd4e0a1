"""Rendering of rich console markup for terminal sinks."""

from __future__ import annotations

from typing import Literal

from rich.console import Console
from rich.text import Text

ColorSystem = Literal["standard", "256", "truecolor", "windows"]


def render_markup(text: str, *, color_system: ColorSystem = "standard") -> str:
    """Render console markup in *text* to ANSI escape sequences."""
    console = Console(
        color_system=color_system,
        force_terminal=True,
        no_color=False,
        highlight=False,
        soft_wrap=True,
    )
    with console.capture() as capture:
        console.print(Text.from_markup(text), end="")
    return capture.get()


def strip_markup(text: str) -> str:
    """Remove console markup tags from *text*."""
    return Text.from_markup(text).plain
