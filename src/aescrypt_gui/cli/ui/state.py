#!/usr/bin/env python3
from __future__ import annotations

import sys
from dataclasses import dataclass, field

from rich.console import Console
from rich.theme import Theme


def isatty(stream, fallback) -> bool:
    if stream is not None:
        try:
            return bool(stream.isatty())
        except (OSError, ValueError, AttributeError):
            return False
    return bool(getattr(fallback, "isatty", lambda: False)())


# Dialogs carry the real UI; the terminal only sees notes and startup errors.
THEME = Theme(
    {
        "note": "dim",
        "error": "bold red",
        "version": "cyan",
    }
)


def _terminal_console(*, stderr: bool) -> Console:
    raw = sys.__stderr__ if stderr else sys.__stdout__
    fallback = sys.stderr if stderr else sys.stdout
    return Console(stderr=stderr, theme=THEME, force_terminal=isatty(raw, fallback))


@dataclass
class UIContext:
    console: Console = field(default_factory=lambda: _terminal_console(stderr=False))
    console_err: Console = field(default_factory=lambda: _terminal_console(stderr=True))
    theme: Theme = THEME
    verbose: bool = False

    def set_color(self, enabled: bool) -> None:
        self.console.no_color = not enabled
        self.console_err.no_color = not enabled


DEFAULT_CONTEXT = UIContext()


def get_context() -> UIContext:
    return DEFAULT_CONTEXT
