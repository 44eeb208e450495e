#!/usr/bin/env python3
from __future__ import annotations

from rich.markup import escape

from ..ui import console_err, is_verbose


def _note(message: str) -> None:
    if not is_verbose():
        return
    console_err.print(f"[note]{escape(message)}[/note]", highlight=False)


def _error(message: str) -> None:
    console_err.print(f"[error]Error:[/error] {escape(message)}", highlight=False)
