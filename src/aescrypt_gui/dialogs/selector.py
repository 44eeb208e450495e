#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

from ..core.errors import NoDialogBackendError
from ..process import ProcessRunner, Probe, is_available
from .base import DEFAULT_TITLE, CommandDialogBackend
from .kdialog import KdialogBackend
from .zenity import ZenityBackend

KDE_DESKTOP = "KDE"
AUTO_BACKEND = "auto"

BACKEND_FAMILIES: dict[str, type[CommandDialogBackend]] = {
    ZenityBackend.program: ZenityBackend,
    KdialogBackend.program: KdialogBackend,
}


def preferred_families(desktop_hint: str | None, *, prefer: str = AUTO_BACKEND) -> tuple[str, str]:
    """Return (preferred, alternate) dialog program names."""
    if prefer != AUTO_BACKEND:
        if prefer not in BACKEND_FAMILIES:
            raise ValueError(f"unknown dialog backend: {prefer}")
        primary = prefer
    elif desktop_hint == KDE_DESKTOP:
        primary = KdialogBackend.program
    else:
        primary = ZenityBackend.program
    alternate = next(name for name in BACKEND_FAMILIES if name != primary)
    return primary, alternate


def select_backend(
    desktop_hint: str | None,
    *,
    runner: ProcessRunner,
    title: str = DEFAULT_TITLE,
    prefer: str = AUTO_BACKEND,
    probe: Probe = is_available,
) -> CommandDialogBackend:
    families = preferred_families(desktop_hint, prefer=prefer)
    for name in families:
        if probe(name):
            return BACKEND_FAMILIES[name](runner=runner, title=title)
    raise NoDialogBackendError(families)
