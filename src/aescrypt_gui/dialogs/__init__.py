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

"""Password and message dialogs backed by external dialog programs."""

from .base import DEFAULT_TITLE, CommandDialogBackend, DialogBackend, DialogTemplates
from .kdialog import KdialogBackend
from .selector import (
    AUTO_BACKEND,
    BACKEND_FAMILIES,
    KDE_DESKTOP,
    preferred_families,
    select_backend,
)
from .zenity import ZenityBackend

__all__ = [
    "AUTO_BACKEND",
    "BACKEND_FAMILIES",
    "CommandDialogBackend",
    "DEFAULT_TITLE",
    "DialogBackend",
    "DialogTemplates",
    "KDE_DESKTOP",
    "KdialogBackend",
    "ZenityBackend",
    "preferred_families",
    "select_backend",
]
