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

from dataclasses import dataclass
from typing import ClassVar

from .base import CommandDialogBackend, DialogTemplates

KDIALOG_TEMPLATES = DialogTemplates(
    password=("kdialog", "--title", "{title}", "--password", "Enter password:"),
    password_verify=(
        "kdialog",
        "--title",
        "{title}",
        "--password",
        "Re-enter password to verify:",
    ),
    error=("kdialog", "--title", "{title}", "--error", "{text}"),
    info=("kdialog", "--title", "{title}", "--msgbox", "{text}"),
)


@dataclass(frozen=True)
class KdialogBackend(CommandDialogBackend):
    program: ClassVar[str] = "kdialog"
    templates: ClassVar[DialogTemplates] = KDIALOG_TEMPLATES
