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

ZENITY_TEMPLATES = DialogTemplates(
    password=("zenity", "--password", "--title={title}"),
    password_verify=("zenity", "--password", "--title={title} - Verify Password"),
    # --no-markup keeps tool diagnostics from being parsed as Pango markup
    error=("zenity", "--error", "--no-markup", "--title={title}", "--text={text}"),
    info=("zenity", "--info", "--no-markup", "--title={title}", "--text={text}"),
)


@dataclass(frozen=True)
class ZenityBackend(CommandDialogBackend):
    program: ClassVar[str] = "zenity"
    templates: ClassVar[DialogTemplates] = ZENITY_TEMPLATES
