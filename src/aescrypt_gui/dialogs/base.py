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

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import ClassVar

from ..process import ProcessRunner

DEFAULT_TITLE = "AES Crypt"


class DialogBackend(ABC):
    """The four dialogs the front end needs.

    Password prompts return ``None`` when the user cancels.
    """

    program: ClassVar[str]

    @abstractmethod
    def prompt_password(self) -> str | None: ...

    @abstractmethod
    def prompt_password_verify(self) -> str | None: ...

    @abstractmethod
    def show_error(self, text: str) -> None: ...

    @abstractmethod
    def show_info(self, text: str) -> None: ...

    @abstractmethod
    def with_runner(self, runner: ProcessRunner) -> DialogBackend: ...


@dataclass(frozen=True)
class DialogTemplates:
    """Argument vectors with ``{title}`` and ``{text}`` placeholders."""

    password: tuple[str, ...]
    password_verify: tuple[str, ...]
    error: tuple[str, ...]
    info: tuple[str, ...]


def render_template(template: tuple[str, ...], **values: str) -> list[str]:
    return [part.format(**values) for part in template]


def _strip_newline(value: str) -> str:
    if value.endswith("\r\n"):
        return value[:-2]
    if value.endswith("\n"):
        return value[:-1]
    return value


@dataclass(frozen=True)
class CommandDialogBackend(DialogBackend):
    runner: ProcessRunner = field(default_factory=ProcessRunner)
    title: str = DEFAULT_TITLE

    program: ClassVar[str] = ""
    templates: ClassVar[DialogTemplates]

    def with_runner(self, runner: ProcessRunner) -> CommandDialogBackend:
        return replace(self, runner=runner)

    def prompt_password(self) -> str | None:
        return self._prompt(self.templates.password)

    def prompt_password_verify(self) -> str | None:
        return self._prompt(self.templates.password_verify)

    def show_error(self, text: str) -> None:
        self.runner.run(render_template(self.templates.error, title=self.title, text=text))

    def show_info(self, text: str) -> None:
        self.runner.run(render_template(self.templates.info, title=self.title, text=text))

    def _prompt(self, template: tuple[str, ...]) -> str | None:
        cmd = render_template(template, title=self.title, text="")
        result = self.runner.run(cmd, capture=True, merge_stderr=False)
        if not result.ok:
            return None
        return _strip_newline(result.output)
