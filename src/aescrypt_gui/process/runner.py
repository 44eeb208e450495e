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

import subprocess
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class CommandResult:
    cmd: tuple[str, ...]
    returncode: int
    output: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@dataclass(frozen=True)
class ProcessRunner:
    """Run external programs synchronously from an argument vector.

    No shell is involved, so arguments are passed through untouched. The
    environment given here is handed to every child; ``None`` inherits the
    current process environment.
    """

    env: Mapping[str, str] | None = field(default=None, compare=False)

    def with_env(self, env: Mapping[str, str]) -> ProcessRunner:
        return ProcessRunner(env=MappingProxyType(dict(env)))

    def run(
        self,
        cmd: Sequence[str],
        *,
        capture: bool = False,
        merge_stderr: bool = True,
    ) -> CommandResult:
        argv = [str(part) for part in cmd]
        if not argv:
            raise ValueError("command cannot be empty")
        stdout = subprocess.PIPE if capture else None
        stderr = None
        if capture:
            stderr = subprocess.STDOUT if merge_stderr else subprocess.DEVNULL
        proc = subprocess.run(
            argv,
            stdout=stdout,
            stderr=stderr,
            env=dict(self.env) if self.env is not None else None,
            check=False,
        )
        output = ""
        if capture and proc.stdout:
            output = proc.stdout.decode("utf-8", errors="replace")
        return CommandResult(cmd=tuple(argv), returncode=proc.returncode, output=output)

