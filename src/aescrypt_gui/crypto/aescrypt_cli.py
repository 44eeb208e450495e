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

from collections.abc import Mapping, Sequence

from ..core.models import OperationMode
from ..process import CommandResult, ProcessRunner

AESCRYPT_PATH_ENV = "AESCRYPT_GUI_TOOL"
AESCRYPT_BINARY_NAME = "aescrypt"

_QUIET_FLAG = "-q"
_PASSWORD_FLAG = "-p"
_REDACTED = "********"


def get_aescrypt_path(
    environ: Mapping[str, str],
    *,
    configured: str | None = None,
    override: str | None = None,
) -> str:
    if override:
        return override
    env_path = environ.get(AESCRYPT_PATH_ENV)
    if env_path:
        return env_path
    if configured:
        return configured
    return AESCRYPT_BINARY_NAME


def aescrypt_command(
    tool: str,
    mode: OperationMode,
    password: str,
    path: str,
) -> list[str]:
    return [tool, _QUIET_FLAG, mode.tool_flag, _PASSWORD_FLAG, password, path]


def redact_command(cmd: Sequence[str]) -> list[str]:
    redacted = list(cmd)
    for idx, part in enumerate(redacted[:-1]):
        if part == _PASSWORD_FLAG:
            redacted[idx + 1] = _REDACTED
    return redacted


def run_aescrypt(
    runner: ProcessRunner,
    *,
    tool: str,
    mode: OperationMode,
    password: str,
    path: str,
) -> CommandResult:
    return runner.run(aescrypt_command(tool, mode, password, path), capture=True)
