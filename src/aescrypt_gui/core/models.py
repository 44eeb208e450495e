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

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

ENCRYPTED_EXTENSION = ".aes"

LC_ALL_ENV = "LC_ALL"
LC_CTYPE_ENV = "LC_CTYPE"
LANG_ENV = "LANG"
DESKTOP_ENV = "XDG_CURRENT_DESKTOP"


class OperationMode(str, Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"

    @property
    def tool_flag(self) -> str:
        return "-e" if self is OperationMode.ENCRYPT else "-d"

    @property
    def completion_message(self) -> str:
        noun = "encryption" if self is OperationMode.ENCRYPT else "decryption"
        return f"File {noun} completed successfully"


class BatchStatus(str, Enum):
    OK = "ok"
    FAILED = "failed"


@dataclass(frozen=True)
class EnvironmentSnapshot:
    """Read-only copy of the environment variables the run depends on."""

    lc_all: str = ""
    lc_ctype: str = ""
    lang: str = ""
    desktop: str = ""
    variables: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({}),
        compare=False,
        repr=False,
    )

    @classmethod
    def capture(cls, environ: Mapping[str, str]) -> EnvironmentSnapshot:
        copied = dict(environ)
        return cls(
            lc_all=copied.get(LC_ALL_ENV, ""),
            lc_ctype=copied.get(LC_CTYPE_ENV, ""),
            lang=copied.get(LANG_ENV, ""),
            desktop=copied.get(DESKTOP_ENV, ""),
            variables=MappingProxyType(copied),
        )


@dataclass(frozen=True)
class LocaleResolution:
    locale: str
    lc_ctype: str | None = None

    @property
    def changed(self) -> bool:
        return self.lc_ctype is not None


@dataclass(frozen=True)
class BatchOutcome:
    path: str
    status: BatchStatus
    output: str = ""
    returncode: int | None = None

    @property
    def ok(self) -> bool:
        return self.status is BatchStatus.OK


@dataclass(frozen=True)
class BatchReport:
    outcomes: tuple[BatchOutcome, ...]
    failure: BatchOutcome | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def processed(self) -> tuple[str, ...]:
        return tuple(outcome.path for outcome in self.outcomes)


def child_environment(
    snapshot: EnvironmentSnapshot,
    resolution: LocaleResolution | None = None,
) -> dict[str, str]:
    env = dict(snapshot.variables)
    if resolution is not None and resolution.lc_ctype is not None:
        env[LC_CTYPE_ENV] = resolution.lc_ctype
    return env
