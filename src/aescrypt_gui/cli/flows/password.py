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

from dataclasses import dataclass, field
from enum import Enum

from ...core.errors import EMPTY_PASSWORD_MESSAGE, PasswordMismatchError, UserCancelled
from ...core.models import OperationMode
from ...dialogs import DialogBackend


class PasswordState(str, Enum):
    PROMPTING = "prompting"
    VERIFYING = "verifying"
    DONE = "done"
    CANCELLED = "cancelled"
    FAILED = "failed"


_ACTIVE_STATES = frozenset({PasswordState.PROMPTING, PasswordState.VERIFYING})


@dataclass
class PasswordCollector:
    """Drive the password dialogs until a password is accepted or refused.

    Empty entries re-prompt with no retry limit. Encryption asks a second time
    and fails when the two entries differ; decryption accepts the first
    non-empty entry.
    """

    dialogs: DialogBackend
    mode: OperationMode
    state: PasswordState = PasswordState.PROMPTING
    _password: str | None = field(default=None, repr=False)

    @property
    def finished(self) -> bool:
        return self.state not in _ACTIVE_STATES

    def step(self) -> PasswordState:
        if self.state is PasswordState.PROMPTING:
            self.state = self._prompt()
        elif self.state is PasswordState.VERIFYING:
            self.state = self._verify()
        else:
            raise RuntimeError(f"password collection already {self.state.value}")
        return self.state

    def run(self) -> str:
        while not self.finished:
            self.step()
        if self.state is PasswordState.CANCELLED:
            raise UserCancelled()
        if self.state is PasswordState.FAILED:
            raise PasswordMismatchError()
        if self._password is None:
            raise RuntimeError("password collection finished without a password")
        return self._password

    def _prompt(self) -> PasswordState:
        value = self.dialogs.prompt_password()
        if value is None:
            return PasswordState.CANCELLED
        if not value:
            self.dialogs.show_error(EMPTY_PASSWORD_MESSAGE)
            return PasswordState.PROMPTING
        self._password = value
        if self.mode is OperationMode.ENCRYPT:
            return PasswordState.VERIFYING
        return PasswordState.DONE

    def _verify(self) -> PasswordState:
        value = self.dialogs.prompt_password_verify()
        if value is None:
            self._password = None
            return PasswordState.CANCELLED
        if value != self._password:
            self._password = None
            return PasswordState.FAILED
        return PasswordState.DONE


def collect_password(dialogs: DialogBackend, mode: OperationMode) -> str:
    return PasswordCollector(dialogs=dialogs, mode=mode).run()
