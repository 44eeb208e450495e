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

EXIT_SUCCESS = 0
EXIT_FAILURE = -1

EMPTY_PASSWORD_MESSAGE = "Password is empty"


class AescryptGuiError(RuntimeError):
    """Fatal condition that ends the run with ``exit_code``."""

    exit_code = EXIT_FAILURE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class UserCancelled(Exception):
    """The user dismissed a password dialog."""


class NoDialogBackendError(AescryptGuiError):
    def __init__(self, programs: tuple[str, ...] = ("zenity", "kdialog")) -> None:
        self.programs = programs
        names = " or ".join(programs)
        super().__init__(f"No dialog program is available (install {names})")


class NoInputFilesError(AescryptGuiError):
    def __init__(self) -> None:
        super().__init__("No input files were given")


class LocaleAllNotUtf8Error(AescryptGuiError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Error: LC_ALL is set to a non-UTF-8 locale ({value})")


class NoUtf8LocaleError(AescryptGuiError):
    def __init__(self, candidates: tuple[str, ...] = ()) -> None:
        self.candidates = candidates
        super().__init__("Error: no UTF-8 locale is available on this system")


class InconsistentBatchError(AescryptGuiError):
    def __init__(self, path: str, extension: str) -> None:
        self.path = path
        self.extension = extension
        super().__init__(f"At least one of the input files does not end with {extension}")


class PasswordMismatchError(AescryptGuiError):
    def __init__(self) -> None:
        super().__init__("Passwords do not match")


class ToolFailedError(AescryptGuiError):
    def __init__(self, path: str, returncode: int | None, output: str) -> None:
        self.path = path
        self.returncode = returncode
        self.output = output
        # The tool's own diagnostics are shown as-is.
        super().__init__(output if output.strip() else "unknown error")
