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

from collections.abc import Sequence

from .errors import InconsistentBatchError, NoInputFilesError
from .models import ENCRYPTED_EXTENSION, OperationMode


def has_encrypted_extension(path: str, *, extension: str = ENCRYPTED_EXTENSION) -> bool:
    return path.lower().endswith(extension.lower())


def detect_mode(files: Sequence[str]) -> OperationMode:
    """Infer the operation from the first file name only."""
    if not files:
        raise NoInputFilesError()
    if has_encrypted_extension(files[0]):
        return OperationMode.DECRYPT
    return OperationMode.ENCRYPT


def validate_batch(files: Sequence[str], mode: OperationMode) -> None:
    if mode is not OperationMode.DECRYPT:
        return
    for path in files:
        if not has_encrypted_extension(path):
            raise InconsistentBatchError(path, ENCRYPTED_EXTENSION)


def classify_batch(files: Sequence[str]) -> OperationMode:
    mode = detect_mode(files)
    validate_batch(files, mode)
    return mode
