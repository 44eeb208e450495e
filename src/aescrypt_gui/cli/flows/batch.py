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

from ...core.errors import ToolFailedError
from ...core.models import BatchOutcome, BatchReport, BatchStatus, OperationMode
from ...crypto import aescrypt_command, redact_command, run_aescrypt
from ...process import ProcessRunner
from ..core.log import _note


def process_batch(
    files: Sequence[str],
    *,
    mode: OperationMode,
    password: str,
    tool: str,
    runner: ProcessRunner,
) -> BatchReport:
    """Run the tool once per file, in order, stopping at the first failure.

    Files handled before a failure keep their new state; later files are
    never touched.
    """
    outcomes: list[BatchOutcome] = []
    for path in files:
        outcome = _process_file(path, mode=mode, password=password, tool=tool, runner=runner)
        outcomes.append(outcome)
        if not outcome.ok:
            return BatchReport(outcomes=tuple(outcomes), failure=outcome)
    return BatchReport(outcomes=tuple(outcomes))


def _process_file(
    path: str,
    *,
    mode: OperationMode,
    password: str,
    tool: str,
    runner: ProcessRunner,
) -> BatchOutcome:
    cmd = aescrypt_command(tool, mode, password, path)
    _note("Running " + " ".join(redact_command(cmd)))
    try:
        result = run_aescrypt(runner, tool=tool, mode=mode, password=password, path=path)
    except OSError as exc:
        return BatchOutcome(
            path=path,
            status=BatchStatus.FAILED,
            output=f"Unable to run {tool}: {exc.strerror or exc}",
        )
    status = BatchStatus.OK if result.ok else BatchStatus.FAILED
    return BatchOutcome(path=path, status=status, output=result.output, returncode=result.returncode)


def raise_for_failure(report: BatchReport) -> None:
    failure = report.failure
    if failure is None:
        return
    raise ToolFailedError(failure.path, failure.returncode, failure.output)
