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

import functools
from collections.abc import Sequence
from dataclasses import dataclass

from ...config import AppConfig
from ...core.errors import (
    EXIT_SUCCESS,
    AescryptGuiError,
    NoDialogBackendError,
    NoInputFilesError,
    UserCancelled,
)
from ...core.locale_env import list_installed_locales, resolve_utf8_locale
from ...core.mode import classify_batch
from ...core.models import EnvironmentSnapshot, child_environment
from ...crypto import get_aescrypt_path
from ...dialogs import (
    AUTO_BACKEND,
    DEFAULT_TITLE,
    CommandDialogBackend,
    preferred_families,
    select_backend,
)
from ...process import ProcessRunner, Probe, is_available
from ..core.log import _error, _note
from .batch import process_batch, raise_for_failure
from .password import collect_password


@dataclass(frozen=True)
class RunOptions:
    tool: str
    title: str = DEFAULT_TITLE
    backend: str = AUTO_BACKEND

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        snapshot: EnvironmentSnapshot,
        *,
        tool_override: str | None = None,
    ) -> RunOptions:
        tool = get_aescrypt_path(
            snapshot.variables,
            configured=config.tool.path,
            override=tool_override,
        )
        return cls(tool=tool, title=config.dialogs.title, backend=config.dialogs.backend)


def run_gui(
    files: Sequence[str],
    *,
    snapshot: EnvironmentSnapshot,
    options: RunOptions,
    probe: Probe = is_available,
) -> int:
    """Select a dialog program, then encrypt or decrypt ``files``.

    Returns the process exit code. Failing to find any dialog program is the
    only error reported on stderr; everything after that goes to a dialog.
    """
    runner = ProcessRunner(env=snapshot.variables or None)
    try:
        dialogs = select_backend(
            snapshot.desktop,
            runner=runner,
            title=options.title,
            prefer=options.backend,
            probe=probe,
        )
    except NoDialogBackendError as exc:
        _error(str(exc))
        return exc.exit_code

    preferred, _alternate = preferred_families(snapshot.desktop, prefer=options.backend)
    if dialogs.program != preferred:
        _note(f"{preferred} not found, using {dialogs.program}")

    try:
        if not files:
            raise NoInputFilesError()
        runner, dialogs = _apply_utf8_locale(snapshot, runner=runner, dialogs=dialogs)
        mode = classify_batch(files)
        _note(f"Mode: {mode.value} ({len(files)} file(s))")
        password = collect_password(dialogs, mode)
        report = process_batch(
            files,
            mode=mode,
            password=password,
            tool=options.tool,
            runner=runner,
        )
        raise_for_failure(report)
    except UserCancelled:
        return EXIT_SUCCESS
    except AescryptGuiError as exc:
        dialogs.show_error(exc.message)
        return exc.exit_code

    dialogs.show_info(mode.completion_message)
    return EXIT_SUCCESS


def _apply_utf8_locale(
    snapshot: EnvironmentSnapshot,
    *,
    runner: ProcessRunner,
    dialogs: CommandDialogBackend,
) -> tuple[ProcessRunner, CommandDialogBackend]:
    resolution = resolve_utf8_locale(
        snapshot,
        list_locales=functools.partial(list_installed_locales, runner),
    )
    if not resolution.changed:
        return runner, dialogs
    _note(f"Using LC_CTYPE={resolution.lc_ctype}")
    runner = runner.with_env(child_environment(snapshot, resolution))
    return runner, dialogs.with_runner(runner)
