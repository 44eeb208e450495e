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

"""Make sure dialog text is rendered with a UTF-8 capable locale.

Resolution works on an :class:`EnvironmentSnapshot` and returns a
:class:`LocaleResolution`; it never touches ``os.environ``. Callers apply the
result to the environment of the programs they start.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from ..process import ProcessRunner
from .errors import LocaleAllNotUtf8Error, NoUtf8LocaleError
from .models import EnvironmentSnapshot, LocaleResolution

UTF8_MARKERS = ("UTF-8", "UTF8")
ROOT_LANGUAGE = "C"
LOCALE_LIST_COMMAND = ("locale", "-a")

LocaleLister = Callable[[], Iterable[str]]


def is_utf8_locale(value: str) -> bool:
    upper = value.upper()
    return any(marker in upper for marker in UTF8_MARKERS)


def effective_locale(snapshot: EnvironmentSnapshot) -> str:
    return snapshot.lc_all or snapshot.lc_ctype or snapshot.lang or ""


def language_component(value: str) -> str:
    # "de_DE.ISO-8859-1@euro" -> "de_DE"
    head = value.split(".", 1)[0].split("@", 1)[0].strip()
    return head or ROOT_LANGUAGE


def locale_candidates(value: str) -> tuple[str, ...]:
    lang = language_component(value)
    ordered = (
        f"{lang}.UTF-8",
        f"{lang}.utf8",
        f"{ROOT_LANGUAGE}.UTF-8",
        f"{ROOT_LANGUAGE}.utf8",
    )
    return tuple(dict.fromkeys(ordered))


def list_installed_locales(runner: ProcessRunner) -> tuple[str, ...]:
    try:
        result = runner.run(LOCALE_LIST_COMMAND, capture=True, merge_stderr=False)
    except OSError:
        return ()
    if not result.ok:
        return ()
    return tuple(line.strip() for line in result.output.splitlines() if line.strip())


def resolve_utf8_locale(
    snapshot: EnvironmentSnapshot,
    *,
    list_locales: LocaleLister,
) -> LocaleResolution:
    current = effective_locale(snapshot)
    if is_utf8_locale(current):
        return LocaleResolution(locale=current)
    if snapshot.lc_all:
        raise LocaleAllNotUtf8Error(snapshot.lc_all)

    candidates = locale_candidates(current)
    installed = set(list_locales())
    for candidate in candidates:
        if candidate in installed:
            return LocaleResolution(locale=candidate, lc_ctype=candidate)
    raise NoUtf8LocaleError(candidates)
