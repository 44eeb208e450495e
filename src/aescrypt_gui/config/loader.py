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

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from ..crypto.aescrypt_cli import AESCRYPT_BINARY_NAME
from ..dialogs import AUTO_BACKEND, BACKEND_FAMILIES, DEFAULT_TITLE
from .installer import DEFAULT_CONFIG_PATH, resolve_config_path


@dataclass(frozen=True)
class ToolConfig:
    path: str = AESCRYPT_BINARY_NAME


@dataclass(frozen=True)
class DialogConfig:
    title: str = DEFAULT_TITLE
    backend: str = AUTO_BACKEND


@dataclass(frozen=True)
class UiDefaults:
    verbose: bool = False


@dataclass(frozen=True)
class AppConfig:
    source: Path | None = None
    tool: ToolConfig = field(default_factory=ToolConfig)
    dialogs: DialogConfig = field(default_factory=DialogConfig)
    ui: UiDefaults = field(default_factory=UiDefaults)


def load_app_config(path: str | Path | None = None) -> AppConfig:
    config_path = resolve_config_path(path)
    if path is None and config_path == DEFAULT_CONFIG_PATH and not config_path.exists():
        return AppConfig()
    data = _load_toml(config_path)
    tool_cfg = _get_dict(data, "tool")
    dialogs_cfg = _get_dict(data, "dialogs")
    ui_cfg = _get_dict(data, "ui")
    return AppConfig(
        source=config_path,
        tool=ToolConfig(
            path=_parse_non_empty_str(
                tool_cfg.get("path"), field="tool.path", default=AESCRYPT_BINARY_NAME
            ),
        ),
        dialogs=DialogConfig(
            title=_parse_non_empty_str(
                dialogs_cfg.get("title"), field="dialogs.title", default=DEFAULT_TITLE
            ),
            backend=_parse_backend(dialogs_cfg.get("backend"), field="dialogs.backend"),
        ),
        ui=UiDefaults(
            verbose=_parse_bool(ui_cfg.get("verbose"), field="ui.verbose", default=False),
        ),
    )


def _load_toml(path: Path) -> dict[str, object]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"invalid config file {path}: {exc}") from exc


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_non_empty_str(value: object, *, field: str, default: str) -> str:
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    normalized = value.strip()
    if not normalized:
        raise ValueError(f"{field} must be a non-empty string")
    return normalized


def _parse_backend(value: object, *, field: str) -> str:
    if value is None:
        return AUTO_BACKEND
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    normalized = value.strip().lower()
    if normalized == AUTO_BACKEND or normalized in BACKEND_FAMILIES:
        return normalized
    choices = ", ".join([AUTO_BACKEND, *BACKEND_FAMILIES])
    raise ValueError(f"{field} must be one of: {choices}")


def _parse_bool(value: object, *, field: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{field} must be a boolean")
