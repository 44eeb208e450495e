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

import os

import typer

from ..core.models import EnvironmentSnapshot
from .core.common import STARTUP_ERROR_EXIT_CODE, _get_version, _run_cli
from .core.log import _error
from .flows.run import RunOptions, run_gui
from .startup import load_startup_config, run_startup
from .ui import console

app = typer.Typer(
    add_completion=False,
    help="Encrypt or decrypt files with AES Crypt using desktop password dialogs.",
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"aescrypt-gui [version]{_get_version()}[/version]", highlight=False)
        raise typer.Exit()


@app.command()
def cli(
    files: list[str] | None = typer.Argument(
        None,
        metavar="FILES",
        help="Files to process. Files ending in .aes are decrypted, others encrypted.",
        show_default=False,
    ),
    config: str | None = typer.Option(
        None,
        "--config",
        help="Use this TOML config file.",
        rich_help_panel="Global",
    ),
    tool: str | None = typer.Option(
        None,
        "--tool",
        help="AES Crypt program to run (overrides config and AESCRYPT_GUI_TOOL).",
        rich_help_panel="Global",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Print progress notes to stderr.",
        rich_help_panel="Global",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output.",
        rich_help_panel="Accessibility",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Show full tracebacks for unexpected errors.",
        rich_help_panel="Debug",
    ),
    init_config: bool = typer.Option(
        False,
        "--init-config",
        help="Copy the default config to the user config directory and exit.",
        rich_help_panel="Config",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
        rich_help_panel="Info",
    ),
) -> None:
    _ = version
    try:
        should_exit = run_startup(
            verbose=verbose,
            no_color=no_color,
            debug=debug,
            init_config=init_config,
        )
        if should_exit:
            raise typer.Exit()
        app_config = load_startup_config(config, verbose=verbose, no_color=no_color)
    except (OSError, ValueError) as exc:
        _error(str(exc))
        raise typer.Exit(code=STARTUP_ERROR_EXIT_CODE)

    snapshot = EnvironmentSnapshot.capture(os.environ)
    options = RunOptions.from_config(app_config, snapshot, tool_override=tool)
    _run_cli(lambda: run_gui(list(files or ()), snapshot=snapshot, options=options), debug=debug)


def main() -> None:
    app()
