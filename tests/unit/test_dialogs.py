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

import unittest

from aescrypt_gui.core.errors import NoDialogBackendError
from aescrypt_gui.dialogs import (
    KdialogBackend,
    ZenityBackend,
    preferred_families,
    select_backend,
)
from tests.test_support import FakeRunner


class TestCommandDialogBackends(unittest.TestCase):
    def test_zenity_password_prompt(self) -> None:
        runner = FakeRunner({"zenity": [(0, "s3cret\n")]})
        dialogs = ZenityBackend(runner=runner)
        self.assertEqual(dialogs.prompt_password(), "s3cret")
        call = runner.calls[0]
        self.assertEqual(call.argv, ["zenity", "--password", "--title=AES Crypt"])
        self.assertTrue(call.capture)
        self.assertFalse(call.merge_stderr)

    def test_password_keeps_inner_whitespace(self) -> None:
        runner = FakeRunner({"zenity": [(0, " pass word \n")]})
        self.assertEqual(ZenityBackend(runner=runner).prompt_password(), " pass word ")

    def test_cancel_returns_none(self) -> None:
        for backend_cls in (ZenityBackend, KdialogBackend):
            with self.subTest(backend=backend_cls.program):
                runner = FakeRunner({backend_cls.program: [(1, "")]})
                dialogs = backend_cls(runner=runner)
                self.assertIsNone(dialogs.prompt_password())
                self.assertIsNone(dialogs.prompt_password_verify())

    def test_empty_entry_is_not_cancel(self) -> None:
        runner = FakeRunner({"kdialog": [(0, "\n")]})
        self.assertEqual(KdialogBackend(runner=runner).prompt_password(), "")

    def test_zenity_verify_and_messages(self) -> None:
        runner = FakeRunner()
        dialogs = ZenityBackend(runner=runner, title="Vault")
        dialogs.prompt_password_verify()
        dialogs.show_error("bad {password} <b>")
        dialogs.show_info("done")
        self.assertEqual(
            [call.argv for call in runner.calls],
            [
                ["zenity", "--password", "--title=Vault - Verify Password"],
                ["zenity", "--error", "--no-markup", "--title=Vault", "--text=bad {password} <b>"],
                ["zenity", "--info", "--no-markup", "--title=Vault", "--text=done"],
            ],
        )
        self.assertFalse(runner.calls[1].capture)

    def test_kdialog_commands(self) -> None:
        runner = FakeRunner({("kdialog", "--password"): [(0, "pw\n")]})
        dialogs = KdialogBackend(runner=runner)
        self.assertEqual(dialogs.prompt_password(), "pw")
        dialogs.prompt_password_verify()
        dialogs.show_error("oops")
        dialogs.show_info("ok")
        self.assertEqual(
            [call.argv for call in runner.calls],
            [
                ["kdialog", "--title", "AES Crypt", "--password", "Enter password:"],
                ["kdialog", "--title", "AES Crypt", "--password", "Re-enter password to verify:"],
                ["kdialog", "--title", "AES Crypt", "--error", "oops"],
                ["kdialog", "--title", "AES Crypt", "--msgbox", "ok"],
            ],
        )

    def test_with_runner_returns_rebound_copy(self) -> None:
        first = FakeRunner()
        second = FakeRunner()
        dialogs = ZenityBackend(runner=first, title="T")
        rebound = dialogs.with_runner(second)
        rebound.show_info("x")
        self.assertEqual(first.calls, [])
        self.assertEqual(len(second.calls), 1)
        self.assertEqual(rebound.title, "T")
        self.assertIs(dialogs.runner, first)


class TestDialogBackendSelector(unittest.TestCase):
    def test_selection_matrix(self) -> None:
        cases = (
            {"name": "kde-native", "hint": "KDE", "available": {"zenity", "kdialog"}, "expect": "kdialog"},
            {"name": "gnome-general", "hint": "GNOME", "available": {"zenity", "kdialog"}, "expect": "zenity"},
            {"name": "no-hint", "hint": None, "available": {"zenity"}, "expect": "zenity"},
            {"name": "kde-fallback", "hint": "KDE", "available": {"zenity"}, "expect": "zenity"},
            {"name": "general-fallback", "hint": "XFCE", "available": {"kdialog"}, "expect": "kdialog"},
            {"name": "hint-is-exact", "hint": "kde", "available": {"zenity", "kdialog"}, "expect": "zenity"},
        )
        for case in cases:
            with self.subTest(case=case["name"]):
                probed: list[str] = []

                def _probe(name: str, available=case["available"]) -> bool:
                    probed.append(name)
                    return name in available

                backend = select_backend(case["hint"], runner=FakeRunner(), probe=_probe)
                self.assertEqual(backend.program, case["expect"])
                self.assertLessEqual(len(probed), 2)

    def test_preferred_backend_found_first_skips_alternate_probe(self) -> None:
        probed: list[str] = []

        def _probe(name: str) -> bool:
            probed.append(name)
            return True

        select_backend("KDE", runner=FakeRunner(), probe=_probe)
        self.assertEqual(probed, ["kdialog"])

    def test_no_backend_available(self) -> None:
        with self.assertRaises(NoDialogBackendError) as ctx:
            select_backend("KDE", runner=FakeRunner(), probe=lambda _name: False)
        self.assertEqual(ctx.exception.programs, ("kdialog", "zenity"))
        self.assertIn("kdialog or zenity", str(ctx.exception))

    def test_configured_preference_overrides_desktop_hint(self) -> None:
        self.assertEqual(preferred_families("KDE", prefer="zenity"), ("zenity", "kdialog"))
        self.assertEqual(preferred_families("GNOME", prefer="kdialog"), ("kdialog", "zenity"))

    def test_unknown_preference_rejected(self) -> None:
        with self.assertRaises(ValueError):
            preferred_families(None, prefer="yad")

    def test_title_is_passed_to_backend(self) -> None:
        backend = select_backend(None, runner=FakeRunner(), title="Files", probe=lambda _n: True)
        self.assertIsInstance(backend, ZenityBackend)
        self.assertEqual(backend.title, "Files")


if __name__ == "__main__":
    unittest.main()
