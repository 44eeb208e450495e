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

import json
import os
import shutil
import subprocess
import sys
import tempfile
import unittest
from pathlib import Path

from tests.test_support import REPO_ROOT, build_cli_env, write_script

_LOGGER = """
import json
import os
import sys

def log(program):
    with open(os.environ["E2E_LOG"], "a", encoding="utf-8") as handle:
        handle.write(json.dumps({
            "program": program,
            "argv": sys.argv[1:],
            "lc_ctype": os.environ.get("LC_CTYPE"),
        }) + "\\n")
"""

_FAKE_ZENITY = (
    _LOGGER
    + """
log("zenity")
if "--password" in sys.argv:
    answer = os.environ.get("E2E_PASSWORD")
    if answer is None:
        sys.exit(1)
    print(answer)
"""
)

_FAKE_LOCALE = """
print("C")
print("C.UTF-8")
print("POSIX")
"""

_FAKE_AESCRYPT = (
    _LOGGER
    + """
log("aescrypt")
target = sys.argv[-1]
if os.path.basename(target).startswith("bad"):
    print("Error: bad things happened to " + target)
    sys.exit(1)
mode = sys.argv[2]
if mode == "-e":
    with open(target + ".aes", "w", encoding="utf-8") as handle:
        handle.write("encrypted")
else:
    with open(target[:-4], "w", encoding="utf-8") as handle:
        handle.write("decrypted")
"""
)


class TestEndToEndCli(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.tmp_path = Path(self._tmp.name)
        self.bin_dir = self.tmp_path / "bin"
        self.bin_dir.mkdir()
        self.work_dir = self.tmp_path / "work"
        self.work_dir.mkdir()
        self.log_path = self.tmp_path / "calls.jsonl"
        write_script(self.bin_dir, "zenity", _FAKE_ZENITY)
        write_script(self.bin_dir, "locale", _FAKE_LOCALE)
        write_script(self.bin_dir, "aescrypt", _FAKE_AESCRYPT)

    def _run(self, files: list[str], **overrides: str) -> subprocess.CompletedProcess[str]:
        env = build_cli_env(
            path_dir=self.bin_dir,
            overrides={
                "XDG_CONFIG_HOME": str(self.tmp_path / "xdg"),
                "E2E_LOG": str(self.log_path),
                **overrides,
            },
        )
        return subprocess.run(
            [sys.executable, "-m", "aescrypt_gui.cli", *files],
            cwd=REPO_ROOT,
            env=env,
            capture_output=True,
            text=True,
            check=False,
        )

    def _calls(self, program: str) -> list[dict]:
        if not self.log_path.exists():
            return []
        entries = [json.loads(line) for line in self.log_path.read_text(encoding="utf-8").splitlines()]
        return [entry for entry in entries if entry["program"] == program]

    def _file(self, name: str, content: str = "plain") -> str:
        path = self.work_dir / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    def test_encrypt_batch_with_utf8_locale(self) -> None:
        first = self._file("a.txt")
        second = self._file("b.txt")
        result = self._run([first, second], LANG="en_US.UTF-8", E2E_PASSWORD="s3cret")

        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertTrue(Path(first + ".aes").exists())
        self.assertTrue(Path(second + ".aes").exists())

        zenity = [call["argv"] for call in self._calls("zenity")]
        self.assertEqual(zenity[0], ["--password", "--title=AES Crypt"])
        self.assertEqual(zenity[1], ["--password", "--title=AES Crypt - Verify Password"])
        self.assertEqual(zenity[2][0], "--info")
        self.assertIn("--text=File encryption completed successfully", zenity[2])

        aescrypt = [call["argv"] for call in self._calls("aescrypt")]
        self.assertEqual(
            aescrypt,
            [["-q", "-e", "-p", "s3cret", first], ["-q", "-e", "-p", "s3cret", second]],
        )

    def test_decrypt_switches_to_installed_utf8_locale(self) -> None:
        encrypted = self._file("report.pdf.aes", "encrypted")
        result = self._run([encrypted], LANG="de_DE", E2E_PASSWORD="pw")

        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertTrue((self.work_dir / "report.pdf").exists())
        # decryption asks for the password once
        prompts = [call for call in self._calls("zenity") if "--password" in call["argv"]]
        self.assertEqual(len(prompts), 1)
        self.assertEqual([call["lc_ctype"] for call in self._calls("aescrypt")], ["C.UTF-8"])

    def test_failure_stops_batch_and_reports_tool_output(self) -> None:
        first = self._file("bad.txt")
        second = self._file("c.txt")
        result = self._run([first, second], LANG="en_US.UTF-8", E2E_PASSWORD="pw")

        self.assertEqual(result.returncode, 255)
        self.assertEqual(len(self._calls("aescrypt")), 1)
        self.assertFalse(Path(second + ".aes").exists())
        errors = [call["argv"] for call in self._calls("zenity") if "--error" in call["argv"]]
        self.assertEqual(len(errors), 1)
        self.assertIn("--text=Error: bad things happened to " + first + "\n", errors[0])

    def test_mixed_batch_is_rejected_before_prompting(self) -> None:
        result = self._run(
            [self._file("a.aes"), self._file("b.txt")],
            LANG="en_US.UTF-8",
            E2E_PASSWORD="pw",
        )

        self.assertEqual(result.returncode, 255)
        zenity = [call["argv"] for call in self._calls("zenity")]
        self.assertEqual(len(zenity), 1)
        self.assertIn("--error", zenity[0])
        self.assertIn("--text=At least one of the input files does not end with .aes", zenity[0])
        self.assertEqual(self._calls("aescrypt"), [])

    def test_cancel_exits_cleanly(self) -> None:
        plain = self._file("a.txt")
        result = self._run([plain], LANG="en_US.UTF-8")

        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertEqual(len(self._calls("zenity")), 1)
        self.assertEqual(self._calls("aescrypt"), [])

    @unittest.skipIf(
        any(
            shutil.which(name, path=os.path.dirname(sys.executable))
            for name in ("zenity", "kdialog")
        ),
        "a real dialog program sits next to the interpreter",
    )
    def test_missing_dialog_programs_reported_on_stderr(self) -> None:
        (self.bin_dir / "zenity").unlink()
        result = self._run([self._file("a.txt")], LANG="en_US.UTF-8")

        self.assertEqual(result.returncode, 255)
        self.assertIn("No dialog program is available", result.stderr)


if __name__ == "__main__":
    unittest.main()
