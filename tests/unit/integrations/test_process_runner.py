"""Tests for RealProcessRunner and FakeProcessRunner."""

import stat
import sys
from pathlib import Path

import pytest

from wallet_build.integrations.process.fake import FakeProcessRunner
from wallet_build.integrations.process.real import RealProcessRunner


def test_real_runner_runs_in_cwd(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """The process runs in the given directory and the command line is echoed."""
    RealProcessRunner().exec(
        sys.executable,
        ["-c", "open('marker.txt', 'w').write('ok')"],
        str(tmp_path),
    )

    assert (tmp_path / "marker.txt").read_text(encoding="utf-8") == "ok"
    assert f"[command]{sys.executable} -c" in capsys.readouterr().out


def test_real_runner_raises_on_nonzero_exit(tmp_path: Path) -> None:
    with pytest.raises(RuntimeError, match="Exit code: 3"):
        RealProcessRunner().exec(sys.executable, ["-c", "import sys; sys.exit(3)"], str(tmp_path))


def test_real_runner_raises_on_missing_command(tmp_path: Path) -> None:
    with pytest.raises(RuntimeError, match="Command not found"):
        RealProcessRunner().exec("wallet-build-no-such-binary", [], str(tmp_path))


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX shell script")
def test_real_runner_resolves_relative_script_against_cwd(tmp_path: Path) -> None:
    """./cli/build.sh is found relative to the working directory."""
    script = tmp_path / "cli" / "build.sh"
    script.parent.mkdir()
    script.write_text("#!/bin/sh\ntouch built\n", encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR)

    RealProcessRunner().exec("./cli/build.sh", [], str(tmp_path))

    assert (tmp_path / "built").exists()


def test_fake_runner_records_calls() -> None:
    runner = FakeProcessRunner()

    runner.exec("npm", ["run", "copy:icons"], "/repo")

    assert runner.calls == [("npm", ["run", "copy:icons"], "/repo")]
    assert runner.command_lines == ["npm run copy:icons"]


def test_fake_runner_raises_configured_failure() -> None:
    """A configured failure is recorded and then raised."""
    runner = FakeProcessRunner(failing_commands={"npm install": "exit code 1"})

    with pytest.raises(RuntimeError, match="exit code 1"):
        runner.exec("npm", ["install"], "/repo")

    assert runner.command_lines == ["npm install"]
