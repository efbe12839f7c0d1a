"""Tests for RealActionsCore and FakeActionsCore."""

import pytest

from wallet_build.integrations.actions.fake import FakeActionsCore
from wallet_build.integrations.actions.real import RealActionsCore, escape_data, input_env_var


def test_input_env_var_naming() -> None:
    assert input_env_var("working_directory") == "INPUT_WORKING_DIRECTORY"
    assert input_env_var("my input") == "INPUT_MY_INPUT"


def test_get_input_reads_runner_environment() -> None:
    """Inputs come from INPUT_<NAME> and are trimmed."""
    actions = RealActionsCore(environ={"INPUT_WORKING_DIRECTORY": "  /repo  "})

    assert actions.get_input("working_directory") == "/repo"


def test_get_input_missing_is_empty() -> None:
    actions = RealActionsCore(environ={})

    assert actions.get_input("working_directory") == ""


def test_get_input_required_raises_when_missing() -> None:
    actions = RealActionsCore(environ={"INPUT_WORKING_DIRECTORY": "   "})

    with pytest.raises(ValueError, match="Input required and not supplied: working_directory"):
        actions.get_input("working_directory", required=True)


def test_get_input_defaults_to_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INPUT_WORKING_DIRECTORY", "/from/env")

    assert RealActionsCore().get_input("working_directory") == "/from/env"


def test_info_writes_plain_line(capsys: pytest.CaptureFixture[str]) -> None:
    RealActionsCore(environ={}).info("Building packages...")

    assert capsys.readouterr().out == "Building packages...\n"


def test_set_failed_writes_error_command(capsys: pytest.CaptureFixture[str]) -> None:
    """set_failed emits a single-line ::error:: annotation and marks the run failed."""
    actions = RealActionsCore(environ={})
    assert actions.failed is False

    actions.set_failed("Failed to run npm install\nExit code: 1")

    assert capsys.readouterr().out == "::error::Failed to run npm install%0AExit code: 1\n"
    assert actions.failed is True


def test_debug_writes_debug_command(capsys: pytest.CaptureFixture[str]) -> None:
    RealActionsCore(environ={}).debug("Skipping directory: x.icns")

    assert capsys.readouterr().out == "::debug::Skipping directory: x.icns\n"


def test_escape_data() -> None:
    assert escape_data("100% done\r\nnext") == "100%25 done%0D%0Anext"


def test_fake_records_messages() -> None:
    """FakeActionsCore should record every call for assertions."""
    actions = FakeActionsCore(inputs={"working_directory": "/repo"})

    actions.info("one")
    actions.debug("two")
    actions.set_failed("three")

    assert actions.get_input("working_directory") == "/repo"
    assert actions.get_input("other") == ""
    assert actions.info_messages == ["one"]
    assert actions.debug_messages == ["two"]
    assert actions.failed_messages == ["three"]
    assert actions.failed is True
