"""GitHub Actions implementation of ActionsCore.

Inputs arrive as INPUT_<NAME> environment variables and annotations are written
to stdout as workflow commands (`::error::message`).
"""

import os
from collections.abc import Mapping

from wallet_build.cli.output import user_output
from wallet_build.integrations.actions.abc import ActionsCore


def input_env_var(name: str) -> str:
    """Return the environment variable the runner uses for an action input."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


def escape_data(message: str) -> str:
    """Escape a workflow command payload so it stays on one line."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class RealActionsCore(ActionsCore):
    """Production implementation backed by the runner's environment and stdout."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ if environ is not None else os.environ
        self._failed = False

    def get_input(self, name: str, required: bool = False) -> str:
        value = self._environ.get(input_env_var(name), "").strip()
        if required and not value:
            raise ValueError(f"Input required and not supplied: {name}")
        return value

    def info(self, message: str) -> None:
        user_output(message)

    def debug(self, message: str) -> None:
        user_output(f"::debug::{escape_data(message)}")

    def set_failed(self, message: str) -> None:
        self._failed = True
        user_output(f"::error::{escape_data(message)}")

    @property
    def failed(self) -> bool:
        return self._failed
