"""Fake ActionsCore implementation for testing.

FakeActionsCore is an in-memory implementation that serves inputs from a dict
and records every message instead of writing workflow commands.
"""

from wallet_build.integrations.actions.abc import ActionsCore


class FakeActionsCore(ActionsCore):
    """In-memory fake that records log lines and failure reports.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.

    Examples:
        >>> actions = FakeActionsCore(inputs={"working_directory": "/repo"})
        >>> actions.get_input("working_directory")
        '/repo'
        >>> actions.set_failed("boom")
        >>> actions.failed_messages
        ['boom']
    """

    def __init__(self, *, inputs: dict[str, str] | None = None) -> None:
        """Create fake with predetermined inputs.

        Args:
            inputs: Mapping of input name to value. Missing names read as "".
        """
        self._inputs = inputs or {}
        self._info_messages: list[str] = []
        self._debug_messages: list[str] = []
        self._failed_messages: list[str] = []

    @property
    def info_messages(self) -> list[str]:
        """Messages passed to info(), in call order.

        This property is for test assertions only.
        """
        return self._info_messages

    @property
    def debug_messages(self) -> list[str]:
        """Messages passed to debug(), in call order."""
        return self._debug_messages

    @property
    def failed_messages(self) -> list[str]:
        """Messages passed to set_failed(), in call order."""
        return self._failed_messages

    def get_input(self, name: str, required: bool = False) -> str:
        value = self._inputs.get(name, "").strip()
        if required and not value:
            raise ValueError(f"Input required and not supplied: {name}")
        return value

    def info(self, message: str) -> None:
        self._info_messages.append(message)

    def debug(self, message: str) -> None:
        self._debug_messages.append(message)

    def set_failed(self, message: str) -> None:
        self._failed_messages.append(message)

    @property
    def failed(self) -> bool:
        return bool(self._failed_messages)
