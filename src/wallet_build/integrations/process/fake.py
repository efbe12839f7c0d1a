"""Fake ProcessRunner implementation for testing.

This fake enables testing the build sequence without npm, shell scripts or any
real subprocess.
"""

from collections.abc import Callable

from wallet_build.integrations.process.abc import ProcessRunner


class FakeProcessRunner(ProcessRunner):
    """In-memory fake that records exec() calls.

    Constructor Injection:
    - Failures are configured up front, keyed by the full command line
      ("npm run copy:icons", "./cli/build.sh")
    - A failing call is still recorded before it raises

    Examples:
        >>> runner = FakeProcessRunner(
        ...     failing_commands={"./cli/build.sh": "exit code 1"}
        ... )
        >>> runner.exec("npm", ["install"], "/repo")
        >>> runner.command_lines
        ['npm install']
    """

    def __init__(
        self,
        *,
        failing_commands: dict[str, str] | None = None,
        on_exec: Callable[[str, list[str], str], None] | None = None,
    ) -> None:
        """Initialize fake with predetermined failures.

        Args:
            failing_commands: Mapping of command line to the RuntimeError message
                raised when that command line is executed
            on_exec: Optional callable invoked with (command, args, cwd) on each
                call, for tests that need to observe side effects mid-sequence
        """
        self._failing_commands = failing_commands or {}
        self._on_exec = on_exec
        self._calls: list[tuple[str, list[str], str]] = []

    @property
    def calls(self) -> list[tuple[str, list[str], str]]:
        """Recorded (command, args, cwd) tuples, in call order.

        This property is for test assertions only.
        """
        return self._calls

    @property
    def command_lines(self) -> list[str]:
        """Recorded calls rendered as command lines."""
        return [" ".join([command, *args]) for command, args, _ in self._calls]

    def exec(self, command: str, args: list[str], cwd: str) -> None:
        self._calls.append((command, list(args), cwd))
        if self._on_exec is not None:
            self._on_exec(command, args, cwd)

        command_line = " ".join([command, *args])
        if command_line in self._failing_commands:
            raise RuntimeError(self._failing_commands[command_line])
