"""Process execution abstraction for build steps."""

from abc import ABC, abstractmethod


class ProcessRunner(ABC):
    """Abstract process execution for dependency injection.

    Real implementations spawn the process and stream its output to the job log.
    Fake implementations record the calls without spawning anything.
    """

    @abstractmethod
    def exec(self, command: str, args: list[str], cwd: str) -> None:
        """Run an external command to completion.

        Args:
            command: Executable name or path (relative paths resolve against cwd)
            args: Ordered argument list
            cwd: Directory to run the command in

        Raises:
            RuntimeError: If the command exits non-zero or cannot be started
        """
        ...
