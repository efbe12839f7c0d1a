"""CI host annotation and logging abstraction.

This module defines the interface the build orchestrator uses to read its
inputs and report progress and failure to the CI host. Real implementations
speak the GitHub Actions workflow-command protocol; fake implementations record
calls in memory for tests.
"""

from abc import ABC, abstractmethod


class ActionsCore(ABC):
    """Abstract CI host facility for dependency injection."""

    @abstractmethod
    def get_input(self, name: str, required: bool = False) -> str:
        """Read a named action input.

        Args:
            name: Input name as declared by the action (e.g. "working_directory")
            required: Raise if the input is missing or empty

        Returns:
            The trimmed input value, or "" when it was not supplied

        Raises:
            ValueError: If required is True and the input was not supplied
        """
        ...

    @abstractmethod
    def info(self, message: str) -> None:
        """Write a non-fatal progress line to the job log."""
        ...

    @abstractmethod
    def debug(self, message: str) -> None:
        """Write a debug line, only shown when step debugging is enabled."""
        ...

    @abstractmethod
    def set_failed(self, message: str) -> None:
        """Mark the run as failed with an error annotation.

        Does not terminate the process; callers decide the exit status by
        reading `failed`.
        """
        ...

    @property
    @abstractmethod
    def failed(self) -> bool:
        """Whether set_failed() has been called during this run."""
        ...
