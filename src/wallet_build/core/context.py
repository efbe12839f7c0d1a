"""Application context with dependency injection."""

from dataclasses import dataclass

from wallet_build.integrations.actions.abc import ActionsCore
from wallet_build.integrations.actions.real import RealActionsCore
from wallet_build.integrations.process.abc import ProcessRunner
from wallet_build.integrations.process.real import RealProcessRunner


@dataclass(frozen=True)
class BuildContext:
    """Immutable context holding the collaborators of one build run.

    Created at CLI entry point and threaded through the orchestrator.
    Frozen to prevent accidental modification at runtime. Tests construct it
    directly with FakeActionsCore and FakeProcessRunner.
    """

    actions: ActionsCore
    process: ProcessRunner


def create_context() -> BuildContext:
    """Create production context with real implementations."""
    return BuildContext(
        actions=RealActionsCore(),
        process=RealProcessRunner(),
    )
