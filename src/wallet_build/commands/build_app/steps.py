"""Build steps for the wallet app, in the order they must run."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BuildStep:
    """One external command of the build sequence.

    The working directory is supplied when the step runs.
    """

    description: str
    command: str
    args: tuple[str, ...] = ()

    @property
    def command_line(self) -> str:
        return " ".join([self.command, *self.args])


# Each step depends on the output of the one before it.
BUILD_STEPS: tuple[BuildStep, ...] = (
    BuildStep("Installing app dependencies...", "npm", ("install",)),
    BuildStep("Building packages...", "./cli/build.sh"),
    BuildStep("Copying icons to public dir...", "npm", ("run", "copy:icons")),
    BuildStep(
        "Building wallet app and updating Capacitor...",
        "npm",
        ("run", "build:app"),
    ),
)
