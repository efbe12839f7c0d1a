"""Build app command - install, build, bundle, then strip icns assets."""

import logging
import os
import sys
import threading
import traceback
from pathlib import Path
from types import TracebackType

import click

from wallet_build.cli.output import error_output, user_output
from wallet_build.commands.build_app.cleanup import remove_icns_files
from wallet_build.commands.build_app.steps import BUILD_STEPS
from wallet_build.core.context import BuildContext, create_context
from wallet_build.integrations.actions.abc import ActionsCore

logger = logging.getLogger(__name__)

# Enable debug logging if WALLET_BUILD_DEBUG environment variable is set
if os.getenv("WALLET_BUILD_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

WORKING_DIRECTORY_INPUT = "working_directory"


def resolve_working_directory(actions: ActionsCore) -> str:
    """Return the working_directory input, or the process cwd when it is empty."""
    return actions.get_input(WORKING_DIRECTORY_INPUT) or str(Path.cwd())


def run_command(ctx: BuildContext, command: str, args: list[str], cwd: str) -> None:
    ctx.actions.info(f"Running: {command} {' '.join(args)}")
    ctx.process.exec(command, args, cwd)


def format_error(error: BaseException) -> str:
    """Reduce an exception to the single message reported to the CI host."""
    message = str(error)
    if message:
        return message
    return type(error).__name__


def build_app_workflow(ctx: BuildContext) -> bool:
    """Run every build step in order, then remove icns files from the assets.

    The first failure stops the sequence and is reported once through
    ctx.actions.set_failed(). Nothing below this function catches errors.

    Returns:
        True if all steps and the cleanup succeeded
    """
    try:
        working_directory = resolve_working_directory(ctx.actions)
        ctx.actions.info(f"Working directory: {working_directory}")

        for step in BUILD_STEPS:
            ctx.actions.info(step.description)
            logger.debug("Starting step: %s", step.command_line)
            run_command(ctx, step.command, list(step.args), working_directory)

        ctx.actions.info("Removing icns files from assets...")
        remove_icns_files(ctx.actions, working_directory)

        ctx.actions.info("Build completed successfully!")
        return True
    except Exception as e:
        logger.debug("Build failed: %r", e)
        ctx.actions.set_failed(format_error(e))
        return False


def handle_error(actions: ActionsCore, error: BaseException) -> None:
    """Report an exception that escaped the build workflow."""
    if error.__traceback__ is not None:
        error_output("".join(traceback.format_exception(type(error), error, error.__traceback__)))
    else:
        error_output(repr(error))
    actions.set_failed(f"Unhandled error: {error}")


def install_error_hooks(actions: ActionsCore) -> None:
    """Route uncaught exceptions from any thread through handle_error()."""

    def excepthook(
        exc_type: type[BaseException],
        exc_value: BaseException,
        exc_traceback: TracebackType | None,
    ) -> None:
        handle_error(actions, exc_value)

    def thread_excepthook(args: threading.ExceptHookArgs) -> None:
        error = args.exc_value if args.exc_value is not None else args.exc_type()
        handle_error(actions, error)

    sys.excepthook = excepthook
    threading.excepthook = thread_excepthook


@click.command(name="build-app", context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(package_name="wallet-build-action")
@click.pass_context
def build_app_command(ctx: click.Context) -> None:
    """Build the wallet app for CI.

    \b
    Runs, in order and stopping at the first failure:
    - npm install
    - ./cli/build.sh
    - npm run copy:icons
    - npm run build:app

    Then deletes *.icns files from apps/wallet/dist/assets.

    The base directory comes from the `working_directory` action input
    (INPUT_WORKING_DIRECTORY) and defaults to the current directory.
    """
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()

    try:
        succeeded = build_app_workflow(ctx.obj)
    except KeyboardInterrupt:
        user_output("\n✗ Interrupted by user")
        raise SystemExit(130) from None

    if not succeeded:
        raise SystemExit(1)
