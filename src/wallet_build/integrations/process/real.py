"""Real process execution using subprocess."""

import logging

from wallet_build.cli.output import user_output
from wallet_build.core.subprocess import run_subprocess_with_context
from wallet_build.integrations.process.abc import ProcessRunner

logger = logging.getLogger(__name__)


class RealProcessRunner(ProcessRunner):
    """Production implementation that streams process output to the job log."""

    def exec(self, command: str, args: list[str], cwd: str) -> None:
        cmd = [command, *args]
        cmd_str = " ".join(cmd)
        user_output(f"[command]{cmd_str}")
        logger.debug("Spawning process: cmd=%s, cwd=%s", cmd, cwd)
        result = run_subprocess_with_context(cmd, f"run {cmd_str}", cwd=cwd)
        logger.debug("Process exited: cmd=%s, returncode=%d", cmd, result.returncode)
