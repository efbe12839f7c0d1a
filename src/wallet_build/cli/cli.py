from wallet_build.commands.build_app.command import build_app_command, install_error_hooks
from wallet_build.core.context import create_context


def main() -> None:
    """CLI entry point used by the `wallet-build-app` console script."""
    ctx = create_context()
    install_error_hooks(ctx.actions)
    build_app_command(obj=ctx)
