from wallet_build.integrations.actions.abc import ActionsCore
from wallet_build.integrations.actions.real import RealActionsCore

__all__ = [
    "ActionsCore",
    "RealActionsCore",
]
