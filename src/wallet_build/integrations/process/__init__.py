from wallet_build.integrations.process.abc import ProcessRunner
from wallet_build.integrations.process.real import RealProcessRunner

__all__ = [
    "ProcessRunner",
    "RealProcessRunner",
]
