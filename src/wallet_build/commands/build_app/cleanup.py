"""Removal of macOS icon resources from the built wallet assets."""

import logging
from pathlib import Path

from wallet_build.integrations.actions.abc import ActionsCore

logger = logging.getLogger(__name__)

ASSETS_DIR = Path("apps/wallet/dist/assets")
ICNS_SUFFIX = ".icns"


def remove_icns_files(actions: ActionsCore, working_directory: str) -> list[Path]:
    """Delete every `*.icns` file directly under the wallet assets directory.

    Only the top level is scanned; subdirectories are never entered or deleted.
    A missing assets directory is logged and treated the same as a directory
    with nothing to remove.

    Args:
        actions: CI host facility used for logging
        working_directory: Root the assets path is resolved against

    Returns:
        Paths of the deleted files, in name order

    Raises:
        OSError: If listing the directory or deleting a file fails
    """
    assets_dir = Path(working_directory) / ASSETS_DIR

    if not assets_dir.exists():
        actions.info(f"Assets directory not found: {assets_dir}")
        return []

    removed: list[Path] = []
    for entry in sorted(assets_dir.iterdir(), key=lambda p: p.name):
        if not entry.name.endswith(ICNS_SUFFIX):
            continue
        if entry.is_dir():
            actions.debug(f"Skipping directory: {entry}")
            continue

        entry.unlink()
        actions.info(f"Removed: {entry}")
        removed.append(entry)

    logger.debug("Removed %d icns file(s) from %s", len(removed), assets_dir)
    return removed
