"""Copy/rename sequence that moves the working root from one profile to another."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Optional

from .catalog import EnvLayout
from .errors import FileOperationError
from .log_utils import SUCCESS

logger = logging.getLogger(__name__)


def copy_file(source: Path, destination: Path) -> None:
    """Copy ``source`` over ``destination``; raise FileOperationError on failure."""

    try:
        shutil.copyfile(source, destination)
    except OSError as exc:
        raise FileOperationError("copy", source, destination, exc) from exc
    logger.log(SUCCESS, "Copied %s to %s", source, destination)


def rename_file(source: Path, destination: Path) -> None:
    """Rename ``source`` to ``destination``, replacing an existing destination."""

    try:
        os.replace(source, destination)
    except OSError as exc:
        raise FileOperationError("rename", source, destination, exc) from exc
    logger.log(SUCCESS, "Renamed %s to %s", source, destination)


def deactivate(layout: EnvLayout, environment: str) -> None:
    """Persist the live file into ``environment``'s snapshot and drop its marker."""

    marker = layout.marker_file(environment)
    copy_file(layout.live_file, marker)
    rename_file(marker, layout.base_file(environment))


def materialize(layout: EnvLayout, environment: str) -> bool:
    """Seed ``.env.<environment>`` from the template if it is missing.

    Returns True when the template was copied.
    """

    base = layout.base_file(environment)
    if base.exists():
        return False
    logger.warning(
        "Environment file %s does not exist. Creating from %s.",
        base,
        layout.template_file,
    )
    copy_file(layout.template_file, base)
    return True


def activate(layout: EnvLayout, environment: str) -> None:
    base = layout.base_file(environment)
    copy_file(base, layout.live_file)
    rename_file(base, layout.marker_file(environment))


def switch_to(layout: EnvLayout, target: str, currently_active: Optional[str]) -> None:
    """Move the working root from ``currently_active`` to ``target``.

    Steps run strictly in order and the first failure propagates as a
    FileOperationError. Completed steps are left in place, so a failure can
    leave the root half-switched (e.g. deactivated with no profile active).
    """

    if target == currently_active:
        logger.info('No action needed. Already in "%s" environment.', target)
        return

    if currently_active is not None:
        deactivate(layout, currently_active)

    materialize(layout, target)
    activate(layout, target)
