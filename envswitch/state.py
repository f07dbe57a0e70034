"""Read which profile is active by scanning for ``.env.<name>.active`` markers."""

from __future__ import annotations

from typing import List, Optional

from .catalog import EnvLayout


def find_active_markers(layout: EnvLayout) -> List[str]:
    """Return every profile with an active marker, in catalog order."""

    return [env for env in layout.environments if layout.marker_file(env).exists()]


def detect_active(layout: EnvLayout) -> Optional[str]:
    """Return the first profile whose marker exists, or None when none is active."""

    for env in layout.environments:
        if layout.marker_file(env).exists():
            return env
    return None
