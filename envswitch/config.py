"""Runtime settings for the switcher, read once from the process environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple

from .catalog import VALID_ENVIRONMENTS, EnvLayout


def _parse_environments(raw: Optional[str]) -> Tuple[str, ...]:
    if not raw:
        return VALID_ENVIRONMENTS
    names: list[str] = []
    for part in raw.split(","):
        name = part.strip().lower()
        if name and name not in names:
            names.append(name)
    if not names:
        raise ValueError("ENVSWITCH_ENVIRONMENTS must name at least one environment")
    return tuple(names)


@dataclass(frozen=True)
class SwitcherConfig:
    root: Path
    environments: Tuple[str, ...] = VALID_ENVIRONMENTS
    log_level: int = logging.INFO

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SwitcherConfig":
        environ = os.environ if environ is None else environ
        root = Path(environ.get("ENVSWITCH_ROOT") or Path.cwd())

        level_name = environ.get("ENVSWITCH_LOG_LEVEL", "INFO").upper()
        log_level = logging.getLevelName(level_name)
        if not isinstance(log_level, int):
            raise ValueError(f"Unknown ENVSWITCH_LOG_LEVEL '{level_name}'")

        return cls(
            root=root,
            environments=_parse_environments(environ.get("ENVSWITCH_ENVIRONMENTS")),
            log_level=log_level,
        )

    def layout(self) -> EnvLayout:
        return EnvLayout(self.root, self.environments)
