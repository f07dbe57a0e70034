"""Catalog of known environment profiles and the dotenv paths that back them."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

VALID_ENVIRONMENTS = ("dev", "prod", "testing")

ENV_FILE_BASE = ".env"
ENV_EXAMPLE = ".env.example"
ACTIVE_SUFFIX = ".active"


@dataclass(frozen=True)
class EnvLayout:
    """Working root plus the fixed set of profile names it manages."""

    root: Path
    environments: Tuple[str, ...] = VALID_ENVIRONMENTS

    def __post_init__(self) -> None:
        object.__setattr__(self, "root", Path(self.root))
        object.__setattr__(self, "environments", tuple(self.environments))

    def env_file_path(self, environment: Optional[str] = None, active: bool = False) -> Path:
        """Return ``.env``, ``.env.<name>`` or ``.env.<name>.active`` under the root."""

        if environment is None:
            return self.root / ENV_FILE_BASE
        name = f"{ENV_FILE_BASE}.{environment}"
        if active:
            name += ACTIVE_SUFFIX
        return self.root / name

    @property
    def live_file(self) -> Path:
        return self.env_file_path()

    @property
    def template_file(self) -> Path:
        return self.root / ENV_EXAMPLE

    def base_file(self, environment: str) -> Path:
        return self.env_file_path(environment)

    def marker_file(self, environment: str) -> Path:
        return self.env_file_path(environment, active=True)
