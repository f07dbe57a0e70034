"""Switch a project's live ``.env`` between named environment profiles."""

__version__ = "1.0.0"

from .catalog import VALID_ENVIRONMENTS, EnvLayout  # noqa: E402
from .errors import (  # noqa: E402
    EnvSwitchError,
    FileOperationError,
    InvalidEnvironmentError,
)
from .state import detect_active, find_active_markers  # noqa: E402
from .switcher import EnvSwitcher  # noqa: E402
from .transition import switch_to  # noqa: E402
from .validation import ValidationResult, check_environment, validate  # noqa: E402

__all__ = [
    "__version__",
    "VALID_ENVIRONMENTS",
    "EnvLayout",
    "EnvSwitchError",
    "FileOperationError",
    "InvalidEnvironmentError",
    "detect_active",
    "find_active_markers",
    "EnvSwitcher",
    "switch_to",
    "ValidationResult",
    "check_environment",
    "validate",
]
