"""Exception types raised by envswitch."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence, Union


class EnvSwitchError(Exception):
    """Base class for every error the switcher reports to the user."""


class InvalidEnvironmentError(EnvSwitchError, ValueError):
    """Requested profile name is not part of the configured catalog."""

    def __init__(self, requested: str, valid_environments: Sequence[str]):
        self.requested = requested
        self.valid_environments = tuple(valid_environments)
        super().__init__(
            f'Invalid environment "{requested}". '
            f"Valid options are: {', '.join(self.valid_environments)}"
        )


class FileOperationError(EnvSwitchError):
    """A copy or rename step failed; earlier steps are not rolled back."""

    def __init__(
        self,
        operation: str,
        source: Union[str, Path],
        destination: Union[str, Path],
        reason: BaseException,
    ):
        self.operation = operation
        self.source = Path(source)
        self.destination = Path(destination)
        self.reason = reason
        verb = "copying" if operation == "copy" else "renaming"
        super().__init__(
            f"Error {verb} file from {self.source} to {self.destination}: {reason}"
        )
