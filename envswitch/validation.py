"""Validation of user-supplied environment names."""

from __future__ import annotations

from typing import NamedTuple, Optional, Sequence

from .catalog import VALID_ENVIRONMENTS
from .errors import InvalidEnvironmentError


class ValidationResult(NamedTuple):
    environment: Optional[str]
    error: Optional[InvalidEnvironmentError]

    @property
    def ok(self) -> bool:
        return self.error is None


def check_environment(
    requested: str, valid_environments: Sequence[str] = VALID_ENVIRONMENTS
) -> ValidationResult:
    """Normalise ``requested`` and report whether it names a known profile.

    Matching is case-insensitive. Exactly one of ``environment`` and ``error``
    is set on the returned result.
    """

    normalized = requested.lower()
    if normalized in valid_environments:
        return ValidationResult(normalized, None)
    return ValidationResult(None, InvalidEnvironmentError(requested, valid_environments))


def validate(requested: str, valid_environments: Sequence[str] = VALID_ENVIRONMENTS) -> str:
    result = check_environment(requested, valid_environments)
    if result.error is not None:
        raise result.error
    return result.environment
