"""
Exceptions raised by valid.

Data that fails validation is reported through `Err` values, never by
raising. The exceptions here cover the two places that do raise: a
malformed validator definition at construction time, and the opt-in
`Err.unwrap()` / strict-mode `validate()` helpers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .types import Err, Path


class DefinitionError(ValueError):
    """A validator was constructed from an invalid definition."""


class ValidationError(ValueError):
    """Raised when a failed result is unwrapped or validated strictly."""

    def __init__(self, error: Err):
        self.error = error
        super().__init__(str(error))

    @property
    def code(self) -> str:
        return self.error.code

    @property
    def bad_value(self) -> Any:
        return self.error.bad_value

    @property
    def path(self) -> Path:
        return self.error.path
