"""
Top-level validate() entry point.
"""

from __future__ import annotations

from typing import Any

from .context import is_strict
from .core import to_validator
from .types import Err, Result


def validate(value: Any, definition: Any) -> Result:
    """
    Validate a value against a definition.

    Args:
        value: The candidate value
        definition: A validator, a plain validating callable, or a bare literal

    Returns:
        Ok(value) if validation passes
        Err(code, bad_value, path) if validation fails

    Raises:
        ValidationError: In strict mode, instead of returning an Err

    Usage:
        contact = map(
            {"email": string(pattern=r".+@.+\\..+")},
            required=["email"],
        )
        result = validate({"email": "bad-email"}, contact)
        # Err(code="pattern", bad_value="bad-email", path=("email",))
    """
    result = to_validator(definition)(value)
    if is_strict() and isinstance(result, Err):
        result.unwrap()
    return result
