"""
Context manager for validation configuration (e.g., strict mode).
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Context variable for strict mode
_strict_mode: ContextVar[bool] = ContextVar("strict_mode", default=False)


def is_strict() -> bool:
    """Check if strict mode is currently enabled."""
    return _strict_mode.get()


@contextmanager
def validation_context(*, strict: bool = False):
    """
    Context manager for validation configuration.

    Args:
        strict: If True, validate() raises ValidationError on failure
               instead of returning the Err.

    Example:
        from valid import map, string, validate, validation_context

        user = map({"email": string(pattern=r".+@.+\\..+")}, required=["email"])

        # Normal: failures come back as Err values
        result = validate({"email": "nope"}, user)

        # Strict: raises ValidationError
        with validation_context(strict=True):
            validate({"email": "nope"}, user)  # ValidationError!
    """
    token = _strict_mode.set(strict)
    try:
        yield
    finally:
        _strict_mode.reset(token)
