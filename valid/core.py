"""
Core validator plumbing for valid.

Provides the Validator base class, uniform custom-hook invocation, lifting
of bare definitions into validators, and the container helpers shared by
the table/arrayof/mapof validators.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Iterator

from .types import Code, Err, Hook, Ok, Result

logger = logging.getLogger(__name__)

# Marks a field that is not present in the validated container
MISSING: Any = object()


class Validator:
    """
    Base for every validator node.

    A validator is an immutable value built once from its definition and
    then called any number of times. Calling it never raises: it returns
    `Ok(value)` or `Err(code, bad_value, path)`.
    """

    __slots__ = ()

    def __call__(self, value: Any) -> Result:
        raise NotImplementedError


def call_hook(hook: Hook | None, value: Any) -> Result:
    """
    Run a user hook on `value` and normalize what it returns.

    A hook may return an `Ok`/`Err`, a bare bool, or a tuple
    `(is_valid, value_or_code, bad_value)` with trailing items optional.
    Success without a value substitutes `value`; failure without a code
    becomes `func`, and a missing bad value defaults to `value`.
    """
    if hook is None:
        return Ok(value)

    try:
        out = hook(value)
    except Exception:
        logger.debug("hook %r raised on %r", hook, value, exc_info=True)
        return Err(Code.FUNC, value)

    if isinstance(out, (Ok, Err)):
        return out

    if isinstance(out, tuple):
        is_valid = bool(out[0]) if out else False
        val_or_code = out[1] if len(out) > 1 else None
        bad_value = out[2] if len(out) > 2 else None
    else:
        is_valid, val_or_code, bad_value = bool(out), None, None

    if is_valid:
        return Ok(value if val_or_code is None else val_or_code)
    return Err(
        Code.FUNC if val_or_code is None else val_or_code,
        value if bad_value is None else bad_value,
    )


@dataclass(frozen=True, slots=True)
class FunctionValidator(Validator):
    """A plain callable used where a validator is expected."""

    fn: Hook

    def __call__(self, value: Any) -> Result:
        return call_hook(self.fn, value)


def to_validator(definition: Any) -> Validator:
    """
    Normalize a field/element definition to a validator.

    Conversion rules:
        Validator -> pass through
        function, lambda, method -> FunctionValidator
        anything else (classes included) -> literal(definition)
    """
    if isinstance(definition, Validator):
        return definition

    if callable(definition) and not isinstance(definition, type):
        return FunctionValidator(definition)

    from .primitives import literal

    return literal(definition)


def is_container(value: Any) -> bool:
    """Mappings and non-string sequences."""
    if isinstance(value, Mapping):
        return True
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def lookup(container: Any, key: Any) -> Any:
    """Fetch `container[key]`, or MISSING if absent or None."""
    if isinstance(container, Mapping):
        found = container.get(key, MISSING)
    elif isinstance(key, int) and not isinstance(key, bool) and 0 <= key < len(container):
        found = container[key]
    else:
        found = MISSING
    return MISSING if found is None else found


def array_length(container: Any) -> int:
    """
    Length of the array part.

    For a mapping, the number of contiguous integer keys present from 0.
    Like a sequence, a key holding None still counts.
    """
    if not isinstance(container, Mapping):
        return len(container)
    n = 0
    while n in container:
        n += 1
    return n


def iter_elements(container: Any) -> Iterator[tuple[int, Any]]:
    """(index, element) pairs of the array part, in index order."""
    if isinstance(container, Mapping):
        for i in range(array_length(container)):
            yield i, container[i]
    else:
        yield from enumerate(container)


def iter_items(container: Any) -> Iterator[tuple[Any, Any]]:
    """(key, value) pairs of any container, in storage order."""
    if isinstance(container, Mapping):
        yield from container.items()
    else:
        yield from enumerate(container)
