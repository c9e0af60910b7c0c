"""
Type definitions for valid.

Provides the Ok/Err result pair every validator returns, the fixed
vocabulary of error codes, and type aliases.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Generic, TypeVar, Union

from .exceptions import ValidationError

T = TypeVar("T")


class Code(str, Enum):
    """Machine-readable failure codes."""

    LITERAL = "literal"
    NUMBER = "number"
    MIN = "min"
    MAX = "max"
    STRING = "string"
    MINLEN = "minlen"
    MAXLEN = "maxlen"
    PATTERN = "pattern"
    TABLE = "table"
    EMPTY = "empty"
    REQUIRED = "required"
    UNIQUE = "unique"
    FUNC = "func"
    ANY = "any"
    ALL = "all"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing the (possibly hook-substituted) value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def __bool__(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def as_tuple(self) -> tuple[bool, T, None, None]:
        return (True, self.value, None, None)


@dataclass(frozen=True, slots=True)
class Err:
    """
    Failure result.

    Attributes:
        code: Which check failed (a `Code`, or a hook-supplied token)
        bad_value: The value that failed the check
        path: Location of `bad_value` inside the validated input,
            outermost segment first; empty at the top level
        errors: Branch failures aggregated by `anyof`/`allof`
    """

    code: str
    bad_value: Any
    path: Path = ()
    errors: tuple[Err, ...] = ()

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def __bool__(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise ValidationError(self)

    def as_tuple(self) -> tuple[bool, str, Any, Path | tuple[Err, ...] | None]:
        """Four-part `(is_valid, code, bad_value, path)` shape.

        For `any`/`all` failures the fourth element is the tuple of branch
        failures rather than a path.
        """
        if self.errors:
            return (False, self.code, self.bad_value, self.errors)
        return (False, self.code, self.bad_value, self.path or None)

    def prefixed(self, *segments: Any) -> Err:
        """Return a copy located under `segments` in an enclosing container."""
        return replace(self, path=(*segments, *self.path))

    @property
    def location(self) -> str:
        """Path rendered as `a.b[0].c`."""
        out = ""
        for seg in self.path:
            if isinstance(seg, int) and not isinstance(seg, bool):
                out += f"[{seg}]"
            else:
                out += f".{seg}" if out else str(seg)
        return out

    def __str__(self) -> str:
        where = f" at {self.location}" if self.path else ""
        msg = f"{self.code}{where}: {repr(self.bad_value)[:50]}"
        if self.errors:
            msg += " (" + "; ".join(str(e) for e in self.errors) + ")"
        return msg


# Type aliases
Path = tuple[Any, ...]
Result = Union[Ok[Any], Err]
Hook = Callable[[Any], Any]
