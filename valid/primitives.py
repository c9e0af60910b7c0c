"""
Scalar validators: literal, number, string and func.

Each check short-circuits on the first failure; the custom hook runs only
once every built-in check has passed.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from numbers import Real
from typing import Any, Optional

from .core import Validator, call_hook
from .options import LiteralOptions, NumberOptions, StringOptions, parse_options
from .types import Code, Err, Hook, Ok, Result


def _literal_equal(value: Any, lit: Any, icase: bool) -> bool:
    # True == 1 in Python, but a boolean literal only matches a boolean
    if isinstance(value, bool) or isinstance(lit, bool):
        return isinstance(value, bool) and isinstance(lit, bool) and value is lit
    if icase and isinstance(value, str) and isinstance(lit, str):
        return value.casefold() == lit.casefold()
    try:
        return bool(value == lit)
    except Exception:
        return False


@dataclass(frozen=True, slots=True)
class Literal(Validator):
    """Validator for equality with a fixed value, optionally ignoring case."""

    lit: Any
    icase: bool = False
    func: Optional[Hook] = None

    def __call__(self, value: Any) -> Result:
        if not _literal_equal(value, self.lit, self.icase):
            return Err(Code.LITERAL, value)
        return call_hook(self.func, value)


@dataclass(frozen=True, slots=True)
class Number(Validator):
    """Validator for real numbers (never bools) within inclusive bounds."""

    min: float = -math.inf
    max: float = math.inf
    func: Optional[Hook] = None

    def __call__(self, value: Any) -> Result:
        if not isinstance(value, Real) or isinstance(value, bool):
            return Err(Code.NUMBER, value)
        if value < self.min:
            return Err(Code.MIN, value)
        if value > self.max:
            return Err(Code.MAX, value)
        return call_hook(self.func, value)


@dataclass(frozen=True, slots=True)
class String(Validator):
    """
    Validator for strings.

    Checks type, then minlen, then maxlen, then pattern; the hook runs last.
    """

    minlen: int = 0
    maxlen: float = math.inf
    pattern: Optional[re.Pattern] = None
    func: Optional[Hook] = None

    def __call__(self, value: Any) -> Result:
        if not isinstance(value, str):
            return Err(Code.STRING, value)
        if len(value) < self.minlen:
            return Err(Code.MINLEN, value)
        if len(value) > self.maxlen:
            return Err(Code.MAXLEN, value)
        if self.pattern is not None and self.pattern.search(value) is None:
            return Err(Code.PATTERN, value)
        return call_hook(self.func, value)


@dataclass(frozen=True, slots=True)
class Func(Validator):
    """Validator for callable values."""

    def __call__(self, value: Any) -> Result:
        if not callable(value):
            return Err(Code.FUNC, value)
        return Ok(value)


def literal(lit: Any, *, icase: bool = False, func: Optional[Hook] = None) -> Literal:
    """
    Validate equality with `lit`.

    Usage:
        literal("abc")
        literal("USA", icase=True)    # also accepts "usa"
    """
    opts = parse_options(LiteralOptions, icase=icase, func=func)
    return Literal(lit=lit, icase=opts.icase, func=opts.func)


def number(
    *,
    min: Optional[float] = None,
    max: Optional[float] = None,
    func: Optional[Hook] = None,
) -> Number:
    """
    Validate a real number within optional inclusive bounds.

    Usage:
        number()
        number(min=0, max=120)
    """
    opts = parse_options(NumberOptions, min=min, max=max, func=func)
    return Number(
        min=-math.inf if opts.min is None else opts.min,
        max=math.inf if opts.max is None else opts.max,
        func=opts.func,
    )


def string(
    *,
    minlen: int = 0,
    maxlen: Optional[int] = None,
    pattern: str | re.Pattern | None = None,
    func: Optional[Hook] = None,
) -> String:
    """
    Validate a string by length and, optionally, a regex searched anywhere in it.

    Usage:
        string(minlen=3, maxlen=20)
        string(pattern=r"^\\d{5}$")
    """
    opts = parse_options(
        StringOptions, minlen=minlen, maxlen=maxlen, pattern=pattern, func=func
    )
    return String(
        minlen=opts.minlen,
        maxlen=math.inf if opts.maxlen is None else opts.maxlen,
        pattern=opts.pattern,
        func=opts.func,
    )


def func() -> Func:
    """Validate that the value is callable."""
    return Func()
