"""
Homogeneous collection validators: arrayof and mapof.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Hashable, Optional

from .core import (
    Validator,
    array_length,
    call_hook,
    is_container,
    iter_elements,
    iter_items,
    to_validator,
)
from .options import ArrayOfOptions, MapOfOptions, parse_options
from .types import Code, Err, Hook, Ok, Result


def _identity(value: Any) -> Hashable:
    """Key under which two elements count as duplicates.

    Scalars match by type and value; containers and unhashable values
    only match themselves.
    """
    if is_container(value):
        return ("id", id(value))
    try:
        hash(value)
    except TypeError:
        return ("id", id(value))
    return (type(value), value)


@dataclass(frozen=True, slots=True)
class ArrayOf(Validator):
    """
    Validator for sequences whose elements all share one definition.

    Elements are checked in index order and the first failing index is
    reported.
    """

    element: Validator
    minlen: int = 0
    maxlen: float = math.inf
    empty: bool = True
    unique: bool = False
    func: Optional[Hook] = None
    array_func: Optional[Hook] = None

    def __call__(self, value: Any) -> Result:
        if not is_container(value):
            return Err(Code.TABLE, value)

        length = array_length(value)

        if length == 0 and not self.empty:
            return Err(Code.EMPTY, value)
        if length < self.minlen:
            return Err(Code.MINLEN, value)
        if length > self.maxlen:
            return Err(Code.MAXLEN, value)

        seen: dict[Hashable, int] = {}

        for i, elem in iter_elements(value):
            result = self.element(elem)
            if isinstance(result, Err):
                return result.prefixed(i)

            result = call_hook(self.func, elem)
            if isinstance(result, Err):
                return result.prefixed(i)

            if self.unique:
                ident = _identity(elem)
                if ident in seen:
                    return Err(Code.UNIQUE, elem, (seen[ident], i))
                seen[ident] = i

        return call_hook(self.array_func, value)


@dataclass(frozen=True, slots=True)
class MapOf(Validator):
    """
    Validator for mappings whose keys share one definition and whose
    values share another.

    A key failure is located at `(key, ...)`, a value failure at
    `(key, value, ...)`.
    """

    key: Optional[Validator] = None
    val: Optional[Validator] = None
    empty: bool = False
    key_func: Optional[Hook] = None
    val_func: Optional[Hook] = None

    def __call__(self, value: Any) -> Result:
        if not is_container(value):
            return Err(Code.TABLE, value)

        if len(value) == 0 and not self.empty:
            return Err(Code.EMPTY, value)

        for k, v in iter_items(value):
            result = self.key(k) if self.key is not None else Ok(k)
            if isinstance(result, Err):
                return result.prefixed(k)

            result = call_hook(self.key_func, k)
            if isinstance(result, Err):
                return result.prefixed(k)

            result = self.val(v) if self.val is not None else Ok(v)
            if isinstance(result, Err):
                return result.prefixed(k, v)

            result = call_hook(self.val_func, v)
            if isinstance(result, Err):
                return result.prefixed(k, v)

        return Ok(value)


def arrayof(
    element_def: Any,
    *,
    minlen: int = 0,
    maxlen: Optional[int] = None,
    empty: bool = False,
    unique: bool = False,
    func: Optional[Hook] = None,
    array_func: Optional[Hook] = None,
) -> ArrayOf:
    """
    Validate a sequence whose every element matches `element_def`.

    Args:
        element_def: Validator (or bare literal) applied to each element
        minlen: Minimum length; a positive value also rejects empty input
        maxlen: Maximum length
        empty: Allow an empty sequence regardless of `minlen`
        unique: Reject repeated elements, reporting both indexes
        func: Hook run on each element after `element_def` passes
        array_func: Hook run on the whole sequence after all elements pass

    Usage:
        arrayof(number(), empty=True)
        arrayof(string(minlen=1), unique=True)
    """
    opts = parse_options(
        ArrayOfOptions,
        minlen=minlen,
        maxlen=maxlen,
        empty=empty,
        unique=unique,
        func=func,
        array_func=array_func,
    )
    minlen = 0 if opts.empty else opts.minlen
    return ArrayOf(
        element=to_validator(element_def),
        minlen=minlen,
        maxlen=math.inf if opts.maxlen is None else opts.maxlen,
        # a zero minlen already admits the empty sequence
        empty=opts.empty or minlen == 0,
        unique=opts.unique,
        func=opts.func,
        array_func=opts.array_func,
    )


def mapof(
    key_def: Any = None,
    val_def: Any = None,
    *,
    empty: bool = False,
    key_func: Optional[Hook] = None,
    val_func: Optional[Hook] = None,
) -> MapOf:
    """
    Validate a mapping whose keys match `key_def` and values match `val_def`.

    Either definition may be omitted to accept anything.

    Usage:
        mapof(string(), number(min=0))
    """
    opts = parse_options(
        MapOfOptions, empty=empty, key_func=key_func, val_func=val_func
    )
    return MapOf(
        key=None if key_def is None else to_validator(key_def),
        val=None if val_def is None else to_validator(val_def),
        empty=opts.empty,
        key_func=opts.key_func,
        val_func=opts.val_func,
    )
