"""
Container validators: table, and its array/map shorthands.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from .core import (
    MISSING,
    Validator,
    array_length,
    call_hook,
    is_container,
    lookup,
    to_validator,
)
from .exceptions import DefinitionError
from .options import ALL, TableOptions, parse_options
from .types import Code, Err, Hook, Result


@dataclass(frozen=True, slots=True)
class Table(Validator):
    """
    Validator for keyed containers with per-field validators.

    Checks, in order: container type, non-emptiness (array/map modes),
    explicitly required keys, each field in declaration order, then the
    hook on the whole container.
    """

    fields: tuple[tuple[Any, Validator], ...] = ()
    array: bool = False
    map: bool = False
    empty: bool = False
    required: tuple[Any, ...] | str = ()
    func: Optional[Hook] = None

    def __call__(self, value: Any) -> Result:
        if not is_container(value):
            return Err(Code.TABLE, value)

        if self.array and not self.empty and array_length(value) == 0:
            return Err(Code.EMPTY, value)

        if self.map and not self.empty and len(value) == 0:
            return Err(Code.EMPTY, value)

        require_all = self.required == ALL
        if not require_all:
            for key in self.required:
                if lookup(value, key) is MISSING:
                    return Err(Code.REQUIRED, key, (key,))

        for key, validator in self.fields:
            field_value = lookup(value, key)
            if field_value is MISSING:
                if require_all:
                    return Err(Code.REQUIRED, key, (key,))
                continue

            result = validator(field_value)
            if isinstance(result, Err):
                return result.prefixed(key)

        return call_hook(self.func, value)


def _fields(fields: Optional[Mapping[Any, Any]]) -> tuple[tuple[Any, Validator], ...]:
    if fields is None:
        return ()
    if not isinstance(fields, Mapping):
        raise DefinitionError(f"fields must be a mapping, got {type(fields).__name__}")
    return tuple((key, to_validator(d)) for key, d in fields.items())


def table(
    fields: Optional[Mapping[Any, Any]] = None,
    *,
    array: bool = False,
    map: bool = False,
    empty: bool = False,
    required: Any = None,
    func: Optional[Hook] = None,
) -> Table:
    """
    Validate a container and the fields declared for it.

    Args:
        fields: Key -> validator (or bare literal) for each known field
        array: Require a non-empty array part unless `empty`
        map: Require at least one key unless `empty`
        empty: Allow empty containers in array/map mode
        required: Keys that must be present, or "all" for every declared field
        func: Hook run on the whole container once everything else passed

    Usage:
        table({"id": literal("abc"), "age": number(min=0)}, required=["id"])
    """
    opts = parse_options(
        TableOptions, array=array, map=map, empty=empty, required=required, func=func
    )
    return Table(
        fields=_fields(fields),
        array=opts.array,
        map=opts.map,
        empty=opts.empty,
        required=opts.required,
        func=opts.func,
    )


def array(
    fields: Optional[Mapping[Any, Any]] = None,
    *,
    empty: bool = False,
    required: Any = None,
    func: Optional[Hook] = None,
) -> Table:
    """`table` with array mode on."""
    return table(fields, array=True, empty=empty, required=required, func=func)


def map(
    fields: Optional[Mapping[Any, Any]] = None,
    *,
    empty: bool = False,
    required: Any = None,
    func: Optional[Hook] = None,
) -> Table:
    """`table` with map mode on."""
    return table(fields, map=True, empty=empty, required=required, func=func)
