"""
Option models for validator definitions.

Each constructor runs its keyword options through one of these frozen
pydantic models, so a malformed definition fails when the validator is
built rather than when it is first used.
"""

from __future__ import annotations

import re
from typing import Any, Optional, TypeVar, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    field_validator,
    model_validator,
)
from pydantic import ValidationError as PydanticValidationError

from .exceptions import DefinitionError
from .types import Hook

ALL = "all"

_O = TypeVar("_O", bound="_Options")


class _Options(BaseModel):
    """Frozen option set; unknown option names are rejected."""

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)


class _LengthBounds(_Options):
    """Shared minlen/maxlen bounds, with minlen <= maxlen."""

    minlen: int = Field(default=0, ge=0)
    maxlen: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _check_bounds(self):
        if self.maxlen is not None and self.minlen > self.maxlen:
            raise ValueError(f"minlen {self.minlen} exceeds maxlen {self.maxlen}")
        return self


class LiteralOptions(_Options):
    """Options for literal()."""

    icase: bool = False
    func: Optional[Hook] = None


class NumberOptions(_Options):
    """Options for number(). Bounds are kept exactly as given (ints stay ints)."""

    min: Optional[Union[StrictInt, StrictFloat]] = None
    max: Optional[Union[StrictInt, StrictFloat]] = None
    func: Optional[Hook] = None

    @model_validator(mode="after")
    def _check_range(self):
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"min {self.min} exceeds max {self.max}")
        return self


class StringOptions(_LengthBounds):
    """Options for string(). A str pattern is compiled here."""

    pattern: Optional[Any] = None
    func: Optional[Hook] = None

    @field_validator("pattern")
    @classmethod
    def _compile_pattern(cls, v: Any) -> Optional[re.Pattern]:
        if v is None:
            return v
        if isinstance(v, re.Pattern):
            if not isinstance(v.pattern, str):
                raise ValueError(f"pattern must match text, got bytes pattern {v.pattern!r}")
            return v
        if isinstance(v, str):
            try:
                return re.compile(v)
            except re.error as e:
                raise ValueError(f"Invalid pattern {v!r}: {e}") from e
        raise ValueError(f"pattern must be str or re.Pattern, got {type(v).__name__}")


class TableOptions(_Options):
    """Options for table(), array() and map()."""

    array: bool = False
    map: bool = False
    empty: bool = False
    required: Any = None
    func: Optional[Hook] = None

    @field_validator("required")
    @classmethod
    def _normalize_required(cls, v: Any) -> str | tuple:
        """None -> (), "all" -> "all", any other iterable of keys -> tuple."""
        if v is None:
            return ()
        if v == ALL:
            return ALL
        if isinstance(v, (str, bytes)) or not hasattr(v, "__iter__"):
            raise ValueError(f"required must be a list of keys or {ALL!r}, got {v!r}")
        keys = tuple(v)
        for key in keys:
            try:
                hash(key)
            except TypeError as e:
                raise ValueError(f"required key {key!r} is not hashable") from e
        return keys


class ArrayOfOptions(_LengthBounds):
    """Options for arrayof()."""

    empty: bool = False
    unique: bool = False
    func: Optional[Hook] = None
    array_func: Optional[Hook] = None


class MapOfOptions(_Options):
    """Options for mapof()."""

    empty: bool = False
    key_func: Optional[Hook] = None
    val_func: Optional[Hook] = None


def parse_options(model: type[_O], **opts: Any) -> _O:
    """Build `model` from keyword options, raising DefinitionError on failure."""
    try:
        return model(**opts)
    except PydanticValidationError as e:
        raise DefinitionError(f"Invalid {model.__name__}: {e}") from e
