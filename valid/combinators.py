"""
Logical combinators: anyof, allof, and boolean built on anyof.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from .core import Validator, to_validator
from .exceptions import DefinitionError
from .primitives import literal
from .types import Code, Err, Ok, Result


@dataclass(frozen=True, slots=True)
class AnyOf(Validator):
    """Passes on the first branch that passes; later branches are not run."""

    branches: tuple[Validator, ...]

    def __call__(self, value: Any) -> Result:
        errors: list[Err] = []
        for branch in self.branches:
            result = branch(value)
            if isinstance(result, Ok):
                return Ok(value)
            errors.append(result)
        return Err(Code.ANY, value, errors=tuple(errors))


@dataclass(frozen=True, slots=True)
class AllOf(Validator):
    """Runs every branch and reports all of their failures together."""

    branches: tuple[Validator, ...]

    def __call__(self, value: Any) -> Result:
        errors = [r for r in (branch(value) for branch in self.branches) if isinstance(r, Err)]
        if errors:
            return Err(Code.ALL, value, errors=tuple(errors))
        return Ok(value)


def _branches(definitions: Iterable[Any], name: str) -> tuple[Validator, ...]:
    if isinstance(definitions, (str, bytes)) or not hasattr(definitions, "__iter__"):
        raise DefinitionError(f"{name} expects a list of definitions, got {definitions!r}")
    branches = tuple(to_validator(d) for d in definitions)
    if not branches:
        raise DefinitionError(f"{name} needs at least one definition")
    return branches


def anyof(definitions: Iterable[Any]) -> AnyOf:
    """
    Validate that at least one definition matches.

    Usage:
        anyof([literal("draft"), literal("final")])
        anyof(["draft", "final"])     # bare literals are lifted
    """
    return AnyOf(branches=_branches(definitions, "anyof"))


def allof(definitions: Iterable[Any]) -> AllOf:
    """
    Validate that every definition matches, collecting all failures.

    Usage:
        allof([string(minlen=5), string(pattern=r"^\\d+$")])
    """
    return AllOf(branches=_branches(definitions, "allof"))


def boolean() -> AnyOf:
    """Validate that the value is exactly True or False."""
    return anyof([literal(True), literal(False)])
