"""
valid - composable runtime validators for nested data.

Usage:
    from valid import arrayof, map, number, string

    product = map(
        {
            "id": string(pattern=r"^\\w+$"),
            "price": number(min=0.01),
            "tags": arrayof(string(minlen=1), unique=True),
        },
        required=["id", "price"],
    )

    product({"id": "p1", "price": 0})
    # Err(code="min", bad_value=0, path=("price",))
"""

from .collections import ArrayOf, MapOf, arrayof, mapof
from .combinators import AllOf, AnyOf, allof, anyof, boolean
from .containers import Table, array, map, table
from .context import is_strict, validation_context
from .core import FunctionValidator, Validator, call_hook, to_validator
from .exceptions import DefinitionError, ValidationError
from .options import ALL
from .primitives import Func, Literal, Number, String, func, literal, number, string
from .schema import validate
from .types import Code, Err, Ok, Path, Result

__all__ = [
    # Result types
    "Ok",
    "Err",
    "Code",
    "Path",
    "Result",
    # Core
    "Validator",
    "FunctionValidator",
    "call_hook",
    "to_validator",
    "ALL",
    # Primitives
    "literal",
    "number",
    "string",
    "boolean",
    "func",
    "Literal",
    "Number",
    "String",
    "Func",
    # Containers
    "table",
    "array",
    "map",
    "Table",
    "arrayof",
    "mapof",
    "ArrayOf",
    "MapOf",
    # Combinators
    "anyof",
    "allof",
    "AnyOf",
    "AllOf",
    # Entry points
    "validate",
    "validation_context",
    "is_strict",
    # Exceptions
    "DefinitionError",
    "ValidationError",
]
