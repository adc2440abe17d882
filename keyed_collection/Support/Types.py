"""
Collection Type System

Shared type variables and aliases for the collection classes:
- Generic key/value type variables
- Array key alias (the closed set of key kinds)
- Runtime type guards for keys and nested arrays
"""

from __future__ import annotations

from typing import Any, Dict, List, TypeVar, Union

from typing_extensions import TypeAlias, TypeGuard

# Generic type variables
U = TypeVar("U")
K = TypeVar("K", int, str)
V = TypeVar("V")

# Keys are restricted to these two kinds; values are unconstrained
ArrayKey: TypeAlias = Union[int, str]


def is_array_key(value: Any) -> TypeGuard[ArrayKey]:
    """Check that a value is a usable collection key.

    ``bool`` is a subclass of ``int`` but is rejected so that ``True`` and ``1``
    can never silently address the same entry.
    """
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, str))


def is_nested_array(value: Any) -> TypeGuard[Union[Dict[Any, Any], List[Any]]]:
    """Check if a value is a dict or list the merge recurses into."""
    return isinstance(value, (dict, list))
