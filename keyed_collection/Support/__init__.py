from .Arr import Arr
from .BaseCollection import BaseCollection, collect
from .TypedCollection import TypedCollection
from .Types import ArrayKey, is_array_key, is_nested_array

__all__ = [
    "Arr",
    "BaseCollection",
    "collect",
    "TypedCollection",
    "ArrayKey",
    "is_array_key",
    "is_nested_array",
]
