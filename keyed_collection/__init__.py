from .Support import Arr, BaseCollection, TypedCollection, collect
from .Exceptions import (
    CollectionException,
    InvalidArgumentException,
    InvalidKeyException,
    InvalidValueException,
)

__version__ = "1.0.0"

__all__ = [
    "Arr",
    "BaseCollection",
    "TypedCollection",
    "collect",
    "CollectionException",
    "InvalidArgumentException",
    "InvalidKeyException",
    "InvalidValueException",
]
