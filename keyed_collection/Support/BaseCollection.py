from __future__ import annotations

import copy
import json
from typing import Any, Callable, ClassVar, Dict, Generic, Iterator, List, Mapping, Optional, Tuple, Type, Union

from typing_extensions import Self

from ..config import settings
from ..Exceptions import InvalidArgumentException
from ..Log import get_logger
from .Arr import Arr
from .Types import K, U, V

logger = get_logger(__name__)

CollectionSource = Union[Mapping[Any, Any], List[Any], Tuple[Any, ...], "BaseCollection[Any, Any]", None]


class BaseCollection(Generic[K, V]):
    """Ordered, key-addressable collection with associative array semantics.

    Keys are ``int`` or ``str`` and keep their insertion order. Mutating
    methods work in place and return the collection so calls can be chained;
    ``map`` is the exception and returns a new collection.
    """

    # Integer keys are appended rather than combined by merge/merge_array
    append_integer_keys: ClassVar[bool] = settings.MERGE_APPEND_INT_KEYS

    def __init__(self, entities: CollectionSource = None) -> None:
        self._entities: Dict[K, V] = {}
        self._next_index = 0

        if entities is None:
            return

        if isinstance(entities, BaseCollection):
            logger.debug(
                "Creating collection from collection",
                {'source': type(entities).__name__, 'count': entities.count()},
            )
            self.merge(entities)
            return

        for key, value in Arr.from_source(entities, "entities").items():
            self.set(key, value)

    @classmethod
    def make(cls, entities: CollectionSource = None) -> Self:
        """Create a new collection instance."""
        return cls(entities)

    # Core methods
    def count(self) -> int:
        """Get the number of entries."""
        return len(self._entities)

    def set(self, key: K, value: V) -> Self:
        """Set the value at a key, replacing any existing one."""
        Arr.assert_key(key)
        self._entities[key] = value
        if isinstance(key, int) and key >= self._next_index:
            self._next_index = key + 1
        return self

    def append(self, value: V) -> Self:
        """Add a value at the next free integer index."""
        return self.set(self._next_index, value)  # type: ignore[arg-type]

    def remove(self, key: K) -> Self:
        """Remove the entry at a key, if there is one."""
        Arr.assert_key(key)
        self._entities.pop(key, None)
        return self

    def has(self, key: K) -> bool:
        """Check if a key is present."""
        Arr.assert_key(key)
        return key in self._entities

    def get(self, key: K, default: Any = None) -> Any:
        """Get the value at a key, or the default when it is absent."""
        Arr.assert_key(key)
        return self._entities.get(key, default)

    def get_iterator(self) -> Iterator[Tuple[K, V]]:
        """Iterate over (key, value) pairs in insertion order."""
        return iter(list(self._entities.items()))

    def keys(self) -> List[K]:
        """Get all keys in order."""
        return list(self._entities.keys())

    def values(self) -> List[V]:
        """Get all values in order."""
        return list(self._entities.values())

    # Functional helpers
    def each(self, callback: Callable[[V], Any]) -> Self:
        """Execute callback for each value."""
        self._assert_callable(callback)
        for _, value in self:
            callback(value)
        return self

    def map(self, callback: Callable[[V], U]) -> BaseCollection[K, U]:
        """Transform values into a new collection with the same keys."""
        self._assert_callable(callback)
        clone = copy.copy(self)
        clone._entities = {key: callback(value) for key, value in self._entities.items()}  # type: ignore[misc]
        return clone  # type: ignore[return-value]

    def ensure(self, type_check: Union[Type[Any], Tuple[Type[Any], ...]]) -> Self:
        """Ensure all values are of the specified type."""
        for key, value in self._entities.items():
            if not isinstance(value, type_check):
                raise TypeError(f"Value at `{key!r}` is not of type {getattr(type_check, '__name__', type_check)}")
        return self

    # Merging
    def merge(self, collection: BaseCollection[Any, Any]) -> Self:
        """Recursively merge another collection into this one."""
        if not isinstance(collection, BaseCollection):
            raise InvalidArgumentException("collection", "a BaseCollection", collection)
        return self._merge_entities(collection._entities)

    def merge_array(self, array: Union[Mapping[Any, Any], List[Any], Tuple[Any, ...]]) -> Self:
        """Recursively merge a mapping (or list) into this collection."""
        return self._merge_entities(Arr.from_source(array, "array"))

    def _merge_entities(self, incoming: Mapping[Any, Any]) -> Self:
        return self._commit_merge(self._merged(incoming))

    def _merged(self, incoming: Mapping[Any, Any]) -> Dict[Any, Any]:
        """Compute the merge result without touching the current entries."""
        for key in incoming:
            Arr.assert_key(key)

        logger.debug(
            "Merging entries into collection",
            {'collection': type(self).__name__, 'existing': self.count(), 'incoming': len(incoming)},
        )

        return Arr.merge_recursive(
            self._entities, incoming, append_integer_keys=self.append_integer_keys
        )

    def _commit_merge(self, merged: Dict[Any, Any]) -> Self:
        self._entities = merged
        if self.append_integer_keys:
            # integer keys were renumbered, so the counter restarts after them
            self._next_index = Arr.next_index(self._entities)
        else:
            self._next_index = max(self._next_index, Arr.next_index(self._entities))
        return self

    # Conversion
    def get_array_copy(self) -> Dict[K, V]:
        """Get a snapshot of the entries as a plain dict."""
        return dict(self._entities)

    def to_dict(self) -> Dict[K, V]:
        """Alias of get_array_copy."""
        return self.get_array_copy()

    def all(self) -> Dict[K, V]:
        """Alias of get_array_copy."""
        return self.get_array_copy()

    def to_json(self) -> str:
        """Convert the entries to JSON."""
        return json.dumps(self._entities, default=str)

    # Magic methods
    def __iter__(self) -> Iterator[Tuple[K, V]]:
        return self.get_iterator()

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, key: object) -> bool:
        return self.has(key)  # type: ignore[arg-type]

    def __getitem__(self, key: K) -> Optional[V]:
        return self.get(key)

    def __setitem__(self, key: K, value: V) -> None:
        self.set(key, value)

    def __delitem__(self, key: K) -> None:
        self.remove(key)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BaseCollection):
            return type(self) is type(other) and list(self._entities.items()) == list(other._entities.items())
        if isinstance(other, dict):
            return list(self._entities.items()) == list(other.items())
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._entities!r})"

    @staticmethod
    def _assert_callable(callback: Any) -> None:
        if not callable(callback):
            raise InvalidArgumentException("callback", "callable", callback)


# Helper function
def collect(entities: CollectionSource = None) -> BaseCollection[Any, Any]:
    """Create a collection instance."""
    return BaseCollection.make(entities)
