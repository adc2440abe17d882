"""
Typed Collections

Collections whose values are validated against a declared item type:
- Item type declared on a subclass or passed to the constructor
- Values validated (and coerced, unless strict) with a pydantic TypeAdapter
- Rejected values raise InvalidValueException with the pydantic errors
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional

from pydantic import TypeAdapter, ValidationError
from typing_extensions import Self

from ..Exceptions import InvalidArgumentException, InvalidValueException
from ..Log import get_logger
from .BaseCollection import BaseCollection, CollectionSource
from .Types import K, U, V

logger = get_logger(__name__)


class TypedCollection(BaseCollection[K, V]):
    """Collection that only accepts values of its item type.

    Example:
        >>> class Prices(TypedCollection[str, float]):
        ...     item_type = float
        >>> Prices({'apple': '1.5'}).get('apple')
        1.5
    """

    item_type: Any = None
    strict: bool = False

    def __init__(self, entities: CollectionSource = None, item_type: Any = None, strict: Optional[bool] = None) -> None:
        if item_type is not None:
            self.item_type = item_type
        if strict is not None:
            self.strict = strict
        if self.item_type is None:
            raise InvalidArgumentException("item_type", "a type", None)

        self._adapter: TypeAdapter[Any] = TypeAdapter(self.item_type)
        super().__init__(entities)

    @classmethod
    def make(cls, entities: CollectionSource = None, item_type: Any = None) -> Self:
        """Create a new typed collection instance."""
        return cls(entities, item_type=item_type)

    def set(self, key: K, value: V) -> Self:
        return super().set(key, self._validate(value))

    def map(self, callback: Callable[[V], U]) -> BaseCollection[K, U]:
        """Transform values into a new, untyped collection with the same keys."""
        self._assert_callable(callback)
        mapped: BaseCollection[K, U] = BaseCollection()
        mapped._entities = {key: callback(value) for key, value in self._entities.items()}
        mapped._next_index = self._next_index
        return mapped

    def _merge_entities(self, incoming: Mapping[Any, Any]) -> Self:
        validated: Dict[Any, Any] = {key: self._validate(value) for key, value in incoming.items()}
        merged = self._merged(validated)

        # collisions combine values, so the result is checked before it is kept
        checked = {key: self._validate(value) for key, value in merged.items()}
        return self._commit_merge(checked)

    def _validate(self, value: Any) -> Any:
        try:
            return self._adapter.validate_python(value, strict=self.strict)
        except ValidationError as e:
            logger.debug(
                "Rejected value for typed collection",
                {'collection': type(self).__name__, 'item_type': repr(self.item_type), 'errors': e.error_count()},
            )
            raise InvalidValueException(value, self.item_type, e.errors()) from e

    def __repr__(self) -> str:
        type_name = getattr(self.item_type, "__name__", repr(self.item_type))
        return f"{type(self).__name__}[{type_name}]({self._entities!r})"
