from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Tuple, Union

from ..Exceptions import InvalidArgumentException, InvalidKeyException
from .Types import ArrayKey, is_array_key, is_nested_array


def _is_int_key(key: Any) -> bool:
    return isinstance(key, int) and not isinstance(key, bool)


class Arr:
    """Associative array helpers backing the collection classes."""

    @staticmethod
    def is_array_key(key: Any) -> bool:
        """Check if a value can be used as a collection key."""
        return is_array_key(key)

    @staticmethod
    def assert_key(key: Any) -> ArrayKey:
        """Return the key unchanged or raise if it is not an int or str."""
        if not is_array_key(key):
            raise InvalidKeyException(key)
        return key

    @staticmethod
    def is_array(value: Any) -> bool:
        """Check if a value is a nested array (dict or list)."""
        return is_nested_array(value)

    @staticmethod
    def from_source(source: Union[Mapping[Any, Any], List[Any], Tuple[Any, ...]], argument: str = "source") -> Dict[Any, Any]:
        """Read a mapping or a sequence into a fresh ordered dict.

        Sequences are keyed by position, the way a list literal is.
        """
        if isinstance(source, Mapping):
            return dict(source.items())
        if isinstance(source, (list, tuple)):
            return dict(enumerate(source))
        raise InvalidArgumentException(argument, "a mapping, list or tuple", source)

    @staticmethod
    def to_array(value: Any) -> Dict[Any, Any]:
        """Coerce a value to a fresh dict.

        A dict is copied, a list is keyed by position and anything else
        (``None`` included) becomes the single entry ``{0: value}``.
        """
        if isinstance(value, dict):
            return dict(value)
        if isinstance(value, list):
            return dict(enumerate(value))
        return {0: value}

    @staticmethod
    def is_list(items: Mapping[Any, Any]) -> bool:
        """Check if the keys are exactly 0..n-1 in order."""
        return all(_is_int_key(key) and key == position for position, key in enumerate(items))

    @staticmethod
    def normalize(items: Dict[Any, Any], empty_as_list: bool = False) -> Union[Dict[Any, Any], List[Any]]:
        """Return a list when the keys are sequential, the dict otherwise.

        An empty result has no keys to go by, so ``empty_as_list`` decides.
        """
        if not items:
            return [] if empty_as_list else {}
        if Arr.is_list(items):
            return list(items.values())
        return items

    @staticmethod
    def next_index(keys: Iterable[Any]) -> int:
        """Get the next free integer index after the given keys."""
        next_index = 0
        for key in keys:
            if _is_int_key(key) and key >= next_index:
                next_index = key + 1
        return next_index

    @staticmethod
    def renumber(items: Mapping[Any, Any]) -> Dict[Any, Any]:
        """Copy items, renumbering integer keys from 0 in order."""
        result: Dict[Any, Any] = {}
        position = 0
        for key, value in items.items():
            if _is_int_key(key):
                result[position] = value
                position += 1
            else:
                result[key] = value
        return result

    @staticmethod
    def merge_recursive(first: Mapping[Any, Any], second: Mapping[Any, Any], append_integer_keys: bool = True) -> Dict[Any, Any]:
        """Recursively merge two arrays without mutating either of them.

        Colliding string keys are combined: two plain values become the list
        ``[existing, new]``, a plain value arriving on a list is appended to
        it, and two arrays are merged key by key with these same rules.

        With ``append_integer_keys`` (the default) integer keys never
        collide: the first array's integer keys are renumbered from 0 and
        every integer-keyed value of the second array is appended at the next
        free index. Without it integer keys keep their values and collide
        exactly like string keys.

        Example:
            >>> Arr.merge_recursive({'a': 1, 'b': 2}, {'b': 3, 'c': 4})
            {'a': 1, 'b': [2, 3], 'c': 4}
        """
        if append_integer_keys:
            result = Arr.renumber(first)
        else:
            result = dict(first)

        return Arr._merge_into(result, second, append_integer_keys)

    @staticmethod
    def _merge_into(dest: Dict[Any, Any], src: Mapping[Any, Any], append_integer_keys: bool) -> Dict[Any, Any]:
        # dest is always a fresh dict owned by the caller
        next_index = Arr.next_index(dest)

        for key, value in src.items():
            if append_integer_keys and _is_int_key(key):
                dest[next_index] = value
                next_index += 1
                continue

            if key not in dest:
                dest[key] = value
                if _is_int_key(key) and key >= next_index:
                    next_index = key + 1
                continue

            existing = Arr.to_array(dest[key])
            if Arr.is_array(value):
                merged = Arr._merge_into(existing, Arr.to_array(value), append_integer_keys)
            else:
                existing[Arr.next_index(existing)] = value
                merged = existing

            dest[key] = Arr.normalize(merged, empty_as_list=isinstance(dest[key], list))

        return dest
