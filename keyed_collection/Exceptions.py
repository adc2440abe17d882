from __future__ import annotations

from typing import Any, List, Optional


class CollectionException(Exception):
    """Base exception for collections"""
    pass


class InvalidArgumentException(CollectionException, TypeError):
    """Exception raised when an argument has the wrong kind"""
    
    def __init__(self, argument: str, expected: str, given: Any) -> None:
        self.argument = argument
        self.expected = expected
        self.given = given
        
        super().__init__(
            f"Argument `{argument}` must be {expected}, "
            f"`{type(given).__name__}` given."
        )


class InvalidKeyException(InvalidArgumentException):
    """Exception raised when a key is neither an int nor a str"""
    
    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__("key", "of type int or str", key)


class InvalidValueException(CollectionException, ValueError):
    """Exception raised when a typed collection rejects a value"""
    
    def __init__(self, value: Any, item_type: Any, errors: Optional[List[Any]] = None) -> None:
        self.value = value
        self.item_type = item_type
        self.errors = errors or []
        
        type_name = getattr(item_type, "__name__", repr(item_type))
        
        super().__init__(
            f"Value `{value!r}` is not a valid `{type_name}` "
            f"({len(self.errors)} validation error(s))."
        )
