"""Type-checked access to values in a parsed JSON document.

Each helper reads one child of a node and raises a CatalogError subclass
naming the offending key when the child is absent or has the wrong type.
"""

from typing import Any, Dict, Optional

from .exceptions import EmptyCollectionError, MissingFieldError, TypeMismatchError


def _get_child(node: Any, key: str) -> Any:
    if not isinstance(node, dict) or key not in node:
        raise MissingFieldError(key)
    return node[key]


def get_object(node: Any, key: str) -> Dict[str, Any]:
    """Return the object stored under ``key``."""
    value = _get_child(node, key)
    if not isinstance(value, dict):
        raise TypeMismatchError(key, "an object")
    return value


def get_string(node: Any, key: str) -> str:
    """Return the string stored under ``key``."""
    value = _get_child(node, key)
    if not isinstance(value, str):
        raise TypeMismatchError(key, "a string")
    return value


def get_bool(node: Any, key: str) -> bool:
    """Return the boolean stored under ``key``."""
    value = _get_child(node, key)
    if not isinstance(value, bool):
        raise TypeMismatchError(key, "a boolean")
    return value


def get_last_key(node: Dict[str, Any], key: Optional[str] = None) -> str:
    """
    Return the last member name of an object in document order.

    Args:
        node: Object to inspect
        key: Name of the object, used in the error message

    Raises:
        EmptyCollectionError: If the object has no members
    """
    if not node:
        raise EmptyCollectionError(key)
    return next(reversed(node))
