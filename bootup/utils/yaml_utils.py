"""Utilities for handling YAML parsing quirks."""

from typing import Any, Dict, TypeVar

V = TypeVar("V")


def normalize_yaml_dict_keys(data: Dict[Any, V]) -> Dict[str, V]:
    """Normalize dictionary keys from YAML parsing to consistent string keys.

    YAML 1.1 turns bare keys such as ``yes``, ``no``, ``on`` and ``off`` into
    booleans, and numeric-looking keys into numbers. Task labels are always
    strings, so every key is converted with ``str``.

    Args:
        data: Dictionary that may contain boolean or other non-string keys.

    Returns:
        Dictionary with all keys converted to strings.

    Examples:
        >>> normalize_yaml_dict_keys({True: "scripting", 2: "other"})
        {'True': 'scripting', '2': 'other'}
    """
    return {str(key): value for key, value in data.items()}
