"""
Flatten nested data into keytree's key convention.

Configuration readers produce nested mappings and sequences. This module
turns them into the flat ``path -> string`` form that Storage holds:

    >>> flatten_map({"a": {"b": [1, True]}})
    {'a.b[0]': '1', 'a.b[1]': 'true'}

Empty mappings and sequences are kept as an empty string at their own
key, so that the key still exists after flattening.
"""

from __future__ import annotations

import collections.abc as _abc
import decimal as _decimal
import math as _math
import typing as _typing


def to_text(value: _typing.Any) -> str:
    """
    Render a scalar as the string stored in a flat map.

    - ``bool`` → ``"true"`` / ``"false"``
    - integral finite ``float`` → no fractional part (``3.0`` → ``"3"``)
    - other finite ``float`` → shortest digits, never an exponent
      (``1.5e-07`` → ``"0.00000015"``)
    - ``None`` → ``""``
    - ``bytes`` → decoded as UTF-8
    - anything else → ``str(value)``
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, float) and _math.isfinite(value):
        if value.is_integer():
            return str(int(value))
        return format(_decimal.Decimal(repr(value)), "f")
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8")
    return str(value)


def _is_sequence(value: _typing.Any) -> bool:
    return isinstance(value, _abc.Sequence) and not isinstance(value, (str, bytes, bytearray))


def flatten_map(mapping: _abc.Mapping[_typing.Any, _typing.Any]) -> dict[str, str]:
    """
    Flatten a nested mapping into a single-level ``dict[str, str]``.

    Args:
        mapping: Nested mappings, sequences and scalars.

    Returns:
        New dict from path string to text value.
    """
    result: dict[str, str] = {}
    for key, value in mapping.items():
        flatten_value(to_text(key), value, result)
    return result


def flatten_value(key: str, value: _typing.Any, result: dict[str, str]) -> None:
    """
    Flatten value under key into result.

    ``None`` is stored as ``""``, so a key given without a value, such
    as YAML ``key:``, still exists after flattening.
    """
    if isinstance(value, _abc.Mapping):
        if not value:
            result[key] = ""
            return
        for sub_key, sub_value in value.items():
            flatten_value(f"{key}.{to_text(sub_key)}", sub_value, result)
    elif _is_sequence(value):
        if not value:
            result[key] = ""
            return
        for i, item in enumerate(value):
            flatten_value(f"{key}[{i}]", item, result)
    else:
        result[key] = to_text(value)
