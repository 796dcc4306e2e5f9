"""
Properties: the configuration-facing facade over Storage.

A configuration loader reads a YAML/JSON/TOML document into nested
Python data and hands it to Properties, which flattens it and stores
every leaf through Storage so that conflicting shapes are rejected:

    >>> props = Properties.from_mapping({"db": {"host": "localhost", "port": 5432}})
    >>> props.get("db.port")
    '5432'
    >>> props.resolve("http://${db.host}:${db.port}")
    'http://localhost:5432'

Values are never typed; everything is stored and returned as text.
"""

from __future__ import annotations

import collections.abc as _abc
import logging as _logging
import typing as _typing

import keytree.errors as errors
import keytree.flatten as flatten
import keytree.storage as storage

_logger = _logging.getLogger(__name__)

_REF_OPEN = "${"
_DEFAULT_SEP = ":="


class Properties:
    """
    Flattened configuration properties with case-sensitive keys.

    Args:
        allow_empty_values: Passed to the underlying Storage. When False,
            empty values (including empty mappings and sequences, which
            flatten to ``""``) are rejected.
    """

    def __init__(self, *, allow_empty_values: bool = True) -> None:
        self._storage = storage.Storage(allow_empty_values=allow_empty_values)

    @classmethod
    def from_mapping(
        cls,
        mapping: _abc.Mapping[str, _typing.Any],
        *,
        allow_empty_values: bool = True,
    ) -> Properties:
        """Create Properties from nested data."""
        props = cls(allow_empty_values=allow_empty_values)
        props.merge(mapping)
        return props

    # =========================================================================
    # Writes
    # =========================================================================

    def merge(self, mapping: _abc.Mapping[str, _typing.Any]) -> None:
        """
        Flatten nested data and store every entry.

        Entries are stored in sorted key order. The first failure is raised
        and entries stored before it are kept.

        Raises:
            KeyTreeError: From Storage.set.
        """
        self._merge(flatten.flatten_map(mapping))

    def set(self, key: str, value: _typing.Any) -> None:
        """
        Set key to a scalar, or to a mapping or sequence of scalars.

        Setting a mapping or sequence overlaps existing data rather than
        replacing it: paths under key that are absent from value remain.
        ``None`` stores an empty value at key.

        Raises:
            EmptyKeyError: If key is empty.
            KeyTreeError: From Storage.set.
        """
        if key == "":
            raise errors.EmptyKeyError()
        flat: dict[str, str] = {}
        flatten.flatten_value(key, value, flat)
        self._merge(flat)

    def _merge(self, flat: _abc.Mapping[str, str]) -> None:
        for key in sorted(flat):
            self._storage.set(key, flat[key])

    def copy_to(self, out: Properties) -> None:
        """Copy every entry into out, overriding values already there."""
        out._merge(self._storage.raw_data())

    # =========================================================================
    # Reads
    # =========================================================================

    def data(self) -> dict[str, str]:
        """Copy of all key/value pairs."""
        return self._storage.data()

    def keys(self) -> list[str]:
        """All keys, sorted."""
        return self._storage.keys()

    def has(self, key: str) -> bool:
        """Whether key is a stored value or an existing container."""
        return self._storage.has(key)

    def sub_keys(self, key: str = "") -> list[str]:
        """Sorted child keys of the container at key."""
        return self._storage.sub_keys(key)

    def get(self, key: str, default: str = "") -> str:
        """Value of key, or default when key holds no value."""
        value = self._storage.get(key)
        return default if value is None else value

    def __contains__(self, key: object) -> bool:
        return key in self._storage

    def __len__(self) -> int:
        return len(self._storage)

    def __repr__(self) -> str:
        return f"Properties({self._storage.data()!r})"

    # =========================================================================
    # Reference resolution
    # =========================================================================

    def resolve(self, text: str) -> str:
        """
        Expand ``${key}`` and ``${key:=default}`` references in text.

        Referenced values and defaults are resolved recursively, so
        ``${a:=${b}}`` falls back to the value of ``b``.

        Raises:
            InvalidSyntaxError: If a reference is not closed.
            PropertyNotExistError: If a key is missing and has no default.
            CircularReferenceError: If a value refers back to itself.
            ResolveError: If a key names a container rather than a value.
        """
        return self._resolve(text, ())

    def _resolve(self, text: str, active: tuple[str, ...]) -> str:
        """Resolve text while the values of the keys in active are being expanded."""
        start = text.find(_REF_OPEN)
        if start < 0:
            return text

        end = _find_reference_end(text, start)
        if end < 0:
            raise errors.InvalidSyntaxError(text)

        key, sep, default = text[start + len(_REF_OPEN) : end].partition(_DEFAULT_SEP)
        key = key.strip()

        value = self._storage.get(key) if key else None
        if value is not None:
            if key in active:
                raise errors.CircularReferenceError(text, key)
            resolved = self._resolve(value, (*active, key))
        elif self._storage.has(key):
            raise errors.ResolveError(text, f"property '{key}' isn't simple value")
        elif sep:
            _logger.debug("Using default for missing property %r", key)
            resolved = self._resolve(default.strip(), active)
        else:
            raise errors.PropertyNotExistError(text, key)

        return text[:start] + resolved + self._resolve(text[end + 1 :], active)


def _find_reference_end(text: str, start: int) -> int:
    """Index of the ``}`` closing the reference opened at start, or -1."""
    level = 1
    i = start + len(_REF_OPEN)
    while i < len(text):
        if text.startswith(_REF_OPEN, i):
            level += 1
            i += len(_REF_OPEN)
            continue
        if text[i] == "}":
            level -= 1
            if level == 0:
                return i
        i += 1
    return -1
