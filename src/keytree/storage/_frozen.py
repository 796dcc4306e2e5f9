"""
Read-only view of the flat value map.

Storage.raw_data() hands out the live backing dict wrapped in
FrozenMapping: no copy is made, later writes to the store are visible
through the view, and the view itself cannot be mutated.
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing


class FrozenMapping(_abc.Mapping[str, str]):
    """
    Read-only view of a ``dict[str, str]``.

    Example:
        >>> data = {"a.b": "1"}
        >>> frozen = FrozenMapping(data)
        >>> frozen["a.b"]
        '1'
        >>> frozen["a.b"] = "2"  # TypeError: immutable
    """

    __slots__ = ("_data",)

    def __init__(self, data: dict[str, str]) -> None:
        """
        Wrap a dict in a read-only view.

        Args:
            data: The dict to wrap. It is used directly, not copied.
        """
        self._data = data

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> _typing.Iterator[str]:
        """Iterate over keys."""
        return iter(self._data)

    def __len__(self) -> int:
        """Return number of keys."""
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"FrozenMapping({self._data!r})"

    def __eq__(self, other: object) -> bool:
        """Compare equal to any Mapping with same content."""
        if isinstance(other, _abc.Mapping):
            return dict(self._data) == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        """FrozenMapping is not hashable (the underlying dict is live)."""
        raise TypeError(f"unhashable type: '{type(self).__name__}'")
