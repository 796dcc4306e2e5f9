"""
Storage: a flat key/value map guarded by a shape tree.

Values live in a flat ``dict[str, str]`` keyed by the full path string,
which keeps lookups cheap. A parallel shape tree records, for every
prefix, whether it is a map, an array or a scalar, and is used to
reject keys whose shape disagrees with keys stored earlier:

    >>> store = Storage()
    >>> store.set("a.b[0].c", "123")
    >>> store.set("a.b", "x")  # PropertyConflictError: a.b is an array

Thread safety: none. Writes must be serialized by the caller; reads
with no concurrent writer are safe.
"""

from __future__ import annotations

import logging as _logging
import typing as _typing

import keytree.errors as errors
import keytree.storage._frozen as _frozen
import keytree.storage._path as _path
import keytree.storage._tree as _tree

_logger = _logging.getLogger(__name__)


class Storage:
    """
    Key/value store that verifies the shape of every key.

    Invariants:
        - A key is present in the flat map iff walking its segments in
          the shape tree ends at a terminal position.
        - A tree node never holds both map keys and array indices.

    Nodes are created lazily, one level at a time, and are never
    removed; there is no delete operation.

    Args:
        allow_empty_values: Whether ``set`` accepts ``""`` as a value.
    """

    def __init__(self, *, allow_empty_values: bool = True) -> None:
        self._root: _tree.InternalNode | None = None
        self._data: dict[str, str] = {}
        self._allow_empty_values = allow_empty_values

    @property
    def allow_empty_values(self) -> bool:
        return self._allow_empty_values

    # =========================================================================
    # Read accessors
    # =========================================================================

    def raw_data(self) -> _frozen.FrozenMapping:
        """Live read-only view of the flat map (no copy)."""
        return _frozen.FrozenMapping(self._data)

    def data(self) -> dict[str, str]:
        """Copy of the flat map."""
        return dict(self._data)

    def keys(self) -> list[str]:
        """All stored keys in ascending order."""
        return sorted(self._data)

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value stored at key, or default if there is none."""
        return self._data.get(key, default)

    # =========================================================================
    # Queries
    # =========================================================================

    def has(self, key: str) -> bool:
        """
        Whether key names a stored value or an existing container.

        ``has("m")`` is true once ``m.x`` is set, even though ``m`` has no
        value of its own. Never raises: invalid keys and shape mismatches
        yield False.
        """
        if not key or self._root is None:
            return False
        if key in self._data:
            return True
        try:
            path = _path.split_path(key)
            return self._find(path) is not None
        except (errors.InvalidKeySyntaxError, errors.PropertyConflictError):
            return False

    def sub_keys(self, key: str = "") -> list[str]:
        """
        Return the sorted child elements of the container at key.

        Args:
            key: Container path; ``""`` means the root.

        Returns:
            Child keys (map) or index digits (array) in ascending lexical
            order. Empty if nothing has been stored under key.

        Raises:
            InvalidKeySyntaxError: If key is not a valid path.
            PropertyConflictError: If key, or one of its prefixes, is used
                with a different shape than the one stored.
        """
        path = _path.split_path(key) if key else ()
        if self._root is None:
            return []
        node = self._find(path)
        if node is None:
            return []
        if not isinstance(node, _tree.InternalNode):
            raise errors.PropertyConflictError(key)
        return sorted(node.children)

    def _find(self, path: _path.Path) -> _tree.Node | None:
        """
        Walk the shape tree along path without modifying it.

        Returns:
            The node reached, or None if some step has not been stored.

        Raises:
            PropertyConflictError: If a step passes through a scalar or
                uses the wrong kind of segment.
        """
        node: _tree.Node | None = self._root
        for i, segment in enumerate(path):
            if not isinstance(node, _tree.InternalNode) or not node.accepts(segment):
                raise errors.PropertyConflictError(_path.join_path(path[: i + 1]))
            node = node.children.get(segment.element)
            if node is None:
                return None
        return node

    # =========================================================================
    # Mutation
    # =========================================================================

    def set(self, key: str, value: str) -> None:
        """
        Store value at key.

        Overwrites a previous value at the same key. A failed call never
        writes the flat map and never marks a new terminal position.

        Raises:
            EmptyKeyError: If key is empty.
            EmptyValueError: If value is empty and empty values are off.
            InvalidKeySyntaxError: If key is not a valid path.
            PropertyConflictError: If key's shape disagrees with the shape
                already stored; names the first conflicting prefix.
        """
        if key == "":
            raise errors.EmptyKeyError()
        if value == "" and not self._allow_empty_values:
            raise errors.EmptyValueError(key)

        path = _path.split_path(key)
        if self._root is None:
            self._root = _tree.InternalNode(path[0].kind)

        node: _tree.Node = self._root
        last = len(path) - 1
        for i, segment in enumerate(path):
            if not isinstance(node, _tree.InternalNode) or not node.accepts(segment):
                conflict = _path.join_path(path[: i + 1])
                _logger.debug("Rejected %r: conflict at %r", key, conflict)
                raise errors.PropertyConflictError(conflict)
            child = node.children.get(segment.element)
            if child is None:
                # Past this point every node is new, so no conflict can follow
                child = _tree.TERMINAL if i == last else _tree.InternalNode(path[i + 1].kind)
                node.children[segment.element] = child
            node = child

        if node is not _tree.TERMINAL:
            _logger.debug("Rejected %r: container cannot hold a value", key)
            raise errors.PropertyConflictError(key)

        self._data[key] = value
        _logger.debug("Set %r", key)

    # =========================================================================
    # Container protocol
    # =========================================================================

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __len__(self) -> int:
        """Number of stored values."""
        return len(self._data)

    def __iter__(self) -> _typing.Iterator[str]:
        """Iterate over stored keys in ascending order."""
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"Storage({self._data!r})"
