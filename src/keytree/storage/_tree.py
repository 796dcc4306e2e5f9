"""
Shape tree nodes for Storage.

The shape tree records structure only, never values. A position is
either an InternalNode, which accepts children of a single SegmentKind
(map keys or array indices), or the TERMINAL marker, which means a
scalar value is stored there and the path cannot be extended.
"""

from __future__ import annotations

import dataclasses as _dataclasses
import typing as _typing

import keytree.storage._path as _path


class _TerminalType:
    """Sentinel type marking a scalar position."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<TERMINAL>"


TERMINAL = _TerminalType()


@_dataclasses.dataclass(eq=False, slots=True)
class InternalNode:
    """
    A map or array position in the shape tree.

    Each node exclusively owns its children; nodes are never shared and
    never removed.
    """

    kind: _path.SegmentKind
    children: dict[str, Node] = _dataclasses.field(default_factory=dict)

    def accepts(self, segment: _path.Segment) -> bool:
        """Whether segment has the kind of child this node holds."""
        return segment.kind is self.kind

    def __repr__(self) -> str:
        return f"InternalNode({self.kind.value}, {sorted(self.children)!r})"


Node: _typing.TypeAlias = "InternalNode | _TerminalType"
