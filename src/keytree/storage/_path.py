"""
Path codec: translation between key strings and segment tuples.

A key string is a sequence of key segments (bare text) and index
segments (``[`` digits ``]``), for example ``users[0].name``:

- Key segments after the first are introduced by ``.``, including a key
  that follows an index (``a[0].b``).
- Brackets attach directly to the previous token: ``a[0][1]`` is valid,
  ``a.[0]`` is not.
- A key segment may not be empty, may not contain spaces and may not be
  all digits, so that rendering a path never produces text that would
  parse back as an index.

The scan is a single left-to-right pass without backtracking.
"""

from __future__ import annotations

import dataclasses as _dataclasses
import enum as _enum
import typing as _typing

import keytree.errors as errors


class SegmentKind(_enum.Enum):
    """Kind of a path segment."""

    KEY = "key"
    """A named field in a map."""

    INDEX = "index"
    """A position in an array."""


@_dataclasses.dataclass(frozen=True, slots=True)
class Segment:
    """One token of a path: a map key or an array index, kept as text."""

    kind: SegmentKind
    element: str

    @classmethod
    def key(cls, element: str) -> Segment:
        return cls(SegmentKind.KEY, element)

    @classmethod
    def index(cls, element: str | int) -> Segment:
        return cls(SegmentKind.INDEX, str(element))


Path: _typing.TypeAlias = tuple[Segment, ...]


def _is_uint(text: str) -> bool:
    """Whether text is an unsigned base-10 integer literal."""
    return text.isascii() and text.isdigit()


def _key_segment(key: str, text: str) -> Segment:
    if not text or _is_uint(text):
        raise errors.InvalidKeySyntaxError(key)
    return Segment.key(text)


def _index_segment(key: str, text: str) -> Segment:
    if not _is_uint(text):
        raise errors.InvalidKeySyntaxError(key)
    return Segment.index(text)


def split_path(key: str) -> Path:
    """
    Parse a key string into its segments.

    Args:
        key: Key string such as ``a.b[0].c``.

    Returns:
        Non-empty tuple of segments in order.

    Raises:
        InvalidKeySyntaxError: If the key violates the grammar.

    Example:
        >>> [s.element for s in split_path("a[0].b")]
        ['a', '0', 'b']
    """
    if not key:
        raise errors.InvalidKeySyntaxError(key)

    segments: list[Segment] = []
    start = 0
    last_char = ""
    open_bracket = False

    for pos, char in enumerate(key):
        if char == " ":
            raise errors.InvalidKeySyntaxError(key)
        elif char == ".":
            if open_bracket or last_char == ".":
                raise errors.InvalidKeySyntaxError(key)
            # After "]" the dot only introduces the next key
            if last_char != "]":
                segments.append(_key_segment(key, key[start:pos]))
            start = pos + 1
        elif char == "[":
            if open_bracket or last_char == ".":
                raise errors.InvalidKeySyntaxError(key)
            if pos > 0 and last_char != "]":
                segments.append(_key_segment(key, key[start:pos]))
            open_bracket = True
            start = pos + 1
        elif char == "]":
            if not open_bracket:
                raise errors.InvalidKeySyntaxError(key)
            segments.append(_index_segment(key, key[start:pos]))
            open_bracket = False
            start = pos + 1
        elif last_char == "]":
            raise errors.InvalidKeySyntaxError(key)
        last_char = char

    if open_bracket or last_char == ".":
        raise errors.InvalidKeySyntaxError(key)
    if last_char != "]":
        segments.append(_key_segment(key, key[start:]))
    return tuple(segments)


def join_path(segments: _typing.Iterable[Segment]) -> str:
    """
    Render segments back into a key string.

    Inverse of split_path for every key it accepts. Assumes well-formed
    segments and never fails.
    """
    parts: list[str] = []
    for i, segment in enumerate(segments):
        if segment.kind is SegmentKind.KEY:
            if i > 0:
                parts.append(".")
            parts.append(segment.element)
        else:
            parts.append(f"[{segment.element}]")
    return "".join(parts)
