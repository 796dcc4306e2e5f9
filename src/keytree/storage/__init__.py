"""
Storage: flat key/value map with shape verification.

Keys are path strings such as ``a.b[0].c``. The path codec turns them
into segments; the storage engine uses the segments to keep the implied
shape (map, array or scalar) consistent across all keys.

Example:
    >>> from keytree.storage import Storage
    >>> store = Storage()
    >>> store.set("s[0]", "p")
    >>> store.set("s[1]", "o")
    >>> store.sub_keys("s")
    ['0', '1']
"""

from keytree.storage._core import Storage
from keytree.storage._frozen import FrozenMapping
from keytree.storage._path import Path, Segment, SegmentKind, join_path, split_path

__all__ = [
    "FrozenMapping",
    "Path",
    "Segment",
    "SegmentKind",
    "Storage",
    "join_path",
    "split_path",
]
