"""
keytree - hierarchical key-path store for flattened configuration.

Configuration documents are flattened into keys such as ``a.b[0].c``
and stored as strings. keytree verifies that every key agrees with the
shape (map, array or scalar) implied by the keys stored before it.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("keytree")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)

from keytree.config import Settings  # noqa: E402
from keytree.errors import (  # noqa: E402
    CircularReferenceError,
    EmptyKeyError,
    EmptyValueError,
    InvalidKeySyntaxError,
    InvalidSyntaxError,
    KeyTreeError,
    PropertyConflictError,
    PropertyNotExistError,
    ResolveError,
)
from keytree.flatten import flatten_map, flatten_value  # noqa: E402
from keytree.properties import Properties  # noqa: E402
from keytree.storage import Segment, SegmentKind, Storage, join_path, split_path  # noqa: E402

__all__ = [
    "__version__",
    "__version_info__",
    "CircularReferenceError",
    "EmptyKeyError",
    "EmptyValueError",
    "InvalidKeySyntaxError",
    "InvalidSyntaxError",
    "KeyTreeError",
    "Properties",
    "PropertyConflictError",
    "PropertyNotExistError",
    "ResolveError",
    "Segment",
    "SegmentKind",
    "Settings",
    "Storage",
    "flatten_map",
    "flatten_value",
    "join_path",
    "split_path",
]
