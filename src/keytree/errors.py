"""
Exception types for keytree.

Every failure raised by the path codec, the storage engine and the
properties layer derives from KeyTreeError, so callers loading
configuration can catch one type. Each exception keeps the offending
key, path or text as an attribute for diagnostics.
"""


class KeyTreeError(Exception):
    """Base class for all keytree errors."""

    pass


class EmptyKeyError(KeyTreeError, ValueError):
    """Raised when a value is stored under an empty key."""

    def __init__(self) -> None:
        super().__init__("key is empty")


class EmptyValueError(KeyTreeError, ValueError):
    """Raised when an empty value is stored and empty values are disabled."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"value is empty for key '{key}'")


class InvalidKeySyntaxError(KeyTreeError, ValueError):
    """Raised when a path string does not follow the key grammar."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"invalid key '{key}'")


class PropertyConflictError(KeyTreeError):
    """
    Raised when a path's shape disagrees with the shape already stored.

    ``path`` is the prefix where the incompatibility begins, which is not
    necessarily the full path that was requested.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"property conflict at path {path}")


class ResolveError(KeyTreeError):
    """Raised when a string with ``${key}`` references cannot be resolved."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"resolve string '{text}' error: {reason}")


class InvalidSyntaxError(ResolveError):
    """Raised when a ``${...}`` reference is not closed."""

    def __init__(self, text: str) -> None:
        super().__init__(text, "invalid syntax")


class PropertyNotExistError(ResolveError):
    """Raised when a referenced key is missing and has no default."""

    def __init__(self, text: str, key: str) -> None:
        self.key = key
        super().__init__(text, f"property '{key}' not exist")


class CircularReferenceError(ResolveError):
    """Raised when a referenced value refers back to a key being resolved."""

    def __init__(self, text: str, key: str) -> None:
        self.key = key
        super().__init__(text, f"property '{key}' has circular reference")
