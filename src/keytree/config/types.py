"""Configuration type definitions for keytree settings.

This module defines the Pydantic models used as sections of the main
Settings class:

- StorageConfig: allow_empty_values
- LoggingConfig: level, rich_tracebacks
- OutputConfig: format, color

Design decision: All types use `extra="allow"` to preserve unknown fields.
Use `get_extra_fields()` to inspect them (typos, outdated keys).
"""

import typing as _typing

import pydantic as _pydantic

import keytree.constants as constants

# =============================================================================
# Base class with introspection
# =============================================================================


class ConfigBase(_pydantic.BaseModel):
    """
    Base class for all config types.

    All config types use `extra="allow"` so unknown fields are preserved
    rather than silently dropped.
    """

    model_config = _pydantic.ConfigDict(extra="allow")

    def get_extra_fields(self) -> dict[str, _typing.Any]:
        """
        Return fields that were provided but not in the schema.

        Returns:
            Dict of field_name → value for all unrecognized fields.
        """
        return dict(self.model_extra) if self.model_extra else {}


# =============================================================================
# Sections
# =============================================================================


class StorageConfig(ConfigBase):
    """Storage behavior."""

    allow_empty_values: bool = True
    """Whether an empty string is accepted as a value.

    Empty mappings and sequences flatten to an empty string, so turning
    this off also rejects them.
    """


class LoggingConfig(ConfigBase):
    """Diagnostic logging for the keytree logger."""

    level: str = constants.DEFAULT_LOG_LEVEL
    """Level name: DEBUG, INFO, WARNING, ERROR or CRITICAL."""

    rich_tracebacks: bool = False
    """Render exception tracebacks with rich."""

    @_pydantic.field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in constants.LOG_LEVELS:
            raise ValueError(
                f"unknown log level {value!r}, expected one of {', '.join(constants.LOG_LEVELS)}"
            )
        return normalized


class OutputConfig(ConfigBase):
    """CLI output."""

    format: _typing.Literal["plain", "json", "yaml"] = "plain"
    """Format used by `keytree dump` when --format is not given."""

    color: bool | None = None
    """Force color on or off. None auto-detects a TTY."""
