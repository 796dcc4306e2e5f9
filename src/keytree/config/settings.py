"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with KEYTREE_ prefix
3. .env file named by KEYTREE_ENV_FILE (if set and present)
4. Field defaults

Nested config uses double underscore delimiter:
  KEYTREE_STORAGE__ALLOW_EMPTY_VALUES=false
  KEYTREE_LOGGING__LEVEL=debug
"""

import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import keytree.config.types as types
import keytree.constants as constants
import keytree.properties as properties


def _get_env_file() -> str | None:
    """Determine which .env file to load.

    KEYTREE_ENV_FILE names it explicitly. If it is unset, or set to a
    file that does not exist, no .env file is loaded.
    """
    if env_file := _os.environ.get(constants.ENV_FILE_VAR):
        if _pathlib.Path(env_file).exists():
            return env_file
    return None


class Settings(_pydantic_settings.BaseSettings):
    """
    keytree configuration settings.

    All settings can be overridden via environment variables with the
    KEYTREE_ prefix. For nested config, use double underscore:
    KEYTREE_OUTPUT__FORMAT=json
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix=constants.ENV_PREFIX,
        env_file=_get_env_file(),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # KEYTREE_LOGGING__LEVEL
        extra="ignore",
    )

    @classmethod
    def construct_without_dotenv(cls, **kwargs: _typing.Any) -> "Settings":
        """Create Settings from environment variables only, without loading .env file.

        Useful for test isolation and for reproducing issues without
        .env interference.
        """
        return cls(_env_file=None, **kwargs)  # type: ignore[call-arg]

    # =========================================================================
    # Nested config sections
    # =========================================================================

    storage: types.StorageConfig = _pydantic.Field(default_factory=types.StorageConfig)
    """Storage behavior."""

    logging: types.LoggingConfig = _pydantic.Field(default_factory=types.LoggingConfig)
    """Diagnostic logging."""

    output: types.OutputConfig = _pydantic.Field(default_factory=types.OutputConfig)
    """CLI output."""

    # =========================================================================
    # Factories
    # =========================================================================

    def new_properties(self) -> properties.Properties:
        """Create empty Properties configured by these settings."""
        return properties.Properties(allow_empty_values=self.storage.allow_empty_values)
