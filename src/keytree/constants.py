"""
Shared constants for keytree.

This module provides a single source of truth for default values
that are used across multiple modules.
"""

# Settings
ENV_PREFIX = "KEYTREE_"
"""Prefix of environment variables read by Settings."""

ENV_FILE_VAR = "KEYTREE_ENV_FILE"
"""Environment variable naming an optional .env file."""

# Logging
LOGGER_NAME = "keytree"
"""Name of the package logger configured by keytree.logging."""

DEFAULT_LOG_LEVEL = "WARNING"
"""Default level for the package logger."""

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
"""Accepted level names."""
