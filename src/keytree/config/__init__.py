"""
Configuration module for keytree.

Uses pydantic-settings for environment variable loading.
"""

from keytree.config.settings import Settings
from keytree.config.types import ConfigBase, LoggingConfig, OutputConfig, StorageConfig

__all__ = ["ConfigBase", "LoggingConfig", "OutputConfig", "Settings", "StorageConfig"]
