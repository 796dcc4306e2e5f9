"""
Shared pytest fixtures for keytree tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import os as _os
import unittest.mock as _mock

import click.testing as _click_testing
import pytest as _pytest

import keytree.config as config
import keytree.storage as storage


def _clean_environ() -> dict[str, str]:
    """Environment without KEYTREE_* variables or NO_COLOR."""
    return {
        k: v for k, v in _os.environ.items() if not k.startswith("KEYTREE_") and k != "NO_COLOR"
    }


@_pytest.fixture
def store() -> storage.Storage:
    """Empty Storage with default settings."""
    return storage.Storage()


@_pytest.fixture
def clean_env() -> dict[str, str]:
    """
    Return environment dict with keytree settings removed.

    Use with mock.patch.dict to isolate tests from the actual environment.
    """
    return _clean_environ()


@_pytest.fixture
def isolated_env(clean_env: dict[str, str]):
    """
    Context manager that isolates tests from environment variables.

    Usage:
        def test_something(isolated_env):
            with isolated_env:
                settings = config.Settings.construct_without_dotenv()
    """
    return _mock.patch.dict(_os.environ, clean_env, clear=True)


@_pytest.fixture
def clean_settings(isolated_env) -> config.Settings:
    """
    Settings instance isolated from environment and .env file.

    This fixture ensures tests get predictable default settings.
    """
    with isolated_env:
        return config.Settings.construct_without_dotenv()


@_pytest.fixture
def runner(clean_env: dict[str, str]) -> _click_testing.CliRunner:
    """CliRunner whose environment has no keytree settings."""
    return _click_testing.CliRunner(env=clean_env)
