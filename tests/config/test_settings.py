"""Tests for Settings and config section types."""

import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import pytest as _pytest

import keytree.config as config
import keytree.errors as errors


class TestDefaults:
    """Settings without any environment."""

    def test_default_sections(self, clean_settings: config.Settings) -> None:
        """All sections have their documented defaults."""
        assert clean_settings.storage.allow_empty_values is True
        assert clean_settings.logging.level == "WARNING"
        assert clean_settings.logging.rich_tracebacks is False
        assert clean_settings.output.format == "plain"
        assert clean_settings.output.color is None

    def test_new_properties_allows_empty_values(self, clean_settings: config.Settings) -> None:
        """Properties built from defaults accept empty values."""
        props = clean_settings.new_properties()
        props.set("a", "")
        assert props.data() == {"a": ""}


class TestEnvironment:
    """KEYTREE_* environment variables."""

    def test_nested_env_vars(self, isolated_env: _typing.Any) -> None:
        """Double underscore reaches nested fields."""
        with isolated_env:
            _os.environ["KEYTREE_STORAGE__ALLOW_EMPTY_VALUES"] = "false"
            _os.environ["KEYTREE_LOGGING__LEVEL"] = "debug"
            _os.environ["KEYTREE_OUTPUT__FORMAT"] = "yaml"
            settings = config.Settings.construct_without_dotenv()

        assert settings.storage.allow_empty_values is False
        assert settings.logging.level == "DEBUG"
        assert settings.output.format == "yaml"

    def test_empty_values_policy_reaches_properties(
        self,
        isolated_env: _typing.Any,
    ) -> None:
        """Disabling empty values makes new Properties reject them."""
        with isolated_env:
            _os.environ["KEYTREE_STORAGE__ALLOW_EMPTY_VALUES"] = "0"
            settings = config.Settings.construct_without_dotenv()

        props = settings.new_properties()
        with _pytest.raises(errors.EmptyValueError):
            props.set("a", "")

    def test_invalid_log_level(self, isolated_env: _typing.Any) -> None:
        """Unknown level names fail validation."""
        with isolated_env:
            _os.environ["KEYTREE_LOGGING__LEVEL"] = "loud"
            with _pytest.raises(_pydantic.ValidationError, match="unknown log level"):
                config.Settings.construct_without_dotenv()

    def test_constructor_overrides_env(self, isolated_env: _typing.Any) -> None:
        """Constructor arguments take precedence over the environment."""
        with isolated_env:
            _os.environ["KEYTREE_OUTPUT__FORMAT"] = "yaml"
            settings = config.Settings.construct_without_dotenv(output={"format": "json"})
        assert settings.output.format == "json"


class TestDotenv:
    """Optional .env file."""

    def test_env_file_is_read(
        self,
        tmp_path: _pathlib.Path,
        isolated_env: _typing.Any,
    ) -> None:
        """A .env file passed explicitly supplies values."""
        env_file = tmp_path / ".env"
        env_file.write_text("KEYTREE_OUTPUT__FORMAT=json\n")
        with isolated_env:
            settings = config.Settings(_env_file=str(env_file))  # type: ignore[call-arg]
        assert settings.output.format == "json"


class TestConfigTypes:
    """Section models."""

    def test_extra_fields_preserved(self) -> None:
        """Unknown fields are kept and reported."""
        section = config.StorageConfig.model_validate({"allow_empty_values": False, "typo": 1})
        assert section.allow_empty_values is False
        assert section.get_extra_fields() == {"typo": 1}

    def test_no_extra_fields(self) -> None:
        """Known fields only yield an empty dict."""
        assert config.OutputConfig().get_extra_fields() == {}

    def test_level_normalized(self) -> None:
        """Level names are stripped and upper-cased."""
        assert config.LoggingConfig(level=" info ").level == "INFO"

    def test_invalid_output_format(self) -> None:
        """Only plain, json and yaml are accepted."""
        with _pytest.raises(_pydantic.ValidationError):
            config.OutputConfig(format="xml")  # type: ignore[arg-type]
