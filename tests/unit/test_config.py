"""Tests for StatementConfig."""

import dataclasses

import pytest

from sqlassembly.config import StatementConfig
from sqlassembly.exceptions import ImproperConfigurationError


def test_config_defaults() -> None:
    config = StatementConfig()
    assert config.placeholder == "?"
    assert config.default_direction == "ASC"
    assert config.strict_sections is False


def test_config_replace() -> None:
    config = StatementConfig()
    strict = config.replace(strict_sections=True)

    assert strict.strict_sections is True
    assert config.strict_sections is False
    assert strict != config


def test_config_is_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        StatementConfig().placeholder = "%s"  # type: ignore[misc]


@pytest.mark.parametrize("kwargs", [{"placeholder": ""}, {"default_direction": "sideways"}])
def test_config_rejects_invalid(kwargs: "dict[str, str]") -> None:
    with pytest.raises(ImproperConfigurationError):
        StatementConfig(**kwargs)
