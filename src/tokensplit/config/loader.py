"""Build validated splitter settings from YAML text or plain mappings."""

import yaml
from pydantic import ValidationError
from typing import Any, Mapping

from .schema import SplitterConfig


class ConfigLoadError(Exception):
    """Exception raised when settings cannot be parsed or validated."""
    pass


def load_config_from_mapping(data: Mapping[str, Any]) -> SplitterConfig:
    """
    Validate a mapping of settings.

    Args:
        data: Mapping shaped like SplitterConfig

    Returns:
        SplitterConfig: Validated settings

    Raises:
        ConfigLoadError: If data is not a mapping or validation fails
    """
    if not isinstance(data, Mapping):
        raise ConfigLoadError(f"Settings must be a mapping, got {type(data)}")

    try:
        return SplitterConfig.model_validate(dict(data))
    except ValidationError as e:
        raise ConfigLoadError(f"Settings validation failed: {e}") from e


def load_config_from_string(yaml_content: str) -> SplitterConfig:
    """
    Parse and validate settings from YAML text.

    Args:
        yaml_content: YAML content as string

    Returns:
        SplitterConfig: Validated settings

    Raises:
        ConfigLoadError: If YAML is invalid or validation fails
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML content: {e}") from e

    if not isinstance(data, dict):
        raise ConfigLoadError(f"Settings content must contain a YAML mapping, got {type(data)}")

    return load_config_from_mapping(data)
