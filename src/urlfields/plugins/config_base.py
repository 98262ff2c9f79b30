# src/urlfields/plugins/config_base.py
"""Base class for typed plugin configurations.

Plugin configs inherit from PluginConfig to get:
- Strict validation (unknown keys are rejected)
- Immutability once built (configs are shared across invocations)
- A factory method that turns pydantic errors into ConfigurationError

Example usage:
    class MyTransformConfig(PluginConfig):
        threshold: int = 10

    cfg = MyTransformConfig.from_dict(config)
"""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, ValidationError

from urlfields.contracts.errors import ConfigurationError

# Kept for callers that catch the plugin-layer name
PluginConfigError = ConfigurationError


class PluginConfig(BaseModel):
    """Base class for typed plugin configurations.

    All plugin configs should inherit from this class.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    @classmethod
    def from_dict(cls, config: Any) -> Self:
        """Create config from dict with clear error on validation failure.

        Args:
            config: Dictionary of configuration values.

        Returns:
            Validated configuration instance.

        Raises:
            ConfigurationError: If configuration is invalid.
        """
        if not isinstance(config, dict):
            raise ConfigurationError(f"Invalid configuration for {cls.__name__}: config must be a dict, got {type(config).__name__}.")

        try:
            return cls.model_validate(config)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration for {cls.__name__}: {e}") from e
        except ValueError as e:
            raise ConfigurationError(f"Invalid configuration for {cls.__name__}: {e}") from e
