"""Plugin layer: transform base class, typed configs and pluggy registration."""

from urlfields.plugins.base import BaseTransform
from urlfields.plugins.config_base import PluginConfig, PluginConfigError
from urlfields.plugins.hookspecs import hookimpl
from urlfields.plugins.manager import PluginManager

__all__ = [
    "BaseTransform",
    "PluginConfig",
    "PluginConfigError",
    "PluginManager",
    "hookimpl",
]
