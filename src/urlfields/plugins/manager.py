# src/urlfields/plugins/manager.py
"""Plugin manager for transform registration and lookup.

Uses pluggy for hook-based plugin registration. Each PluginManager owns
its registrations; nothing is registered at import time.
"""

from typing import Any

import pluggy

from urlfields.plugins.base import BaseTransform
from urlfields.plugins.hookspecs import PROJECT_NAME, URLFieldsTransformSpec


class PluginManager:
    """Manages transform registration and lookup.

    Usage:
        manager = PluginManager()
        manager.register_builtin_plugins()

        transform = manager.create_transform("urlparse", {"fields": [{"from": "request"}]})
    """

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(URLFieldsTransformSpec)
        self._transforms: dict[str, type[BaseTransform]] = {}

    def register_builtin_plugins(self) -> None:
        """Register the transforms shipped with urlfields."""
        from urlfields.plugins.transforms import BuiltinTransforms

        self.register(BuiltinTransforms())

    def register(self, plugin: Any) -> None:
        """Register a plugin.

        Args:
            plugin: Plugin instance implementing hook methods

        Raises:
            ValueError: If the plugin contributes a transform name that is already registered
        """
        self._pm.register(plugin)
        try:
            self._refresh_caches()
        except ValueError:
            self._pm.unregister(plugin)
            raise

    def _refresh_caches(self) -> None:
        new_transforms: dict[str, type[BaseTransform]] = {}

        for transforms in self._pm.hook.urlfields_get_transforms():
            for cls in transforms:
                name = cls.name
                if name in new_transforms:
                    raise ValueError(f"Duplicate transform plugin name: '{name}'. Already registered by {new_transforms[name].__name__}")
                new_transforms[name] = cls

        self._transforms = new_transforms

    def get_transforms(self) -> list[type[BaseTransform]]:
        """Get all registered transform plugins."""
        return list(self._transforms.values())

    def get_transform_by_name(self, name: str) -> type[BaseTransform] | None:
        """Get transform plugin by name."""
        return self._transforms.get(name)

    def create_transform(self, name: str, config: dict[str, Any]) -> BaseTransform:
        """Instantiate a registered transform from raw config.

        Raises:
            ValueError: If no transform is registered under name
            ConfigurationError: If the transform rejects config
        """
        cls = self.get_transform_by_name(name)
        if cls is None:
            available = ", ".join(sorted(self._transforms)) or "none"
            raise ValueError(f"Unknown transform plugin: '{name}'. Available: {available}")
        return cls(config)
