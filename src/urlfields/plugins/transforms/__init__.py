"""Built-in transform plugins for urlfields.

Transforms receive one Event at a time and return the event plus the error
that stopped processing, if any.

Hosts normally reach them through a PluginManager:
    manager = PluginManager()
    manager.register_builtin_plugins()
    transform = manager.create_transform("urlparse", config)
"""

from urlfields.plugins.base import BaseTransform
from urlfields.plugins.hookspecs import hookimpl
from urlfields.plugins.transforms.url_parse import URLParse


class BuiltinTransforms:
    """Hook implementation contributing the built-in transforms."""

    @hookimpl
    def urlfields_get_transforms(self) -> list[type[BaseTransform]]:
        return [URLParse]


__all__ = ["BuiltinTransforms", "URLParse"]
