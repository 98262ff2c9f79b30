# src/urlfields/plugins/hookspecs.py
"""pluggy hook specifications for urlfields plugins.

Plugins implement these hooks to register transform classes with a
PluginManager instance. There is no global registry: a host creates its
own manager and registers what it wants.

Usage (implementing a plugin):
    from urlfields.plugins.hookspecs import hookimpl

    class MyPlugin:
        @hookimpl  # NOT @hookspec - that's for defining specs
        def urlfields_get_transforms(self):
            return [MyTransform]
"""

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from urlfields.plugins.base import BaseTransform

# Project name for pluggy
PROJECT_NAME = "urlfields"

# Hook specification marker
hookspec = pluggy.HookspecMarker(PROJECT_NAME)

# Hook implementation marker (for plugins to use)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class URLFieldsTransformSpec:
    """Hook specifications for transform plugins."""

    @hookspec
    def urlfields_get_transforms(self) -> list[type["BaseTransform"]]:  # type: ignore[empty-body]
        """Return transform plugin classes.

        Returns:
            List of Transform plugin classes (not instances)
        """
