"""Ordered middleware chains around host extension points.

A host routine (save the settings blob, build the options list, react to a
key press) is wrapped in an ExtensionPoint. Plugins add middlewares instead of
replacing the routine, and each middleware receives the next handler in the
chain as its first argument. Middlewares added later wrap the ones added
earlier, so the chain reads in installation order and every layer can call
through to what was there before it.

Typical usage:
    make_data = ExtensionPoint("make_data", lambda: {"alwaysDash": False})

    def add_user_level(next_handler):
        data = next_handler()
        data["userLevel"] = 90
        return data

    make_data.use(add_user_level)
    make_data()  # {"alwaysDash": False, "userLevel": 90}
"""

from collections.abc import Callable
from functools import partial
from typing import Any, Generic, TypeVar

R = TypeVar("R")

Handler = Callable[..., Any]
Middleware = Callable[..., Any]


class ExtensionPoint(Generic[R]):
    """A host routine that plugins can layer behaviour around.

    Attributes:
        name: Extension point name used in logs and diagnostics.
    """

    def __init__(self, name: str, base: Callable[..., R]) -> None:
        """Initialize the extension point.

        Args:
            name: Extension point name.
            base: The host's own implementation, innermost in the chain.
        """
        self.name = name
        self._base = base
        self._middlewares: list[tuple[str, Middleware]] = []

    def use(self, middleware: Middleware, name: str | None = None) -> None:
        """Add a middleware as the new outermost layer.

        Args:
            middleware: Callable taking ``(next_handler, *args, **kwargs)``.
            name: Layer name, defaults to the middleware's ``__name__``.
        """
        layer_name = name or getattr(middleware, "__name__", repr(middleware))
        self._middlewares.append((layer_name, middleware))

    @property
    def layers(self) -> tuple[str, ...]:
        """Installed middleware names, innermost first."""
        return tuple(layer_name for layer_name, _ in self._middlewares)

    def __call__(self, *args: Any, **kwargs: Any) -> R:
        handler: Handler = self._base
        for _, middleware in self._middlewares:
            handler = partial(middleware, handler)
        return handler(*args, **kwargs)

    def __repr__(self) -> str:
        return f"ExtensionPoint({self.name!r}, layers={list(self.layers)!r})"
