"""Tests for layered extension points."""

from collections.abc import Callable

import pytest

from mastervolume.core.pipeline import ExtensionPoint


class TestExtensionPoint:
    """Test suite for ExtensionPoint."""

    def test_base_only(self) -> None:
        """Test a point without middlewares calls the base routine."""
        point = ExtensionPoint("double", lambda x: x * 2)
        assert point(4) == 8
        assert point.layers == ()

    def test_middleware_wraps_base(self) -> None:
        """Test a middleware receives the base as next handler."""
        point = ExtensionPoint("make_data", lambda: {"alwaysDash": False})

        def add_field(next_handler: Callable[[], dict]) -> dict:
            data = next_handler()
            data["userLevel"] = 90
            return data

        point.use(add_field)

        assert point() == {"alwaysDash": False, "userLevel": 90}
        assert point.layers == ("add_field",)

    def test_later_middleware_is_outermost(self) -> None:
        """Test middlewares run in reverse installation order."""
        calls: list[str] = []
        point = ExtensionPoint("run", lambda: calls.append("base"))

        def first(next_handler: Callable[[], None]) -> None:
            calls.append("first")
            next_handler()

        def second(next_handler: Callable[[], None]) -> None:
            calls.append("second")
            next_handler()

        point.use(first)
        point.use(second)
        point()

        assert calls == ["second", "first", "base"]
        assert point.layers == ("first", "second")

    def test_arguments_pass_through(self) -> None:
        """Test positional and keyword arguments reach every layer."""
        point = ExtensionPoint("read", lambda config, name, default=None: config.get(name, default))

        def upper(next_handler, config, name, default=None):  # type: ignore[no-untyped-def]
            value = next_handler(config, name, default=default)
            return value.upper() if isinstance(value, str) else value

        point.use(upper)

        assert point({"a": "x"}, "a") == "X"
        assert point({}, "b", default="fallback") == "FALLBACK"

    def test_middleware_can_short_circuit(self) -> None:
        """Test a middleware may answer without calling the next handler."""
        point = ExtensionPoint("status", lambda symbol: "OFF")
        point.use(lambda next_handler, symbol: "90%" if symbol == "mine" else next_handler(symbol))

        assert point("mine") == "90%"
        assert point("alwaysDash") == "OFF"

    def test_errors_propagate(self) -> None:
        """Test errors raised by inner layers reach the caller."""

        def broken() -> None:
            raise RuntimeError("host failure")

        point = ExtensionPoint("broken", broken)
        point.use(lambda next_handler: next_handler(), name="passthrough")

        with pytest.raises(RuntimeError, match="host failure"):
            point()

    def test_custom_layer_name(self) -> None:
        """Test explicit layer names are reported."""
        point = ExtensionPoint("noop", lambda: None)
        point.use(lambda next_handler: next_handler(), name="plugin.noop")

        assert point.layers == ("plugin.noop",)
        assert "plugin.noop" in repr(point)
