"""Tests for scalar literal handlers."""

from datetime import date, datetime

from gql_opgen.core.scalars import (
    BooleanHandler,
    DateTimeHandler,
    NumberHandler,
    RawHandler,
    ScalarHandler,
    ScalarRegistry,
    StringHandler,
)


class TestStringHandler:
    """Tests for StringHandler."""

    def test_quotes_value(self):
        assert StringHandler().to_literal("xxx") == '"xxx"'

    def test_converts_to_string(self):
        assert StringHandler().to_literal(123) == '"123"'

    def test_escapes_quotes_and_newlines(self):
        assert StringHandler().to_literal('a "b"\nc') == r'"a \"b\"\nc"'

    def test_keeps_unicode(self):
        assert StringHandler().to_literal("王") == '"王"'


class TestNumberHandler:
    """Tests for NumberHandler."""

    def test_int(self):
        assert NumberHandler().to_literal(123) == "123"

    def test_float(self):
        assert NumberHandler().to_literal(0.5) == "0.5"


class TestBooleanHandler:
    """Tests for BooleanHandler."""

    def test_true(self):
        assert BooleanHandler().to_literal(True) == "true"

    def test_false(self):
        assert BooleanHandler().to_literal(False) == "false"


class TestDateTimeHandler:
    """Tests for DateTimeHandler."""

    def test_datetime(self):
        assert DateTimeHandler().to_literal(datetime(2024, 1, 15, 10, 30, 0)) == '"2024-01-15T10:30:00"'

    def test_date(self):
        assert DateTimeHandler().to_literal(date(2024, 1, 15)) == '"2024-01-15"'

    def test_string_passthrough(self):
        assert DateTimeHandler().to_literal("2024-01-15T10:30:00Z") == '"2024-01-15T10:30:00Z"'


class TestScalarRegistry:
    """Tests for ScalarRegistry."""

    def test_default_handlers_registered(self):
        registry = ScalarRegistry()
        for name in ("String", "ID", "Int", "Float", "Boolean", "DateTime", "Date", "UUID"):
            assert registry.has(name)

    def test_unknown_scalar_falls_back_to_raw(self):
        registry = ScalarRegistry()
        assert not registry.has("BigNumber")
        assert isinstance(registry.get("BigNumber"), RawHandler)
        assert registry.get("BigNumber").to_literal(10) == "10"

    def test_string_kind(self):
        registry = ScalarRegistry()
        assert registry.is_string_kind("String")
        assert registry.is_string_kind("ID")
        assert registry.is_string_kind("DateTime")
        assert not registry.is_string_kind("Int")
        assert not registry.is_string_kind("BigNumber")

    def test_register_custom(self):
        registry = ScalarRegistry()

        class MoneyHandler:
            def to_literal(self, value):
                return f'"{value:.2f}"'

        registry.register("Money", MoneyHandler())
        assert registry.has("Money")
        assert registry.get("Money").to_literal(3) == '"3.00"'

    def test_registries_are_independent(self):
        first = ScalarRegistry()
        first.register("Money", StringHandler())
        assert not ScalarRegistry().has("Money")


class TestScalarHandlerProtocol:
    """Tests for protocol compliance."""

    def test_builtin_handlers_are_scalar_handlers(self):
        for handler in (StringHandler(), NumberHandler(), BooleanHandler(), DateTimeHandler(), RawHandler()):
            assert isinstance(handler, ScalarHandler)
