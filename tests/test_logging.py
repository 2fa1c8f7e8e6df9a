# ============================================================================
# LOGGING TESTS
# ============================================================================
# STATUS: Tests - Structured logging context and formatters
# PURPOSE: Verify context nesting and JSON / human formatting
# CREATED: 16 OCT 2026
# ============================================================================
"""
Logging Tests

Run with:
    pytest tests/test_logging.py -v
"""

import json
import logging

from core.logging import (
    HumanFormatter,
    StructuredFormatter,
    get_current_context,
    log_context,
)


def _record(message="Building table"):
    return logging.LogRecord(
        name="generator.schema_builder",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )


class TestLogContext:
    """Tests for log_context()."""

    def test_empty_outside_context(self):
        assert get_current_context().to_dict() == {}

    def test_nested_contexts_merge(self):
        with log_context(dialect="postgresql"):
            with log_context(class_name="Product", table="prod"):
                assert get_current_context().to_dict() == {
                    "dialect": "postgresql",
                    "class_name": "Product",
                    "table": "prod",
                }
            assert get_current_context().to_dict() == {"dialect": "postgresql"}
        assert get_current_context().to_dict() == {}

    def test_context_popped_on_error(self):
        try:
            with log_context(table="prod"):
                raise ValueError("boom")
        except ValueError:
            pass
        assert get_current_context().table is None


class TestFormatters:
    """Tests for the JSON and human formatters."""

    def test_structured_formatter(self):
        with log_context(class_name="Product", table="prod"):
            output = StructuredFormatter().format(_record())
        data = json.loads(output)
        assert data["level"] == "DEBUG"
        assert data["logger"] == "generator.schema_builder"
        assert data["message"] == "Building table"
        assert data["context"] == {"class_name": "Product", "table": "prod"}

    def test_human_formatter(self):
        with log_context(class_name="Product", table="prod", dialect="mysql"):
            output = HumanFormatter().format(_record())
        assert "DEBUG" in output
        assert "[class=Product, table=prod, dialect=mysql]" in output
        assert output.endswith("generator.schema_builder [class=Product, table=prod, dialect=mysql]: Building table")
