"""Fluent assertions with precisely formatted failure messages."""

from shouldbe.exceptions import AssertionFailedException
from shouldbe.extensions import assertion, registered_assertions, unregister_assertion
from shouldbe.formatting import format_value, formatters, register_formatter
from shouldbe.testable import (
    And,
    AndDerived,
    AssertionContext,
    Testable,
    assertion_count,
    set_label_provider,
    should,
)

# Registers the built-in assertions on Testable.
import shouldbe.assertions  # noqa: F401

__all__ = [
    "And",
    "AndDerived",
    "AssertionContext",
    "AssertionFailedException",
    "Testable",
    "assertion",
    "assertion_count",
    "format_value",
    "formatters",
    "register_formatter",
    "registered_assertions",
    "set_label_provider",
    "should",
    "unregister_assertion",
]
