"""Built-in assertions."""

from __future__ import annotations

from typing import Any, TypeVar

from shouldbe.extensions import assertion
from shouldbe.formatting import format_value
from shouldbe.testable import And, AndDerived, Testable

T = TypeVar("T")
D = TypeVar("D")


def _null_reason(because: str) -> str:
    return f" because {because}" if because else ""


@assertion
def be(t: Testable[T], expected: Any, because: str = "") -> And[T]:
    """Subject equals *expected*."""
    t.assert_()
    if not t.subject == expected:
        t.fail(
            "{subject}\n    should be\n{0}\n    {because}but was\n{actual}",
            because,
            format_value(expected),
        )
    return And(t)


@assertion
def not_be(t: Testable[T], expected: Any, because: str = "") -> And[T]:
    """Subject does not equal *expected*."""
    t.assert_()
    if t.subject == expected:
        t.fail(
            "{subject}\n    should not be\n{0}\n    {because}but the values were equal.",
            because,
            format_value(expected),
        )
    return And(t)


# The null checks put the reason mid-sentence, so it is passed positionally.


@assertion
def be_null(t: Testable[T], because: str = "") -> And[T]:
    t.assert_()
    if t.subject is not None:
        t.fail("{subject}\n    should be null{0}, but was\n{actual}", "", _null_reason(because))
    return And(t)


@assertion
def not_be_null(t: Testable[T], because: str = "") -> And[T]:
    t.assert_()
    if t.subject is None:
        t.fail("{subject}\n    should not be null{0}, but was null.", "", _null_reason(because))
    return And(t)


@assertion
def be_of_type(t: Testable[T], expected_type: type[D], because: str = "") -> AndDerived[T, D]:
    """Subject is an instance of *expected_type*; ``.that`` is the subject narrowed to it."""
    t.assert_()
    if not isinstance(t.subject, expected_type):
        t.fail(
            "{subject}\n    should be of type\n{0}\n    {because}but was\n{1}\n    with data\n{actual}",
            because,
            expected_type.__qualname__,
            type(t.subject).__qualname__,
        )
    return AndDerived(t, t.subject)
