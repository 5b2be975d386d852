"""Tests for Testable, its continuations and label resolution."""

import pytest

from shouldbe import And, AndDerived, AssertionContext, AssertionFailedException, Testable, assertion_count, should
from shouldbe.testable import get_label_provider, reset_label_provider, set_label_provider


def test_should_wraps_subject_and_label():
    t = should([1, 2], "items")
    assert isinstance(t, Testable)
    assert t.subject == [1, 2]
    assert t.label == "items"


def test_should_without_label_uses_default_provider():
    assert should(5).label == "subject"


def test_label_provider_is_injectable():
    set_label_provider(lambda subject: f"value<{type(subject).__name__}>")
    assert should(5).label == "value<int>"
    assert should(5, "explicit").label == "explicit"

    reset_label_provider()
    assert should(5).label == "subject"


def test_get_label_provider_returns_installed():
    def provider(_):
        return "lbl"

    set_label_provider(provider)
    assert get_label_provider() is provider


@pytest.mark.parametrize("label", ["", "   "])
def test_empty_label_rejected(label):
    with pytest.raises(ValueError, match="non-empty"):
        should(1, label)


def test_subject_is_read_only():
    t = should(1, "x")
    with pytest.raises(AttributeError):
        t.subject = 2


def test_assert_hook_returns_context_and_counts():
    before = assertion_count()
    t = should(1, "x")
    ctx = t.assert_()
    assert isinstance(ctx, AssertionContext)
    assert ctx.label == "x"
    assert ctx.sequence == before + 1
    assert assertion_count() == before + 1
    assert t.assertions_begun == 1


def test_fail_expands_template_and_raises():
    t = should("asd", "x")
    with pytest.raises(AssertionFailedException) as exc_info:
        t.fail("{subject} is {actual} {because}and {0}", "r", "2")
    assert exc_info.value.message == 'x is "asd" because r, and 2'


def test_fail_propagates_template_defects():
    t = should(1, "x")
    with pytest.raises(IndexError):
        t.fail("{subject} {0}")
    with pytest.raises(ValueError):
        t.fail("{nope}")


def test_and_exposes_original_testable():
    t = should(1, "x")
    cont = And(t)
    assert cont.and_ is t
    assert cont.subject == 1
    assert cont.label == "x"


def test_and_derived_carries_derived_value():
    t = should({"k": 3}, "d")
    cont = AndDerived(t, 3)
    assert cont.that == 3
    assert cont.and_ is t


def test_repr_shows_label_and_formatted_subject():
    assert repr(should("a", "x")) == 'Testable(x="a")'


def test_debug_log_on_failure(caplog):
    with caplog.at_level("DEBUG", logger="shouldbe"):
        with pytest.raises(AssertionFailedException):
            should(1, "x").be(2)
    assert "Assertion failed on x" in caplog.text
