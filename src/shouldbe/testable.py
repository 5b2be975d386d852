"""The wrapper that every assertion runs against, and its continuations."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, NoReturn, TypeVar

from shouldbe.exceptions import AssertionFailedException
from shouldbe.formatting import format_value
from shouldbe.templating import TemplateContext, because_clause, expand

logger = logging.getLogger(__name__)

T = TypeVar("T")
D = TypeVar("D")

LabelProvider = Callable[[Any], str]

DEFAULT_LABEL = "subject"

_assertions_begun = 0


def _default_label_provider(subject: Any) -> str:
    return DEFAULT_LABEL


_label_provider: LabelProvider = _default_label_provider


def set_label_provider(func: LabelProvider) -> None:
    """Install the callable that names subjects passed to should() without a label."""
    global _label_provider
    _label_provider = func


def get_label_provider() -> LabelProvider:
    return _label_provider


def reset_label_provider() -> None:
    global _label_provider
    _label_provider = _default_label_provider


def assertion_count() -> int:
    """Number of assertions begun in this process."""
    return _assertions_begun


@dataclass(frozen=True)
class AssertionContext:
    """Returned by Testable.assert_(); identifies one assertion invocation."""

    sequence: int
    label: str


class Testable(Generic[T]):
    """A subject under test bound to the label shown in failure messages.

    Assertions are attached to this class through
    :func:`shouldbe.extensions.assertion`.
    """

    __slots__ = ("_subject", "_label", "_begun")

    def __init__(self, subject: T, label: str) -> None:
        if not label or not label.strip():
            raise ValueError("Testable label must be a non-empty string")
        self._subject = subject
        self._label = label
        self._begun = 0

    @property
    def subject(self) -> T:
        return self._subject

    @property
    def label(self) -> str:
        return self._label

    @property
    def assertions_begun(self) -> int:
        return self._begun

    def assert_(self) -> AssertionContext:
        """Mark the start of an assertion. Every assertion body calls this first."""
        global _assertions_begun
        self._begun += 1
        _assertions_begun += 1
        sequence = _assertions_begun
        logger.debug(f"Assertion #{sequence} on {self._label}")
        return AssertionContext(sequence=sequence, label=self._label)

    def fail(self, template: str, because: str = "", *formatted_args: str) -> NoReturn:
        """Raise AssertionFailedException with *template* expanded for this subject."""
        context = TemplateContext(
            subject=self._label,
            actual=format_value(self._subject),
            because=because_clause(because),
        )
        message = expand(template, context, formatted_args)
        logger.debug(f"Assertion failed on {self._label}:\n{message}")
        raise AssertionFailedException(message)

    def __repr__(self) -> str:
        return f"Testable({self._label}={format_value(self._subject)})"


class And(Generic[T]):
    """Continuation returned by a passing assertion."""

    __slots__ = ("_testable",)

    def __init__(self, testable: Testable[T]) -> None:
        self._testable = testable

    @property
    def and_(self) -> Testable[T]:
        return self._testable

    @property
    def subject(self) -> T:
        return self._testable.subject

    @property
    def label(self) -> str:
        return self._testable.label


class AndDerived(And[T], Generic[T, D]):
    """Continuation that also exposes a value derived by the assertion."""

    __slots__ = ("_derived",)

    def __init__(self, testable: Testable[T], derived: D) -> None:
        super().__init__(testable)
        self._derived = derived

    @property
    def that(self) -> D:
        return self._derived


def should(subject: T, label: str | None = None) -> Testable[T]:
    """Wrap *subject* for assertions.

    Pass the expression text as *label* (``should(x, "x")``). Without one the
    installed label provider names the subject.
    """
    if label is None:
        label = _label_provider(subject)
    return Testable(subject, label)
