"""Attaching assertion functions to Testable.

An assertion is a plain function whose first parameter is the Testable::

    @assertion
    def not_invade(t: Testable[str], target: str, because: str = "") -> And[str]:
        t.assert_()
        if t.subject == "Russia" and target == "Ukraine":
            t.fail("...{subject}...{0}...{because}...{actual}", because, format_value(target))
        return And(t)

Once decorated it is callable fluently: ``should(country, "country").not_invade("Ukraine")``.
Built-in assertions are registered the same way.
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar, overload

from shouldbe.testable import Testable

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable)

_registered: dict[str, Callable] = {}


def _attach(func: F, name: str, replace: bool) -> F:
    if not name.isidentifier() or name.startswith("_"):
        raise ValueError(f"Invalid assertion name '{name}'")
    if hasattr(Testable, name) and not (replace and name in _registered):
        raise ValueError(f"Testable already has an attribute named '{name}'")
    setattr(Testable, name, func)
    _registered[name] = func
    logger.debug(f"Registered assertion '{name}' from {func.__module__}")
    return func


@overload
def assertion(func: F) -> F: ...


@overload
def assertion(*, name: str | None = None, replace: bool = False) -> Callable[[F], F]: ...


def assertion(func=None, *, name=None, replace=False):
    """Register *func* as an assertion method on Testable.

    Usable bare (``@assertion``) or with options (``@assertion(name="be_positive")``).
    Raises ValueError if the name is already taken, unless *replace* is set and
    the existing attribute is itself a registered assertion.
    """

    def decorator(f):
        return _attach(f, name or f.__name__, replace)

    if func is not None:
        return decorator(func)
    return decorator


def registered_assertions() -> list[str]:
    """Names of every assertion attached to Testable, in registration order."""
    return list(_registered)


def unregister_assertion(name: str) -> Callable:
    """Detach a registered assertion from Testable and return its function."""
    if name not in _registered:
        raise ValueError(f"No registered assertion named '{name}'")
    delattr(Testable, name)
    logger.debug(f"Unregistered assertion '{name}'")
    return _registered.pop(name)
