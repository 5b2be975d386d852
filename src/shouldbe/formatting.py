"""Canonical text rendering of subjects, expected and actual values."""

from __future__ import annotations

import logging
from decimal import Decimal
from fractions import Fraction
from typing import Any, Callable

logger = logging.getLogger(__name__)

Formatter = Callable[[Any], str]


class FormatterRegistry:
    """Process-wide mapping of runtime type -> custom formatter.

    Populated once at startup and read by every assertion afterwards.
    Once frozen, further registration is rejected.
    """

    def __init__(self) -> None:
        self._formatters: dict[type, Formatter] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, cls: type, func: Formatter) -> None:
        if self._frozen:
            raise RuntimeError(
                f"Formatter registry is frozen; cannot register formatter for '{cls.__qualname__}'"
            )
        if not isinstance(cls, type):
            raise TypeError(f"Formatters are keyed by type, got {cls!r}")
        self._formatters[cls] = func
        logger.info(f"Registered formatter for {cls.__module__}.{cls.__qualname__}")

    def lookup(self, cls: type) -> Formatter | None:
        # Exact type first, then the nearest registered base class.
        for base in cls.__mro__:
            func = self._formatters.get(base)
            if func is not None:
                return func
        return None

    def freeze(self) -> None:
        self._frozen = True

    def clear(self) -> None:
        self._formatters.clear()
        self._frozen = False

    def registered_types(self) -> list[type]:
        return list(self._formatters)


formatters = FormatterRegistry()


def register_formatter(cls: type, func: Formatter) -> None:
    """Register *func* as the formatter for instances of *cls*."""
    formatters.register(cls, func)


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def format_value(value: Any) -> str:
    """Render *value* as display text for failure messages.

    Custom formatters take precedence over every built-in rule, so a
    registered formatter for ``str`` or ``int`` replaces the default.
    A container that contains itself renders the repeat as ``[...]`` or
    ``{...}``, as ``repr`` does.
    """
    return _format(value, frozenset())


def _format(value: Any, active: frozenset[int]) -> str:
    if value is None:
        return "null"

    custom = formatters.lookup(type(value))
    if custom is not None:
        return custom(value)

    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, (int, Decimal, Fraction)):
        return str(value)
    if isinstance(value, (dict, list, tuple, set, frozenset)):
        return _format_container(value, active)

    return repr(value)


def _format_container(value: Any, active: frozenset[int]) -> str:
    is_list = isinstance(value, (list, tuple))
    if id(value) in active:
        return "[...]" if is_list else "{...}"
    active = active | {id(value)}

    if isinstance(value, dict):
        items = ", ".join(f"{_format(k, active)}: {_format(v, active)}" for k, v in value.items())
        return "{" + items + "}"
    if is_list:
        return "[" + ", ".join(_format(v, active) for v in value) + "]"
    return "{" + ", ".join(sorted(_format(v, active) for v in value)) + "}"
