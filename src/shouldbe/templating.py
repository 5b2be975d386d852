"""Failure-message templates.

A template is plain text with a closed set of placeholders:

    {subject}   the subject's label, inserted as-is
    {actual}    the formatted subject value
    {because}   "" or "because <reason>, "
    {0}, {1}..  author-supplied, already formatted arguments

Anything else in braces that is not a plain identifier or index is copied
through untouched.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

_NAMED = frozenset({"subject", "actual", "because"})
_PLACEHOLDER = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*|[0-9]+)\}")


@dataclass(frozen=True)
class TemplateContext:
    """Values for the named placeholders of a template."""

    subject: str
    actual: str
    because: str = ""


def because_clause(reason: str | None) -> str:
    if not reason:
        return ""
    return f"because {reason}, "


def expand(template: str, context: TemplateContext, args: Sequence[str] = ()) -> str:
    """Expand *template* against *context* and positional *args*.

    Raises ValueError for an unknown named placeholder and IndexError for a
    positional placeholder with no matching argument.
    """
    parts: list[str] = []
    pos = 0
    for match in _PLACEHOLDER.finditer(template):
        parts.append(template[pos : match.start()])
        key = match.group(1)
        if key.isdigit():
            index = int(key)
            if index >= len(args):
                raise IndexError(
                    f"Template references {{{index}}} but only {len(args)} argument(s) were supplied"
                )
            parts.append(args[index])
        elif key in _NAMED:
            parts.append(getattr(context, key))
        else:
            raise ValueError(f"Unknown template placeholder '{{{key}}}'")
        pos = match.end()
    parts.append(template[pos:])

    text = "".join(parts)
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return text.strip()
