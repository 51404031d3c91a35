"""Safe-string primitives built on markupsafe.

A value is either *escaped* (it implements the ``__html__`` protocol, like
``markupsafe.Markup``, a ``MarkupBuffer`` or a ``SafeBuilder``) or *raw*
(everything else). Escaped values are trusted and pass through unchanged;
raw values are escaped exactly once on their way into the output.

Example:
    >>> from safebuilder.safe import escape_text, quote_attribute
    >>> escape_text("<b>")
    Markup('&lt;b&gt;')
    >>> escape_text(Markup("<b>"))
    Markup('<b>')
    >>> quote_attribute('say "hi"')
    Markup('"say &#34;hi&#34;"')
"""

from __future__ import annotations

from typing import Any

from markupsafe import Markup, escape

TEXT = "text"
ATTRIBUTE = "attribute"


def is_safe(value: object) -> bool:
    """Return True if value is already marked safe (has ``__html__``)."""
    return hasattr(value, "__html__")


def escape_text(value: Any) -> Markup:
    """Escape value for use as element text.

    Safe values are returned as Markup without being escaped again.
    """
    return escape(value)


def escape_attribute(value: Any) -> Markup:
    """Escape value for use inside a double-quoted attribute.

    markupsafe escapes both quote characters, so the same primitive serves
    text and attribute contexts. Non-string raw values go through ``str()``.
    """
    if is_safe(value):
        return Markup(value.__html__())
    return escape(str(value))


def quote_attribute(value: Any) -> Markup:
    """Return the serialized attribute value, quotes included."""
    return Markup('"') + escape_attribute(value) + Markup('"')


def escape_for(context: str, value: Any) -> Markup:
    """Dispatch to the escape primitive for context.

    Raises:
        ValueError: If context is not ``"text"`` or ``"attribute"``
    """
    if context == TEXT:
        return escape_text(value)
    if context == ATTRIBUTE:
        return escape_attribute(value)
    raise ValueError(f"Unknown escaping context: {context!r}")


__all__ = [
    "ATTRIBUTE",
    "Markup",
    "TEXT",
    "escape_attribute",
    "escape_for",
    "escape_text",
    "is_safe",
    "quote_attribute",
]
