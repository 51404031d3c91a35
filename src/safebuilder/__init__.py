"""
SafeBuilder: escaping-aware HTML/XML builder

Build markup by calling tag-named methods. Content is escaped on insertion
unless it is already marked safe (``__html__``, e.g. ``markupsafe.Markup``),
and the output is itself marked safe, so builders compose with each other
and with Jinja2 templates without double escaping.

Quick Start:
    >>> from safebuilder import SafeBuilder
    >>> b = SafeBuilder(indent=False)
    >>> b.a("Tom & Jerry", {"href": "/cartoons?id=1&sort=asc"})
    >>> b.output()
    Markup('<a href="/cartoons?id=1&amp;sort=asc">Tom &amp; Jerry</a>')

    >>> # Iterable content renders the tag once per item
    >>> SafeBuilder(indent=False).li(["a", "b"]).build()
    Markup('<li>a</li><li>b</li>')

    >>> # A body callback renders the tag once and fires once per item
    >>> b = SafeBuilder(indent=False)
    >>> b.ul([1, 2], lambda b: b.li("item"))
    >>> b.output()
    Markup('<ul><li>item</li><li>item</li></ul>')

    >>> # Namespaces and valueless attributes
    >>> SafeBuilder(namespace="x", indent=False).input({"disabled": None}).build()
    Markup('<x:input disabled/>')

Installation:
    pip install safebuilder
"""

from safebuilder.buffer import MarkupBuffer
from safebuilder.builder import SafeBuilder
from safebuilder.config import BuilderConfig, TagOptions
from safebuilder.errors import (
    InvalidArgumentsError,
    SafeBuilderError,
    UnsupportedContentTypeError,
)
from safebuilder.renderer import TagCall, render_tag
from safebuilder.safe import escape_attribute, escape_text, is_safe

__version__ = "0.1.0"

__all__ = [
    "BuilderConfig",
    "InvalidArgumentsError",
    "MarkupBuffer",
    "SafeBuilder",
    "SafeBuilderError",
    "TagCall",
    "TagOptions",
    "UnsupportedContentTypeError",
    "__version__",
    "escape_attribute",
    "escape_text",
    "is_safe",
    "render_tag",
]
