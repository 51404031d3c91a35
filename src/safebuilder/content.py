"""Classification of tag call arguments and content values.

A tag call accepts up to three positional arguments::

    b.div()                          # no content, no attributes
    b.div("text")                    # content
    b.div({"id": "x"})               # attributes only
    b.div("text", {"id": "x"})       # content and attributes
    b.ul([1, 2], lambda b: b.li())   # content and body callback

The attribute set is decided by type when it is the first argument and by
position otherwise: after content, only a mapping is accepted.

Strings are always scalar content even though they are iterable.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from numbers import Number
from typing import Any

from safebuilder.errors import InvalidArgumentsError, UnsupportedContentTypeError
from safebuilder.safe import is_safe

logger = logging.getLogger(__name__)

# Iterable types that are never expanded item by item
_SCALAR_TYPES = (str, bytes, bytearray, memoryview)


def split_body(
    args: tuple[Any, ...],
) -> tuple[tuple[Any, ...], Callable[..., Any] | None]:
    """Detach a trailing body callback from the positional arguments.

    Classes are callable but never treated as a body; they stay content.

    Args:
        args: Positional arguments of the tag call

    Returns:
        Tuple of (remaining args, body callback or None)
    """
    body = args[-1] if args else None
    if callable(body) and not isinstance(body, type) and not is_safe(body):
        return args[:-1], args[-1]
    return args, None


def resolve_arguments(
    tag: str, args: tuple[Any, ...]
) -> tuple[Any, Mapping[str, Any] | None]:
    """Split positional arguments into content and attribute set.

    Args:
        tag: Tag name, for error messages
        args: Positional arguments with the body callback already removed

    Returns:
        Tuple of (content or None, attribute mapping or None)

    Raises:
        InvalidArgumentsError: More than one content and one attribute
            argument, or a non-mapping in the attribute position
    """
    if not args:
        return None, None
    if len(args) > 2:
        logger.debug("Rejecting %d positional arguments for <%s>", len(args), tag)
        raise InvalidArgumentsError(
            tag, f"expected at most 2 positional arguments, got {len(args)}"
        )

    first = args[0]
    if isinstance(first, Mapping):
        if len(args) > 1:
            raise InvalidArgumentsError(
                tag, "content cannot follow the attribute set"
            )
        return None, first

    if len(args) == 1:
        return first, None

    attributes = args[1]
    if not isinstance(attributes, Mapping):
        raise InvalidArgumentsError(
            tag,
            f"attribute set must be a mapping, got {type(attributes).__name__}",
        )
    return first, attributes


def is_iterable_content(value: Any) -> bool:
    """Return True if value should render one item at a time.

    Strings, bytes, safe markup and mappings are never expanded.
    """
    if value is None or isinstance(value, _SCALAR_TYPES) or is_safe(value):
        return False
    if isinstance(value, Mapping):
        return False
    return isinstance(value, Iterable)


def iter_items(content: Any) -> Iterable[Any]:
    """Return the items to render for content.

    Absent content yields a single ``None`` so the tag renders once.
    """
    if is_iterable_content(content):
        return content
    return (content,)


def to_text(item: Any, tag: str | None = None) -> Any:
    """Convert a content item to its textual form.

    Strings and safe values are returned unchanged so that the escape
    primitive can tell them apart. Numbers and objects with their own
    ``__str__`` are converted with ``str()``.

    Args:
        item: Content item (not None)
        tag: Tag name, for error messages

    Returns:
        A ``str`` or a safe value

    Raises:
        UnsupportedContentTypeError: If item has no textual form
    """
    if isinstance(item, str) or is_safe(item):
        return item
    if isinstance(item, Number):
        return str(item)
    if isinstance(item, (bytes, bytearray, memoryview, Mapping)):
        raise UnsupportedContentTypeError(tag, item)
    if isinstance(item, Iterable):
        raise UnsupportedContentTypeError(tag, item)
    if type(item).__str__ is object.__str__:
        raise UnsupportedContentTypeError(tag, item)
    return str(item)


def is_string_like(value: Any) -> bool:
    """Return True for plain strings and safe markup."""
    return isinstance(value, str) or is_safe(value)


__all__ = [
    "is_iterable_content",
    "is_string_like",
    "iter_items",
    "resolve_arguments",
    "split_body",
    "to_text",
]
