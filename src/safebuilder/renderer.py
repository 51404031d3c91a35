"""Tag rendering.

Renders one tag call into the builder's shared MarkupBuffer:

1. ``<`` + qualified tag name
2. attributes in mapping order (``None`` value = valueless attribute)
3. ``>``, tentatively; the body may still arrive
4. the body: the content item, or whatever the body callback writes
5. ``</tag>``, or ``/>`` in place of the ``>`` when self-closing applies
6. a newline when indenting

Iteration:
    Without a body callback the tag is rendered once per content item::

        b.li([1, 2])  ->  <li>1</li>\\n<li>2</li>\\n

    With a body callback the tag is rendered once and the callback fires
    once per content item::

        b.ul([1, 2], lambda b: b.li("x"))  ->  <ul><li>x</li>\\n<li>x</li>\\n</ul>\\n

Self-closing is decided per rendered tag. A tag has no body when its
content item is None, or, with a callback, when the callbacks wrote nothing
and returned no string. Empty-string content counts as a body.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from safebuilder.buffer import MarkupBuffer
from safebuilder.config import BuilderConfig, TagOptions, qualify
from safebuilder.content import is_string_like, iter_items, to_text
from safebuilder.safe import TEXT, quote_attribute

if TYPE_CHECKING:
    from safebuilder.builder import SafeBuilder

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TagCall:
    """One tag invocation, consumed by a single render_tag pass.

    Attributes:
        tag: Unqualified tag name
        content: None, a scalar, or an iterable of items
        attributes: Attribute mapping, in output order
        options: Per-call option overrides
        body: Callback receiving the builder, or None
    """

    tag: str
    content: Any = None
    attributes: Mapping[str, Any] | None = None
    options: TagOptions = TagOptions()
    body: Callable[[SafeBuilder], Any] | None = None


def render_tag(
    builder: SafeBuilder,
    buffer: MarkupBuffer,
    config: BuilderConfig,
    call: TagCall,
) -> MarkupBuffer:
    """Render call into buffer.

    Args:
        builder: Builder passed to the body callback
        buffer: Shared output buffer
        config: Builder-wide configuration
        call: The tag call to render

    Returns:
        The shared buffer

    Raises:
        UnsupportedContentTypeError: If a content item has no textual form
    """
    resolved = config.merge(call.options)
    name = qualify(call.tag, resolved.namespace)
    items = iter_items(call.content)

    if call.body is not None:
        _render_one(builder, buffer, resolved, name, call, items)
    else:
        for item in items:
            _render_one(builder, buffer, resolved, name, call, (item,))
    return buffer


def _render_one(
    builder: SafeBuilder,
    buffer: MarkupBuffer,
    config: BuilderConfig,
    name: str,
    call: TagCall,
    items: Any,
) -> None:
    buffer.append("<").append(name)
    if call.attributes:
        _render_attributes(buffer, call.attributes)
    buffer.append(">")
    mark = buffer.length

    if call.body is not None:
        has_body = _render_callback(builder, buffer, call.body, items)
    else:
        has_body = False
        for item in items:
            if item is not None:
                buffer.append_safe(to_text(item, call.tag), TEXT)
                has_body = True

    if config.selfclose and not has_body and buffer.length == mark:
        logger.debug("Self-closing <%s>", name)
        buffer.replace_tail(">", "/>")
    else:
        buffer.append("</").append(name).append(">")

    if config.indent:
        buffer.append("\n")


def _render_attributes(buffer: MarkupBuffer, attributes: Mapping[str, Any]) -> None:
    for key, value in attributes.items():
        buffer.append(" ").append_safe(key, TEXT)
        if value is not None:
            buffer.append("=").append(str(quote_attribute(value)))


def _render_callback(
    builder: SafeBuilder,
    buffer: MarkupBuffer,
    body: Callable[[SafeBuilder], Any],
    items: Any,
) -> bool:
    """Invoke body once per item; return True if a string result was appended."""
    has_body = False
    for _item in items:
        result = body(builder)
        if result is None or result is buffer or result is builder:
            continue
        # a copy of the builder's own output, e.g. b.output()
        if result == buffer:
            continue
        if is_string_like(result):
            buffer.append_safe(result, TEXT)
            has_body = True
    return has_body


__all__ = ["TagCall", "render_tag"]
