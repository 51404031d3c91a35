"""SafeBuilder: markup generation by method call.

Any public attribute of a SafeBuilder is a tag::

    >>> b = SafeBuilder(indent=False)
    >>> b.p("Fish & Chips", {"class": "menu"})
    MarkupBuffer('<p class="menu">Fish &amp; Chips</p>')
    >>> b.br()
    MarkupBuffer('<p class="menu">Fish &amp; Chips</p><br/>')

Content is escaped unless it is already safe (``__html__``), so the output
of one builder, or a ``markupsafe.Markup`` value, nests without being
escaped twice.

Names that collide with builder methods, or with Python keywords, take a
trailing underscore: ``b.del_()``, ``b.text_()``, ``b.output_()``. Tag
names that are not identifiers go through ``b.tag("my-tag")``.

Every tag call returns the builder's shared buffer, so the result of a
nested call inside a body callback is recognized and not appended again.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import asdict
from typing import Any

from markupsafe import Markup

from safebuilder.buffer import MarkupBuffer
from safebuilder.config import OPTION_KEYS, BuilderConfig, TagOptions, split_options
from safebuilder.content import resolve_arguments, split_body, to_text
from safebuilder.errors import InvalidArgumentsError
from safebuilder.renderer import TagCall, render_tag
from safebuilder.safe import TEXT, is_safe
logger = logging.getLogger(__name__)


class SafeBuilder:
    """Builds escaped markup into a single shared buffer.

    Args:
        options: Mapping or BuilderConfig; recognized keys are
            ``namespace``, ``selfclose`` and ``indent``
        **kwargs: Same keys as keyword arguments (override options)

    Unknown option keys are ignored.

    Thread Safety:
        Not thread-safe. Build each document from a single thread.
    """

    __slots__ = ("_buffer", "_config")

    def __init__(
        self, options: Mapping[str, Any] | BuilderConfig | None = None, /, **kwargs: Any
    ) -> None:
        if isinstance(options, BuilderConfig):
            options = asdict(options)
        merged = {**(options or {}), **kwargs}
        ignored = sorted(set(merged) - OPTION_KEYS)
        if ignored:
            logger.debug("Ignoring unknown builder options: %s", ", ".join(ignored))
        self._buffer = MarkupBuffer()
        self._config = BuilderConfig.from_dict(merged)

    @property
    def config(self) -> BuilderConfig:
        """Builder-wide configuration (immutable)."""
        return self._config

    @property
    def buffer(self) -> MarkupBuffer:
        """The shared output buffer."""
        return self._buffer

    def __getattr__(self, name: str) -> Callable[..., MarkupBuffer]:
        """Return a callable rendering the tag called name."""
        if name.startswith("_"):
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )
        tag = name[:-1] if name.endswith("_") else name

        def render(*args: Any, **kwargs: Any) -> MarkupBuffer:
            return self.tag(tag, *args, **kwargs)

        render.__name__ = tag
        return render

    def tag(
        self,
        name: str,
        /,
        *args: Any,
        namespace: str | None = None,
        selfclose: bool | None = None,
        indent: bool | None = None,
        **attributes: Any,
    ) -> MarkupBuffer:
        """Render the tag called name.

        Args:
            name: Tag name (without namespace prefix)
            *args: ``[content] [attributes] [body]``; attributes is a mapping,
                body a callable receiving this builder (a class passed
                last is content, not a body)
            namespace: Per-call namespace prefix
            selfclose: Per-call self-closing switch
            indent: Per-call newline switch
            **attributes: More attributes; one trailing underscore is
                stripped from each name (``class_`` -> ``class``)

        Returns:
            The shared buffer holding everything rendered so far

        Raises:
            InvalidArgumentsError: If the positional arguments do not fit
            UnsupportedContentTypeError: If content has no textual form
        """
        if not isinstance(name, str) or not name:
            raise InvalidArgumentsError(
                None, f"tag name must be a non-empty string, got {name!r}"
            )
        args, body = split_body(args)
        content, mapping = resolve_arguments(name, args)
        attrs, options = split_options(mapping)
        for key, value in attributes.items():
            attrs[key[:-1] if key.endswith("_") else key] = value
        options = TagOptions(
            namespace=namespace if namespace is not None else options.namespace,
            selfclose=selfclose if selfclose is not None else options.selfclose,
            indent=indent if indent is not None else options.indent,
        )
        call = TagCall(
            tag=name, content=content, attributes=attrs, options=options, body=body
        )
        return render_tag(self, self._buffer, self._config, call)

    def append_raw(self, text: Any) -> MarkupBuffer:
        """Append trusted markup verbatim, without escaping."""
        self._buffer.append(text.__html__() if is_safe(text) else str(text))
        return self._buffer

    def text(self, value: Any) -> MarkupBuffer:
        """Append value as text, escaped unless it is already safe."""
        if value is not None:
            self._buffer.append_safe(to_text(value), TEXT)
        return self._buffer

    def __lshift__(self, value: Any) -> SafeBuilder:
        self.text(value)
        return self

    def output(self) -> Markup:
        """Return everything rendered so far, marked safe."""
        return self._buffer.build()

    # Builder::XmlMarkup name for output()
    target = output

    def reset(self) -> SafeBuilder:
        """Discard the accumulated output. The configuration is kept."""
        self._buffer.clear()
        return self

    def __html__(self) -> str:
        return self._buffer.__html__()

    def __str__(self) -> str:
        return str(self._buffer)

    def __repr__(self) -> str:
        return f"SafeBuilder({self._config!r}, {self._buffer.__html__()!r})"
