"""MarkupBuffer: append-only accumulator of escaped markup.

Follows the StringBuilder pattern: segments are appended to a list and
joined once when the output is requested, O(n) total instead of O(n²)
for repeated string concatenation.

Every segment in the buffer is either structural syntax written by the
renderer (``<``, tag names, ``/>``) or a value that went through the
escape primitive on insertion. No raw user content is ever stored.

Thread Safety:
    A MarkupBuffer belongs to exactly one SafeBuilder. Nested tag calls
    write to the same instance; it is not meant to be shared across threads.

"""

from __future__ import annotations

from typing import Any

from markupsafe import Markup

from safebuilder.safe import TEXT, escape_for


class MarkupBuffer:
    """Append-only buffer whose output is marked safe.

    Usage:
            >>> buf = MarkupBuffer()
            >>> buf.append("<p>").append_safe("a < b").append("</p>")
            >>> buf.build()
            Markup('<p>a &lt; b</p>')

    The buffer implements ``__html__`` so it can be embedded into other
    markup (another builder, a Jinja2 template) without being escaped again.
    """

    __slots__ = ("_parts", "_length")

    def __init__(self) -> None:
        """Initialize empty MarkupBuffer."""
        self._parts: list[str] = []
        self._length = 0

    def append(self, s: str) -> MarkupBuffer:
        """Append structural markup without escaping.

        Only for syntax the renderer knows to be safe: angle brackets,
        tag names, ``="`` separators, newlines.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
            self._length += len(s)
        return self

    def append_safe(self, value: Any, context: str = TEXT) -> MarkupBuffer:
        """Append a value, escaping it unless it is already safe.

        Args:
            value: Safe (``__html__``) or raw value
            context: ``"text"`` or ``"attribute"``

        Returns:
            self for method chaining

        Raises:
            ValueError: If context is unknown
        """
        return self.append(str(escape_for(context, value)))

    def replace_tail(self, old: str, new: str) -> MarkupBuffer:
        """Replace the last appended segment.

        Used to turn a tentatively open ``>`` into ``/>``.

        Args:
            old: Expected value of the last segment
            new: Replacement

        Returns:
            self for method chaining

        Raises:
            ValueError: If the last segment is not old
        """
        if not self._parts or self._parts[-1] != old:
            raise ValueError(f"Buffer does not end with {old!r}")
        self._parts[-1] = new
        self._length += len(new) - len(old)
        return self

    @property
    def length(self) -> int:
        """Total number of characters appended so far."""
        return self._length

    def build(self) -> Markup:
        """Join all segments into the final output.

        Returns:
            Concatenated output, marked safe
        """
        return Markup("".join(self._parts))

    def clear(self) -> MarkupBuffer:
        """Clear all accumulated segments.

        Returns:
            self for method chaining
        """
        self._parts.clear()
        self._length = 0
        return self

    def __html__(self) -> str:
        return "".join(self._parts)

    def __str__(self) -> str:
        return "".join(self._parts)

    def __repr__(self) -> str:
        return f"MarkupBuffer({self.__html__()!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MarkupBuffer):
            return self.__html__() == other.__html__()
        if isinstance(other, str):
            return self.__html__() == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        """Return total character count (not number of segments)."""
        return self._length

    def __bool__(self) -> bool:
        """Return True if anything has been appended."""
        return self._length > 0
