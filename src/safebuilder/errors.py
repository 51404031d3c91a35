"""Exception classes for SafeBuilder.

Errors are surfaced to the caller and never recovered: a failing tag call
aborts the build and leaves the buffer with whatever it held at that point.
"""

from __future__ import annotations


class SafeBuilderError(Exception):
    """Base exception for all SafeBuilder errors.

    Subclass this for specific error categories.
    """

    pass


class InvalidArgumentsError(SafeBuilderError, TypeError):
    """Tag called with arguments that do not fit its signature.

    Raised for more positional arguments than the content/attribute-set
    pair, or a non-mapping where an attribute set is expected.
    """

    def __init__(self, tag: str | None, message: str) -> None:
        """Initialize invalid arguments error.

        Args:
            tag: Name of the tag being rendered (None if not yet known)
            message: Description of the problem
        """
        self.tag = tag
        prefix = f"<{tag}>: " if tag else ""
        super().__init__(f"{prefix}{message}")


class UnsupportedContentTypeError(SafeBuilderError, TypeError):
    """Content value that has no textual form.

    Raised at the point where an item is converted to text, e.g. bytes,
    a mapping inside an iterable, or an object without its own ``__str__``.
    """

    def __init__(self, tag: str | None, value: object) -> None:
        """Initialize unsupported content error.

        Args:
            tag: Name of the tag being rendered (None outside a tag)
            value: The offending content value
        """
        self.tag = tag
        self.value_type = type(value)
        where = f" in <{tag}>" if tag else ""
        super().__init__(
            f"Unsupported content type{where}: {self.value_type.__name__}"
        )
