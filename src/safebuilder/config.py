"""Builder configuration and per-call option resolution.

A SafeBuilder is configured once at construction. Individual tag calls can
override any option for that call only; the builder's configuration is never
mutated.

Resolution order for each option:
    per-call value (if not None) > builder-wide value > system default

Usage:
    >>> config = BuilderConfig.from_dict({"namespace": "svg", "colour": "red"})
    >>> config.namespace
    'svg'
    >>> config.merge(TagOptions(namespace="xlink")).namespace
    'xlink'
    >>> qualify("rect", "svg")
    'svg:rect'

"""

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

OPTION_KEYS = frozenset({"namespace", "selfclose", "indent"})


@dataclass(frozen=True, slots=True)
class BuilderConfig:
    """Immutable builder-wide configuration.

    Attributes:
        namespace: Prefix applied to every tag (``ns:tag``), None for none
        selfclose: Render empty tags as ``<tag/>``
        indent: Insert a newline after every closed tag

    """

    namespace: str | None = None
    selfclose: bool = True
    indent: bool = True

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "BuilderConfig":
        """Create BuilderConfig from a mapping.

        Only keys that are BuilderConfig fields are used; unknown keys are
        silently ignored. None values fall back to the defaults.

        Args:
            config_dict: Mapping with config values

        Returns:
            New BuilderConfig instance

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {
            k: v for k, v in config_dict.items() if k in valid_fields and v is not None
        }
        return cls(**filtered)

    def merge(self, options: "TagOptions") -> "BuilderConfig":
        """Return the configuration in effect for one tag call.

        Args:
            options: Per-call overrides

        Returns:
            New BuilderConfig with every given override applied
        """
        overrides = {
            f.name: getattr(options, f.name)
            for f in fields(options)
            if getattr(options, f.name) is not None
        }
        if not overrides:
            return self
        return replace(self, **overrides)


@dataclass(frozen=True, slots=True)
class TagOptions:
    """Per-call option overrides. None means "not given"."""

    namespace: str | None = None
    selfclose: bool | None = None
    indent: bool | None = None


def split_options(
    attributes: Mapping[str, Any] | None,
) -> tuple[dict[str, Any], TagOptions]:
    """Separate option keys from attributes.

    The keys ``namespace``, ``selfclose`` and ``indent`` are options; every
    other entry is an attribute and keeps its position.

    Args:
        attributes: Combined per-call mapping (may be None)

    Returns:
        Tuple of (attribute dict, TagOptions)
    """
    if not attributes:
        return {}, TagOptions()
    attrs: dict[str, Any] = {}
    options: dict[str, Any] = {}
    for key, value in attributes.items():
        if key in OPTION_KEYS:
            options[key] = value
        else:
            attrs[key] = value
    return attrs, TagOptions(**options)


def qualify(tag: str, namespace: str | None) -> str:
    """Prefix tag with namespace when one is resolved."""
    if namespace:
        return f"{namespace}:{tag}"
    return tag


__all__ = [
    "BuilderConfig",
    "OPTION_KEYS",
    "TagOptions",
    "qualify",
    "split_options",
]
