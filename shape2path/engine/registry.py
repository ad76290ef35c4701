"""Converter registry — every shape converter is a function registered via decorator.

Usage:
    @converter(kinds=("circle",), strip=("cx", "cy", "r"))
    def circle_to_path(attributes, kind, options) -> str:
        ...

The dispatcher looks converters up by lower-cased tag name. Adding a shape =
writing one decorated function. Nothing else changes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from shape2path.models.options import AttributeCleanup, ConversionOptions

logger = logging.getLogger(__name__)

ConverterFn = Callable[[Mapping[str, str], str, ConversionOptions], str]


@dataclass
class ConverterSpec:
    kinds: tuple[str, ...]
    fn: ConverterFn
    # Attributes removed from the replacement path, per cleanup mode
    strip: tuple[str, ...] = ()
    strict_strip: tuple[str, ...] | None = None
    description: str = ""

    def attributes_to_strip(self, cleanup: AttributeCleanup) -> tuple[str, ...]:
        if cleanup is AttributeCleanup.STRICT and self.strict_strip is not None:
            return self.strict_strip
        return self.strip


class ConverterRegistry:
    """Singleton registry of all shape converters."""

    def __init__(self) -> None:
        self._converters: dict[str, ConverterSpec] = {}

    def register(self, spec: ConverterSpec) -> None:
        for kind in spec.kinds:
            if kind in self._converters:
                raise ValueError(f"Duplicate converter for shape kind: {kind}")
        for kind in spec.kinds:
            self._converters[kind] = spec
        logger.debug("Registered converter %s for %s", spec.fn.__name__, ", ".join(spec.kinds))

    def get(self, kind: str) -> ConverterSpec | None:
        return self._converters.get(kind)

    @property
    def kinds(self) -> list[str]:
        return sorted(self._converters)

    @property
    def count(self) -> int:
        return len({id(spec) for spec in self._converters.values()})


# Module-level singleton
_registry = ConverterRegistry()


def get_registry() -> ConverterRegistry:
    return _registry


def converter(
    *,
    kinds: tuple[str, ...],
    strip: tuple[str, ...] = (),
    strict_strip: tuple[str, ...] | None = None,
    description: str = "",
    registry: ConverterRegistry | None = None,
):
    """Decorator to register a shape converter."""

    def decorator(fn: ConverterFn) -> ConverterFn:
        spec = ConverterSpec(
            kinds=kinds,
            fn=fn,
            strip=strip,
            strict_strip=strict_strip,
            description=description,
        )
        (registry or _registry).register(spec)
        return fn

    return decorator
