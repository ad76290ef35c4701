"""Per-call conversion options."""

from __future__ import annotations

import enum
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from shape2path.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_CIRCLE_SEGMENTS = 8


class CircleAlgorithm(str, enum.Enum):
    """How circles and ellipses are drawn."""

    TWO_ARCS = "TwoArcs"
    CUBIC_BEZIER = "CubicBezier"
    QUAD_BEZIER = "QuadBezier"

    @classmethod
    def resolve(cls, value: Any) -> CircleAlgorithm:
        """Map a name or member to an algorithm; anything unknown is TwoArcs."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            if value not in (None, ""):
                logger.warning("Unknown circle algorithm %r, using %s", value, cls.TWO_ARCS.value)
            return cls.TWO_ARCS


class AttributeCleanup(str, enum.Enum):
    """Which shape attributes are dropped from the replacement path.

    ``legacy`` keeps rect geometry attributes on the path and strips the
    circle names ``cx``/``cy``/``r`` from it instead. ``strict`` strips every
    attribute that only made sense on the original shape.
    """

    LEGACY = "legacy"
    STRICT = "strict"


class ConversionOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    circle_algorithm: CircleAlgorithm = Field(
        default=CircleAlgorithm.TWO_ARCS,
        alias="circleAlgorithm",
        description="TwoArcs, CubicBezier or QuadBezier",
    )
    circle_segments: int = Field(
        default=DEFAULT_CIRCLE_SEGMENTS,
        gt=0,
        alias="circleSegments",
        description="Number of quadratic segments (QuadBezier only)",
    )
    attribute_cleanup: AttributeCleanup = Field(
        default=AttributeCleanup.LEGACY,
        alias="attributeCleanup",
    )

    @field_validator("circle_algorithm", mode="before")
    @classmethod
    def _resolve_algorithm(cls, value: Any) -> CircleAlgorithm:
        return CircleAlgorithm.resolve(value)

    @field_validator("circle_segments", mode="before")
    @classmethod
    def _default_segments(cls, value: Any) -> Any:
        # 0 and missing both mean "use the default"
        return value or DEFAULT_CIRCLE_SEGMENTS

    @classmethod
    def coerce(cls, options: ConversionOptions | Mapping[str, Any] | None) -> ConversionOptions:
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.model_validate(dict(options))

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> ConversionOptions:
        """Defaults from the environment, with explicit overrides on top.

        ``overrides`` may use field names or their camelCase aliases; ``None``
        values keep the settings default.
        """
        if settings is None:
            from shape2path.config import settings

        values: dict[str, Any] = {
            "circle_algorithm": settings.circle_algorithm,
            "circle_segments": settings.circle_segments,
            "attribute_cleanup": settings.attribute_cleanup,
        }
        aliases = {f.alias: name for name, f in cls.model_fields.items() if f.alias}
        for key, value in (overrides or {}).items():
            if value is not None:
                values[aliases.get(key, key)] = value
        return cls.model_validate(values)
