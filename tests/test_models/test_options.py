"""Tests for conversion options and settings."""

import pytest
from pydantic import ValidationError

from shape2path.config import Settings
from shape2path.models.options import AttributeCleanup, CircleAlgorithm, ConversionOptions


def test_defaults():
    opts = ConversionOptions()
    assert opts.circle_algorithm is CircleAlgorithm.TWO_ARCS
    assert opts.circle_segments == 8
    assert opts.attribute_cleanup is AttributeCleanup.LEGACY


def test_aliases_and_field_names():
    a = ConversionOptions.model_validate({"circleAlgorithm": "QuadBezier", "circleSegments": 12})
    b = ConversionOptions(circle_algorithm="QuadBezier", circle_segments=12)
    assert a == b
    assert a.circle_algorithm is CircleAlgorithm.QUAD_BEZIER


@pytest.mark.parametrize("value", [None, "", "Spline", "cubicbezier", 3])
def test_unknown_algorithm_is_two_arcs(value):
    assert ConversionOptions(circle_algorithm=value).circle_algorithm is CircleAlgorithm.TWO_ARCS


@pytest.mark.parametrize("value", [None, 0])
def test_missing_segments_use_default(value):
    assert ConversionOptions(circle_segments=value).circle_segments == 8


@pytest.mark.parametrize("value", [-1, -4])
def test_negative_segments_rejected(value):
    with pytest.raises(ValidationError):
        ConversionOptions(circle_segments=value)
    with pytest.raises(ValidationError):
        ConversionOptions.from_settings(Settings(), {"circleSegments": value})


def test_bad_cleanup_rejected():
    with pytest.raises(ValidationError):
        ConversionOptions(attribute_cleanup="sometimes")


def test_coerce():
    opts = ConversionOptions(circle_algorithm="CubicBezier")
    assert ConversionOptions.coerce(opts) is opts
    assert ConversionOptions.coerce(None) == ConversionOptions()
    assert ConversionOptions.coerce({"circleSegments": 4}).circle_segments == 4


def test_from_settings_with_overrides():
    settings = Settings(circle_algorithm="QuadBezier", circle_segments=16, attribute_cleanup="strict")
    opts = ConversionOptions.from_settings(settings)
    assert opts.circle_algorithm is CircleAlgorithm.QUAD_BEZIER
    assert opts.circle_segments == 16
    assert opts.attribute_cleanup is AttributeCleanup.STRICT

    opts = ConversionOptions.from_settings(settings, {"circleSegments": 6, "circle_algorithm": None})
    assert opts.circle_segments == 6
    assert opts.circle_algorithm is CircleAlgorithm.QUAD_BEZIER


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("SHAPE2PATH_CIRCLE_ALGORITHM", "CubicBezier")
    monkeypatch.setenv("SHAPE2PATH_CIRCLE_SEGMENTS", "10")
    settings = Settings()
    assert settings.circle_algorithm == "CubicBezier"
    assert settings.circle_segments == 10


def test_options_are_frozen():
    with pytest.raises(ValidationError):
        ConversionOptions().circle_segments = 3


def test_from_settings_overrides_are_a_mapping():
    # A key that matches a parameter name is just an unknown option
    opts = ConversionOptions.from_settings(Settings(), {"settings": 1, "overrides": 2})
    assert opts == ConversionOptions()
