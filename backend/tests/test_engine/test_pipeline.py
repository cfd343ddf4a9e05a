"""Tests for the conversion pipeline."""

from __future__ import annotations

import pytest

from app.engine.context import ConversionContext
from app.engine.pipeline import Pipeline, convert_svg, create_pipeline, trace_shape
from app.models.records import SerializedPathRecord
from app.svg.errors import SvgDocumentError
from app.svg.parser import ShapeSource
from app.utils.geometry import collection_bbox, path_points
from tests.conftest import EMPTY_SVG, FLAT_MAP_SVG, GROUPED_MAP_SVG, MIXED_SUPPORT_SVG


def test_create_pipeline():
    assert isinstance(create_pipeline(), Pipeline)


def test_trace_group_concatenates_members():
    shape = ShapeSource(
        label="north",
        name="north",
        paths=["M0,0 L10,0 L10,10", "m20,0 l5,5"],
        translate=(10.0, 20.0),
        has_fill=True,
        is_group=True,
    )
    record = trace_shape(shape)
    assert record.path == [
        "M", 10, 20, "L", 20, 20, "L", 20, 30,
        "M", 30, 20, "L", 35, 25,
    ]
    assert record.has_fill


def test_trace_only_keeps_failing_shapes_out():
    ctx = ConversionContext(svg_raw=MIXED_SUPPORT_SVG)
    ctx.shapes = [
        ShapeSource(label="ok", paths=["M0,0 L1,1"]),
        ShapeSource(label="arc", paths=["M0,0 A1,1 0 0 1 2,2"]),
    ]
    create_pipeline().trace(ctx)
    assert len(ctx.records) == 1
    assert "arc" in ctx.errors


def test_convert_grouped_map():
    ctx = convert_svg(GROUPED_MAP_SVG)
    assert [r.name for r in ctx.records] == ["north", "South", "lake"]
    assert ctx.errors == {}

    box = collection_bbox(path_points(r.path) for r in ctx.records)
    assert box.min_x == pytest.approx(0)
    assert box.max_x == pytest.approx(999)
    assert box.min_y == pytest.approx(0)
    assert box.max_y == pytest.approx(999)
    assert ctx.processing_time_ms >= 0


def test_convert_flat_map_scenario():
    ctx = convert_svg(FLAT_MAP_SVG)
    west, east = ctx.records
    assert west.path == ["M", 0, 999, "L", pytest.approx(499.5), 999]
    assert east.path == ["M", 0, 0, "L", pytest.approx(499.5), 0]


def test_convert_isolates_failures():
    ctx = convert_svg(MIXED_SUPPORT_SVG, scale=100)
    assert [r.name for r in ctx.records] == ["square", "tick"]
    assert list(ctx.errors) == ["badge"]
    assert "'A'" in ctx.errors["badge"]


def test_convert_serialized():
    ctx = convert_svg(FLAT_MAP_SVG, scale=100, serialize=True)
    data = ctx.series_data()
    assert all(isinstance(r, SerializedPathRecord) for r in data)
    assert data[0].path == "M0,100L50,100"
    assert data[1].path == "M0,0L50,0"


def test_convert_empty_document():
    ctx = convert_svg(EMPTY_SVG)
    assert ctx.records == []
    assert ctx.errors == {}


def test_convert_unreadable_document():
    with pytest.raises(SvgDocumentError):
        convert_svg("<svg")


def test_convert_isolates_out_of_range_shapes():
    svg = '''<svg xmlns="http://www.w3.org/2000/svg">
      <path id="ok" d="M0,0 L10,10"/>
      <path id="odd" transform="translate(inf,0)" d="M0,0 L5,5"/>
      <path id="far" transform="translate(1e308,0)" d="M1,1 L2,2"/>
      <path id="huge" d="M1e400,0 L1,1"/>
    </svg>'''
    ctx = convert_svg(svg, scale=10)
    # A non-finite transform is dropped, the shape still converts untranslated
    assert [r.name for r in ctx.records] == ["ok", "odd"]
    assert set(ctx.errors) == {"far", "huge"}


def test_convert_counts_every_failure_with_shared_names():
    svg = '''<svg xmlns="http://www.w3.org/2000/svg">
      <path class="state" d="M0,0 L1,1"/>
      <path class="state" d="M0,0 L1,1 Z"/>
      <path class="state" d="M0,0 A1,1 0 0 1 2,2"/>
    </svg>'''
    ctx = convert_svg(svg)
    assert len(ctx.records) == 1
    assert len(ctx.errors) == 2
    assert "'Z'" in ctx.errors["state#1"]
    assert "'A'" in ctx.errors["state#2"]
