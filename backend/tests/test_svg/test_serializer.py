"""Tests for the path serializer."""

import pytest

from app.models.records import PathRecord, SerializedPathRecord
from app.svg.interpreter import path_to_array
from app.svg.serializer import join_path, path_to_string


def test_join_path():
    assert join_path(["M", 10.0, 10.0, "L", 20.5, 20.0]) == "M10,10L20.5,20"


def test_join_negative_and_curves():
    assert join_path(["M", -5.0, -5.0, "C", 1.0, 2.0, 3.0, 4.0, 5.25, -6.0]) == "M-5,-5C1,2,3,4,5.25,-6"


def test_path_to_string_keeps_metadata():
    records = [PathRecord(name="north", path=["M", 1.0, 2.0, "L", 3.0, 4.0], has_fill=True)]
    out = path_to_string(records)
    assert out == [SerializedPathRecord(name="north", path="M1,2L3,4", has_fill=True)]
    # Input records are left alone
    assert records[0].path == ["M", 1.0, 2.0, "L", 3.0, 4.0]


@pytest.mark.parametrize(
    "d",
    [
        "M10,10 L20,20",
        "M-1.5,2.25 L3,-4 C1,1 2,2 3,3",
        "M0,0 L0.01,0.99 M5,5 L6,6 7,7",
    ],
)
def test_round_trip(d):
    parsed = path_to_array(d)
    assert path_to_array(join_path(parsed)) == parsed


def test_round_trip_after_relative_resolution():
    parsed = path_to_array("m10,10 l5,5 h-2 v3")
    assert path_to_array(join_path(parsed)) == parsed
