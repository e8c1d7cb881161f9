"""Unit tests for the option schemas in ogrcommand.options.

Validates the closed-schema contract of option sets:
    - options are addressed by attribute name or GDAL spelling,
    - unknown names raise UnknownOptionError,
    - values of the wrong kind raise OptionTypeError,
    - domain-restricted values are accepted at assignment time,
    - loosely typed input is converted by from_mapping().

See Also:
    - ogrcommand/options/base.py for the OptionSet implementation.
"""

from __future__ import annotations

import pytest

from ogrcommand.options import (
    ConversionOptions,
    InspectionOptions,
    OptionError,
    OptionTypeError,
    UnknownOptionError,
)
from ogrcommand.types import (
    ConversionMode,
    GeometryDump,
    GeometryType,
    LayerGeometryType,
    SpatialExtent,
    VectorFormat,
)


def test_defaults_are_unset() -> None:
    """A fresh option set has nothing set."""
    options = ConversionOptions()
    for name in ConversionOptions.model_fields:
        assert not options.is_set(name)


def test_set_by_alias_and_name() -> None:
    """GDAL spelling and attribute name address the same slot."""
    options = ConversionOptions()
    options.set("nln", "roads")
    assert options.get("layer_name") == "roads"
    options.set("layer_name", "rivers")
    assert options.get("nln") == "rivers"


def test_if_keyword_alias() -> None:
    """The -if option is reachable through its GDAL spelling."""
    options = InspectionOptions()
    options.set("if", VectorFormat.GeoJSON)
    assert options.input_format is VectorFormat.GeoJSON


def test_unknown_option_rejected() -> None:
    """Names outside the schema raise UnknownOptionError."""
    options = ConversionOptions()
    with pytest.raises(UnknownOptionError) as exc_info:
        options.set("nonexistent", True)
    assert exc_info.value.name == "nonexistent"
    assert isinstance(exc_info.value, OptionError)


def test_option_of_other_family_rejected() -> None:
    """ogrinfo-only options are unknown to ogr2ogr and vice versa."""
    with pytest.raises(UnknownOptionError):
        ConversionOptions().set("json", True)
    with pytest.raises(UnknownOptionError):
        InspectionOptions().set("nln", "roads")


def test_get_unknown_option_rejected() -> None:
    with pytest.raises(UnknownOptionError):
        ConversionOptions().get("bogus")


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("format", "GPKG"),
        ("append", "yes"),
        ("append", 1),
        ("limit", "10"),
        ("limit", True),
        ("layer_name", 42),
        ("spat", (0, 0, 1, 1)),
        ("lco", {"SPATIAL_INDEX": 1}),
        ("gcp", ["0 0 1 1"]),
        ("nlt", "POINT"),
    ],
)
def test_type_mismatch_rejected(name: str, value: object) -> None:
    """Values of the wrong kind raise OptionTypeError."""
    options = ConversionOptions()
    with pytest.raises(OptionTypeError) as exc_info:
        options.set(name, value)
    assert exc_info.value.name == name
    assert isinstance(exc_info.value, TypeError)


def test_rejected_assignment_keeps_previous_value() -> None:
    """A failed assignment leaves the slot unchanged."""
    options = ConversionOptions()
    options.set("limit", 10)
    with pytest.raises(OptionTypeError):
        options.set("limit", "many")
    assert options.limit == 10


def test_compound_values_accepted() -> None:
    """Compound slots take instances of their value type."""
    options = ConversionOptions()
    options.set("spat", SpatialExtent(0, 0, 10, 10))
    options.set(
        "nlt",
        LayerGeometryType(
            GeometryType.POLYGON, conversion=ConversionMode.CONVERT_TO_MULTI
        ),
    )
    assert options.is_set("spat")
    assert options.geometry_type is not None
    assert options.geometry_type.render() == "CONVERT_TO_MULTI"


def test_out_of_domain_values_accepted() -> None:
    """Domain checks are deferred: assignment itself succeeds."""
    options = ConversionOptions()
    options.set("order", 5)
    assert options.order == 5

    info = InspectionOptions()
    info.set("geom", "VERBOSE")
    info.set("wkt_format", "WKT3")
    assert info.geom == "VERBOSE"
    assert info.wkt_format == "WKT3"


def test_geometry_dump_member_accepted() -> None:
    info = InspectionOptions()
    info.set("geom", GeometryDump.SUMMARY)
    assert info.geom == "SUMMARY"


def test_explicit_false_is_set_for_tri_state() -> None:
    """fields=False is distinct from leaving -fields unset."""
    info = InspectionOptions()
    assert not info.is_set("fields")
    info.set("fields", False)
    assert info.is_set("list_fields")


def test_from_mapping_converts_loose_values() -> None:
    """JSON-style input is converted into typed values."""
    options = ConversionOptions.from_mapping(
        {
            "f": "GPKG",
            "nln": "roads",
            "spat": {"xmin": 0, "ymin": 0, "xmax": 1, "ymax": 1},
            "nlt": {"geometry_type": "POINT", "elevation": True},
            "lco": {"SPATIAL_INDEX": "YES"},
        }
    )
    assert options.format is VectorFormat.GPKG
    assert options.layer_name == "roads"
    assert options.spat == SpatialExtent(0, 0, 1, 1)
    assert options.geometry_type is not None
    assert options.geometry_type.render() == "POINTZ"


def test_from_mapping_unknown_option() -> None:
    with pytest.raises(UnknownOptionError) as exc_info:
        InspectionOptions.from_mapping({"json": True, "bogus": 1})
    assert exc_info.value.name == "bogus"


def test_from_mapping_invalid_value() -> None:
    with pytest.raises(OptionTypeError) as exc_info:
        ConversionOptions.from_mapping({"f": "NotADriver"})
    assert exc_info.value.name == "f"
