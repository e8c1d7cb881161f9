"""Tests for the OgrInfo inspection command.

This module covers the assembled ogrinfo command line:
    - output mode switches in their fixed order,
    - -rl suppression when an SQL statement is given,
    - the tri-state -fields flag,
    - dropping of -geom and -wkt_format values outside their sets,
    - repeated open options and connection string sources.

See Also:
    - ogrcommand/services/ogrinfo.py for the rule table.
"""

from __future__ import annotations

import shlex

import pytest

from ogrcommand.core import config
from ogrcommand.options import InspectionOptions, UnknownOptionError
from ogrcommand.services.ogrinfo import OgrInfo
from ogrcommand.types import GeometryDump, SqlDialect, VectorFormat, WktFormat


@pytest.fixture
def settings() -> config.Settings:
    return config.Settings(ogrinfo_executable="ogrinfo", gdal_config={})


def test_json_summary_of_all_layers(settings: config.Settings) -> None:
    command = OgrInfo("/data/city.gpkg", settings=settings)
    command.set_option("so")
    command.set_option("al")
    command.set_option("json")
    assert command.get_command() == "ogrinfo -json -al -so '/data/city.gpkg'"


def test_layers_are_appended(settings: config.Settings) -> None:
    command = OgrInfo("PG:dbname=gis", ["roads", "my layer"], settings=settings)
    command.set_option("summary_only")
    assert command.get_command() == (
        "ogrinfo -so PG:dbname=gis 'roads' 'my layer'"
    )


def test_random_layer_reading_suppressed_by_sql(
    settings: config.Settings,
) -> None:
    command = OgrInfo("in.gpkg", settings=settings)
    command.set_option("rl")
    assert "-rl" in command.get_command().split()

    command.set_option("sql", "SELECT * FROM roads")
    tokens = shlex.split(command.get_command())
    assert "-rl" not in tokens
    assert tokens[1:3] == ["-sql", "SELECT * FROM roads"]


def test_sql_with_dialect(settings: config.Settings) -> None:
    """The dialect is emitted once, ahead of the statement."""
    command = OgrInfo("in.gpkg", settings=settings)
    command.set_option("sql", "SELECT ST_Area(geom) FROM parcels")
    command.set_option("dialect", SqlDialect.SQLITE)
    rendered = command.get_command()
    assert rendered.count("-dialect") == 1
    assert rendered == (
        "ogrinfo -dialect 'SQLITE' -sql 'SELECT ST_Area(geom) FROM parcels' "
        "'in.gpkg'"
    )


@pytest.mark.parametrize(
    ("value", "expected"),
    [(True, "-fields=YES"), (False, "-fields=NO")],
)
def test_fields_tri_state(
    settings: config.Settings, value: bool, expected: str
) -> None:
    command = OgrInfo("in.shp", settings=settings)
    assert "-fields" not in command.get_command()
    command.set_option("fields", value)
    assert command.get_command() == f"ogrinfo {expected} 'in.shp'"


@pytest.mark.parametrize("value", [GeometryDump.SUMMARY, "ISO_WKT", "NO"])
def test_geom_accepted_values(settings: config.Settings, value: str) -> None:
    command = OgrInfo("in.shp", settings=settings)
    command.set_option("geom", value)
    assert command.get_command() == f"ogrinfo -geom '{value}' 'in.shp'"


def test_geom_out_of_set_dropped(settings: config.Settings) -> None:
    command = OgrInfo("in.shp", settings=settings)
    command.set_option("geom", "VERBOSE")
    assert command.get_command() == "ogrinfo 'in.shp'"


def test_wkt_format(settings: config.Settings) -> None:
    command = OgrInfo("in.shp", settings=settings)
    command.set_option("wkt_format", WktFormat.WKT2_2018)
    assert command.get_command() == "ogrinfo -wkt_format 'WKT2_2018' 'in.shp'"

    command.set_option("wkt_format", "WKT3")
    assert command.get_command() == "ogrinfo 'in.shp'"


def test_open_options_and_input_format(settings: config.Settings) -> None:
    command = OgrInfo("points.csv", settings=settings)
    command.set_option("oo", {"X_POSSIBLE_NAMES": "lon", "Y_POSSIBLE_NAMES": "lat"})
    command.set_option("if", VectorFormat.CSV)
    assert command.get_command() == (
        "ogrinfo -if 'CSV' -oo 'X_POSSIBLE_NAMES=lon' "
        "-oo 'Y_POSSIBLE_NAMES=lat' 'points.csv'"
    )


def test_metadata_switches(settings: config.Settings) -> None:
    command = OgrInfo("in.gpkg", settings=settings)
    command.set_option("nogeomtype")
    command.set_option("nocount")
    command.set_option("noextent")
    command.set_option("nomd")
    assert command.get_command() == (
        "ogrinfo -nomd -nocount -noextent -nogeomtype 'in.gpkg'"
    )


def test_limit_and_fid(settings: config.Settings) -> None:
    command = OgrInfo("in.gpkg", "roads", settings=settings)
    command.set_option("fid", "42")
    command.set_option("limit", 0)
    assert command.get_command() == (
        "ogrinfo -limit '0' -fid '42' 'in.gpkg' 'roads'"
    )


def test_conversion_only_option_rejected(settings: config.Settings) -> None:
    command = OgrInfo("in.gpkg", settings=settings)
    with pytest.raises(UnknownOptionError):
        command.set_option("nln", "roads")


def test_initial_options(settings: config.Settings) -> None:
    options = InspectionOptions(read_only=True, quiet=True)
    command = OgrInfo("in.gpkg", options=options, settings=settings)
    assert command.get_command() == "ogrinfo -ro -q 'in.gpkg'"
    assert command.destination is None


def test_custom_executable() -> None:
    settings = config.Settings(ogrinfo_executable="/opt/gdal/bin/ogrinfo")
    command = OgrInfo("in.gpkg", settings=settings)
    assert command.get_command() == "/opt/gdal/bin/ogrinfo 'in.gpkg'"
