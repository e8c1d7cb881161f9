"""The ``ogrinfo`` vector inspection command.

Example:
    Summarise every layer of a GeoPackage as JSON:
        >>> from ogrcommand.services.ogrinfo import OgrInfo

        >>> command = OgrInfo("/data/city.gpkg")
        >>> command.set_option("json")
        >>> command.set_option("summary_only")
        >>> command.set_option("all_layers")
        >>> command.get_command()
        "ogrinfo -json -al -so '/data/city.gpkg'"
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ogrcommand.core import serialization as ser
from ogrcommand.options.ogrinfo import InspectionOptions
from ogrcommand.services.command import Command
from ogrcommand.types import GeometryDump, WktFormat

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ogrcommand.core import config

RULES: tuple[ser.Rule, ...] = (
    ser.switch("help", "--help"),
    ser.switch("help_general", "--help-general"),
    ser.choice("input_format", "-if"),
    ser.switch("json_output", "-json"),
    ser.switch("read_only", "-ro"),
    ser.switch("features", "-features"),
    ser.scalar("limit", "-limit"),
    ser.switch("quiet", "-q"),
    ser.scalar("where", "-where"),
    ser.choice("dialect", "-dialect"),
    ser.compound("spat", "-spat"),
    ser.scalar("geomfield", "-geomfield"),
    ser.scalar("field_domain", "-fielddomain"),
    ser.scalar("fid", "-fid"),
    ser.scalar("sql", "-sql"),
    ser.switch("all_layers", "-al"),
    # random layer reading does not apply to -sql result sets
    ser.switch("random_layer_reading", "-rl", when=ser.unless_set("sql")),
    ser.switch("summary_only", "-so"),
    ser.tri_state("list_fields", "-fields"),
    ser.member_of("geom", "-geom", frozenset(GeometryDump)),
    ser.switch("formats", "--formats"),
    ser.switch("no_metadata", "-nomd"),
    ser.switch("list_mdd", "-listmdd"),
    ser.scalar("mdd", "-mdd"),
    ser.switch("no_count", "-nocount"),
    ser.switch("no_extent", "-noextent"),
    ser.switch("extent_3d", "-extend3D"),
    ser.switch("no_geom_type", "-nogeomtype"),
    ser.mapping("open_options", "-oo"),
    ser.member_of("wkt_format", "-wkt_format", frozenset(WktFormat)),
)


class OgrInfo(Command):
    """Builds and runs an ``ogrinfo`` command line.

    Args:
        source: Datasource to inspect (path or connection string).
        layers: Layer name or names to report on.
        options: Initial options; the command keeps its own copy.
        settings: Settings providing the executable and run environment.
    """

    options_class = InspectionOptions
    rules = RULES
    executable_setting = "ogrinfo_executable"

    def __init__(
        self,
        source: str,
        layers: str | Iterable[str] = (),
        options: InspectionOptions | None = None,
        settings: config.Settings | None = None,
    ) -> None:
        super().__init__(source, layers, options, settings)
