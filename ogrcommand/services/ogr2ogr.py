"""The ``ogr2ogr`` vector conversion command.

Example:
    Convert a shapefile into a GeoPackage layer:
        >>> from ogrcommand.services.ogr2ogr import Ogr2Ogr
        >>> from ogrcommand.types import VectorFormat

        >>> command = Ogr2Ogr("output.gpkg", "input.shp")
        >>> command.set_option("format", VectorFormat.GPKG)
        >>> command.set_option("layer_name", "roads")
        >>> command.get_command()
        "ogr2ogr -f 'GPKG' -nln 'roads' 'output.gpkg' 'input.shp'"

    Load into PostGIS; connection strings are passed through unquoted:
        >>> command = Ogr2Ogr("PG:dbname=gis", "/data/roads.geojson")
        >>> command.set_option("t_srs", "EPSG:3857")
        >>> command.set_option("lco", {"GEOMETRY_NAME": "geom"})
        >>> command.set_option("overwrite")
        >>> output = command.run()
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ogrcommand.core import serialization as ser
from ogrcommand.options.ogr2ogr import ConversionOptions
from ogrcommand.services.command import Command
from ogrcommand.types import POLYNOMIAL_ORDERS

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ogrcommand.core import config

RULES: tuple[ser.Rule, ...] = (
    ser.switch("help", "--help"),
    ser.switch("help_general", "--help-general"),
    ser.switch("skip_failures", "-skipfailures"),
    ser.switch("skip_invalid", "-skipinvalid"),
    # upsert wins over append
    ser.switch("append", "-append", when=ser.unless_set("upsert")),
    ser.switch("upsert", "-upsert"),
    ser.switch("update", "-update"),
    ser.scalar("date_time_to", "-dateTimeTo"),
    ser.scalar("select", "-select"),
    ser.scalar("where", "-where"),
    ser.switch("progress", "-progress"),
    ser.scalar("sql", "-sql"),
    ser.choice("dialect", "-dialect"),
    ser.switch("preserve_fid", "-preserve_fid"),
    ser.scalar("fid", "-fid"),
    ser.scalar("limit", "-limit"),
    ser.compound("spat", "-spat"),
    ser.scalar("spat_srs", "-spat_srs"),
    ser.scalar("geomfield", "-geomfield"),
    ser.scalar("a_srs", "-a_srs"),
    ser.scalar("a_coord_epoch", "-a_coord_epoch"),
    ser.scalar("t_srs", "-t_srs"),
    ser.scalar("t_coord_epoch", "-t_coord_epoch"),
    ser.scalar("s_srs", "-s_srs"),
    ser.scalar("s_coord_epoch", "-s_coord_epoch"),
    ser.scalar("xy_res", "-xyRes"),
    ser.scalar("z_res", "-zRes"),
    ser.scalar("m_res", "-mRes"),
    ser.switch("unset_coord_precision", "-unsetCoordPrecision"),
    ser.scalar("ct", "-ct"),
    ser.mapping("ct_opt", "-ct_opt"),
    ser.choice("input_format", "-if"),
    ser.choice("format", "-f"),
    ser.switch("overwrite", "-overwrite"),
    ser.switch("ds_transaction", "-ds_transaction"),
    ser.switch("make_valid", "-makevalid"),
    ser.scalar("layer_name", "-nln"),
    # -nlt must precede -dim
    ser.compound("geometry_type", "-nlt"),
    ser.choice("dim", "-dim"),
    ser.scalar("group_transactions", "-gt"),
    ser.scalar("clipsrc", "-clipsrc"),
    ser.scalar("clipsrcsql", "-clipsrcsql"),
    ser.scalar("clipsrclayer", "-clipsrclayer"),
    ser.scalar("clipsrcwhere", "-clipsrcwhere"),
    ser.scalar("clipdst", "-clipdst"),
    ser.scalar("clipdstsql", "-clipdstsql"),
    ser.scalar("clipdstlayer", "-clipdstlayer"),
    ser.scalar("clipdstwhere", "-clipdstwhere"),
    ser.switch("wrap_dateline", "-wrapdateline"),
    ser.scalar("dateline_offset", "-datelineoffset"),
    ser.scalar("simplify", "-simplify"),
    ser.scalar("segmentize", "-segmentize"),
    ser.switch("add_fields", "-addfields"),
    ser.switch("unset_fid", "-unsetFid"),
    ser.switch("relaxed_field_name_match", "-relaxedFieldNameMatch"),
    ser.switch("force_nullable", "-forceNullable"),
    ser.switch("unset_default", "-unsetDefault"),
    ser.joined("field_type_to_string", "-fieldTypeToString"),
    ser.switch("unset_field_width", "-unsetFieldWidth"),
    ser.scalar("map_field_type", "-mapFieldType"),
    ser.scalar("field_map", "-fieldmap"),
    ser.switch("split_list_fields", "-splitlistfields"),
    ser.scalar("max_subfields", "-maxsubfields"),
    ser.switch("explode_collections", "-explodecollections"),
    ser.scalar("z_field", "-zfield"),
    ser.sequence("gcp", "-gcp"),
    ser.member_of("order", "-order", POLYNOMIAL_ORDERS),
    ser.switch("tps", "-tps"),
    ser.switch("empty_str_as_null", "-emptyStrAsNull"),
    ser.switch("resolve_domains", "-resolveDomains"),
    ser.switch("no_metadata", "-nomd"),
    ser.mapping("metadata", "-mo"),
    ser.switch("no_native_data", "-noNativeData"),
    ser.mapping("dataset_creation_options", "-dsco"),
    ser.mapping("layer_creation_options", "-lco"),
    ser.mapping("open_options", "-oo"),
    ser.mapping("destination_open_options", "-doo"),
)


class Ogr2Ogr(Command):
    """Builds and runs an ``ogr2ogr`` command line.

    Args:
        destination: Output datasource (path or connection string).
        source: Input datasource (path or connection string).
        layers: Source layer name or names to convert (all when empty).
        options: Initial options; the command keeps its own copy.
        settings: Settings providing the executable and run environment.
    """

    options_class = ConversionOptions
    rules = RULES
    executable_setting = "ogr2ogr_executable"

    def __init__(
        self,
        destination: str,
        source: str,
        layers: str | Iterable[str] = (),
        options: ConversionOptions | None = None,
        settings: config.Settings | None = None,
    ) -> None:
        self._destination = destination
        super().__init__(source, layers, options, settings)

    @property
    def destination(self) -> str:
        return self._destination
