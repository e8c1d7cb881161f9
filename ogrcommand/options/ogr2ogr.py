"""Option schema of the ``ogr2ogr`` conversion command.

Fields are grouped the way the ogr2ogr documentation groups them. The
alias of each field is the option's GDAL spelling (without the leading
dash), which is also the name accepted by ``Ogr2Ogr.set_option`` when the
Python name is not used.

Example:
    >>> from ogrcommand.options.ogr2ogr import ConversionOptions
    >>> from ogrcommand.types import VectorFormat
    >>> options = ConversionOptions()
    >>> options.set("f", VectorFormat.GPKG)
    >>> options.set("lco", {"SPATIAL_INDEX": "YES"})
    >>> options.is_set("format")
    True
"""

from __future__ import annotations

import pydantic

from ogrcommand.options.base import OptionSet
from ogrcommand.types import (
    ControlPoint,
    CoordinateDimension,
    FieldType,
    LayerGeometryType,
    SpatialExtent,
    SqlDialect,
    VectorFormat,
)


class ConversionOptions(OptionSet):
    """Every option ``ogr2ogr`` accepts ahead of its datasource arguments."""

    # usage
    help: bool = False
    help_general: bool = pydantic.Field(False, alias="helpGeneral")

    # error handling and update modes
    skip_failures: bool = pydantic.Field(False, alias="skipfailures")
    skip_invalid: bool = pydantic.Field(False, alias="skipinvalid")
    append: bool = False
    upsert: bool = False
    update: bool = False
    overwrite: bool = False
    progress: bool = False

    # filtering
    date_time_to: str = pydantic.Field("", alias="dateTimeTo")
    select: str = ""
    where: str = ""
    sql: str = ""
    dialect: SqlDialect | None = None
    preserve_fid: bool = False
    fid: str = ""
    limit: int | None = None
    spat: SpatialExtent | None = None
    spat_srs: str = ""
    geomfield: str = ""

    # reprojection
    a_srs: str = ""
    a_coord_epoch: str = ""
    t_srs: str = ""
    t_coord_epoch: str = ""
    s_srs: str = ""
    s_coord_epoch: str = ""
    xy_res: str = pydantic.Field("", alias="xyRes")
    z_res: str = pydantic.Field("", alias="zRes")
    m_res: str = pydantic.Field("", alias="mRes")
    unset_coord_precision: bool = pydantic.Field(
        False, alias="unsetCoordPrecision"
    )
    ct: str = ""
    ct_opt: dict[str, str] = pydantic.Field(default_factory=dict)

    # output shaping
    input_format: VectorFormat | None = pydantic.Field(None, alias="if")
    format: VectorFormat | None = pydantic.Field(None, alias="f")
    ds_transaction: bool = False
    make_valid: bool = pydantic.Field(False, alias="makevalid")
    layer_name: str = pydantic.Field("", alias="nln")
    geometry_type: LayerGeometryType | None = pydantic.Field(None, alias="nlt")
    dim: CoordinateDimension | None = None
    group_transactions: int | None = pydantic.Field(None, alias="gt")
    clipsrc: str = ""
    clipsrcsql: str = ""
    clipsrclayer: str = ""
    clipsrcwhere: str = ""
    clipdst: str = ""
    clipdstsql: str = ""
    clipdstlayer: str = ""
    clipdstwhere: str = ""
    wrap_dateline: bool = pydantic.Field(False, alias="wrapdateline")
    dateline_offset: float | None = pydantic.Field(None, alias="datelineoffset")
    simplify: float | None = None
    segmentize: float | None = None

    # schema manipulation
    add_fields: bool = pydantic.Field(False, alias="addfields")
    unset_fid: bool = pydantic.Field(False, alias="unsetFid")
    relaxed_field_name_match: bool = pydantic.Field(
        False, alias="relaxedFieldNameMatch"
    )
    force_nullable: bool = pydantic.Field(False, alias="forceNullable")
    unset_default: bool = pydantic.Field(False, alias="unsetDefault")
    field_type_to_string: list[FieldType] = pydantic.Field(
        default_factory=list, alias="fieldTypeToString"
    )
    unset_field_width: bool = pydantic.Field(False, alias="unsetFieldWidth")
    map_field_type: str = pydantic.Field("", alias="mapFieldType")
    field_map: str = pydantic.Field("", alias="fieldmap")
    split_list_fields: bool = pydantic.Field(False, alias="splitlistfields")
    max_subfields: int | None = pydantic.Field(None, alias="maxsubfields")
    explode_collections: bool = pydantic.Field(False, alias="explodecollections")
    z_field: str = pydantic.Field("", alias="zfield")

    # georeferencing; order outside 1-3 is dropped when rendering
    gcp: list[ControlPoint] = pydantic.Field(default_factory=list)
    order: int | None = None
    tps: bool = False

    # field content and metadata
    empty_str_as_null: bool = pydantic.Field(False, alias="emptyStrAsNull")
    resolve_domains: bool = pydantic.Field(False, alias="resolveDomains")
    no_metadata: bool = pydantic.Field(False, alias="nomd")
    metadata: dict[str, str] = pydantic.Field(default_factory=dict, alias="mo")
    no_native_data: bool = pydantic.Field(False, alias="noNativeData")

    # driver specific creation and open options
    dataset_creation_options: dict[str, str] = pydantic.Field(
        default_factory=dict, alias="dsco"
    )
    layer_creation_options: dict[str, str] = pydantic.Field(
        default_factory=dict, alias="lco"
    )
    open_options: dict[str, str] = pydantic.Field(
        default_factory=dict, alias="oo"
    )
    destination_open_options: dict[str, str] = pydantic.Field(
        default_factory=dict, alias="doo"
    )
