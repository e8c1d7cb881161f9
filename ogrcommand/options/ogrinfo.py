"""Option schema of the ``ogrinfo`` inspection command.

``geom`` and ``wkt_format`` take plain text or a GeometryDump/WktFormat
member; values outside those sets are accepted here and left out of the
rendered command. ``list_fields`` is tri-state: None leaves ``-fields``
out, True and False render ``-fields=YES`` and ``-fields=NO``.
"""

from __future__ import annotations

import pydantic

from ogrcommand.options.base import OptionSet
from ogrcommand.types import (
    GeometryDump,
    SpatialExtent,
    SqlDialect,
    VectorFormat,
    WktFormat,
)


class InspectionOptions(OptionSet):
    """Every option ``ogrinfo`` accepts ahead of its datasource argument."""

    help: bool = False
    help_general: bool = pydantic.Field(False, alias="helpGeneral")
    formats: bool = False

    # output mode
    input_format: VectorFormat | None = pydantic.Field(None, alias="if")
    json_output: bool = pydantic.Field(False, alias="json")
    read_only: bool = pydantic.Field(False, alias="ro")
    features: bool = False
    limit: int | None = None
    quiet: bool = pydantic.Field(False, alias="q")
    all_layers: bool = pydantic.Field(False, alias="al")
    random_layer_reading: bool = pydantic.Field(False, alias="rl")
    summary_only: bool = pydantic.Field(False, alias="so")
    list_fields: bool | None = pydantic.Field(None, alias="fields")
    geom: GeometryDump | str = ""

    # filtering
    where: str = ""
    dialect: SqlDialect | None = None
    spat: SpatialExtent | None = None
    geomfield: str = ""
    field_domain: str = pydantic.Field("", alias="fielddomain")
    fid: str = ""
    sql: str = ""

    # metadata reporting
    no_metadata: bool = pydantic.Field(False, alias="nomd")
    list_mdd: bool = pydantic.Field(False, alias="listmdd")
    mdd: str = ""
    no_count: bool = pydantic.Field(False, alias="nocount")
    no_extent: bool = pydantic.Field(False, alias="noextent")
    extent_3d: bool = pydantic.Field(False, alias="extend3D")
    no_geom_type: bool = pydantic.Field(False, alias="nogeomtype")

    open_options: dict[str, str] = pydantic.Field(
        default_factory=dict, alias="oo"
    )
    wkt_format: WktFormat | str = ""
