"""Option value types for the GDAL vector utilities.

Re-exports the compound values (spatial extent, control point, layer
geometry type) and the closed enumerations used by the option schemas,
so callers can import everything from ``ogrcommand.types``.

Example:
    >>> from ogrcommand.types import GeometryType, LayerGeometryType
    >>> LayerGeometryType(GeometryType.LINESTRING, measure=True).render()
    'LINESTRINGM'
"""

from ogrcommand.types.coordinates import ControlPoint, SpatialExtent
from ogrcommand.types.formats import (
    POLYNOMIAL_ORDERS,
    FieldType,
    GeometryDump,
    SqlDialect,
    VectorFormat,
    WktFormat,
)
from ogrcommand.types.geometry import (
    ConversionMode,
    CoordinateDimension,
    GeometryType,
    LayerGeometryType,
)

__all__ = [
    "POLYNOMIAL_ORDERS",
    "ControlPoint",
    "ConversionMode",
    "CoordinateDimension",
    "FieldType",
    "GeometryDump",
    "GeometryType",
    "LayerGeometryType",
    "SpatialExtent",
    "SqlDialect",
    "VectorFormat",
    "WktFormat",
]
