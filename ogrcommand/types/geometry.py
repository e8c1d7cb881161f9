"""Geometry type descriptors for the ``-nlt`` and ``-dim`` options.

``ogr2ogr -nlt`` accepts either a geometry type name, optionally suffixed
with ``Z``, ``M`` or ``ZM`` and a coordinate-dimension text such as
``25D``, or one of the conversion subcommands (``CONVERT_TO_LINEAR``,
``CONVERT_TO_CURVE``, ``CONVERT_TO_MULTI``). LayerGeometryType models
both forms; the conversion subcommand is a single selector, so at most one
of them can ever be requested.

Example:
    >>> from ogrcommand.types.geometry import (
    ...     ConversionMode, GeometryType, LayerGeometryType,
    ... )
    >>> LayerGeometryType(GeometryType.POINT, elevation=True).render()
    'POINTZ'
    >>> LayerGeometryType(
    ...     GeometryType.POLYGON, conversion=ConversionMode.CONVERT_TO_MULTI
    ... ).render()
    'CONVERT_TO_MULTI'
"""

from __future__ import annotations

import enum

import pydantic.dataclasses


class GeometryType(enum.StrEnum):
    NONE = "NONE"
    GEOMETRY = "GEOMETRY"
    POINT = "POINT"
    LINESTRING = "LINESTRING"
    POLYGON = "POLYGON"
    GEOMETRYCOLLECTION = "GEOMETRYCOLLECTION"
    MULTIPOINT = "MULTIPOINT"
    MULTIPOLYGON = "MULTIPOLYGON"
    MULTILINESTRING = "MULTILINESTRING"
    CIRCULARSTRING = "CIRCULARSTRING"
    COMPOUNDCURVE = "COMPOUNDCURVE"
    CURVEPOLYGON = "CURVEPOLYGON"
    MULTICURVE = "MULTICURVE"
    MULTISURFACE = "MULTISURFACE"


class ConversionMode(enum.StrEnum):
    CONVERT_TO_LINEAR = "CONVERT_TO_LINEAR"
    CONVERT_TO_CURVE = "CONVERT_TO_CURVE"
    CONVERT_TO_MULTI = "CONVERT_TO_MULTI"


class CoordinateDimension(enum.StrEnum):
    """Values accepted by ``-dim``."""

    XY = "XY"
    XYZ = "XYZ"
    XYM = "XYM"
    XYZM = "XYZM"


@pydantic.dataclasses.dataclass(frozen=True)
class LayerGeometryType:
    """Requested geometry type of the output layer.

    Attributes:
        geometry_type: Base geometry kind.
        elevation: Append the ``Z`` indicator.
        measure: Append the ``M`` indicator.
        coordinates: Coordinate-dimension text appended after the type
            name (e.g. ``25D``).
        conversion: Conversion subcommand. When set, it replaces the
            geometry type name entirely.
    """

    geometry_type: GeometryType
    elevation: bool = False
    measure: bool = False
    coordinates: str = ""
    conversion: ConversionMode | None = None

    @property
    def type_name(self) -> str:
        """Geometry type name with its elevation/measure indicator."""
        suffix = ""
        if self.elevation and self.measure:
            suffix = "ZM"
        elif self.elevation:
            suffix = "Z"
        elif self.measure:
            suffix = "M"

        return f"{self.geometry_type.value}{suffix}"

    def render(self) -> str:
        if self.conversion is not None:
            return self.conversion.value

        return f"{self.type_name}{self.coordinates}"
