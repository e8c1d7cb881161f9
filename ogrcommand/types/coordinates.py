"""Coordinate-based compound option values.

This module defines the compound values that are passed to the GDAL
vector utilities as a single, space separated argument: the spatial
query extent (``-spat``) and ground control points (``-gcp``). Each
value renders itself into the canonical text expected by the tool.

Example:
    Render a spatial filter and a ground control point:
        >>> from ogrcommand.types.coordinates import ControlPoint, SpatialExtent
        >>> SpatialExtent(4.3, 50.8, 4.4, 50.9).render()
        '4.3 50.8 4.4 50.9'
        >>> ControlPoint(0, 0, 155000.5, 170000).render()
        '0 0 155000.5 170000'
"""

from __future__ import annotations

import pydantic.dataclasses


def format_number(value: float) -> str:
    """Format a coordinate the way it is written on the command line.

    Integral values are written without a fractional part, other values
    use the shortest representation that round-trips.
    """
    number = float(value)
    if number.is_integer():
        return str(int(number))

    return repr(number)


@pydantic.dataclasses.dataclass(frozen=True)
class SpatialExtent:
    """Rectangle used to filter features (``xmin ymin xmax ymax``).

    Attributes:
        xmin: Lower bound on the X axis.
        ymin: Lower bound on the Y axis.
        xmax: Upper bound on the X axis.
        ymax: Upper bound on the Y axis.
    """

    xmin: float
    ymin: float
    xmax: float
    ymax: float

    def render(self) -> str:
        return " ".join(
            format_number(v) for v in (self.xmin, self.ymin, self.xmax, self.ymax)
        )


@pydantic.dataclasses.dataclass(frozen=True)
class ControlPoint:
    """Ground control point pairing raw and georeferenced coordinates.

    Attributes:
        ungeoref_x: X coordinate in the source (ungeoreferenced) space.
        ungeoref_y: Y coordinate in the source (ungeoreferenced) space.
        georef_x: X coordinate in the target (georeferenced) space.
        georef_y: Y coordinate in the target (georeferenced) space.
    """

    ungeoref_x: float
    ungeoref_y: float
    georef_x: float
    georef_y: float

    def render(self) -> str:
        return " ".join(
            format_number(v)
            for v in (
                self.ungeoref_x,
                self.ungeoref_y,
                self.georef_x,
                self.georef_y,
            )
        )
