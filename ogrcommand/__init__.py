"""Typed command-line builders for the GDAL vector utilities.

This package compiles typed option sets into correctly ordered, shell-safe
``ogr2ogr`` and ``ogrinfo`` command lines, and runs them.

- types: compound option values and closed enumerations
- options: per-command option schemas with strict assignment checks
- core.serialization: the ordered rule tables' building blocks
- services: Ogr2Ogr and OgrInfo commands and the command assembler
- utils: shell quoting, datasource classification and process execution
- api/main: an HTTP surface to preview or run commands

Example:
    >>> from ogrcommand import Ogr2Ogr, VectorFormat
    >>> command = Ogr2Ogr("output.gpkg", "input.shp")
    >>> command.set_option("format", VectorFormat.GPKG)
    >>> command.get_command()
    "ogr2ogr -f 'GPKG' 'output.gpkg' 'input.shp'"
"""

from ogrcommand.services import Ogr2Ogr, OgrInfo
from ogrcommand.types import VectorFormat

__all__ = ["Ogr2Ogr", "OgrInfo", "VectorFormat"]
