"""Option schemas of the ogr2ogr and ogrinfo command families."""

from ogrcommand.options.base import OptionSet
from ogrcommand.options.errors import (
    OptionError,
    OptionTypeError,
    UnknownOptionError,
)
from ogrcommand.options.ogr2ogr import ConversionOptions
from ogrcommand.options.ogrinfo import InspectionOptions

__all__ = [
    "ConversionOptions",
    "InspectionOptions",
    "OptionError",
    "OptionSet",
    "OptionTypeError",
    "UnknownOptionError",
]
