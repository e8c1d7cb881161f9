"""Command services for the GDAL vector utilities.

Submodules:
    - command: command-line assembly and the shared Command base class.
    - ogr2ogr: the Ogr2Ogr conversion command and its rule table.
    - ogrinfo: the OgrInfo inspection command and its rule table.
"""

from ogrcommand.services.command import Command, assemble
from ogrcommand.services.ogr2ogr import Ogr2Ogr
from ogrcommand.services.ogrinfo import OgrInfo

__all__ = ["Command", "Ogr2Ogr", "OgrInfo", "assemble"]
