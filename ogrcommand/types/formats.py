"""Closed value sets used by the ogr2ogr and ogrinfo option schemas.

The enumerations below are static tables: their values are written
verbatim on the command line. VectorFormat values are GDAL vector driver
short names as accepted by ``-f`` and ``-if``.
"""

from __future__ import annotations

import enum


class VectorFormat(enum.StrEnum):
    AIVector = "AIVector"
    AmigoCloud = "AmigoCloud"
    Arrow = "Arrow"
    AVCBIN = "AVCBIN"
    AVCE00 = "AVCE00"
    CARTO = "CARTO"
    CSV = "CSV"
    CSW = "CSW"
    DGN = "DGN"
    DGNv8 = "DGNv8"
    DWG = "DWG"
    DXF = "DXF"
    EDIGEO = "EDIGEO"
    EEDA = "EEDA"
    Elasticsearch = "Elasticsearch"
    ESRIShapefile = "ESRI Shapefile"
    ESRIJSON = "ESRIJSON"
    FileGDB = "FileGDB"
    FlatGeobuf = "FlatGeobuf"
    GeoJSON = "GeoJSON"
    GeoJSONSeq = "GeoJSONSeq"
    GeoRSS = "GeoRSS"
    GML = "GML"
    GMLAS = "GMLAS"
    GMT = "GMT"
    GPKG = "GPKG"
    GPSBabel = "GPSBabel"
    GPX = "GPX"
    GTFS = "GTFS"
    HANA = "HANA"
    IDB = "IDB"
    IDRISI = "IDRISI"
    INTERLIS1 = "INTERLIS 1"
    JML = "JML"
    JSONFG = "JSONFG"
    KML = "KML"
    LIBKML = "LIBKML"
    LVBAG = "LVBAG"
    MapInfoFile = "MapInfo File"
    MapML = "MapML"
    Memory = "Memory"
    MiraMonVector = "MiraMonVector"
    MongoDBv3 = "MongoDBv3"
    MSSQLSpatial = "MSSQLSpatial"
    MVT = "MVT"
    MySQL = "MySQL"
    NAS = "NAS"
    OAPIF = "OAPIF"
    OCI = "OCI"
    ODBC = "ODBC"
    ODS = "ODS"
    OpenFileGDB = "OpenFileGDB"
    OSM = "OSM"
    Parquet = "Parquet"
    PGDump = "PGDump"
    PGeo = "PGeo"
    PLScenes = "PLScenes"
    PMTiles = "PMTiles"
    PostgreSQL = "PostgreSQL"
    S57 = "S57"
    Selafin = "Selafin"
    SOSI = "SOSI"
    SQLite = "SQLite"
    SXF = "SXF"
    TopoJSON = "TopoJSON"
    VDV = "VDV"
    VFK = "VFK"
    WAsP = "WAsP"
    WFS = "WFS"
    XLS = "XLS"
    XLSX = "XLSX"
    XODR = "XODR"


class FieldType(enum.StrEnum):
    """OGR field types, as used by ``-fieldTypeToString``."""

    All = "All"
    Integer = "Integer"
    Integer64 = "Integer64"
    Real = "Real"
    String = "String"
    Date = "Date"
    Time = "Time"
    DateTime = "DateTime"
    Binary = "Binary"
    IntegerList = "IntegerList"
    Integer64List = "Integer64List"
    RealList = "RealList"
    StringList = "StringList"


class SqlDialect(enum.StrEnum):
    OGRSQL = "OGRSQL"
    SQLITE = "SQLITE"
    INDIRECT_SQLITE = "INDIRECT_SQLITE"


class GeometryDump(enum.StrEnum):
    """Geometry detail levels accepted by ``ogrinfo -geom``."""

    NO = "NO"
    YES = "YES"
    SUMMARY = "SUMMARY"
    WKT = "WKT"
    ISO_WKT = "ISO_WKT"


class WktFormat(enum.StrEnum):
    """Spatial reference WKT flavours accepted by ``ogrinfo -wkt_format``."""

    WKT1 = "WKT1"
    WKT2 = "WKT2"
    WKT2_2015 = "WKT2_2015"
    WKT2_2018 = "WKT2_2018"


POLYNOMIAL_ORDERS = frozenset({1, 2, 3})
