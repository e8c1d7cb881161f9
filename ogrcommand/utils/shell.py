"""Shell quoting and datasource identifier classification.

Every value that ends up in an assembled command line goes through
quote(). Datasource identifiers are the one exception: GDAL connection
strings such as ``PG:dbname=gis`` are passed through untouched because
their driver prefix must reach the tool as written, while filesystem
paths are quoted like any other value.

Example:
    >>> from ogrcommand.utils import shell
    >>> shell.quote("my file.shp")
    "'my file.shp'"
    >>> shell.render_datasource("PG:dbname=gis")
    'PG:dbname=gis'
    >>> shell.render_datasource("/data/roads.shp")
    "'/data/roads.shp'"
"""

from __future__ import annotations

import enum
import re

_CONNECTION_STRING = re.compile(r"^[A-Za-z]{2,}:")


class DatasourceKind(enum.Enum):
    CONNECTION_STRING = "connection_string"
    FILESYSTEM_PATH = "filesystem_path"


def quote(raw: str) -> str:
    """Quote a value so a POSIX shell reads it back as one argument.

    The value is always wrapped in single quotes, including values that
    would be safe unquoted; embedded single quotes are closed, escaped
    and reopened (``'"'"'``).

    Args:
        raw: Text to protect.

    Returns:
        The quoted token.
    """
    return "'" + raw.replace("'", "'\"'\"'") + "'"


def classify(identifier: str) -> DatasourceKind:
    """Decide whether a datasource identifier is a driver connection string.

    Identifiers starting with two or more ASCII letters followed by a
    colon (``PG:``, ``MySQL:``, ``WFS:``...) are connection strings.
    Anything else, including single-letter drive prefixes like ``C:``,
    is treated as a filesystem path.
    """
    if _CONNECTION_STRING.match(identifier):
        return DatasourceKind.CONNECTION_STRING

    return DatasourceKind.FILESYSTEM_PATH


def render_datasource(identifier: str) -> str:
    """Render a datasource identifier for the command line."""
    if classify(identifier) is DatasourceKind.CONNECTION_STRING:
        return identifier

    return quote(identifier)
