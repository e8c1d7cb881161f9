"""Application settings and configuration management.

This module provides Pydantic-based settings management that loads
configuration from environment variables or a .env file. Settings cover
the GDAL executables to invoke, the process timeout, GDAL configuration
options passed to every command, and the HTTP surface (execution switch
and CORS origins).

Example:
    Settings can be accessed via the cached get_settings() function:
        >>> from ogrcommand.core.config import get_settings
        >>> settings = get_settings()
        >>> print(settings.ogr2ogr_executable)

    Environment variables can override defaults:
        >>> OGR2OGR_EXECUTABLE=/opt/gdal/bin/ogr2ogr
        >>> PROCESS_TIMEOUT=300
        >>> GDAL_CONFIG='{"GDAL_DATA": "/opt/gdal/share/gdal"}'
"""

import functools

import pydantic_settings


class Settings(pydantic_settings.BaseSettings):
    """Runtime configuration pulled from environment variables or defaults.

    Attributes:
        ogr2ogr_executable: Name or path of the ogr2ogr executable.
        ogrinfo_executable: Name or path of the ogrinfo executable.
        process_timeout: Seconds after which a running command is killed
            (None waits indefinitely).
        gdal_config: Environment variables (GDAL configuration options
            such as GDAL_DATA or PROJ_LIB) set for every command.
        allow_execution: Whether the HTTP API may run commands or only
            render them.
        allow_origins: List of allowed CORS origins (["*"] allows all).

    Example:
        Create settings with custom values:
            >>> settings = Settings(
            ...     ogr2ogr_executable="/usr/local/bin/ogr2ogr",
            ...     process_timeout=60,
            ...     gdal_config={"OGR_GEOJSON_MAX_OBJ_SIZE": "0"},
            ... )
    """

    ogr2ogr_executable: str = "ogr2ogr"
    ogrinfo_executable: str = "ogrinfo"
    process_timeout: float | None = None
    gdal_config: dict[str, str] = {}
    allow_execution: bool = False
    allow_origins: list[str] = ["*"]

    model_config = pydantic_settings.SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


@functools.lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded from environment variables or .env file and cached
    for the lifetime of the application. Subsequent calls return the same
    cached instance.

    Returns:
        Settings instance with all configuration values populated.
    """
    return Settings()
