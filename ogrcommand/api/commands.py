"""Command preview and execution API endpoints.

This module exposes the ogr2ogr and ogrinfo command builders over HTTP.
Clients post the datasource identifiers, optional layer names and an
options mapping (keys are option names or their GDAL spelling, enum
members are given by value, compound values as objects). The response
holds the assembled command line. When ``run`` is requested and command
execution is enabled in the settings, the command is executed and its
output is returned as well. The handlers are synchronous, so FastAPI runs
them in its threadpool and a running command does not block the event
loop.

Example:
    Preview an ogr2ogr conversion:
        >>> response = client.post(
        ...     "/api/commands/ogr2ogr",
        ...     json={
        ...         "destination": "output.gpkg",
        ...         "source": "input.shp",
        ...         "options": {"f": "GPKG", "nln": "roads"},
        ...     },
        ... )
        >>> response.json()["command"]
        "ogr2ogr -f 'GPKG' -nln 'roads' 'output.gpkg' 'input.shp'"
"""

from __future__ import annotations

from typing import Any

import fastapi
import pydantic

from ogrcommand.core import config
from ogrcommand.options import ConversionOptions, InspectionOptions
from ogrcommand.options.errors import OptionError
from ogrcommand.services import Command, Ogr2Ogr, OgrInfo
from ogrcommand.utils import gdal_helpers

router = fastapi.APIRouter(prefix="/api/commands", tags=["commands"])


class InspectionRequest(pydantic.BaseModel):
    source: str
    layers: list[str] = []
    options: dict[str, Any] = {}
    run: bool = False


class ConversionRequest(InspectionRequest):
    destination: str


class CommandResponse(pydantic.BaseModel):
    command: str
    output: str | None = None


def _option_error(exc: OptionError) -> fastapi.HTTPException:
    return fastapi.HTTPException(status_code=422, detail=str(exc))


def _respond(
    command: Command,
    run: bool,
    settings: config.Settings,
) -> CommandResponse:
    """Render the command and run it if asked to.

    Raises:
        HTTPException: 403 if execution is disabled, 502 if the command
            fails.
    """
    if not run:
        return CommandResponse(command=command.get_command())

    if not settings.allow_execution:
        raise fastapi.HTTPException(
            status_code=403,
            detail="Command execution is disabled",
        )

    try:
        output = command.run()
    except gdal_helpers.CommandError as exc:
        raise fastapi.HTTPException(
            status_code=502,
            detail={"returncode": exc.returncode, "output": exc.output},
        ) from exc

    return CommandResponse(command=command.get_command(), output=output)


@router.post("/ogr2ogr")
def ogr2ogr_command(
    request: ConversionRequest,
    settings: config.Settings = fastapi.Depends(config.get_settings),  # noqa: B008
) -> CommandResponse:
    """Assemble (and optionally run) an ogr2ogr command.

    Raises:
        HTTPException: 422 on unknown options or invalid option values.
    """
    try:
        options = ConversionOptions.from_mapping(request.options)
    except OptionError as exc:
        raise _option_error(exc) from exc

    command = Ogr2Ogr(
        request.destination,
        request.source,
        request.layers,
        options=options,
        settings=settings,
    )
    return _respond(command, request.run, settings)


@router.post("/ogrinfo")
def ogrinfo_command(
    request: InspectionRequest,
    settings: config.Settings = fastapi.Depends(config.get_settings),  # noqa: B008
) -> CommandResponse:
    """Assemble (and optionally run) an ogrinfo command.

    Raises:
        HTTPException: 422 on unknown options or invalid option values.
    """
    try:
        options = InspectionOptions.from_mapping(request.options)
    except OptionError as exc:
        raise _option_error(exc) from exc

    command = OgrInfo(
        request.source,
        request.layers,
        options=options,
        settings=settings,
    )
    return _respond(command, request.run, settings)
