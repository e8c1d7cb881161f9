"""Command assembly shared by the ogr2ogr and ogrinfo services.

A Command owns one option set. Every call to set_option() validates the
assignment and re-renders the full command line from scratch through the
family's rule table, so get_command() always reflects the current state.
run() hands the rendered command line to gdal_helpers.run_command().
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar

from ogrcommand.core import config
from ogrcommand.core import serialization
from ogrcommand.utils import gdal_helpers, shell

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping, Sequence

    from ogrcommand.options.base import OptionSet

logger = logging.getLogger(__name__)


def assemble(
    executable: str,
    tokens: Iterable[str],
    source: str,
    destination: str | None = None,
    layers: Iterable[str] = (),
) -> str:
    """Join the parts of a command line in the order GDAL expects.

    The order is: executable, option tokens, destination (conversion
    commands only), source, layer names. Datasource identifiers are
    rendered through shell.render_datasource(); layer names are quoted.

    Example:
        >>> assemble("ogr2ogr", ["-f", "'GPKG'"], "in.shp", "out.gpkg")
        "ogr2ogr -f 'GPKG' 'out.gpkg' 'in.shp'"
    """
    parts = [executable, *tokens]
    if destination is not None:
        parts.append(shell.render_datasource(destination))
    parts.append(shell.render_datasource(source))
    # layer names are always quoted, never emitted raw
    parts.extend(shell.quote(layer) for layer in layers)
    return " ".join(parts)


class Command:
    """Base class of the command families.

    Subclasses declare the option schema, the rule table and the settings
    attribute holding the executable name.
    """

    options_class: ClassVar[type[OptionSet]]
    rules: ClassVar[Sequence[serialization.Rule]]
    executable_setting: ClassVar[str]

    def __init__(
        self,
        source: str,
        layers: str | Iterable[str] = (),
        options: OptionSet | None = None,
        settings: config.Settings | None = None,
    ) -> None:
        if options is not None and not isinstance(options, self.options_class):
            raise TypeError(
                f"{type(self).__name__} expects {self.options_class.__name__}, "
                f"got {type(options).__name__}"
            )
        self.settings = settings or config.get_settings()
        self.source = source
        self.layers = [layers] if isinstance(layers, str) else list(layers)
        self._options = (
            options.model_copy(deep=True)
            if options is not None
            else self.options_class()
        )
        self._command = ""
        self._assemble()

    @property
    def executable(self) -> str:
        return getattr(self.settings, self.executable_setting)

    @property
    def destination(self) -> str | None:
        return None

    def _assemble(self) -> None:
        tokens = serialization.serialize(self.rules, self._options)
        self._command = assemble(
            self.executable,
            tokens,
            self.source,
            self.destination,
            self.layers,
        )
        logger.debug("Rendered %s", self._command)

    def set_option(self, name: str, value: Any = True) -> None:
        """Set one option and re-render the command line.

        Args:
            name: Option attribute name or GDAL spelling.
            value: New value; defaults to True for switches.

        Raises:
            UnknownOptionError: if the option is not part of the schema.
            OptionTypeError: if the value does not match the option kind.
        """
        self._options.set(name, value)
        self._assemble()

    def get_option(self, name: str) -> Any:
        return self._options.get(name)

    def get_command(self) -> str:
        return self._command

    def run(
        self,
        callback: Callable[[str], None] | None = None,
        env: Mapping[str, str] | None = None,
    ) -> str:
        """Execute the command and return its output.

        Args:
            callback: Called with each output line as it is produced.
            env: Extra environment variables, applied over the configured
                GDAL configuration options.

        Returns:
            Combined standard output and standard error.

        Raises:
            CommandError: if the command exits with a non-zero status.
        """
        process_env = dict(self.settings.gdal_config)
        if env:
            process_env.update(env)

        return gdal_helpers.run_command(
            self._command,
            callback=callback,
            env=process_env,
            timeout=self.settings.process_timeout,
        )
