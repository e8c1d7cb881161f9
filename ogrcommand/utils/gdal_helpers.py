"""Execution wrapper for assembled GDAL/OGR command lines.

Commands built by ogrcommand are complete shell command lines (values are
already quoted), so they are executed through the shell. Standard error
is merged into standard output; each output line can be streamed to a
callback while the process runs, and the whole output is returned once it
exits successfully.

A non-zero exit status raises CommandError carrying the exit status and
the captured output. When a timeout is given and elapses, the process is
killed along with its child processes and CommandTimeoutError is
raised.

Example:
    Run ogrinfo and print its output as it arrives:
        >>> from ogrcommand.utils.gdal_helpers import run_command, CommandError

        >>> try:
        ...     output = run_command(
        ...         "ogrinfo -so -al '/data/roads.shp'",
        ...         callback=print,
        ...         env={"SHAPE_ENCODING": "UTF-8"},
        ...     )
        ... except CommandError as e:
        ...     print(f"ogrinfo failed ({e.returncode}): {e.output}")
"""

from __future__ import annotations

import logging
import os
import signal
import subprocess
import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

logger = logging.getLogger(__name__)


class CommandError(RuntimeError):
    """Exception raised when a GDAL/OGR command exits with a failure.

    Attributes:
        command: The command line that was executed.
        returncode: Exit status of the process.
        output: Combined standard output and standard error.
    """

    def __init__(self, command: str, returncode: int, output: str) -> None:
        super().__init__(output.strip() or "Unknown command failure")
        self.command = command
        self.returncode = returncode
        self.output = output


class CommandTimeoutError(CommandError):
    """Exception raised when a command outlives its timeout."""


def run_command(
    command: str,
    callback: Callable[[str], None] | None = None,
    env: Mapping[str, str] | None = None,
    timeout: float | None = None,
) -> str:
    """Execute a command line and return its output.

    The command runs in its own session, so a timeout kills the shell
    together with every process it started.

    Args:
        command: Complete shell command line.
        callback: Called with each output line as it is produced.
        env: Environment variables set on top of the current environment.
        timeout: Seconds after which the process group is killed.

    Returns:
        Combined standard output and standard error of the command.

    Raises:
        CommandError: if the command exits with a non-zero status code.
        CommandTimeoutError: if the command is killed after ``timeout``.
    """
    process_env = os.environ.copy()
    if env:
        process_env.update(env)

    logger.info("Running %s", command)
    lines: list[str] = []
    timed_out = threading.Event()

    with subprocess.Popen(
        command,
        shell=True,
        env=process_env,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        start_new_session=True,
    ) as process:

        def kill() -> None:
            # the shell's children hold the output pipe open
            try:
                os.killpg(process.pid, signal.SIGKILL)
            except ProcessLookupError:
                return
            timed_out.set()

        timer = threading.Timer(timeout, kill) if timeout else None
        if timer is not None:
            timer.start()
        try:
            for line in process.stdout or ():
                lines.append(line)
                logger.debug("%s", line.rstrip("\n"))
                if callback is not None:
                    callback(line)
            returncode = process.wait()
        finally:
            if timer is not None:
                timer.cancel()
                timer.join()

    output = "".join(lines)
    if timed_out.is_set():
        logger.error("Command timed out after %ss: %s", timeout, command)
        raise CommandTimeoutError(command, returncode, output)
    if returncode != 0:
        logger.error("Command failed with exit status %d: %s", returncode, command)
        raise CommandError(command, returncode, output)

    return output
