"""Opening URLs with the operating system's default handler."""

from __future__ import annotations

import logging
import subprocess
import sys

from .errors import LinkOpenError, UnsupportedPlatformError

logger = logging.getLogger(__name__)


def _open_command(url: str, platform: str) -> list[str]:
    if platform.startswith(("linux", "freebsd", "openbsd", "netbsd")):
        return ["xdg-open", url]
    if platform == "darwin":
        return ["open", url]
    if platform in ("win32", "cygwin"):
        return ["cmd", "/C", "start", "", url]
    raise UnsupportedPlatformError(f"Unsupported operating system: {platform}")


def open_in_default_handler(url: str, platform: str | None = None) -> None:
    """Hand ``url`` to the platform's opener and wait for it to exit.

    Raises UnsupportedPlatformError when no opener is known, LinkOpenError
    when the opener is missing or exits non-zero.
    """
    command = _open_command(url, platform or sys.platform)
    logger.info("Opening link with %s", command[0])
    try:
        result = subprocess.run(
            command,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError as exc:
        raise LinkOpenError(f"Failed to launch {command[0]}: {exc}") from exc

    if result.returncode != 0:
        raise LinkOpenError(f"Failed to open unsubscribe link: {url}")
