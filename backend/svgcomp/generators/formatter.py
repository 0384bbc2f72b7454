"""Code formatter seam — external formatter when configured, whitespace tidy otherwise."""

from __future__ import annotations

import logging
import re
import shlex
import subprocess

from svgcomp.config import settings

logger = logging.getLogger(__name__)

_BLANK_RUN_RE = re.compile(r"\n{3,}")


def format_code(code: str, syntax: str = "typescript", print_width: int | None = None) -> str:
    """Format generated component source.

    With ``settings.formatter_command`` set (for example ``npx prettier``), the
    code is piped through it with ``--parser``/``--print-width``. A failing or
    missing formatter is logged and the tidied source is returned instead.
    """
    width = print_width or settings.print_width
    tidied = tidy_whitespace(code)
    if not settings.formatter_command:
        return tidied

    cmd = shlex.split(settings.formatter_command) + ["--parser", syntax, "--print-width", str(width)]
    try:
        proc = subprocess.run(
            cmd,
            input=tidied,
            text=True,
            capture_output=True,
            check=False,
            timeout=settings.formatter_timeout,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.warning("Formatter %r unavailable: %s", cmd[0], e)
        return tidied

    if proc.returncode != 0:
        logger.warning("Formatter exited %d: %s", proc.returncode, proc.stderr.strip())
        return tidied
    return proc.stdout


def tidy_whitespace(code: str) -> str:
    """Strip trailing spaces per line and collapse runs of blank lines."""
    lines = [line.rstrip() for line in code.splitlines()]
    text = "\n".join(lines).strip("\n")
    return _BLANK_RUN_RE.sub("\n\n", text) + "\n"
