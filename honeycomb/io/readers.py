"""Line readers for honeycomb and dictionary files."""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..core.exceptions import HoneycombFormatError, InputUnavailableError
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def read_lines(path: Path | str) -> List[str]:
    """Return every line of ``path`` without line terminators."""

    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputUnavailableError(f"Cannot read {source}: {exc}") from exc
    return text.splitlines()


def read_honeycomb(path: Path | str) -> List[str]:
    """Read ring lines from a honeycomb file.

    The first line holds the number of rings; the rings follow, center
    first. The count is only a hint, every remaining line is returned.
    """

    lines = read_lines(path)
    if not lines:
        raise HoneycombFormatError(f"Honeycomb file {path} is missing its ring count header")

    header, rings = lines[0].strip(), lines[1:]
    try:
        declared = int(header)
    except ValueError as exc:
        raise HoneycombFormatError(f"Invalid ring count header {header!r} in {path}") from exc

    rings = [line.strip() for line in rings]
    while rings and not rings[-1]:
        rings.pop()
    if declared != len(rings):
        LOGGER.warning("Header declares %s rings but %s were read from %s", declared, len(rings), path)
    return rings


def read_dictionary(path: Path | str) -> List[str]:
    return read_lines(path)
