"""Loading source text as a list of lines.

Lines are line-break-normalized ("\\r\\n" and "\\r" become "\\n") and carry no
terminator. This is the only place scopelex touches the filesystem.
"""

from __future__ import annotations

from pathlib import Path

from scopelex.config import get_lex_config
from scopelex.errors import SourceReadError
from scopelex.utils.logger import get_logger

logger = get_logger(__name__)


def split_lines(text: str) -> list[str]:
    """Split text into lines, normalizing line breaks.

    A single trailing terminator does not produce an extra empty line.

    Example:
        >>> split_lines("a\\r\\nb\\rc\\n")
        ['a', 'b', 'c']
        >>> split_lines("")
        []
    """
    if not text:
        return []
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = normalized.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def read_source_lines(path: str | Path, encoding: str | None = None) -> list[str]:
    """Read a source file into normalized lines.

    Args:
        path: File to read
        encoding: Text encoding (defaults to the active LexConfig's encoding)

    Returns:
        The file's lines without terminators

    Raises:
        SourceReadError: If the file cannot be opened or decoded

    """
    config = get_lex_config()
    source_path = Path(path)
    try:
        # newline="" keeps "\r" intact so split_lines sees the raw breaks
        with source_path.open(
            encoding=encoding or config.encoding, errors=config.errors, newline=""
        ) as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(str(path), str(e)) from e

    lines = split_lines(text)
    logger.debug("Read %d lines from %s", len(lines), source_path)
    return lines
