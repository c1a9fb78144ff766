"""Bounded history file: append samples, keep the last N lines."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)

# Undecodable bytes survive a read/rewrite cycle unchanged.
ENCODING = "utf-8"
ERRORS = "surrogateescape"


def split_lines(text: str) -> list[str]:
    """Split on newlines only, dropping the terminator of the last line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def append(path: str | Path, line: str) -> None:
    """Append one newline-terminated line, creating the file if absent.

    A single trailing line separator is accepted; embedded separators are not,
    use append_lines() for multi-line text.
    """
    line = line.rstrip("\r\n")
    if "\n" in line or "\r" in line:
        raise ValueError(f"line contains a line separator: {line!r}")
    with open(path, "a", encoding=ENCODING, errors=ERRORS) as f:
        f.write(line + "\n")


def append_lines(path: str | Path, text: str) -> int:
    """Append every non-blank line of `text`. Returns the number appended."""
    count = 0
    for line in split_lines(text):
        if not line.strip():
            continue
        append(path, line)
        count += 1
    logger.debug("appended %d line(s) to %s", count, path)
    return count


def compute_window(lines: list[str], window: int) -> tuple[list[str], bool]:
    """Pick the last `window` lines and say whether the file needs rewriting.

    Fewer lines than `window` yields no window at all; partial windows are
    never shown. A file holding exactly `window` lines is left as is.
    """
    if window < 1:
        raise ValueError(f"window must be >= 1, got {window}")
    if len(lines) < window:
        return [], False
    return lines[-window:], len(lines) > window


def _replace_contents(path: Path, lines: list[str]) -> None:
    # Temp file lives beside the target so os.replace stays a rename.
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
    )
    try:
        with os.fdopen(fd, "w", encoding=ENCODING, errors=ERRORS) as f:
            f.writelines(line + "\n" for line in lines)
        shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


def read_window(path: str | Path, window: int, rotate: bool = True) -> list[str]:
    """Return the last `window` lines of the file, or [] if there are fewer.

    With `rotate`, a file longer than `window` is atomically trimmed down to
    the returned lines. A missing file means no data yet.
    """
    path = Path(path)
    try:
        with open(path, encoding=ENCODING, errors=ERRORS) as f:
            lines = split_lines(f.read())
    except FileNotFoundError:
        logger.debug("%s does not exist yet", path)
        return []

    kept, should_rewrite = compute_window(lines, window)
    if not kept:
        logger.debug("%s has %d of %d lines, nothing to show", path, len(lines), window)
        return []

    if rotate and should_rewrite:
        _replace_contents(path, kept)
        logger.debug("rotated %s from %d to %d lines", path, len(lines), len(kept))

    return kept
