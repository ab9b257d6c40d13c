from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from wordcount.errors import PassageUnreadableError

logger = logging.getLogger(__name__)


def _trimmed(handle: TextIO) -> Iterator[str]:
    for line in handle:
        yield line.strip()


@contextmanager
def open_passage(
    path: str | Path, encoding: str = "utf-8"
) -> Iterator[Iterator[str]]:
    """Open a passage and yield its lines with surrounding whitespace removed.

    The file is opened before the first line is requested, so a missing or
    unreadable source raises ``PassageUnreadableError`` up front. The handle
    is closed when the block exits, whether or not consumption finished.
    """
    source = str(path)
    try:
        handle = open(path, "r", encoding=encoding, errors="replace")
    except OSError as error:
        logger.debug("Opening %s failed: %s", source, error)
        raise PassageUnreadableError(source) from error

    logger.debug("Reading passage from %s", source)
    with handle:
        yield _trimmed(handle)


def read_lines(path: str | Path, encoding: str = "utf-8") -> Iterator[str]:
    with open_passage(path, encoding=encoding) as lines:
        yield from lines
