"""File discovery — find ``.log`` files below a source directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator

_logger = logging.getLogger(__name__)

LOG_SUFFIX = ".log"


def is_log_name(name: str) -> bool:
    """Case-sensitive suffix match: ``a.log`` yes, ``b.LOG`` / ``d.log.bak`` no."""
    return name.endswith(LOG_SUFFIX)


def _iter_entries(directory: Path) -> Iterator[os.DirEntry[str]]:
    try:
        it = os.scandir(directory)
    except OSError as exc:
        _logger.debug("Skipping unreadable directory %s: %s", directory, exc)
        return
    with it:
        yield from it


def iter_log_files(root: Path, *, depth: int = 1) -> Iterator[Path]:
    """Yield ``.log`` files under *root*, at most *depth* levels down.

    ``depth=1`` means the immediate children of *root*; ``depth=0`` yields
    nothing. Directories are never yielded and symlinks are not followed
    when classifying an entry. Entries that cannot be inspected are skipped.
    Entries come in filesystem order, one directory entry at a time.
    """
    if depth < 1:
        return
    for entry in _iter_entries(root):
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as exc:
            _logger.debug("Skipping %s: %s", entry.path, exc)
            continue
        if is_dir:
            if depth > 1:
                yield from iter_log_files(Path(entry.path), depth=depth - 1)
            continue
        if _has_surrogates(entry.name):
            # name was not valid text on this filesystem
            _logger.debug("Skipping undecodable file name %r", entry.name)
            continue
        if is_log_name(entry.name):
            yield Path(entry.path)


def _has_surrogates(name: str) -> bool:
    return any("\udc80" <= ch <= "\udcff" for ch in name)
