"""Per-file transform — left-trim every line and rewrite with CR+LF."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Iterator

from qlog_trim.errors import MissingFileNameError, TrimIOError

_logger = logging.getLogger(__name__)

LINE_TERMINATOR = b"\r\n"


def output_path_for(source_file: Path, target_dir: Path) -> Path:
    """Join *target_dir* with the base name of *source_file*."""
    name = source_file.name
    if not name or name == "..":
        raise MissingFileNameError(source_file)
    return target_dir / name


def iter_lines(reader: IO[bytes]) -> Iterator[bytes]:
    """Yield lines without their terminator.

    LF and CR+LF both end a line; a lone CR elsewhere is content. A last
    line without a terminator is still yielded.
    """
    for raw in reader:
        if raw.endswith(b"\n"):
            raw = raw[:-1]
            if raw.endswith(b"\r"):
                raw = raw[:-1]
        yield raw


def trim_line(line: str) -> str:
    return line.lstrip()


def trim_file(source_file: Path, target_dir: Path) -> Path:
    """Write a left-trimmed, CR+LF-terminated copy of *source_file* into *target_dir*.

    An existing file of the same name in *target_dir* is overwritten. On a
    mid-stream failure the partially written output is left in place.

    Returns
    -------
    The path of the written file.

    Raises
    ------
    MissingFileNameError
        If *source_file* has no final path component.
    TrimIOError
        On any open, create, read, decode or write failure.
    """
    outfile = output_path_for(source_file, target_dir)

    try:
        reader = open(source_file, "rb")
    except OSError as exc:
        raise TrimIOError(f"Failed to open file {source_file}: {exc}", source_file) from exc

    with reader:
        try:
            writer = open(outfile, "wb")
        except OSError as exc:
            raise TrimIOError(f"Failed to create file {outfile}: {exc}", outfile) from exc

        lineno = 0
        try:
            # flush-on-close failures (disk full) land in the OSError branch
            with writer:
                for lineno, raw in enumerate(iter_lines(reader), start=1):
                    text = raw.decode("utf-8")
                    writer.write(trim_line(text).encode("utf-8") + LINE_TERMINATOR)
        except UnicodeDecodeError as exc:
            raise TrimIOError(
                f"Invalid UTF-8 in {source_file} at line {lineno}: {exc}",
                source_file,
            ) from exc
        except OSError as exc:
            raise TrimIOError(f"I/O error while trimming {source_file}: {exc}", source_file) from exc

    _logger.debug("Wrote %d line(s) from %s to %s", lineno, source_file, outfile)
    return outfile
