"""Runner — validates the config, trims every matching file, tallies the result."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import TextIO

from qlog_trim.core.config import TrimConfig
from qlog_trim.core.discover import iter_log_files
from qlog_trim.core.trimmer import trim_file
from qlog_trim.errors import SamePathError, SourceNotDirectoryError
from qlog_trim.model.run_result import TrimRunResult

_logger = logging.getLogger(__name__)

# The batch loop only visits the immediate children of the source directory;
# ``TrimConfig.max_depth`` is recorded but not applied.
TRAVERSAL_DEPTH = 1


def quote_path(path: Path) -> str:
    """Double-quoted rendering of *path* with quotes, backslashes and control characters escaped."""
    return json.dumps(str(path), ensure_ascii=False)


def check_preconditions(config: TrimConfig) -> None:
    """Raise a ``ConfigError`` subclass if *config* must not be run.

    Paths are compared as given, without resolving them.
    """
    if config.source == config.target:
        raise SamePathError(config.source)
    if not config.source.is_dir():
        raise SourceNotDirectoryError(config.source)


def run_trim(config: TrimConfig, *, out: TextIO | None = None) -> TrimRunResult:
    """Trim every ``.log`` file in ``config.source`` into ``config.target``.

    Progress goes to *out* (stdout by default): one line per file, then the
    processed count and the quoted source directory. The first failing file
    aborts the run; files already written stay on disk.
    """
    stream = out if out is not None else sys.stdout
    check_preconditions(config)

    if config.max_depth != TRAVERSAL_DEPTH:
        _logger.debug(
            "max_depth=%d requested; traversal is limited to depth %d",
            config.max_depth,
            TRAVERSAL_DEPTH,
        )

    result = TrimRunResult(config=config)
    for log_file in iter_log_files(config.source, depth=TRAVERSAL_DEPTH):
        print(log_file, file=stream)
        output = trim_file(log_file, config.target)
        result.record(output)
        _logger.info("Trimmed %s -> %s", log_file, output)

    print(f"processed files: {result.processed}", file=stream)
    print(quote_path(config.source), file=stream)
    return result
