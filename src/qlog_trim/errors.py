"""Exception hierarchy for the trim pipeline.

Only ``qlog_trim.__main__`` maps these onto exit codes; library code
raises and lets them propagate.
"""

from __future__ import annotations

from pathlib import Path


class TrimError(Exception):
    """Base class for every error raised by qlog_trim."""


class ConfigError(TrimError):
    """Precondition failure detected before any file is touched."""


class SamePathError(ConfigError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            "source and target are equal, please select a different target directory"
        )


class SourceNotDirectoryError(ConfigError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"source must be a directory, not a file: {path}")


class TrimIOError(TrimError):
    """An open/create/read/write failure while transforming one file.

    The original ``OSError`` or ``UnicodeDecodeError`` is chained as
    ``__cause__``.
    """

    def __init__(self, message: str, path: Path) -> None:
        self.path = path
        super().__init__(message)


class MissingFileNameError(TrimError):
    """Raised when a source path has no final component to name the output.

    Discovery never yields such paths; this only fires for direct callers
    of ``trim_file``.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"cannot derive an output file name from {path}")
