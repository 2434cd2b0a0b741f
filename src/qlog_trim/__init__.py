"""qlog_trim — strip leading whitespace from Qlik Sense log files."""

__all__ = [
    "__version__",
    "TrimConfig",
    "TrimRunResult",
    "run_trim",
    "trim_file",
]
__version__ = "0.1.0"

from qlog_trim.core.config import TrimConfig  # noqa: E402
from qlog_trim.core.runner import run_trim  # noqa: E402
from qlog_trim.core.trimmer import trim_file  # noqa: E402
from qlog_trim.model.run_result import TrimRunResult  # noqa: E402
