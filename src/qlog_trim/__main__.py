"""CLI entry-point for qlog_trim.

Usage:
    python -m qlog_trim -s <source-dir> -t <target-dir>
    python -m qlog_trim -s <source-dir> -t <target-dir> [-m N] [--report FILE] [-v]

Qlik Sense Enterprise log files sometimes carry leading whitespace, which
gets in the way of fixed-width processing. Every ``*.log`` file directly in
the source directory is rewritten into the target directory with each line
left-trimmed and terminated by CR+LF. Existing files in the target are
overwritten.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import jsonschema

from qlog_trim import __version__
from qlog_trim.contracts.load import validate_instance
from qlog_trim.core.config import MAX_DEPTH_LIMIT, TrimConfig
from qlog_trim.core.runner import run_trim
from qlog_trim.errors import ConfigError, TrimError
from qlog_trim.utils.exit_codes import ExitCode
from qlog_trim.utils.json_norm import stable_json_dumps

_logger = logging.getLogger("qlog_trim")

REPORT_SCHEMA = "trim_run.schema.json"


def _max_depth(value: str) -> int:
    try:
        depth = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if not 0 <= depth <= MAX_DEPTH_LIMIT:
        raise argparse.ArgumentTypeError(
            f"must be between 0 and {MAX_DEPTH_LIMIT}, got {depth}"
        )
    return depth


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="qlog-trim",
        description=(
            "Remove leading whitespace (left trim) from every line of the "
            ".log files in a directory."
        ),
    )
    p.add_argument(
        "-s",
        "--source",
        type=Path,
        required=True,
        help="Directory containing the .log files to process.",
    )
    p.add_argument(
        "-t",
        "--target",
        type=Path,
        required=True,
        help="Directory where processed logs are stored. Existing files are overwritten.",
    )
    p.add_argument(
        "-m",
        "--max-depth",
        dest="max_depth",
        type=_max_depth,
        default=1,
        help=f"Subfolder search depth (0-{MAX_DEPTH_LIMIT}). Only the top level is searched at present.",
    )
    p.add_argument(
        "--report",
        type=Path,
        default=None,
        metavar="FILE",
        help="Write a JSON run report to FILE.",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Verbose (debug) logging on stderr.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p


def _write_report(report: Path, document: dict) -> None:
    validate_instance(document, REPORT_SCHEMA)
    report.parent.mkdir(parents=True, exist_ok=True)
    report.write_text(stable_json_dumps(document), encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (0 = ok, 1 = rejected config, 2 = error)."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    config = TrimConfig(source=args.source, target=args.target, max_depth=args.max_depth)

    try:
        result = run_trim(config)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.VIOLATION
    except TrimError as e:
        _logger.debug("Run aborted", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR

    if args.report is not None:
        try:
            _write_report(args.report, result.to_dict())
        except jsonschema.ValidationError as e:
            print(f"error: run report failed validation: {e.message}", file=sys.stderr)
            return ExitCode.ERROR
        except OSError as e:
            print(f"error: cannot write report {args.report}: {e}", file=sys.stderr)
            return ExitCode.ERROR

    return ExitCode.SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
