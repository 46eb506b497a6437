import argparse
import sys
from pathlib import Path
from typing import List, NoReturn, Optional, TYPE_CHECKING

from . import __version__
from .config import ConfigError, LiceConfig
from .engine import FileStatus, LiceEngine, Reporter, RunSummary
from .logutil import get_logger, set_verbosity

if TYPE_CHECKING:  # pragma: no cover - typing only
    from rich.console import Console as _Console
    from rich.text import Text as _Text
else:  # runtime optional import
    try:  # noqa: SIM105
        from rich.console import Console as _Console  # type: ignore
        from rich.text import Text as _Text  # type: ignore
    except ImportError:
        _Console = None  # type: ignore
        _Text = None  # type: ignore

ConsoleType = Optional["_Console"]

EXAMPLES = """\
examples:
  # Apply license to the current directory
  lice -f HEADER.txt .

  # Apply to 'src' and 'include', excluding 'vendor' and 'build'
  lice -f HEADER.txt -e vendor -e build src include
"""

_STATUS_LABELS = {
    FileStatus.CURRENT: ("License OK", "green"),
    FileStatus.INSERTED: ("Adding license", "cyan"),
    FileStatus.UPDATED: ("Updating license", "yellow"),
}


class _ArgumentParser(argparse.ArgumentParser):
    """Configuration errors exit with status 1 instead of argparse's 2."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _positive_int(value: str) -> int:
    try:
        num = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid number for -j: {value!r}")
    if num < 1:
        raise argparse.ArgumentTypeError(f"Invalid number for -j: {value!r} (must be >= 1)")
    return num


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="lice",
        description=f"lice v{__version__} - Automate source code license headers",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATHS",
        help="Directories or files to process. If omitted, the current directory is used (.).",
    )
    parser.add_argument("-f", "--file", dest="license_file", required=True, metavar="PATH", help="Path to the license header file (required)")
    parser.add_argument(
        "-e",
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Exclude any file/directory whose path component equals PATTERN (repeatable)",
    )
    parser.add_argument("-j", "--jobs", type=_positive_int, metavar="N", help="Number of worker threads (default: CPU count)")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Log skipped files and run details (-vv for debug)")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors and omit the summary line")
    parser.add_argument("--no-color", action="store_true", help="Disable colorized output even if rich present")
    parser.add_argument("--version", action="version", version=f"lice {__version__}")
    return parser


def _maybe_console(args: argparse.Namespace) -> ConsoleType:
    if getattr(args, "no_color", False):
        return None
    if _Console is None:
        return None
    # soft_wrap keeps long paths on one line
    return _Console(color_system="truecolor", stderr=False, force_terminal=True, soft_wrap=True, highlight=False)


def make_reporter(console: ConsoleType) -> Reporter:
    def _report(path: Path, status: FileStatus) -> None:
        label, color = _STATUS_LABELS.get(status, (status.value, "white"))
        if console is not None and _Text is not None:
            line = _Text("  ")
            line.append(f"{label}:", style=f"bold {color}")
            line.append(f" {path}")
            console.print(line)
        else:
            print(f"  {label}: {path}", flush=True)

    return _report


def _print_summary(summary: RunSummary) -> None:
    print(f"[lice] summary: {summary.format()}", file=sys.stderr, flush=True)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    argv = sys.argv[1:] if argv is None else argv
    if not argv:  # nothing to do; show usage like --help
        parser.print_help()
        return 0
    args = parser.parse_args(argv)
    set_verbosity(args.verbose, args.quiet)
    log = get_logger()

    try:
        config = LiceConfig.build(args.license_file, targets=args.paths, excludes=args.exclude, jobs=args.jobs)
    except ConfigError as exc:
        parser.error(str(exc))

    try:
        engine = LiceEngine.from_config(config)
    except (OSError, UnicodeDecodeError) as exc:
        log.error("Failed to read license file '%s': %s", config.license_file, exc)
        return 1

    summary = engine.run(make_reporter(_maybe_console(args)))
    if not args.quiet:
        _print_summary(summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
