"""CLI entry points for import-inspector."""

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from import_inspector import __version__
from import_inspector.collector import ModuleCollector
from import_inspector.config import Settings
from import_inspector.corelist import load_classifier
from import_inspector.errors import InspectorError
from import_inspector.formatter import Formatter, select_mode
from import_inspector.models import ModuleRecord, OutputMode
from import_inspector.scanners import select_scanner

logger = logging.getLogger(__name__)

DESCRIPTION = """\
Given filenames, extract and report the Python modules they import.

The files are never executed: they are analysed statically, so modules
loaded under a computed name cannot be discovered."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="importdeps", description=DESCRIPTION)
    parser.add_argument("files", nargs="*", metavar="FILE", help="source files to analyse")
    parser.add_argument("-e", dest="exclude_core", action="store_true",
                        help="exclude standard library modules from all output")
    parser.add_argument("-l", dest="list_", action="store_true",
                        help="print sorted, unique module names one per line")
    parser.add_argument("-0", dest="null", action="store_true",
                        help="like -l, but separate names with a null byte")
    parser.add_argument("-j", dest="json_", action="store_true",
                        help="print sorted, unique module names as a JSON array")
    parser.add_argument("-c", dest="manifest", action="store_true",
                        help="print a requires manifest, one line per import found")
    parser.add_argument("-s", "--scanner", dest="scanners", action="append", metavar="NAME",
                        help="scanner to try, in order (repeatable)")
    parser.add_argument("--log-level", help="logging level for diagnostics on stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def run(
    files: Sequence[str],
    settings: Settings,
    mode: OutputMode = OutputMode.verbose,
    exclude_core: bool = False,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """Scan ``files`` and write the report; return the exit status."""
    stdout = out or sys.stdout
    stderr = err or sys.stderr

    scanner = select_scanner(settings.scanners, encoding=settings.encoding)
    classifier = load_classifier()
    if exclude_core and classifier is None:
        logger.warning("Cannot tell core modules apart without stdlib-list; -e has no effect")
    formatter = Formatter(classifier)

    def write_report(path: str, records: list[ModuleRecord]) -> None:
        stdout.write(formatter.file_report(path, records))

    on_file = None if mode.is_batch else write_report

    collector = ModuleCollector(
        scanner,
        classifier=classifier,
        exclude_core=exclude_core,
        on_file=on_file,
        on_error=lambda msg: print(msg, file=stderr),
    )
    records = collector.collect(files)
    if mode.is_batch:
        stdout.write(formatter.render(mode, records))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Report the modules used by the given files, in the selected format."""
    from dotenv import load_dotenv

    load_dotenv()  # Load .env file (e.g. IMPORT_INSPECTOR_SCANNERS)

    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.files:
        parser.print_help()
        return 0

    try:
        settings = Settings.from_env().with_overrides(
            scanners=args.scanners, log_level=args.log_level
        )
        _setup_logging(settings.log_level)
        mode = select_mode(args.list_, args.null, args.json_, args.manifest)
        return run(args.files, settings, mode=mode, exclude_core=args.exclude_core)
    except InspectorError as e:
        print(e, file=sys.stderr)
        return 1


def extractuse_main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the per-file module report for the given files."""
    from dotenv import load_dotenv

    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="extractuse",
        usage="%(prog)s filename [...]",
        description=DESCRIPTION,
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help=argparse.SUPPRESS)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)
    if not args.files:
        print("Please supply at least one filename to analyze")
        parser.print_usage()
        return 0

    try:
        settings = Settings.from_env()
        _setup_logging(settings.log_level)
        return run(args.files, settings)
    except InspectorError as e:
        print(e, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
