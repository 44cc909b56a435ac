#!/usr/bin/env python3
"""
dupes CLI: command line interface for duplicate file detection.
Only reports: nothing is ever deleted, moved or linked.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
import logging
from pathlib import Path
from typing import List, Optional, NoReturn

from dupes import __version__
from dupes.core.models import ScanParams, ScanStats, OutputMode, EngineResult, HashAlgorithmName, AVOIDED_LABEL
from dupes.core.interfaces import ErrorSink, ReportSink
from dupes.core.error_sink import LoggingErrorSink
from dupes.commands import DuplicateScanCommand
from dupes.services.report_service import TextReportSink, JsonReportSink
from dupes.aliases import ALGORITHM_ALIASES, ALGORITHM_CHOICES, ALGORITHM_HELP_TEXT, EPILOG_TEXT

LOG_FORMAT = "%(levelname)-8s | %(name)-25s | %(message)s"


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="dupes",
            description="Finds duplicate files (by content hash). "
                        "Optionally lists files without a copy in a set of NEGATIVE directories.",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        # Directories
        parser.add_argument(
            "--dir", "-d",
            action="append",
            default=[],
            type=str,
            metavar="DIR",
            dest="dirs",
            help="Base directory (repeatable). Default: current directory"
        )
        parser.add_argument(
            "--anti-dir", "-D",
            action="append",
            default=[],
            type=str,
            metavar="DIR",
            dest="anti_dirs",
            help="NEGATIVE directory (repeatable): don't list files whose content is\n"
                 "present in one of them. Finds the difference between two sets of files.\n"
                 "Implies -A and -S"
        )

        # Filtering options
        parser.add_argument(
            "--ignore-smaller-than", "-i",
            default="0",
            type=str,
            metavar="SIZE",
            help="Ignore all files smaller than SIZE (e.g., 4096, 500K, 1M). Default: 0"
        )
        parser.add_argument(
            "--avoid-compare-if-larger", "-a",
            default="32M",
            type=str,
            metavar="SIZE",
            dest="avoid_compare_if_larger",
            help="Compare files larger than SIZE by size only. Default: 32M. Use -a 0 for unlimited"
        )
        parser.add_argument(
            "--exclude-path", "-e",
            action="append",
            default=[],
            type=str,
            metavar="REGEX",
            dest="exclude_paths",
            help="Exclude paths matching REGEX (repeatable); applies to both -d and -D.\n"
                 "Matching directories are not descended into"
        )

        # Reporting options
        parser.add_argument(
            "--show-non-duplicates", "-S",
            action="store_true",
            help="List also files that are unique (automatically on if -D is used)"
        )
        parser.add_argument(
            "--always-hash", "-A",
            action="store_true",
            help="Always include the hash, even if there is only one file of that size (implies -a 0)"
        )
        parser.add_argument(
            "--algorithm",
            choices=ALGORITHM_CHOICES,
            default="sha256",
            type=str,
            help=ALGORITHM_HELP_TEXT
        )

        # Output options
        parser.add_argument(
            "--emit-json", "-j",
            action="store_true",
            help="Output in JSON format: [[hash, size, [paths...]], ...]\n"
                 f"hash is \"\" for unhashed unique files and \"{AVOIDED_LABEL}\"\n"
                 "for groups compared by size only. Read errors go to stderr"
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show progress logging and statistics on stderr"
        )
        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate directories before any walk begins."""
        for label, dirs in (("Directory", args.dirs), ("Negative directory", args.anti_dirs)):
            for directory in dirs:
                path = Path(directory)
                if not path.exists():
                    self.error_exit(f"{label} not found: {directory}")
                if not path.is_dir():
                    self.error_exit(f"{label} is not a directory: {directory}")

    def create_params(self, args: argparse.Namespace) -> ScanParams:
        """Create ScanParams from CLI arguments."""
        try:
            return ScanParams.from_human_readable(
                roots=args.dirs or ["."],
                negative_roots=args.anti_dirs,
                exclude_patterns=args.exclude_paths,
                min_size_str=args.ignore_smaller_than,
                avoid_compare_above_str=args.avoid_compare_if_larger,
                force_hash=args.always_hash,
                report_uniques=args.show_non_duplicates,
                output_mode=OutputMode.JSON if args.emit_json else OutputMode.TEXT,
                algorithm=ALGORITHM_ALIASES.get(args.algorithm, HashAlgorithmName.SHA256),
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def configure_logging(self) -> None:
        if os.environ.get("DEBUG"):
            level = logging.DEBUG
        elif self.verbose:
            level = logging.INFO
        else:
            level = logging.ERROR
        logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)

    @staticmethod
    def create_sinks(params: ScanParams) -> tuple[ReportSink, ErrorSink]:
        """Pick the report renderer; text output shows read errors inline."""
        if params.output_mode == OutputMode.JSON:
            return JsonReportSink(sys.stdout), LoggingErrorSink()
        text_sink = TextReportSink(sys.stdout)
        return text_sink, text_sink

    def run_scan(self, params: ScanParams) -> tuple[EngineResult, ScanStats]:
        """Execute the scan workflow."""
        report_sink, error_sink = self.create_sinks(params)
        command = DuplicateScanCommand()

        if self.verbose:
            roots = ", ".join(params.roots)
            sys.stderr.write(f"Scanning: {roots}\n")
            if params.negative_roots:
                sys.stderr.write(f"Negative set: {', '.join(params.negative_roots)}\n")

        result, stats = command.execute(params, report_sink=report_sink, error_sink=error_sink)

        if self.verbose:
            sys.stderr.write("\n" + stats.summary() + "\n")
        return result, stats

    def output_footer(self, params: ScanParams, result: List) -> None:
        """Plain-text hint when nothing was reported."""
        if self.quiet or params.output_mode == OutputMode.JSON:
            return
        if not result:
            print("No duplicates found.", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: Optional[List[str]] = None) -> None:
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet
        self.configure_logging()

        self.validate_args(args)
        params = self.create_params(args)

        result, _ = self.run_scan(params)
        self.output_footer(params, result)

        elapsed = time.time() - self.start_time
        if self.verbose:
            sys.stderr.write(f"Completed in {elapsed:.2f} seconds\n")


def main(argv: Optional[List[str]] = None) -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run(argv)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except BrokenPipeError:
        # Reader went away (e.g. piped into head); stop quietly
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(0)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
