"""CLI interface for soltest."""

from __future__ import annotations

import argparse
import importlib.metadata as metadata
import sys

from soltest.config import COLOR_MODES, LOG_LEVELS, Config
from soltest.errors import EX_USAGE, SoltestError
from soltest.logging_config import setup_logging
from soltest.report import Reporter
from soltest.runner import Runner

EPILOG = """\
Fixtures are read from a "data" directory next to each solution:
  data/<name>.in    passed to the program as a single argument
  data/<name>.out   expected standard output

Supported extensions:
  c                 compiled with -std=c18 -Werror to <solution>.exe
  cpp, cc, cxx      compiled with -std=c++17 -Werror to <solution>.exe
  cs                compiled with mcs, run with mono
  go                go run
  java              java (11 or newer)
  rs                compiled with rustc -O to <solution>.exe
  scala             scala
  anything else     must be executable; run directly
  exe, iml, log     skipped

Exit status:
  0   all fixtures passed
  1   a fixture failed (remaining solutions are not tested)
  64  usage error or unsupported toolchain version
  65  a solution path does not exist
  69  a required tool is missing or a solution is not executable"""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(EX_USAGE, f"{self.prog}: error: {message}\n")


def get_version() -> str:
    try:
        return metadata.version("soltest")
    except metadata.PackageNotFoundError:
        return "unknown"


def build_arg_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="soltest",
        description="Build solutions and check them against their input/output fixtures.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )
    parser.add_argument("solutions", nargs="*", metavar="solution", help="Solution file to test")
    parser.add_argument("--version", action="version", version=get_version())
    parser.add_argument("--data-dir", type=str, default=None, help='Fixture directory name (default: "data")')
    parser.add_argument("--color", choices=COLOR_MODES, default=None, help="Colourise output")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default=None, help="Diagnostic log level")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if not args.solutions:
        parser.print_usage(sys.stderr)
        sys.exit(EX_USAGE)

    try:
        config = Config.from_env(
            data_dir_name=args.data_dir,
            color=args.color,
            log_level=args.log_level,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EX_USAGE)

    setup_logging(config.log_level)
    reporter = Reporter(color=config.color)
    runner = Runner(config, reporter=reporter)

    try:
        result = runner.run_batch(args.solutions)
    except SoltestError as e:
        Reporter(sys.stderr, color=config.color).error(str(e))
        sys.exit(e.exit_code)

    sys.exit(result.exit_code)


if __name__ == "__main__":
    main()
