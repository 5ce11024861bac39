"""Command-line integration for the verbosity level.

Two uses:
  1. Library helpers for host tools: add_verbosity_arguments() wires
     -v/-Q/--verbosity into an argparse parser, level_from_args() turns
     the parsed namespace into a level, init_from_argv() is the minimal
     "last argument is the level" start-up pattern.
  2. The `verbosity` console command, which resolves and installs a
     level and either prints it or, with --at-least, answers through
     its exit code so shell scripts can gate their own output:

        verbosity -vv                  # prints: Verbose
        verbosity --at-least Terse     # exit 0 if level >= Terse, else 1
"""

import argparse
import sys
from typing import List, Mapping, Optional

from .config import resolve_level
from .levels import Verbosity, VerbosityParseError
from .manager import DEFAULT_LEVEL, is_at_least, set_as_global
from ._version import __app_name__, __version__


def verbosity_arg(text: str) -> Verbosity:
    """argparse `type=` converter for level tokens."""
    try:
        return Verbosity.from_str(text)
    except VerbosityParseError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


# ---------------------------------------------------------------------------
# Verbosity flags (shared by host tools and the console command)
# ---------------------------------------------------------------------------
VERBOSITY_FLAGS = {
    "--verbose": {"aliases": ["-v"], "action": "count", "default": 0,
                  "help": "Increase verbosity (-v = Terse, -vv = Verbose)"},
    "--quiet": {"aliases": ["-Q"], "action": "count", "default": 0,
                "help": "Decrease verbosity (composes with -v)"},
    "--verbosity": {"metavar": "LEVEL", "type": verbosity_arg, "default": None,
                    "help": "Set the level explicitly: "
                            + ", ".join(Verbosity.tokens())},
}


def add_verbosity_arguments(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """Add -v/--verbose, -Q/--quiet and --verbosity to parser."""
    for flag, kwargs in VERBOSITY_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        aliases = kwargs.get("aliases", [])
        parser.add_argument(flag, *aliases, **kw)
    return parser


def level_from_args(args: argparse.Namespace,
                    environ: Optional[Mapping[str, str]] = None) -> Verbosity:
    """Resolve the level from a namespace built by add_verbosity_arguments.

    --verbosity wins over -v/-Q counts; with neither given the
    environment and then the default apply. Any -v or -Q on the command
    line counts as an explicit choice, so -v -Q (net 0) installs QUIET
    even when $VERBOSITY names a louder level.
    """
    explicit = getattr(args, "verbosity", None)
    if explicit is None:
        verbose = getattr(args, "verbose", 0) or 0
        quiet = getattr(args, "quiet", 0) or 0
        if verbose or quiet:
            explicit = Verbosity.from_count(verbose - quiet)
    return resolve_level(explicit, environ=environ)


def init_from_argv(argv: Optional[List[str]] = None,
                   default: Verbosity = DEFAULT_LEVEL) -> Verbosity:
    """Install the level named by the last command-line argument.

    Falls back to `default` when there are no arguments or the last one
    is not a level token. Returns the level in effect afterwards.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].
        default: Level used when the last argument does not parse
    """
    if argv is None:
        argv = sys.argv[1:]
    token = argv[-1] if argv else ""
    try:
        chosen = Verbosity.from_str(token)
    except VerbosityParseError:
        chosen = default
    set_as_global(chosen)
    return Verbosity.level()


def _build_parser():
    """Build the parser for the `verbosity` console command."""
    parser = argparse.ArgumentParser(
        prog="verbosity",
        description="Resolve and report the process verbosity level",
        epilog=(
            "Precedence: --verbosity, then -v/-Q, then $VERBOSITY,\n"
            "then Quiet."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"{__app_name__} {__version__}",
    )
    add_verbosity_arguments(parser)
    parser.add_argument(
        "--at-least", metavar="LEVEL", type=verbosity_arg, default=None,
        help="Print nothing; exit 0 if the level is at least LEVEL, else 1",
    )
    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None, environ=None):
    """Main entry point for the verbosity command.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].
        environ: Environment mapping. None means os.environ.

    Returns:
        Exit code (0 = success, 1 = below --at-least threshold).
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        set_as_global(level_from_args(args, environ=environ))
        if args.at_least is not None:
            return 0 if is_at_least(args.at_least) else 1
        print(Verbosity.level())
        return 0
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
