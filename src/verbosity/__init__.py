"""
verbosity: a process-wide Quiet / Terse / Verbose setting for CLI tools.

Parse the level from a flag, install it once at start-up, and query it
from any call site without passing it around:

    from verbosity import Verbosity, VerbosityParseError

    try:
        level = Verbosity.from_str(flag)
    except VerbosityParseError:
        level = Verbosity.QUIET
    level.set_as_global()

    if Verbosity.level() >= Verbosity.TERSE:
        print("terse message")

Public API:
    Verbosity           : QUIET < TERSE < VERBOSE
    VerbosityParseError : unrecognized level token
    parse               : token -> Verbosity
    install_global      : one-time install (first call wins)
    current_level       : installed level, QUIET if unset
    is_quiet / is_terse / is_verbose / is_at_least / is_installed
    resolve_level       : explicit > $VERBOSITY > default
    init_from_env       : resolve from the environment and install
    add_verbosity_arguments, level_from_args, init_from_argv: argparse helpers
"""

from verbosity._version import __version__, __app_name__
from verbosity.levels import Verbosity, VerbosityParseError, parse
from verbosity.manager import (
    set_as_global, level, install_global, current_level,
    is_installed, is_quiet, is_terse, is_verbose, is_at_least,
)
from verbosity.config import resolve_level, level_from_env, init_from_env
from verbosity.cli import add_verbosity_arguments, level_from_args, init_from_argv

__all__ = [
    "__version__", "__app_name__",
    "Verbosity", "VerbosityParseError", "parse",
    "set_as_global", "level", "install_global", "current_level",
    "is_installed", "is_quiet", "is_terse", "is_verbose", "is_at_least",
    "resolve_level", "level_from_env", "init_from_env",
    "add_verbosity_arguments", "level_from_args", "init_from_argv",
]
