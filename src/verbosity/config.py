"""Start-up resolution of the verbosity level.

Layered resolution (highest priority wins):
  1. Explicit value: usually a CLI flag
  2. Environment: the VERBOSITY variable
  3. Default: QUIET

An explicit value that does not parse is the caller's mistake and
raises. An environment value that does not parse is skipped, the same
way an unreadable config file falls through to the next layer.
"""

import os
from typing import Mapping, Optional, Union

from .levels import Verbosity, VerbosityParseError
from .manager import DEFAULT_LEVEL, set_as_global


ENV_VAR = "VERBOSITY"


def level_from_env(environ: Optional[Mapping[str, str]] = None,
                   var: str = ENV_VAR) -> Optional[Verbosity]:
    """Read the level from the environment.

    Returns None when the variable is unset or does not parse.
    """
    if environ is None:
        environ = os.environ
    value = environ.get(var)
    if value is None:
        return None
    try:
        return Verbosity.from_str(value)
    except VerbosityParseError:
        return None


def resolve_level(explicit: Union[Verbosity, str, None] = None,
                  environ: Optional[Mapping[str, str]] = None,
                  default: Verbosity = DEFAULT_LEVEL) -> Verbosity:
    """Resolve the level using three-layer precedence.

    Args:
        explicit: Level or token given by the caller (e.g. from argv)
        environ: Environment mapping (default: os.environ)
        default: Level used when no layer supplies one

    Returns:
        The resolved Verbosity

    Raises:
        VerbosityParseError: If explicit is a string that does not parse
    """
    if explicit is not None:
        if isinstance(explicit, Verbosity):
            return explicit
        return Verbosity.from_str(explicit)

    from_env = level_from_env(environ)
    if from_env is not None:
        return from_env

    return default


def init_from_env(environ: Optional[Mapping[str, str]] = None,
                  default: Verbosity = DEFAULT_LEVEL) -> Verbosity:
    """Resolve from the environment, install globally, return the level.

    Returns the level actually in effect, which is the earlier value if
    one was already installed.
    """
    set_as_global(resolve_level(environ=environ, default=default))
    return Verbosity.level()
