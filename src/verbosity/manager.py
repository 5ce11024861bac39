"""
Process-wide verbosity cell.

One level per process, installed once at start-up and read from
anywhere afterwards:

    Unset ──set_as_global(level)──▶ Set(level)

Reads in the Unset state observe QUIET, so unconfigured tools stay
silent. The first install wins; later installs are ignored and return
False. Writers serialise on a lock. Readers take no lock: the cell is
a single reference, so a read sees either the default or the complete
installed member.
"""

import threading

from .levels import Verbosity


DEFAULT_LEVEL = Verbosity.QUIET


# =============================================================================
# Module-level singleton
# =============================================================================

_level: Verbosity = DEFAULT_LEVEL
_installed: bool = False
_lock = threading.Lock()


def set_as_global(level: Verbosity) -> bool:
    """Install level as the process-wide verbosity.

    Call once at program startup after parsing CLI arguments. Calling
    again is a caller error and is ignored: the first installed value
    stays in place for the rest of the process.

    Args:
        level: Level to install

    Returns:
        True if this call installed the level, False if a level was
        already installed

    Raises:
        TypeError: If level is not a Verbosity member
    """
    global _level, _installed

    if not isinstance(level, Verbosity):
        raise TypeError(
            f"expected Verbosity, got {type(level).__name__}: {level!r}")

    with _lock:
        if _installed:
            return False
        _level = level
        _installed = True
    return True


def level() -> Verbosity:
    """Return the installed verbosity, or QUIET if none was installed."""
    return _level


def is_installed() -> bool:
    """True once set_as_global has succeeded."""
    return _installed


def is_quiet() -> bool:
    """True when the global level is QUIET."""
    return _level == Verbosity.QUIET


def is_terse() -> bool:
    """True when terse output should show.

    VERBOSE also counts as terse: a verbose run includes the summary.
    """
    return _level != Verbosity.QUIET


def is_verbose() -> bool:
    """True when the global level is VERBOSE."""
    return _level == Verbosity.VERBOSE


def is_at_least(minimum: Verbosity) -> bool:
    """Check whether a message meant for `minimum` should be shown.

    This is the gate a reporting helper applies before printing:
    the message shows when level() >= minimum.
    """
    return _level >= minimum


# Names used by the callable surface
install_global = set_as_global
current_level = level


def _reset() -> None:
    """Return the cell to the Unset state. Test hook only."""
    global _level, _installed
    with _lock:
        _level = DEFAULT_LEVEL
        _installed = False
