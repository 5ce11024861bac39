"""
Verbosity level enumeration and textual parsing.

Three levels, ordered from quietest to loudest:

    ←── quieter ──────────── louder ──→
       0          1           2
     Quiet      Terse      Verbose

A message meant for level L is shown when the active level >= L.
Flag tokens are matched case-sensitively against the canonical names
"Quiet", "Terse" and "Verbose"; anything else is a parse error.

Verbosity is an IntEnum, so members also compare equal to their rank:
Verbosity.TERSE == 1 is True. Between members, equality is identity.
str() and format() give the token; numeric format codes give the rank.
"""

from enum import IntEnum
from typing import Any, Tuple


_NUMERIC_FORMAT_TYPES = frozenset("bcdoxXneEfFgG%")


class VerbosityParseError(ValueError):
    """Raised when a token does not name a known verbosity level.

    Attributes:
        token: The input that failed to parse (may be any object).
    """

    def __init__(self, token: Any):
        self.token = token
        super().__init__(f"{token!r} is not a valid verbosity "
                         f"(expected one of: {', '.join(Verbosity.tokens())})")


class Verbosity(IntEnum):
    """Reporting level: QUIET < TERSE < VERBOSE.

    Usage::

        level = Verbosity.from_str(flag)      # may raise VerbosityParseError
        level.set_as_global()
        if Verbosity.level() >= Verbosity.TERSE:
            print("terse message")
    """

    QUIET = 0      # No optional reporting
    TERSE = 1      # Summary reporting
    VERBOSE = 2    # Detailed reporting

    @property
    def token(self) -> str:
        """Canonical flag token ("Quiet", "Terse", "Verbose")."""
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.token

    def __format__(self, format_spec: str) -> str:
        # Numeric presentation types format the rank: f"{level:d}" -> "1"
        if format_spec and format_spec[-1] in _NUMERIC_FORMAT_TYPES:
            return int.__format__(int(self), format_spec)
        return format(self.token, format_spec)

    @classmethod
    def tokens(cls) -> Tuple[str, ...]:
        """Canonical tokens in rank order."""
        return tuple(member.token for member in cls)

    @classmethod
    def from_str(cls, text: Any) -> 'Verbosity':
        """Parse a canonical token into a Verbosity.

        Matching is exact and case-sensitive; no whitespace is stripped
        and there is no fallback. None and non-string input fail the
        same way as unknown text.

        Args:
            text: Flag value, e.g. "Terse"

        Returns:
            The matching Verbosity member

        Raises:
            VerbosityParseError: If text is not a canonical token
        """
        if isinstance(text, str):
            for member in cls:
                if member.token == text:
                    return member
        raise VerbosityParseError(text)

    @classmethod
    def from_count(cls, count: int) -> 'Verbosity':
        """Map a net -v/-Q count to a level, clamped to QUIET..VERBOSE.

        -v increments and -Q decrements; they compose, so -vv -Q = 1.
        """
        return cls(max(cls.QUIET, min(cls.VERBOSE, count)))

    # -----------------------------------------------------------------
    # Global cell accessors (delegate to manager)
    # -----------------------------------------------------------------

    def set_as_global(self) -> bool:
        """Install this level as the process-wide level.

        Only the first call has an effect; see manager.set_as_global.
        """
        # Lazy import to avoid circular dependency
        from .manager import set_as_global
        return set_as_global(self)

    @staticmethod
    def level() -> 'Verbosity':
        """Return the process-wide level (QUIET if never installed)."""
        from .manager import level
        return level()


def parse(text: Any) -> Verbosity:
    """Parse a flag token. Alias for Verbosity.from_str."""
    return Verbosity.from_str(text)
