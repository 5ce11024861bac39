"""
Tests for verbosity.levels: the Verbosity enum and token parsing.

Covers the canonical tokens, the case-sensitive parse contract,
ordering, -v/-Q count mapping and the parse error.
"""

import pytest

from verbosity.levels import Verbosity, VerbosityParseError, parse


CANONICAL = {
    "Quiet": Verbosity.QUIET,
    "Terse": Verbosity.TERSE,
    "Verbose": Verbosity.VERBOSE,
}


# =============================================================================
# Parsing
# =============================================================================

class TestFromStr:
    """Test Verbosity.from_str() / parse()."""

    @pytest.mark.parametrize("token,expected", sorted(CANONICAL.items()))
    def test_canonical_tokens(self, token, expected):
        """Each canonical token parses to its member."""
        assert Verbosity.from_str(token) is expected
        assert parse(token) is expected

    @pytest.mark.parametrize("token", ["Quiet", "Terse", "Verbose"])
    def test_str_round_trip(self, token):
        """str() reproduces the token that was parsed."""
        assert str(parse(token)) == token

    @pytest.mark.parametrize("text", [
        "",
        "verbose",
        "VERBOSE",
        "quiet",
        " Terse",
        "Terse\n",
        "Quite",
        "--verbose",
        "-v",
        "2",
        "Verbose!",
    ])
    def test_unknown_text_fails(self, text):
        """Anything other than an exact canonical token is a parse error."""
        with pytest.raises(VerbosityParseError):
            parse(text)

    @pytest.mark.parametrize("value", [None, 0, 2, b"Terse", ["Terse"], object()])
    def test_non_string_input_fails(self, value):
        """Absent flags and non-string input fail cleanly, never crash."""
        with pytest.raises(VerbosityParseError):
            parse(value)

    def test_lowercase_is_rejected(self):
        """Matching is case-sensitive: 'verbose' is not 'Verbose'."""
        with pytest.raises(VerbosityParseError):
            Verbosity.from_str("verbose")

    def test_no_fallback(self):
        """Parse failure raises; it never returns a default level."""
        with pytest.raises(VerbosityParseError):
            Verbosity.from_str("")


class TestParseError:
    """Test VerbosityParseError."""

    def test_is_value_error(self):
        """Callers catching ValueError also catch parse failures."""
        assert issubclass(VerbosityParseError, ValueError)

    def test_carries_token(self):
        """The offending input is kept on the exception."""
        with pytest.raises(VerbosityParseError) as exc_info:
            parse("loud")
        assert exc_info.value.token == "loud"

    def test_message_names_token_and_choices(self):
        """Message shows the bad token and the accepted tokens."""
        err = VerbosityParseError("loud")
        msg = str(err)
        assert "'loud' is not a valid verbosity" in msg
        for token in CANONICAL:
            assert token in msg


# =============================================================================
# Ordering
# =============================================================================

class TestOrdering:
    """Verify QUIET < TERSE < VERBOSE."""

    def test_level_ordering(self):
        assert Verbosity.QUIET < Verbosity.TERSE < Verbosity.VERBOSE
        assert Verbosity.QUIET < Verbosity.VERBOSE

    def test_total_order_no_cycles(self):
        """No member is both < and > another."""
        members = list(Verbosity)
        for a in members:
            for b in members:
                assert not (a < b and a > b)
                assert (a < b) + (a == b) + (a > b) == 1

    def test_comparison_operators(self):
        assert Verbosity.TERSE >= Verbosity.TERSE
        assert Verbosity.TERSE <= Verbosity.VERBOSE
        assert Verbosity.VERBOSE > Verbosity.QUIET
        assert Verbosity.TERSE != Verbosity.QUIET

    def test_equality_is_identity(self):
        assert parse("Terse") == Verbosity.TERSE
        assert parse("Terse") is Verbosity.TERSE

    def test_iteration_in_rank_order(self):
        assert list(Verbosity) == [Verbosity.QUIET, Verbosity.TERSE, Verbosity.VERBOSE]
        assert Verbosity.tokens() == ("Quiet", "Terse", "Verbose")

    def test_exactly_three_members(self):
        assert len(Verbosity) == 3


# =============================================================================
# Formatting
# =============================================================================

class TestFormatting:
    """Test token/str/format output."""

    def test_token_property(self):
        assert Verbosity.QUIET.token == "Quiet"
        assert Verbosity.VERBOSE.token == "Verbose"

    def test_fstring_uses_token(self):
        assert f"{Verbosity.TERSE}" == "Terse"
        assert f"[{Verbosity.TERSE:>7}]" == "[  Terse]"

    def test_numeric_format_codes_use_rank(self):
        """Integer presentation types format the rank, not the token."""
        assert f"{Verbosity.TERSE:d}" == "1"
        assert f"{Verbosity.VERBOSE:03d}" == "002"
        assert f"{Verbosity.VERBOSE:x}" == "2"
        assert "{:.1f}".format(Verbosity.QUIET) == "0.0"

    def test_members_equal_their_rank(self):
        """IntEnum members compare equal to their rank ints."""
        assert Verbosity.TERSE == 1
        assert Verbosity.QUIET == 0
        assert Verbosity.TERSE != Verbosity.VERBOSE


# =============================================================================
# Count mapping
# =============================================================================

class TestFromCount:
    """Test Verbosity.from_count() for composed -v/-Q flags."""

    @pytest.mark.parametrize("count,expected", [
        (0, Verbosity.QUIET),
        (1, Verbosity.TERSE),
        (2, Verbosity.VERBOSE),
    ])
    def test_in_range(self, count, expected):
        assert Verbosity.from_count(count) is expected

    def test_clamps_high(self):
        """-vvvv is still VERBOSE."""
        assert Verbosity.from_count(4) is Verbosity.VERBOSE

    def test_clamps_low(self):
        """-QQ is still QUIET."""
        assert Verbosity.from_count(-2) is Verbosity.QUIET

    def test_vv_Q_gives_terse(self):
        """-vv -Q = 1."""
        assert Verbosity.from_count(2 - 1) is Verbosity.TERSE
