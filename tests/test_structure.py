"""Tests for sequence() and choice().

Covers tail threading, short-circuiting, and backtracking onto the
original input.
"""

from __future__ import annotations

import logging

import pytest

from bytecomb import ByteView, choice, map_, sequence, string
from tests._probes import Boom, CallRecorder, Raising
from tests.helpers.parse_assertions import assert_matched, assert_no_match

# ============================================================================
# SEQUENCE
# ============================================================================


class TestSequence:
    """Test ordered AND."""

    def test_two_parsers_match(self) -> None:
        """Values are collected in order, tail is the last tail."""
        parser = sequence(string("ab"), string("c"))

        assert_matched(parser.run(b"abcd"), (b"ab", b"c"), b"d")

    def test_second_sees_empty_input(self) -> None:
        """Second parser fails on the empty remainder."""
        assert_no_match(sequence(string("ab"), string("c")).run(b"ab"))

    def test_first_fails(self) -> None:
        """First parser failing fails the sequence."""
        assert_no_match(sequence(string("ab"), string("c")).run(b"adc"))

    def test_arity_zero_is_identity(self) -> None:
        """sequence() matches with () and consumes nothing."""
        assert_matched(sequence().run(b"xyz"), (), b"xyz")
        assert_matched(sequence().run(b""), (), b"")

    def test_arity_one(self) -> None:
        """Single parser yields a one-tuple."""
        assert_matched(sequence(string("a")).run(b"ab"), (b"a",), b"b")

    def test_heterogeneous_values(self) -> None:
        """Children may produce different types."""
        parser = sequence(map_(string("12"), lambda v: int(bytes(v))), string("x"))

        assert_matched(parser.run(b"12x!"), (12, b"x"), b"!")

    def test_threads_tail(self) -> None:
        """Each child is called with its predecessor's tail."""
        second = CallRecorder(string("c"))
        sequence(string("ab"), second).run(b"abcd")

        assert second.calls == [b"cd"]

    def test_short_circuits(self) -> None:
        """Children after the first no-match never run."""
        third = CallRecorder(string("z"))

        assert_no_match(sequence(string("a"), string("x"), third).run(b"abc"))
        assert third.calls == []

    def test_hard_error_propagates(self) -> None:
        """Exceptions from a child escape unchanged."""
        with pytest.raises(Boom):
            sequence(string("a"), Raising()).run(b"abc")

    def test_nested_sequences(self) -> None:
        """Nesting keeps the tuple structure."""
        parser = sequence(sequence(string("a"), string("b")), string("c"))

        assert_matched(parser.run(b"abc"), ((b"a", b"b"), b"c"), b"")


# ============================================================================
# CHOICE
# ============================================================================


class TestChoice:
    """Test ordered alternation with backtracking."""

    def test_first_alternative(self) -> None:
        """First alternative matching wins."""
        assert_matched(choice(string("a"), string("b")).run(b"ac"), b"a", b"c")

    def test_second_alternative(self) -> None:
        """Second alternative is tried when the first does not match."""
        assert_matched(choice(string("a"), string("b")).run(b"bc"), b"b", b"c")

    def test_no_alternative(self) -> None:
        """No alternative matching is a no match."""
        assert_no_match(choice(string("a"), string("b")).run(b"cd"))

    def test_first_match_returned_unchanged(self) -> None:
        """The winning result object is passed through as is."""
        first = string("a")
        view = ByteView.of(b"ab")
        expected = first.parse(view)
        result = choice(first, string("a")).parse(view)

        assert result == expected

    def test_later_alternatives_not_invoked_after_match(self) -> None:
        """Alternatives after the winner never run."""
        second = CallRecorder(string("a"))
        choice(string("a"), second).run(b"abc")

        assert second.calls == []

    def test_backtracks_to_original_input(self) -> None:
        """Second alternative sees the original input, not a partial tail."""
        partial = sequence(string("ab"), string("x"))
        fallback = CallRecorder(map_(string("abc"), bytes))
        view = ByteView.of(b"abcd")
        parser = choice(partial, fallback)

        result = parser.parse(view)

        assert fallback.calls == [view]
        assert result is not None
        assert result.value == b"abc"
        assert result.tail == b"d"

    def test_first_success_wins_over_longer(self) -> None:
        """No longest-match: a shorter earlier match beats a longer later one."""
        assert_matched(choice(string("a"), string("ab")).run(b"abc"), b"a", b"bc")

    def test_hard_error_stops_alternatives(self) -> None:
        """An exception aborts choice; later alternatives are never tried."""
        later = CallRecorder(string("a"))

        with pytest.raises(Boom):
            choice(string("x"), Raising(), later).run(b"abc")
        assert later.calls == []

    def test_non_bytecomb_exception_propagates(self) -> None:
        """Any exception counts as a hard error."""
        with pytest.raises(ZeroDivisionError):
            choice(map_(string("a"), lambda _: 1 // 0), string("a")).run(b"a")

    def test_empty_choice_never_matches(self, caplog: pytest.LogCaptureFixture) -> None:
        """choice() with no alternatives logs a warning and never matches."""
        with caplog.at_level(logging.WARNING, logger="bytecomb.combinators.structure"):
            parser = choice()

        assert "no alternatives" in caplog.text
        assert_no_match(parser.run(b"abc"))
        assert_no_match(parser.run(b""))
