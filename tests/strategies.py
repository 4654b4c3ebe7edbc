"""Hypothesis strategies for byte inputs and literal parsers.

Provides shared strategies for property-based testing of the combinators.
Inputs are drawn from a small alphabet so that literals actually occur as
prefixes often enough to exercise the matching paths.
"""

from __future__ import annotations

from hypothesis import strategies as st
from hypothesis.strategies import composite

# Small alphabet keeps prefix matches frequent
ALPHABET = b"abc"

byte_inputs = st.binary(max_size=40) | st.lists(
    st.sampled_from(list(ALPHABET)), max_size=40
).map(bytes)

literals = st.lists(st.sampled_from(list(ALPHABET)), max_size=4).map(bytes)

nonempty_literals = st.lists(st.sampled_from(list(ALPHABET)), min_size=1, max_size=4).map(
    bytes
)


@composite
def repeated_input(draw: st.DrawFn) -> tuple[bytes, int, bytes]:
    """Generate (literal, k, input) where input starts with exactly k copies.

    The suffix after the k copies never starts with the literal, so the
    maximal run of consecutive matches is exactly k.
    """
    literal = draw(nonempty_literals)
    k = draw(st.integers(min_value=0, max_value=10))
    suffix = draw(byte_inputs.filter(lambda s: not s.startswith(literal)))
    return literal, k, literal * k + suffix
