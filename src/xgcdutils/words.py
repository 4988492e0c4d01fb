"""Fixed-width word helpers for the Lehmer accelerator.

Python integers never overflow, so the "machine word" the accelerator works in is emulated: values are truncated
from their full-precision counterparts by a power of two and then narrowed, with a range check, into a signed word
of `bits` bits. Everything here is pure integer arithmetic on built-in ints.

Typical usage example:

    t = shift_amount(r2, r1)
    rr2 = to_word(truncate_shift(r2, t))
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import sys

NATIVE_WORD_BITS: int = sys.maxsize.bit_length() + 1
WORD_BITS: int = 64
MIN_WORD_BITS: int = 4


def word_range(bits: int = WORD_BITS) -> tuple[int, int]:
    """Inclusive range of a two's complement signed word.

    Args:
        bits: Width of the word in bits. Must be >= 1.

    Returns:
        Tuple of (minimum, maximum) representable values.
    """
    if bits < 1:
        raise ValueError("bits must be >= 1")
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def to_word(value: int, bits: int = WORD_BITS) -> int:
    """Checked narrowing of a big integer into a signed word.

    Args:
        value: The already truncated value.
        bits: Width of the target word in bits.

    Returns:
        `value`, unchanged, once it is known to fit.

    Raises:
        RuntimeError: If `value` does not fit. The caller picked a bad shift; this is an internal invariant failure,
            never a user error.
    """
    lo, hi = word_range(bits)
    if not lo <= value <= hi:
        raise RuntimeError(
            f"Internal invariant violated: {value.bit_length()}-bit value does not fit a {bits}-bit word.")
    return value


def truncate_shift(value: int, shift: int) -> int:
    """Divide by `2**shift`, truncating toward zero.

    Floor for non-negative values and ceiling for negative ones, i.e. the same as C division on a shifted register.
    Python's `>>` alone floors negatives, hence the negation dance.

    Args:
        value: Dividend.
        shift: Power of two to divide by. Must be >= 0.

    Returns:
        The truncated quotient.
    """
    if shift < 0:
        raise ValueError("shift must be >= 0")
    if value >= 0:
        return value >> shift
    return -((-value) >> shift)


def tdiv(a: int, b: int) -> int:
    """Integer division rounding toward zero, as a signed machine division does."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def shift_amount(r2: int, r1: int, bits: int = WORD_BITS) -> int:
    """Pick the shift that leaves the leading `bits - 1` bits of the larger operand.

    One bit of headroom is kept for the sign, so both truncated operands fit a signed word.

    Args:
        r2: Larger remainder.
        r1: Smaller remainder.
        bits: Word width in bits.

    Returns:
        Non-negative shift amount.
    """
    t = max(r2.bit_length(), r1.bit_length()) - (bits - 1)
    return max(t, 0)
