"""Partial extended GCD: the outer driver and its plain reference.

`partial_extended_gcd` treats its two arguments as successive remainders of the Euclidean algorithm and runs the
extended algorithm until the smaller one reaches zero or drops to the bound. Final remainders come back with the two
last cofactors, satisfying `co2*r1 - co1*r2 == +-r2_in`. Most of the work happens on word-sized leading bits
(see `xgcdutils.lehmer`); `partial_eea` does the same job one full-precision division at a time and is kept as the
oracle for it.

Typical usage example:

    co2, co1, r2, r1 = partial_extended_gcd(a, b, isqrt(a))
    assert check_identity(a, co2, co1, r2, r1)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
import warnings

from xgcdutils import lehmer
from xgcdutils.words import MIN_WORD_BITS
from xgcdutils.words import NATIVE_WORD_BITS
from xgcdutils.words import shift_amount
from xgcdutils.words import to_word
from xgcdutils.words import truncate_shift
from xgcdutils.words import WORD_BITS

_logger = logging.getLogger(__name__)


def _check_inputs(r2: int, r1: int, bound: int) -> None:
    """Validate the documented preconditions `r2 >= r1 >= 0` and `bound >= 0`.

    Raises:
        TypeError: If any argument is not an int (bool included).
        ValueError: If the ordering or sign preconditions do not hold.
    """
    for name, val in (("r2", r2), ("r1", r1), ("bound", bound)):
        if not isinstance(val, int) or isinstance(val, bool):
            raise TypeError(f"{name} must be an int, not {type(val).__name__}")
    if r1 < 0:
        raise ValueError("r1 must be >= 0")
    if bound < 0:
        raise ValueError("bound must be >= 0")
    if r1 > r2:
        raise ValueError("r2 must be >= r1")


def partial_extended_gcd(r2: int, r1: int, bound: int, word_bits: int = WORD_BITS) -> tuple[int, int, int, int]:
    """Lehmer extended GCD with early termination at `bound`.

    Runs the extended Euclidean algorithm on successive remainders `r2 >= r1` until `r1 == 0` or `r1 <= bound`.
    Each round takes the leading `word_bits - 1` bits of both remainders, lets `lehmer.accelerate` fold as many
    certified steps as it can into a word matrix and applies it with `lehmer.recombine`. A round where nothing can
    be certified falls back to one full-precision step.

    Args:
        r2: Larger remainder. Must be >= r1.
        r1: Smaller remainder. Must be >= 0.
        bound: Stopping bound. Must be >= 0.
        word_bits: Width of the emulated machine word. Defaults to 64.
            Widths above the interpreter's native word are accepted with a warning.

    Returns:
        Tuple of (co2, co1, r2, r1): the final cofactors and remainders, with `r2 >= 0`,
        `r1 == 0 or r1 <= bound` and `co2*r1 - co1*r2 == +-r2_in`.

    Raises:
        TypeError: If an argument is not an int.
        ValueError: If `r2 >= r1 >= 0` and `bound >= 0` do not hold, or `word_bits` is too small.
        RuntimeError: If a truncated operand does not fit a word. Indicates a bug, not bad input.
    """
    _check_inputs(r2, r1, bound)
    if word_bits < MIN_WORD_BITS:
        raise ValueError(f"word_bits must be >= {MIN_WORD_BITS}")
    if word_bits > NATIVE_WORD_BITS:
        warnings.warn(f"{word_bits}-bit words exceed the native {NATIVE_WORD_BITS}-bit word.", RuntimeWarning)
    co2, co1 = 0, -1
    fast = slow = folded = overshoot = 0
    while r1 != 0 and r1 > bound:
        t = shift_amount(r2, r1, word_bits)
        rr2 = to_word(truncate_shift(r2, t), word_bits)
        rr1 = to_word(truncate_shift(r1, t), word_bits)
        bb = to_word(truncate_shift(bound, t), word_bits)
        m = lehmer.accelerate(rr2, rr1, bb)
        if m.steps:
            nxt = lehmer.recombine(m, r2, r1, co2, co1)
            # The truncated bound can let the words step past the true one; such a round is redone exactly.
            if nxt[0] > bound:
                r2, r1, co2, co1 = nxt
                fast += 1
                folded += m.steps
                continue
            overshoot += 1
        r2, r1, co2, co1 = lehmer.euclid_step(r2, r1, co2, co1)
        slow += 1
    if r2 < 0:
        co2, co1, r2 = -co2, -co1, -r2
    _logger.debug("partial xgcd done: %d recombinations (%d steps), %d full-precision steps (%d past the bound)",
                  fast, folded, slow, overshoot)
    return co2, co1, r2, r1


def partial_eea(r2: int, r1: int, bound: int) -> tuple[int, int, int, int]:
    """Plain partial extended Euclidean algorithm.

    Same contract as `partial_extended_gcd`, doing one full-precision division per step.

    Args:
        r2: Larger remainder. Must be >= r1.
        r1: Smaller remainder. Must be >= 0.
        bound: Stopping bound. Must be >= 0.

    Returns:
        Tuple of (co2, co1, r2, r1).
    """
    _check_inputs(r2, r1, bound)
    co2, co1 = 0, -1
    while r1 != 0 and r1 > bound:
        q, r = divmod(r2, r1)
        r2, r1 = r1, r
        co2, co1 = co1, co2 - q * co1
    return co2, co1, r2, r1


def check_identity(r2_in: int, co2: int, co1: int, r2: int, r1: int) -> bool:
    """Check `co2*r1 - co1*r2 == +-r2_in` for a partial xgcd result."""
    return abs(co2 * r1 - co1 * r2) == abs(r2_in)
