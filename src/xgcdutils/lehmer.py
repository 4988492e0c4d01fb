"""Lehmer acceleration for the partial extended Euclidean algorithm.

Holds the three per-iteration steps of the outer driver: the word-width accelerator that folds several Euclidean
steps on truncated leading bits into a 2x2 cofactor matrix, the recombination applying that matrix to the
full-precision state, and the single full-precision step used when the accelerator cannot make progress.

Typical usage example:

    m = accelerate(rr2, rr1, bb)
    if m.steps:
        r2, r1, co2, co1 = recombine(m, r2, r1, co2, co1)
    else:
        r2, r1, co2, co1 = euclid_step(r2, r1, co2, co1)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import typing

from xgcdutils.words import tdiv


class LehmerMatrix(typing.NamedTuple):
    """Accumulated cofactor matrix of one accelerator run.

    Applied to a remainder pair as `(r2, r1) -> (b2*r2 + a2*r1, b1*r2 + a1*r1)`. The determinant is always +-1.

    Attributes:
        a1: Coefficient of r1 in the new r1.
        a2: Coefficient of r1 in the new r2.
        b1: Coefficient of r2 in the new r1.
        b2: Coefficient of r2 in the new r2.
        steps: Number of certified Euclidean steps folded in. Zero means the matrix is the identity.
    """
    a1: int = 1
    a2: int = 0
    b1: int = 0
    b2: int = 1
    steps: int = 0


def accelerate(rr2: int, rr1: int, bb: int) -> LehmerMatrix:
    """Run Euclid on word-sized leading bits until the result can no longer be trusted.

    Every step is checked against a Lehmer-style certificate before it is committed, the check alternating with
    the parity of the step since the signs of the off-diagonal entries alternate. A step failing the certificate is
    discarded, so the returned matrix is always safe to apply to the full-precision remainders.

    Args:
        rr2: Truncated larger remainder.
        rr1: Truncated smaller remainder.
        bb: Truncated bound.

    Returns:
        The accumulated matrix and the number of steps taken.
    """
    a1, a2, b1, b2 = 1, 0, 0, 1
    index = 0
    while rr1 != 0 and rr1 > bb:
        q = tdiv(rr2, rr1)
        t1 = rr2 - q * rr1
        t2 = a2 - q * a1
        t3 = b2 - q * b1
        if index & 1:
            if t1 < -t3 or rr1 - t1 < t2 - a1:
                break
        else:
            if t1 < -t2 or rr1 - t1 < t3 - b1:
                break
        rr2, rr1 = rr1, t1
        a2, a1 = a1, t2
        b2, b1 = b1, t3
        index += 1
    return LehmerMatrix(a1, a2, b1, b2, index)


def recombine(m: LehmerMatrix, r2: int, r1: int, co2: int, co1: int) -> tuple[int, int, int, int]:
    """Apply an accelerator matrix to the full-precision remainders and cofactors.

    Four multiply-adds replace `m.steps` full divisions. Signs are renormalised afterwards so both remainders leave
    non-negative; a flipped remainder takes its cofactor with it, keeping `co2*r1 - co1*r2` fixed up to sign.

    Args:
        m: Matrix from `accelerate`.
        r2: Larger remainder.
        r1: Smaller remainder.
        co2: Cofactor paired with r2.
        co1: Cofactor paired with r1.

    Returns:
        Tuple of (r2, r1, co2, co1) after recombination.
    """
    r2, r1 = r2 * m.b2 + r1 * m.a2, r1 * m.a1 + r2 * m.b1
    co2, co1 = co2 * m.b2 + co1 * m.a2, co1 * m.a1 + co2 * m.b1
    if r1 < 0:
        r1, co1 = -r1, -co1
    if r2 < 0:
        r2, co2 = -r2, -co2
    return r2, r1, co2, co1


def euclid_step(r2: int, r1: int, co2: int, co1: int) -> tuple[int, int, int, int]:
    """One full-precision extended Euclidean step. `r1` must be non-zero."""
    q, r = divmod(r2, r1)
    return r1, r, co1, co2 - q * co1
