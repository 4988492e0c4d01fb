"""Partial extended GCD utilities, accelerated with Lehmer's algorithm.

Provides the partial extended Euclidean algorithm: given successive remainders `r2 >= r1 >= 0` and a bound, run
extended Euclid until the smaller remainder falls to the bound, returning the final remainders and cofactors. The
heavy lifting is done on word-sized leading bits, with a plain full-precision reference alongside.

Typical usage example:

    co2, co1, r2, r1 = partial_extended_gcd(240, 46, 1)
    assert check_identity(240, co2, co1, r2, r1)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from xgcdutils.lehmer import LehmerMatrix
from xgcdutils.words import WORD_BITS
from xgcdutils.xgcd import check_identity
from xgcdutils.xgcd import partial_eea
from xgcdutils.xgcd import partial_extended_gcd

__version__ = "0.0.1"
__all__ = [
    "LehmerMatrix",
    "WORD_BITS",
    "check_identity",
    "partial_eea",
    "partial_extended_gcd",
]
