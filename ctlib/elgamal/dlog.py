#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Bounded discrete logarithm search.

Decryption of a Twisted ElGamal ciphertext only recovers m*G:
the amount m must then be found by a discrete logarithm search,
feasible only because m is known to be small.

discrete_log is a bounded linear search:

* the identity is short-circuited to 0, without any search
* otherwise G is repeatedly added, up to
  min(max_value, LINEAR_SEARCH_LIMIT) times

Amounts above LINEAR_SEARCH_LIMIT are a known limitation:
a failure with a bound above the limit raises SearchBoundExceededError,
so that it can be told apart from a wrong key
(or an amount genuinely above max_value).

baby_step_giant_step is the opt-in alternative for larger amounts,
requiring O(sqrt(max_value)) point operations and memory.
"""

import functools
import logging
from math import isqrt
from typing import Dict

from ctlib.alias import INF, INFE, Point
from ctlib.ecc.curve import TwistedEdwardsCurve, _mult, ed25519
from ctlib.exceptions import (
    CTlibValueError,
    DecryptionFailedError,
    SearchBoundExceededError,
)

logger = logging.getLogger(__name__)

LINEAR_SEARCH_LIMIT = 100_000


def _check_max_value(max_value: int) -> None:
    if isinstance(max_value, bool) or not isinstance(max_value, int):
        raise CTlibValueError(f"invalid max_value: {max_value!r}")
    if max_value < 0:
        raise CTlibValueError(f"negative max_value: {max_value}")


def discrete_log(
    Q: Point,
    max_value: int,
    ec: TwistedEdwardsCurve = ed25519,
    allow_negative: bool = False,
) -> int:
    """Return m in [0, max_value] such that m*G == Q.

    If allow_negative is True, -m is returned when -m*G == Q,
    so that the difference of two amounts can be negative.
    """

    _check_max_value(max_value)
    ec.require_on_curve(Q)

    if Q == INF:
        return 0

    x_Q, y_Q = Q
    p = ec.p
    x_neg = p - x_Q
    GE = ec.ext_from_aff(ec.G)
    R = INFE
    for i in range(1, min(max_value, LINEAR_SEARCH_LIMIT) + 1):
        R = ec.add_ext(R, GE)
        X, Y, Z, _ = R
        # Q and -Q share the y-coordinate
        if Y != y_Q * Z % p:
            continue
        if X == x_Q * Z % p:
            return i
        if allow_negative and X == x_neg * Z % p:
            return -i

    if max_value > LINEAR_SEARCH_LIMIT:
        logger.warning("amount exceeds the fast decryption range")
        err_msg = f"amount not found up to the search limit {LINEAR_SEARCH_LIMIT}"
        raise SearchBoundExceededError(err_msg)
    raise DecryptionFailedError(f"amount not found in 0..{max_value}")


@functools.lru_cache(maxsize=1)
def _baby_steps(size: int, ec: TwistedEdwardsCurve) -> Dict[Point, int]:
    "Return the {j*G: j} table for j in {0, ..., size-1}."

    GE = ec.ext_from_aff(ec.G)
    table: Dict[Point, int] = {}
    R = INFE
    for j in range(size):
        table[ec.aff_from_ext(R)] = j
        R = ec.add_ext(R, GE)
    return table


def _giant_steps(
    Q: Point, size: int, max_value: int, ec: TwistedEdwardsCurve
) -> int:
    table = _baby_steps(size, ec)
    # giant step is -size*G
    step = ec.negate_ext(_mult(size, ec.ext_from_aff(ec.G), ec))
    R = ec.ext_from_aff(Q)
    for i in range(size + 1):
        j = table.get(ec.aff_from_ext(R))
        if j is not None:
            m = i * size + j
            return m if m <= max_value else -1
        R = ec.add_ext(R, step)
    return -1


def baby_step_giant_step(
    Q: Point,
    max_value: int,
    ec: TwistedEdwardsCurve = ed25519,
    allow_negative: bool = False,
) -> int:
    """Return m in [0, max_value] such that m*G == Q.

    Shanks' baby-step giant-step algorithm:
    with s = isqrt(max_value) + 1,
    m = i*s + j is found by matching Q - i*s*G against
    a table of j*G for j in {0, ..., s-1}.

    The baby-step table is cached, so that repeated decryptions
    with the same bound do not pay for it again.
    Only the last table is kept: for max_value = 2**40 it has
    about 2**20 entries, i.e. seconds to build and hundreds of MB.
    """

    _check_max_value(max_value)
    ec.require_on_curve(Q)

    if Q == INF:
        return 0

    size = isqrt(max_value) + 1
    m = _giant_steps(Q, size, max_value, ec)
    if m >= 0:
        return m
    if allow_negative:
        m = _giant_steps(ec.negate(Q), size, max_value, ec)
        if m >= 0:
            return -m
    raise DecryptionFailedError(f"amount not found in 0..{max_value}")
