#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Number theory and modular arithmetic functions.

Modular inverse based on the Extended Euclidean Algorithm, see
https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm

Modular square root restricted to the primes with a closed formula
(p = 3 mod 4 and p = 5 mod 8, the latter being the 2^255 - 19 case),
see RFC 8032 section 5.1.3.
"""

from typing import Tuple

from ctlib.exceptions import CTlibValueError
from ctlib.utils import int_repr


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) such that a*x + b*y = g = gcd(a, b).

    based on Extended Euclidean Algorithm, see
    https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
    """

    x0, x1, y0, y1 = 0, 1, 1, 0
    while a != 0:
        q, b, a = b // a, a, b % a
        y0, y1 = y1, y0 - q * y1
        x0, x1 = x1, x0 - q * x1
    return b, x0, y0


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m). m does not have to be a prime.

    Based on Extended Euclidean Algorithm, see:
    https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
    """

    a %= m
    g, x, _ = xgcd(a, m)
    if g == 1:
        return x % m
    raise CTlibValueError(f"No inverse for {int_repr(a)} mod {int_repr(m)}")


def legendre_symbol(a: int, p: int) -> int:
    """Compute the Legendre symbol a|p using Euler's criterion.

    p is an odd prime.
    It returns 1 if a has a square root modulo p,
    0 if p divides a, -1 otherwise.
    """

    ls = pow(a, p >> 1, p)
    return -1 if ls == p - 1 else ls


def mod_sqrt(a: int, p: int) -> int:
    """Return a quadratic residue (mod p) of a; p must be a prime.

    Solve the equation:
        x^2 = a mod p

    and return x. Note that p - x is also a root.

    Only primes p = 3 mod 4 and p = 5 mod 8 are supported.
    """

    a %= p

    if p % 4 == 3:
        # inverse candidate is pow(a, (p + 1) // 4, p)
        r = pow(a, (p >> 2) + 1, p)
    elif p % 8 == 5:
        # inverse candidate is pow(a, (p + 3) // 8, p)
        r = pow(a, (p >> 3) + 1, p)
        if r * r % p == a:
            return r
        # another candidate: r * sqrt(-1), with sqrt(-1) = 2^((p-1)/4)
        r = r * pow(2, p >> 2, p) % p
    else:
        raise CTlibValueError(f"unsupported prime: {int_repr(p)}")

    if r * r % p != a:
        raise CTlibValueError(f"no root for {int_repr(a)} mod {int_repr(p)}")
    return r
