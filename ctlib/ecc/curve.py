#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Twisted Edwards elliptic curve class and functions.

The curve is the set of points (x, y) that are solutions to
the twisted Edwards equation a*x^2 + y^2 = 1 + d*x^2*y^2,
with x, y, a, and d in Fp (p being a prime).
When a is a square and d is not a square in Fp,
the addition law is complete: it has no exceptional cases,
the identity (0, 1) being an ordinary curve point.

Point arithmetic is performed in extended coordinates (X, Y, Z, T),
with x = X/Z, y = Y/Z, and x*y = T/Z, see
https://eprint.iacr.org/2008/522
and the formulae at
https://hyperelliptic.org/EFD/g1p/auto-twisted-extended.html

Only the cyclic subgroup of prime order n generated by G
is used by the Twisted ElGamal scheme, the curve group
having order h*n, with h being the cofactor.
"""

import functools
from math import ceil
from typing import Dict, List, Optional

from ctlib.alias import INFE, ExtPoint, Integer, Point
from ctlib.ecc.number_theory import legendre_symbol, mod_inv, mod_sqrt
from ctlib.exceptions import CTlibTypeError, CTlibValueError
from ctlib.utils import int_from_integer, int_repr


class TwistedEdwardsCurve:
    """Prime order subgroup of a twisted Edwards curve over Fp."""

    def __init__(
        self,
        p: Integer,
        a: Integer,
        d: Integer,
        G: Point,
        n: Integer,
        h: int,
    ) -> None:

        p = int_from_integer(p)
        a = int_from_integer(a)
        d = int_from_integer(d)
        n = int_from_integer(n)

        # Fermat test will do as _probabilistic_ primality test...
        if p < 3 or p % 2 == 0 or pow(2, p - 1, p) != 1:
            raise CTlibValueError(f"p is not prime: {int_repr(p)}")
        self.p = p
        # the extra bit is for the x sign in the compressed encoding
        self.p_size = ceil((p.bit_length() + 1) / 8)

        for name, value in (("a", a), ("d", d)):
            if not 0 < value < p:
                raise CTlibValueError(f"{name} not in 1..p-1: {int_repr(value)}")
        if a == d:
            raise CTlibValueError("a must be different from d")
        if legendre_symbol(a, p) != 1:
            raise CTlibValueError("incomplete addition law: a is not a square")
        if legendre_symbol(d, p) != -1:
            raise CTlibValueError("incomplete addition law: d is a square")
        self._a = a
        self._d = d

        self.G = G
        self.require_on_curve(G)
        if G == (0, 1):
            raise CTlibValueError("G is the identity")

        if n < 2 or pow(2, n - 1, n) != 1:
            raise CTlibValueError(f"n is not prime: {int_repr(n)}")
        if not self.is_identity_ext(_mult(n, self.ext_from_aff(G), self)):
            raise CTlibValueError("n is not the order of G")
        self.n = n
        self.nlen = n.bit_length()
        self.n_size = ceil(self.nlen / 8)

        if h < 1:
            raise CTlibValueError(f"invalid cofactor: {h}")
        self.h = h

    def __str__(self) -> str:
        result = "TwistedEdwardsCurve"
        result += f"\n p   = {int_repr(self.p)}"
        result += f"\n a   = {int_repr(self._a)}"
        result += f"\n d   = {int_repr(self._d)}"
        result += f"\n x_G = {int_repr(self.G[0])}"
        result += f"\n y_G = {int_repr(self.G[1])}"
        result += f"\n n   = {int_repr(self.n)}"
        result += f"\n h   = {self.h}"
        return result

    def __repr__(self) -> str:
        result = "TwistedEdwardsCurve("
        result += f"{int_repr(self.p)}, {int_repr(self._a)}, {int_repr(self._d)}"
        result += f", ({int_repr(self.G[0])}, {int_repr(self.G[1])})"
        result += f", {int_repr(self.n)}, {self.h})"
        return result

    # methods using p: they could become functions

    def negate(self, Q: Point) -> Point:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        if len(Q) == 2:
            return (self.p - Q[0]) % self.p, Q[1]
        raise CTlibTypeError("not a point")

    def negate_ext(self, Q: ExtPoint) -> ExtPoint:
        """Return the opposite extended point.

        The input point is not checked to be on the curve.
        """
        if len(Q) == 4:
            return (self.p - Q[0]) % self.p, Q[1], Q[2], (self.p - Q[3]) % self.p
        raise CTlibTypeError("not an extended point")

    def ext_from_aff(self, Q: Point) -> ExtPoint:
        """Return the extended representation of the affine point.

        The input point is assumed to be on curve.
        """
        return Q[0], Q[1], 1, Q[0] * Q[1] % self.p

    def aff_from_ext(self, Q: ExtPoint) -> Point:
        # point is assumed to be on curve, hence Z != 0
        z_inv = mod_inv(Q[2], self.p)
        return Q[0] * z_inv % self.p, Q[1] * z_inv % self.p

    def ext_equality(self, Q: ExtPoint, R: ExtPoint) -> bool:
        """Return True if extended points are equal in affine coordinates.

        The input points are assumed to be on curve.
        """
        if (Q[0] * R[2] - R[0] * Q[2]) % self.p:
            return False
        return (Q[1] * R[2] - R[1] * Q[2]) % self.p == 0

    def is_identity_ext(self, Q: ExtPoint) -> bool:
        "Return True if the extended point is the identity."
        return Q[0] % self.p == 0 and (Q[1] - Q[2]) % self.p == 0

    # methods using _a, _d, p

    def add(self, Q1: Point, Q2: Point) -> Point:
        """Return the sum of two points.

        The input points must be on the curve.
        """

        self.require_on_curve(Q1)
        self.require_on_curve(Q2)
        QE = self.add_ext(self.ext_from_aff(Q1), self.ext_from_aff(Q2))
        return self.aff_from_ext(QE)

    def add_ext(self, Q: ExtPoint, R: ExtPoint) -> ExtPoint:
        # points are assumed to be on curve
        # 'add-2008-hwcd': complete, no special case for doubling or identity
        A = Q[0] * R[0] % self.p
        B = Q[1] * R[1] % self.p
        C = Q[3] * self._d * R[3] % self.p
        D = Q[2] * R[2] % self.p
        E = (Q[0] + Q[1]) * (R[0] + R[1]) - A - B
        F = D - C
        G = D + C
        H = B - self._a * A
        return E * F % self.p, G * H % self.p, F * G % self.p, E * H % self.p

    def double_ext(self, Q: ExtPoint) -> ExtPoint:
        # point is assumed to be on curve
        # 'dbl-2008-hwcd'
        A = Q[0] * Q[0] % self.p
        B = Q[1] * Q[1] % self.p
        C = 2 * Q[2] * Q[2] % self.p
        D = self._a * A
        E = (Q[0] + Q[1]) * (Q[0] + Q[1]) - A - B
        G = D + B
        F = G - C
        H = D - B
        return E * F % self.p, G * H % self.p, F * G % self.p, E * H % self.p

    def _x2(self, y: int) -> int:
        # skipping a crucial check here:
        # if sqrt(x*x) does not exist, then y is not valid.
        # This is a good reason to keep this method private
        y2 = y * y % self.p
        # d*y^2 - a is never zero, as a is a square and d is not
        return (y2 - 1) * mod_inv(self._d * y2 - self._a, self.p) % self.p

    def x(self, y: int) -> int:
        """Return an x coordinate from y, as in (x, y)."""
        if not 0 <= y < self.p:
            raise CTlibValueError(f"y-coordinate not in 0..p-1: {int_repr(y)}")
        x2 = self._x2(y)
        try:
            return mod_sqrt(x2, self.p)
        except CTlibValueError as e:
            raise CTlibValueError(f"invalid y-coordinate: {int_repr(y)}") from e

    def x_odd(self, y: int, odd1even0: int) -> int:
        """Return the odd/even affine x-coordinate associated to y.

        For x = 0 there is no odd root: the even one is returned.
        """
        if odd1even0 not in (0, 1):
            raise CTlibValueError("odd1even0 must be bool or 1/0")
        root = self.x(y)
        # switch even/odd root as needed (XORing the conditions)
        return root if root % 2 == odd1even0 else (self.p - root) % self.p

    def require_on_curve(self, Q: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise CTlibValueError("point not on curve")

    def is_on_curve(self, Q: Point) -> bool:
        """Return True if the point is on the curve."""
        if len(Q) != 2:
            raise CTlibValueError("point must be a tuple[int, int]")
        x, y = Q
        if not (0 <= x < self.p and 0 <= y < self.p):
            return False
        x2 = x * x
        y2 = y * y
        return (self._a * x2 + y2 - 1 - self._d * x2 * y2) % self.p == 0


def multiples(Q: ExtPoint, size: int, ec: TwistedEdwardsCurve) -> List[ExtPoint]:
    "Return {k_i * Q} for k_i in {0, ..., size-1)"

    if size < 2:
        raise CTlibValueError(f"size too low: {size}")

    k, odd = divmod(size, 2)
    T = [INFE, Q]
    for i in range(3, k * 2, 2):
        T.append(ec.double_ext(T[(i - 1) // 2]))
        T.append(ec.add_ext(T[-1], Q))

    if odd:
        T.append(ec.double_ext(T[(size - 1) // 2]))

    return T


W = 4


@functools.lru_cache()  # least recently used cache
def cached_multiples(Q: ExtPoint, ec: TwistedEdwardsCurve) -> List[ExtPoint]:
    return multiples(Q, 2**W, ec)


def _mult(m: int, Q: ExtPoint, ec: TwistedEdwardsCurve, cached: bool = False) -> ExtPoint:
    """Scalar multiplication using "fixed window".

    This implementation uses
    'multiple-double & add' algorithm,
    'left-to-right' window decomposition of the m coefficient,
    extended coordinates.

    The 'add' is always performed, even when adding the identity,
    the addition law being complete.

    The input point is assumed to be on curve;
    the m coefficient is NOT reduced mod n,
    so that it can be used for cofactor clearing
    and subgroup membership checks.
    """

    if m < 0:
        raise CTlibValueError(f"negative m: {hex(m)}")

    T = cached_multiples(Q, ec) if cached else multiples(Q, 2**W, ec)

    digits: List[int] = []
    while m or not digits:
        m, digit = divmod(m, 2**W)
        digits.append(digit)
    digits.reverse()

    R = T[digits[0]]
    for i in digits[1:]:
        # multiple 'double'
        for _ in range(W):
            R = ec.double_ext(R)
        # and 'add'
        R = ec.add_ext(R, T[i])
    return R


def _double_mult(
    u: int, HE: ExtPoint, v: int, QE: ExtPoint, ec: TwistedEdwardsCurve
) -> ExtPoint:
    """Double scalar multiplication (u*H + v*Q).

    This implementation uses the Shamir-Strauss algorithm,
    'left-to-right' binary decomposition of the u and v coefficients,
    extended coordinates.
    """

    if u < 0:
        raise CTlibValueError(f"negative first coefficient: {hex(u)}")
    if v < 0:
        raise CTlibValueError(f"negative second coefficient: {hex(v)}")

    # at each step one of the following points will be added
    T = [INFE, HE, QE, ec.add_ext(HE, QE)]
    # which one depends on binary digit for that step
    ui = bin(u)[2:]
    vi = bin(v)[2:].zfill(len(ui))
    ui = ui.zfill(len(vi))
    digits = [int(j) + 2 * int(k) for j, k in zip(ui, vi)]
    R = T[digits[0]]
    for i in digits[1:]:
        R = ec.double_ext(R)
        # always perform the 'add', even if useless
        R = ec.add_ext(R, T[i])
    return R


# edwards25519, see RFC 8032 section 5.1
_P = 2**255 - 19
CURVES: Dict[str, TwistedEdwardsCurve] = {
    "ed25519": TwistedEdwardsCurve(
        _P,
        _P - 1,
        0x52036CEE2B6FFE738CC740797779E89800700A4D4141D8AB75EB4DCA135978A3,
        (
            0x216936D3CD6E53FEC0A4E231FDD6DC5C692CC7609525A7B2C9562D608F25D51A,
            0x6666666666666666666666666666666666666666666666666666666666666658,
        ),
        2**252 + 27742317777372353535851937790883648493,
        8,
    )
}
ed25519 = CURVES["ed25519"]


def mult(m: Integer, Q: Optional[Point] = None, ec: TwistedEdwardsCurve = ed25519) -> Point:
    """Elliptic curve scalar multiplication.

    The m coefficient is reduced mod n:
    Q is assumed to belong to the prime order subgroup.
    """
    if Q is None:
        Q = ec.G
    else:
        ec.require_on_curve(Q)
    m = int_from_integer(m) % ec.n
    R = _mult(m, ec.ext_from_aff(Q), ec, cached=Q == ec.G)
    return ec.aff_from_ext(R)


def double_mult(
    u: Integer, H: Point, v: Integer, Q: Point, ec: TwistedEdwardsCurve = ed25519
) -> Point:
    """Double scalar multiplication (u*H + v*Q).

    The coefficients are reduced mod n:
    H and Q are assumed to belong to the prime order subgroup.
    """

    ec.require_on_curve(H)
    ec.require_on_curve(Q)
    u = int_from_integer(u) % ec.n
    v = int_from_integer(v) % ec.n
    R = _double_mult(u, ec.ext_from_aff(H), v, ec.ext_from_aff(Q), ec)
    return ec.aff_from_ext(R)
