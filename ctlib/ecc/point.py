#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Compressed point representation, according to RFC 8032 section 5.1.2.

The y-coordinate is encoded as a little-endian integer,
with the most significant bit of the final octet
being the least significant bit of the x-coordinate.

Decoding fails closed: an encoding that does not correspond
to a curve point raises InvalidPointError,
it is never replaced by the identity or any other default point.
"""

from ctlib.alias import Octets, Point
from ctlib.ecc.curve import TwistedEdwardsCurve, _mult, ed25519
from ctlib.exceptions import CTlibValueError, InvalidPointError
from ctlib.utils import bytes_from_octets


def bytes_from_point(Q: Point, ec: TwistedEdwardsCurve = ed25519) -> bytes:
    "Return a point as compressed octet sequence."

    # check that Q is a point and that is on curve
    ec.require_on_curve(Q)

    i = Q[1] | ((Q[0] & 1) << (ec.p_size * 8 - 1))
    return i.to_bytes(ec.p_size, byteorder="little", signed=False)


def point_from_octets(octets: Octets, ec: TwistedEdwardsCurve = ed25519) -> Point:
    """Return a tuple (x_Q, y_Q) that belongs to the curve.

    InvalidInputLengthError is raised for octets of the wrong size,
    InvalidPointError for octets not encoding a curve point.
    Subgroup membership is not checked,
    see point_from_octets_in_subgroup for that.
    """

    octets = bytes_from_octets(octets, ec.p_size)

    i = int.from_bytes(octets, byteorder="little", signed=False)
    sign_bit = ec.p_size * 8 - 1
    x_sign = i >> sign_bit
    y_Q = i & ((1 << sign_bit) - 1)
    # non-canonical encodings are rejected
    if y_Q >= ec.p:
        raise InvalidPointError(f"non-canonical y-coordinate: '{octets.hex()}'")
    try:
        x_Q = ec.x_odd(y_Q, x_sign)
    except CTlibValueError as e:
        raise InvalidPointError(f"invalid y-coordinate: '{octets.hex()}'") from e
    if x_Q == 0 and x_sign:
        raise InvalidPointError(f"invalid x sign for x = 0: '{octets.hex()}'")
    return x_Q, y_Q


def is_in_prime_order_subgroup(Q: Point, ec: TwistedEdwardsCurve = ed25519) -> bool:
    """Return True if the point belongs to the subgroup of order n.

    The identity belongs to the subgroup.
    The input point must be on the curve.
    """

    ec.require_on_curve(Q)
    # no reduction mod n here, n*Q must be the identity
    return ec.is_identity_ext(_mult(ec.n, ec.ext_from_aff(Q), ec))


def point_from_octets_in_subgroup(
    octets: Octets, ec: TwistedEdwardsCurve = ed25519, allow_identity: bool = True
) -> Point:
    """Return the decoded point, if in the prime order subgroup.

    Points arriving from an untrusted boundary (network, storage)
    should be decoded with this function:
    points with a small-order component are rejected.
    """

    Q = point_from_octets(octets, ec)
    if not is_in_prime_order_subgroup(Q, ec):
        raise InvalidPointError("point not in the prime order subgroup")
    if not allow_identity and Q == (0, 1):
        raise InvalidPointError("identity point not allowed")
    return Q
