#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ctlib.ecc.point` module."

import secrets

import pytest

from ctlib.alias import INF
from ctlib.ecc.curve import ed25519, mult
from ctlib.ecc.point import (
    bytes_from_point,
    is_in_prime_order_subgroup,
    point_from_octets,
    point_from_octets_in_subgroup,
)
from ctlib.exceptions import (
    CTlibTypeError,
    CTlibValueError,
    InvalidInputLengthError,
    InvalidPointError,
)

ec = ed25519

IDENTITY = "01" + "00" * 31
# (0, p-1) has order 2
ORDER_TWO = "ec" + "ff" * 30 + "7f"


def test_round_trip() -> None:

    for Q in (INF, ec.G, mult(2), mult(ec.n - 1)):
        b = bytes_from_point(Q)
        assert len(b) == 32
        assert point_from_octets(b) == Q
        assert point_from_octets(b.hex()) == Q
        assert point_from_octets(bytearray(b)) == Q

    for _ in range(8):
        Q = mult(secrets.randbelow(ec.n))
        assert point_from_octets(bytes_from_point(Q)) == Q
        assert point_from_octets_in_subgroup(bytes_from_point(Q)) == Q

    assert bytes_from_point(INF).hex() == IDENTITY
    # the opposite point only differs in the sign bit
    G = bytes_from_point(ec.G)
    minus_G = bytes_from_point(ec.negate(ec.G))
    assert G[:31] == minus_G[:31]
    assert G[31] ^ minus_G[31] == 0x80


def test_bytes_from_point_errors() -> None:

    with pytest.raises(CTlibValueError, match="point not on curve"):
        bytes_from_point((1, 1))
    with pytest.raises(CTlibValueError, match="point must be a tuple"):
        bytes_from_point((1, 1, 1))  # type: ignore


def test_non_canonical() -> None:

    # y = p
    y_p = "ed" + "ff" * 30 + "7f"
    with pytest.raises(InvalidPointError, match="non-canonical y-coordinate: "):
        point_from_octets(y_p)
    # y = p, with sign bit set
    y_p = "ed" + "ff" * 31
    with pytest.raises(InvalidPointError, match="non-canonical y-coordinate: "):
        point_from_octets(y_p)
    # y = p + 1, i.e. the identity y-coordinate
    y_p1 = "ee" + "ff" * 30 + "7f"
    with pytest.raises(InvalidPointError, match="non-canonical y-coordinate: "):
        point_from_octets(y_p1)


def test_invalid_y() -> None:

    # SHA-256 of the second generator domain separator:
    # not a valid y-coordinate
    digest = "c69f7eb98c75cf2e33bff19984ffb99dcf6d3a831dd3c336e81fcb438fde01f4"
    with pytest.raises(InvalidPointError, match="invalid y-coordinate: "):
        point_from_octets(digest)

    # y = 2
    with pytest.raises(InvalidPointError, match="invalid y-coordinate: "):
        point_from_octets("02" + "00" * 31)


def test_invalid_x_sign() -> None:

    # x = 0 for y = 1, but the sign bit is set
    with pytest.raises(InvalidPointError, match="invalid x sign for x = 0: "):
        point_from_octets("01" + "00" * 30 + "80")
    # x = 0 for y = p-1, but the sign bit is set
    with pytest.raises(InvalidPointError, match="invalid x sign for x = 0: "):
        point_from_octets("ec" + "ff" * 31)


def test_wrong_size() -> None:

    with pytest.raises(InvalidInputLengthError, match="invalid size: 31 bytes"):
        point_from_octets(IDENTITY[:-2])
    with pytest.raises(InvalidInputLengthError, match="invalid size: 33 bytes"):
        point_from_octets(IDENTITY + "00")
    with pytest.raises(InvalidInputLengthError):
        point_from_octets(b"")
    with pytest.raises(CTlibValueError, match="invalid hex-string: "):
        point_from_octets("zz" * 32)
    with pytest.raises(CTlibTypeError, match="not octets: "):
        point_from_octets(1)  # type: ignore


def test_prime_order_subgroup() -> None:

    assert is_in_prime_order_subgroup(INF)
    assert is_in_prime_order_subgroup(ec.G)
    assert is_in_prime_order_subgroup(mult(secrets.randbelow(ec.n)))

    T2 = point_from_octets(ORDER_TWO)
    assert T2 == (0, ec.p - 1)
    assert not is_in_prime_order_subgroup(T2)
    # a point with a small-order component
    Q = ec.add(ec.G, T2)
    assert not is_in_prime_order_subgroup(Q)
    assert is_in_prime_order_subgroup(ec.add(Q, T2))

    # the counter-1 candidate of the second generator derivation
    # decodes to a curve point outside the subgroup
    candidate = "c79f7eb98c75cf2e33bff19984ffb99dcf6d3a831dd3c336e81fcb438fde01f4"
    assert not is_in_prime_order_subgroup(point_from_octets(candidate))

    with pytest.raises(CTlibValueError, match="point not on curve"):
        is_in_prime_order_subgroup((1, 1))


def test_point_from_octets_in_subgroup() -> None:

    assert point_from_octets_in_subgroup(IDENTITY) == INF
    assert point_from_octets_in_subgroup(bytes_from_point(ec.G)) == ec.G

    with pytest.raises(InvalidPointError, match="identity point not allowed"):
        point_from_octets_in_subgroup(IDENTITY, allow_identity=False)
    err_msg = "point not in the prime order subgroup"
    with pytest.raises(InvalidPointError, match=err_msg):
        point_from_octets_in_subgroup(ORDER_TWO)
    Q = ec.add(ec.G, point_from_octets(ORDER_TWO))
    with pytest.raises(InvalidPointError, match=err_msg):
        point_from_octets_in_subgroup(bytes_from_point(Q))
    # decoding errors are propagated
    with pytest.raises(InvalidPointError, match="non-canonical y-coordinate: "):
        point_from_octets_in_subgroup("ed" + "ff" * 30 + "7f")
