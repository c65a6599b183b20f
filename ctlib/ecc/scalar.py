#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Scalars modulo the group order n.

The canonical octet representation of a scalar
is its 32-byte little-endian encoding (RFC 8032),
with 0 <= s < n.
"""

import secrets

from ctlib.alias import Scalar
from ctlib.ecc.curve import TwistedEdwardsCurve, ed25519
from ctlib.exceptions import CTlibTypeError, CTlibValueError
from ctlib.utils import bytes_from_octets


def int_from_scalar(
    s: Scalar, ec: TwistedEdwardsCurve = ed25519, reduce: bool = False
) -> int:
    """Return an int from a scalar, as int or little-endian octets.

    If reduce is False, the scalar must be canonical, i.e. 0 <= s < n;
    otherwise it is reduced mod n.
    The value of a rejected scalar is never included in the error message.
    """

    if isinstance(s, bool):
        raise CTlibTypeError("not a scalar: bool")
    if isinstance(s, int):
        i = s
    elif isinstance(s, (bytes, bytearray, memoryview, str)):
        octets = bytes_from_octets(s, ec.n_size)
        i = int.from_bytes(octets, byteorder="little", signed=False)
    else:
        raise CTlibTypeError(f"not a scalar: {type(s).__name__}")

    if reduce:
        return i % ec.n
    if not 0 <= i < ec.n:
        raise CTlibValueError("scalar not in 0..n-1")
    return i


def bytes_from_scalar(s: Scalar, ec: TwistedEdwardsCurve = ed25519) -> bytes:
    "Return the canonical little-endian octets of a scalar."
    i = int_from_scalar(s, ec)
    return i.to_bytes(ec.n_size, byteorder="little", signed=False)


def random_scalar(ec: TwistedEdwardsCurve = ed25519) -> int:
    "Return a uniformly random scalar in 1..n-1."
    return 1 + secrets.randbelow(ec.n - 1)
