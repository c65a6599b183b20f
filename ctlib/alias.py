#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Any, Callable, Tuple, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "5866666666666666666666666666666666666666666666666666666666666666"
# "58666666 66666666 66666666 66666666 66666666 66666666 66666666 66666666"
#
# use ctlib.utils.bytes_from_octets to convert Octets to bytes
#
# Octets are used for encoded points (32 bytes), encoded scalars (32 bytes),
# seeds (32 bytes), serialized ciphertexts (64 bytes)
# and serialized keypairs (96 bytes).
Octets = Union[bytes, str]

# hex-string or bytes representation of an int
# Integer = Union[Octets, int]
Integer = Union[bytes, str, int]

# Scalar modulo the group order n.
#
# Contrary to Integer, the bytes (or hex-string) representation
# of a Scalar is the 32-byte little-endian encoding of RFC 8032.
# use ctlib.ecc.scalar.int_from_scalar to convert a Scalar to int
Scalar = Union[int, bytes, str]

# Hash digest constructor: it may be any name suitable to hashlib.new()
HashF = Callable[[], Any]

# Elliptic curve point in affine coordinates.
# Warning: to make Point a NamedTuple would slow down the code
Point = Tuple[int, int]

# The identity (neutral element) of a twisted Edwards curve
# in affine coordinates is INF = (0, 1):
# contrary to short Weierstrass curves, it is an ordinary curve point
INF = 0, 1

# Elliptic curve point in extended (X, Y, Z, T) coordinates,
# with x = X/Z, y = Y/Z, x*y = T/Z
ExtPoint = Tuple[int, int, int, int]

# The identity in extended coordinates
INFE = 0, 1, 1, 0
