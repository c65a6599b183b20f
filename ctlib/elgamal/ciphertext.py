#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Twisted ElGamal ciphertext (ElGamalCiphertext) dataclass.

For amount m, encrypted to public key P with randomness r:

* commitment C = m*G + r*H (a Pedersen commitment to m)
* handle D = r*P (the decryption handle for P)

Ciphertexts are immutable values.
They are additively homomorphic: the componentwise sum (difference)
of two ciphertexts encrypted to the same public key
is an encryption of the sum (difference) of the amounts.
Combining ciphertexts encrypted to different public keys
produces a value that neither secret key can decrypt.

The serialization is the 64 bytes C | D,
each point in 32-byte compressed encoding.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Type, Union

from ctlib.alias import Octets, Point
from ctlib.ecc.curve import ed25519
from ctlib.ecc.point import (
    bytes_from_point,
    is_in_prime_order_subgroup,
    point_from_octets,
    point_from_octets_in_subgroup,
)
from ctlib.exceptions import CTlibTypeError, InvalidPointError
from ctlib.utils import bytes_from_octets

CIPHERTEXT_SIZE = 64

PointLike = Union[Point, Octets]


@dataclass(frozen=True)
class ElGamalCiphertext:
    commitment: Point
    handle: Point

    def __init__(
        self,
        commitment: PointLike,
        handle: PointLike,
        check_validity: bool = True,
    ) -> None:

        if not isinstance(commitment, tuple):
            commitment = point_from_octets(commitment)
        object.__setattr__(self, "commitment", commitment)
        if not isinstance(handle, tuple):
            handle = point_from_octets(handle)
        object.__setattr__(self, "handle", handle)

        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        for name in ("commitment", "handle"):
            Q = getattr(self, name)
            try:
                ed25519.require_on_curve(Q)
            except ValueError as e:
                raise InvalidPointError(f"invalid {name}: not on curve") from e
            if not is_in_prime_order_subgroup(Q):
                raise InvalidPointError(f"invalid {name}: not in prime order subgroup")

    def __add__(self, other: "ElGamalCiphertext") -> "ElGamalCiphertext":
        if not isinstance(other, ElGamalCiphertext):
            return NotImplemented
        return add_ciphertexts(self, other)

    def __sub__(self, other: "ElGamalCiphertext") -> "ElGamalCiphertext":
        if not isinstance(other, ElGamalCiphertext):
            return NotImplemented
        return subtract_ciphertexts(self, other)

    def to_dict(self, check_validity: bool = True) -> Dict[str, str]:

        if check_validity:
            self.assert_valid()

        return {
            "commitment": bytes_from_point(self.commitment).hex(),
            "handle": bytes_from_point(self.handle).hex(),
        }

    @classmethod
    def from_dict(
        cls: Type["ElGamalCiphertext"],
        dict_: Mapping[str, Any],
        check_validity: bool = True,
    ) -> "ElGamalCiphertext":

        return cls(dict_["commitment"], dict_["handle"], check_validity)

    def serialize(self, check_validity: bool = True) -> bytes:
        "Return the 64 bytes commitment | handle."

        if check_validity:
            self.assert_valid()

        return bytes_from_point(self.commitment) + bytes_from_point(self.handle)

    @classmethod
    def parse(
        cls: Type["ElGamalCiphertext"], data: Octets, check_validity: bool = True
    ) -> "ElGamalCiphertext":
        """Return a ciphertext from its 64 bytes serialization.

        With check_validity, points are also required
        to belong to the prime order subgroup,
        as appropriate for data from an untrusted boundary.
        Decoding always fails closed on invalid points.
        """

        data = bytes_from_octets(data, CIPHERTEXT_SIZE)
        if check_validity:
            commitment = point_from_octets_in_subgroup(data[:32])
            handle = point_from_octets_in_subgroup(data[32:])
        else:
            commitment = point_from_octets(data[:32])
            handle = point_from_octets(data[32:])
        # points have just been validated
        return cls(commitment, handle, check_validity=False)


def _require_ciphertext(ct: Any) -> None:
    if not isinstance(ct, ElGamalCiphertext):
        raise CTlibTypeError(f"not a ciphertext: {type(ct).__name__}")


def add_ciphertexts(a: ElGamalCiphertext, b: ElGamalCiphertext) -> ElGamalCiphertext:
    "Return the encryption of the sum of the amounts (homomorphic addition)."

    _require_ciphertext(a)
    _require_ciphertext(b)
    commitment = ed25519.add(a.commitment, b.commitment)
    handle = ed25519.add(a.handle, b.handle)
    return ElGamalCiphertext(commitment, handle, check_validity=False)


def subtract_ciphertexts(
    a: ElGamalCiphertext, b: ElGamalCiphertext
) -> ElGamalCiphertext:
    "Return the encryption of the difference of the amounts."

    _require_ciphertext(a)
    _require_ciphertext(b)
    commitment = ed25519.add(a.commitment, ed25519.negate(b.commitment))
    handle = ed25519.add(a.handle, ed25519.negate(b.handle))
    return ElGamalCiphertext(commitment, handle, check_validity=False)


def serialize_ciphertext(ct: ElGamalCiphertext) -> bytes:
    return ct.serialize()


def deserialize_ciphertext(
    data: Octets, check_validity: bool = True
) -> ElGamalCiphertext:
    return ElGamalCiphertext.parse(data, check_validity)
