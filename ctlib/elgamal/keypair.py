#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Twisted ElGamal keypair (ElGamalKeypair) dataclass.

A keypair is made of:

* secret_key s: a random scalar in 1..n-1
* public_key P = s*H: the point encryption handles are computed on
* decryption_key D = s*G: the same scalar on the base generator

Both points are deterministic functions of the secret scalar:
P is the only one to be shared for receiving encrypted amounts.

Decryption computes s^-1 * (r*P) = r*H,
cancelling the blinding term of the commitment m*G + r*H:
that is why P lives on H rather than on G.

The secret scalar is never included in repr(),
and it is dropped when leaving a with block:

    with ElGamalKeypair.from_seed(seed) as keypair:
        amount = decrypt(ciphertext, keypair)

Secret keys must be wrapped by an authenticated encryption layer
before being persisted: serialize returns the raw 96 bytes.
The layout s | s*H | s*G is not byte-compatible with keypairs
serialized under the P = s*G convention (s | s*G | s*H).
"""

from dataclasses import dataclass, field
from hashlib import sha256
from typing import Any, Dict, Mapping, Optional, Type, Union

from ctlib.alias import Octets, Point, Scalar
from ctlib.ecc.curve import ed25519, mult
from ctlib.ecc.pedersen import second_generator
from ctlib.ecc.point import (
    bytes_from_point,
    point_from_octets,
    point_from_octets_in_subgroup,
)
from ctlib.ecc.scalar import bytes_from_scalar, int_from_scalar, random_scalar
from ctlib.exceptions import CTlibValueError
from ctlib.utils import bytes_from_octets

SEED_SIZE = 32
KEYPAIR_SIZE = 96

PointLike = Union[Point, Octets]


def _point(Q: PointLike, check_validity: bool) -> Point:
    if isinstance(Q, tuple):
        return Q
    if check_validity:
        return point_from_octets_in_subgroup(Q, allow_identity=False)
    return point_from_octets(Q)


@dataclass
class ElGamalKeypair:
    secret_key: Optional[int] = field(repr=False)
    public_key: Point
    decryption_key: Point

    def __init__(
        self,
        secret_key: Scalar,
        public_key: Optional[PointLike] = None,
        decryption_key: Optional[PointLike] = None,
        check_validity: bool = True,
    ) -> None:

        s = int_from_scalar(secret_key)
        self.secret_key = s
        if public_key is None:
            self.public_key = mult(s, second_generator())
        else:
            self.public_key = _point(public_key, check_validity)
        if decryption_key is None:
            self.decryption_key = mult(s)
        else:
            self.decryption_key = _point(decryption_key, check_validity)

        if check_validity:
            self.assert_valid()

    def __enter__(self) -> "ElGamalKeypair":
        return self

    def __exit__(self, *_: Any) -> None:
        self.wipe()

    def wipe(self) -> None:
        "Drop the secret scalar: the keypair can only be used to encrypt."
        self.secret_key = None

    @property
    def is_wiped(self) -> bool:
        return self.secret_key is None

    def require_secret_key(self) -> int:
        "Return the secret scalar, if not wiped."
        if self.secret_key is None:
            raise CTlibValueError("wiped keypair: no secret key")
        return self.secret_key

    def assert_valid(self) -> None:
        s = self.require_secret_key()
        if not 0 < s < ed25519.n:
            raise CTlibValueError("secret key not in 1..n-1")
        ed25519.require_on_curve(self.public_key)
        ed25519.require_on_curve(self.decryption_key)
        if self.public_key != mult(s, second_generator()):
            raise CTlibValueError("public key does not match secret key")
        if self.decryption_key != mult(s):
            raise CTlibValueError("decryption key does not match secret key")

    @property
    def secret_key_bytes(self) -> bytes:
        "Return the 32-byte little-endian secret scalar."
        return bytes_from_scalar(self.require_secret_key())

    @property
    def public_key_bytes(self) -> bytes:
        return bytes_from_point(self.public_key)

    @property
    def decryption_key_bytes(self) -> bytes:
        return bytes_from_point(self.decryption_key)

    def to_dict(self, check_validity: bool = True) -> Dict[str, str]:

        if check_validity:
            self.assert_valid()

        return {
            "secret_key": self.secret_key_bytes.hex(),
            "public_key": self.public_key_bytes.hex(),
            "decryption_key": self.decryption_key_bytes.hex(),
        }

    @classmethod
    def from_dict(
        cls: Type["ElGamalKeypair"],
        dict_: Mapping[str, Any],
        check_validity: bool = True,
    ) -> "ElGamalKeypair":

        return cls(
            dict_["secret_key"],
            dict_["public_key"],
            dict_["decryption_key"],
            check_validity,
        )

    def serialize(self, check_validity: bool = True) -> bytes:
        """Return the 96 bytes secret_key | public_key | decryption_key.

        i.e. s | s*H | s*G: not byte-compatible with
        the P = s*G convention, storing s | s*G | s*H.
        """

        if check_validity:
            self.assert_valid()

        out = self.secret_key_bytes
        out += self.public_key_bytes
        out += self.decryption_key_bytes
        return out

    @classmethod
    def parse(
        cls: Type["ElGamalKeypair"], data: Octets, check_validity: bool = True
    ) -> "ElGamalKeypair":
        """Return a keypair from its 96 bytes serialization.

        The layout is s | s*H | s*G: with check_validity,
        data in the P = s*G convention (s | s*G | s*H) is rejected.
        """

        data = bytes_from_octets(data, KEYPAIR_SIZE)
        return cls(data[:32], data[32:64], data[64:], check_validity)

    @classmethod
    def generate(cls: Type["ElGamalKeypair"]) -> "ElGamalKeypair":
        "Return a keypair with a uniformly random secret scalar."
        return cls(random_scalar())

    @classmethod
    def from_seed(cls: Type["ElGamalKeypair"], seed: Octets) -> "ElGamalKeypair":
        """Return the keypair deterministically derived from a 32-byte seed.

        The secret scalar is the SHA-256 digest of the seed,
        read as little-endian integer and reduced mod n.
        This allows to re-derive the keypair (e.g. from a wallet signature)
        instead of persisting it.
        """

        seed = bytes_from_octets(seed, SEED_SIZE)
        digest = sha256(seed).digest()
        s = int.from_bytes(digest, byteorder="little", signed=False) % ed25519.n
        return cls(s)


def generate_keypair() -> ElGamalKeypair:
    return ElGamalKeypair.generate()


def keypair_from_seed(seed: Octets) -> ElGamalKeypair:
    return ElGamalKeypair.from_seed(seed)


def serialize_keypair(keypair: ElGamalKeypair) -> bytes:
    return keypair.serialize()


def deserialize_keypair(data: Octets, check_validity: bool = True) -> ElGamalKeypair:
    return ElGamalKeypair.parse(data, check_validity)
