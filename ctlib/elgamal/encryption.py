#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Twisted ElGamal encryption and decryption of u64 amounts.

Encryption of amount m to public key P = s*H,
with fresh randomness r:

    C = m*G + r*H
    D = r*P

Decryption with secret key s:

    C - s^-1 * D = m*G + r*H - s^-1 * r*s*H = m*G

followed by a bounded discrete logarithm search for m,
see ctlib.elgamal.dlog.

Randomness must never be reused: two ciphertexts for the same public key
and the same r leak the difference of their amounts.
encrypt_with_randomness is only meant to coordinate r
with an accompanying proof system.

Neither secret keys nor amounts are ever logged
or included in error messages.
"""

from typing import Union

from ctlib.alias import Octets, Point, Scalar
from ctlib.amount import valid_u64_amount
from ctlib.ecc.curve import double_mult, ed25519, mult
from ctlib.ecc.number_theory import mod_inv
from ctlib.ecc.pedersen import second_generator
from ctlib.ecc.point import point_from_octets_in_subgroup
from ctlib.ecc.scalar import int_from_scalar, random_scalar
from ctlib.elgamal.ciphertext import ElGamalCiphertext
from ctlib.elgamal.dlog import baby_step_giant_step, discrete_log
from ctlib.elgamal.keypair import ElGamalKeypair
from ctlib.exceptions import CTlibValueError, NonInvertibleScalarError

DEFAULT_MAX_VALUE = 2**40

PublicKey = Union[ElGamalKeypair, Point, Octets]
SecretKey = Union[ElGamalKeypair, Scalar]


def _public_key(public_key: PublicKey) -> Point:
    if isinstance(public_key, ElGamalKeypair):
        return public_key.public_key
    if isinstance(public_key, tuple):
        ed25519.require_on_curve(public_key)
        return public_key
    return point_from_octets_in_subgroup(public_key, allow_identity=False)


def _secret_key(secret_key: SecretKey) -> int:
    if isinstance(secret_key, ElGamalKeypair):
        return secret_key.require_secret_key()
    return int_from_scalar(secret_key)


def _encrypt(amount: int, P: Point, r: int) -> ElGamalCiphertext:
    H = second_generator()
    # m*G + r*H: for m == 0 the m*G term is the identity
    commitment = double_mult(r, H, amount, ed25519.G)
    handle = mult(r, P)
    return ElGamalCiphertext(commitment, handle, check_validity=False)


def encrypt(amount: int, public_key: PublicKey) -> ElGamalCiphertext:
    "Encrypt the u64 amount to the public key, with fresh randomness."

    amount = valid_u64_amount(amount)
    P = _public_key(public_key)
    return _encrypt(amount, P, random_scalar())


def encrypt_with_randomness(
    amount: int, public_key: PublicKey, randomness: Scalar
) -> ElGamalCiphertext:
    """Encrypt the u64 amount to the public key, with the given randomness.

    The randomness is reduced mod n; zero randomness is rejected,
    as it would leave the amount in the clear.
    Never use it with randomness that could be predicted or reused.
    """

    amount = valid_u64_amount(amount)
    P = _public_key(public_key)
    r = int_from_scalar(randomness, reduce=True)
    if r == 0:
        raise CTlibValueError("zero randomness")
    return _encrypt(amount, P, r)


def decrypt(
    ciphertext: ElGamalCiphertext,
    secret_key: SecretKey,
    max_value: int = DEFAULT_MAX_VALUE,
    allow_negative: bool = False,
    method: str = "linear",
) -> int:
    """Decrypt the ciphertext, returning the amount.

    The amount is searched in [0, max_value]
    (in [-max_value, max_value] if allow_negative is True).
    method is either "linear" (the default, bounded by
    LINEAR_SEARCH_LIMIT) or "bsgs" (baby-step giant-step).

    DecryptionFailedError is raised if the amount is not found,
    i.e. it is above the bound or the secret key is not the right one.
    """

    if method not in ("linear", "bsgs"):
        raise CTlibValueError(f"unknown discrete log method: {method!r}")
    if not isinstance(ciphertext, ElGamalCiphertext):
        ciphertext = ElGamalCiphertext.parse(ciphertext)

    s = _secret_key(secret_key)
    try:
        s_inv = mod_inv(s, ed25519.n)
    except ValueError:
        raise NonInvertibleScalarError("secret key is not invertible") from None

    # m*G = C - s^-1 * D
    r_H = mult(s_inv, ciphertext.handle)
    amount_point = ed25519.add(ciphertext.commitment, ed25519.negate(r_H))

    if method == "bsgs":
        return baby_step_giant_step(amount_point, max_value, ed25519, allow_negative)
    return discrete_log(amount_point, max_value, ed25519, allow_negative)


def encrypt_u64(amount: int, public_key: PublicKey) -> bytes:
    "Encrypt the u64 amount, returning the 64-byte ciphertext."
    return encrypt(amount, public_key).serialize(check_validity=False)


def decrypt_u64(
    ciphertext: Octets, secret_key: SecretKey, max_value: int = DEFAULT_MAX_VALUE
) -> int:
    "Decrypt the 64-byte ciphertext, returning the u64 amount."
    return decrypt(ElGamalCiphertext.parse(ciphertext), secret_key, max_value)
