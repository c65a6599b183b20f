#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Pedersen commitment functions.

In a commitment scheme the committer:

* decides (or is given) a secret message v
* decides a random secret r
* *commits* to v by applying the public commitment
  scheme algorithm and producing a commitment C=Commit(r,v)
* makes C public

Later, when r and v are revealed, the verifier *opens* the
commitment checking if indeed C=Commit(r,v).

Pedersen commitment uses a public group of large order n
in which the discrete logarithm is hard.
In the case of an elliptic curve group, the generator G is
supplemented with a second random generator H and
the commitment algorithm is Commit(r,v)=vG+rH,
i.e. the commitment component of a Twisted ElGamal ciphertext.
It is crucial for H to be Nothing-Up-My-Sleeve (NUMS), i.e.
the discrete logarithm of H with respect to G must be unknown.
"""

import functools
import logging
from hashlib import sha256

from ctlib.alias import HashF, Integer, Point
from ctlib.ecc.curve import TwistedEdwardsCurve, _mult, double_mult, ed25519
from ctlib.ecc.point import is_in_prime_order_subgroup, point_from_octets
from ctlib.exceptions import CTlibRuntimeError, InvalidPointError

logger = logging.getLogger(__name__)

H_DOMAIN_SEPARATOR = b"Solana_TwistedElGamal_H_Generator"
H_MAX_ATTEMPTS = 1000
H_FALLBACK_MULTIPLIER = 8


def second_generator(ec: TwistedEdwardsCurve = ed25519, hf: HashF = sha256) -> Point:
    """Second (with respect to G) elliptic curve generator.

    Second (with respect to G) Nothing-Up-My-Sleeve (NUMS)
    elliptic curve generator, derived once per process
    by try-and-increment.

    The hash of a fixed domain separation string is used
    as candidate compressed point encoding.
    If it does not decode to a curve point, a counter
    is XOR-ed into its first (i.e. least significant) four bytes,
    leaving the sign bit untouched, and the next candidate is tried.
    The first decoded point is multiplied by the cofactor,
    so that H belongs to the prime order subgroup.

    As last resort, H_FALLBACK_MULTIPLIER * G is used.

    Being deterministic, the result is safe to compute
    concurrently: at most the work is duplicated.
    """

    # one cache entry per (ec, hf), however the arguments are spelled
    return _second_generator(ec, hf)


@functools.lru_cache()
def _second_generator(ec: TwistedEdwardsCurve, hf: HashF) -> Point:

    hash_ = hf()
    hash_.update(H_DOMAIN_SEPARATOR)
    digest = hash_.digest()[: ec.p_size]

    for counter in range(H_MAX_ATTEMPTS):
        candidate = bytearray(digest)
        for i, counter_byte in enumerate(counter.to_bytes(4, byteorder="little")):
            candidate[i] ^= counter_byte
        try:
            Q = point_from_octets(bytes(candidate), ec)
        except InvalidPointError:
            continue
        HE = _mult(ec.h, ec.ext_from_aff(Q), ec)
        # small-order candidate
        if ec.is_identity_ext(HE):
            continue
        logger.debug("second generator found at counter %d", counter)
        return ec.aff_from_ext(HE)

    logger.warning("second generator not found: falling back to multiple of G")
    H = ec.aff_from_ext(_mult(H_FALLBACK_MULTIPLIER, ec.ext_from_aff(ec.G), ec))
    if H == (0, 1) or not is_in_prime_order_subgroup(H, ec):
        raise CTlibRuntimeError("invalid second generator")
    return H


def commit(
    r: Integer, v: Integer, ec: TwistedEdwardsCurve = ed25519, hf: HashF = sha256
) -> Point:
    """Commit to v, returning vG+rH.

    Commit to v with blinding factor r, returning vG+rH.
    H is the second Nothing-Up-My-Sleeve (NUMS) generator of the curve.
    """

    H = second_generator(ec, hf)
    return double_mult(r, H, v, ec.G, ec)


def verify(
    r: Integer,
    v: Integer,
    commitment: Point,
    ec: TwistedEdwardsCurve = ed25519,
    hf: HashF = sha256,
) -> bool:
    """Open the commitment and return True if valid."""

    # all kind of Exceptions are catched because
    # verify must always return a bool
    try:
        Q = commit(r, v, ec, hf)
    except Exception:  # pylint: disable=broad-except
        return False
    return commitment == Q
