#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the ctlib.elgamal package."

from ctlib.elgamal.ciphertext import (
    ElGamalCiphertext,
    add_ciphertexts,
    deserialize_ciphertext,
    serialize_ciphertext,
    subtract_ciphertexts,
)
from ctlib.elgamal.encryption import (
    DEFAULT_MAX_VALUE,
    decrypt,
    decrypt_u64,
    encrypt,
    encrypt_u64,
    encrypt_with_randomness,
)
from ctlib.elgamal.keypair import (
    ElGamalKeypair,
    deserialize_keypair,
    generate_keypair,
    keypair_from_seed,
    serialize_keypair,
)

__all__ = [
    "DEFAULT_MAX_VALUE",
    "ElGamalCiphertext",
    "ElGamalKeypair",
    "add_ciphertexts",
    "decrypt",
    "decrypt_u64",
    "deserialize_ciphertext",
    "deserialize_keypair",
    "encrypt",
    "encrypt_u64",
    "encrypt_with_randomness",
    "generate_keypair",
    "keypair_from_seed",
    "serialize_ciphertext",
    "serialize_keypair",
    "subtract_ciphertexts",
]
