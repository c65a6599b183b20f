#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The base classes are only meant to discriminate between Exceptions
being raised by ctlib from those raised by other codebase.
Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the ctlib versions are derived.

The specialized classes allow to tell apart malformed input
(wrong length, invalid point, invalid amount)
from a ciphertext whose plaintext could not be found
within the requested discrete logarithm search bound.
"""


class CTlibValueError(ValueError):
    pass


class CTlibTypeError(TypeError):
    pass


class CTlibRuntimeError(RuntimeError):
    pass


class InvalidAmountError(CTlibValueError):
    "Amount not in the unsigned 64-bit range."


class InvalidInputLengthError(CTlibValueError):
    "Octets not of the exact expected width."


class InvalidPointError(CTlibValueError):
    "Octets not decoding to a valid curve point."


class NonInvertibleScalarError(CTlibRuntimeError):
    "Secret scalar without a modular inverse."


class DecryptionFailedError(CTlibValueError):
    "Plaintext not found within the discrete logarithm search bound."


class SearchBoundExceededError(DecryptionFailedError):
    "Plaintext not found and the requested bound exceeds the search ceiling."
