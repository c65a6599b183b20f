#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Proper handling of confidential amounts.

An amount is a non-negative integer expressed in the
smallest unit of the token (e.g. lamports, cents)
and representable as an unsigned 64-bit integer.

Amounts cannot be a negative value, nor fractional:
callers are expected to pre-scale decimal amounts.
Because of floating-point conversion issues
algebra with amounts should never involve floats.
"""

from typing import Any

from ctlib.exceptions import CTlibTypeError, InvalidAmountError

MAX_U64 = 2**64 - 1


def valid_u64_amount(amount: Any) -> int:
    "Return the amount as int, if it is a valid unsigned 64-bit integer."

    # bool is an int subclass, but True is not an amount
    if amount is None or isinstance(amount, (bool, str, bytes)):
        raise CTlibTypeError(f"non-integer amount: {amount!r}")
    # any input that can be converted to int without loss is fine
    try:
        value = int(amount)
    except (TypeError, ValueError, OverflowError) as e:
        raise CTlibTypeError(f"non-integer amount: {amount!r}") from e
    if value != amount:
        raise CTlibTypeError(f"non-integer amount: {amount!r}")
    if not 0 <= value <= MAX_U64:
        raise InvalidAmountError(f"invalid u64 amount: {amount}")
    return value
