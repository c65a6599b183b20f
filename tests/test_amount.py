#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ctlib.amount` module."

from decimal import Decimal
from fractions import Fraction

import pytest

from ctlib.amount import MAX_U64, valid_u64_amount
from ctlib.exceptions import CTlibTypeError, InvalidAmountError


def test_valid_amounts() -> None:

    assert MAX_U64 == 18_446_744_073_709_551_615
    for amount in (0, 1, 42, 2**32, MAX_U64 - 1, MAX_U64):
        assert valid_u64_amount(amount) == amount

    # lossless conversions are fine
    assert valid_u64_amount(5.0) == 5
    assert valid_u64_amount(Decimal("12")) == 12
    assert valid_u64_amount(Fraction(10, 2)) == 5
    assert type(valid_u64_amount(Decimal("12"))) is int


def test_exceptions() -> None:

    err_msg = "invalid u64 amount: "
    for amount in (-1, MAX_U64 + 1, 2**128, -(2**64)):
        with pytest.raises(InvalidAmountError, match=err_msg):
            valid_u64_amount(amount)
    # an invalid amount is a ValueError
    with pytest.raises(ValueError):
        valid_u64_amount(-1)

    err_msg = "non-integer amount: "
    for amount in (None, True, False, "1", b"\x01", 2.5, Decimal("0.1"), [1]):
        with pytest.raises(CTlibTypeError, match=err_msg):
            valid_u64_amount(amount)
    with pytest.raises(CTlibTypeError, match=err_msg):
        valid_u64_amount(float("inf"))
    with pytest.raises(CTlibTypeError, match=err_msg):
        valid_u64_amount(float("nan"))
    # a non-integer amount is a TypeError
    with pytest.raises(TypeError):
        valid_u64_amount(1.5)
