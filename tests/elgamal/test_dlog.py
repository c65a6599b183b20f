#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ctlib.elgamal.dlog` module."

import logging

import pytest

from ctlib.alias import INF
from ctlib.ecc.curve import ed25519, mult
from ctlib.elgamal import dlog
from ctlib.elgamal.dlog import (
    LINEAR_SEARCH_LIMIT,
    baby_step_giant_step,
    discrete_log,
)
from ctlib.exceptions import (
    CTlibValueError,
    DecryptionFailedError,
    SearchBoundExceededError,
)

ec = ed25519


def test_discrete_log() -> None:

    assert discrete_log(INF, 0) == 0
    assert discrete_log(INF, 10) == 0
    for m in (1, 2, 3, 17, 255, 256, 1000):
        assert discrete_log(mult(m), 1000) == m
    assert discrete_log(mult(5), 5) == 5

    with pytest.raises(DecryptionFailedError, match="amount not found in 0..4"):
        discrete_log(mult(5), 4)
    with pytest.raises(DecryptionFailedError, match="amount not found in 0..0"):
        discrete_log(ec.G, 0)


def test_negative() -> None:

    Q = ec.negate(mult(7))
    with pytest.raises(DecryptionFailedError):
        discrete_log(Q, 100)
    assert discrete_log(Q, 100, allow_negative=True) == -7
    assert discrete_log(mult(7), 100, allow_negative=True) == 7
    assert discrete_log(INF, 100, allow_negative=True) == 0
    assert discrete_log(ec.negate(ec.G), 1, allow_negative=True) == -1


def test_search_limit(caplog) -> None:

    m = LINEAR_SEARCH_LIMIT
    assert discrete_log(mult(m), 2**40) == m

    Q = mult(m + 1)
    with caplog.at_level(logging.WARNING, logger="ctlib.elgamal.dlog"):
        with pytest.raises(SearchBoundExceededError, match="search limit 100000"):
            discrete_log(Q, m + 1)
    assert "amount exceeds the fast decryption range" in caplog.text
    # neither the point nor the amount are logged
    assert str(m + 1) not in caplog.text

    # search bound exceeded is also a decryption failure
    with pytest.raises(DecryptionFailedError):
        discrete_log(Q, 2**40)


def test_max_value_errors() -> None:

    with pytest.raises(CTlibValueError, match="negative max_value: "):
        discrete_log(ec.G, -1)
    with pytest.raises(CTlibValueError, match="invalid max_value: "):
        discrete_log(ec.G, 1.5)  # type: ignore
    with pytest.raises(CTlibValueError, match="invalid max_value: "):
        discrete_log(ec.G, True)
    with pytest.raises(CTlibValueError, match="negative max_value: "):
        baby_step_giant_step(ec.G, -1)
    with pytest.raises(CTlibValueError, match="point not on curve"):
        discrete_log((1, 1), 10)
    with pytest.raises(CTlibValueError, match="point not on curve"):
        baby_step_giant_step((1, 1), 10)


def test_baby_step_giant_step() -> None:

    max_value = 1000
    # baby-step table size is 32
    for m in (0, 1, 31, 32, 33, 64, 999, 1000):
        assert baby_step_giant_step(mult(m), max_value) == m

    with pytest.raises(DecryptionFailedError, match="amount not found in 0..1000"):
        baby_step_giant_step(mult(1001), max_value)
    with pytest.raises(DecryptionFailedError):
        baby_step_giant_step(mult(123_456), max_value)

    Q = ec.negate(mult(7))
    with pytest.raises(DecryptionFailedError):
        baby_step_giant_step(Q, max_value)
    assert baby_step_giant_step(Q, max_value, allow_negative=True) == -7
    Q = ec.negate(mult(1000))
    assert baby_step_giant_step(Q, max_value, allow_negative=True) == -1000

    assert baby_step_giant_step(mult(5), 5) == 5
    assert baby_step_giant_step(INF, 0) == 0
    with pytest.raises(DecryptionFailedError):
        baby_step_giant_step(ec.G, 0)


def test_baby_step_giant_step_above_search_limit() -> None:

    m = 200_000
    assert m > LINEAR_SEARCH_LIMIT
    assert baby_step_giant_step(mult(m), 2**28) == m


def test_baby_steps_cache() -> None:

    dlog._baby_steps.cache_clear()
    baby_step_giant_step(mult(10), 100)
    baby_step_giant_step(mult(20), 100)
    info = dlog._baby_steps.cache_info()
    assert info.misses == 1
    assert info.hits == 1


def test_baby_steps_cache_keeps_last_table() -> None:

    dlog._baby_steps.cache_clear()
    baby_step_giant_step(mult(10), 100)
    baby_step_giant_step(mult(10), 400)
    info = dlog._baby_steps.cache_info()
    assert info.maxsize == 1
    assert info.currsize == 1
    assert info.misses == 2
    # the table for the first bound has been evicted
    baby_step_giant_step(mult(10), 100)
    assert dlog._baby_steps.cache_info().misses == 3
