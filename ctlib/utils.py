#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Assorted conversion utilities."""

from collections.abc import Iterable as IterableCollection
from typing import Iterable, Optional, Union

from ctlib.alias import Integer, Octets
from ctlib.exceptions import CTlibTypeError, CTlibValueError, InvalidInputLengthError

NoneOneOrMoreInt = Optional[Union[int, Iterable[int]]]

HEX_THRESHOLD = 0xFFFFFFFF


def bytes_from_octets(octets: Octets, out_size: NoneOneOrMoreInt = None) -> bytes:
    """Return bytes from a hex-string, stripping leading/trailing spaces.

    If the input is not a string, then it goes untouched
    (bytearray and memoryview are converted to bytes).
    Optionally, it also ensures required output size.
    """

    if isinstance(octets, str):  # hex string
        try:
            octets = bytes.fromhex(octets)
        except ValueError as e:
            raise CTlibValueError(f"invalid hex-string: {octets!r}") from e
    elif isinstance(octets, (bytearray, memoryview)):
        octets = bytes(octets)
    elif not isinstance(octets, bytes):
        raise CTlibTypeError(f"not octets: {type(octets).__name__}")

    if (
        out_size is None
        or isinstance(out_size, int)
        and len(octets) == out_size
        or isinstance(out_size, IterableCollection)
        and len(octets) in out_size
    ):
        return octets

    err_msg = f"invalid size: {len(octets)} bytes instead of {out_size}"
    raise InvalidInputLengthError(err_msg)


def int_from_integer(i: Integer) -> int:
    """Return an int from many possible integer representations.

    Allowed integer representations are:

    * 3735928559
    * -3735928559
    * "0xdeadbeef"
    * "-0xdeadbeef"
    * "deadbeef"
    * b'\xde\xad\xbe\xef'

    bytes and plain hex-strings are big-endian:
    for the little-endian scalar encoding
    see ctlib.ecc.scalar.int_from_scalar.
    """

    if isinstance(i, int):
        return i

    if isinstance(i, str):
        i = i.strip().lower()
        if i.startswith("0x") or i.startswith("-0x"):
            return int(i, 16)
        i = bytes.fromhex(i)

    # must be bytes
    return int.from_bytes(i, "big", signed=False)


def hex_string(i: Integer) -> str:
    """Return a hex-string from many positive integer representations.

    Negative integers are not allowed.

    The resulting hex-string has an even number of hex-digits and
    includes a space every four bytes (i.e. every eight hex-digits).
    """

    int_ = int_from_integer(i)
    if int_ < 0:
        raise CTlibValueError(f"negative integer: {int_}")
    a_str = hex(int_)[2:]
    if len(a_str) % 2 != 0:
        a_str = "0" + a_str

    indx = list(reversed(range(len(a_str), 0, -8)))
    lresult = [(a_str[max(0, i - 8) : i]) for i in indx]
    result = " ".join(lresult)
    return result.upper()


def int_repr(i: int) -> str:
    "Return the int as decimal if small, as spaced hex-string otherwise."
    return f"'{hex_string(i)}'" if i > HEX_THRESHOLD else f"{i}"
