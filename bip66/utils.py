#!/usr/bin/env python3

# Copyright (C) 2020-2022 The bip66 developers
#
# This file is part of bip66. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bip66 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Assorted conversion utilities.

DER integers are big-endian and signed:
the conversions here are limited to non-negative values,
the only ones allowed in an ECDSA signature.
"""

from collections.abc import Iterable as IterableCollection
from typing import Iterable, Optional, Union

from bip66.alias import Octets
from bip66.exceptions import BIP66TypeError, BIP66ValueError

NoneOneOrMoreInt = Optional[Union[int, Iterable[int]]]


def bytes_from_octets(octets: Octets, out_size: NoneOneOrMoreInt = None) -> bytes:
    """Return bytes from a hex-string or a bytes-like object.

    Hex-strings may include spaces, as accepted by bytes.fromhex.
    Optionally, it also ensures required output size.
    """

    if isinstance(octets, str):  # hex string
        octets = bytes.fromhex(octets)
    elif isinstance(octets, (bytearray, memoryview)):
        octets = bytes(octets)
    elif not isinstance(octets, bytes):
        err_msg = f"invalid octets type: {type(octets).__name__}"
        err_msg += ", instead of bytes-like or hex-string"
        raise BIP66TypeError(err_msg)

    if (
        out_size is None
        or isinstance(out_size, int)
        and len(octets) == out_size
        or isinstance(out_size, IterableCollection)
        and len(octets) in out_size
    ):
        return octets

    err_msg = f"invalid size: {len(octets)} bytes instead of {out_size}"
    raise BIP66ValueError(err_msg)


def bytes_from_int(i: int) -> bytes:
    """Return the shortest big-endian representation of a non-negative int.

    Zero is represented by a single null byte.
    No 'highest bit set' padding is added: that is a DER concern.
    """

    if i < 0:
        raise BIP66ValueError(f"negative integer: {i}")
    byte_size = max(1, (i.bit_length() + 7) // 8)
    return i.to_bytes(byte_size, byteorder="big", signed=False)


def hex_string(octets: Octets) -> str:
    """Return an upper-case hex-string from Octets.

    The resulting hex-string includes a space every four bytes
    (i.e. every eight hex-digits), counting from the right.
    """

    a_str = bytes_from_octets(octets).hex()
    indx = list(reversed(range(len(a_str), 0, -8)))
    lresult = [(a_str[max(0, i - 8) : i]) for i in indx]
    result = " ".join(lresult)
    return result.upper()
