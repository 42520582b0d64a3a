#!/usr/bin/env python3

# Copyright (C) 2020-2022 The bip66 developers
#
# This file is part of bip66. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bip66 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Strict ASN.1 DER format for ECDSA signature representation.

The original Bitcoin implementation used OpenSSL to verify
ECDSA signatures in ASN.1 DER representation.
However, OpenSSL does not do strict validation
(e.g. extra padding is ignored) and this changes the transaction
hash value, leading to transaction malleability.
This was fixed by BIP66, activated on block 363,724.

source:
https://github.com/bitcoin/bips/blob/master/bip-0066.mediawiki

BIP66 mandates a strict DER format:

Format:
[0x30] [data-size][0x02][r-size][r][0x02][s-size][s]

* 0x30: header byte to indicate compound structure
* data-size: 1-byte size descriptor of the following data
* 0x02: header byte indicating an integer
* r-size: 1-byte size descriptor of the r value that follows
* r: arbitrary-size big-endian r value.
    It must use the shortest possible encoding for
    a positive integers: no null bytes at the start,
    except a single one when the next byte has its highest bit set
    (to avoid being interpreted as a negative number)
* 0x02: header byte indicating an integer
* s-size: 1-byte size descriptor of the s value that follows
* s: arbitrary-size big-endian s value. Same rules as for r apply

The signature must be between 8 and 72 bytes:
6 bytes of meta-data plus r and s,
each one up to 32 bytes with an optional 'highest bit set' padding.

The SIGHASH byte that Bitcoin appends to the DER signature
must be removed before using the functions of this module:
a trailing byte makes the signature invalid.

check and decode share the very same rule evaluation,
so that check(data) is False if and only if decode(data) raises.
"""

from dataclasses import InitVar, dataclass, field
from enum import Enum
from typing import Optional, Tuple, Type

from dataclasses_json import DataClassJsonMixin, config

from bip66.alias import Octets
from bip66.exceptions import (
    DERRuleError,
    EncodingLengthError,
    IntegerError,
    StructuralError,
)
from bip66.utils import bytes_from_int, bytes_from_octets, hex_string

_DER_SCALAR_MARKER = 0x02
_DER_SIG_MARKER = 0x30

MIN_SIZE = 8
MAX_SIZE = 72
# 32 bytes scalar plus 'highest bit set' padding
MAX_INT_SIZE = 33


class Violation(Enum):
    """DER rules, listed in evaluation order.

    Each rule carries the message and the exception type
    used by decode when the rule is violated.
    """

    SEQUENCE_TOO_SHORT = ("DER sequence length is too short", StructuralError)
    SEQUENCE_TOO_LONG = ("DER sequence length is too long", StructuralError)
    SEQUENCE_TAG = ("expected DER sequence", StructuralError)
    SEQUENCE_LENGTH = ("DER sequence length is invalid", StructuralError)
    R_INTEGER_TAG = ("expected DER integer for R", StructuralError)
    R_ZERO_LENGTH = ("R length is zero", IntegerError)
    R_LENGTH_OVERRUN = ("R length is too long", StructuralError)
    S_INTEGER_TAG = ("expected DER integer for S", StructuralError)
    S_ZERO_LENGTH = ("S length is zero", IntegerError)
    S_LENGTH_MISMATCH = ("S length is invalid", StructuralError)
    R_NEGATIVE = ("R value is negative", IntegerError)
    R_EXCESS_PADDING = ("R value excessively padded", IntegerError)
    S_NEGATIVE = ("S value is negative", IntegerError)
    S_EXCESS_PADDING = ("S value excessively padded", IntegerError)

    @property
    def message(self) -> str:
        return self.value[0]

    @property
    def error_type(self) -> Type[DERRuleError]:
        return self.value[1]

    def error(self) -> DERRuleError:
        return self.error_type(self.message, self)


def _first_violation(sig: bytes) -> Optional[Violation]:

    size = len(sig)
    if size < MIN_SIZE:
        return Violation.SEQUENCE_TOO_SHORT
    if size > MAX_SIZE:
        return Violation.SEQUENCE_TOO_LONG
    if sig[0] != _DER_SIG_MARKER:
        return Violation.SEQUENCE_TAG
    if sig[1] != size - 2:
        return Violation.SEQUENCE_LENGTH
    if sig[2] != _DER_SCALAR_MARKER:
        return Violation.R_INTEGER_TAG

    r_size = sig[3]
    if r_size == 0:
        return Violation.R_ZERO_LENGTH
    # there must be room at least for the s header byte and size
    if 5 + r_size >= size:
        return Violation.R_LENGTH_OVERRUN
    if sig[4 + r_size] != _DER_SCALAR_MARKER:
        return Violation.S_INTEGER_TAG

    s_size = sig[5 + r_size]
    if s_size == 0:
        return Violation.S_ZERO_LENGTH
    # no trailing bytes allowed
    if 6 + r_size + s_size != size:
        return Violation.S_LENGTH_MISMATCH

    if sig[4] & 0x80:
        return Violation.R_NEGATIVE
    if r_size > 1 and sig[4] == 0x00 and not sig[5] & 0x80:
        return Violation.R_EXCESS_PADDING

    if sig[r_size + 6] & 0x80:
        return Violation.S_NEGATIVE
    if s_size > 1 and sig[r_size + 6] == 0x00 and not sig[r_size + 7] & 0x80:
        return Violation.S_EXCESS_PADDING

    return None


def first_violation(data: Octets) -> Optional[Violation]:
    """Return the first DER rule violated by data, None if data is valid.

    Raise ValueError for an invalid hex-string
    and BIP66TypeError for an unsupported type.
    """
    return _first_violation(bytes_from_octets(data))


def check(data: Octets) -> bool:
    "Return True if data is a strict DER signature, False otherwise."

    try:
        sig = bytes_from_octets(data)
    except (ValueError, TypeError):
        return False
    return _first_violation(sig) is None


def decode(data: Octets) -> "Sig":
    """Return the (r, s) Sig from a strict DER signature.

    The 'highest bit set' padding, if any, is removed from r and s.
    Raise StructuralError or IntegerError at the first violated rule.
    """

    sig = bytes_from_octets(data)
    violation = _first_violation(sig)
    if violation is not None:
        raise violation.error()

    r_size = sig[3]
    s_size = sig[5 + r_size]
    r_start = 5 if r_size > 1 and sig[4] == 0x00 else 4
    s_start = (7 if s_size > 1 and sig[6 + r_size] == 0x00 else 6) + r_size
    # a strict DER signature can carry scalars longer than MAX_INT_SIZE
    return Sig(sig[r_start : 4 + r_size], sig[s_start:], check_validity=False)


def _padded_size(scalar: bytes, name: str) -> int:

    if not scalar:
        raise Violation[f"{name}_ZERO_LENGTH"].error()
    size = len(scalar) + 1 if scalar[0] & 0x80 else len(scalar)
    if size > MAX_INT_SIZE:
        err_msg = f"{name} length is too long: {size} bytes"
        err_msg += f" instead of max {MAX_INT_SIZE}"
        raise EncodingLengthError(err_msg)
    return size


def _serialize_scalar(scalar: bytes, size: int) -> bytes:
    # 'highest bit set' padding included here
    padding = b"\x00" if size > len(scalar) else b""
    return bytes([_DER_SCALAR_MARKER, size]) + padding + scalar


def encode(r: Octets, s: Octets) -> bytes:
    """Return the strict DER signature of the (r, s) pair.

    r and s are expected to be minimal big-endian positive integers:
    'highest bit set' padding is added if needed,
    but redundant null bytes are not removed.
    """

    r_bytes = bytes_from_octets(r)
    s_bytes = bytes_from_octets(s)
    r_size = _padded_size(r_bytes, "R")
    s_size = _padded_size(s_bytes, "S")

    out = _serialize_scalar(r_bytes, r_size)
    out += _serialize_scalar(s_bytes, s_size)
    return bytes([_DER_SIG_MARKER, len(out)]) + out


@dataclass(frozen=True)
class Sig(DataClassJsonMixin):
    """ECDSA signature (r, s) with strict DER serialization.

    r and s are minimal big-endian positive integers,
    without 'highest bit set' padding.
    """

    # big-endian, no padding
    r: bytes = field(metadata=config(encoder=lambda v: v.hex(), decoder=bytes.fromhex))
    # big-endian, no padding
    s: bytes = field(metadata=config(encoder=lambda v: v.hex(), decoder=bytes.fromhex))
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        object.__setattr__(self, "r", bytes_from_octets(self.r))
        object.__setattr__(self, "s", bytes_from_octets(self.s))
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        for name, scalar in (("R", self.r), ("S", self.s)):
            _padded_size(scalar, name)
            if len(scalar) > 1 and scalar[0] == 0x00:
                err_msg = f"{name} value excessively padded: '{hex_string(scalar)}'"
                raise IntegerError(err_msg)

    @property
    def scalars(self) -> Tuple[int, int]:
        "Return r and s as int."
        r = int.from_bytes(self.r, byteorder="big", signed=False)
        s = int.from_bytes(self.s, byteorder="big", signed=False)
        return r, s

    def serialize(self, check_validity: bool = True) -> bytes:
        "Serialize the signature to strict ASN.1 DER representation."

        if check_validity:
            self.assert_valid()

        return encode(self.r, self.s)

    @classmethod
    def parse(cls: Type["Sig"], data: Octets, check_validity: bool = True) -> "Sig":
        """Return a Sig by parsing binary data.

        Deserialize a strict ASN.1 DER representation of an ECDSA signature.
        """

        sig = decode(data)
        return cls(sig.r, sig.s, check_validity)

    @classmethod
    def from_scalars(
        cls: Type["Sig"], r: int, s: int, check_validity: bool = True
    ) -> "Sig":
        "Return a Sig from r and s as non-negative int."

        return cls(bytes_from_int(r), bytes_from_int(s), check_validity)
