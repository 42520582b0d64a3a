#!/usr/bin/env python3

# Copyright (C) 2020-2022 The bip66 developers
#
# This file is part of bip66. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bip66 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Expception classes.

BIP66ValueError and BIP66TypeError are only meant to dicriminate
between Exceptions being raised by bip66 from those raised
by other codebase.

StructuralError and IntegerError are raised when a DER rule is violated:
the violated rule is available as their violation attribute.
EncodingLengthError is raised when an integer is too long to be encoded.

Users are usually better off just dealing with the regular
ValueError and TypeError from which the bip66 versions are derived.
"""

from typing import Any


class BIP66ValueError(ValueError):
    pass


class BIP66TypeError(TypeError):
    pass


class DERRuleError(BIP66ValueError):
    def __init__(self, msg: str, violation: Any = None) -> None:
        super().__init__(msg)
        self.violation = violation


class StructuralError(DERRuleError):
    "Invalid size, tag, or declared length in a DER sequence."


class IntegerError(DERRuleError):
    "Zero-length, negative, or excessively padded DER integer."


class EncodingLengthError(BIP66ValueError):
    "Integer too long to be encoded in a strict DER signature."
