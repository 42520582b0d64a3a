#!/usr/bin/env python3

# Copyright (C) 2020-2022 The bip66 developers
#
# This file is part of bip66. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bip66 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "3006020101020101"
# "3006 020101 020101"
# "30 44 0220 4e45e16932b8af514961a1d3a1a25fdf3f4f7732e9d624c6c61548ab5fb8cd41 0220 181522ec8eca07de4860a4acdd12909d831cc56cbbac4622082221a8768d1d09"
#
# use bip66.utils.bytes_from_octets to convert Octets to bytes
#
# Octets are used for DER signatures and for their r and s components
Octets = Union[bytes, bytearray, memoryview, str]
