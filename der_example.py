#!/usr/bin/env python3

# Copyright (C) 2020-2022 The bip66 developers
#
# This file is part of bip66. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bip66 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

from bip66.der import Sig, check, decode, encode, first_violation
from bip66.utils import hex_string

print("\n0. Signature components")
r = 0x4E45E16932B8AF514961A1D3A1A25FDF3F4F7732E9D624C6C61548AB5FB8CD41
s = 0xF3D2C3A4C6E1F9F9A50A2C7EC2B0C2B2F9D7AA1C8E6E6D0AC8A5B0A2E3F4E5D6
sig = Sig.from_scalars(r, s)
print(f"    r:    {hex_string(sig.r)}")
print(f"    s:    {hex_string(sig.s)}")


print("1. Strict DER encoding")
sig_bin = encode(sig.r, sig.s)
print(f"  DER:    {hex_string(sig_bin)}")
print(f" size:    {len(sig_bin)} bytes")


print("2. Check")
print(check(sig_bin))


print("3. Decode")
print(decode(sig_bin).to_json())


print("\n** Appended SIGHASH byte")
sig_bin_sighash = sig_bin + b"\x01"
print(f"  DER:    {hex_string(sig_bin_sighash)}")
print(check(sig_bin_sighash), first_violation(sig_bin_sighash))


print("** Malleated s: excessively padded")
malleated = sig_bin[:1] + bytes([sig_bin[1] + 1]) + sig_bin[2:37]
malleated += bytes([sig_bin[37] + 1]) + b"\x00" + sig_bin[38:]
print(f"  DER:    {hex_string(malleated)}")
print(check(malleated), first_violation(malleated))
