#!/usr/bin/env python3

# Copyright (C) 2020-2022 The bip66 developers
#
# This file is part of bip66. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bip66 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the bip66 package."

name = "bip66"
__version__ = "2022.10.1"
__author__ = "The bip66 developers"
__author_email__ = "devs@bip66.org"
__copyright__ = "Copyright (C) 2020-2022 The bip66 developers"
__license__ = "MIT License"
