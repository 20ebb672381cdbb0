#!/usr/bin/env python3

# Copyright (C) 2022-2026 The ecfield developers
#
# This file is part of ecfield. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfield including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Union

# hex-string or bytes representation of an int
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# or "0x" prefixed strings, e.g.:
# "df"
# "0xdf"
# "-0xdf"
# "FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFE FFFFFC2F"
#
# bytes are interpreted as big-endian unsigned integers
#
# use ecfield.utils.int_from_integer to convert Integer to int
Integer = Union[bytes, str, int]

# above this threshold integers are rendered as hex-strings in messages
HEX_THRESHOLD = 0xFFFFFFFF
