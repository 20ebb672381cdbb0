#!/usr/bin/env python3

# Copyright (C) 2022-2026 The ecfield developers
#
# This file is part of ecfield. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfield including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Assorted conversion utilities."

from ecfield.alias import HEX_THRESHOLD, Integer
from ecfield.exceptions import ECFieldTypeError, ECFieldValueError


def int_from_integer(i: Integer) -> int:
    """Return an int from many possible integer representations.

    Allowed integer representations are:

    * 3735928559
    * -3735928559
    * "0xdeadbeef"
    * "-0xdeadbeef"
    * "deadbeef"
    * b'\xde\xad\xbe\xef'

    The binary representation is not allowed because there is no way to
    discriminate it from a valid hex-string
    (e.g. "0b11011110101011011011111011101111").
    """

    # bool is an int subclass, but True is not a field value
    if isinstance(i, bool):
        raise ECFieldTypeError(f"not an Integer: {i!r}")

    if isinstance(i, int):
        return i

    if isinstance(i, str):
        i = i.strip().lower()
        try:
            if i.startswith("0x") or i.startswith("-0x"):
                return int(i, 16)
            i = bytes.fromhex(i)
        except ValueError as e:
            raise ECFieldValueError(f"invalid hex-string: {i!r}") from e

    if isinstance(i, bytes):
        return int.from_bytes(i, "big", signed=False)

    raise ECFieldTypeError(f"not an Integer: {i!r}")


def hex_string(i: Integer) -> str:
    """Return a hex-string from many positive integer representations.

    Negative integers are not allowed.

    The resulting hex-string has an even number of hex-digits and
    includes a space every four bytes (i.e. every eight hex-digits).
    """

    int_ = int_from_integer(i)
    if int_ < 0:
        raise ECFieldValueError(f"negative integer: {int_}")
    a_str = hex(int_)[2:]
    if len(a_str) % 2 != 0:
        a_str = "0" + a_str

    indx = list(reversed(range(len(a_str), 0, -8)))
    lresult = [(a_str[max(0, i - 8) : i]) for i in indx]
    result = " ".join(lresult)
    return result.upper()


def int_string(i: int) -> str:
    "Return a message-friendly rendering of i: hex-string if it is large."

    if i > HEX_THRESHOLD:
        return f"'{hex_string(i)}'"
    return f"{i}"
