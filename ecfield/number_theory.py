#!/usr/bin/env python3

# Copyright (C) 2022-2026 The ecfield developers
#
# This file is part of ecfield. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfield including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Number theory and modular arithmetic functions.

All functions work on plain ints; the modulus p is assumed to be a prime
wherever Fermat's little theorem is invoked (this is not verified).
"""

from ecfield.exceptions import ECFieldValueError
from ecfield.utils import int_string


def mod(a: int, b: int) -> int:
    """Return a reduced modulo b, always in [0, b).

    The result is never negative, whatever the sign of a:
    mod(-2, 19) is 17, not -2 as a truncating remainder would give.
    """

    if b <= 0:
        raise ECFieldValueError(f"non-positive modulus: {b}")
    # python % floors: the result has the sign of b
    return a % b


def mod_pow(a: int, e: int, p: int) -> int:
    """Return a^e (mod p); p must be a prime.

    The exponent is first reduced modulo p - 1 (Fermat's little theorem),
    so that negative exponents are naturally supported.
    The zero base has no inverse: a negative exponent is an error.
    """

    a = mod(a, p)
    if a == 0:
        if e < 0:
            raise ECFieldValueError(f"No inverse for 0 mod {int_string(p)}")
        # 0^(p-1) is 0: no exponent reduction for the zero base
        return 1 if e == 0 else 0
    return pow(a, mod(e, p - 1), p)


def mod_inv(a: int, p: int) -> int:
    """Return the inverse of a (mod p); p must be a prime.

    Based on Fermat's little theorem: a^-1 = a^(p-2) (mod p).
    """

    a = mod(a, p)
    if a == 0:
        raise ECFieldValueError(f"No inverse for 0 mod {int_string(p)}")
    return pow(a, p - 2, p)

