#!/usr/bin/env python3

# Copyright (C) 2022-2026 The ecfield developers
#
# This file is part of ecfield. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfield including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elements of the prime finite field F_p.

A FieldElement is an immutable (value, modulus) pair,
with 0 <= value < modulus.
The modulus must be a prime: this is a documented precondition,
it is not verified as primality testing is far more expensive
than any of the field operations.

Field operations are only defined between elements of the same field:
mixing elements with different moduli raises ECFieldTypeError
before any computation is attempted.
Every result has the same modulus of its operands.
"""

from dataclasses import dataclass
from typing import Type

from ecfield.alias import Integer
from ecfield.exceptions import ECFieldTypeError, ECFieldValueError
from ecfield.number_theory import mod, mod_inv, mod_pow
from ecfield.utils import int_from_integer, int_string


@dataclass(frozen=True)
class FieldElement:
    """Element of the finite field F_p, p being a prime.

    value and modulus can be provided as any Integer
    (int, hex-string, or bytes); they are stored as int.
    A str is always read as a hex-string, with or without "0x" prefix:
    FieldElement("10", 19) has value 16, not 10.
    The value must already be in [0, modulus):
    out-of-range values are not silently reduced.
    """

    value: int
    modulus: int

    def __init__(self, value: Integer, modulus: Integer) -> None:
        object.__setattr__(self, "value", int_from_integer(value))
        object.__setattr__(self, "modulus", int_from_integer(modulus))
        self.assert_valid()

    def assert_valid(self) -> None:
        if self.modulus < 2:
            raise ECFieldValueError(f"invalid modulus: {int_string(self.modulus)}")
        if not 0 <= self.value < self.modulus:
            err_msg = f"value {int_string(self.value)}"
            err_msg += f" not in field range 0..{int_string(self.modulus - 1)}"
            raise ECFieldValueError(err_msg)

    @classmethod
    def zero(cls: Type["FieldElement"], modulus: Integer) -> "FieldElement":
        "Return the additive identity of F_modulus."
        return cls(0, modulus)

    @classmethod
    def one(cls: Type["FieldElement"], modulus: Integer) -> "FieldElement":
        "Return the multiplicative identity of F_modulus."
        return cls(1, modulus)

    def __str__(self) -> str:
        return f"({self.value}, {self.modulus})"

    def __repr__(self) -> str:
        return f"FieldElement({int_string(self.value)}, {int_string(self.modulus)})"

    def __int__(self) -> int:
        return self.value

    def is_zero(self) -> bool:
        return self.value == 0

    def _require_same_field(self, other: object) -> "FieldElement":
        if not isinstance(other, FieldElement):
            err_msg = "not a FieldElement: "
            err_msg += f"{type(other).__name__}"
            raise ECFieldTypeError(err_msg)
        if self.modulus != other.modulus:
            err_msg = "elements of different fields: "
            err_msg += f"{int_string(self.modulus)} != {int_string(other.modulus)}"
            raise ECFieldTypeError(err_msg)
        return other

    def _new(self, value: int) -> "FieldElement":
        "Return the element of the same field having the given value."
        return type(self)(mod(value, self.modulus), self.modulus)

    def add(self, other: "FieldElement") -> "FieldElement":
        other = self._require_same_field(other)
        return self._new(self.value + other.value)

    def sub(self, other: "FieldElement") -> "FieldElement":
        other = self._require_same_field(other)
        return self._new(self.value - other.value)

    def mul(self, other: "FieldElement") -> "FieldElement":
        other = self._require_same_field(other)
        return self._new(self.value * other.value)

    def div(self, other: "FieldElement") -> "FieldElement":
        """Return self / other, i.e. self * other^(p-2) (mod p).

        Division by the zero element raises ECFieldValueError.
        """
        other = self._require_same_field(other)
        return self._new(self.value * mod_inv(other.value, self.modulus))

    def pow(self, exponent: int) -> "FieldElement":
        """Return self^exponent.

        The exponent is reduced modulo p-1 (Fermat's little theorem),
        therefore negative exponents are supported for non-zero elements.
        Raising the zero element to a negative exponent is an inversion
        of zero and raises ECFieldValueError.
        """
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise ECFieldTypeError(f"not an int exponent: {exponent!r}")
        return self._new(mod_pow(self.value, exponent, self.modulus))

    def inv(self) -> "FieldElement":
        "Return the multiplicative inverse, failing for the zero element."
        return self._new(mod_inv(self.value, self.modulus))

    def __add__(self, other: "FieldElement") -> "FieldElement":
        return self.add(other)

    def __sub__(self, other: "FieldElement") -> "FieldElement":
        return self.sub(other)

    def __mul__(self, other: "FieldElement") -> "FieldElement":
        return self.mul(other)

    def __truediv__(self, other: "FieldElement") -> "FieldElement":
        return self.div(other)

    def __pow__(self, exponent: int) -> "FieldElement":
        return self.pow(exponent)

    def __neg__(self) -> "FieldElement":
        return self._new(-self.value)
