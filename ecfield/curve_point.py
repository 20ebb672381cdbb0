#!/usr/bin/env python3

# Copyright (C) 2022-2026 The ecfield developers
#
# This file is part of ecfield. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfield including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Points of an elliptic curve over F_p.

A CurvePoint is validated against the short Weierstrass equation

    y^2 = x^3 + a*x + b (mod p)

once, at construction; after that it is an immutable value.
The point at infinity, i.e. the identity element of the curve group,
is the point having neither x nor y coordinate.

No group law is defined here: point addition and doubling,
as well as scalar multiplication, are left to higher layers.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Type

from ecfield.exceptions import ECFieldTypeError, ECFieldValueError
from ecfield.field_element import FieldElement

_LOGGER = logging.getLogger(__name__)

OptionalElement = Optional[FieldElement]


def _curve_str(a: FieldElement, b: FieldElement) -> str:
    return f"y^2 = x^3 + {a.value}*x + {b.value} (mod {a.modulus})"


def _require_coefficients(a: FieldElement, b: FieldElement) -> None:
    for name, coeff in (("a", a), ("b", b)):
        if not isinstance(coeff, FieldElement):
            err_msg = f"curve coefficient {name} is not a FieldElement: "
            err_msg += f"{type(coeff).__name__}"
            raise ECFieldTypeError(err_msg)
    # a different modulus is rejected by the field arithmetic
    a.add(b)


def _require_coordinates(x: FieldElement, y: FieldElement) -> None:
    for name, coord in (("x", x), ("y", y)):
        if not isinstance(coord, FieldElement):
            err_msg = f"coordinate {name} is not a FieldElement: "
            err_msg += f"{type(coord).__name__}"
            raise ECFieldTypeError(err_msg)


def _curve_equation_holds(
    x: FieldElement, y: FieldElement, a: FieldElement, b: FieldElement
) -> bool:
    # every operation fails with ECFieldTypeError on modulus mismatch
    return (y * y - (x * x * x + a * x + b)).is_zero()


def is_on_curve(
    x: OptionalElement, y: OptionalElement, a: FieldElement, b: FieldElement
) -> bool:
    """Return True if (x, y) is a point of the curve y^2 = x^3 + a*x + b.

    The point at infinity (x and y both None) is on every curve,
    while a point missing only one coordinate is on none.
    Coordinates and coefficients belonging to different fields
    raise ECFieldTypeError.
    """

    _require_coefficients(a, b)
    if x is None and y is None:
        return True
    if x is None or y is None:
        return False
    _require_coordinates(x, y)
    return _curve_equation_holds(x, y, a, b)


@dataclass(frozen=True)
class CurvePoint:
    """Point (x, y) on the elliptic curve y^2 = x^3 + a*x + b over F_p.

    x, y, a, and b must all be elements of the same field:
    a different modulus raises ECFieldTypeError.
    The point at infinity has x and y both None;
    it is valid on any curve.
    A point with only one coordinate is malformed
    and raises ECFieldValueError, as does a point not on the curve.
    """

    x: OptionalElement
    y: OptionalElement
    a: FieldElement
    b: FieldElement

    def __post_init__(self) -> None:
        self.assert_valid()

    def assert_valid(self) -> None:
        _require_coefficients(self.a, self.b)

        if self.x is None and self.y is None:
            return

        if self.x is None or self.y is None:
            err_msg = "malformed point: "
            err_msg += f"x={self.x}, y={self.y}"
            err_msg += ", only the point at infinity has missing coordinates"
            _LOGGER.debug(err_msg)
            raise ECFieldValueError(err_msg)

        _require_coordinates(self.x, self.y)

        if not _curve_equation_holds(self.x, self.y, self.a, self.b):
            err_msg = f"point ({self.x.value}, {self.y.value}) is not on the curve "
            err_msg += _curve_str(self.a, self.b)
            _LOGGER.debug(err_msg)
            raise ECFieldValueError(err_msg)

    @classmethod
    def infinity(
        cls: Type["CurvePoint"], a: FieldElement, b: FieldElement
    ) -> "CurvePoint":
        "Return the point at infinity of the curve y^2 = x^3 + a*x + b."
        return cls(None, None, a, b)

    @property
    def modulus(self) -> int:
        "The prime of the field shared by coordinates and coefficients."
        return self.a.modulus

    def is_infinity(self) -> bool:
        return self.x is None and self.y is None

    def __str__(self) -> str:
        if self.is_infinity():
            result = "Point(infinity)"
        else:
            # not None: only the point at infinity lacks coordinates
            result = f"Point({self.x.value}, {self.y.value})"  # type: ignore
        return result + " on " + _curve_str(self.a, self.b)
