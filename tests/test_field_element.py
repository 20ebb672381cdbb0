#!/usr/bin/env python3

# Copyright (C) 2022-2026 The ecfield developers
#
# This file is part of ecfield. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfield including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecfield.field_element` module."

import secrets
from typing import List

import pytest

from ecfield.exceptions import ECFieldTypeError, ECFieldValueError
from ecfield.field_element import FieldElement

# secp256k1 field prime: 2^256 - 2^32 - 977
P256 = 2 ** 256 - 2 ** 32 - 977
small_primes = [2, 3, 5, 7, 11, 13, 17, 19, 23, 223]


def sample(p: int, size: int = 8) -> List[FieldElement]:
    "Return some elements of F_p: exhaustive for small p, random otherwise."
    if p <= 23:
        return [FieldElement(v, p) for v in range(p)]
    return [FieldElement(0, p), FieldElement(1, p), FieldElement(p - 1, p)] + [
        FieldElement(secrets.randbelow(p), p) for _ in range(size)
    ]


def test_construction() -> None:
    for p in small_primes + [P256]:
        for v in (0, 1, p // 2, p - 1):
            fe = FieldElement(v, p)
            assert fe.value == v
            assert fe.modulus == p
            assert int(fe) == v
            # idempotent construction
            assert FieldElement(fe.value, fe.modulus) == fe

        for v in (p, p + 1, 2 * p, -1, -p):
            with pytest.raises(ECFieldValueError, match="not in field range"):
                FieldElement(v, p)

    assert FieldElement(5, 19) == FieldElement(5, 19)
    assert FieldElement(5, 19) != FieldElement(6, 19)
    assert FieldElement(12, 17) != FieldElement(12, 19)

    # other Integer representations
    assert FieldElement("0xc0", "0xdf") == FieldElement(192, 223)
    assert FieldElement("c0", b"\xdf") == FieldElement(192, 223)
    assert FieldElement(hex(P256 - 1), hex(P256)).value == P256 - 1
    # str values are hex-strings, even without prefix
    assert FieldElement("10", 19).value == 16
    for invalid in ("0xzz", "-0xzz", "zz", "123"):
        with pytest.raises(ECFieldValueError, match="invalid hex-string: "):
            FieldElement(invalid, 19)

    for p in (1, 0, -7):
        with pytest.raises(ECFieldValueError, match="invalid modulus: "):
            FieldElement(0, p)

    with pytest.raises(ECFieldTypeError, match="not an Integer: "):
        FieldElement(1.0, 19)  # type: ignore


def test_immutability() -> None:
    fe = FieldElement(5, 19)
    with pytest.raises(AttributeError):
        fe.value = 6  # type: ignore
    with pytest.raises(AttributeError):
        fe.modulus = 23  # type: ignore

    assert len({FieldElement(5, 19), FieldElement(5, 19), FieldElement(5, 23)}) == 2


def test_str_and_repr() -> None:
    assert str(FieldElement(12, 17)) == "(12, 17)"
    assert repr(FieldElement(12, 17)) == "FieldElement(12, 17)"
    fe = FieldElement(1, P256)
    assert repr(fe) == (
        "FieldElement(1, 'FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF"
        " FFFFFFFF FFFFFFFF FFFFFFFE FFFFFC2F')"
    )


def test_identities() -> None:
    for p in small_primes:
        assert FieldElement.zero(p) == FieldElement(0, p)
        assert FieldElement.one(p) == FieldElement(1, p)
        assert FieldElement.zero(p).is_zero()
        assert not FieldElement.one(p).is_zero()


def test_known_values() -> None:
    p = 19
    assert FieldElement(5, p) + FieldElement(5, p) == FieldElement(10, p)
    assert FieldElement(11, p) + FieldElement(17, p) == FieldElement(9, p)
    assert FieldElement(5, p) - FieldElement(5, p) == FieldElement(0, p)
    # no negative internal value
    assert FieldElement(5, p) - FieldElement(7, p) == FieldElement(17, p)
    assert FieldElement(5, p) * FieldElement(5, p) == FieldElement(6, p)
    assert FieldElement(5, p) / FieldElement(5, p) == FieldElement(1, p)
    # 17 * 7 = 119 = 6 * 19 + 5
    assert FieldElement(5, p) / FieldElement(17, p) == FieldElement(7, p)
    fermat_inv = pow(17, p - 2, p)
    expected = FieldElement(5 * fermat_inv % p, p)
    assert FieldElement(5, p) / FieldElement(17, p) == expected
    assert FieldElement(5, p) ** 500 == FieldElement(9, p)
    assert FieldElement(5, p) ** 0 == FieldElement(1, p)

    # 5^-5 = 5^(-5 mod 6) = 5^1 (mod 7)
    assert FieldElement(5, 7) ** -5 == FieldElement(5, 7)
    assert (FieldElement(5, 7) ** -5).value == pow(5, -5 % 6, 7)
    assert FieldElement(5, 7) ** -5 * FieldElement(5, 7) ** 5 == FieldElement(1, 7)

    assert -FieldElement(5, p) == FieldElement(14, p)
    assert -FieldElement(0, p) == FieldElement(0, p)
    assert FieldElement(17, p).inv() == FieldElement(9, p)


def test_named_methods() -> None:
    a = FieldElement(5, 19)
    b = FieldElement(7, 19)
    assert a.add(b) == a + b
    assert a.sub(b) == a - b
    assert a.mul(b) == a * b
    assert a.div(b) == a / b
    assert a.pow(3) == a ** 3


def test_field_properties() -> None:
    for p in small_primes + [P256]:
        elements = sample(p)
        zero, one = FieldElement.zero(p), FieldElement.one(p)
        for a in elements:
            assert a + zero == a
            assert a * one == a
            assert a - a == zero
            assert a + (-a) == zero
            for b in elements:
                assert a + b == b + a
                assert a * b == b * a
                assert (a + b) - b == a
                assert (a - b) + b == a
                if not b.is_zero():
                    assert (a * b) / b == a
                    assert (a / b) * b == a
                for c in elements[:5]:
                    assert (a + b) + c == a + (b + c)
                    assert (a * b) * c == a * (b * c)
                    assert a * (b + c) == a * b + a * c


def test_results_stay_in_field() -> None:
    for p in small_primes:
        for a in sample(p):
            for b in sample(p):
                results = [a + b, a - b, a * b, a ** b.value]
                if a.value:
                    results.append(a ** -b.value)
                if b.value:
                    results.append(a / b)
                for r in results:
                    assert r.modulus == p
                    assert 0 <= r.value < p


def test_pow() -> None:
    for p in small_primes + [P256]:
        for a in sample(p):
            for e in (0, 1, 2, 3, p - 2, p - 1, p, 2 * p + 5):
                assert (a ** e).value == pow(a.value, e, p)
            if not a.is_zero():
                assert a ** -1 == a.inv()
                assert a ** -1 * a == FieldElement.one(p)
                assert a ** -3 == (a ** 3).inv()

    with pytest.raises(ECFieldTypeError, match="not an int exponent: "):
        FieldElement(5, 19) ** 1.5  # type: ignore
    with pytest.raises(ECFieldTypeError, match="not an int exponent: "):
        FieldElement(5, 19) ** FieldElement(2, 19)  # type: ignore


def test_zero_inversion() -> None:
    for p in small_primes + [P256]:
        zero = FieldElement.zero(p)
        one = FieldElement.one(p)
        with pytest.raises(ECFieldValueError, match="No inverse for 0 mod"):
            one / zero
        with pytest.raises(ECFieldValueError, match="No inverse for 0 mod"):
            zero / zero
        with pytest.raises(ECFieldValueError, match="No inverse for 0 mod"):
            zero.inv()
        with pytest.raises(ECFieldValueError, match="No inverse for 0 mod"):
            zero ** -1
        # non-negative powers of zero are well defined
        assert zero ** 0 == one
        assert zero ** 1 == zero
        assert zero ** (p - 1) == zero


def test_different_fields() -> None:
    a = FieldElement(5, 19)
    b = FieldElement(5, 23)
    err_msg = "elements of different fields: "
    with pytest.raises(ECFieldTypeError, match=err_msg):
        a + b
    with pytest.raises(ECFieldTypeError, match=err_msg):
        a - b
    with pytest.raises(ECFieldTypeError, match=err_msg):
        a * b
    with pytest.raises(ECFieldTypeError, match=err_msg):
        a / b
    # zero divisor from a different field is a type error first
    with pytest.raises(ECFieldTypeError, match=err_msg):
        a / FieldElement(0, 23)
    with pytest.raises(TypeError):
        b.add(a)

    for other in (5, 5.0, "5", None):
        with pytest.raises(ECFieldTypeError, match="not a FieldElement: "):
            a + other  # type: ignore
        with pytest.raises(ECFieldTypeError, match="not a FieldElement: "):
            a * other  # type: ignore

    # operands are left untouched
    assert a == FieldElement(5, 19)
    assert b == FieldElement(5, 23)
