#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecpoints developers
#
# This file is part of ecpoints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecpoints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecpoints.number_theory` module."

import secrets

import pytest

from ecpoints.exceptions import ECPointsValueError
from ecpoints.number_theory import is_probable_prime, mod_inv

primes = [
    2,
    3,
    5,
    7,
    11,
    13,
    17,
    19,
    23,
    29,
    31,
    37,
    41,
    43,
    47,
    53,
    59,
    61,
    67,
    71,
    73,
    79,
    83,
    89,
    97,
    101,
    103,
    107,
    109,
    113,
    2 ** 160 - 2 ** 31 - 1,
    2 ** 192 - 2 ** 64 - 1,
    2 ** 224 - 2 ** 96 + 1,
    2 ** 256 - 2 ** 32 - 977,
    2 ** 256 - 2 ** 224 + 2 ** 192 + 2 ** 96 - 1,
    2 ** 384 - 2 ** 128 - 2 ** 96 + 2 ** 32 - 1,
    2 ** 521 - 1,
]


def test_is_probable_prime() -> None:
    for p in primes:
        assert is_probable_prime(p)
    for n in (-7, 0, 1, 4, 9, 15, 21, 2 ** 256, 2 ** 521 + 1):
        assert not is_probable_prime(n)


def test_mod_inv() -> None:
    for p in primes:
        for a in range(1, min(p, 500)):
            assert mod_inv(a, p) * a % p == 1
            assert mod_inv(a + p, p) == mod_inv(a, p)

        for _ in range(10):
            a = 1 + secrets.randbelow(p - 1)
            inv = mod_inv(a, p)
            assert 0 < inv < p
            assert inv * a % p == 1

    assert mod_inv(1, 13) == 1
    assert mod_inv(14, 13) == 1
    assert mod_inv(-1, 13) == 12


def test_mod_inv_errors() -> None:
    with pytest.raises(ECPointsValueError, match="No inverse for 0 mod 13"):
        mod_inv(0, 13)

    with pytest.raises(ECPointsValueError, match="No inverse for 0 mod 13"):
        mod_inv(26, 13)

    p = 2 ** 256 - 2 ** 32 - 977
    err_msg = "No inverse for 0 mod 'FFFFFFFF FFFFFFFF"
    with pytest.raises(ECPointsValueError, match=err_msg):
        mod_inv(p, p)

    for m in (-13, 0, 1):
        with pytest.raises(ECPointsValueError, match="invalid modulus: "):
            mod_inv(3, m)
