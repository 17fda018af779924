#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecpoints developers
#
# This file is part of ecpoints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecpoints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Prime field arithmetic.

Field elements are plain python ints, so addition, subtraction,
multiplication and modular exponentiation come for free
with arbitrary precision.
What is left here is what the int builtin does not provide:
the modular inverse in a prime field and a cheap primality test.
"""

from ecpoints.exceptions import ECPointsValueError
from ecpoints.utils import str_from_int


def is_probable_prime(p: int) -> bool:
    """Return True if p passes the base-2 Fermat primality test.

    This is a _probabilistic_ primality test:
    it is enough to catch gross mistakes in curve parameters,
    not to certify primality.
    """

    if p == 2:
        return True
    if p < 2 or p % 2 == 0:
        return False
    return pow(2, p - 1, p) == 1


def mod_inv(a: int, p: int) -> int:
    """Return the inverse of a (mod p), p being a prime.

    Based on Fermat's little theorem: a^(p-1) = 1 (mod p),
    hence a^(p-2) is the inverse of a.
    The result is meaningless if p is not a prime.
    """

    if p < 2:
        raise ECPointsValueError(f"invalid modulus: {p}")

    a %= p
    if a == 0:
        err_msg = "No inverse for 0 mod " + str_from_int(p)
        raise ECPointsValueError(err_msg)
    if a == 1:
        return 1
    return pow(a, p - 2, p)
