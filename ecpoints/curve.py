#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecpoints developers
#
# This file is part of ecpoints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecpoints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic Curve class.

The curve is the context of every group-law operation:
point representations do not carry any curve-specific constant,
so that the same points can be used with different curves
and the curve coefficients are always explicit.

Selecting the parameters of named curves (base point, order, etc.)
is left to the caller.
"""

import logging
from typing import Tuple, Union

from ecpoints.affine import AffinePoint
from ecpoints.alias import Integer
from ecpoints.exceptions import ECPointsTypeError, ECPointsValueError
from ecpoints.number_theory import is_probable_prime
from ecpoints.utils import HEX_THRESHOLD, hex_string, int_from_integer, str_from_int
from ecpoints.value import Finite, Infinity

logger = logging.getLogger(__name__)


class Curve:
    """Elliptic curve over Fp.

    The elliptic curve is the set of points (x, y)
    that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
    with x, y, a, and b in Fp (p being a prime),
    together with a point at infinity INF.
    The constants a, b must satisfy the relationship
    4 a^3 + 27 b^2 ≠ 0.
    """

    def __init__(self, p: Integer, a: Integer, b: Integer) -> None:
        # Parameters are checked according to SEC 1 v.2 3.1.1.2.1

        p = int_from_integer(p)
        # 1) p must be an odd prime
        if p == 2:
            raise ECPointsValueError("p must be an odd prime: 2")
        # Fermat test will do as _probabilistic_ primality test...
        if not is_probable_prime(p):
            raise ECPointsValueError("p is not prime: " + str_from_int(p))
        self.p = p

        # 2) a and b must be field elements, i.e. in [0, p-1]
        self.a = self._coefficient("a", a)
        self.b = self._coefficient("b", b)

        # 3) 4*a^3 + 27*b^2 must not vanish mod p
        if (4 * self.a ** 3 + 27 * self.b ** 2) % p == 0:
            raise ECPointsValueError("zero discriminant")
        logger.debug("curve defined over a %d-bit prime field", p.bit_length())

    def _coefficient(self, name: str, value: Integer) -> int:
        c = int_from_integer(value)
        if c < 0:
            raise ECPointsValueError(f"negative {name}: {c}")
        if self.p <= c:
            err_msg = f"p <= {name}: {str_from_int(self.p)} <= {str_from_int(c)}"
            raise ECPointsValueError(err_msg)
        return c

    def _parameters(self) -> Tuple[str, str, str]:
        # a and b share the same base
        if max(self.a, self.b) > HEX_THRESHOLD:
            a, b = f"'{hex_string(self.a)}'", f"'{hex_string(self.b)}'"
        else:
            a, b = str(self.a), str(self.b)
        return str_from_int(self.p), a, b

    def __str__(self) -> str:
        result = "Curve"
        for name, value in zip("pab", self._parameters()):
            result += f"\n {name}   = " + value.strip("'")
        return result

    def __repr__(self) -> str:
        return "Curve(" + ", ".join(self._parameters()) + ")"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Curve):
            return NotImplemented
        return (self.p, self.a, self.b) == (other.p, other.a, other.b)

    def __hash__(self) -> int:
        return hash((self.p, self.a, self.b))

    def _y2(self, x: int) -> int:
        return ((x * x + self.a) * x + self.b) % self.p

    def is_on_curve(self, Q: Union[AffinePoint, Finite, Infinity]) -> bool:
        """Return True if the point is on the curve.

        The point at infinity is always on the curve.
        """
        if isinstance(Q, Infinity):
            return True
        if not isinstance(Q, (AffinePoint, Finite)):
            raise ECPointsTypeError(f"not an affine point: {Q!r}")
        if not 0 <= Q.x < self.p:
            raise ECPointsValueError("x-coordinate not in 0..p-1: " + str_from_int(Q.x))
        if not 0 <= Q.y < self.p:
            raise ECPointsValueError("y-coordinate not in 0..p-1: " + str_from_int(Q.y))
        return self._y2(Q.x) == Q.y * Q.y % self.p

    def require_on_curve(self, Q: Union[AffinePoint, Finite, Infinity]) -> None:
        """Require the input curve point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise ECPointsValueError("point not on curve")
