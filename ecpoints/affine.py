#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecpoints developers
#
# This file is part of ecpoints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecpoints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Affine coordinates.

An AffinePoint is always a finite point:
the point at infinity has no affine (x, y) representation
and it is expressed by ecpoints.value.INF instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ecpoints.alias import RawCoordinates
from ecpoints.coordinates import Coordinates
from ecpoints.exceptions import ConversionError
from ecpoints.number_theory import mod_inv
from ecpoints.utils import int_from_str_radix
from ecpoints.value import CurveValue, Finite, Infinity

if TYPE_CHECKING:  # pragma: no cover
    from ecpoints.curve import Curve
    from ecpoints.jacobian import JacobianPoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AffinePoint(Coordinates):
    x: int
    y: int

    def __post_init__(self) -> None:
        self._check_coordinates()

    def coordinates(self) -> RawCoordinates:
        return self.x, self.y

    @classmethod
    def parse(cls, x_str: str, y_str: str, radix: int) -> AffinePoint:
        """Return the point from the strings of its coordinates.

        ParseError is raised if any of the strings
        is not a valid integer in the given radix.
        The point is not checked to be on any curve.
        """
        return cls(int_from_str_radix(x_str, radix), int_from_str_radix(y_str, radix))

    @classmethod
    def from_jacobian(cls, QJ: JacobianPoint, p: int) -> AffinePoint:
        """Return the affine point represented by the Jacobian point.

        (x, y, z) represents (x/z^2, y/z^3): the inverse of z
        is computed mod p according to Fermat's little theorem,
        so p must be the (prime) field modulus.
        The point at infinity (z = 0) has no affine representation:
        ConversionError is raised.
        """
        if QJ.is_identity_mod(p):
            logger.debug("rejected conversion of Jacobian INF to affine")
            raise ConversionError("INF has no affine coordinates")

        inv_z = mod_inv(QJ.z, p)
        inv_z2 = inv_z * inv_z
        x = QJ.x * inv_z2 % p
        y = QJ.y * inv_z2 * inv_z % p
        return cls(x, y)

    @classmethod
    def from_value(cls, value: CurveValue) -> AffinePoint:
        "Return the affine point of a Finite value, raise ConversionError on INF."
        if isinstance(value, Infinity):
            logger.debug("rejected conversion of INF to affine")
            raise ConversionError("INF has no affine coordinates")
        return cls(value.x, value.y)

    def to_value(self) -> Finite:
        return Finite(self.x, self.y)

    def to_jacobian(self) -> JacobianPoint:
        # pylint: disable=import-outside-toplevel
        from ecpoints.jacobian import JacobianPoint

        return JacobianPoint.from_affine(self)

    def negate(self, ec: Curve) -> AffinePoint:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        return AffinePoint(self.x % ec.p, (ec.p - self.y) % ec.p)
