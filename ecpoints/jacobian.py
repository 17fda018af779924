#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecpoints developers
#
# This file is part of ecpoints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecpoints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Jacobian coordinates and the elliptic curve group law.

A Jacobian point (x, y, z) represents the affine point (x/z^2, y/z^3):
the group law can then be computed without any field inversion,
the single inversion being postponed to the final conversion
back to affine coordinates.

Any point with z = 0 (mod p) is the point at infinity INF
(i.e. the identity element of the group):
INFJ = (0, 0, 0) is the canonical one.
This z = 0 sentinel is internal to the group law algorithms:
to cross the package boundary INF must be converted into
ecpoints.value.INF, see JacobianPoint.to_value.

Group law operations take the curve as explicit argument,
as points do not carry any curve-specific constant.
Input points are assumed to be on the curve;
results are reduced mod p.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ecpoints.affine import AffinePoint
from ecpoints.alias import RawCoordinates
from ecpoints.coordinates import Coordinates
from ecpoints.exceptions import ECPointsValueError
from ecpoints.utils import int_from_str_radix
from ecpoints.value import INF, CurveValue, Infinity

if TYPE_CHECKING:  # pragma: no cover
    from ecpoints.curve import Curve


@dataclass(frozen=True)
class JacobianPoint(Coordinates):
    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        self._check_coordinates()

    def coordinates(self) -> RawCoordinates:
        return self.x, self.y, self.z

    @classmethod
    def parse(cls, x_str: str, y_str: str, z_str: str, radix: int) -> JacobianPoint:
        """Return the point from the strings of its coordinates.

        ParseError is raised if any of the strings
        is not a valid integer in the given radix.
        """
        return cls(
            int_from_str_radix(x_str, radix),
            int_from_str_radix(y_str, radix),
            int_from_str_radix(z_str, radix),
        )

    @classmethod
    def identity(cls) -> JacobianPoint:
        "Return INFJ, the canonical Jacobian point at infinity."
        return INFJ

    @property
    def is_identity(self) -> bool:
        """Return True if z is zero.

        This only recognizes reduced points:
        use is_identity_mod(p) for points that may have z = k*p.
        """
        return self.z == 0

    def is_identity_mod(self, p: int) -> bool:
        "Return True if the point is INF in the field of prime p."
        if p < 2:
            raise ECPointsValueError(f"invalid modulus: {p}")
        return self.z % p == 0

    @classmethod
    def from_affine(cls, Q: AffinePoint) -> JacobianPoint:
        # z = 1, as z = 0 would be INF
        return cls(Q.x, Q.y, 1)

    @classmethod
    def from_value(cls, value: CurveValue) -> JacobianPoint:
        if isinstance(value, Infinity):
            return INFJ
        return cls(value.x, value.y, 1)

    def to_affine(self, p: int) -> AffinePoint:
        """Return the affine point, using the field prime p.

        ConversionError is raised for the point at infinity.
        """
        return AffinePoint.from_jacobian(self, p)

    def to_value(self, p: int) -> CurveValue:
        """Return the curve value, using the field prime p.

        The conversion goes through affine coordinates,
        but the point at infinity is INF instead of an error.
        """
        if self.is_identity_mod(p):
            return INF
        return self.to_affine(p).to_value()

    def equals(self, other: JacobianPoint, p: int) -> bool:
        """Return True if the points are equal in the curve group.

        Different Jacobian coordinates may represent the same point:
        both points are reduced to curve values using
        the field prime p, which must be the one of their curve.
        """
        return self.to_value(p) == other.to_value(p)

    def negate(self, ec: Curve) -> JacobianPoint:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        # % ec.p is required to account for INF (i.e. y == 0)
        return JacobianPoint(self.x % ec.p, (ec.p - self.y) % ec.p, self.z % ec.p)

    def double(self, ec: Curve) -> JacobianPoint:
        p = ec.p
        if self.is_identity_mod(p):
            return INFJ
        # 2-torsion point: its tangent is vertical
        if self.y % p == 0:
            return INFJ

        Y2 = self.y * self.y
        Z2 = self.z * self.z
        S = 4 * self.x * Y2
        M = 3 * self.x * self.x + ec.a * Z2 * Z2
        X = (M * M - 2 * S) % p
        Y = (M * (S - X) - 8 * Y2 * Y2) % p
        Z = 2 * self.y * self.z % p
        return JacobianPoint(X, Y, Z)

    def add(self, other: JacobianPoint, ec: Curve) -> JacobianPoint:
        p = ec.p
        if self.is_identity_mod(p):
            if other.is_identity_mod(p):
                return INFJ
            return JacobianPoint(other.x % p, other.y % p, other.z % p)
        if other.is_identity_mod(p):
            return JacobianPoint(self.x % p, self.y % p, self.z % p)

        Z1_2 = self.z * self.z
        Z2_2 = other.z * other.z
        U1 = self.x * Z2_2 % p
        U2 = other.x * Z1_2 % p
        S1 = self.y * Z2_2 * other.z % p
        S2 = other.y * Z1_2 * self.z % p

        if U1 == U2:  # same affine x
            if S1 != S2:  # opposite points
                return INFJ
            return self.double(ec)

        H = U2 - U1
        R = S2 - S1
        H2 = H * H
        H3 = H2 * H
        U1H2 = U1 * H2
        X = (R * R - H3 - 2 * U1H2) % p
        Y = (R * (U1H2 - X) - S1 * H3) % p
        Z = H * self.z * other.z % p
        return JacobianPoint(X, Y, Z)

    def subtract(self, other: JacobianPoint, ec: Curve) -> JacobianPoint:
        return self.add(other.negate(ec), ec)


INFJ = JacobianPoint(0, 0, 0)
