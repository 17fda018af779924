#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecpoints developers
#
# This file is part of ecpoints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecpoints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Curve-level values.

A CurveValue is either a Finite point, with its (x, y) affine
coordinates, or the point at Infinity, which has no coordinates at all.
This is the type to be exchanged with code using this package
(curve parameter management, signature schemes, etc.):
unlike the coordinate representations, it does not rely on any
sentinel coordinate value to express the point at infinity.
"""

from dataclasses import dataclass
from typing import Union

from ecpoints.exceptions import ECPointsValueError


@dataclass(frozen=True)
class Finite:
    x: int
    y: int

    def __post_init__(self) -> None:
        for coord in ("x", "y"):
            value = getattr(self, coord)
            if not isinstance(value, int):
                raise ECPointsValueError(f"{coord} is not an int: {value!r}")
            if value < 0:
                raise ECPointsValueError(f"negative {coord}: {value}")


@dataclass(frozen=True)
class Infinity:
    "The point at infinity, i.e. the identity element of the curve group."

    def __str__(self) -> str:
        return "INF"


INF = Infinity()

CurveValue = Union[Finite, Infinity]


def is_infinity(value: CurveValue) -> bool:
    return isinstance(value, Infinity)
