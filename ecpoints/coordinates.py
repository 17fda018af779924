#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecpoints developers
#
# This file is part of ecpoints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecpoints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Coordinates abstract base class.

Any point representation (affine, Jacobian, etc.) is a Coordinates:
an immutable sequence of non-negative field elements
that can be copied, compared, and rendered as text
in decimal, lowercase hex, uppercase hex, and octal notation:

    f"{AffinePoint(255, 8):x}" is "AffinePoint(x: ff, y: 8)"
    AffinePoint(255, 8).octal() is "AffinePoint(x: 377, y: 10)"

Equality is the structural one of the concrete (data)class:
two points are equal if their coordinates are equal.
For Jacobian points, equality in the curve group is
JacobianPoint.equals, which needs the field prime.
"""

from abc import ABC, abstractmethod
from typing import Type, TypeVar

from ecpoints.alias import RawCoordinates
from ecpoints.exceptions import ECPointsValueError

_Coordinates = TypeVar("_Coordinates", bound="Coordinates")
_Target = TypeVar("_Target", bound="Coordinates")

# format spec -> format spec of the single coordinate
_FORMATS = {"": "d", "d": "d", "x": "x", "X": "X", "o": "o"}


class Coordinates(ABC):
    @abstractmethod
    def coordinates(self) -> RawCoordinates:
        "Return the tuple of the raw coordinates, e.g. (x, y, z)."

    def _check_coordinates(self) -> None:
        for label, value in zip("xyz", self.coordinates()):
            if not isinstance(value, int):
                raise ECPointsValueError(f"{label} is not an int: {value!r}")
            if value < 0:
                raise ECPointsValueError(f"negative {label}: {value}")

    def copy(self: _Coordinates) -> _Coordinates:
        return type(self)(*self.coordinates())

    def convert_into(self, target: Type[_Target], p: int) -> _Target:
        """Return the point converted into the target representation.

        p is the field prime used by conversions
        requiring a modular inverse.
        """
        # pylint: disable=import-outside-toplevel
        from ecpoints.conversion import convert

        return convert(self, target, p)

    def __format__(self, format_spec: str) -> str:
        if format_spec not in _FORMATS:
            raise ECPointsValueError(f"invalid format spec: {format_spec!r}")
        spec = _FORMATS[format_spec]
        coords = ", ".join(
            f"{label}: {value:{spec}}"
            for label, value in zip("xyz", self.coordinates())
        )
        return f"{type(self).__name__}({coords})"

    def __str__(self) -> str:
        return self.__format__("d")

    def hex(self) -> str:
        return self.__format__("x")

    def upper_hex(self) -> str:
        return self.__format__("X")

    def octal(self) -> str:
        return self.__format__("o")
