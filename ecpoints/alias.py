#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecpoints developers
#
# This file is part of ecpoints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecpoints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Tuple, Union

# hex-string or bytes representation of an int, as accepted by
# ecpoints.utils.int_from_integer, e.g.:
# 3735928559
# "0xdeadbeef"
# "deadbeef"
# b'\xde\xad\xbe\xef'
Integer = Union[bytes, str, int]

# Element of the prime field Fp.
# It is a plain non-negative int: there is no wrapper type and
# reduction mod p is performed by the arithmetic functions,
# not by the constructors.
FieldElement = int

# Raw coordinates of a point, as returned by Coordinates.coordinates()
# (x, y) for affine points, (x, y, z) for Jacobian points.
RawCoordinates = Tuple[int, ...]
