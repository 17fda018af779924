#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecpoints developers
#
# This file is part of ecpoints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecpoints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the ecpoints package."

from ecpoints.affine import AffinePoint
from ecpoints.conversion import convert
from ecpoints.curve import Curve
from ecpoints.exceptions import (
    ConversionError,
    ECPointsTypeError,
    ECPointsValueError,
    ParseError,
)
from ecpoints.jacobian import INFJ, JacobianPoint
from ecpoints.value import INF, CurveValue, Finite, Infinity

name = "ecpoints"
__version__ = "2022.6.1"
__author__ = "The ecpoints developers"
__author_email__ = "devs@ecpoints.org"
__copyright__ = "Copyright (C) 2021-2022 The ecpoints developers"
__license__ = "MIT License"

__all__ = [
    "AffinePoint",
    "JacobianPoint",
    "INFJ",
    "Curve",
    "CurveValue",
    "Finite",
    "Infinity",
    "INF",
    "convert",
    "ConversionError",
    "ECPointsTypeError",
    "ECPointsValueError",
    "ParseError",
]
