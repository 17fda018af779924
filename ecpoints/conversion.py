#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecpoints developers
#
# This file is part of ecpoints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecpoints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Conversions between coordinate representations.

Conversions are collected in an explicit table,
one function for each (source, target) pair of representations:
nothing is derived automatically, so that it is always clear
which function is used and which field prime it receives
(e.g. for the modular inverse of the Jacobian to affine conversion).

    QJ = convert(Q, JacobianPoint, ec.p)
    Q = convert(QJ, AffinePoint, ec.p)

Each representation also provides the ToAffine/ToJacobian methods
(to_affine(p), to_jacobian()) used by the table entries,
and Coordinates.convert_into(target, p) as the method counterpart
of convert.
"""

import logging
from typing import Any, Callable, Dict, List, Tuple, Type, TypeVar

from ecpoints.affine import AffinePoint
from ecpoints.coordinates import Coordinates
from ecpoints.exceptions import ECPointsTypeError
from ecpoints.jacobian import JacobianPoint

logger = logging.getLogger(__name__)

_Target = TypeVar("_Target", bound=Coordinates)

Converter = Callable[[Any, int], Any]

_CONVERTERS: Dict[Tuple[type, type], Converter] = {}


def register(source: type, target: type) -> Callable[[Converter], Converter]:
    "Decorator registering the function converting source into target."

    def decorator(func: Converter) -> Converter:
        if (source, target) in _CONVERTERS:
            err_msg = "conversion already registered: "
            err_msg += f"{source.__name__} -> {target.__name__}"
            raise ECPointsTypeError(err_msg)
        _CONVERTERS[(source, target)] = func
        return func

    return decorator


def registered_pairs() -> List[Tuple[type, type]]:
    return list(_CONVERTERS)


def convert(point: Coordinates, target: Type[_Target], p: int) -> _Target:
    """Return the point converted into the target representation.

    p is the field prime, required by the conversions
    computing a modular inverse.
    ECPointsTypeError is raised if the conversion is not available,
    ConversionError if the point has no target representation
    (e.g. INF has no affine coordinates).
    """

    key = (type(point), target)
    if key not in _CONVERTERS:
        err_msg = "no conversion available: "
        err_msg += f"{type(point).__name__} -> {getattr(target, '__name__', target)}"
        raise ECPointsTypeError(err_msg)
    logger.debug("converting %s -> %s", key[0].__name__, key[1].__name__)
    return _CONVERTERS[key](point, p)


def _copy(point: Coordinates, _p: int) -> Coordinates:
    return point.copy()


# self-conversions
register(AffinePoint, AffinePoint)(_copy)
register(JacobianPoint, JacobianPoint)(_copy)


@register(AffinePoint, JacobianPoint)
def _jacobian_from_affine(point: AffinePoint, _p: int) -> JacobianPoint:
    return point.to_jacobian()


@register(JacobianPoint, AffinePoint)
def _affine_from_jacobian(point: JacobianPoint, p: int) -> AffinePoint:
    return point.to_affine(p)
