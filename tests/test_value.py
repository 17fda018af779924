#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecpoints developers
#
# This file is part of ecpoints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecpoints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecpoints.value` module."

from dataclasses import FrozenInstanceError

import pytest

from ecpoints.exceptions import ECPointsValueError
from ecpoints.value import INF, Finite, Infinity, is_infinity


def test_finite() -> None:
    value = Finite(1, 2)
    assert value == Finite(1, 2)
    assert value != Finite(2, 1)
    assert value != INF
    assert not is_infinity(value)
    assert hash(value) == hash(Finite(1, 2))

    with pytest.raises(FrozenInstanceError):
        value.x = 3  # type: ignore

    with pytest.raises(ECPointsValueError, match="negative x: -1"):
        Finite(-1, 2)

    with pytest.raises(ECPointsValueError, match="negative y: -2"):
        Finite(1, -2)

    with pytest.raises(ECPointsValueError, match="y is not an int: "):
        Finite(1, "2")  # type: ignore


def test_infinity() -> None:
    assert INF == Infinity()
    assert is_infinity(INF)
    assert is_infinity(Infinity())
    assert str(INF) == "INF"
    assert hash(INF) == hash(Infinity())
    assert INF != Finite(0, 0)
