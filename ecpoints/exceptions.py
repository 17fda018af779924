#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecpoints developers
#
# This file is part of ecpoints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecpoints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by ecpoints from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError and TypeError from which the ecpoints versions are derived.
"""


class ECPointsValueError(ValueError):
    pass


class ECPointsTypeError(TypeError):
    pass


class ParseError(ECPointsValueError):
    "An integer string is not valid in the requested radix."


class ConversionError(ECPointsValueError):
    "The requested conversion has no valid target value."
