#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecpoints developers
#
# This file is part of ecpoints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecpoints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Assorted conversion utilities.

Integers enter ecpoints either as positional-radix strings
(see int_from_str_radix) or, for curve parameters,
as any of the representations accepted by int_from_integer.
"""

from string import ascii_lowercase, digits

from ecpoints.alias import Integer
from ecpoints.exceptions import ECPointsValueError, ParseError

# values above this threshold are rendered as hex-strings in error messages
HEX_THRESHOLD = 0xFFFFFFFF

_DIGITS = digits + ascii_lowercase


def int_from_str_radix(a_str: str, radix: int) -> int:
    """Return the non-negative int represented by a_str in the given radix.

    Standard positional-radix parsing, case-insensitive for radix > 10.
    Unlike the int builtin, neither sign, nor radix prefix
    (e.g. "0x" for radix 16), nor whitespace, nor underscore
    are accepted: the radix is explicit and the string
    must contain nothing but digits valid in that radix.
    """

    if not isinstance(radix, int) or not 2 <= radix <= 36:
        raise ParseError(f"invalid radix: {radix}")
    if not isinstance(a_str, str):
        raise ParseError(f"not a string: {a_str!r}")
    if not a_str:
        raise ParseError("empty string")

    # no case folding: some non-ASCII characters lower into ASCII digits
    valid = _DIGITS[:radix] + _DIGITS[10:radix].upper()
    for c in a_str:
        if c not in valid:
            raise ParseError(f"invalid digit {c!r} in radix {radix}: {a_str!r}")
    return int(a_str, radix)


def int_from_integer(i: Integer) -> int:
    """Return an int from many possible integer representations.

    Allowed integer representations are:

    * 3735928559
    * -3735928559
    * "0xdeadbeef"
    * "-0xdeadbeef"
    * "deadbeef"
    * b'\\xde\\xad\\xbe\\xef'

    The binary representation is not allowed because there is no way to
    discriminate it from a valid hex-string
    (e.g. "0b11011110101011011011111011101111").
    """

    if isinstance(i, int):
        return i

    if isinstance(i, str):
        i = i.strip().lower()
        if i.startswith("0x") or i.startswith("-0x"):
            return int(i, 16)
        i = bytes.fromhex(i)

    # must be bytes
    return int.from_bytes(i, "big", signed=False)


def hex_string(i: Integer) -> str:
    """Return a hex-string from many positive integer representations.

    Negative integers are not allowed.

    The resulting hex-string has an even number of hex-digits and
    includes a space every four bytes (i.e. every eight hex-digits).
    """

    int_ = int_from_integer(i)
    if int_ < 0:
        raise ECPointsValueError(f"negative integer: {int_}")
    a_str = hex(int_)[2:]
    if len(a_str) % 2 != 0:
        a_str = "0" + a_str

    indx = list(reversed(range(len(a_str), 0, -8)))
    lresult = [(a_str[max(0, i - 8) : i]) for i in indx]
    result = " ".join(lresult)
    return result.upper()


def str_from_int(i: int) -> str:
    "Return the decimal representation of i, or the quoted hex-string if large."
    return f"'{hex_string(i)}'" if i > HEX_THRESHOLD else f"{i}"
