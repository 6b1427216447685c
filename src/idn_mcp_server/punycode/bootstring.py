"""Bootstring primitives with the Punycode parameters of RFC 3492."""

from idn_mcp_server.exceptions import BadInput

BASE = 36
TMIN = 1
TMAX = 26
SKEW = 38
DAMP = 700
INITIAL_BIAS = 72
INITIAL_N = 128
DELIMITER = "-"

# Guarded arithmetic is checked against a signed 32-bit integer.
MAXINT = 0x7FFFFFFF
MAX_CODE_POINT = 0x10FFFF

ACE_PREFIX = "xn--"


def is_basic(code_point: int) -> bool:
    """Return True if ``code_point`` is a basic (ASCII) code point."""
    return code_point < 0x80


def digit_to_code_point(digit: int) -> int:
    """Map a digit value in ``[0, 35]`` to ``a..z`` / ``0..9``."""
    if 0 <= digit < 26:
        return digit + ord("a")
    if 26 <= digit < BASE:
        return digit - 26 + ord("0")
    raise BadInput(f"digit value {digit} out of range")


def code_point_to_digit(code_point: int) -> int:
    """Map ``0..9`` / ``a..z`` to its digit value.

    Uppercase letters are rejected; case folding is the decoder's decision.
    """
    if ord("0") <= code_point <= ord("9"):
        return code_point - ord("0") + 26
    if ord("a") <= code_point <= ord("z"):
        return code_point - ord("a")
    raise BadInput(f"invalid digit character {chr(code_point)!r}")


def threshold(k: int, bias: int) -> int:
    """Digit threshold ``t`` for position ``k`` of a generalized integer."""
    if k <= bias:
        return TMIN
    if k >= bias + TMAX:
        return TMAX
    return k - bias


def adapt(delta: int, numpoints: int, first_time: bool) -> int:
    """Bias adaptation function (RFC 3492 section 6.1)."""
    if first_time:
        delta = delta // DAMP
    else:
        delta = delta // 2

    delta = delta + delta // numpoints

    k = 0
    # ((BASE - TMIN) * TMAX) // 2 == 455
    while delta > ((BASE - TMIN) * TMAX) // 2:
        delta = delta // (BASE - TMIN)
        k = k + BASE

    return k + ((BASE - TMIN + 1) * delta) // (delta + SKEW)
