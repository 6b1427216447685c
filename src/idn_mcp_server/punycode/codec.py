"""Punycode label codec (RFC 3492).

Two layers live here. ``encode_code_points`` / ``decode_code_points`` run the
bootstring algorithm over integer code points, and ``encode_label`` /
``decode_label`` adapt Python strings to them. The string layer can also
operate on UTF-16 code units instead of code points, which reproduces the
output of encoders that treat characters above the BMP as two surrogate
halves.

All arithmetic that RFC 3492 guards is checked against ``MAXINT`` and raises
``Overflow`` instead of growing past the 32-bit range.
"""

from collections.abc import Sequence

from idn_mcp_server.exceptions import BadInput, Overflow
from idn_mcp_server.punycode.bootstring import (
    BASE,
    DELIMITER,
    INITIAL_BIAS,
    INITIAL_N,
    MAX_CODE_POINT,
    MAXINT,
    adapt,
    code_point_to_digit,
    digit_to_code_point,
    is_basic,
    threshold,
)

MAX_CODE_UNIT = 0xFFFF


def _generalized_integer(q: int, bias: int) -> list[str]:
    """Render ``q`` as a generalized variable-length integer."""
    digits = []
    k = BASE
    while True:
        t = threshold(k, bias)
        if q < t:
            digits.append(chr(digit_to_code_point(q)))
            return digits
        digits.append(chr(digit_to_code_point(t + (q - t) % (BASE - t))))
        q = (q - t) // (BASE - t)
        k += BASE


def encode_code_points(code_points: Sequence[int]) -> str:
    """Encode a sequence of code points into a Punycode string.

    The ``xn--`` prefix is not added.

    Args:
        code_points: Code points of a single label.

    Returns:
        str: ASCII string made of the basic code points, the delimiter (when
            there was at least one basic code point) and the encoded deltas.

    Raises:
        Overflow: If ``delta`` would exceed ``MAXINT``.
    """
    n = INITIAL_N
    delta = 0
    bias = INITIAL_BIAS

    output = [chr(c) for c in code_points if is_basic(c)]
    b = len(output)
    if b > 0:
        output.append(DELIMITER)

    h = b
    while h < len(code_points):
        # Every code point below n is already handled, so a candidate exists.
        m = min(c for c in code_points if c >= n)

        if m - n > (MAXINT - delta) // (h + 1):
            raise Overflow(f"delta overflow inserting U+{m:04X}")
        delta += (m - n) * (h + 1)
        n = m

        for c in code_points:
            if c < n:
                delta += 1
                if delta > MAXINT:
                    raise Overflow(f"delta overflow inserting U+{n:04X}")
            elif c == n:
                output.extend(_generalized_integer(delta, bias))
                bias = adapt(delta, h + 1, h == b)
                delta = 0
                h += 1

        delta += 1
        n += 1

    return "".join(output)


def decode_code_points(
    text: str,
    accept_uppercase: bool = False,
    max_code_point: int = MAX_CODE_POINT,
) -> list[int]:
    """Decode a Punycode string (without ``xn--``) into code points.

    Args:
        text: The ASCII form of a single label.
        accept_uppercase: Fold ``A..Z`` digits to lowercase instead of
            rejecting them. The basic code points are never folded.
        max_code_point: Largest code point the decoder may produce.

    Returns:
        list[int]: The decoded code points.

    Raises:
        BadInput: On a non-basic code point before the delimiter, an invalid
            digit, a truncated generalized integer or a decoded code point
            above ``max_code_point``.
        Overflow: If ``i`` or ``n`` would exceed ``MAXINT``.
    """
    n = INITIAL_N
    i = 0
    bias = INITIAL_BIAS
    output: list[int] = []

    pos = text.rfind(DELIMITER)
    if pos > 0:
        for char in text[:pos]:
            if not is_basic(ord(char)):
                raise BadInput(f"non-basic code point {char!r} before delimiter")
            output.append(ord(char))
        pos += 1
    else:
        pos = 0

    while pos < len(text):
        oldi = i
        w = 1
        k = BASE
        while True:
            if pos == len(text):
                raise BadInput("truncated generalized integer")
            code_point = ord(text[pos])
            pos += 1
            if accept_uppercase and ord("A") <= code_point <= ord("Z"):
                code_point += 0x20
            digit = code_point_to_digit(code_point)

            if digit > (MAXINT - i) // w:
                raise Overflow("insertion index overflow")
            i += digit * w

            t = threshold(k, bias)
            if digit < t:
                break
            w *= BASE - t
            k += BASE

        length = len(output) + 1
        bias = adapt(i - oldi, length, oldi == 0)

        if i // length > MAXINT - n:
            raise Overflow("code point overflow")
        n += i // length
        i %= length

        if n > max_code_point:
            raise BadInput(f"decoded code point 0x{n:X} out of range")
        output.insert(i, n)
        i += 1

    return output


def _utf16_units(text: str) -> list[int]:
    data = text.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(data[j : j + 2], "little") for j in range(0, len(data), 2)]


def _from_utf16_units(units: Sequence[int]) -> str:
    data = b"".join(unit.to_bytes(2, "little") for unit in units)
    return data.decode("utf-16-le", "surrogatepass")


def encode_label(label: str, utf16: bool = False) -> str:
    """Encode a Unicode label into its Punycode form (no ``xn--`` prefix).

    >>> encode_label("mañana")
    'maana-pta'
    """
    if utf16:
        return encode_code_points(_utf16_units(label))
    return encode_code_points([ord(char) for char in label])


def decode_label(label: str, utf16: bool = False, accept_uppercase: bool = False) -> str:
    """Decode the Punycode form of a label (no ``xn--`` prefix).

    >>> decode_label("maana-pta")
    'mañana'
    """
    if utf16:
        units = decode_code_points(label, accept_uppercase, max_code_point=MAX_CODE_UNIT)
        return _from_utf16_units(units)
    return "".join(chr(c) for c in decode_code_points(label, accept_uppercase))
