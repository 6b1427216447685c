"""Per-label Punycode conversion of whole domain names.

Labels are split on the ASCII full stop only. Labels made of basic code points
are never run through the codec, and only labels carrying the ``xn--`` prefix
are decoded.

By default errors propagate to the caller. Passing an ``on_error`` sink
switches to best-effort mode: the failing label and its error are reported to
the sink and the labels converted before it are returned, joined with
``.`` and without a trailing separator (``"www"`` rather than ``"www."``).
"""

from collections.abc import Callable

from idn_mcp_server.exceptions import PunycodeError
from idn_mcp_server.punycode.bootstring import ACE_PREFIX
from idn_mcp_server.punycode.codec import decode_label, encode_label

ErrorSink = Callable[[str, PunycodeError], None]

LABEL_SEPARATOR = "."


def _is_ascii(text: str) -> bool:
    return not any(ord(char) > 127 for char in text)


def has_ace_prefix(label: str, any_case: bool = False) -> bool:
    """Check whether ``label`` starts with the ``xn--`` ACE prefix."""
    prefix = label[: len(ACE_PREFIX)]
    if any_case:
        prefix = prefix.lower()
    return prefix == ACE_PREFIX


def encode_domain(domain: str, utf16: bool = False, on_error: ErrorSink | None = None) -> str:
    """Convert a Unicode domain name into its ASCII-compatible form.

    Args:
        domain: Domain name such as ``www.中文百度.com.cn``.
        utf16: Encode labels as UTF-16 code units (legacy behavior).
        on_error: Optional sink receiving ``(label, error)`` when a label
            fails to encode. When given, the labels converted so far are
            returned instead of raising.

    Returns:
        str: ASCII domain such as ``www.xn--fiq841b68em2s.com.cn``.

    Raises:
        PunycodeError: If a label cannot be encoded and no sink was given.
    """
    if _is_ascii(domain):
        return domain

    converted: list[str] = []
    for label in domain.split(LABEL_SEPARATOR):
        if _is_ascii(label):
            converted.append(label)
            continue
        try:
            converted.append(ACE_PREFIX + encode_label(label, utf16=utf16))
        except PunycodeError as e:
            if on_error is None:
                raise
            on_error(label, e)
            break
    return LABEL_SEPARATOR.join(converted)


def decode_domain(
    domain: str,
    utf16: bool = False,
    accept_uppercase: bool = False,
    ace_prefix_any_case: bool = False,
    on_error: ErrorSink | None = None,
) -> str:
    """Convert an ASCII-compatible domain name back into Unicode.

    Args:
        domain: Domain name such as ``www.xn--fiq841b68em2s.com.cn``.
        utf16: Decode labels as UTF-16 code units (legacy behavior).
        accept_uppercase: Accept ``A..Z`` in the encoded part of a label.
        ace_prefix_any_case: Recognize ``XN--`` and mixed-case variants of
            the ACE prefix.
        on_error: Optional sink receiving ``(label, error)`` when a label
            fails to decode. When given, the labels converted so far are
            returned instead of raising.

    Returns:
        str: Unicode domain such as ``www.中文百度.com.cn``.

    Raises:
        PunycodeError: If a label cannot be decoded and no sink was given.
    """
    converted: list[str] = []
    for label in domain.split(LABEL_SEPARATOR):
        if not has_ace_prefix(label, any_case=ace_prefix_any_case):
            converted.append(label)
            continue
        try:
            converted.append(
                decode_label(
                    label[len(ACE_PREFIX) :],
                    utf16=utf16,
                    accept_uppercase=accept_uppercase,
                )
            )
        except PunycodeError as e:
            if on_error is None:
                raise
            on_error(label, e)
            break
    return LABEL_SEPARATOR.join(converted)
