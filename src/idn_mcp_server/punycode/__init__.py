"""Punycode (RFC 3492) codec and IDN domain driver."""

from .bootstring import ACE_PREFIX
from .codec import decode_code_points, decode_label, encode_code_points, encode_label
from .domain import decode_domain, encode_domain, has_ace_prefix

__all__ = [
    "ACE_PREFIX",
    "encode_code_points",
    "decode_code_points",
    "encode_label",
    "decode_label",
    "encode_domain",
    "decode_domain",
    "has_ace_prefix",
]
