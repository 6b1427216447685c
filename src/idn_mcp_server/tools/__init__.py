"""Tools related submodule to keep all things tool related in one place."""

from .converter import idna_compare_impl, punycode_decode_impl, punycode_encode_impl

__all__ = [
    "punycode_encode_impl",
    "punycode_decode_impl",
    "idna_compare_impl",
]
