"""
IDN MCP Server - An MCP server converting internationalized domain names
to and from Punycode.
"""

from .exceptions import BadInput, Overflow, PunycodeError
from .punycode import decode_domain, decode_label, encode_domain, encode_label


def run_server() -> None:
    """Run the MCP server."""
    from .server import run_server as _run_server

    _run_server()


__all__ = [
    "BadInput",
    "Overflow",
    "PunycodeError",
    "decode_domain",
    "decode_label",
    "encode_domain",
    "encode_label",
    "run_server",
]
