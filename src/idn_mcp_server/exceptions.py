"""Exception types and error processing for Punycode conversions.

This module provides the exception hierarchy raised by the Punycode codec and
the domain driver, together with a helper that turns those exceptions into
user-friendly messages for the tools exposed by the MCP server.

The exceptions derive from dnspython's ``DNSException`` so callers that already
handle DNS errors can catch conversion failures the same way. Each concrete
error also derives from the matching built-in exception (``OverflowError`` or
``ValueError``) for callers that do not depend on dnspython.
"""

import dns.exception


class PunycodeError(dns.exception.DNSException):
    """Punycode conversion failed."""


class Overflow(PunycodeError, OverflowError):
    """Overflow."""


class BadInput(PunycodeError, ValueError):
    """Bad input."""


def handle_codec_error(error: Exception) -> str:
    """Convert codec-related exceptions to descriptive error messages."""
    err_str = f"Unexpected error: {str(error)}"
    if isinstance(error, Overflow):
        err_str = f"Punycode arithmetic overflow: {str(error)}"
    elif isinstance(error, BadInput):
        err_str = f"Invalid Punycode input: {str(error)}"
    elif isinstance(error, PunycodeError):
        err_str = f"Punycode error: {str(error)}"
    elif isinstance(error, UnicodeError):
        err_str = f"Unicode error: {str(error)}"
    return err_str
