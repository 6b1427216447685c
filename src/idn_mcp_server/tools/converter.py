"""Punycode conversion tools exposed by the MCP server."""

import idna
from fastmcp.utilities.logging import get_logger

from idn_mcp_server.exceptions import PunycodeError, handle_codec_error
from idn_mcp_server.punycode import decode_domain, encode_domain
from idn_mcp_server.typedefs import ToolResult

logger = get_logger(__name__)


class _LabelErrorCollector:
    """Error sink recording the failed label for best-effort conversions."""

    def __init__(self) -> None:
        self.label: str | None = None
        self.error: PunycodeError | None = None

    def __call__(self, label: str, error: PunycodeError) -> None:
        logger.warning("Failed to convert label %r: %s", label, error)
        self.label = label
        self.error = error

    def annotate(self, result: ToolResult) -> ToolResult:
        """Mark ``result`` as partial when a label failed."""
        if self.error is not None:
            result.error = handle_codec_error(self.error)
            result.details.update({"partial": True, "failed_label": self.label})
        return result


async def punycode_encode_impl(
    domain: str,
    utf16: bool = False,
    strict: bool = True,
) -> ToolResult:
    """Convert a Unicode IDN domain name into punycode ASCII format.

    Args:
        domain (str): The domain name to convert to punycode.
        utf16 (bool): Encode labels as UTF-16 code units.
        strict (bool): Fail on the first bad label instead of returning the
            labels converted so far.

    Returns:
        ToolResult: Punycode domain name or error details.
    """
    sink = None if strict else _LabelErrorCollector()
    try:
        punycode = encode_domain(domain, utf16=utf16, on_error=sink)
    except PunycodeError as e:
        logger.error("Punycode encoding of %r failed: %s", domain, e)
        return ToolResult(success=False, error=handle_codec_error(e), details={"domain": domain})
    result = ToolResult(success=True, output={"domain": domain, "punycode": punycode})
    return sink.annotate(result) if sink is not None else result


async def punycode_decode_impl(
    domain: str,
    utf16: bool = False,
    accept_uppercase: bool = False,
    ace_prefix_any_case: bool = False,
    strict: bool = True,
) -> ToolResult:
    """Convert a punycode ASCII domain name back into its Unicode form.

    Args:
        domain (str): The punycode domain name, e.g. ``xn--maana-pta.example``.
        utf16 (bool): Decode labels as UTF-16 code units.
        accept_uppercase (bool): Accept uppercase digits in encoded labels.
        ace_prefix_any_case (bool): Recognize ``XN--`` as the ACE prefix.
        strict (bool): Fail on the first bad label instead of returning the
            labels converted so far.

    Returns:
        ToolResult: Unicode domain name or error details.
    """
    sink = None if strict else _LabelErrorCollector()
    try:
        unicode_domain = decode_domain(
            domain,
            utf16=utf16,
            accept_uppercase=accept_uppercase,
            ace_prefix_any_case=ace_prefix_any_case,
            on_error=sink,
        )
    except PunycodeError as e:
        logger.error("Punycode decoding of %r failed: %s", domain, e)
        return ToolResult(success=False, error=handle_codec_error(e), details={"punycode": domain})
    result = ToolResult(success=True, output={"punycode": domain, "domain": unicode_domain})
    return sink.annotate(result) if sink is not None else result


async def idna_compare_impl(domain: str, utf16: bool = False) -> ToolResult:
    """Compare this codec's output with the IDNA 2008 encoding of ``idna``.

    The ``idna`` package applies UTS #46 mapping and IDNA validity rules that
    the plain Punycode codec does not, so the two may legitimately differ
    (for example on uppercase or disallowed characters).

    Args:
        domain (str): The Unicode domain name to compare.
        utf16 (bool): Encode labels as UTF-16 code units.

    Returns:
        ToolResult: Both encodings and whether they match.
    """
    try:
        punycode = encode_domain(domain, utf16=utf16)
    except PunycodeError as e:
        return ToolResult(success=False, error=handle_codec_error(e), details={"domain": domain})

    idna_error = None
    try:
        idna_encoded: str | None = idna.encode(domain, uts46=True).decode("ascii")
    except idna.IDNAError as e:
        logger.info("idna rejected %r: %s", domain, e)
        idna_encoded = None
        idna_error = f"Invalid IDN encoding: {str(e)}"

    return ToolResult(
        success=True,
        output={
            "domain": domain,
            "punycode": punycode,
            "idna2008": idna_encoded,
            "match": idna_encoded is not None and idna_encoded == punycode,
        },
        error=idna_error,
    )
