"""
Tool Mixin classes for IDNMCPServer to separate concerns.
"""

from typing import Any

from fastmcp import Context

from idn_mcp_server.tools import idna_compare_impl, punycode_decode_impl, punycode_encode_impl
from idn_mcp_server.typedefs import CodecOptions, ToolResult


class ToolRegistrationMixin:
    """Mixin for registering Punycode tools with the MCP server.

    Note: This mixin assumes the class has 'server' (FastMCP), 'config' (dict)
    and 'codec_options' attributes available when register_tools() is called.
    """

    # Type hints for attributes provided by the host class
    server: Any  # FastMCP instance
    config: dict[str, Any]  # Configuration dictionary
    codec_options: CodecOptions

    def register_tools(self) -> None:
        """Register all Punycode tools with the MCP server."""

        @self.server.tool(
            name="punycode_encode",
            description=(
                "Use this tool to convert an internationalized (Unicode) domain "
                "name into its ASCII-compatible punycode form (xn-- labels)"
            ),
            tags=set(("idn", "punycode", "encode", "converter")),
            enabled=True,
        )
        async def punycode_encode(domain: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Encoding `{domain}` to punycode.")
            return await self.punycode_encode_tool_impl(domain.strip())

        @self.server.tool(
            name="punycode_decode",
            description=(
                "Use this tool to convert a punycode domain name (xn-- labels) "
                "back into its internationalized Unicode form"
            ),
            tags=set(("idn", "punycode", "decode", "converter")),
            enabled=True,
        )
        async def punycode_decode(domain: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Decoding punycode domain `{domain}`.")
            return await self.punycode_decode_tool_impl(domain.strip())

        @self.server.tool(
            name="punycode_idna_compare",
            description=(
                "Compare the punycode form of a domain with the IDNA 2008 "
                "(UTS #46) encoding produced by the idna library"
            ),
            tags=set(("idn", "punycode", "idna", "compare")),
            enabled=self.config.get("features", {}).get("idna_comparison", True),
        )
        async def punycode_idna_compare(domain: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Comparing punycode and IDNA encodings of `{domain}`.")
            return await idna_compare_impl(
                domain.strip(), utf16=self.codec_options.get("utf16", False)
            )

    async def punycode_encode_tool_impl(self, domain: str) -> ToolResult:
        """Encode ``domain`` with the configured codec options."""
        return await punycode_encode_impl(
            domain,
            utf16=self.codec_options.get("utf16", False),
            strict=self.codec_options.get("strict", True),
        )

    async def punycode_decode_tool_impl(self, domain: str) -> ToolResult:
        """Decode ``domain`` with the configured codec options."""
        return await punycode_decode_impl(
            domain,
            utf16=self.codec_options.get("utf16", False),
            accept_uppercase=self.codec_options.get("accept_uppercase", False),
            ace_prefix_any_case=self.codec_options.get("ace_prefix_any_case", False),
            strict=self.codec_options.get("strict", True),
        )
