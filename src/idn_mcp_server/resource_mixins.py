"""Mixin classes for IDNMCPServer to separate concerns and improve maintainability."""

from typing import Any

from idn_mcp_server.punycode import bootstring
from idn_mcp_server.typedefs import CodecOptions


class ResourceRegistrationMixin:
    """Mixin for registering resources with the MCP server.

    Note: This mixin assumes the class has 'server' (FastMCP) and
    'codec_options' attributes available when registration methods are called.
    """

    # Type hints for attributes provided by the host class
    server: Any  # FastMCP instance
    codec_options: CodecOptions

    def register_codec_resources(self) -> None:
        """Register Punycode codec resources such as the bootstring parameters."""

        @self.server.resource(
            uri="resource://bootstring_parameters",
            name="bootstring_parameters",
            description="The RFC 3492 bootstring parameters used by the Punycode codec.",
        )
        async def get_bootstring_parameters() -> dict[str, Any]:
            return await self._get_bootstring_parameters_impl()

        @self.server.resource(
            uri="resource://codec_settings",
            name="codec_settings",
            description="The codec options this server applies to every conversion.",
        )
        async def get_codec_settings() -> dict[str, Any]:
            return await self._get_codec_settings_impl()

    async def _get_bootstring_parameters_impl(self) -> dict[str, Any]:
        """Implementation to list the bootstring parameters."""
        return {
            "base": bootstring.BASE,
            "tmin": bootstring.TMIN,
            "tmax": bootstring.TMAX,
            "skew": bootstring.SKEW,
            "damp": bootstring.DAMP,
            "initial_bias": bootstring.INITIAL_BIAS,
            "initial_n": bootstring.INITIAL_N,
            "delimiter": bootstring.DELIMITER,
            "ace_prefix": bootstring.ACE_PREFIX,
        }

    async def _get_codec_settings_impl(self) -> dict[str, Any]:
        """Implementation to report the active codec options."""
        return dict(self.codec_options)
