"""
IDN MCP Server - An MCP server for converting internationalized domain names
to and from Punycode.
"""

import asyncio
import sys

import yaml
from fastmcp import FastMCP
from fastmcp.utilities.logging import get_logger

from idn_mcp_server.resource_mixins import ResourceRegistrationMixin
from idn_mcp_server.server_mixins import ServerLifecycleMixin
from idn_mcp_server.tool_mixins import ToolRegistrationMixin
from idn_mcp_server.typedefs import codec_options_from_config

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = "config/config.yaml"


class IDNMCPServer(
    ToolRegistrationMixin,
    ResourceRegistrationMixin,
    ServerLifecycleMixin,
):
    """MCP Server implementation for Punycode conversions.

    Uses mixin classes to separate concerns:
    - ToolRegistrationMixin: Registers the encode/decode/compare tools
    - ResourceRegistrationMixin: Registers codec parameter resources
    - ServerLifecycleMixin: Manages server startup/shutdown and signals
    """

    def __init__(self, config_path: str = DEFAULT_CONFIG_PATH) -> None:
        """Initialize the IDN MCP server.

        Args:
            config_path: Path to the configuration file.
                Defaults to "config/config.yaml"
        """
        self.config_path = config_path
        self.server = FastMCP(
            name="IDN Punycode MCP Server",
            instructions=(
                "An MCP server that converts internationalized domain names "
                "to and from their punycode (xn--) representation."
            ),
        )
        self.logger = get_logger(__name__)
        self.config = self._load_config()
        self.codec_options = codec_options_from_config(self.config)
        self.logger.debug("Codec options: %s", self.codec_options)

        # These must be called after self.server and self.codec_options are initialized
        self.register_tools()
        self.register_codec_resources()

    def _load_config(self) -> dict:
        """Load the YAML configuration, falling back to an empty dict."""
        try:
            with open(self.config_path, encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except FileNotFoundError:
            self.logger.info("Config file %s not found, using default settings", self.config_path)
            return {}
        except (yaml.YAMLError, OSError) as e:
            self.logger.error("Error loading config: %s", e)
            return {}
        if not isinstance(config, dict):
            self.logger.warning("Config file %s is not a mapping, ignoring it", self.config_path)
            return {}
        return config

    @property
    def host(self) -> str:
        return (self.config.get("server") or {}).get("host", "0.0.0.0")

    @property
    def port(self) -> int:
        return int((self.config.get("server") or {}).get("port", 3000))


async def main(config_path: str = DEFAULT_CONFIG_PATH) -> None:
    """Main entry point for the IDN MCP server."""
    server = IDNMCPServer(config_path)
    try:
        await server.start()
    except (OSError, RuntimeError) as e:
        logger.error("Unexpected error: %s", e)
        sys.exit(1)


def run_server() -> None:
    """Run the server until it is interrupted."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Interrupted")


if __name__ == "__main__":
    run_server()
