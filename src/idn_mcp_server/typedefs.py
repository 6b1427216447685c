"""Type definitions for the IDN MCP server.

This module provides the dataclasses and TypedDicts that describe the results
returned by the Punycode tools and the codec settings read from the
configuration file.
"""

from dataclasses import dataclass, field
from typing import Any, TypedDict


@dataclass
class ToolResult:
    """Stores the result of a Punycode tool operation."""

    success: bool
    output: str | list[str] | dict[str, Any] | list[dict[str, Any]] | None = None
    error: str | None = None
    details: dict[str, Any] = field(default_factory=dict)


class CodecOptions(TypedDict, total=False):
    """Keyword arguments forwarded to the domain driver.

    Attributes:
        utf16 (bool): Process labels as UTF-16 code units.
        accept_uppercase (bool): Accept ``A..Z`` digits on decode.
        ace_prefix_any_case (bool): Recognize ``XN--`` on decode.
        strict (bool): Propagate label errors instead of returning the
            partially converted domain.
    """

    utf16: bool
    accept_uppercase: bool
    ace_prefix_any_case: bool
    strict: bool


def codec_options_from_config(config: dict[str, Any]) -> CodecOptions:
    """Build codec options from the ``codec`` section of the configuration."""
    codec_cfg = config.get("codec") or {}
    return CodecOptions(
        utf16=bool(codec_cfg.get("utf16_code_units", False)),
        accept_uppercase=bool(codec_cfg.get("accept_uppercase", False)),
        ace_prefix_any_case=bool(codec_cfg.get("ace_prefix_any_case", False)),
        strict=bool(codec_cfg.get("strict", True)),
    )
