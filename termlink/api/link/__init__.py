"""Diagnostic link commands (scan text, resolve a single link)."""

from ._output_schemas import LinkResolveOutput, LinkScanOutput

__all__ = ["LinkResolveOutput", "LinkScanOutput"]
