"""Link handler: wires patterns, registry, and resolver for a terminal session."""

from .EditorHost import EditorHost
from .HoverTooltip import HoverTooltip
from .LinkHandler import LinkHandler
from .TooltipSurface import TooltipSurface
from .wrap_link_handler import wrap_link_handler

__all__ = ["EditorHost", "HoverTooltip", "LinkHandler", "TooltipSurface", "wrap_link_handler"]
