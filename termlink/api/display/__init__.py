"""Display implementations."""

from .CLIDisplay import CLIDisplay

__all__ = ["CLIDisplay"]
