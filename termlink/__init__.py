"""Terminal link detection and local path resolution."""

__version__ = "0.1.0"
