"""A container with six traversal orders, plus a small demonstration command."""

__version__ = "0.1.0"
__all__ = ["container", "demo"]