"""TZX/CDT tape block builders and engine logic helpers for a CPC platform game."""

__version__ = "0.1.0"