"""Base64 encoding and decoding (codec), with a small tkinter window (app)."""

__version__ = "0.1.0"
__all__ = ["codec", "app"]