"""Fixed-capacity containers, an arena, a buffer reader, text helpers and file helpers."""

__version__ = "0.1.0"
__all__ = ["arena", "containers", "platform", "reader", "text"]