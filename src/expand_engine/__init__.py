"""UI-agnostic expand/contract region selection engine."""

__all__ = [
    "adapters",
    "buffer",
    "generators",
    "navigation",
    "parsers",
    "runtime",
    "syntax",
    "spans",
    "config",
]

__version__ = "0.1.0"
