"""Screen-oriented terminal text editor engine."""

__all__ = [
    "actions",
    "buffer",
    "editor",
    "keymaps",
    "keys",
    "prompt",
    "render",
    "runtime",
    "search",
    "session",
    "terminal",
    "view",
]

__version__ = "0.1.0"
