"""Count-driven search, region and text-object motions for editors."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "modes",
    "regions",
    "runtime",
    "search",
    "textobjects",
]

__version__ = "0.1.0"
