"""Number-theory helpers and stdin/stdout solvers for classic contest problems."""

__version__ = "0.1.0"

__all__ = [
    "bombs",
    "brackets",
    "factorial",
    "ladder",
    "mail",
    "maze",
    "news",
    "numtheory",
]