"""Length-prefixed packet writing and reading with VarInts, fixed-width values and segments."""

__version__ = "0.1.0"
__all__ = ["cli", "readbuffer", "uuidpair", "writebuffer"]