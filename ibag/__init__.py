"""Thread-safe shared bags and thread-confined cells."""

__version__ = "0.3.4"
__all__ = ["bag", "cell", "errors"]