"""Developer roster web application."""
from devroster.version import __version__

__all__ = ["__version__"]
