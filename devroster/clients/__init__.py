"""HTTP clients."""
from devroster.clients.developers_client import DevelopersClient

__all__ = ["DevelopersClient"]
