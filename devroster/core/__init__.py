"""Core interfaces shared across layers."""
from devroster.core.interfaces import IDeveloperRepository

__all__ = ["IDeveloperRepository"]
