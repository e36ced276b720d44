"""
Domain layer - business entities for the developer roster.
"""

from .entities import SKILL_NAMES, Developer, Skills

__all__ = [
    "SKILL_NAMES",
    "Developer",
    "Skills",
]
