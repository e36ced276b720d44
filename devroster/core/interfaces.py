"""
Core interfaces for the developer roster.

Repositories speak in domain entities (devroster/domain/entities.py); the ORM
model never leaves the repository.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from devroster.domain.entities import Developer


class IDeveloperRepository(ABC):
    """
    Interface for developer storage and retrieval.

    Implementations are plain passthroughs to the store: no validation
    beyond what the store itself enforces.
    """

    @abstractmethod
    async def find_many(self) -> List['Developer']:
        """Get all developers (oldest first)"""
        pass

    @abstractmethod
    async def find_unique(self, developer_id: str) -> Optional['Developer']:
        """
        Get developer by ID.

        Returns:
            Developer if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, developer: 'Developer') -> 'Developer':
        """
        Persist a new developer.

        Args:
            developer: Developer entity with id already assigned

        Returns:
            Stored developer
        """
        pass

    @abstractmethod
    async def update(self, developer_id: str, fields: Dict[str, Any]) -> Optional['Developer']:
        """
        Replace the given columns of an existing developer.

        Args:
            developer_id: Developer to update
            fields: Column name -> new value (skills as a complete dict)

        Returns:
            Updated developer, or None if no developer has this ID
        """
        pass
