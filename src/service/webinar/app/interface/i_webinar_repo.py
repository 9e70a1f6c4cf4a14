"""
Webinar Repository Interface

Storage-agnostic contract used by the webinar use cases. Implementations:
- WebinarRepoImpl: SQLAlchemy (PostgreSQL / SQLite)
- InMemoryWebinarRepoImpl: process memory, for tests
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.service.webinar.domain.entity.webinar_entity import Webinar


class IWebinarRepo(ABC):
    @abstractmethod
    async def find_by_id(self, webinar_id: str) -> Optional[Webinar]:
        """Return the webinar, or None when no webinar has this id."""
        pass

    @abstractmethod
    async def create(self, webinar: Webinar) -> None:
        pass

    @abstractmethod
    async def update(self, webinar: Webinar) -> None:
        """Overwrite every stored field of the webinar with the same id, atomically."""
        pass
