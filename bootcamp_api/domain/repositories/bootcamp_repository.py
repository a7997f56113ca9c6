from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Tuple
from ..models.bootcamp import Bootcamp


# (field, direction) pairs; direction is 1 for ascending, -1 for descending
SortSpec = Sequence[Tuple[str, int]]


class BootcampRepository(ABC):
    """Repository interface - defines contract for bootcamp data access"""

    @abstractmethod
    async def find_by_id(self, bootcamp_id: str) -> Optional[Bootcamp]:
        """Find bootcamp by ID"""
        pass

    @abstractmethod
    async def find_by_owner(self, user_id: str) -> Optional[Bootcamp]:
        """Find the first bootcamp published by a user"""
        pass

    @abstractmethod
    async def find_many(
        self,
        filters: Dict[str, Any],
        sort: SortSpec = (),
        skip: int = 0,
        limit: int = 0,
    ) -> List[Bootcamp]:
        """Find bootcamps matching a filter document"""
        pass

    @abstractmethod
    async def count(self, filters: Dict[str, Any]) -> int:
        """Count bootcamps matching a filter document"""
        pass

    @abstractmethod
    async def find_within_radius(
        self,
        longitude: float,
        latitude: float,
        radius: float,
    ) -> List[Bootcamp]:
        """Find bootcamps located inside a sphere cap (radius in radians)"""
        pass

    @abstractmethod
    async def save(self, bootcamp: Bootcamp) -> Bootcamp:
        """Save bootcamp (create or update)"""
        pass

    @abstractmethod
    async def update_fields(self, bootcamp_id: str, fields: Dict[str, Any]) -> Optional[Bootcamp]:
        """Set the given fields on a bootcamp and return the updated record"""
        pass

    @abstractmethod
    async def delete(self, bootcamp_id: str) -> bool:
        """Delete bootcamp; returns False if nothing was deleted"""
        pass
