"""Hotel service - hotel records."""

from abc import ABC, abstractmethod
from typing import List, Optional

from loguru import logger

from db.models import Hotel, HotelInput
from services.hotels import repo


def _validate(data: HotelInput) -> None:
    if not data.name or not data.name.strip():
        raise ValueError("Hotel name is required")


class IService(ABC):
    """Hotel Service - Manage hotel records."""

    @abstractmethod
    async def list_hotels(self) -> List[Hotel]:
        pass

    @abstractmethod
    async def get_hotel(self, hotel_id: int) -> Optional[Hotel]:
        pass

    @abstractmethod
    async def create_hotel(self, data: HotelInput) -> Hotel:
        """Raises ValueError if the name is missing."""
        pass

    @abstractmethod
    async def update_hotel(self, hotel_id: int, data: HotelInput) -> Optional[Hotel]:
        """Raises ValueError if the name is missing."""
        pass

    @abstractmethod
    async def delete_hotel(self, hotel_id: int) -> bool:
        """Delete a hotel. Returns False if it doesn't exist.

        Raises:
            ValueError: the hotel still has visitations
        """
        pass


class Service(IService):
    """Implementation of the hotel service."""

    def __init__(self) -> None:
        pass

    async def list_hotels(self) -> List[Hotel]:
        return await repo.get_all()

    async def get_hotel(self, hotel_id: int) -> Optional[Hotel]:
        return await repo.get_by_id(hotel_id)

    async def create_hotel(self, data: HotelInput) -> Hotel:
        _validate(data)
        hotel = await repo.insert(
            lambda new_id: Hotel(
                id=new_id,
                name=data.name,
                location=data.location,
                rating=data.rating,
                description=data.description,
            )
        )
        logger.info(f"Created hotel {hotel.id}: {hotel.name}")
        return hotel

    async def update_hotel(self, hotel_id: int, data: HotelInput) -> Optional[Hotel]:
        _validate(data)
        hotel = await repo.update(
            hotel_id,
            {
                "name": data.name,
                "location": data.location,
                "rating": data.rating if data.rating is not None else 0.0,
                "description": data.description,
            },
        )
        if hotel:
            logger.info(f"Updated hotel {hotel_id}")
        return hotel

    async def delete_hotel(self, hotel_id: int) -> bool:
        found, visit_count = await repo.delete_if_unvisited(hotel_id)
        if visit_count:
            logger.warning(f"Refusing to delete hotel {hotel_id}: {visit_count} visitation(s)")
            raise ValueError(
                f"Cannot delete hotel with ID {hotel_id} because it has {visit_count} visitation(s)"
            )
        if found:
            logger.info(f"Deleted hotel {hotel_id}")
        return found
