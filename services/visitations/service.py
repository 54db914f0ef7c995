"""Visitation service - customer visits to hotels."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import List, Optional

from loguru import logger

from db.models import Visitation, VisitationInput
from db.models.visitation import to_naive_utc
from services.visitations import repo


class IService(ABC):
    """Visitation Service - Record and query hotel visits."""

    @abstractmethod
    async def list_visitations(self) -> List[Visitation]:
        pass

    @abstractmethod
    async def get_visitation(self, visitation_id: int) -> Optional[Visitation]:
        pass

    @abstractmethod
    async def for_customer(self, customer_id: int) -> List[Visitation]:
        pass

    @abstractmethod
    async def for_hotel(self, hotel_id: int) -> List[Visitation]:
        pass

    @abstractmethod
    async def create_visitation(self, data: VisitationInput) -> Visitation:
        """Record a visit. visit_date defaults to now (UTC).

        Raises:
            ValueError: customer or hotel doesn't exist
        """
        pass

    @abstractmethod
    async def update_visitation(self, visitation_id: int, data: VisitationInput) -> Optional[Visitation]:
        """Raises ValueError if the customer or hotel doesn't exist."""
        pass

    @abstractmethod
    async def delete_visitation(self, visitation_id: int) -> bool:
        pass


class Service(IService):
    """Implementation of the visitation service."""

    def __init__(self) -> None:
        pass

    async def list_visitations(self) -> List[Visitation]:
        return await repo.get_all()

    async def get_visitation(self, visitation_id: int) -> Optional[Visitation]:
        return await repo.get_by_id(visitation_id)

    async def for_customer(self, customer_id: int) -> List[Visitation]:
        return await repo.get_by_customer(customer_id)

    async def for_hotel(self, hotel_id: int) -> List[Visitation]:
        return await repo.get_by_hotel(hotel_id)

    async def create_visitation(self, data: VisitationInput) -> Visitation:
        visitation = Visitation(
            customer_id=data.customer_id,
            hotel_id=data.hotel_id,
            visit_date=data.visit_date or to_naive_utc(datetime.now(timezone.utc)),
        )
        created = await repo.insert(visitation)
        logger.info(
            f"Recorded visit {created.id}: customer {created.customer_id} -> hotel {created.hotel_id}"
        )
        return created

    async def update_visitation(self, visitation_id: int, data: VisitationInput) -> Optional[Visitation]:
        changes = {"customer_id": data.customer_id, "hotel_id": data.hotel_id}
        if data.visit_date is not None:
            changes["visit_date"] = data.visit_date
        visitation = await repo.update(visitation_id, changes)
        if visitation:
            logger.info(f"Updated visitation {visitation_id}")
        return visitation

    async def delete_visitation(self, visitation_id: int) -> bool:
        deleted = await repo.delete(visitation_id)
        if deleted:
            logger.info(f"Deleted visitation {visitation_id}")
        return deleted
