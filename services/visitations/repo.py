"""Repository for visitation records."""

from typing import List, Optional

from db.client import get_conn
from db.models import Visitation


async def get_all() -> List[Visitation]:
    async with get_conn() as store:
        return store.read_visitations()


async def get_by_id(visitation_id: int) -> Optional[Visitation]:
    async with get_conn() as store:
        return next((v for v in store.read_visitations() if v.id == visitation_id), None)


async def get_by_customer(customer_id: int) -> List[Visitation]:
    async with get_conn() as store:
        return [v for v in store.read_visitations() if v.customer_id == customer_id]


async def get_by_hotel(hotel_id: int) -> List[Visitation]:
    async with get_conn() as store:
        return [v for v in store.read_visitations() if v.hotel_id == hotel_id]


def _check_references(store, customer_id: int, hotel_id: int) -> None:
    if not any(c.id == customer_id for c in store.read_customers()):
        raise ValueError(f"Customer with ID {customer_id} not found")
    if not any(h.id == hotel_id for h in store.read_hotels()):
        raise ValueError(f"Hotel with ID {hotel_id} not found")


async def insert(visitation: Visitation) -> Visitation:
    """Insert a visitation with the next free id.

    Raises:
        ValueError: customer or hotel doesn't exist
    """
    async with get_conn() as store:
        _check_references(store, visitation.customer_id, visitation.hotel_id)
        visitations = store.read_visitations()
        next_id = max((v.id for v in visitations), default=0) + 1
        created = visitation.model_copy(update={"id": next_id})
        visitations.append(created)
        store.write_visitations(visitations)
        return created


async def update(visitation_id: int, changes: dict) -> Optional[Visitation]:
    """Update a visitation. Returns None if it doesn't exist.

    Raises:
        ValueError: new customer or hotel doesn't exist
    """
    async with get_conn() as store:
        _check_references(store, changes["customer_id"], changes["hotel_id"])
        visitations = store.read_visitations()
        for i, existing in enumerate(visitations):
            if existing.id == visitation_id:
                visitations[i] = existing.model_copy(update=changes)
                store.write_visitations(visitations)
                return visitations[i]
        return None


async def delete(visitation_id: int) -> bool:
    async with get_conn() as store:
        visitations = store.read_visitations()
        remaining = [v for v in visitations if v.id != visitation_id]
        if len(remaining) == len(visitations):
            return False
        store.write_visitations(remaining)
        return True
