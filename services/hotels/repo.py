"""Repository for hotel records."""

from typing import Callable, List, Optional

from db.client import get_conn
from db.models import Hotel


async def get_all() -> List[Hotel]:
    async with get_conn() as store:
        return store.read_hotels()


async def get_by_id(hotel_id: int) -> Optional[Hotel]:
    async with get_conn() as store:
        return next((h for h in store.read_hotels() if h.id == hotel_id), None)


async def insert(build: Callable[[int], Hotel]) -> Hotel:
    """Insert a hotel built for the next free id (max + 1)."""
    async with get_conn() as store:
        hotels = store.read_hotels()
        next_id = max((h.id for h in hotels), default=0) + 1
        hotel = build(next_id)
        hotels.append(hotel)
        store.write_hotels(hotels)
        return hotel


async def update(hotel_id: int, changes: dict) -> Optional[Hotel]:
    async with get_conn() as store:
        hotels = store.read_hotels()
        for i, existing in enumerate(hotels):
            if existing.id == hotel_id:
                hotels[i] = existing.model_copy(update=changes)
                store.write_hotels(hotels)
                return hotels[i]
        return None


async def delete_if_unvisited(hotel_id: int) -> tuple[bool, int]:
    """Delete a hotel unless visitations reference it.

    Check and delete happen under one lock so no visit can sneak in between.

    Returns:
        Tuple of (found, visitation_count). Nothing is deleted when
        visitation_count > 0.
    """
    async with get_conn() as store:
        hotels = store.read_hotels()
        if not any(h.id == hotel_id for h in hotels):
            return False, 0

        visit_count = sum(1 for v in store.read_visitations() if v.hotel_id == hotel_id)
        if visit_count:
            return True, visit_count

        store.write_hotels([h for h in hotels if h.id != hotel_id])
        return True, 0
