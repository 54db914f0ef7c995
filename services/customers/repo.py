"""Repository for customer records."""

from typing import Callable, List, Optional

from db.client import get_conn
from db.models import Customer


async def get_all() -> List[Customer]:
    async with get_conn() as store:
        return store.read_customers()


async def get_by_id(customer_id: int) -> Optional[Customer]:
    async with get_conn() as store:
        return next((c for c in store.read_customers() if c.id == customer_id), None)


async def insert(build: Callable[[int], Customer]) -> Customer:
    """Insert a customer built for the next free id (max + 1)."""
    async with get_conn() as store:
        customers = store.read_customers()
        next_id = max((c.id for c in customers), default=0) + 1
        customer = build(next_id)
        customers.append(customer)
        store.write_customers(customers)
        return customer


async def update(customer_id: int, changes: dict) -> Optional[Customer]:
    """Apply field changes to a customer. Returns None if it doesn't exist."""
    async with get_conn() as store:
        customers = store.read_customers()
        for i, existing in enumerate(customers):
            if existing.id == customer_id:
                customers[i] = existing.model_copy(update=changes)
                store.write_customers(customers)
                return customers[i]
        return None


async def delete(customer_id: int) -> bool:
    async with get_conn() as store:
        customers = store.read_customers()
        remaining = [c for c in customers if c.id != customer_id]
        if len(remaining) == len(customers):
            return False
        store.write_customers(remaining)
        return True


async def count_all() -> dict:
    """Record counts for every collection, used by the welcome endpoint."""
    async with get_conn() as store:
        return {
            "customersCount": len(store.read_customers()),
            "hotelsCount": len(store.read_hotels()),
            "visitationsCount": len(store.read_visitations()),
        }
