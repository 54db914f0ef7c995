"""Repository for loyalty service reads. Analysis never writes back."""

from typing import List, NamedTuple

from db.client import get_conn
from db.models import Customer, Hotel, Visitation


class Snapshot(NamedTuple):
    """All records needed by one analysis call, read at the same moment."""

    visitations: List[Visitation]
    customers: List[Customer]
    hotels: List[Hotel]


async def get_snapshot() -> Snapshot:
    """Read visitations, customers and hotels in one locked pass."""
    async with get_conn() as store:
        return Snapshot(
            visitations=store.read_visitations(),
            customers=store.read_customers(),
            hotels=store.read_hotels(),
        )
