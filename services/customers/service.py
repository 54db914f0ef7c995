"""Customer service - customer records and purchase-based loyalty."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import List, Optional

from loguru import logger

from db.models import Customer, CustomerInput
from services.customers import repo

# Purchases a customer needs before counting as loyal by purchase history
LOYAL_PURCHASE_THRESHOLD = 10


def _validate(data: CustomerInput) -> None:
    if not data.name or not data.name.strip():
        raise ValueError("Customer name is required")
    if not data.email or not data.email.strip():
        raise ValueError("Customer email is required")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class IService(ABC):
    """Customer Service - Manage customer records."""

    @abstractmethod
    async def list_customers(self) -> List[Customer]:
        pass

    @abstractmethod
    async def get_customer(self, customer_id: int) -> Optional[Customer]:
        pass

    @abstractmethod
    async def create_customer(self, data: CustomerInput) -> Customer:
        """Create a customer registered now with zero purchases.

        Raises:
            ValueError: name or email missing
        """
        pass

    @abstractmethod
    async def register_customer(self, data: CustomerInput) -> Customer:
        """Create a customer, keeping the supplied registration date if any.

        Raises:
            ValueError: name or email missing
        """
        pass

    @abstractmethod
    async def update_customer(self, customer_id: int, data: CustomerInput) -> Optional[Customer]:
        """Update name, email and purchases. Id and registration date are kept.

        Raises:
            ValueError: name or email missing
        """
        pass

    @abstractmethod
    async def delete_customer(self, customer_id: int) -> bool:
        pass

    @abstractmethod
    async def loyal_by_purchases(self, at: Optional[datetime] = None) -> List[Customer]:
        """Customers registered by `at` with more than 10 purchases."""
        pass


class Service(IService):
    """Implementation of the customer service."""

    def __init__(self) -> None:
        pass

    async def list_customers(self) -> List[Customer]:
        return await repo.get_all()

    async def get_customer(self, customer_id: int) -> Optional[Customer]:
        return await repo.get_by_id(customer_id)

    async def create_customer(self, data: CustomerInput) -> Customer:
        _validate(data)
        registered = _utcnow()
        customer = await repo.insert(
            lambda new_id: Customer(
                id=new_id,
                name=data.name,
                email=data.email,
                registration_date=registered,
                total_purchases=0,
            )
        )
        logger.info(f"Created customer {customer.id}: {customer.name}")
        return customer

    async def register_customer(self, data: CustomerInput) -> Customer:
        _validate(data)
        registered = data.registration_date or _utcnow()
        customer = await repo.insert(
            lambda new_id: Customer(
                id=new_id,
                name=data.name,
                email=data.email,
                registration_date=registered,
                total_purchases=0,
            )
        )
        logger.info(f"Registered customer {customer.id} at {registered.isoformat()}")
        return customer

    async def update_customer(self, customer_id: int, data: CustomerInput) -> Optional[Customer]:
        _validate(data)
        customer = await repo.update(
            customer_id,
            {"name": data.name, "email": data.email, "total_purchases": data.total_purchases},
        )
        if customer:
            logger.info(f"Updated customer {customer_id}")
        return customer

    async def delete_customer(self, customer_id: int) -> bool:
        deleted = await repo.delete(customer_id)
        if deleted:
            logger.info(f"Deleted customer {customer_id}")
        return deleted

    async def loyal_by_purchases(self, at: Optional[datetime] = None) -> List[Customer]:
        at = at or _utcnow()
        if at.tzinfo is None:
            at = at.replace(tzinfo=timezone.utc)

        loyal = []
        for c in await repo.get_all():
            if c.registration_date is None or c.total_purchases <= LOYAL_PURCHASE_THRESHOLD:
                continue
            registered = c.registration_date
            if registered.tzinfo is None:
                registered = registered.replace(tzinfo=timezone.utc)
            if registered <= at:
                loyal.append(c)
        return loyal
