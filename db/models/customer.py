from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Customer(BaseModel):
    """Customer record as stored in customers.json."""

    id: int = 0
    name: str = ""
    email: str = ""

    # Metadata
    registration_date: Optional[datetime] = None
    total_purchases: int = 0

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class CustomerInput(BaseModel):
    """Writable customer fields accepted by create/register/update."""

    name: str = ""
    email: str = ""
    registration_date: Optional[datetime] = None  # only honoured by register
    total_purchases: int = 0  # only honoured by update

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
