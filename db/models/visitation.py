from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Store every visit time as naive UTC so dates always compare."""
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class Visitation(BaseModel):
    """A single customer visit to a hotel, as stored in visitations.json."""

    id: int = 0
    customer_id: int
    hotel_id: int
    visit_date: datetime

    @field_validator('visit_date', mode='after')
    @classmethod
    def visit_date_naive_utc(cls, v):
        return to_naive_utc(v)

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class VisitationInput(BaseModel):
    """Writable visitation fields. A missing visit_date means "now"."""

    customer_id: int
    hotel_id: int
    visit_date: Optional[datetime] = None

    @field_validator('visit_date', mode='after')
    @classmethod
    def visit_date_naive_utc(cls, v):
        return to_naive_utc(v)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
