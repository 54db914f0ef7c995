from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class Hotel(BaseModel):
    """Hotel record as stored in hotels.json."""

    id: int = 0
    name: str = ""
    location: str = ""

    # Ratings
    rating: float = 0.0

    @field_validator('rating', mode='before')
    @classmethod
    def rating_none_to_zero(cls, v):
        """Handle null ratings written by older clients."""
        return v if v is not None else 0.0
    description: str = ""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class HotelInput(BaseModel):
    """Writable hotel fields accepted by create/update."""

    name: str = ""
    location: str = ""
    rating: Optional[float] = None
    description: str = ""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
