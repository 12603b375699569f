"""
Pydantic schemas for request/response models.
"""
from pydantic import BaseModel, Field
from typing import Optional

from tour_ratings.core.errors import invalid
from tour_ratings.core.models import TourRating

# Ids are stored as signed 64-bit integers
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


class RatingDto(BaseModel):
    """
    Wire shape of a tour rating.

    Which fields must be present depends on the verb; see require().
    On PATCH a missing (null) score or comment means "leave unchanged".
    """
    customer_id: Optional[int] = Field(None, alias="customerId", ge=MIN_ID, le=MAX_ID)
    score: Optional[int] = Field(None, ge=1, le=5)
    comment: Optional[str] = Field(None, max_length=255)

    class Config:
        populate_by_name = True

    @classmethod
    def from_entity(cls, rating: TourRating) -> "RatingDto":
        return cls(customer_id=rating.customer_id, score=rating.score, comment=rating.comment)

    def require(self, *fields: str) -> None:
        """Reject the request unless every named field is set."""
        missing = [name for name in fields if getattr(self, name) is None]
        if missing:
            wire_names = [type(self).model_fields[name].alias or name for name in missing]
            raise invalid(f"Missing required field(s): {', '.join(wire_names)}")


class AverageResponse(BaseModel):
    """Average score of a tour."""
    average: float
