"""
Store interfaces consumed by the ratings service, plus their SQLAlchemy
implementations backed by the CRUD functions.
"""
from typing import List, Optional, Protocol
from sqlalchemy.orm import Session

from tour_ratings import crud
from tour_ratings.core.models import Tour, TourRating


class TourStore(Protocol):
    def find_by_id(self, tour_id: int) -> Optional[Tour]: ...


class RatingStore(Protocol):
    def find_all_by_tour(self, tour_id: int) -> List[TourRating]: ...

    def find_by_tour_and_customer(self, tour_id: int, customer_id: int) -> Optional[TourRating]: ...

    def insert(self, rating: TourRating) -> Optional[TourRating]: ...

    def save(self, rating: TourRating) -> TourRating: ...

    def delete(self, rating: TourRating) -> None: ...


class SqlTourStore:
    """Tour lookups on a database session."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, tour_id: int) -> Optional[Tour]:
        return crud.get_tour_by_id(self.db, tour_id)


class SqlRatingStore:
    """Rating persistence on a database session."""

    def __init__(self, db: Session):
        self.db = db

    def find_all_by_tour(self, tour_id: int) -> List[TourRating]:
        return crud.get_ratings_by_tour(self.db, tour_id)

    def find_by_tour_and_customer(self, tour_id: int, customer_id: int) -> Optional[TourRating]:
        return crud.get_rating(self.db, tour_id, customer_id)

    def insert(self, rating: TourRating) -> Optional[TourRating]:
        """Insert a new rating; None if its key is already taken."""
        return crud.create_rating(
            self.db,
            tour_id=rating.tour_id,
            customer_id=rating.customer_id,
            score=rating.score,
            comment=rating.comment
        )

    def save(self, rating: TourRating) -> TourRating:
        return crud.save_rating(self.db, rating)

    def delete(self, rating: TourRating) -> None:
        crud.delete_rating(self.db, rating)
