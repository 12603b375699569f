"""
Tour rating service.
Verifies that tours and ratings exist and applies rating changes through
the injected stores.
"""
from typing import List, Optional
import logging

from tour_ratings.core.errors import not_found, conflict, invalid
from tour_ratings.core.models import Tour, TourRating
from tour_ratings.core.stores import TourStore, RatingStore

logger = logging.getLogger(__name__)

MIN_SCORE = 1
MAX_SCORE = 5
MAX_COMMENT_LENGTH = 255


def check_rating_values(score: Optional[int], comment: Optional[str]) -> None:
    """Reject a score outside 1..5 or an over-long comment; None is not checked."""
    if score is not None and not MIN_SCORE <= score <= MAX_SCORE:
        raise invalid(f"Score must be between {MIN_SCORE} and {MAX_SCORE}, got {score}")
    if comment is not None and len(comment) > MAX_COMMENT_LENGTH:
        raise invalid(f"Comment must be at most {MAX_COMMENT_LENGTH} characters")


class TourRatingService:
    """Rating operations for a single tour, keyed by customer."""

    def __init__(self, tour_store: TourStore, rating_store: RatingStore):
        self.tour_store = tour_store
        self.rating_store = rating_store

    # ========== Verification ==========

    def verify_tour(self, tour_id: int) -> Tour:
        """
        Return the tour with the given id.

        Raises:
            TourRatingError: NOT_FOUND if no such tour exists.
        """
        tour = self.tour_store.find_by_id(tour_id)
        if tour is None:
            raise not_found(f"Tour does not exist {tour_id}")
        return tour

    def verify_tour_rating(self, tour_id: int, customer_id: int) -> TourRating:
        """
        Return the rating a customer gave a tour.

        Raises:
            TourRatingError: NOT_FOUND if the customer has not rated the tour.
        """
        rating = self.rating_store.find_by_tour_and_customer(tour_id, customer_id)
        if rating is None:
            raise not_found(
                f"Tour rating does not exist for tourId {tour_id} and customerId {customer_id}"
            )
        return rating

    # ========== Operations ==========

    def create_rating(self, tour_id: int, customer_id: int, score: int, comment: Optional[str] = None) -> TourRating:
        check_rating_values(score, comment)
        tour = self.verify_tour(tour_id)
        rating = self.rating_store.insert(
            TourRating(tour_id=tour.id, customer_id=customer_id, score=score, comment=comment)
        )
        if rating is None:
            raise conflict(
                f"Tour rating already exists for tourId {tour_id} and customerId {customer_id}"
            )
        return rating

    def list_ratings(self, tour_id: int) -> List[TourRating]:
        self.verify_tour(tour_id)
        return self.rating_store.find_all_by_tour(tour_id)

    def average_score(self, tour_id: int) -> float:
        """Mean score of a tour's ratings; a tour without ratings has no average."""
        self.verify_tour(tour_id)
        scores = [rating.score for rating in self.rating_store.find_all_by_tour(tour_id)]
        if not scores:
            raise not_found("Tour has no ratings")
        return sum(scores) / len(scores)

    def replace_rating(self, tour_id: int, customer_id: int, score: int, comment: Optional[str]) -> TourRating:
        check_rating_values(score, comment)
        rating = self.verify_tour_rating(tour_id, customer_id)
        rating.score = score
        rating.comment = comment
        return self.rating_store.save(rating)

    def patch_rating(
        self,
        tour_id: int,
        customer_id: int,
        score: Optional[int] = None,
        comment: Optional[str] = None
    ) -> TourRating:
        """Update only the fields that are given."""
        check_rating_values(score, comment)
        rating = self.verify_tour_rating(tour_id, customer_id)
        if score is not None:
            rating.score = score
        if comment is not None:
            rating.comment = comment
        return self.rating_store.save(rating)

    def delete_rating(self, tour_id: int, customer_id: int) -> None:
        rating = self.verify_tour_rating(tour_id, customer_id)
        self.rating_store.delete(rating)
        logger.debug(f"Removed rating of customer {customer_id} from tour {tour_id}")
