"""
Rating CRUD operations.
Handles all database operations related to the TourRating model.
"""
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import FlushError
from sqlalchemy.exc import IntegrityError
import logging

from tour_ratings.core.models import TourRating

logger = logging.getLogger(__name__)


# ========== CREATE Operations ==========

def create_rating(
    db: Session,
    tour_id: int,
    customer_id: int,
    score: int,
    comment: Optional[str] = None
) -> Optional[TourRating]:
    """
    Insert a new rating.

    Returns None when a rating for (tour_id, customer_id) already exists;
    the existing rating is left untouched. Any other integrity failure
    (score check, foreign key) is raised.
    """
    rating = TourRating(
        tour_id=tour_id,
        customer_id=customer_id,
        score=score,
        comment=comment
    )

    db.add(rating)
    try:
        db.commit()
    except FlushError:
        # Key already held by a rating loaded in this session
        db.rollback()
        logger.warning(f"Rating already exists for tour_id={tour_id}, customer_id={customer_id}")
        return None
    except IntegrityError as e:
        db.rollback()
        if get_rating(db, tour_id, customer_id) is None:
            logger.error(f"Rating insert failed for tour_id={tour_id}, customer_id={customer_id}: {e.orig}")
            raise
        logger.warning(f"Rating already exists for tour_id={tour_id}, customer_id={customer_id}: {e.orig}")
        return None
    db.refresh(rating)

    logger.info(f"Created rating for tour_id={tour_id}, customer_id={customer_id}, score={score}")
    return rating


# ========== READ Operations ==========

def get_ratings_by_tour(db: Session, tour_id: int) -> List[TourRating]:
    """Get all ratings for a tour."""
    return db.query(TourRating).filter(TourRating.tour_id == tour_id).all()


def get_rating(db: Session, tour_id: int, customer_id: int) -> Optional[TourRating]:
    """Get the rating a customer gave a tour."""
    return db.query(TourRating).filter(
        TourRating.tour_id == tour_id,
        TourRating.customer_id == customer_id
    ).first()


# ========== UPDATE Operations ==========

def save_rating(db: Session, rating: TourRating) -> TourRating:
    """Persist changes made to a rating."""
    db.add(rating)
    db.commit()
    db.refresh(rating)

    logger.info(f"Updated rating for tour_id={rating.tour_id}, customer_id={rating.customer_id}")
    return rating


# ========== DELETE Operations ==========

def delete_rating(db: Session, rating: TourRating) -> None:
    """Delete a rating."""
    tour_id, customer_id = rating.tour_id, rating.customer_id

    db.delete(rating)
    db.commit()

    logger.info(f"Deleted rating for tour_id={tour_id}, customer_id={customer_id}")
