"""
Tour CRUD operations.
Handles all database operations related to the Tour and TourPackage models.
"""
from typing import Optional
from sqlalchemy.orm import Session
import logging

from tour_ratings.core.models import Tour, TourPackage, Difficulty, Region

logger = logging.getLogger(__name__)


# ========== CREATE Operations ==========

def create_tour_package(db: Session, code: str, name: str) -> TourPackage:
    """Create a tour package, or return the existing one with the same code."""
    existing = get_tour_package(db, code)
    if existing:
        logger.debug(f"Tour package already exists: {code}")
        return existing

    tour_package = TourPackage(code=code, name=name)

    db.add(tour_package)
    db.commit()
    db.refresh(tour_package)

    logger.info(f"Created tour package: {code} ({name})")
    return tour_package


def create_tour(
    db: Session,
    title: str,
    tour_package_code: Optional[str] = None,
    description: Optional[str] = None,
    blurb: Optional[str] = None,
    price: Optional[int] = None,
    duration: Optional[str] = None,
    bullets: Optional[str] = None,
    keywords: Optional[str] = None,
    difficulty: Optional[Difficulty] = None,
    region: Optional[Region] = None
) -> Tour:
    """Create a new tour."""
    tour = Tour(
        title=title,
        tour_package_code=tour_package_code,
        description=description,
        blurb=blurb,
        price=price,
        duration=duration,
        bullets=bullets,
        keywords=keywords,
        difficulty=difficulty,
        region=region
    )

    db.add(tour)
    db.commit()
    db.refresh(tour)

    logger.info(f"Created tour: {title} (id={tour.id})")
    return tour


# ========== READ Operations ==========

def get_tour_by_id(db: Session, tour_id: int) -> Optional[Tour]:
    """Get tour by ID."""
    return db.query(Tour).filter(Tour.id == tour_id).first()


def get_tour_package(db: Session, code: str) -> Optional[TourPackage]:
    """Get tour package by code."""
    return db.query(TourPackage).filter(TourPackage.code == code).first()


def count_tours(db: Session) -> int:
    return db.query(Tour).count()
