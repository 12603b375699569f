"""
Database models for the Tour Ratings system.
"""
from sqlalchemy import Column, String, Integer, Text, ForeignKey, TIMESTAMP, CheckConstraint, Enum as SAEnum
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func
from enum import Enum

Base = declarative_base()


class Difficulty(str, Enum):
    easy = "Easy"
    medium = "Medium"
    difficult = "Difficult"
    varies = "Varies"


class Region(str, Enum):
    central_coast = "Central Coast"
    southern_california = "Southern California"
    northern_california = "Northern California"
    varies = "Varies"


def _enum_values(enum_cls):
    return [member.value for member in enum_cls]


class TourPackage(Base):
    """Tour package grouping related tours (e.g. "CC" / "California Calm")."""
    __tablename__ = "tour_packages"

    code = Column(String(2), primary_key=True)
    name = Column(String(100), unique=True, nullable=False)

    # Relationships
    tours = relationship("Tour", back_populates="tour_package")


class Tour(Base):
    """Tour table. Ratings only depend on a tour's existence."""
    __tablename__ = "tours"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    blurb = Column(Text, nullable=True)
    price = Column(Integer, nullable=True)
    duration = Column(String(32), nullable=True)
    bullets = Column(Text, nullable=True)
    keywords = Column(String(255), nullable=True)
    tour_package_code = Column(String(2), ForeignKey("tour_packages.code"), nullable=True, index=True)
    difficulty = Column(SAEnum(Difficulty, values_callable=_enum_values, native_enum=False), nullable=True)
    region = Column(SAEnum(Region, values_callable=_enum_values, native_enum=False), nullable=True)
    created_at = Column(TIMESTAMP, server_default=func.now())

    # Relationships
    tour_package = relationship("TourPackage", back_populates="tours")
    ratings = relationship("TourRating", back_populates="tour", cascade="all, delete-orphan")


class TourRating(Base):
    """Customer rating of a tour, at most one per (tour_id, customer_id)."""
    __tablename__ = "tour_ratings"

    tour_id = Column(Integer, ForeignKey("tours.id", ondelete="CASCADE"), primary_key=True)
    customer_id = Column(Integer, primary_key=True)
    score = Column(Integer, CheckConstraint('score >= 1 AND score <= 5', name='valid_rating_score'), nullable=False)
    comment = Column(String(255), nullable=True)

    # Relationships
    tour = relationship("Tour", back_populates="ratings")
