"""
CRUD operations for the Tour Ratings API.
Organized by entity/domain; re-exported at the package level.
"""

# Tour operations
from .tour import (
    create_tour_package,
    create_tour,
    get_tour_by_id,
    get_tour_package,
    count_tours
)

# Rating operations
from .rating import (
    create_rating,
    get_ratings_by_tour,
    get_rating,
    save_rating,
    delete_rating
)

__all__ = [
    # Tour
    "create_tour_package",
    "create_tour",
    "get_tour_by_id",
    "get_tour_package",
    "count_tours",
    # Rating
    "create_rating",
    "get_ratings_by_tour",
    "get_rating",
    "save_rating",
    "delete_rating",
]
