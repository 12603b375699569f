from tour_ratings.core.database import Base, get_db
from tour_ratings.core.models import Tour, TourPackage, TourRating
from tour_ratings.core.errors import ErrorKind, TourRatingError, STATUS_BY_KIND

__all__ = [
    'Base',
    'get_db',
    'Tour',
    'TourPackage',
    'TourRating',
    'ErrorKind',
    'TourRatingError',
    'STATUS_BY_KIND'
]
