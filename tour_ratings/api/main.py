"""
FastAPI application for the Tour Ratings API.
Exposes the ratings of a tour under /tours/{tourId}/ratings.
"""
from fastapi import FastAPI, Depends, Path, Request, Response
from fastapi.responses import PlainTextResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session
from typing import List
import logging

from tour_ratings.core.database import get_db, init_db
from tour_ratings.core.errors import TourRatingError, STATUS_BY_KIND
from tour_ratings.core.stores import SqlTourStore, SqlRatingStore
from tour_ratings.core.config import settings
from tour_ratings.services.rating_service import TourRatingService
from tour_ratings.api.schemas import RatingDto, AverageResponse, MIN_ID, MAX_ID
from tour_ratings.utils.logger import setup_logging

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    description="Customer ratings of Explore California tours"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ========== Dependencies ==========

def get_rating_service(db: Session = Depends(get_db)) -> TourRatingService:
    """Build the ratings service on the request's database session."""
    return TourRatingService(SqlTourStore(db), SqlRatingStore(db))


# ========== Error Handling ==========

@app.exception_handler(TourRatingError)
async def tour_rating_error_handler(request: Request, exc: TourRatingError):
    """Return the error message as plain text with the status of its kind."""
    status_code = STATUS_BY_KIND[exc.kind]
    logger.warning(f"{request.method} {request.url.path} -> {status_code}: {exc.message}")
    return PlainTextResponse(exc.message, status_code=status_code)


# ========== Startup/Shutdown Events ==========

@app.on_event("startup")
async def startup_event():
    """Create tables on startup."""
    logger.info("Starting Tour Ratings API...")
    init_db()
    logger.info("API startup complete")


# ========== Health Endpoints ==========

@app.get("/health")
async def health_check():
    """Heartbeat check."""
    return {"status": "ok"}


# ========== Tour Ratings ==========

# Ids outside the 64-bit range are rejected with 422 before reaching the database
@app.post("/tours/{tour_id}/ratings", status_code=201, response_class=Response)
def create_tour_rating(
    rating_dto: RatingDto,
    tour_id: int = Path(..., ge=MIN_ID, le=MAX_ID),
    service: TourRatingService = Depends(get_rating_service)
):
    """Rate a tour. Responds 201 with an empty body."""
    rating_dto.require("customer_id", "score")
    service.create_rating(tour_id, rating_dto.customer_id, rating_dto.score, rating_dto.comment)
    return Response(status_code=201)


@app.get("/tours/{tour_id}/ratings", response_model=List[RatingDto])
def get_all_ratings_for_tour(
    tour_id: int = Path(..., ge=MIN_ID, le=MAX_ID),
    service: TourRatingService = Depends(get_rating_service)
):
    """List every rating of a tour."""
    return [RatingDto.from_entity(rating) for rating in service.list_ratings(tour_id)]


@app.get("/tours/{tour_id}/ratings/average", response_model=AverageResponse)
def get_average(
    tour_id: int = Path(..., ge=MIN_ID, le=MAX_ID),
    service: TourRatingService = Depends(get_rating_service)
):
    """Average score of a tour's ratings."""
    return AverageResponse(average=service.average_score(tour_id))


@app.put("/tours/{tour_id}/ratings", response_model=RatingDto)
def update_with_put(
    rating_dto: RatingDto,
    tour_id: int = Path(..., ge=MIN_ID, le=MAX_ID),
    service: TourRatingService = Depends(get_rating_service)
):
    """Replace score and comment of an existing rating. A null comment clears it."""
    rating_dto.require("customer_id", "score")
    rating = service.replace_rating(tour_id, rating_dto.customer_id, rating_dto.score, rating_dto.comment)
    return RatingDto.from_entity(rating)


@app.patch("/tours/{tour_id}/ratings", response_model=RatingDto)
def update_with_patch(
    rating_dto: RatingDto,
    tour_id: int = Path(..., ge=MIN_ID, le=MAX_ID),
    service: TourRatingService = Depends(get_rating_service)
):
    """Update the given fields of an existing rating, leaving null ones unchanged."""
    rating_dto.require("customer_id")
    rating = service.patch_rating(tour_id, rating_dto.customer_id, rating_dto.score, rating_dto.comment)
    return RatingDto.from_entity(rating)


@app.delete("/tours/{tour_id}/ratings/{customer_id}", response_class=Response)
def delete_tour_rating(
    tour_id: int = Path(..., ge=MIN_ID, le=MAX_ID),
    customer_id: int = Path(..., ge=MIN_ID, le=MAX_ID),
    service: TourRatingService = Depends(get_rating_service)
):
    """Delete a customer's rating of a tour."""
    service.delete_rating(tour_id, customer_id)
    return Response(status_code=200)


# ========== Main Entry Point ==========

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "tour_ratings.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.is_local
    )
