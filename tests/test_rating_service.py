"""
Unit tests for TourRatingService using in-memory stores.
"""
import pytest

from tour_ratings.core.errors import ErrorKind, TourRatingError, STATUS_BY_KIND
from tour_ratings.core.models import Tour
from tour_ratings.services.rating_service import TourRatingService


class InMemoryTourStore:
    def __init__(self, *tour_ids):
        self.tours = {tour_id: Tour(id=tour_id, title=f"Tour {tour_id}") for tour_id in tour_ids}

    def find_by_id(self, tour_id):
        return self.tours.get(tour_id)


class InMemoryRatingStore:
    def __init__(self):
        self.ratings = {}
        self.saves = 0

    def find_all_by_tour(self, tour_id):
        return [r for (t, _), r in self.ratings.items() if t == tour_id]

    def find_by_tour_and_customer(self, tour_id, customer_id):
        return self.ratings.get((tour_id, customer_id))

    def insert(self, rating):
        key = (rating.tour_id, rating.customer_id)
        if key in self.ratings:
            return None
        self.ratings[key] = rating
        return rating

    def save(self, rating):
        self.saves += 1
        self.ratings[(rating.tour_id, rating.customer_id)] = rating
        return rating

    def delete(self, rating):
        del self.ratings[(rating.tour_id, rating.customer_id)]


@pytest.fixture
def rating_store():
    return InMemoryRatingStore()


@pytest.fixture
def service(rating_store):
    return TourRatingService(InMemoryTourStore(1, 2), rating_store)


def assert_error(excinfo, kind, message):
    assert excinfo.value.kind == kind
    assert excinfo.value.message == message
    assert str(excinfo.value) == message


def test_status_table_covers_every_kind():
    assert set(STATUS_BY_KIND) == set(ErrorKind)
    assert STATUS_BY_KIND[ErrorKind.NOT_FOUND] == 404


def test_verify_tour(service):
    assert service.verify_tour(1).id == 1

    with pytest.raises(TourRatingError) as excinfo:
        service.verify_tour(42)
    assert_error(excinfo, ErrorKind.NOT_FOUND, "Tour does not exist 42")
    assert excinfo.value.status_code == 404


def test_verify_tour_rating(service):
    with pytest.raises(TourRatingError) as excinfo:
        service.verify_tour_rating(1, 5)
    assert_error(excinfo, ErrorKind.NOT_FOUND, "Tour rating does not exist for tourId 1 and customerId 5")


def test_create_rating(service, rating_store):
    rating = service.create_rating(1, 7, 5, "great")
    assert (rating.tour_id, rating.customer_id, rating.score, rating.comment) == (1, 7, 5, "great")
    assert rating_store.find_by_tour_and_customer(1, 7) is rating


def test_create_rating_unknown_tour(service, rating_store):
    with pytest.raises(TourRatingError) as excinfo:
        service.create_rating(3, 7, 5)
    assert_error(excinfo, ErrorKind.NOT_FOUND, "Tour does not exist 3")
    assert rating_store.ratings == {}


def test_create_rating_twice_conflicts(service, rating_store):
    service.create_rating(1, 7, 5, "great")
    with pytest.raises(TourRatingError) as excinfo:
        service.create_rating(1, 7, 2)
    assert_error(excinfo, ErrorKind.CONFLICT, "Tour rating already exists for tourId 1 and customerId 7")
    assert rating_store.find_by_tour_and_customer(1, 7).score == 5


def test_list_ratings_scoped_to_tour(service):
    service.create_rating(1, 7, 5)
    service.create_rating(2, 7, 1)
    assert [r.score for r in service.list_ratings(1)] == [5]


def test_average_score(service):
    service.create_rating(1, 1, 3)
    service.create_rating(1, 2, 5)
    assert service.average_score(1) == 4.0


def test_average_score_not_integer(service):
    service.create_rating(1, 1, 4)
    service.create_rating(1, 2, 5)
    assert service.average_score(1) == pytest.approx(4.5)


def test_average_score_without_ratings(service):
    with pytest.raises(TourRatingError) as excinfo:
        service.average_score(1)
    assert_error(excinfo, ErrorKind.NOT_FOUND, "Tour has no ratings")


def test_replace_rating_overwrites_both_fields(service, rating_store):
    service.create_rating(1, 7, 5, "great")
    rating = service.replace_rating(1, 7, 1, None)
    assert (rating.score, rating.comment) == (1, None)
    assert rating_store.saves == 1


def test_patch_rating_keeps_missing_fields(service):
    service.create_rating(1, 7, 5, "great")

    rating = service.patch_rating(1, 7, score=2)
    assert (rating.score, rating.comment) == (2, "great")

    rating = service.patch_rating(1, 7, comment="ok")
    assert (rating.score, rating.comment) == (2, "ok")


def test_patch_missing_rating(service, rating_store):
    with pytest.raises(TourRatingError):
        service.patch_rating(1, 7, score=2)
    assert rating_store.saves == 0


def test_delete_rating(service, rating_store):
    service.create_rating(1, 7, 5)
    service.delete_rating(1, 7)
    assert rating_store.find_by_tour_and_customer(1, 7) is None

    with pytest.raises(TourRatingError) as excinfo:
        service.delete_rating(1, 7)
    assert excinfo.value.kind == ErrorKind.NOT_FOUND


@pytest.mark.parametrize("score", [0, 6, -1, 9])
def test_create_rating_score_out_of_range(service, rating_store, score):
    with pytest.raises(TourRatingError) as excinfo:
        service.create_rating(1, 7, score)
    assert_error(excinfo, ErrorKind.INVALID, f"Score must be between 1 and 5, got {score}")
    assert rating_store.ratings == {}


def test_create_rating_comment_too_long(service, rating_store):
    with pytest.raises(TourRatingError) as excinfo:
        service.create_rating(1, 7, 3, "x" * 256)
    assert_error(excinfo, ErrorKind.INVALID, "Comment must be at most 255 characters")
    assert rating_store.ratings == {}


def test_replace_and_patch_check_score(service, rating_store):
    service.create_rating(1, 7, 5, "great")

    with pytest.raises(TourRatingError) as excinfo:
        service.replace_rating(1, 7, 0, "bad")
    assert excinfo.value.kind == ErrorKind.INVALID

    with pytest.raises(TourRatingError) as excinfo:
        service.patch_rating(1, 7, score=6)
    assert excinfo.value.kind == ErrorKind.INVALID

    stored = rating_store.find_by_tour_and_customer(1, 7)
    assert (stored.score, stored.comment) == (5, "great")
    assert rating_store.saves == 0
