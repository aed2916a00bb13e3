"""
Tests for the job and bid stores, called directly against a session.
"""

import pytest
from solosphere.core.exceptions import DuplicateBidError, UnauthorizedAccessError
from solosphere.crud import bid as bid_crud
from solosphere.crud import job as job_crud
from solosphere.models.bid import Bid, BidStatus
from solosphere.schemas.bid import BidCreateRequest
from solosphere.schemas.job import JobCreateRequest, JobUpdateRequest


def make_job(db, **fields):
    return job_crud.create(db, JobCreateRequest(**fields)).inserted_id


class TestJobStore:
    """Tests for job store operations"""

    def test_create_defaults_bid_count(self, db_session, sample_job_data):
        job_id = make_job(db_session, **sample_job_data)

        job = job_crud.get_by_id(db_session, job_id)
        assert job.bid_count == 0
        assert job.title == "Build logo"
        assert job.buyer["email"] == "own@x.com"

    def test_create_keeps_supplied_bid_count(self, db_session):
        job_id = make_job(db_session, title="Seeded", bid_count=4)

        assert job_crud.get_by_id(db_session, job_id).bid_count == 4

    def test_create_without_fields(self, db_session):
        job_id = make_job(db_session)

        job = job_crud.get_by_id(db_session, job_id)
        assert job.title is None
        assert job.bid_count == 0

    def test_get_by_id_missing_returns_none(self, db_session):
        assert job_crud.get_by_id(db_session, "no-such-job") is None

    def test_get_by_owner_email(self, db_session, sample_job_data):
        make_job(db_session, **sample_job_data)
        make_job(db_session, title="Other", buyer={"email": "else@x.com"})

        jobs = job_crud.get_by_owner_email(db_session, "own@x.com", "own@x.com")
        assert [j.title for j in jobs] == ["Build logo"]

    def test_get_by_owner_email_rejects_other_identity(self, db_session, sample_job_data):
        make_job(db_session, **sample_job_data)

        with pytest.raises(UnauthorizedAccessError):
            job_crud.get_by_owner_email(db_session, "own@x.com", "intruder@x.com")

    def test_upsert_keeps_unset_fields(self, db_session, sample_job_data):
        job_id = make_job(db_session, **sample_job_data)

        result = job_crud.upsert(db_session, job_id, JobUpdateRequest(title="Build new logo"))

        assert result.matched_count == 1
        assert result.modified_count == 1
        assert result.upserted_id is None
        job = job_crud.get_by_id(db_session, job_id)
        assert job.title == "Build new logo"
        assert job.category == "design"
        assert job.description == sample_job_data["description"]
        assert job.buyer["email"] == "own@x.com"

    def test_upsert_same_values_reports_no_modification(self, db_session):
        job_id = make_job(db_session, title="Same")

        result = job_crud.upsert(db_session, job_id, JobUpdateRequest(title="Same"))
        assert result.matched_count == 1
        assert result.modified_count == 0

    def test_upsert_creates_missing_job(self, db_session):
        result = job_crud.upsert(db_session, "job-123", JobUpdateRequest(title="Fresh", category="web"))

        assert result.matched_count == 0
        assert result.upserted_id == "job-123"
        job = job_crud.get_by_id(db_session, "job-123")
        assert job.title == "Fresh"
        assert job.category == "web"
        assert job.bid_count == 0

    def test_delete_is_idempotent(self, db_session, sample_job_data):
        job_id = make_job(db_session, **sample_job_data)

        assert job_crud.delete(db_session, job_id).deleted_count == 1
        assert job_crud.delete(db_session, job_id).deleted_count == 0
        assert job_crud.get_by_id(db_session, job_id) is None

    def test_delete_leaves_bids(self, db_session, sample_job_data, sample_bid_data):
        job_id = make_job(db_session, **sample_job_data)
        bid_crud.place_bid(db_session, BidCreateRequest(jobId=job_id, **sample_bid_data))

        job_crud.delete(db_session, job_id)

        assert db_session.query(Bid).filter(Bid.job_id == job_id).count() == 1


class TestJobSearch:
    """Tests for the marketplace search"""

    @pytest.fixture
    def catalog(self, db_session):
        make_job(db_session, title="Logo design", category="design", deadline="2024-03-01")
        make_job(db_session, title="Blog LOGO refresh", category="design", deadline="2024-01-15")
        make_job(db_session, title="Catalog page", category="design", deadline="2024-02-01")
        make_job(db_session, title="Logo animation", category="web", deadline="2024-01-01")
        make_job(db_session, title="Website", category="design", deadline="2024-01-10")
        make_job(db_session, title="50% off banner", category="marketing", deadline="2024-04-01")

    def test_filter_search_and_sort_ascending(self, db_session, catalog):
        jobs = job_crud.search(db_session, category="design", search_text="log", sort="asc")

        assert [j.title for j in jobs] == ["Blog LOGO refresh", "Catalog page", "Logo design"]

    def test_sort_descending(self, db_session, catalog):
        jobs = job_crud.search(db_session, category="design", search_text="log", sort="dsc")

        assert [j.title for j in jobs] == ["Logo design", "Catalog page", "Blog LOGO refresh"]

    def test_empty_search_matches_all(self, db_session, catalog):
        assert len(job_crud.search(db_session, search_text="")) == 6
        assert len(job_crud.search(db_session)) == 6

    def test_search_without_category(self, db_session, catalog):
        titles = {j.title for j in job_crud.search(db_session, search_text="logo")}

        assert titles == {"Logo design", "Blog LOGO refresh", "Logo animation"}

    def test_category_is_exact_match(self, db_session, catalog):
        assert job_crud.search(db_session, category="Design") == []
        assert len(job_crud.search(db_session, category="web")) == 1

    def test_search_text_is_literal(self, db_session, catalog):
        jobs = job_crud.search(db_session, search_text="%")

        assert [j.title for j in jobs] == ["50% off banner"]


class TestBidStore:
    """Tests for bid store operations"""

    def test_place_bid_increments_bid_count(self, db_session, sample_job_data, sample_bid_data):
        job_id = make_job(db_session, **sample_job_data)

        result = bid_crud.place_bid(db_session, BidCreateRequest(jobId=job_id, **sample_bid_data))

        assert result.inserted_id
        assert job_crud.get_by_id(db_session, job_id).bid_count == 1
        bids = bid_crud.get_for_user(db_session, "bid@x.com")
        assert [b.id for b in bids] == [result.inserted_id]
        assert bids[0].status == BidStatus.PENDING.value

    def test_duplicate_bid_rejected(self, db_session, sample_job_data, sample_bid_data):
        job_id = make_job(db_session, **sample_job_data)
        bid_crud.place_bid(db_session, BidCreateRequest(jobId=job_id, **sample_bid_data))

        with pytest.raises(DuplicateBidError) as exc_info:
            bid_crud.place_bid(db_session, BidCreateRequest(jobId=job_id, **sample_bid_data))

        assert "already apply" in exc_info.value.message
        assert exc_info.value.email == "bid@x.com"
        assert exc_info.value.job_id == job_id
        assert job_crud.get_by_id(db_session, job_id).bid_count == 1
        assert db_session.query(Bid).count() == 1

    def test_duplicate_rejected_by_constraint(self, db_session, sample_job_data, sample_bid_data, monkeypatch):
        """Two requests that both pass the pre-check still yield a single bid."""
        job_id = make_job(db_session, **sample_job_data)
        monkeypatch.setattr(bid_crud, "get_by_email_and_job", lambda db, email, job_id: None)

        bid_crud.place_bid(db_session, BidCreateRequest(jobId=job_id, **sample_bid_data))
        with pytest.raises(DuplicateBidError):
            bid_crud.place_bid(db_session, BidCreateRequest(jobId=job_id, **sample_bid_data))

        assert job_crud.get_by_id(db_session, job_id).bid_count == 1
        assert db_session.query(Bid).count() == 1

    def test_other_bidder_on_same_job(self, db_session, sample_job_data, sample_bid_data):
        job_id = make_job(db_session, **sample_job_data)
        bid_crud.place_bid(db_session, BidCreateRequest(jobId=job_id, **sample_bid_data))
        other = dict(sample_bid_data, email="second@x.com")
        bid_crud.place_bid(db_session, BidCreateRequest(jobId=job_id, **other))

        assert job_crud.get_by_id(db_session, job_id).bid_count == 2

    def test_bid_on_unknown_job_is_stored(self, db_session, sample_bid_data):
        result = bid_crud.place_bid(db_session, BidCreateRequest(jobId="missing", **sample_bid_data))

        assert db_session.query(Bid).filter(Bid.id == result.inserted_id).count() == 1

    def test_get_for_user_modes(self, db_session, sample_job_data, sample_bid_data):
        job_id = make_job(db_session, **sample_job_data)
        bid_crud.place_bid(db_session, BidCreateRequest(jobId=job_id, **sample_bid_data))

        assert len(bid_crud.get_for_user(db_session, "own@x.com", as_buyer=True)) == 1
        assert bid_crud.get_for_user(db_session, "own@x.com", as_buyer=False) == []
        assert bid_crud.get_for_user(db_session, "bid@x.com", as_buyer=True) == []
        assert len(bid_crud.get_for_user(db_session, "bid@x.com", as_buyer=False)) == 1

    def test_update_status_accepts_any_value(self, db_session, sample_job_data, sample_bid_data):
        job_id = make_job(db_session, **sample_job_data)
        bid_id = bid_crud.place_bid(db_session, BidCreateRequest(jobId=job_id, **sample_bid_data)).inserted_id

        result = bid_crud.update_status(db_session, bid_id, BidStatus.REJECTED.value)
        assert result.matched_count == 1
        assert result.modified_count == 1

        bid_crud.update_status(db_session, bid_id, "Something else")
        bid = db_session.query(Bid).filter(Bid.id == bid_id).first()
        assert bid.status == "Something else"

    def test_update_status_unknown_bid(self, db_session):
        result = bid_crud.update_status(db_session, "missing", "Completed")

        assert result.matched_count == 0
        assert result.modified_count == 0
