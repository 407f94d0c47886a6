"""
Tests for the SQLAlchemy repositories.
"""
from datetime import date

import pytest

from domain.models import Loan, Media, Role, Stock, User
from repositories import (
    DuplicateEntityError,
    LoansRepository,
    MediasRepository,
    StocksRepository,
    UsersRepository,
)


class TestMediasRepository:
    """Test the generic store contract through the medias repository."""

    def test_create_assigns_increasing_ids(self, session):
        repo = MediasRepository()
        first = repo.create(session, Media(name="A"))
        second = repo.create(session, Media(name="B"))

        assert first.id is not None
        assert second.id > first.id
        assert [m.name for m in repo.list(session)] == ["A", "B"]

    def test_get_missing_returns_none(self, session):
        assert MediasRepository().get(session, 1) is None

    def test_natural_key_matches_name_and_release_date(self, session):
        repo = MediasRepository()
        repo.create(session, Media(name="Alien", release_date=date(1979, 5, 25)))

        assert repo.get_by_natural_key(session, Media(name="Alien", release_date=date(1979, 5, 25)))
        assert repo.get_by_natural_key(session, Media(name="Alien")) is None
        assert repo.get_by_natural_key(session, Media(name="Aliens", release_date=date(1979, 5, 25))) is None

    def test_save_overwrites_existing_row(self, session):
        repo = MediasRepository()
        media = repo.create(session, Media(name="A", description="d", supports=["DVD"]))

        saved = repo.save(session, media.id, Media(name="B"))

        assert saved == Media(id=media.id, name="B", description=None, release_date=None, supports=[])
        assert repo.get(session, media.id) == saved

    def test_save_missing_returns_none(self, session):
        assert MediasRepository().save(session, 5, Media(name="B")) is None

    def test_delete(self, session):
        repo = MediasRepository()
        media = repo.create(session, Media(name="A"))

        assert repo.delete(session, media.id) is True
        assert repo.get(session, media.id) is None
        assert repo.delete(session, media.id) is False


def test_unique_constraint_raises_duplicate_error(session):
    repo = UsersRepository()
    repo.create(session, User(email="a@example.com", password="x"))

    with pytest.raises(DuplicateEntityError):
        repo.create(session, User(email="a@example.com", password="y", role=Role.ADMIN))

    # Session is still usable after the rollback
    assert len(repo.list(session)) == 1


def test_loan_natural_key_is_borrower_and_media(session):
    repo = LoansRepository()
    repo.create(session, Loan(borrower_id=1, media_id=2))

    assert repo.get_by_natural_key(session, Loan(borrower_id=1, media_id=2)) is not None
    assert repo.get_by_natural_key(session, Loan(borrower_id=1, media_id=3)) is None


def test_users_get_by_email(session):
    repo = UsersRepository()
    created = repo.create(session, User(email="a@example.com", password="x", role=Role.MEMBER))

    assert repo.get_by_email(session, "a@example.com") == created
    assert repo.get_by_email(session, "b@example.com") is None


class TestStocksRepository:
    """Test the atomic stock adjustments."""

    def test_increment_stops_at_initial_stock(self, session):
        repo = StocksRepository()
        stock = repo.create(session, Stock(media_id=1, initial_stock=2, current_stock=1))

        assert repo.increment(session, stock.id).current_stock == 2
        assert repo.increment(session, stock.id) is None
        assert repo.get(session, stock.id).current_stock == 2

    def test_decrement_stops_at_zero(self, session):
        repo = StocksRepository()
        stock = repo.create(session, Stock(media_id=1, initial_stock=2, current_stock=1))

        assert repo.decrement(session, stock.id).current_stock == 0
        assert repo.decrement(session, stock.id) is None
        assert repo.get(session, stock.id).current_stock == 0

    def test_adjust_missing_returns_none(self, session):
        repo = StocksRepository()
        assert repo.increment(session, 3) is None
        assert repo.decrement(session, 3) is None

    def test_decrement_uses_stored_value_not_a_stale_read(self, session_factory):
        repo = StocksRepository()
        with session_factory() as s:
            stock_id = repo.create(s, Stock(media_id=1, initial_stock=5, current_stock=5)).id

        with session_factory() as reader:
            stale = repo.get(reader, stock_id)
            with session_factory() as other:
                repo.decrement(other, stock_id)
            updated = repo.decrement(reader, stock_id)

        assert stale.current_stock == 5
        assert updated.current_stock == 3


def test_stock_fill_and_empty_flags():
    assert Stock(media_id=1, initial_stock=2, current_stock=2).is_fill()
    assert not Stock(media_id=1, initial_stock=2, current_stock=1).is_fill()
    assert Stock(media_id=1, initial_stock=2, current_stock=0).is_empty()
    assert not Stock(media_id=1, initial_stock=2, current_stock=1).is_empty()
