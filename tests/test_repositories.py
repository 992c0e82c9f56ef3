"""
Tests for repository classes.
Checks the statements and positional parameters sent to the database handle.
"""

import pytest

from lightbnb.models.user import User
from lightbnb.queries.builder import FilterCriteria
from lightbnb.repositories import PropertyRepository, ReservationRepository, UserRepository
from lightbnb.repositories.property import ADD_PROPERTY, PROPERTY_COLUMNS
from lightbnb.repositories.reservation import GET_ALL_RESERVATIONS
from lightbnb.repositories.user import ADD_USER, GET_USER_WITH_EMAIL, GET_USER_WITH_ID
from lightbnb.utils.exceptions import DuplicateResourceError
from tests.conftest import FakeDatabase, PropertyFactory, ReservationFactory, UserFactory


class TestUserRepository:
    """Test user lookups and registration."""

    @pytest.mark.asyncio
    async def test_get_user_with_email(self, user_repository: UserRepository, fake_db: FakeDatabase):
        row = UserFactory.create_user_row()
        fake_db.queue([row])

        user = await user_repository.get_user_with_email("devin@example.com")

        assert user == row
        assert fake_db.calls == [(GET_USER_WITH_EMAIL, ["devin@example.com"])]

    @pytest.mark.asyncio
    async def test_get_user_with_email_not_found(self, user_repository: UserRepository):
        assert await user_repository.get_user_with_email("nobody@example.com") is None

    @pytest.mark.asyncio
    async def test_get_user_with_id(self, user_repository: UserRepository, fake_db: FakeDatabase):
        fake_db.queue([UserFactory.create_user_row(user_id=7)])

        user = await user_repository.get_user_with_id(7)

        assert user["id"] == 7
        assert fake_db.calls == [(GET_USER_WITH_ID, [7])]

    @pytest.mark.asyncio
    async def test_add_user_hashes_password(self, user_repository: UserRepository, fake_db: FakeDatabase):
        fake_db.queue([], [UserFactory.create_user_row(user_id=3)])

        created = await user_repository.add_user(UserFactory.create_user_data(password="secret"))

        assert created["id"] == 3
        lookup, insert = fake_db.calls
        assert lookup == (GET_USER_WITH_EMAIL, ["devin@example.com"])
        query, params = insert
        assert query == ADD_USER
        assert params[:2] == ["Devin Sanders", "devin@example.com"]
        assert params[2] != "secret"
        assert User.verify_hashed_password("secret", params[2])

    @pytest.mark.asyncio
    async def test_add_user_duplicate_email(self, user_repository: UserRepository, fake_db: FakeDatabase):
        fake_db.queue([UserFactory.create_user_row()])

        with pytest.raises(DuplicateResourceError):
            await user_repository.add_user(UserFactory.create_user_data())

        assert len(fake_db.calls) == 1

    @pytest.mark.asyncio
    async def test_database_errors_propagate(self, user_repository: UserRepository, fake_db: FakeDatabase):
        fake_db.error = RuntimeError("connection reset")

        with pytest.raises(RuntimeError, match="connection reset"):
            await user_repository.get_user_with_id(1)


class TestReservationRepository:

    @pytest.mark.asyncio
    async def test_get_all_reservations(self, reservation_repository: ReservationRepository, fake_db: FakeDatabase):
        rows = [ReservationFactory.create_reservation_row(reservation_id=i) for i in (1, 2)]
        fake_db.queue(rows)

        reservations = await reservation_repository.get_all_reservations(4)

        assert reservations == rows
        assert fake_db.calls == [(GET_ALL_RESERVATIONS, [4, 10])]

    @pytest.mark.asyncio
    async def test_get_all_reservations_custom_limit(self, reservation_repository: ReservationRepository, fake_db: FakeDatabase):
        await reservation_repository.get_all_reservations(4, limit=3)
        assert fake_db.calls[0][1] == [4, 3]


class TestPropertyRepository:

    @pytest.mark.asyncio
    async def test_get_all_properties_from_criteria(self, property_repository: PropertyRepository, fake_db: FakeDatabase):
        rows = [PropertyFactory.create_property_row(average_rating=4.5)]
        fake_db.queue(rows)

        result = await property_repository.get_all_properties(FilterCriteria(city="Sotboske", minimum_rating=4), limit=5)

        assert result == rows
        query, params = fake_db.calls[0]
        assert "properties.city LIKE $1" in query
        assert "HAVING avg(property_reviews.rating) >= $2" in query
        assert params == ["%Sotboske%", 4, 5]

    @pytest.mark.asyncio
    async def test_get_all_properties_from_mapping(self, property_repository: PropertyRepository, fake_db: FakeDatabase):
        await property_repository.get_all_properties({"owner_id": "5", "minimum_price_per_night": "100"})

        query, params = fake_db.calls[0]
        assert "WHERE properties.owner_id = $1" in query
        assert "AND properties.cost_per_night > $2" in query
        assert params == [5, 100, 10]

    @pytest.mark.asyncio
    async def test_get_all_properties_without_options(self, property_repository: PropertyRepository, fake_db: FakeDatabase):
        result = await property_repository.get_all_properties()

        assert result == []
        query, params = fake_db.calls[0]
        assert "WHERE" not in query
        assert params == [10]

    @pytest.mark.asyncio
    async def test_add_property(self, property_repository: PropertyRepository, fake_db: FakeDatabase):
        data = PropertyFactory.create_property_data(owner_id=2)
        fake_db.queue([PropertyFactory.create_property_row(property_id=9, owner_id=2)])

        created = await property_repository.add_property(data)

        assert created["id"] == 9
        query, params = fake_db.calls[0]
        assert query == ADD_PROPERTY
        assert "$14" in query
        assert params == [data[column] for column in PROPERTY_COLUMNS]
        assert params[0] == 2
