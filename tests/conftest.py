"""
Test configuration and fixtures for LightBnB.
Provides a recording in-memory database handle, repository fixtures, and row factories.
"""

import pytest
from collections import deque
from datetime import date
from typing import Any, Dict, List, Optional, Sequence
from fastapi.testclient import TestClient

from lightbnb.config import Settings
from lightbnb.main import create_app
from lightbnb.repositories import PropertyRepository, ReservationRepository, UserRepository


class FakeDatabase:
    """
    Stand-in for lightbnb.database.Database.
    Records every (query, params) call and returns queued result sets in order.
    """

    def __init__(self):
        self.calls: List[tuple] = []
        self.results: deque = deque()
        self.error: Optional[Exception] = None
        self.healthy = True
        self.disposed = False

    def queue(self, *result_sets: List[Dict[str, Any]]) -> None:
        self.results.extend(result_sets)

    async def fetch_all(self, query: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        self.calls.append((query, list(params)))
        if self.error:
            raise self.error
        return self.results.popleft() if self.results else []

    async def fetch_one(self, query: str, params: Sequence[Any] = ()) -> Optional[Dict[str, Any]]:
        rows = await self.fetch_all(query, params)
        return rows[0] if rows else None

    async def ping(self) -> bool:
        return self.healthy

    async def create_tables(self) -> None:
        self.calls.append(("create_tables", []))

    async def drop_tables(self) -> None:
        self.calls.append(("drop_tables", []))

    async def dispose(self) -> None:
        self.disposed = True


@pytest.fixture
def fake_db() -> FakeDatabase:
    """Create an empty fake database."""
    return FakeDatabase()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(environment="testing", log_level="DEBUG")


@pytest.fixture
def client(fake_db: FakeDatabase, test_settings: Settings) -> TestClient:
    """Create a test client bound to the fake database."""
    app = create_app(settings=test_settings, database=fake_db)
    with TestClient(app) as test_client:
        yield test_client


# Repository fixtures
@pytest.fixture
def user_repository(fake_db: FakeDatabase) -> UserRepository:
    return UserRepository(fake_db)


@pytest.fixture
def property_repository(fake_db: FakeDatabase) -> PropertyRepository:
    return PropertyRepository(fake_db)


@pytest.fixture
def reservation_repository(fake_db: FakeDatabase) -> ReservationRepository:
    return ReservationRepository(fake_db)


# Row factories
class UserFactory:
    """Factory for user rows and payloads."""

    @staticmethod
    def create_user_data(
        name: str = "Devin Sanders",
        email: str = "devin@example.com",
        password: str = "password"
    ) -> dict:
        return {"name": name, "email": email, "password": password}

    @staticmethod
    def create_user_row(user_id: int = 1, **overrides) -> dict:
        row = {
            "id": user_id,
            "name": "Devin Sanders",
            "email": "devin@example.com",
            "password": "$2b$12$hashedpasswordvalue",
        }
        row.update(overrides)
        return row


class PropertyFactory:
    """Factory for property rows and payloads."""

    @staticmethod
    def create_property_data(owner_id: int = 1, **overrides) -> dict:
        data = {
            "owner_id": owner_id,
            "title": "Speed lamp",
            "description": "description",
            "thumbnail_photo_url": "https://images.example.com/thumb.jpg",
            "cover_photo_url": "https://images.example.com/cover.jpg",
            "cost_per_night": 93061,
            "street": "536 Namsub Highway",
            "city": "Sotboske",
            "province": "Quebec",
            "post_code": "28142",
            "country": "Canada",
            "parking_spaces": 6,
            "number_of_bathrooms": 4,
            "number_of_bedrooms": 8,
        }
        data.update(overrides)
        return data

    @staticmethod
    def create_property_row(property_id: int = 1, average_rating: Optional[float] = None, **overrides) -> dict:
        row = PropertyFactory.create_property_data(**overrides)
        row.update({"id": property_id, "active": True})
        if average_rating is not None:
            row["average_rating"] = average_rating
        return row


class ReservationFactory:
    """Factory for joined reservation rows."""

    @staticmethod
    def create_reservation_row(reservation_id: int = 1, guest_id: int = 1, property_id: int = 1) -> dict:
        row = PropertyFactory.create_property_row(property_id=property_id, average_rating=4.2)
        row.update({
            "id": reservation_id,
            "guest_id": guest_id,
            "property_id": property_id,
            "start_date": date(2018, 9, 11),
            "end_date": date(2018, 9, 26),
        })
        return row
