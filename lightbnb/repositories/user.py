"""
User repository for account lookup and registration.
"""

from lightbnb.repositories.base import BaseRepository
from lightbnb.models.user import User
from lightbnb.utils.exceptions import DuplicateResourceError
from typing import Any, Dict, Mapping, Optional
import logging

logger = logging.getLogger(__name__)

GET_USER_WITH_EMAIL = """
    SELECT * FROM users
    WHERE email = $1
"""

GET_USER_WITH_ID = """
    SELECT * FROM users
    WHERE id = $1
"""

ADD_USER = """
    INSERT INTO users (name, email, password)
    VALUES ($1, $2, $3)
    RETURNING *;
"""


class UserRepository(BaseRepository):
    """Repository for users."""

    async def get_user_with_email(self, email: str) -> Optional[Dict[str, Any]]:
        """
        Get a single user given their email.

        Args:
            email: Email address to look up

        Returns:
            User row if found, None otherwise
        """
        return await self._fetch_one("get user by email", GET_USER_WITH_EMAIL, [email])

    async def get_user_with_id(self, user_id: int) -> Optional[Dict[str, Any]]:
        """
        Get a single user given their id.

        Args:
            user_id: Id of the user

        Returns:
            User row if found, None otherwise
        """
        return await self._fetch_one("get user by id", GET_USER_WITH_ID, [user_id])

    async def add_user(self, user: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Add a new user. The password is stored as a bcrypt hash.

        Args:
            user: Mapping with name, email and plain text password

        Returns:
            The inserted user row

        Raises:
            DuplicateResourceError: If the email is already registered
        """
        existing = await self.get_user_with_email(user["email"])
        if existing:
            logger.warning(f"Rejected registration for existing email {user['email']}")
            raise DuplicateResourceError("User", user["email"])

        params = [user["name"], user["email"], User.hash_password(user["password"])]
        created = await self._fetch_one("add user", ADD_USER, params)
        logger.info(f"Created user: {created['email']} (ID: {created['id']})")
        return created
