"""User Accounts — authentication and account creation over a UserRepository.

Invariants:
    - Blank email or password is rejected before the repository is touched
    - Passwords are compared and stored only as SHA-256 lowercase hex digests
    - A duplicate email never reaches repository.create
    - Failures raise typed CampusErrors; status mapping happens at the API boundary
"""

import logging

from campus_api.core.domain_types import UserId
from campus_api.core.errors import (
    BlankCredentialsError, DuplicateEmailError,
    InvalidCredentialsError, UserNotFoundError,
)
from campus_api.core.password_digest import hash_password, password_matches
from campus_api.core.repository_protocols import UserRepository

logger = logging.getLogger(__name__)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class UserAccounts:
    """Account operations for one request."""

    def __init__(self, users: UserRepository):
        self._users = users

    async def authenticate(self, email_address: str, password: str) -> UserId:
        """Return the user's id when the password digest matches."""
        if _is_blank(email_address) or _is_blank(password):
            raise BlankCredentialsError()

        user = await self._users.find_by_email_address(email_address)
        if user is None:
            raise UserNotFoundError(email_address)

        if not password_matches(password, user.password):
            logger.warning(
                "Authentication failed: password mismatch",
                extra={"user_id": user.id},
            )
            raise InvalidCredentialsError()

        logger.info("User authenticated", extra={"user_id": user.id})
        return UserId(user.id)

    async def create_user(
        self, first_name: str, last_name: str, email_address: str, password: str,
    ) -> UserId:
        """Register a new account and return its id."""
        existing = await self._users.find_by_email_address(email_address)
        if existing is not None:
            raise DuplicateEmailError(email_address)

        user_id = await self._users.create({
            "first_name": first_name,
            "last_name": last_name,
            "email_address": email_address,
            "password": hash_password(password),
        })
        logger.info("User created", extra={"user_id": user_id})
        return user_id
