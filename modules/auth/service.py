"""
Authentication service implementation.

Checks credentials against user records kept in the hosted record store.
"""

import asyncio
import logging
from typing import Optional

from shared.config import get_settings
from shared.database import get_supabase_client
from shared.models import UserIdentity

from .interfaces import IAuthService
from .repository import UserRepository
from .passwords import verify_password
from .exceptions import AuthServiceUnavailableError, InvalidUserRecordError

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Looks users up by email in the credential table and verifies the
    stored bcrypt hash.
    """

    def __init__(self, repository: Optional[UserRepository] = None):
        if repository is None:
            repository = UserRepository(get_supabase_client(), get_settings().users_table)
        self._users = repository

    async def authenticate(self, email: str, password: str) -> Optional[UserIdentity]:
        """
        Verify an email/password pair.

        "No such email", "no hash on record" and "wrong password" all
        return None. Store failures raise instead.
        """
        try:
            record = await asyncio.to_thread(self._users.find_by_email, email)
        except InvalidUserRecordError:
            raise
        except Exception as e:
            logger.exception("Record store lookup failed for login")
            raise AuthServiceUnavailableError(str(e)) from e

        if record is None:
            return None

        if not record.password_hash:
            logger.warning("User record %s has no password hash", record.id)
            return None

        valid = await asyncio.to_thread(verify_password, password, record.password_hash)
        if not valid:
            return None

        return record.to_identity()

    async def get_user_by_id(self, user_id: str) -> Optional[UserIdentity]:
        """
        Look up a user by record identifier.

        Any store error or malformed row is logged and reported as not found.
        """
        try:
            record = await asyncio.to_thread(self._users.get_by_id, user_id)
        except Exception:
            logger.exception("Record store lookup failed for user %s", user_id)
            return None

        if record is None:
            return None
        return record.to_identity()

