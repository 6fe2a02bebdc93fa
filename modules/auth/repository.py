"""
User repository for the credential table.

Read-only: records are created and edited outside this application.
"""

from typing import Optional

from shared.repository import BaseRepository
from .models import UserRecord, EMAIL_COLUMN, ID_COLUMN


class UserRepository(BaseRepository[UserRecord]):
    """
    Repository for user credential records.

    Lookups return at most one record. Client errors propagate to the
    caller, which decides how to report them.
    """

    def find_by_email(self, email: str) -> Optional[UserRecord]:
        """
        Find the first record whose email equals ``email`` exactly.

        Returns:
            UserRecord, or None if no row matches.
        """
        result = self._query().eq(EMAIL_COLUMN, email).limit(1).execute()
        if not result.data:
            return None
        return UserRecord.from_row(result.data[0])

    def get_by_id(self, record_id: str) -> Optional[UserRecord]:
        """
        Get a record by its identifier.

        Returns:
            UserRecord, or None if not found.
        """
        result = self._query().eq(ID_COLUMN, record_id).limit(1).execute()
        if not result.data:
            return None
        return UserRecord.from_row(result.data[0])
