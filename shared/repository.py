"""
Base repository class for record store access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and the table each repository reads from.
"""

from typing import TypeVar, Generic
from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Table name via self._table
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle row-to-model mapping internally.

    Example:
        class UserRepository(BaseRepository[UserRecord]):
            def get_by_id(self, record_id: str) -> Optional[UserRecord]:
                result = self._query().eq("id", record_id).limit(1).execute()
                if not result.data:
                    return None
                return UserRecord.from_row(result.data[0])
    """

    def __init__(self, db: Client, table: str) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
            table: Name of the table this repository reads.
        """
        self._db = db
        self._table = table

    @property
    def table(self) -> str:
        """Name of the backing table."""
        return self._table

    def _query(self):
        """Start a select-all query on the backing table."""
        return self._db.table(self._table).select("*")
