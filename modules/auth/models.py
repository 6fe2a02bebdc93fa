"""
Authentication module data models.

UserRecord is the structured view of one row in the credential table.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from shared.models import UserIdentity
from .exceptions import InvalidUserRecordError

# Column names in the credential table
ID_COLUMN = "id"
EMAIL_COLUMN = "email"
PASSWORD_HASH_COLUMN = "password_hash"
NAME_COLUMN = "name"
ROLE_COLUMN = "role"

REQUIRED_COLUMNS = (ID_COLUMN, EMAIL_COLUMN)


class UserRecord(BaseModel):
    """
    One user row from the record store.

    Only ``id`` and ``email`` are required. A record without a password
    hash exists but cannot sign in.
    """

    id: str = Field(..., description="Record identifier")
    email: str = Field(..., description="Email address (unique per store)")
    password_hash: Optional[str] = Field(None, description="bcrypt hash")
    name: Optional[str] = Field(None, description="Display name")
    role: Optional[str] = Field(None, description="User role")

    model_config = {"frozen": True}

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "UserRecord":
        """
        Build a record from a raw table row.

        Raises:
            InvalidUserRecordError: If ``id`` or ``email`` is absent or empty
        """
        record_id = str(row.get(ID_COLUMN) or "")
        for column in REQUIRED_COLUMNS:
            if not row.get(column):
                raise InvalidUserRecordError(column, record_id)

        return cls(
            id=record_id,
            email=str(row[EMAIL_COLUMN]),
            password_hash=row.get(PASSWORD_HASH_COLUMN) or None,
            name=row.get(NAME_COLUMN) or None,
            role=row.get(ROLE_COLUMN) or None,
        )

    def to_identity(self) -> UserIdentity:
        """Convert to the identity stored in the session."""
        return UserIdentity(
            id=self.id,
            email=self.email,
            name=self.name or self.email,
            role=self.role or "user",
        )
