"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field, model_validator


class UserIdentity(BaseModel):
    """
    Represents a signed-in user.

    Rebuilt from the record store on every successful login and kept in
    the session for the rest of the browser session. Payment links are
    tagged with ``id`` so they can be listed per user later.
    """

    id: str = Field(..., description="Record store identifier")
    email: str = Field(..., description="User's email address")
    name: str = Field(default="", description="Display name (defaults to email)")
    role: str = Field(default="user", description="User role")

    model_config = {
        "frozen": True,
        "extra": "ignore",  # Old session payloads may carry extra keys
    }

    @model_validator(mode="before")
    @classmethod
    def _default_name_to_email(cls, data):
        if isinstance(data, dict) and not data.get("name"):
            data = {**data, "name": data.get("email", "")}
        return data
