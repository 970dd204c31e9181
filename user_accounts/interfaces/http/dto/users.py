from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class UserDTO(BaseModel):
    """Public view of an account; the password hash is never part of it."""

    id: int
    username: str
    email: str
    profile_picture: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
