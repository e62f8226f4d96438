# app/models/users.py

from typing import Any, Optional

from pydantic import BaseModel


class User(BaseModel):
    id: Any
    name: Optional[str] = None
    email: Optional[str] = None

    class Config:
        from_attributes = True
        # columns beyond id/name/email pass through untouched
        extra = "allow"
