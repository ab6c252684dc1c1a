import uuid
from typing import Literal

from pydantic import BaseModel


class AuthUser(BaseModel):
    """
    The caller as identified by request headers.

    The identifier is trusted as given; nothing here verifies it.
    """

    user_id: uuid.UUID
    role: Literal["admin", "user", "delivery_boy"] = "user"

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"
