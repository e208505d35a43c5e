# inventory/api/v1/schemas/auth.py
from pydantic import BaseModel
from typing import Optional

from inventory.domain.models.user import User

class RegisterIn(BaseModel):
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

class LoginIn(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

class UserOut(BaseModel):
    id: str
    username: str
    email: str

    @classmethod
    def from_domain(cls, user: User) -> "UserOut":
        return cls(**user.public())

class AuthEnvelope(BaseModel):
    success: bool = True
    message: Optional[str] = None
    token: str
    user: UserOut
