from pydantic import BaseModel
from typing import Optional
from datetime import datetime

class User(BaseModel):
    id: str
    username: str
    email: str
    password_hash: str
    created_at: Optional[datetime] = None

    model_config = {"frozen": True}

    def public(self) -> dict:
        return {"id": self.id, "username": self.username, "email": self.email}
