from __future__ import annotations

from pydantic import BaseModel


class User(BaseModel):
    type: str = "Employee"
    email: str = ""
