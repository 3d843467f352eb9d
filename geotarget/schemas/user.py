from pydantic import BaseModel


class UserProfile(BaseModel):
    id: str | None = None
    country: str | None = None


class SessionUser(BaseModel):
    country: str | None = None
