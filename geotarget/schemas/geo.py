from pydantic import BaseModel


class CountryResponse(BaseModel):
    name: str
    code: str


class MatchRequest(BaseModel):
    user_country: str | None = None
    targets: list[str] = []


class MatchResponse(BaseModel):
    targeted: bool
    matched_target: str | None = None
    rule: str | None = None
