from typing import Literal

from pydantic import BaseModel, Field

from geotarget.schemas.user import SessionUser, UserProfile


class TargetedAd(BaseModel):
    id: str
    title: str
    ad_type: Literal["campaign", "boosted_post"] = "campaign"
    countries: list[str] | None = None  # None or [] = global


class TargetingDecision(BaseModel):
    outcome: Literal["global", "no_user_country", "match", "no_match"]
    eligible: bool
    matched_target: str | None = None
    matched_rule: str | None = None


class EligibleAdsRequest(BaseModel):
    user: UserProfile | None = None
    session_user: SessionUser | None = None
    ads: list[TargetedAd] = Field(default_factory=list)


class EligibleAd(BaseModel):
    ad: TargetedAd
    decision: TargetingDecision


class EligibleAdsResponse(BaseModel):
    user_country: str | None
    ads: list[EligibleAd]
