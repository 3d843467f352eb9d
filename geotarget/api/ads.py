from fastapi import APIRouter

from geotarget.engine.eligibility import evaluate_ads
from geotarget.geo.user_country import resolve_user_country
from geotarget.schemas.ads import EligibleAd, EligibleAdsRequest, EligibleAdsResponse

router = APIRouter(prefix="/ads", tags=["ads"])


@router.post("/eligible", response_model=EligibleAdsResponse)
def eligible_ads(body: EligibleAdsRequest):
    """Filter the supplied ads down to those the user may see."""
    user_country = resolve_user_country(body.user, body.session_user)
    decisions = evaluate_ads(body.ads, user_country)
    return EligibleAdsResponse(
        user_country=user_country,
        ads=[EligibleAd(ad=ad, decision=decision) for ad, decision in decisions if decision.eligible],
    )
