from fastapi import APIRouter, Query

from geotarget.engine.matcher import match_country
from geotarget.geo.countries import COUNTRY_NAME_TO_CODE
from geotarget.geo.normalizer import NormalizedCountry, normalize_country
from geotarget.schemas.geo import CountryResponse, MatchRequest, MatchResponse

router = APIRouter(prefix="/geo", tags=["geo"])


@router.get("/countries", response_model=list[CountryResponse])
def list_countries():
    """List every known country, sorted by name."""
    return [
        CountryResponse(name=name, code=code)
        for name, code in sorted(COUNTRY_NAME_TO_CODE.items())
    ]


@router.get("/normalize", response_model=NormalizedCountry)
def normalize(
    country: str = Query("", description="Country name or ISO alpha-2 code"),
):
    """Normalize a country name or code into its name, code and comparison key."""
    return normalize_country(country)


@router.post("/match", response_model=MatchResponse)
def match(body: MatchRequest):
    """Check a user's country against a target list.

    An empty target list is reported as not targeted; use /ads/eligible
    for global-ad semantics.
    """
    result = match_country(body.user_country, body.targets)
    if result is None:
        return MatchResponse(targeted=False)
    return MatchResponse(targeted=True, matched_target=result["target"], rule=result["rule"])
