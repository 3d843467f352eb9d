"""Ad eligibility by geo-targeting.

An ad with no target countries is global and shown to everyone, including
users with no known country. A targeted ad is shown only when the user's
country matches one of its targets.
"""

import logging

from geotarget.config import settings
from geotarget.engine.decision_log import log_targeting_decision
from geotarget.engine.matcher import match_country
from geotarget.schemas.ads import TargetedAd, TargetingDecision

logger = logging.getLogger(__name__)


def decide_targeting(ad_countries: list[str] | None, user_country: str | None) -> TargetingDecision:
    """Decide whether a user is eligible for an ad with the given target list."""
    if not ad_countries:
        return TargetingDecision(outcome="global", eligible=True)

    if not user_country or not user_country.strip():
        return TargetingDecision(outcome="no_user_country", eligible=False)

    match = match_country(user_country, ad_countries)
    if match is None:
        return TargetingDecision(outcome="no_match", eligible=False)

    return TargetingDecision(
        outcome="match",
        eligible=True,
        matched_target=match["target"],
        matched_rule=match["rule"],
    )


def evaluate_ads(
    ads: list[TargetedAd],
    user_country: str | None,
) -> list[tuple[TargetedAd, TargetingDecision]]:
    """Decide every ad for one user, keeping the input order."""
    results: list[tuple[TargetedAd, TargetingDecision]] = []
    for ad in ads:
        decision = decide_targeting(ad.countries, user_country)
        if settings.GEO_DECISION_LOGGING:
            log_targeting_decision(ad.title, ad.countries, user_country, decision.eligible)
        results.append((ad, decision))
    return results


def filter_eligible_ads(ads: list[TargetedAd], user_country: str | None) -> list[TargetedAd]:
    """Return the ads the user is eligible to see, in input order."""
    eligible = [ad for ad, decision in evaluate_ads(ads, user_country) if decision.eligible]
    logger.info(
        "Geo-targeting kept %d of %d ads (user country: %s)",
        len(eligible), len(ads), user_country or "not set",
    )
    return eligible
