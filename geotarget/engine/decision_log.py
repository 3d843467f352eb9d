import logging

logger = logging.getLogger(__name__)


def log_targeting_decision(
    ad_title: str,
    ad_countries: list[str] | None,
    user_country: str | None,
    matched: bool,
) -> None:
    """Log why an ad was shown to or hidden from a user."""
    if not ad_countries:
        logger.info('Ad "%s" is GLOBAL - showing to all users', ad_title)
    elif not user_country or not user_country.strip():
        logger.info('Ad "%s" is targeted but user has no country - hiding', ad_title)
    else:
        logger.info(
            'Ad "%s" targets [%s] - user country: %s - match: %s',
            ad_title, ", ".join(ad_countries), user_country, matched,
        )
