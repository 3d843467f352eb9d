"""Resolve which country a user should be targeted as.

Precedence, first non-blank value wins:
    1. the user's profile field
    2. the country attached to the session user
    3. the static demo-account table, keyed by user id
    4. None (the user only sees global ads)
"""

import logging
from types import MappingProxyType

from geotarget.config import settings
from geotarget.schemas.user import SessionUser, UserProfile

logger = logging.getLogger(__name__)

DEMO_USER_COUNTRIES = MappingProxyType({
    "demo-admin_001": "United Kingdom",
    "demo-user_001": "United States",
    "demo-creator_001": "Canada",
    "demo-free_001": "Australia",
    "demo-publisher_001": "Germany",
})


def _present(value: str | None) -> str | None:
    if value and value.strip():
        return value
    return None


def resolve_user_country(
    user: UserProfile | None,
    session_user: SessionUser | None = None,
) -> str | None:
    if user is not None and _present(user.country):
        return user.country

    if session_user is not None and _present(session_user.country):
        return session_user.country

    if settings.DEMO_COUNTRY_FALLBACK and user is not None and user.id:
        demo_country = DEMO_USER_COUNTRIES.get(user.id)
        if demo_country:
            logger.debug("Using demo country %s for user %s", demo_country, user.id)
            return demo_country

    return None
