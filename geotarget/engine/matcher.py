"""Country target matching.

A user matches a target list when any target satisfies one of these rules,
tried in order:

1. exact                      normalized strings are equal
2. code                       both sides have a code and the codes are equal
3. name                       both sides have a name, equal ignoring case
4. user_name_to_target_code   user's name maps to the target's code
5. user_code_to_target_name   user's code maps to the target's name

An empty target list never matches here. Whether such an ad is "global" is
decided by the eligibility layer, not by the matcher.
"""

from collections.abc import Iterable
from typing import TypedDict

from geotarget.geo.countries import code_for_name, name_for_code
from geotarget.geo.normalizer import NormalizedCountry, normalize_country

RULE_EXACT = "exact"
RULE_CODE = "code"
RULE_NAME = "name"
RULE_USER_NAME_TO_TARGET_CODE = "user_name_to_target_code"
RULE_USER_CODE_TO_TARGET_NAME = "user_code_to_target_name"


class MatchResult(TypedDict):
    target: str
    rule: str


def _same_name(a: str | None, b: str | None) -> bool:
    return a is not None and b is not None and a.casefold() == b.casefold()


def match_rule(user: NormalizedCountry, target: NormalizedCountry) -> str | None:
    """Return the first rule under which two normalized countries match, or None."""
    if not user.normalized or not target.normalized:
        return None

    if user.normalized == target.normalized:
        return RULE_EXACT

    if user.code and target.code and user.code == target.code:
        return RULE_CODE

    if _same_name(user.name, target.name):
        return RULE_NAME

    if user.name and target.code:
        if code_for_name(user.name) == target.code:
            return RULE_USER_NAME_TO_TARGET_CODE

    if user.code and target.name:
        if _same_name(name_for_code(user.code), target.name):
            return RULE_USER_CODE_TO_TARGET_NAME

    return None


def match_country(
    user_country: str | None,
    targets: Iterable[str] | None,
) -> MatchResult | None:
    """Find the first target the user's country matches.

    Returns the matching target (as given) and the rule that fired,
    or None when nothing matches or either side is missing.
    """
    if not user_country or not targets:
        return None

    user = normalize_country(user_country)
    if not user.normalized:
        return None

    for target_country in targets:
        rule = match_rule(user, normalize_country(target_country))
        if rule is not None:
            return {"target": target_country, "rule": rule}

    return None


def is_country_targeted(user_country: str | None, targets: Iterable[str] | None) -> bool:
    """Return True if the user's country is in the target list."""
    return match_country(user_country, targets) is not None
