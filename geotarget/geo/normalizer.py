from pydantic import BaseModel

from geotarget.geo.countries import COUNTRY_CODE_TO_NAME, canonical_name, code_for_name


class NormalizedCountry(BaseModel):
    name: str | None = None
    code: str | None = None
    normalized: str = ""

    model_config = {"frozen": True}


def normalize_country(raw: str | None) -> NormalizedCountry:
    """Normalize a country name or ISO alpha-2 code for comparison.

    Two-character input is treated as a code and uppercased; the code is kept
    even when the table does not know it. Anything else is treated as a name,
    looked up ignoring case. Unknown values leave name/code empty rather than
    raising, and `normalized` (trimmed, lowercased) is always usable.
    """
    if not raw:
        return NormalizedCountry()

    cleaned = raw.strip()
    normalized = cleaned.lower()
    if not cleaned:
        return NormalizedCountry()

    if len(cleaned) == 2:
        code = cleaned.upper()
        return NormalizedCountry(
            name=COUNTRY_CODE_TO_NAME.get(code),
            code=code,
            normalized=normalized,
        )

    return NormalizedCountry(
        name=canonical_name(cleaned) or cleaned,
        code=code_for_name(cleaned),
        normalized=normalized,
    )
