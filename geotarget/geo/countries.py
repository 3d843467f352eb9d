"""Canonical country name <-> ISO 3166-1 alpha-2 code table.

Every name and every code must appear exactly once.
Validated at startup via validate_country_table().
"""

import re
from types import MappingProxyType

_COUNTRIES: dict[str, str] = {
    "United States": "US",
    "United Kingdom": "GB",
    "Canada": "CA",
    "Australia": "AU",
    "Germany": "DE",
    "France": "FR",
    "Japan": "JP",
    "South Korea": "KR",
    "Italy": "IT",
    "Spain": "ES",
    "Brazil": "BR",
    "Mexico": "MX",
    "India": "IN",
    "China": "CN",
    "Russia": "RU",
    "Netherlands": "NL",
    "Sweden": "SE",
    "Norway": "NO",
    "Denmark": "DK",
    "Finland": "FI",
    "Poland": "PL",
    "Belgium": "BE",
    "Switzerland": "CH",
    "Austria": "AT",
    "Ireland": "IE",
    "New Zealand": "NZ",
    "Singapore": "SG",
    "Hong Kong": "HK",
    "Taiwan": "TW",
    "Malaysia": "MY",
    "Thailand": "TH",
    "Philippines": "PH",
    "Indonesia": "ID",
    "Vietnam": "VN",
    "South Africa": "ZA",
    "Nigeria": "NG",
    "Egypt": "EG",
    "Kenya": "KE",
    "Morocco": "MA",
    "Argentina": "AR",
    "Chile": "CL",
    "Colombia": "CO",
    "Peru": "PE",
    "Venezuela": "VE",
    "Israel": "IL",
    "Turkey": "TR",
    "Saudi Arabia": "SA",
    "United Arab Emirates": "AE",
    "Qatar": "QA",
    "Kuwait": "KW",
    "Jordan": "JO",
    "Lebanon": "LB",
    "Czech Republic": "CZ",
    "Hungary": "HU",
    "Romania": "RO",
    "Bulgaria": "BG",
    "Croatia": "HR",
    "Serbia": "RS",
    "Slovakia": "SK",
    "Slovenia": "SI",
    "Estonia": "EE",
    "Latvia": "LV",
    "Lithuania": "LT",
    "Greece": "GR",
    "Portugal": "PT",
    "Luxembourg": "LU",
    "Iceland": "IS",
    "Ukraine": "UA",
    "Belarus": "BY",
    "Moldova": "MD",
    "Georgia": "GE",
    "Armenia": "AM",
    "Azerbaijan": "AZ",
    "Kazakhstan": "KZ",
    "Uzbekistan": "UZ",
    "Kyrgyzstan": "KG",
    "Tajikistan": "TJ",
    "Turkmenistan": "TM",
    "Mongolia": "MN",
    "North Korea": "KP",
    "Pakistan": "PK",
    "Bangladesh": "BD",
    "Sri Lanka": "LK",
    "Nepal": "NP",
    "Bhutan": "BT",
    "Maldives": "MV",
    "Afghanistan": "AF",
    "Iran": "IR",
    "Iraq": "IQ",
    "Syria": "SY",
    "Yemen": "YE",
    "Oman": "OM",
    "Bahrain": "BH",
    "Cyprus": "CY",
    "Malta": "MT",
    # Africa
    "Algeria": "DZ",
    "Tunisia": "TN",
    "Libya": "LY",
    "Sudan": "SD",
    "Ethiopia": "ET",
    "Somalia": "SO",
    "Djibouti": "DJ",
    "Eritrea": "ER",
    "Uganda": "UG",
    "Tanzania": "TZ",
    "Rwanda": "RW",
    "Burundi": "BI",
    "Democratic Republic of the Congo": "CD",
    "Republic of the Congo": "CG",
    "Central African Republic": "CF",
    "Chad": "TD",
    "Cameroon": "CM",
    "Equatorial Guinea": "GQ",
    "Gabon": "GA",
    "São Tomé and Príncipe": "ST",
    "Ghana": "GH",
    "Ivory Coast": "CI",
    "Burkina Faso": "BF",
    "Mali": "ML",
    "Niger": "NE",
    "Senegal": "SN",
    "Gambia": "GM",
    "Guinea-Bissau": "GW",
    "Guinea": "GN",
    "Sierra Leone": "SL",
    "Liberia": "LR",
    "Mauritania": "MR",
    "Cape Verde": "CV",
    "Togo": "TG",
    "Benin": "BJ",
    "Zambia": "ZM",
    "Zimbabwe": "ZW",
    "Malawi": "MW",
    "Mozambique": "MZ",
    "Madagascar": "MG",
    "Mauritius": "MU",
    "Seychelles": "SC",
    "Comoros": "KM",
    "Botswana": "BW",
    "Namibia": "NA",
    "Lesotho": "LS",
    "Eswatini": "SZ",
    "Angola": "AO",
    "Uruguay": "UY",
    "Paraguay": "PY",
    "Bolivia": "BO",
    "Ecuador": "EC",
    "Guyana": "GY",
    "Suriname": "SR",
    "French Guiana": "GF",
    # Caribbean and Central America
    "Jamaica": "JM",
    "Cuba": "CU",
    "Haiti": "HT",
    "Dominican Republic": "DO",
    "Puerto Rico": "PR",
    "Trinidad and Tobago": "TT",
    "Barbados": "BB",
    "Bahamas": "BS",
    "Belize": "BZ",
    "Costa Rica": "CR",
    "Panama": "PA",
    "Nicaragua": "NI",
    "Honduras": "HN",
    "El Salvador": "SV",
    "Guatemala": "GT",
    # Pacific
    "Fiji": "FJ",
    "Papua New Guinea": "PG",
    "Solomon Islands": "SB",
    "Vanuatu": "VU",
    "New Caledonia": "NC",
    "French Polynesia": "PF",
    "Samoa": "WS",
    "Tonga": "TO",
    "Kiribati": "KI",
    "Tuvalu": "TV",
    "Nauru": "NR",
    "Palau": "PW",
    "Marshall Islands": "MH",
    "Micronesia": "FM",
    # Balkans and microstates
    "Albania": "AL",
    "Bosnia and Herzegovina": "BA",
    "Montenegro": "ME",
    "North Macedonia": "MK",
    "Kosovo": "XK",
    "Andorra": "AD",
    "Monaco": "MC",
    "San Marino": "SM",
    "Vatican City": "VA",
    "Liechtenstein": "LI",
}

_CODE_PATTERN = re.compile(r"^[A-Z]{2}$")


def _build_code_to_name(name_to_code: dict[str, str]) -> dict[str, str]:
    """Build the reverse lookup: code -> canonical name."""
    return {code: name for name, code in name_to_code.items()}


def _build_name_index(name_to_code: dict[str, str]) -> dict[str, str]:
    """Build a case-insensitive lookup: casefolded name -> canonical name."""
    return {name.casefold(): name for name in name_to_code}


COUNTRY_NAME_TO_CODE = MappingProxyType(_COUNTRIES)
COUNTRY_CODE_TO_NAME = MappingProxyType(_build_code_to_name(_COUNTRIES))
_NAME_INDEX = MappingProxyType(_build_name_index(_COUNTRIES))


def canonical_name(name: str) -> str | None:
    """Return the table spelling of a country name, ignoring case, or None."""
    return _NAME_INDEX.get(name.strip().casefold())


def code_for_name(name: str) -> str | None:
    """Return the ISO code for a country name (any casing), or None."""
    canonical = canonical_name(name)
    if canonical is None:
        return None
    return COUNTRY_NAME_TO_CODE[canonical]


def name_for_code(code: str) -> str | None:
    """Return the canonical name for an ISO code (any casing), or None."""
    return COUNTRY_CODE_TO_NAME.get(code.strip().upper())


def validate_country_table(entries: dict[str, str] | None = None) -> None:
    """Raise ValueError on a malformed code, a duplicate code or a duplicate name."""
    if entries is None:
        entries = dict(COUNTRY_NAME_TO_CODE)

    seen_codes: dict[str, str] = {}
    seen_names: dict[str, str] = {}

    for name, code in entries.items():
        if not _CODE_PATTERN.match(code):
            raise ValueError(f"Malformed country code '{code}' for '{name}'")
        if len(name.strip()) <= 2:
            raise ValueError(f"Country name '{name}' is too short to tell apart from a code")
        if code in seen_codes:
            raise ValueError(
                f"Duplicate country code '{code}': found for '{seen_codes[code]}' and '{name}'"
            )
        folded = name.casefold()
        if folded in seen_names:
            raise ValueError(
                f"Duplicate country name '{name}': already present as '{seen_names[folded]}'"
            )
        seen_codes[code] = name
        seen_names[folded] = name
