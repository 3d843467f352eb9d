import pytest

from geotarget.geo.countries import (
    COUNTRY_CODE_TO_NAME,
    COUNTRY_NAME_TO_CODE,
    canonical_name,
    code_for_name,
    name_for_code,
    validate_country_table,
)


def test_table_is_bidirectional():
    assert len(COUNTRY_NAME_TO_CODE) == len(COUNTRY_CODE_TO_NAME)
    for name, code in COUNTRY_NAME_TO_CODE.items():
        assert COUNTRY_CODE_TO_NAME[code] == name


def test_table_covers_most_countries():
    assert len(COUNTRY_NAME_TO_CODE) > 180


def test_table_is_read_only():
    with pytest.raises(TypeError):
        COUNTRY_NAME_TO_CODE["Atlantis"] = "AX"  # type: ignore[index]
    with pytest.raises(TypeError):
        COUNTRY_CODE_TO_NAME["AX"] = "Atlantis"  # type: ignore[index]


def test_lookups_ignore_case():
    assert canonical_name("  united KINGDOM ") == "United Kingdom"
    assert code_for_name("germany") == "DE"
    assert name_for_code("de") == "Germany"


def test_unknown_lookups():
    assert canonical_name("Atlantis") is None
    assert code_for_name("Atlantis") is None
    assert name_for_code("ZZ") is None


def test_shipped_table_is_valid():
    # Should not raise
    validate_country_table()


def test_duplicate_code_rejected():
    with pytest.raises(ValueError, match="Duplicate country code 'US'"):
        validate_country_table({"United States": "US", "America": "US"})


def test_duplicate_name_rejected():
    with pytest.raises(ValueError, match="Duplicate country name"):
        validate_country_table({"Canada": "CA", "CANADA": "CX"})


def test_malformed_code_rejected():
    with pytest.raises(ValueError, match="Malformed country code"):
        validate_country_table({"Germany": "DEU"})
    with pytest.raises(ValueError, match="Malformed country code"):
        validate_country_table({"Germany": "de"})
