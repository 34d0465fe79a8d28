from geojsonify.common import iso3166


def test_info_maps_alpha3_to_alpha2():
    assert iso3166.info("USA").alpha2 == "US"
    assert iso3166.info("gbr").alpha2 == "GB"
    assert iso3166.info("JEY").alpha2 == "JE"


def test_info_accepts_alpha2():
    country = iso3166.info("nz")
    assert country.alpha2 == "NZ"
    assert country.alpha3 == "NZL"


def test_info_includes_kosovo_user_assigned_code():
    assert iso3166.info("XKX").alpha2 == "XK"


def test_info_returns_none_for_unknown_or_malformed_codes():
    assert iso3166.info("XYZ") is None
    assert iso3166.info("") is None
    assert iso3166.info("UNITED") is None
    assert iso3166.info(None) is None
    assert iso3166.info(["USA"]) is None


def test_table_is_one_to_one():
    assert len(iso3166.ALPHA2_TO_ALPHA3) == len(iso3166.ALPHA3_TO_ALPHA2)
