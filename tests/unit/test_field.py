from geojsonify.common.field import get_array_value, get_string_value, is_present


def test_get_string_value_trims_and_takes_first_of_list():
    assert get_string_value("  Main Street ") == "Main Street"
    assert get_string_value(["Paris", "Lutetia"]) == "Paris"
    assert get_string_value(12) == "12"


def test_get_string_value_returns_none_for_empty_values():
    assert get_string_value(None) is None
    assert get_string_value("   ") is None
    assert get_string_value([]) is None
    assert get_string_value({}) is None


def test_get_array_value_wraps_scalars():
    assert get_array_value("food") == ["food"]
    assert get_array_value(["food", "retail"]) == ["food", "retail"]
    assert get_array_value(None) == []
    assert get_array_value("") == []


def test_is_present_treats_numbers_as_present_and_bools_as_absent():
    assert is_present(0)
    assert is_present(0.5)
    assert not is_present(True)
    assert not is_present("")
    assert not is_present([])
    assert is_present("x")
