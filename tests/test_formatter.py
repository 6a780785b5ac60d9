import pytest

from country_registry import formatter
from country_registry.resolver import from_alpha2, from_str
from country_registry.table import get_table


def test_display_styles():
    us = from_alpha2("US")
    assert formatter.display(us) == "The United States Of America"
    assert str(us) == formatter.display(us, "name")
    assert formatter.display(us, "name_alpha2") == "The United States Of America (US)"
    assert formatter.display(us, "compact") == "TheUnitedStatesOfAmerica"


def test_display_unknown_style():
    with pytest.raises(ValueError):
        formatter.display(from_alpha2("US"), "fancy")


def test_display_forms_parse_back():
    for r in get_table().all():
        assert from_str(formatter.display(r)) == r
        assert from_str(formatter.display(r, "compact")) == r


def test_projections():
    al = from_alpha2("AL")
    assert formatter.numeric_code(al) == "008"
    assert formatter.alpha2(al) == "AL"
    assert formatter.alpha3(al) == "ALB"
    assert formatter.long_name(al) == "Albania"
    assert formatter.aliases(al) == ()
    gb = from_alpha2("GB")
    assert formatter.aliases(gb)[:2] == ("England", "Scotland")


def test_numeric_code_always_three_chars():
    for r in get_table().all():
        code = formatter.numeric_code(r)
        assert len(code) == 3
        assert int(code) == r.numeric_code


def test_describe():
    text = formatter.describe(from_alpha2("NL"))
    assert text.startswith("Country { code: 528, value: 528, alpha2: NL, alpha3: NLD")
    assert "aliases: [Netherlands, Holland]" in text


def test_records_sort_by_long_name():
    names = [r.long_name for r in sorted(get_table().all())]
    assert names == sorted(names)
