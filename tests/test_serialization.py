import json

import pytest
from pydantic import ValidationError

from country_registry import serialization
from country_registry.errors import CountryNotFound, TableIntegrityError
from country_registry.models import CountryRecord
from country_registry.resolver import from_alpha2
from country_registry.table import get_table


def test_json_round_trip_every_record():
    for r in get_table().all():
        assert serialization.from_json(serialization.to_json(r)) == r
        assert serialization.from_dict(serialization.to_dict(r)) == r


def test_json_fields():
    data = json.loads(serialization.to_json(from_alpha2("US")))
    assert list(data) == list(serialization.FIELDS)
    assert data["code"] == "840"
    assert data["value"] == 840
    assert data["alpha3"] == "USA"
    assert data["aliases"] == ["America", "United States", "United States Of America"]


def test_non_ascii_survives():
    tw = from_alpha2("TW")
    text = serialization.to_json(tw)
    assert "台灣" in text
    assert serialization.from_json(text).aliases == tw.aliases


def test_compact_round_trip():
    for r in get_table().all():
        assert serialization.from_compact(serialization.to_compact(r)) == r
    with pytest.raises(CountryNotFound):
        serialization.from_compact("ZZ")


def test_code_is_derived_and_checked():
    r = CountryRecord(value=4, alpha2="af", alpha3="afg", long_name="Afghanistan")
    assert r.code == "004"
    assert r.alpha2 == "AF"
    with pytest.raises(ValidationError):
        CountryRecord(code="005", value=4, alpha2="AF", alpha3="AFG", long_name="Afghanistan")


@pytest.mark.parametrize(
    "bad",
    [
        {"value": 0, "alpha2": "AF", "alpha3": "AFG", "long_name": "X"},
        {"value": 1000, "alpha2": "AF", "alpha3": "AFG", "long_name": "X"},
        {"value": 4, "alpha2": "A", "alpha3": "AFG", "long_name": "X"},
        {"value": 4, "alpha2": "A1", "alpha3": "AFG", "long_name": "X"},
        {"value": 4, "alpha2": "AF", "alpha3": "AFGH", "long_name": "X"},
        {"value": 4, "alpha2": "ıt", "alpha3": "AFG", "long_name": "X"},
        {"value": 4, "alpha2": "AF", "alpha3": "ſwe", "long_name": "X"},
        {"value": 4, "alpha2": "AF", "alpha3": "AFG", "long_name": "  "},
        {"value": 4, "alpha2": "AF", "alpha3": "AFG", "long_name": "X", "aliases": [""]},
        {"value": 4, "alpha2": "AF", "alpha3": "AFG", "long_name": "X", "flag": "x"},
    ],
)
def test_malformed_records_rejected(bad):
    with pytest.raises(ValidationError):
        serialization.from_dict(bad)


def test_records_are_frozen_and_hashable():
    us = from_alpha2("US")
    with pytest.raises(ValidationError):
        us.alpha2 = "XX"
    assert len({us, from_alpha2("us"), from_alpha2("GB")}) == 2


def test_has_alias():
    us = from_alpha2("US")
    assert us.has_alias("America")
    assert us.has_alias("united_states")
    assert us.has_alias("UNITED STATES")
    assert us.has_alias("United States of America")
    assert not us.has_alias("The United States Of America")
    assert not us.has_alias("Atlantis")
    assert not us.has_alias(None)
    assert not from_alpha2("AS").has_alias("Samoa")


def test_dump_and_load_table():
    text = serialization.dump_table(get_table())
    loaded = serialization.load_table(text)
    assert loaded.all() == get_table().all()


def test_load_records_requires_array():
    with pytest.raises(ValueError):
        serialization.load_records('{"value": 4}')


def test_load_table_checks_integrity():
    us = serialization.to_dict(from_alpha2("US"))
    with pytest.raises(TableIntegrityError):
        serialization.load_table(json.dumps([us, us]))
