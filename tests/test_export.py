import csv
import json

from country_registry.io.export import (
    read_csv,
    table_fingerprint,
    write_csv,
    write_json,
)
from country_registry.table import CountryTable, get_table


def test_fingerprint_is_order_independent():
    t = get_table()
    reversed_table = CountryTable(reversed(t.all()))
    assert table_fingerprint(t) == table_fingerprint(reversed_table)
    assert len(table_fingerprint(t)) == 64


def test_fingerprint_changes_with_data():
    t = get_table()
    extended = t.with_extra_aliases({"DE": ["Deutschland"]})
    assert table_fingerprint(t) != table_fingerprint(extended)


def test_write_and_read_csv(tmp_path):
    path = tmp_path / "out" / "countries.csv"
    n = write_csv(str(path))
    assert n == 250
    with open(path, "r", encoding="utf-8", newline="") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["alpha3"] == "AFG"
    assert rows[0]["code"] == "004"
    gb = [r for r in rows if r["alpha2"] == "GB"][0]
    assert gb["aliases"].split("|")[0] == "England"

    loaded = read_csv(str(path))
    assert loaded.all() == get_table().all()


def test_write_json(tmp_path):
    path = tmp_path / "countries.json"
    meta = write_json(str(path))
    assert meta["count"] == 250
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload["meta"]["sha256"] == table_fingerprint()
    assert payload["countries"][0]["long_name"] == "Afghanistan"
    assert len(payload["countries"]) == 250
