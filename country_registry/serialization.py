"""JSON and compact (alpha-2) serialization of country records.

The JSON object form carries every field and round-trips exactly:
``from_json(to_json(r)) == r``. The compact form is just the alpha-2 code and
is resolved back through a table.
"""
import json
from typing import Any, Dict, Iterable, List, Optional

from .models import CountryRecord
from .resolver import from_alpha2
from .table import CountryTable

FIELDS = ("code", "value", "alpha2", "alpha3", "long_name", "aliases")


def to_dict(record: CountryRecord) -> Dict[str, Any]:
    return record.model_dump(mode="json")


def from_dict(data: Dict[str, Any]) -> CountryRecord:
    return CountryRecord.model_validate(data)


def to_json(record: CountryRecord, indent: Optional[int] = None) -> str:
    return json.dumps(to_dict(record), ensure_ascii=False, indent=indent)


def from_json(text: str) -> CountryRecord:
    return CountryRecord.model_validate_json(text)


def to_compact(record: CountryRecord) -> str:
    return record.alpha2


def from_compact(text: str, table: Optional[CountryTable] = None) -> CountryRecord:
    return from_alpha2(text, table=table)


def dump_records(records: Iterable[CountryRecord], indent: Optional[int] = None) -> str:
    return json.dumps([to_dict(r) for r in records], ensure_ascii=False, indent=indent)


def dump_table(table: CountryTable, indent: Optional[int] = None) -> str:
    return dump_records(table.all(), indent=indent)


def load_records(text: str) -> List[CountryRecord]:
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("expected a JSON array of country objects")
    return [from_dict(item) for item in data]


def load_table(text: str) -> CountryTable:
    """Rebuild a table from ``dump_table`` output; integrity rules still apply."""
    return CountryTable(load_records(text))
