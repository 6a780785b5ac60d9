"""The immutable country table and its lookup indices.

A ``CountryTable`` is built once from literal rows and never changes
afterwards. Every index is exposed as a read-only mapping:

- ``by_value``: numeric value -> record
- ``by_alpha2`` / ``by_alpha3``: upper-cased code -> record
- ``by_name``: normalized long name -> record
- ``by_alias``: normalized alias -> tuple of records, in registration order

The process-wide default table is created lazily by ``get_table()``.
"""
import logging
import threading
from types import MappingProxyType
from typing import TYPE_CHECKING, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from .data import COUNTRY_ROWS, CountryRow
from .errors import TableIntegrityError
from .models import CountryRecord, normalize

if TYPE_CHECKING:  # pragma: no cover
    from .config import RegistryConfig

logger = logging.getLogger(__name__)

def _register(index: Dict, key, record: CountryRecord, label: str) -> None:
    existing = index.get(key)
    if existing is not None:
        raise TableIntegrityError(
            f"duplicate {label} {key!r}: {existing.alpha2} and {record.alpha2}"
        )
    index[key] = record


class CountryTable:
    def __init__(self, records: Iterable[CountryRecord]):
        self._records: Tuple[CountryRecord, ...] = tuple(records)
        if not self._records:
            raise TableIntegrityError("country table is empty")

        by_value: Dict[int, CountryRecord] = {}
        by_alpha2: Dict[str, CountryRecord] = {}
        by_alpha3: Dict[str, CountryRecord] = {}
        by_name: Dict[str, CountryRecord] = {}
        for rec in self._records:
            if not isinstance(rec, CountryRecord):
                raise TableIntegrityError(f"not a CountryRecord: {rec!r}")
            name_key = normalize(rec.long_name)
            if not name_key:
                raise TableIntegrityError(f"long name of {rec.alpha2} is empty after normalization")
            _register(by_value, rec.value, rec, "numeric code")
            _register(by_alpha2, rec.alpha2, rec, "alpha2 code")
            _register(by_alpha3, rec.alpha3, rec, "alpha3 code")
            _register(by_name, name_key, rec, "long name")

        # aliases may be shared; the first registered record wins on lookup
        by_alias: Dict[str, List[CountryRecord]] = {}
        for rec in self._records:
            seen = set()
            for alias in rec.aliases:
                key = normalize(alias)
                if not key:
                    raise TableIntegrityError(f"alias {alias!r} of {rec.alpha2} is empty after normalization")
                if key in seen:
                    continue
                seen.add(key)
                owner = by_name.get(key)
                if owner is not None and owner != rec:
                    raise TableIntegrityError(
                        f"alias {alias!r} of {rec.alpha2} shadows the long name of {owner.alpha2}"
                    )
                by_alias.setdefault(key, []).append(rec)

        self.by_value: Mapping[int, CountryRecord] = MappingProxyType(by_value)
        self.by_alpha2: Mapping[str, CountryRecord] = MappingProxyType(by_alpha2)
        self.by_alpha3: Mapping[str, CountryRecord] = MappingProxyType(by_alpha3)
        self.by_name: Mapping[str, CountryRecord] = MappingProxyType(by_name)
        self.by_alias: Mapping[str, Tuple[CountryRecord, ...]] = MappingProxyType(
            {k: tuple(v) for k, v in by_alias.items()}
        )
        logger.debug(
            "built country table: %d records, %d alias keys",
            len(self._records),
            len(self.by_alias),
        )

    @classmethod
    def from_rows(cls, rows: Iterable[CountryRow]) -> "CountryTable":
        records = []
        for value, alpha2, alpha3, long_name, aliases in rows:
            records.append(
                CountryRecord(
                    value=value,
                    alpha2=alpha2,
                    alpha3=alpha3,
                    long_name=long_name,
                    aliases=aliases,
                )
            )
        return cls(records)

    def all(self) -> Tuple[CountryRecord, ...]:
        """Every record, in canonical registration order."""
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CountryRecord]:
        return iter(self._records)

    def __contains__(self, record) -> bool:
        if not isinstance(record, CountryRecord):
            return False
        return self.by_alpha2.get(record.alpha2) == record

    def with_extra_aliases(self, extra: Mapping[str, Iterable[str]]) -> "CountryTable":
        """Return a new table whose records carry additional aliases.

        ``extra`` maps an alpha-2 code to the aliases to append. Aliases the
        record already answers to are skipped. The current table is untouched.
        """
        additions: Dict[str, List[str]] = {}
        for alpha2, aliases in extra.items():
            key = alpha2.strip().upper()
            if key not in self.by_alpha2:
                raise TableIntegrityError(f"extra aliases reference unknown alpha2 code {alpha2!r}")
            additions.setdefault(key, []).extend(aliases)

        records = []
        for rec in self._records:
            new = additions.get(rec.alpha2)
            if not new:
                records.append(rec)
                continue
            known = {normalize(a) for a in rec.aliases}
            merged = list(rec.aliases)
            for alias in new:
                if normalize(alias) not in known:
                    known.add(normalize(alias))
                    merged.append(alias)
            # re-validate so blank aliases are rejected like in literal rows
            records.append(CountryRecord(**{**rec.model_dump(), "aliases": tuple(merged)}))
        return CountryTable(records)


_default_table: Optional[CountryTable] = None
_default_lock = threading.Lock()


def get_table() -> CountryTable:
    """Return the process-wide table, building it on first use."""
    global _default_table
    if _default_table is None:
        with _default_lock:
            if _default_table is None:
                _default_table = CountryTable.from_rows(COUNTRY_ROWS)
    return _default_table


def build_table(config: Optional["RegistryConfig"] = None) -> CountryTable:
    """Build the table described by ``config``.

    Without extra aliases this is the shared default table.
    """
    base = get_table()
    if config is None or not config.extra_aliases:
        return base
    return base.with_extra_aliases(config.extra_aliases)


def all_countries() -> Tuple[CountryRecord, ...]:
    return get_table().all()
