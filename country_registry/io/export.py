"""Write the country table to disk.

CSV files carry one row per record with aliases joined by ``|``; JSON files
carry the full object form plus a fingerprint of the table contents.
"""
import csv
import hashlib
import json
import logging
import os
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..serialization import FIELDS, from_dict, to_dict
from ..table import CountryTable, get_table

logger = logging.getLogger(__name__)

ALIAS_SEPARATOR = "|"


def sha256_of_bytes(b: bytes) -> str:
    h = hashlib.sha256()
    h.update(b)
    return h.hexdigest()


def table_fingerprint(table: Optional[CountryTable] = None) -> str:
    """Deterministic sha256 over the table contents.

    Records are sorted by numeric value and encoded as compact JSON with sorted
    keys, so the digest only changes when the data does.
    """
    tbl = table if table is not None else get_table()
    recs = sorted((to_dict(r) for r in tbl.all()), key=lambda r: r["value"])
    canonical = json.dumps(recs, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return sha256_of_bytes(canonical.encode("utf-8"))


def _ensure_parent(path: str):
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)


def write_csv(path: str, table: Optional[CountryTable] = None) -> int:
    tbl = table if table is not None else get_table()
    _ensure_parent(path)
    with open(path, "w", encoding="utf-8", newline="") as f:
        w = csv.writer(f)
        w.writerow(FIELDS)
        for r in tbl.all():
            w.writerow([r.code, r.value, r.alpha2, r.alpha3, r.long_name, ALIAS_SEPARATOR.join(r.aliases)])
    logger.info("Wrote %d countries to %s", len(tbl), path)
    return len(tbl)


def write_json(path: str, table: Optional[CountryTable] = None) -> Dict[str, Any]:
    """Write ``{"meta": {...}, "countries": [...]}`` and return the meta block."""
    tbl = table if table is not None else get_table()
    meta = {
        "count": len(tbl),
        "sha256": table_fingerprint(tbl),
        "generated_at": datetime.now(timezone.utc).isoformat(),
    }
    payload = {"meta": meta, "countries": [to_dict(r) for r in tbl.all()]}
    _ensure_parent(path)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)
    logger.info("Wrote %d countries to %s", len(tbl), path)
    return meta


def read_csv(path: str) -> CountryTable:
    """Load a table written by ``write_csv``."""
    records = []
    with open(path, "r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        for r in reader:
            aliases = tuple(a for a in (r.get("aliases") or "").split(ALIAS_SEPARATOR) if a)
            records.append(
                {
                    "code": r["code"],
                    "value": int(r["value"]),
                    "alpha2": r["alpha2"],
                    "alpha3": r["alpha3"],
                    "long_name": r["long_name"],
                    "aliases": aliases,
                }
            )
    return CountryTable(from_dict(d) for d in records)
