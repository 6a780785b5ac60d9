import logging
from typing import Any, Dict, Optional

import numpy as np
import pandas as pd

from ..config import HARMONIZE_TARGETS, RegistryConfig
from ..errors import CountryNotFound
from ..formatter import numeric_code
from ..models import CountryRecord
from ..resolver import from_str, lookup
from ..table import CountryTable, build_table, get_table

logger = logging.getLogger(__name__)


def _native(value: Any) -> Any:
    # numpy scalars come out of pandas columns; whole floats come from int columns with NaN
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _render(record: CountryRecord, target: str) -> str:
    if target == "alpha2":
        return record.alpha2
    if target == "alpha3":
        return record.alpha3
    if target == "numeric":
        return numeric_code(record)
    return record.long_name


def to_code(value: Any, target: str = "alpha3", table: Optional[CountryTable] = None) -> Any:
    """Convert one identifier to ``target``; unknown values are returned as-is."""
    if target not in HARMONIZE_TARGETS:
        raise ValueError(f"unknown target {target!r}")
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return value
    rec = lookup(_native(value), table=table)
    if rec is None:
        return value
    return _render(rec, target)


def harmonize_countries(
    df: pd.DataFrame,
    column: str = "country",
    target: str = "alpha3",
    strict: bool = False,
    table: Optional[CountryTable] = None,
) -> pd.DataFrame:
    """Rewrite ``df[column]`` so every resolvable identifier uses ``target``.

    Values that resolve to no country are left unchanged and logged once each;
    with ``strict`` the first one raises ``CountryNotFound`` instead.
    """
    if target not in HARMONIZE_TARGETS:
        raise ValueError(f"unknown target {target!r}")
    tbl = table if table is not None else get_table()
    df = df.copy()
    if df.empty:
        return df

    cache: Dict[Any, Any] = {}
    unresolved = []
    for v in df[column].dropna().unique():
        rec = lookup(_native(v), table=tbl)
        if rec is None:
            if strict:
                raise CountryNotFound(v)
            unresolved.append(v)
            cache[v] = v
        else:
            cache[v] = _render(rec, target)
    if unresolved:
        logger.warning("Could not resolve %d country value(s): %s", len(unresolved), unresolved)
    df[column] = df[column].map(lambda x: cache.get(x, x))
    return df


def harmonize_from_config(df: pd.DataFrame, config: RegistryConfig, column: str = "country") -> pd.DataFrame:
    """Run ``harmonize_countries`` with the target, strictness and aliases of ``config``."""
    return harmonize_countries(
        df,
        column=column,
        target=config.harmonize.target,
        strict=config.harmonize.strict,
        table=build_table(config),
    )


def countries_frame(table: Optional[CountryTable] = None) -> pd.DataFrame:
    """The table as a DataFrame, one row per record in registration order."""
    tbl = table if table is not None else get_table()
    rows = [r.as_dict() for r in tbl.all()]
    df = pd.DataFrame(rows, columns=["code", "value", "alpha2", "alpha3", "long_name", "aliases"])
    return df


def coverage_report(df: pd.DataFrame, column: str = "country", table: Optional[CountryTable] = None) -> Dict[str, Any]:
    """Count how many distinct values in ``column`` resolve to a country."""
    tbl = table if table is not None else get_table()
    values = list(df[column].dropna().unique()) if not df.empty else []
    resolved = 0
    missing = []
    for v in values:
        try:
            from_str(_native(v), table=tbl)
            resolved += 1
        except CountryNotFound:
            missing.append(v)
    return {
        "n_values": len(values),
        "n_resolved": resolved,
        "missing": missing,
    }
