"""Resolve codes and names to country records.

Every ``from_*`` function raises ``CountryNotFound`` when nothing matches;
``lookup`` is the non-raising variant of ``from_str``. All functions take an
optional ``table`` and default to the shared table from ``get_table()``.

``from_str`` tries its stages in the fixed order given by ``PARSE_ORDER``:
numeric code, alpha-2, alpha-3, alias, long name. The first stage that
matches wins.
"""
import logging
from typing import Any, Iterable, List, Optional

from .errors import CountryNotFound
from .models import CountryRecord
from .table import CountryTable, get_table, normalize

logger = logging.getLogger(__name__)

PARSE_ORDER = ("numeric", "alpha2", "alpha3", "alias", "name")


def _table(table: Optional[CountryTable]) -> CountryTable:
    return table if table is not None else get_table()


def _is_ascii_digits(text: str) -> bool:
    return bool(text) and text.isascii() and text.isdigit()


def _code_key(text: str) -> Optional[str]:
    # str.upper() maps some non-ASCII letters onto ASCII ("ı" -> "I")
    text = text.strip()
    if not text.isascii():
        return None
    return text.upper()


def from_code(code: int, table: Optional[CountryTable] = None) -> CountryRecord:
    """Match the numeric ISO code, e.g. ``840``."""
    if isinstance(code, bool) or not isinstance(code, int):
        raise CountryNotFound(code, "numeric code")
    rec = _table(table).by_value.get(code)
    if rec is None:
        logger.debug("numeric code miss: %r", code)
        raise CountryNotFound(code, "numeric code")
    return rec


def from_code_string(code: str, table: Optional[CountryTable] = None) -> CountryRecord:
    """Match the zero-padded three digit form, e.g. ``"008"``; ``"08"`` fails."""
    if not isinstance(code, str):
        raise CountryNotFound(code, "numeric code")
    text = code.strip()
    if len(text) != 3 or not _is_ascii_digits(text):
        raise CountryNotFound(code, "numeric code")
    rec = _table(table).by_value.get(int(text))
    if rec is None:
        raise CountryNotFound(code, "numeric code")
    return rec


def from_alpha2(alpha2: str, table: Optional[CountryTable] = None) -> CountryRecord:
    if not isinstance(alpha2, str):
        raise CountryNotFound(alpha2, "alpha2 code")
    key = _code_key(alpha2)
    rec = _table(table).by_alpha2.get(key) if key else None
    if rec is None:
        logger.debug("alpha2 miss: %r", alpha2)
        raise CountryNotFound(alpha2, "alpha2 code")
    return rec


def from_alpha3(alpha3: str, table: Optional[CountryTable] = None) -> CountryRecord:
    if not isinstance(alpha3, str):
        raise CountryNotFound(alpha3, "alpha3 code")
    key = _code_key(alpha3)
    rec = _table(table).by_alpha3.get(key) if key else None
    if rec is None:
        logger.debug("alpha3 miss: %r", alpha3)
        raise CountryNotFound(alpha3, "alpha3 code")
    return rec


def from_name(name: str, table: Optional[CountryTable] = None) -> CountryRecord:
    """Match the official long name, ignoring case, spaces and underscores."""
    if not isinstance(name, str):
        raise CountryNotFound(name, "long name")
    rec = _table(table).by_name.get(normalize(name))
    if rec is None:
        logger.debug("long name miss: %r", name)
        raise CountryNotFound(name, "long name")
    return rec


def from_alias(alias: str, table: Optional[CountryTable] = None) -> CountryRecord:
    """Match an informal alias such as ``"America"`` or ``"Holland"``.

    If several records share the alias, the first registered one is returned.
    """
    if not isinstance(alias, str):
        raise CountryNotFound(alias, "alias")
    matches = _table(table).by_alias.get(normalize(alias))
    if not matches:
        logger.debug("alias miss: %r", alias)
        raise CountryNotFound(alias, "alias")
    return matches[0]


def from_str(text: Any, table: Optional[CountryTable] = None) -> CountryRecord:
    """Resolve any supported representation to a record.

    Accepts a numeric code (as ``int`` or a string of ASCII digits), an
    alpha-2 or alpha-3 code, an alias or the long name, case-insensitively.
    Raises ``CountryNotFound`` for everything else.
    """
    tbl = _table(table)
    if isinstance(text, int) and not isinstance(text, bool):
        return from_code(text, table=tbl)
    if not isinstance(text, str):
        raise CountryNotFound(text)

    stripped = text.strip()
    if _is_ascii_digits(stripped):
        # codes stop at 999; skip int() on long digit runs
        digits = stripped.lstrip("0") or "0"
        if len(digits) <= 3:
            rec = tbl.by_value.get(int(digits))
            if rec is not None:
                return rec
    upper = _code_key(stripped)
    if upper:
        rec = tbl.by_alpha2.get(upper)
        if rec is not None:
            return rec
        rec = tbl.by_alpha3.get(upper)
        if rec is not None:
            return rec
    key = normalize(stripped)
    matches = tbl.by_alias.get(key)
    if matches:
        return matches[0]
    rec = tbl.by_name.get(key)
    if rec is not None:
        return rec
    logger.debug("no country matches %r", text)
    raise CountryNotFound(text)


def lookup(text: Any, default: Optional[CountryRecord] = None, table: Optional[CountryTable] = None) -> Optional[CountryRecord]:
    try:
        return from_str(text, table=table)
    except CountryNotFound:
        return default


def resolve_many(values: Iterable[Any], strict: bool = False, table: Optional[CountryTable] = None) -> List[Optional[CountryRecord]]:
    """Resolve each value with ``from_str``.

    Unresolved values become ``None`` unless ``strict`` is set, in which case
    the first miss raises ``CountryNotFound``.
    """
    tbl = _table(table)
    out: List[Optional[CountryRecord]] = []
    for v in values:
        if strict:
            out.append(from_str(v, table=tbl))
        else:
            out.append(lookup(v, table=tbl))
    return out
