"""Render country records into their textual representations."""
from typing import Callable, Dict, Tuple

from .models import CountryRecord

DISPLAY_STYLES: Dict[str, Callable[[CountryRecord], str]] = {
    "name": lambda r: r.long_name,
    "name_alpha2": lambda r: f"{r.long_name} ({r.alpha2})",
    # the long name without spaces; from_str parses it back
    "compact": lambda r: r.long_name.replace(" ", ""),
}


def display(record: CountryRecord, style: str = "name") -> str:
    """Return the display form of ``record``.

    ``"name"`` gives the long name (same as ``str(record)``), ``"name_alpha2"``
    gives ``"<long_name> (<alpha2>)"`` and ``"compact"`` drops the spaces.
    """
    try:
        render = DISPLAY_STYLES[style]
    except KeyError:
        raise ValueError(f"unknown display style {style!r}; expected one of {sorted(DISPLAY_STYLES)}")
    return render(record)


def numeric_code(record: CountryRecord) -> str:
    return f"{record.value:03d}"


def alpha2(record: CountryRecord) -> str:
    return record.alpha2


def alpha3(record: CountryRecord) -> str:
    return record.alpha3


def long_name(record: CountryRecord) -> str:
    return record.long_name


def aliases(record: CountryRecord) -> Tuple[str, ...]:
    return record.aliases


def describe(record: CountryRecord) -> str:
    return (
        f"Country {{ code: {record.code}, value: {record.value}, alpha2: {record.alpha2}, "
        f"alpha3: {record.alpha3}, long_name: {record.long_name}, aliases: [{', '.join(record.aliases)}] }}"
    )
