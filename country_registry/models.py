"""Immutable country record model.

Records are frozen pydantic models so they are hashable, compare by value and
serialize through ``model_dump`` / ``model_validate`` without extra glue.
"""
import re
from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

_ALPHA2_RE = re.compile(r"^[A-Z]{2}$")
_ALPHA3_RE = re.compile(r"^[A-Z]{3}$")
_STRIP_RE = re.compile(r"[\s_]+")


def normalize(text: str) -> str:
    """Case-fold ``text`` after removing whitespace and underscores."""
    return _STRIP_RE.sub("", text).casefold()


class CountryRecord(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    code: str = Field(..., pattern=r"^[0-9]{3}$")
    value: int = Field(..., ge=1, le=999)
    alpha2: str
    alpha3: str
    long_name: str = Field(..., min_length=1)
    aliases: Tuple[str, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def fill_code(cls, data):
        # `code` is derived from `value` unless given explicitly
        if isinstance(data, dict) and data.get("code") is None:
            value = data.get("value")
            if isinstance(value, int) and not isinstance(value, bool):
                data = dict(data)
                data["code"] = f"{value:03d}"
        return data

    @field_validator("alpha2")
    @classmethod
    def check_alpha2(cls, v):
        v = v.strip()
        if not v.isascii() or not _ALPHA2_RE.match(v.upper()):
            raise ValueError("alpha2 must be exactly two ASCII letters")
        return v.upper()

    @field_validator("alpha3")
    @classmethod
    def check_alpha3(cls, v):
        v = v.strip()
        if not v.isascii() or not _ALPHA3_RE.match(v.upper()):
            raise ValueError("alpha3 must be exactly three ASCII letters")
        return v.upper()

    @field_validator("long_name")
    @classmethod
    def check_long_name(cls, v):
        if not v.strip():
            raise ValueError("long_name must not be blank")
        return v

    @field_validator("aliases")
    @classmethod
    def check_aliases(cls, v):
        for alias in v:
            if not alias.strip():
                raise ValueError("aliases must not contain blank names")
        return v

    @model_validator(mode="after")
    def check_code_matches_value(self):
        if self.code != f"{self.value:03d}":
            raise ValueError(f"code {self.code!r} does not match value {self.value}")
        return self

    @property
    def numeric_code(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.long_name

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, CountryRecord):
            return NotImplemented
        return self.long_name < other.long_name

    def has_alias(self, alias: str) -> bool:
        """True if ``alias`` matches one of this record's aliases after normalization."""
        if not isinstance(alias, str):
            return False
        key = normalize(alias)
        return any(normalize(a) == key for a in self.aliases)

    def as_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
