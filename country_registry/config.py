import logging
import re
from typing import Any, Dict, List, Optional

import yaml  # type: ignore[import]
from pydantic import BaseModel, Field, ValidationError, field_validator

from .formatter import DISPLAY_STYLES, display

_ALPHA2_KEY_RE = re.compile(r"^[A-Z]{2}$")

HARMONIZE_TARGETS = ("alpha2", "alpha3", "numeric", "name")


def configure_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


class HarmonizeConfig(BaseModel):
    target: str = "alpha3"
    strict: bool = False

    @field_validator("target")
    @classmethod
    def check_target(cls, v):
        if v not in HARMONIZE_TARGETS:
            raise ValueError(f"target must be one of {', '.join(HARMONIZE_TARGETS)}")
        return v


class RegistryConfig(BaseModel):
    display_style: str = "name"
    # alpha2 -> additional aliases appended to that record
    extra_aliases: Dict[str, List[str]] = Field(default_factory=dict)
    harmonize: HarmonizeConfig = Field(default_factory=HarmonizeConfig)

    @field_validator("display_style")
    @classmethod
    def check_display_style(cls, v):
        if v not in DISPLAY_STYLES:
            raise ValueError(f"display_style must be one of {', '.join(sorted(DISPLAY_STYLES))}")
        return v

    @field_validator("extra_aliases")
    @classmethod
    def check_extra_aliases(cls, v):
        out: Dict[str, List[str]] = {}
        for key, aliases in v.items():
            code = key.strip().upper()
            if not _ALPHA2_KEY_RE.match(code):
                raise ValueError(f"extra_aliases keys must be alpha2 codes, got {key!r}")
            if any(not a.strip() for a in aliases):
                raise ValueError(f"extra_aliases for {code} contain a blank name")
            out.setdefault(code, []).extend(aliases)
        return out

    def render(self, record) -> str:
        """Display ``record`` in the configured style."""
        return display(record, self.display_style)


DEFAULT_CONFIG: Dict[str, Any] = {
    "display_style": "name",
    "extra_aliases": {},
    "harmonize": {"target": "alpha3", "strict": False},
}


def load_config(path: Optional[str] = None) -> RegistryConfig:
    if path:
        with open(path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    else:
        cfg = DEFAULT_CONFIG
    try:
        model = RegistryConfig(**cfg)
    except ValidationError as e:
        print("Config validation error:")
        print(e.json())
        raise
    return model
