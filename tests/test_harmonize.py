import logging

import numpy as np
import pandas as pd
import pytest

from country_registry.config import RegistryConfig
from country_registry.errors import CountryNotFound
from country_registry.processing.harmonize import (
    countries_frame,
    coverage_report,
    harmonize_countries,
    harmonize_from_config,
    to_code,
)


def test_to_code_targets():
    assert to_code("America") == "USA"
    assert to_code("DEU", target="alpha2") == "DE"
    assert to_code("fr", target="numeric") == "250"
    assert to_code(840, target="name") == "The United States Of America"
    assert to_code("nowhere") == "nowhere"
    assert to_code(None) is None


def test_to_code_unknown_target():
    with pytest.raises(ValueError):
        to_code("US", target="flag")


def test_harmonize_countries_mixed_identifiers(caplog):
    df = pd.DataFrame(
        {
            "country": ["US", "deu", "England", "250", "Atlantis", None],
            "value": [1, 2, 3, 4, 5, 6],
        }
    )
    with caplog.at_level(logging.WARNING):
        out = harmonize_countries(df)
    assert out["country"].tolist()[:5] == ["USA", "DEU", "GBR", "FRA", "Atlantis"]
    assert out["country"].isna().iloc[5]
    # input is not modified
    assert df["country"].iloc[0] == "US"
    assert "Atlantis" in caplog.text


def test_harmonize_countries_numeric_column():
    df = pd.DataFrame({"iso": [4, 840, 826]})
    out = harmonize_countries(df, column="iso", target="alpha2")
    assert out["iso"].tolist() == ["AF", "US", "GB"]


def test_harmonize_countries_float_column_with_nan():
    df = pd.DataFrame({"iso": [4.0, np.nan]})
    out = harmonize_countries(df, column="iso", target="alpha3")
    assert out["iso"].iloc[0] == "AFG"
    assert pd.isna(out["iso"].iloc[1])


def test_harmonize_countries_strict():
    df = pd.DataFrame({"country": ["US", "Atlantis"]})
    with pytest.raises(CountryNotFound):
        harmonize_countries(df, strict=True)


def test_harmonize_countries_empty():
    df = pd.DataFrame({"country": []})
    out = harmonize_countries(df)
    assert out.empty


def test_countries_frame():
    df = countries_frame()
    assert len(df) == 250
    assert list(df.columns) == ["code", "value", "alpha2", "alpha3", "long_name", "aliases"]
    assert df["alpha2"].is_unique
    row = df[df["alpha2"] == "US"].iloc[0]
    assert row["alpha3"] == "USA"
    assert row["code"] == "840"


def test_coverage_report():
    df = pd.DataFrame({"country": ["US", "US", "Atlantis", "Holland"]})
    rep = coverage_report(df)
    assert rep["n_values"] == 3
    assert rep["n_resolved"] == 2
    assert rep["missing"] == ["Atlantis"]


def test_harmonize_from_config():
    cfg = RegistryConfig(
        extra_aliases={"DE": ["Deutschland"]},
        harmonize={"target": "numeric", "strict": True},
    )
    df = pd.DataFrame({"country": ["Deutschland", "US"]})
    out = harmonize_from_config(df, cfg)
    assert out["country"].tolist() == ["276", "840"]
