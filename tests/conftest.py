import warnings

import pytest

from country_registry.table import get_table

# pydantic and pandas deprecation chatter is not relevant to these tests
warnings.filterwarnings("ignore", category=DeprecationWarning, module="pydantic.*")
warnings.filterwarnings("ignore", category=FutureWarning, module="pandas.*")


@pytest.fixture
def table():
    return get_table()
