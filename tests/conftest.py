import numpy as np
import pytest

from codarrays import CoDaArray
from tests.utils import COLUMNS, PARTS, make_table

SEED = None


@pytest.fixture(scope="module")
def rng():
    """Seed and return an RNG for test reproducibility"""
    return np.random.default_rng(SEED)


@pytest.fixture(params=["columns", "rows", "dataframe"])
def table_kind(request):
    return request.param


@pytest.fixture
def table(table_kind):
    return make_table(table_kind)


@pytest.fixture
def coda():
    return CoDaArray({name: COLUMNS[name] for name in PARTS})


@pytest.fixture(params=[1, 5, 20])
def random_coda(rng, request):
    # random compositions with some absent values
    num_parts, num_rows = 4, request.param
    data = rng.random((num_parts, num_rows))
    data[rng.random((num_parts, num_rows)) < 0.1] = np.nan
    # make sure no part is absent in every composition
    data[:, 0] = rng.random(num_parts)
    parts = [f"x{i}" for i in range(num_parts)]
    return CoDaArray(dict(zip(parts, data)))
