"""
A few testing utilities that may be useful to just import and run.
Some of these are borrowed from pymatgen test scripts.
"""

import json
import pickle

import numpy as np
import numpy.testing as npt
import pandas as pd
from monty.json import MontyDecoder, MSONable

from codarrays import CoDaArray, as_table


def assert_msonable(obj, skip_keys=None, test_if_subclass=True):
    """
    Tests if obj is MSONable and tries to verify whether the contract is
    fulfilled.
    By default, the method tests whether obj is an instance of MSONable.
    This check can be deactivated by setting test_if_subclass to False.
    """
    if test_if_subclass:
        assert isinstance(obj, MSONable)

    skip_keys = [] if skip_keys is None else skip_keys
    d1 = obj.as_dict()
    d2 = obj.__class__.from_dict(obj.as_dict()).as_dict()
    for key in d1.keys():
        if key in skip_keys:
            continue
        assert d1[key] == d2[key]

    try:
        _ = json.loads(obj.to_json(), cls=MontyDecoder)
    except Exception as e:
        raise AssertionError(e)


def assert_pickles(obj):
    """Test if obj is picklable."""
    try:
        p = pickle.dumps(obj)
        obj_copy = pickle.loads(p)
    except Exception as e:
        raise AssertionError(e)

    assert isinstance(obj_copy, obj.__class__)

    if isinstance(obj, MSONable):
        d1 = obj.as_dict()
        d2 = obj_copy.as_dict()
        for key in d1.keys():
            assert d1[key] == d2[key]
    else:
        # fallback for objects that are not MSONable
        # not a complete test, since we are only checking that attribute names match
        d1 = obj.__dict__
        d2 = obj_copy.__dict__
        assert d1.keys() == d2.keys()


def assert_composition_values(composition, expected):
    """Check values of a composition, None in expected means absent."""
    expected = np.array([np.nan if v is None else v for v in expected], dtype=float)
    npt.assert_array_equal(composition.values(), expected)


def extract_coda(table, name="coda"):
    """Get the compositions stored in a column of a table as a CoDaArray."""
    return CoDaArray(list(as_table(table).getcolumn(name)))


PARTS = ("Cd", "Cu", "Pb")

# metal concentrations with a missing value and a non numeric location column
COLUMNS = {
    "Cd": [1, 4, 7],
    "Cu": [2, 5, 8],
    "Pb": [3, None, 9],
    "Loc": ["a", "b", "c"],
}


def make_table(kind, columns=None):
    """Create a table of the given kind from a dict of lists."""
    columns = COLUMNS if columns is None else columns
    if kind == "columns":
        return {name: list(values) for name, values in columns.items()}
    if kind == "rows":
        names = list(columns.keys())
        return [dict(zip(names, values)) for values in zip(*columns.values())]
    if kind == "dataframe":
        return pd.DataFrame(columns)
    raise ValueError(f"Unknown table kind {kind}")
