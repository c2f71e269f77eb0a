"""Implementation of DataFrameTable.

A DataFrameTable wraps a pandas DataFrame. pandas is an optional dependency,
if it is not installed DataFrames are simply not recognized as tables.
"""

import numpy as np
from monty.dev import requires

from codarrays.tables.base import Table, is_real_number

try:
    import pandas as pd
    from pandas.api.types import (
        is_complex_dtype,
        is_numeric_dtype,
        is_object_dtype,
    )
except ImportError:
    pd = None


def _object_column(values):
    """Create an object array holding each value as is.

    Values are set one by one so that sequence like values (i.e. Composition
    rows) are not unpacked by numpy.
    """
    column = np.empty(len(values), dtype=object)
    for i, value in enumerate(values):
        column[i] = value
    return column


class DataFrameTable(Table):
    """A table backed by a pandas DataFrame.

    Columns are returned as Series, so columns carried over to a new
    DataFrame keep their dtype. Missing values (NaN, None, pd.NA) are all
    converted to NaN when a column is read as numeric values.

    A CoDaArray stored in a new DataFrame becomes an object column of its
    Composition rows, and df[name].iloc[0].array gives back the CoDaArray.
    """

    @requires(pd is not None, "'pandas' not found. Please install it.")
    def __init__(self, dataframe):
        """Initialize a DataFrameTable.

        Args:
            dataframe (DataFrame):
                a pandas DataFrame. Column names must be unique.
        """
        if not isinstance(dataframe, pd.DataFrame):
            raise TypeError(
                f"Expected a pandas DataFrame, got {type(dataframe).__name__}."
            )
        if not dataframe.columns.is_unique:
            raise ValueError(
                f"DataFrame columns must be unique, got {list(dataframe.columns)}."
            )
        self._dataframe = dataframe

    @classmethod
    def accepts(cls, obj):
        """Accept pandas DataFrames."""
        return pd is not None and isinstance(obj, pd.DataFrame)

    @property
    def dataframe(self):
        """Get the underlying DataFrame."""
        return self._dataframe

    @property
    def columnnames(self):
        """Get the column names."""
        return tuple(self._dataframe.columns)

    @property
    def num_rows(self):
        """Get the number of rows."""
        return len(self._dataframe.index)

    def getcolumn(self, name):
        """Get the column with the given name as a Series."""
        self.check_columns([name])
        return self._dataframe[name]

    def numeric_column(self, name):
        """Get a column as a float array, any missing value is set to NaN.

        The column must have a numeric (or boolean) dtype, or an object dtype
        holding only real numbers and missing values. Columns of strings are
        not parsed.
        """
        series = self.getcolumn(name)
        if is_object_dtype(series.dtype):
            numeric = all(is_real_number(value) for value in series.dropna())
        else:
            numeric = is_numeric_dtype(series.dtype) and not is_complex_dtype(
                series.dtype
            )
        if not numeric:
            raise TypeError(
                f"Column {name} of dtype {series.dtype} has values that are not "
                "real numbers."
            )
        return series.to_numpy(dtype=float, na_value=np.nan)

    def select(self, *names):
        """Select columns by name."""
        self.check_columns(names)
        return DataFrameTable(self._dataframe.loc[:, list(names)])

    def materializer(self):
        """Get a function to create a DataFrame with the same index as the source."""
        index = self._dataframe.index

        def materialize(columns):
            data = {}
            for name, values in columns.items():
                if isinstance(values, pd.Series):
                    data[name] = values
                elif isinstance(values, np.ndarray):
                    data[name] = pd.Series(values, index=index)
                else:
                    data[name] = pd.Series(
                        _object_column(values), index=index, dtype=object
                    )
            return pd.DataFrame(data, index=index)

        return materialize

    def __repr__(self):
        """Get repr."""
        return (
            f"{self.__class__.__name__}(columns={list(self.columnnames)}, "
            f"num_rows={self.num_rows})"
        )
