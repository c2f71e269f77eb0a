"""Implementation of the Table base class and table dispatch functions.

A Table is the minimal tabular capability set needed to build compositional
arrays: ordered column names, a row count, access to a column's values,
selection of columns and a materializer that rebuilds a table of the same
concrete representation from new column data.

Concrete Table classes either wrap a common representation (a mapping of
columns, a sequence of rows, a pandas DataFrame) or implement the interface
directly (i.e. CoDaArray).
"""

from abc import ABCMeta, abstractmethod
from numbers import Real

import numpy as np

from codarrays.utils.class_utils import (
    class_name_from_str,
    get_subclasses,
    get_subclasses_str,
)
from codarrays.utils.exceptions import MissingColumnError


def is_real_number(value):
    """Check if a value is a real number (numpy booleans included)."""
    return isinstance(value, (Real, np.bool_))


class Table(metaclass=ABCMeta):
    """Abstract base class for tables.

    Any object that should interoperate with compositional arrays needs to
    implement this interface, or be wrapped by a Table subclass that accepts
    it (see as_table).
    """

    @classmethod
    def accepts(cls, obj):
        """Check whether the given object can be wrapped by this class.

        Args:
            obj (object):
                any object

        Returns:
            bool
        """
        return False

    @property
    @abstractmethod
    def columnnames(self):
        """Get the ordered tuple of column names."""
        return

    @property
    @abstractmethod
    def num_rows(self):
        """Get the number of rows."""
        return

    @property
    def num_columns(self):
        """Get the number of columns."""
        return len(self.columnnames)

    @abstractmethod
    def getcolumn(self, name):
        """Get the values of a column.

        Args:
            name (str):
                name of column

        Returns:
            Sequence: values in the column, one per row.
        """
        return

    def numeric_column(self, name):
        """Get the values of a column as a float array.

        Missing values (None or NaN) are returned as NaN. Integer and boolean
        values are promoted to float. Any other value, including strings of
        digits, raises a TypeError.

        Args:
            name (str):
                name of column

        Returns:
            ndarray: 1D float array
        """
        values = self.getcolumn(name)
        if isinstance(values, np.ndarray) and values.dtype.kind in "biuf":
            column = values.astype(float)
        else:
            values = [np.nan if value is None else value for value in values]
            bad = [value for value in values if not is_real_number(value)]
            if len(bad) > 0:
                raise TypeError(
                    f"Column {name} has values that are not real numbers, i.e. "
                    f"{bad[0]!r} of type {type(bad[0]).__name__}."
                )
            column = np.array(values, dtype=float)

        if column.ndim != 1:
            raise TypeError(
                f"Column {name} has values that are not scalars, got an array "
                f"of shape {column.shape}."
            )
        return column

    @abstractmethod
    def select(self, *names):
        """Select a subset of columns.

        Args:
            *names (str):
                names of columns to select, in the order they should appear.

        Returns:
            Table: of the same class restricted to the given columns
        """
        return

    @abstractmethod
    def materializer(self):
        """Get a function that rebuilds a table from column data.

        The returned callable takes a mapping of column name to column values
        and returns a new table of the same concrete representation as the
        one wrapped or implemented by this table.

        Returns:
            Callable
        """
        return

    def rows(self):
        """Return a generator of rows as dictionaries."""
        names = self.columnnames
        columns = [self.getcolumn(name) for name in names]
        for values in zip(*columns):
            yield dict(zip(names, values))

    def check_columns(self, names):
        """Raise a MissingColumnError if any name is not a column.

        Args:
            names (Sequence of str):
                column names to check.
        """
        missing = [name for name in names if name not in self.columnnames]
        if len(missing) > 0:
            raise MissingColumnError(
                f"Columns {missing} are not in table with columns "
                f"{list(self.columnnames)}."
            )


def available_table_types():
    """Get the names of the table types that can be wrapped."""
    return get_subclasses_str(Table)


def as_table(obj, table_type=None):
    """Get a Table for the given object.

    If the object is already a Table it is returned as is. Otherwise the
    first registered Table class that accepts the object is used to wrap it.

    Args:
        obj (object):
            a Table or an object that can be wrapped by one, i.e. a dict of
            columns, a list of row dicts or a pandas DataFrame.
        table_type (str): optional
            name of the Table class to use, i.e. "row-table". Useful when the
            type can not be inferred, for example with an empty list.

    Returns:
        Table
    """
    if isinstance(obj, Table):
        return obj

    table_classes = get_subclasses(Table)
    if table_type is not None:
        try:
            table_class = table_classes[class_name_from_str(table_type)]
        except KeyError as key_error:
            raise NotImplementedError(
                f"Table type {table_type} is not implemented. "
                f"Available types are {available_table_types()}."
            ) from key_error
        return table_class(obj)

    for table_class in table_classes.values():
        if table_class.accepts(obj):
            return table_class(obj)

    raise TypeError(
        f"Object of type {type(obj).__name__} can not be used as a table. "
        f"Available table types are {available_table_types()}."
    )
