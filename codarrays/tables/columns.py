"""Implementation of ColumnTable.

A ColumnTable wraps a mapping of column names to column values, for example
a dict of lists or of numpy arrays, which is the simplest columnar table.
"""

from collections.abc import Mapping, Sized

from codarrays.tables.base import Table
from codarrays.utils.exceptions import DimensionMismatchError


def _is_column(values):
    return isinstance(values, Sized) and not isinstance(values, (str, bytes))


class ColumnTable(Table):
    """A table stored as a mapping of column name to column values.

    Columns are kept as given (no copies are made) and are returned as is by
    getcolumn. All columns must have the same length.
    """

    def __init__(self, columns, source_type=None, num_rows=None):
        """Initialize a ColumnTable.

        Args:
            columns (Mapping):
                mapping of column names to sequences of values.
            source_type (type): optional
                mapping type to materialize new tables as. Defaults to the
                type of the given columns.
            num_rows (int): optional
                number of rows. Only needed for a table with no columns,
                otherwise it is taken from the columns and must match them.
        """
        if not isinstance(columns, Mapping):
            raise TypeError(
                f"Columns must be given as a Mapping, got {type(columns).__name__}."
            )

        for name, values in columns.items():
            if not _is_column(values):
                raise TypeError(
                    f"Column {name} has values of type {type(values).__name__}, "
                    "expected a sequence."
                )

        lengths = {name: len(values) for name, values in columns.items()}
        if len(set(lengths.values())) > 1:
            raise DimensionMismatchError(
                f"All columns must have the same length, got lengths {lengths}."
            )
        if num_rows is None:
            num_rows = next(iter(lengths.values()), 0)
        elif len(lengths) > 0 and num_rows not in lengths.values():
            raise DimensionMismatchError(
                f"Table has {num_rows} rows but columns have lengths {lengths}."
            )

        self._columns = columns
        self._num_rows = num_rows
        self._source_type = type(columns) if source_type is None else source_type

    @classmethod
    def accepts(cls, obj):
        """Accept mappings whose values are all sequences."""
        return isinstance(obj, Mapping) and all(
            _is_column(values) for values in obj.values()
        )

    @property
    def columnnames(self):
        """Get the column names."""
        return tuple(self._columns.keys())

    @property
    def num_rows(self):
        """Get the number of rows."""
        return self._num_rows

    def getcolumn(self, name):
        """Get the values of the column with the given name."""
        self.check_columns([name])
        return self._columns[name]

    def select(self, *names):
        """Select columns by name."""
        self.check_columns(names)
        return ColumnTable(
            {name: self._columns[name] for name in names},
            source_type=self._source_type,
            num_rows=self._num_rows,
        )

    def materializer(self):
        """Get a function to create a mapping of the same type as the source."""
        source_type = self._source_type

        def materialize(columns):
            try:
                return source_type(columns)
            except TypeError:
                # i.e. defaultdict or other mappings that need extra arguments
                return dict(columns)

        return materialize

    def __repr__(self):
        """Get repr."""
        return (
            f"{self.__class__.__name__}(columns={list(self.columnnames)}, "
            f"num_rows={self.num_rows})"
        )
