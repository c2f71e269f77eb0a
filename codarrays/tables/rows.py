"""Implementation of RowTable.

A RowTable wraps a list (or tuple) of rows, where each row is a mapping of
column names to values. Rows of a compositional array (Composition objects)
are mappings as well, so a list of compositions is also a RowTable.
"""

from collections.abc import Mapping

from codarrays.tables.base import Table
from codarrays.utils.exceptions import DimensionMismatchError, MissingColumnError


class RowTable(Table):
    """A table stored as a sequence of row mappings.

    All rows must have the same keys. The column order is given by the keys
    of the first row.
    """

    def __init__(self, rows, names=None):
        """Initialize a RowTable.

        Args:
            rows (list or tuple of Mapping):
                rows of the table.
            names (Sequence of str): optional
                names of the columns of the rows to expose. By default all
                keys of the first row are used.
        """
        if not isinstance(rows, (list, tuple)):
            raise TypeError(
                f"Rows must be given as a list or tuple, got {type(rows).__name__}."
            )

        for i, row in enumerate(rows):
            if not isinstance(row, Mapping):
                raise TypeError(
                    f"Row {i} is of type {type(row).__name__}, expected a Mapping."
                )

        all_names = tuple(rows[0].keys()) if len(rows) > 0 else ()
        for i, row in enumerate(rows):
            if set(row.keys()) != set(all_names):
                raise DimensionMismatchError(
                    f"Row {i} has columns {list(row.keys())} but row 0 has "
                    f"columns {list(all_names)}."
                )

        names = all_names if names is None else tuple(names)
        missing = [name for name in names if name not in all_names]
        if len(missing) > 0:
            raise MissingColumnError(
                f"Columns {missing} are not in rows with columns {list(all_names)}."
            )

        self._rows = rows
        self._names = names

    @classmethod
    def accepts(cls, obj):
        """Accept lists or tuples of mappings."""
        return isinstance(obj, (list, tuple)) and all(
            isinstance(row, Mapping) for row in obj
        )

    @property
    def columnnames(self):
        """Get the column names."""
        return self._names

    @property
    def num_rows(self):
        """Get the number of rows."""
        return len(self._rows)

    def getcolumn(self, name):
        """Get a list of the values in the column with the given name."""
        self.check_columns([name])
        return [row[name] for row in self._rows]

    def select(self, *names):
        """Select columns by name, rows are not copied."""
        self.check_columns(names)
        return RowTable(self._rows, names=names)

    def rows(self):
        """Return a generator of rows restricted to the exposed columns."""
        for row in self._rows:
            yield {name: row[name] for name in self._names}

    def materializer(self):
        """Get a function to create rows in a sequence of the same type as the source."""
        source_type = type(self._rows)

        def materialize(columns):
            names = list(columns.keys())
            rows = (dict(zip(names, values)) for values in zip(*columns.values()))
            return source_type(rows)

        return materialize

    def __repr__(self):
        """Get repr."""
        return (
            f"{self.__class__.__name__}(columns={list(self.columnnames)}, "
            f"num_rows={self.num_rows})"
        )
