"""Implementation of the CoDaArray class.

A CoDaArray is an array of compositional data. All compositions in an array
share the same parts, and the values of all compositions are stored in a
single (parts x observations) float buffer. Indexing the array gives a
Composition view of one observation without copying any data.

A CoDaArray is itself a Table, so it can be used anywhere a table is expected
and can be stored as a column of another table.
"""

import warnings
from collections.abc import Sequence

import numpy as np
from monty.json import MSONable

from codarrays.composition import Composition
from codarrays.tables.base import Table, as_table
from codarrays.utils.exceptions import DimensionMismatchError


class CoDaArray(Table, Sequence, MSONable):
    """An immutable array of compositions.

    The data is held in a read-only float numpy array of shape
    (num_parts, num_rows) in column-major order, so that each composition is
    contiguous in memory. Absent values are stored as NaN.

    Attributes:
        parts (tuple of str):
            names of the parts in each composition.
        data (ndarray):
            read-only buffer with a row for each part and a column for each
            composition.
    """

    def __init__(self, table):
        """Initialize a CoDaArray from the columns of a table.

        Each column of the table is a part of the compositions, and each row
        a composition.

        Args:
            table (Table):
                a Table, or anything that can be used as one (a dict of
                columns, a list of rows, a pandas DataFrame, a list of
                Compositions, another CoDaArray).
        """
        table = as_table(table)
        parts = table.columnnames
        num_rows = table.num_rows

        data = np.empty((len(parts), num_rows), order="F")
        for i, part in enumerate(parts):
            column = table.numeric_column(part)
            if len(column) != num_rows:
                raise DimensionMismatchError(
                    f"Column {part} has {len(column)} values but the table has "
                    f"{num_rows} rows."
                )
            data[i] = column

        self._initialize(parts, data)

        if len(self._parts) == 0:
            warnings.warn(
                "The table has no columns, the compositional array will have no "
                "parts."
            )
        elif num_rows > 0:
            empty = [
                part
                for part, values in zip(self._parts, self._data)
                if np.isnan(values).all()
            ]
            if len(empty) > 0:
                warnings.warn(f"Parts {empty} have no values in any composition.")

    def _initialize(self, parts, data):
        """Check parts and set the read-only buffer."""
        parts = tuple(parts)
        for part in parts:
            if not isinstance(part, str):
                raise TypeError(
                    f"Part names must be strings, got {part} of type "
                    f"{type(part).__name__}."
                )
        if len(set(parts)) != len(parts):
            duplicates = sorted({part for part in parts if parts.count(part) > 1})
            raise ValueError(f"Part names must be unique, got duplicates {duplicates}.")

        if data.ndim != 2 or data.shape[0] != len(parts):
            raise DimensionMismatchError(
                f"Data with shape {data.shape} does not match {len(parts)} parts."
            )

        self._parts = parts
        self._positions = {part: i for i, part in enumerate(parts)}
        self._data = np.asfortranarray(data, dtype=float)
        self._data.flags.writeable = False

    def _view(self, data):
        """Create an array sharing parts with this one over a view of the data."""
        array = self.__class__.__new__(self.__class__)
        array._parts = self._parts
        array._positions = self._positions
        array._data = data
        return array

    @property
    def parts(self):
        """Get the part names."""
        return self._parts

    @property
    def num_parts(self):
        """Get the number of parts in each composition."""
        return len(self._parts)

    @property
    def data(self):
        """Get the read-only (num_parts, num_rows) buffer."""
        return self._data

    def part_position(self, part):
        """Get the position of a part.

        Args:
            part (str):
                name of the part.

        Returns:
            int
        """
        return self._positions[part]

    @property
    def columnnames(self):
        """Get the part names as column names."""
        return self._parts

    @property
    def num_rows(self):
        """Get the number of compositions."""
        return self._data.shape[1]

    def getcolumn(self, name):
        """Get the values of a part in all compositions.

        Args:
            name (str or int):
                name or position of the part.

        Returns:
            ndarray: read-only view of the values of the part.
        """
        if isinstance(name, (int, np.integer)) and not isinstance(name, bool):
            if not 0 <= name < self.num_parts:
                raise IndexError(
                    f"Part position {name} is out of range for {self.num_parts} parts."
                )
            return self._data[name]
        self.check_columns([name])
        return self._data[self._positions[name]]

    def select(self, *names):
        """Get a new CoDaArray with only the given parts, in the given order."""
        self.check_columns(names)
        array = self.__class__.__new__(self.__class__)
        array._initialize(names, self._data[[self._positions[name] for name in names]])
        return array

    def rows(self):
        """Get the rows of the array, which is the array itself."""
        return self

    def materializer(self):
        """Get a function to create a new table from columns.

        A CoDaArray can not hold columns that are not numeric (i.e. another
        CoDaArray), so new tables are created as dictionaries of columns.
        """
        return dict

    def __getitem__(self, key):
        """Get the composition at a given index, or a slice of the array.

        Args:
            key (int or slice):
                index in [0, num_rows) or a slice. A slice gives a new
                CoDaArray over a view of the same data.

        Returns:
            Composition or CoDaArray
        """
        if isinstance(key, slice):
            return self._view(self._data[:, key])

        if isinstance(key, (bool, np.bool_)) or not isinstance(key, (int, np.integer)):
            raise TypeError(
                f"{self.__class__.__name__} indices must be integers or slices, "
                f"not {type(key).__name__}."
            )
        if not 0 <= key < len(self):
            raise IndexError(
                f"Index {key} is out of range for {self.__class__.__name__} with "
                f"{len(self)} compositions."
            )
        return Composition(self, int(key))

    def __len__(self):
        """Get the number of compositions."""
        return self.num_rows

    def __iter__(self):
        """Iterate over the compositions."""
        for i in range(len(self)):
            yield Composition(self, i)

    def __eq__(self, other):
        """Check equality of parts (including order) and values.

        Absent values compare equal to each other.
        """
        if not isinstance(other, CoDaArray):
            return NotImplemented
        return self._parts == other.parts and np.array_equal(
            self._data, other.data, equal_nan=True
        )

    __hash__ = None

    def __repr__(self):
        """Get repr."""
        return (
            f"{self.__class__.__name__}(parts={self._parts}, "
            f"num_rows={self.num_rows})"
        )

    def __str__(self):
        """Get pretty string with a line for each composition."""
        lines = [f"{len(self)}-element {self.__class__.__name__} with parts:"]
        lines.append("  " + ", ".join(self._parts))
        lines.extend("  " + repr(composition) for composition in self)
        return "\n".join(lines)

    def __getstate__(self):
        """Get state for pickling."""
        return self.__dict__.copy()

    def __setstate__(self, state):
        """Set state from pickle, keeping the buffer read-only."""
        self.__dict__.update(state)
        self._data.flags.writeable = False

    def as_dict(self):
        """Get Json-serialization dict representation.

        Absent values are saved as None.

        Returns:
            MSONable dict
        """
        data = np.where(np.isnan(self._data), None, self._data)
        return {
            "@module": self.__class__.__module__,
            "@class": self.__class__.__name__,
            "parts": list(self._parts),
            "num_rows": self.num_rows,
            "data": data.tolist(),
        }

    @classmethod
    def from_dict(cls, d):
        """Instantiate a CoDaArray from dict representation.

        Returns:
            CoDaArray
        """
        data = np.array(d["data"], dtype=float).reshape(len(d["parts"]), d["num_rows"])
        array = cls.__new__(cls)
        array._initialize(d["parts"], data)
        return array


def parts(array):
    """Get the parts of a compositional array."""
    return array.parts
