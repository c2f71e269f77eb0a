"""Implementation of the Composition class.

A Composition is a single observation of a compositional array. It behaves
as an immutable ordered mapping of part names to values, but it does not hold
any data of its own: its values are a view into the buffer of the CoDaArray
it was obtained from.
"""

from collections.abc import Mapping

import numpy as np


class Composition(Mapping):
    """A view of a single composition in a CoDaArray.

    Compositions are created each time a CoDaArray is indexed or iterated
    over, and keep a reference to the array they belong to. Values can be
    accessed by part name or by integer position, as a row of a table. Key
    errors are raised for part names that are not in the composition and
    index errors for positions out of range.

    Absent values are NaN.
    """

    def __init__(self, array, index):
        """Initialize a Composition view.

        Args:
            array (CoDaArray):
                compositional array the composition belongs to.
            index (int):
                index of the observation in the array.
        """
        self._array = array
        self._index = index

    @property
    def array(self):
        """Get the CoDaArray this composition is a view of."""
        return self._array

    @property
    def index(self):
        """Get the index of this composition in its array."""
        return self._index

    @property
    def parts(self):
        """Get the part names, shared with the array."""
        return self._array.parts

    @property
    def columnnames(self):
        """Get the part names as the column names of a row."""
        return self.parts

    @property
    def missing(self):
        """Get the parts with absent values."""
        return tuple(
            part for part, value in zip(self.parts, self.values()) if np.isnan(value)
        )

    def values(self):
        """Get the values of all parts as a read-only array view.

        Returns:
            ndarray: values ordered as the parts.
        """
        return self._array.data[:, self._index]

    def getcolumn(self, key):
        """Get the value of a part.

        Args:
            key (str or int):
                part name or position of the part.

        Returns:
            float: value of the part, NaN if absent.
        """
        if isinstance(key, (int, np.integer)) and not isinstance(key, bool):
            if not 0 <= key < len(self):
                raise IndexError(
                    f"Part position {key} is out of range for a composition "
                    f"with {len(self)} parts."
                )
            position = key
        else:
            try:
                position = self._array.part_position(key)
            except KeyError as key_error:
                raise KeyError(
                    f"Part {key} is not in composition parts {self.parts}."
                ) from key_error
        return self._array.data[position, self._index]

    def __getitem__(self, key):
        """Get the value of a part by name or position."""
        return self.getcolumn(key)

    def __contains__(self, part):
        """Check if a part name is in the composition."""
        return part in self.parts

    def __len__(self):
        """Get number of parts."""
        return len(self.parts)

    def __iter__(self):
        """Iterate over part names."""
        return iter(self.parts)

    def __eq__(self, other):
        """Compare equality, requires same parts in the same order.

        Absent values compare equal to each other.
        """
        if not isinstance(other, Composition):
            return super().__eq__(other)

        return self.parts == other.parts and np.array_equal(
            self.values(), other.values(), equal_nan=True
        )

    __hash__ = None

    def __repr__(self):
        """Get repr."""
        items = ", ".join(
            f"{part}={'missing' if np.isnan(value) else value}"
            for part, value in zip(self.parts, self.values())
        )
        return f"{self.__class__.__name__}({items})"
