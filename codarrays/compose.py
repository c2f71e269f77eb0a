"""Functions to create compositional arrays from the columns of a table."""

from codarrays.array import CoDaArray
from codarrays.tables.base import as_table
from codarrays.utils.exceptions import ColumnNameConflictError

DEFAULT_COMPOSITION_NAME = "coda"


def compose(table, cols=None, keepcols=False, name=DEFAULT_COMPOSITION_NAME):
    """Convert columns of a table into the parts of compositions.

    The selected columns are saved in a CoDaArray. If keepcols is True, the
    array is instead saved as a column of a new table that keeps all the other
    columns of the original table. The new table is of the same type as the
    given table, i.e. a dict of columns gives a dict, a list of rows gives a
    list and a DataFrame gives a DataFrame.

    Example:
        Create a compositional array from columns ("Cd", "Cu", "Pb"):

        >>> compose(table, ["Cd", "Cu", "Pb"])

        Do the same, but place the array in a column named "coda" of a new
        table with all the other columns of the original table:

        >>> compose(table, ["Cd", "Cu", "Pb"], keepcols=True)

    Args:
        table (object):
            a Table or anything that can be used as one, see as_table.
        cols (Sequence of str): optional
            names of the columns to use as parts, in order. If not given all
            columns of the table are used.
        keepcols (bool): optional
            if True return a new table with the remaining columns and the
            compositional array as a column.
        name (str): optional
            name of the column holding the compositional array when keepcols
            is True.

    Returns:
        CoDaArray or table of the same type as the given table
    """
    source = as_table(table)
    if cols is None:
        cols = source.columnnames
    elif isinstance(cols, str):
        cols = (cols,)
    else:
        cols = tuple(cols)

    if len(set(cols)) != len(cols):
        raise ValueError(f"Columns to compose must be unique, got {cols}.")

    selection = source.select(*cols)
    other = [col for col in source.columnnames if col not in cols]
    if keepcols and name in other:
        raise ColumnNameConflictError(
            f"Column {name} is already in the table and not one of the parts "
            f"{cols}. Use a different name for the compositions column."
        )

    coda = CoDaArray(selection)
    if not keepcols:
        return coda

    columns = {col: source.getcolumn(col) for col in other}
    columns[name] = coda
    materialize = source.materializer()
    return materialize(columns)
