"""Tabular protocol used to build and export compositional arrays.

Importing this package registers all the table types that can be wrapped by
as_table.
"""

from codarrays.tables.base import Table, as_table, available_table_types
from codarrays.tables.columns import ColumnTable
from codarrays.tables.dataframe import DataFrameTable
from codarrays.tables.rows import RowTable

__all__ = [
    "Table",
    "ColumnTable",
    "RowTable",
    "DataFrameTable",
    "as_table",
    "available_table_types",
]
