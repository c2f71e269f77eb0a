"""Arrays of compositional data built from the columns of tables."""

from importlib.metadata import PackageNotFoundError, version

from codarrays.array import CoDaArray, parts
from codarrays.compose import compose
from codarrays.composition import Composition
from codarrays.tables import Table, as_table, available_table_types

try:
    __version__ = version("codarrays")
except PackageNotFoundError:
    # package is not installed
    pass

__all__ = [
    "CoDaArray",
    "Composition",
    "Table",
    "as_table",
    "available_table_types",
    "compose",
    "parts",
]
