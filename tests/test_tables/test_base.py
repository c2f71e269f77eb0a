import pandas as pd
import pytest

from codarrays import CoDaArray, as_table, available_table_types
from codarrays.tables import ColumnTable, DataFrameTable, RowTable, Table
from codarrays.utils.exceptions import MissingColumnError
from tests.utils import make_table

TABLE_CLASSES = {
    "columns": ColumnTable,
    "rows": RowTable,
    "dataframe": DataFrameTable,
}


def test_as_table(table, table_kind):
    tab = as_table(table)
    assert isinstance(tab, TABLE_CLASSES[table_kind])
    assert tab.columnnames == ("Cd", "Cu", "Pb", "Loc")
    assert tab.num_rows == 3
    assert tab.num_columns == 4
    # already a table
    assert as_table(tab) is tab


def test_as_table_coda(coda):
    assert as_table(coda) is coda


def test_as_table_type():
    tab = as_table([], table_type="row-table")
    assert isinstance(tab, RowTable)
    assert tab.num_rows == 0
    assert tab.columnnames == ()

    tab = as_table({"a": [1, 2]}, table_type="Column-Table")
    assert isinstance(tab, ColumnTable)

    with pytest.raises(NotImplementedError):
        as_table({"a": [1, 2]}, table_type="beep-boop")


@pytest.mark.parametrize("obj", [5, "Cd", None, {"a": 1}, [1, 2, 3]])
def test_as_table_fails(obj):
    with pytest.raises(TypeError):
        as_table(obj)


def test_available_table_types():
    types = available_table_types()
    assert all(
        name in types
        for name in ["column-table", "row-table", "data-frame-table", "co-da-array"]
    )


def test_getcolumn(table):
    tab = as_table(table)
    assert list(tab.getcolumn("Cd")) == [1, 4, 7]
    assert list(tab.getcolumn("Loc")) == ["a", "b", "c"]
    with pytest.raises(MissingColumnError):
        tab.getcolumn("Zn")
    # missing column errors are also key errors
    with pytest.raises(KeyError):
        tab.getcolumn("Zn")


def test_numeric_column(table):
    tab = as_table(table)
    pb = tab.numeric_column("Pb")
    assert pb.dtype == float
    assert pb.shape == (3,)
    assert pb[0] == 3.0 and pb[2] == 9.0
    assert pd.isna(pb[1])

    with pytest.raises(TypeError):
        tab.numeric_column("Loc")


def test_select(table, table_kind):
    tab = as_table(table)
    sel = tab.select("Pb", "Cd")
    assert isinstance(sel, TABLE_CLASSES[table_kind])
    assert sel.columnnames == ("Pb", "Cd")
    assert sel.num_rows == 3
    assert list(sel.getcolumn("Cd")) == [1, 4, 7]

    with pytest.raises(MissingColumnError):
        tab.select("Cd", "Zn")


def test_rows(table):
    rows = list(as_table(table).select("Cd", "Loc").rows())
    assert len(rows) == 3
    assert [row["Loc"] for row in rows] == ["a", "b", "c"]
    assert all(list(row.keys()) == ["Cd", "Loc"] for row in rows)


def test_materializer(table, table_kind):
    tab = as_table(table)
    materialize = tab.materializer()
    new = materialize({"Loc": tab.getcolumn("Loc"), "Zn": [0.1, 0.2, 0.3]})
    assert type(new) is type(table)
    new_tab = as_table(new)
    assert new_tab.columnnames == ("Loc", "Zn")
    assert list(new_tab.getcolumn("Zn")) == [0.1, 0.2, 0.3]
    assert list(new_tab.getcolumn("Loc")) == ["a", "b", "c"]
    # the table made from a selection materializes the same type of table
    assert type(tab.select("Cd").materializer()({"a": [1, 2, 3]})) is type(table)


def test_materializer_holds_coda(table, coda):
    materialize = as_table(table).materializer()
    new = materialize({"coda": coda})
    compositions = list(as_table(new).getcolumn("coda"))
    assert len(compositions) == 3
    assert all(comp == expected for comp, expected in zip(compositions, coda))


class PairsTable(Table):
    """A table of (name, values) pairs used to check custom tables work."""

    def __init__(self, pairs):
        self.pairs = tuple(pairs)

    @property
    def columnnames(self):
        return tuple(name for name, _ in self.pairs)

    @property
    def num_rows(self):
        return len(self.pairs[0][1]) if len(self.pairs) > 0 else 0

    def getcolumn(self, name):
        self.check_columns([name])
        return dict(self.pairs)[name]

    def select(self, *names):
        self.check_columns(names)
        return PairsTable((name, self.getcolumn(name)) for name in names)

    def materializer(self):
        return lambda columns: PairsTable(columns.items())


def test_custom_table():
    tab = PairsTable([("Cd", [1, 2]), ("Cu", [3, None]), ("Loc", ["x", "y"])])
    assert as_table(tab) is tab
    coda = CoDaArray(tab.select("Cd", "Cu"))
    assert coda.parts == ("Cd", "Cu")
    assert coda[1].missing == ("Cu",)
    # custom tables are not picked by dispatch
    assert not PairsTable.accepts(make_table("columns"))
