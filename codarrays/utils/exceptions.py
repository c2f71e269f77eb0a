"""Definitions of specific exceptions raised elsewhere."""


class DimensionMismatchError(ValueError):
    """Exception for tables whose columns do not all have the same length.

    Raised when a table used to build a compositional array is not
    rectangular.
    """


class MissingColumnError(KeyError):
    """Exception raised when a requested column is not in a table.

    This class inherits from KeyError so that it can be handled like any
    other failed lookup.
    """

    def __str__(self):
        """Get message without the quoting added by KeyError."""
        return str(self.args[0]) if self.args else ""


class ColumnNameConflictError(ValueError):
    """Raised when a new column would overwrite a column that is kept."""
