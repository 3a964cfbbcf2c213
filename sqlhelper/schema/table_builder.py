"""
CREATE TABLE statement builder
"""

from typing import List, Union

from .column import ColumnDefinition
from .types import ColumnConstraint, SqlType


class TableBuilder:
    """
    Renders ``CREATE TABLE IF NOT EXISTS`` from an ordered list of columns.

    Column names and the table name are written as given; duplicate column
    names are not detected.
    """

    def __init__(self, table_name: str):
        self.table_name = table_name
        self.columns: List[ColumnDefinition] = []

    def add_column(self, name: str, type: Union[SqlType, str],
                   constraints: ColumnConstraint = ColumnConstraint.NONE) -> 'TableBuilder':
        """
        Append a column definition.

        Args:
            name: Column name
            type: Column type, or a type keyword such as ``"varchar(255)"``
            constraints: Constraint flags, e.g. ``PRIMARY_KEY | AUTO_INCREMENT``

        Returns:
            This builder, for chaining

        Raises:
            UnsupportedTypeError: If ``type`` is an unknown keyword
        """
        self.columns.append(ColumnDefinition(name=name, type=type, constraints=constraints))
        return self

    def build(self) -> str:
        """Render the statement, one column per line."""
        lines = [f"    {column.to_sql()}" for column in self.columns]
        body = ",\n".join(lines)
        if body:
            body += "\n"
        return f"CREATE TABLE IF NOT EXISTS {self.table_name} (\n{body});\n"
