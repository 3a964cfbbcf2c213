"""
SELECT statement builder.

Builders are immutable: every configuration call returns a new builder and
leaves the receiver untouched, so a partially configured builder can be
shared and extended safely::

    base = SelectBuilder().from_("users")
    sql, params = base.where("id", 5).build()
    # sql    == "SELECT * FROM users WHERE id = @id_0"
    # params == {"@id_0": 5}

Values only ever travel in the parameter mapping; they are never written into
the SQL text. Identifiers are not quoted or validated.
"""

from types import MappingProxyType
from typing import Any, Mapping, NamedTuple, Optional, Tuple
from pydantic import BaseModel, ConfigDict

from ..errors import ConfigurationError


class BuiltQuery(NamedTuple):
    """Rendered SQL and a read-only snapshot of its parameters."""
    sql: str
    parameters: Mapping[str, Any]


class SelectBuilder(BaseModel):
    """Accumulates the clauses of a single-table SELECT."""

    model_config = ConfigDict(frozen=True)

    table_name: str = ''
    columns: Tuple[str, ...] = ()
    conditions: Tuple[str, ...] = ()
    parameters: Tuple[Tuple[str, Any], ...] = ()
    order_clause: Optional[str] = None
    row_limit: Optional[int] = None

    def select(self, *columns: str) -> 'SelectBuilder':
        """Append columns to the projection."""
        return self.model_copy(update={'columns': self.columns + tuple(columns)})

    def select_all(self) -> 'SelectBuilder':
        """Replace the projection with ``*``."""
        return self.model_copy(update={'columns': ('*',)})

    def from_(self, table: str) -> 'SelectBuilder':
        """Set the table to select from."""
        return self.model_copy(update={'table_name': table})

    def where(self, column: str, value: Any) -> 'SelectBuilder':
        """
        Add an equality predicate, ANDed with any previous ones.

        The placeholder is ``@<column>_<n>`` where ``n`` counts the predicates
        added before this one, so filtering the same column twice yields
        distinct placeholders.

        Args:
            column: Column to compare
            value: Value bound to the placeholder

        Returns:
            New builder with the predicate appended
        """
        placeholder = f"@{column}_{len(self.conditions)}"
        return self.model_copy(update={
            'conditions': self.conditions + (f"{column} = {placeholder}",),
            'parameters': self.parameters + ((placeholder, value),),
        })

    def order_by(self, column: str, ascending: bool = True) -> 'SelectBuilder':
        """Set the single ORDER BY column, replacing any previous one."""
        return self.model_copy(update={'order_clause': f"{column} {'ASC' if ascending else 'DESC'}"})

    def limit(self, count: int) -> 'SelectBuilder':
        """Cap the number of rows, replacing any previous limit."""
        if count < 0:
            raise ValueError(f"Limit must be non-negative, got {count}")
        return self.model_copy(update={'row_limit': count})

    def build(self) -> BuiltQuery:
        """
        Render the statement.

        Returns:
            BuiltQuery with the SQL text and a parameter snapshot

        Raises:
            ConfigurationError: If no table was set with ``from_()``
        """
        if not self.table_name or not self.table_name.strip():
            raise ConfigurationError("Table name must be specified with from_()")

        parts = [f"SELECT {', '.join(self.columns) if self.columns else '*'} FROM {self.table_name}"]
        if self.conditions:
            parts.append(f" WHERE {' AND '.join(self.conditions)}")
        if self.order_clause:
            parts.append(f" ORDER BY {self.order_clause}")
        if self.row_limit is not None:
            parts.append(f" LIMIT {self.row_limit}")

        return BuiltQuery(''.join(parts), MappingProxyType(dict(self.parameters)))
