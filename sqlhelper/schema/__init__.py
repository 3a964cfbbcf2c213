"""
Schema definition: column types, constraints and CREATE TABLE rendering
"""

from .types import SqlType, ColumnConstraint, type_to_sql
from .column import ColumnDefinition
from .table_builder import TableBuilder

__all__ = [
    'SqlType',
    'ColumnConstraint',
    'type_to_sql',
    'ColumnDefinition',
    'TableBuilder'
]
