"""
Column types and constraints for DDL rendering
"""

from enum import Enum, Flag
from typing import Dict, Tuple, Union

from ..errors import UnsupportedTypeError


class SqlType(str, Enum):
    """Closed set of column types."""
    INTEGER = "integer"
    TEXT = "text"
    VARCHAR = "varchar"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    DECIMAL = "decimal"
    FLOAT = "float"
    DOUBLE = "double"
    BLOB = "blob"

    def to_sql(self) -> str:
        """Return the SQL keyword for this type."""
        return type_to_sql(self)

    @classmethod
    def parse(cls, value: Union['SqlType', str]) -> 'SqlType':
        """
        Resolve a type keyword such as ``"INT"`` or ``"varchar(255)"``.

        Size specifications are ignored; VARCHAR always renders as
        ``VARCHAR(255)``.

        Raises:
            UnsupportedTypeError: If the keyword has no matching type
        """
        if isinstance(value, SqlType):
            return value

        type_str = str(value).lower().strip()

        # Remove size specifications like VARCHAR(255)
        if '(' in type_str:
            type_str = type_str.split('(')[0].strip()

        if type_str in TYPE_ALIASES:
            return TYPE_ALIASES[type_str]

        raise UnsupportedTypeError(f"Unsupported type: {value}")


SQL_KEYWORDS: Dict[SqlType, str] = {
    SqlType.INTEGER: "INTEGER",
    SqlType.TEXT: "TEXT",
    SqlType.VARCHAR: "VARCHAR(255)",
    SqlType.BOOLEAN: "BOOLEAN",
    SqlType.DATETIME: "DATETIME",
    SqlType.DECIMAL: "DECIMAL",
    SqlType.FLOAT: "FLOAT",
    SqlType.DOUBLE: "DOUBLE",
    SqlType.BLOB: "BLOB",
}

TYPE_ALIASES: Dict[str, SqlType] = {
    # Integer types
    'integer': SqlType.INTEGER,
    'int': SqlType.INTEGER,

    # String types
    'text': SqlType.TEXT,
    'varchar': SqlType.VARCHAR,
    'string': SqlType.VARCHAR,

    # Boolean type
    'boolean': SqlType.BOOLEAN,
    'bool': SqlType.BOOLEAN,

    # Date/Time types
    'datetime': SqlType.DATETIME,
    'timestamp': SqlType.DATETIME,

    # Numeric types
    'decimal': SqlType.DECIMAL,
    'numeric': SqlType.DECIMAL,
    'float': SqlType.FLOAT,
    'real': SqlType.FLOAT,
    'double': SqlType.DOUBLE,

    # Binary types
    'blob': SqlType.BLOB,
    'binary': SqlType.BLOB,
}


def type_to_sql(sql_type: SqlType) -> str:
    """
    Look up the SQL keyword for a column type.

    Raises:
        UnsupportedTypeError: If the value is not a ``SqlType`` member; plain
            strings go through ``SqlType.parse`` instead
    """
    if not isinstance(sql_type, SqlType) or sql_type not in SQL_KEYWORDS:
        raise UnsupportedTypeError(f"Unsupported type: {sql_type!r}")
    return SQL_KEYWORDS[sql_type]


class ColumnConstraint(Flag):
    """Independently combinable column constraints."""
    NONE = 0
    PRIMARY_KEY = 1 << 0
    AUTO_INCREMENT = 1 << 1
    NOT_NULL = 1 << 2
    UNIQUE = 1 << 3

    def to_sql(self) -> str:
        """Render set constraints in the fixed order PK, AUTOINCREMENT, NOT NULL, UNIQUE."""
        return ''.join(f" {keyword}" for flag, keyword in CONSTRAINT_ORDER if flag in self)


CONSTRAINT_ORDER: Tuple[Tuple[ColumnConstraint, str], ...] = (
    (ColumnConstraint.PRIMARY_KEY, "PRIMARY KEY"),
    (ColumnConstraint.AUTO_INCREMENT, "AUTOINCREMENT"),
    (ColumnConstraint.NOT_NULL, "NOT NULL"),
    (ColumnConstraint.UNIQUE, "UNIQUE"),
)
