"""
Column definition model
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .types import ColumnConstraint, SqlType


class ColumnDefinition(BaseModel):
    """One column of a CREATE TABLE statement."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Column name, rendered as given")
    type: SqlType = Field(..., description="Column type")
    constraints: ColumnConstraint = Field(default=ColumnConstraint.NONE, description="Constraint flags")

    @field_validator('type', mode='before')
    @classmethod
    def parse_type(cls, v):
        """Accept type keywords such as 'int' or 'varchar(255)'."""
        return SqlType.parse(v)

    def to_sql(self) -> str:
        """Render ``<name> <TYPE>`` followed by the set constraints."""
        return f"{self.name} {self.type.to_sql()}{self.constraints.to_sql()}"
