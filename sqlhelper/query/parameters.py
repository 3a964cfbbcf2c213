"""
Named SQL parameters.

``None`` is the only null value: a parameter built with ``None`` keeps it,
SQLAlchemy binds it as SQL NULL, and readers return ``None`` for NULL
columns.
"""

from typing import Any, Dict
from pydantic import BaseModel, ConfigDict, Field


class SqlParameter(BaseModel):
    """A placeholder name paired with its value."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Placeholder token, e.g. '@age_0'")
    value: Any = Field(None, description="Bound value; None binds as NULL")

    def __init__(self, name: str, value: Any = None, **data: Any):
        super().__init__(name=name, value=value, **data)


def build_parameters(*parameters: SqlParameter) -> Dict[str, Any]:
    """
    Collect parameters into the name to value mapping the executor accepts.

    A later parameter with the same name replaces an earlier one.
    """
    result: Dict[str, Any] = {}
    for parameter in parameters:
        result[parameter.name] = parameter.value
    return result
