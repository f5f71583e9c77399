"""
Shared pieces of the entity schemas.

Attributes are declared in snake_case and exposed to the UI in
camelCase (``farm_id`` <-> ``farmId``).  Both spellings are accepted
on input; ``model_dump(by_alias=True)`` yields the UI shape.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UIModel(BaseModel):
    """Base class for every entity schema."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def blank_to_none(value: Any) -> Any:
    """Treat an empty form value as "not provided".

    Used as a ``mode="before"`` validator on optional numeric fields so
    that ``""`` becomes ``None`` instead of failing coercion or turning
    into ``0``.
    """
    if isinstance(value, str) and not value.strip():
        return None
    return value
