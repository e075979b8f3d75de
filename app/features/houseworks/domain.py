"""Domain models for Houseworks feature"""

from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationInfo, model_validator

# Only these attributes may be set through a bulk assignment (create/update payloads, fill()).
FILLABLE = ("task_name", "term", "point")


def fillable_fields(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Keep only the bulk-assignable keys of a mapping; everything else is dropped silently."""
    return {key: data[key] for key in FILLABLE if key in data}


class HouseworkBase(BaseModel):
    """Base housework fields. All three are free text and optional."""
    task_name: Optional[str] = None
    term: Optional[str] = None
    # Opaque score; numbers are kept as their string form
    point: Optional[str] = None

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class HouseworkCreate(HouseworkBase):
    """Housework creation payload"""
    pass


class HouseworkUpdate(HouseworkBase):
    """Housework update payload - only the fields actually supplied are written"""

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class HouseworkRecord(HouseworkBase):
    """
    One housework entry.

    id and the timestamps belong to the repository that persisted the record.
    Building a record from a plain mapping only ever takes task_name, term and point;
    repositories hydrate stored rows with ``context={"persisted": True}``.
    """
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True, from_attributes=True)

    @model_validator(mode="before")
    @classmethod
    def _restrict_to_fillable(cls, data: Any, info: ValidationInfo) -> Any:
        if isinstance(data, Mapping) and not (info.context or {}).get("persisted"):
            return fillable_fields(data)
        return data

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def fill(self, data: Mapping[str, Any]) -> "HouseworkRecord":
        """Bulk-assign the fillable keys of ``data`` onto this record."""
        for key, value in fillable_fields(data).items():
            setattr(self, key, value)
        return self

    def attributes(self) -> Dict[str, Any]:
        """The three fillable attributes as a dict."""
        return {key: getattr(self, key) for key in FILLABLE}


def filter_values(filters: Mapping[str, Any]) -> Dict[str, Any]:
    """Fillable filter keys with values converted the same way stored fields are."""
    return HouseworkUpdate(**fillable_fields(filters)).changes()
