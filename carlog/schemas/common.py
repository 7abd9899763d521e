from datetime import datetime, timezone
from typing import Annotated, ClassVar, Optional, Tuple
from pydantic import AfterValidator, BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel


def naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an aware datetime to naive UTC, the form stored in the database."""
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


UtcDatetime = Annotated[datetime, AfterValidator(naive_utc)]


def aware_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Tag a stored naive UTC datetime as UTC so it serializes with a "Z" suffix."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


UtcTimestamp = Annotated[datetime, AfterValidator(aware_utc)]

# Integer columns are 32-bit signed
MAX_INT = 2**31 - 1

Mileage = Annotated[int, Field(ge=0, le=MAX_INT)]


class CamelModel(BaseModel):
    """Base schema: snake_case attributes, camelCase JSON."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class PatchModel(CamelModel):
    """
    Base schema for partial updates.

    Only the fields present in the request body are applied, so services read
    them with ``model_dump(exclude_unset=True)``. Fields listed in
    ``non_nullable`` may be omitted but not sent as ``null``.
    """

    non_nullable: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_nulls(self):
        for name in self.model_fields_set:
            if name in self.non_nullable and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self


class PaginationMeta(BaseModel):
    """Pagination block returned alongside every list."""
    page: int = Field(..., description="Current page (1-based)")
    limit: int = Field(..., description="Page size")
    total: int = Field(..., description="Total number of matching records")
    totalPages: int = Field(..., description="Number of pages for this limit")
