"""Pydantic schemas for Category."""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from planner.domain.schemas.base import APIModel


class CategoryCreate(APIModel):
    name: str = Field(min_length=1, max_length=100)
    emoji: str = Field(min_length=1, max_length=16)
    color: str = Field(min_length=1, max_length=100)


class CategoryUpdate(APIModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    emoji: Optional[str] = Field(default=None, min_length=1, max_length=16)
    color: Optional[str] = Field(default=None, min_length=1, max_length=100)

    @model_validator(mode="after")
    def no_explicit_nulls(self):
        # Every column is NOT NULL, so a partial update may omit fields but not null them.
        for field in self.model_fields_set:
            if getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self


class CategorySummary(APIModel):
    id: str
    name: str
    emoji: str
    color: str


class CategoryRead(CategorySummary):
    user_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
