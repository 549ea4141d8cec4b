"""Pydantic schemas for Task."""

import datetime as dt
from typing import Optional

from pydantic import Field, model_validator

from planner.domain.schemas.base import APIModel
from planner.domain.schemas.category import CategorySummary

DUE_TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class TaskCreate(APIModel):
    text: str = Field(min_length=1)
    date: dt.date
    completed: bool = False
    category_id: Optional[str] = None
    due_time: Optional[str] = Field(default=None, pattern=DUE_TIME_PATTERN)
    notes: Optional[str] = None


class TaskUpdate(APIModel):
    text: Optional[str] = Field(default=None, min_length=1)
    date: Optional[dt.date] = None
    completed: Optional[bool] = None
    category_id: Optional[str] = None
    due_time: Optional[str] = Field(default=None, pattern=DUE_TIME_PATTERN)
    notes: Optional[str] = None

    @model_validator(mode="after")
    def required_columns_not_null(self):
        # category_id, due_time and notes may be cleared with null; the rest may not.
        for field in ("text", "date", "completed"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self


class TaskRead(APIModel):
    id: str
    user_id: str
    date: dt.date
    text: str
    completed: bool
    category_id: Optional[str] = None
    due_time: Optional[str] = None
    notes: Optional[str] = None
    category: Optional[CategorySummary] = None
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None
