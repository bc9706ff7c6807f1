from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from ..db.models import TaskStatus


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class TaskCreate(BaseModel):
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    date_time: datetime
    next_execute_date_time: Optional[datetime] = None

    @field_validator("date_time", "next_execute_date_time")
    @classmethod
    def normalize_utc(cls, v):
        return to_naive_utc(v)

    class Config:
        str_strip_whitespace = True


class TaskUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    date_time: Optional[datetime] = None

    @field_validator("date_time")
    @classmethod
    def normalize_utc(cls, v):
        return to_naive_utc(v)

    class Config:
        str_strip_whitespace = True


class TaskOut(BaseModel):
    id: int
    user_id: int
    name: str
    description: str
    date_time: datetime
    status: TaskStatus
    next_execute_date_time: datetime
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class TaskUpdateOut(BaseModel):
    name: str
    description: str
    date_time: datetime

    class Config:
        from_attributes = True
