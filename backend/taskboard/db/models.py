from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field


def utcnow() -> datetime:
    """Naive UTC now; every timestamp in the store is naive UTC."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def utc_field(**kwargs):
    # Columns are declared as plain DateTime so naive UTC values are accepted
    # whatever datetime type the installed SQLModel would pick by default.
    return Field(sa_type=DateTime(timezone=False), nullable=False, **kwargs)


class TaskStatus(str, Enum):
    PENDING = "pending"
    DONE = "done"
    DELETED = "deleted"


class User(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(index=True, unique=True)
    first_name: str
    last_name: str
    created_at: datetime = utc_field(default_factory=utcnow)
    updated_at: datetime = utc_field(default_factory=utcnow)


class Task(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", index=True, nullable=False)
    name: str
    description: str
    date_time: datetime = utc_field()
    status: TaskStatus = Field(default=TaskStatus.PENDING, index=True, nullable=False)
    next_execute_date_time: datetime = utc_field(default_factory=utcnow)
    created_at: datetime = utc_field(default_factory=utcnow)
    updated_at: datetime = utc_field(default_factory=utcnow)
