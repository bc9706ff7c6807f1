# tests/test_models.py

from __future__ import annotations

from datetime import datetime

import pytest
from sqlalchemy import DateTime
from sqlmodel import Session

from taskboard.db import crud
from taskboard.db.models import Task, User


@pytest.mark.parametrize(
    "model,column",
    [
        (User, "created_at"),
        (User, "updated_at"),
        (Task, "date_time"),
        (Task, "next_execute_date_time"),
        (Task, "created_at"),
        (Task, "updated_at"),
    ],
)
def test_timestamp_columns_are_naive_datetime(model, column) -> None:
    col_type = model.__table__.c[column].type

    assert isinstance(col_type, DateTime)
    assert col_type.timezone is False
    assert model.__table__.c[column].nullable is False


def test_naive_utc_values_round_trip(engine) -> None:
    when = datetime(2016, 5, 25, 14, 25)

    with Session(engine) as session:
        user = crud.create_user(session, User(username="jsmith", first_name="John", last_name="Smith"))
        task = crud.create_task(
            session,
            Task(
                user_id=user.id,
                name="My task",
                description="Description of task",
                date_time=when,
                next_execute_date_time=when,
            ),
        )
        task_id = task.id

    with Session(engine) as session:
        stored = session.get(Task, task_id)
        assert stored.date_time == when
        assert stored.next_execute_date_time == when
        assert stored.created_at.tzinfo is None
