from datetime import datetime
from typing import Any, Dict, List, Optional
from sqlalchemy import update
from sqlmodel import select
from .models import Task, TaskStatus, User, utcnow
from sqlmodel import Session

# ---- users ----

def create_user(session: Session, user: User) -> User:
    session.add(user)
    session.commit()
    session.refresh(user)
    return user

def get_user(session: Session, user_id: int) -> Optional[User]:
    return session.get(User, user_id)

def list_users(session: Session, limit: int = 100, offset: int = 0) -> List[User]:
    return session.exec(select(User).order_by(User.id).offset(offset).limit(limit)).all()

def update_user(session: Session, user_id: int, fields: Dict[str, Any]) -> bool:
    """Partial update in one statement. Returns False when no such user."""
    if not fields:
        return get_user(session, user_id) is not None
    res = session.exec(
        update(User)
        .where(User.id == user_id)
        .values(**fields, updated_at=utcnow())
    )
    session.commit()
    return res.rowcount == 1

# ---- tasks ----

def create_task(session: Session, task: Task) -> Task:
    session.add(task)
    session.commit()
    session.refresh(task)
    return task

def get_task(session: Session, user_id: int, task_id: int) -> Optional[Task]:
    return session.exec(
        select(Task).where(Task.id == task_id, Task.user_id == user_id)
    ).first()

def list_tasks(session: Session, user_id: int, limit: int = 100, offset: int = 0) -> List[Task]:
    return session.exec(
        select(Task)
        .where(Task.user_id == user_id)
        .order_by(Task.id)
        .offset(offset)
        .limit(limit)
    ).all()

def update_task(session: Session, user_id: int, task_id: int, fields: Dict[str, Any]) -> bool:
    """Partial update scoped to the owner. Returns False when no such task."""
    if not fields:
        return get_task(session, user_id, task_id) is not None
    res = session.exec(
        update(Task)
        .where(Task.id == task_id, Task.user_id == user_id)
        .values(**fields, updated_at=utcnow())
    )
    session.commit()
    return res.rowcount == 1

def soft_delete_task(session: Session, user_id: int, task_id: int) -> bool:
    """Only pending tasks move to deleted; done and deleted are left as they are.

    Returns False when the task does not exist for this owner.
    """
    if get_task(session, user_id, task_id) is None:
        return False
    session.exec(
        update(Task)
        .where(Task.id == task_id, Task.user_id == user_id, Task.status == TaskStatus.PENDING)
        .values(status=TaskStatus.DELETED, updated_at=utcnow())
    )
    session.commit()
    return True

# ---- reconciliation ----

def list_overdue_tasks(session: Session, now: datetime) -> List[Task]:
    # strict "<": a task due exactly at `now` waits for the next run
    return session.exec(
        select(Task)
        .where(Task.status == TaskStatus.PENDING, Task.next_execute_date_time < now)
        .order_by(Task.id)
    ).all()

def mark_task_done(session: Session, task_id: int, now: Optional[datetime] = None) -> bool:
    # False when the task left pending after it was selected
    res = session.exec(
        update(Task)
        .where(Task.id == task_id, Task.status == TaskStatus.PENDING)
        .values(status=TaskStatus.DONE, updated_at=now or utcnow())
    )
    session.commit()
    return res.rowcount == 1
