import logging
from fastapi import APIRouter, Body, Depends, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session
from ..core.errors import InternalError, ResourceNotFoundError
from ..db.session import get_session
from ..db.models import Task, User
from ..db import crud
from ..schemas.tasks import TaskCreate, TaskOut, TaskUpdate, TaskUpdateOut
from .deps import get_owner, paginate, parse_id, require_json
from typing import List

logger = logging.getLogger(__name__)

router = APIRouter()

TASK_NOT_FOUND = "Task not found."

# The owner dependency is listed first so an unknown user is reported
# before the body is validated.

@router.post("/users/{user_id}/tasks", response_model=TaskOut, status_code=201)
def create(
    owner: User = Depends(get_owner),
    _json: None = Depends(require_json),
    body: TaskCreate = Body(...),
    session: Session = Depends(get_session),
):
    data = body.model_dump(exclude_none=True)
    try:
        return crud.create_task(session, Task(user_id=owner.id, **data))
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception("create task failed user_id=%s", owner.id)
        raise InternalError(str(getattr(e, "orig", None) or e))

@router.put("/users/{user_id}/tasks/{task_id}", response_model=TaskUpdateOut)
def update(
    task_id: str,
    owner: User = Depends(get_owner),
    _json: None = Depends(require_json),
    body: TaskUpdate = Body(...),
    session: Session = Depends(get_session),
):
    tid = parse_id(task_id, TASK_NOT_FOUND)
    if not crud.update_task(session, owner.id, tid, body.model_dump(exclude_none=True)):
        raise ResourceNotFoundError(TASK_NOT_FOUND)
    return crud.get_task(session, owner.id, tid)

@router.delete("/users/{user_id}/tasks/{task_id}")
def delete(task_id: str, owner: User = Depends(get_owner), session: Session = Depends(get_session)):
    tid = parse_id(task_id, TASK_NOT_FOUND)
    if not crud.soft_delete_task(session, owner.id, tid):
        raise ResourceNotFoundError(TASK_NOT_FOUND)
    return Response(status_code=200)

@router.get("/users/{user_id}/tasks/{task_id}", response_model=TaskOut)
def get_one(task_id: str, owner: User = Depends(get_owner), session: Session = Depends(get_session)):
    task = crud.get_task(session, owner.id, parse_id(task_id, TASK_NOT_FOUND))
    if task is None:
        raise ResourceNotFoundError(TASK_NOT_FOUND)
    return task

@router.get("/users/{user_id}/tasks", response_model=List[TaskOut])
def list_all(
    limit: int = 100,
    page: int = 1,
    owner: User = Depends(get_owner),
    session: Session = Depends(get_session),
):
    limit, offset = paginate(limit, page)
    return crud.list_tasks(session, owner.id, limit=limit, offset=offset)
