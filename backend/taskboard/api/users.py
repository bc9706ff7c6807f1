import logging
from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session
from ..core.errors import InternalError, InvalidContentError, ResourceNotFoundError
from ..db.session import get_session
from ..db.models import User
from ..db import crud
from ..schemas.users import UserCreate, UserOut, UserUpdate, UserUpdateOut
from .deps import paginate, parse_id, require_json
from typing import List

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/users", response_model=UserOut, status_code=201, dependencies=[Depends(require_json)])
def create(body: UserCreate, session: Session = Depends(get_session)):
    try:
        return crud.create_user(session, User(**body.model_dump()))
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception("create user failed username=%s", body.username)
        raise InternalError(str(getattr(e, "orig", None) or e))

@router.put("/users/{user_id}", response_model=UserUpdateOut, dependencies=[Depends(require_json)])
def update(user_id: str, body: UserUpdate, session: Session = Depends(get_session)):
    uid = parse_id(user_id, "User not found.")
    try:
        found = crud.update_user(session, uid, body.model_dump(exclude_none=True))
    except IntegrityError as e:
        session.rollback()
        logger.warning("update user rejected user_id=%s: %s", uid, e.orig)
        raise InvalidContentError(str(e.orig))
    if not found:
        raise ResourceNotFoundError("User not found.")
    return crud.get_user(session, uid)

@router.get("/users", response_model=List[UserOut])
def list_all(limit: int = 100, page: int = 1, session: Session = Depends(get_session)):
    limit, offset = paginate(limit, page)
    return crud.list_users(session, limit=limit, offset=offset)

@router.get("/users/{user_id}", response_model=UserOut)
def get_one(user_id: str, session: Session = Depends(get_session)):
    user = crud.get_user(session, parse_id(user_id, "User not found."))
    if user is None:
        raise ResourceNotFoundError("User not found.")
    return user
