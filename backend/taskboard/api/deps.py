from typing import Tuple
from fastapi import Depends, Request
from sqlmodel import Session
from ..core.errors import InvalidContentError, ResourceNotFoundError
from ..db.crud import get_user
from ..db.models import User
from ..db.session import get_session

DEFAULT_LIMIT = 100
# largest value a 64-bit INTEGER primary key can hold
MAX_ID = 2**63 - 1


def parse_id(raw: str, message: str) -> int:
    """Store keys are positive integers; anything else is reported as not found."""
    if not raw.isascii() or not raw.isdigit() or len(raw) > len(str(MAX_ID)):
        raise ResourceNotFoundError(message)
    value = int(raw)
    if value < 1 or value > MAX_ID:
        raise ResourceNotFoundError(message)
    return value


def paginate(limit: int, page: int) -> Tuple[int, int]:
    # 0 falls back to the defaults, negatives count like positives
    limit = abs(limit) or DEFAULT_LIMIT
    page = abs(page) or 1
    return limit, limit * (page - 1)


def require_json(request: Request) -> None:
    content_type = request.headers.get("content-type", "")
    if content_type.split(";")[0].strip().lower() != "application/json":
        raise InvalidContentError("Expects 'application/json'")


def get_owner(user_id: str, session: Session = Depends(get_session)) -> User:
    user = get_user(session, parse_id(user_id, "User not found."))
    if user is None:
        raise ResourceNotFoundError("User not found.")
    return user
