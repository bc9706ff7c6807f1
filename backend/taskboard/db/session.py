import logging
from pathlib import Path

from fastapi import Request
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session

logger = logging.getLogger(__name__)


def build_engine(url: str) -> Engine:
    """One long-lived engine per process, shared by the API and the sweep job."""
    kwargs = {"echo": False}
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        if parsed.database in (None, "", ":memory:"):
            # in-memory DB must stay on a single connection to survive
            kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


def init_db(engine: Engine) -> bool:
    from . import models  # noqa: F401

    url = engine.url
    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    try:
        SQLModel.metadata.create_all(engine)
    except SQLAlchemyError:
        # Keep serving; requests will report their own store errors.
        logger.exception("Database initialisation failed url=%s", url.render_as_string(hide_password=True))
        return False
    logger.info("Database ready url=%s", url.render_as_string(hide_password=True))
    return True


def get_session(request: Request):
    with Session(request.app.state.engine) as session:
        yield session
