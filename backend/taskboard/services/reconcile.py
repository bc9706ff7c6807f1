"""
Overdue task sweep.

Each firing:
- captures "now" once,
- selects pending tasks whose next_execute_date_time is strictly before it,
- logs every selected task and flips it to done, one write per task.

A failed write is logged and the task stays pending for the next firing.
A task deleted between the selection and its write stays deleted.
A failed selection aborts the firing; the scheduler loop keeps running.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from sqlalchemy.engine import Engine
from sqlmodel import Session

from ..db import crud
from ..db.models import utcnow

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_SECONDS = 30 * 60


@dataclass(slots=True)
class ReconcileReport:
    now: datetime
    selected: int = 0
    completed: list[int] = field(default_factory=list)
    failed: list[int] = field(default_factory=list)
    skipped: list[int] = field(default_factory=list)


class TaskReconciler:
    def __init__(self, engine: Engine, *, clock: Callable[[], datetime] = utcnow) -> None:
        self._engine = engine
        self._clock = clock

    def run_once(self) -> ReconcileReport:
        now = self._clock()

        with Session(self._engine) as session:
            tasks = crud.list_overdue_tasks(session, now)

        report = ReconcileReport(now=now, selected=len(tasks))

        for task in tasks:
            logger.info(
                "Overdue task name=%r description=%r date_time=%s user_id=%s",
                task.name,
                task.description,
                task.date_time.isoformat(),
                task.user_id,
            )
            try:
                with Session(self._engine) as session:
                    marked = crud.mark_task_done(session, task.id, now)
            except Exception:
                logger.exception("mark_task_done failed task_id=%s", task.id)
                report.failed.append(task.id)
                continue
            if not marked:
                logger.info("Task %s is no longer pending; left unchanged", task.id)
                report.skipped.append(task.id)
                continue
            report.completed.append(task.id)

        logger.debug(
            "Reconcile run now=%s selected=%s done=%s failed=%s skipped=%s",
            now.isoformat(),
            report.selected,
            len(report.completed),
            len(report.failed),
            len(report.skipped),
        )
        return report


def seconds_until_next_slot(interval_seconds: float, now_ts: float | None = None) -> float:
    """Delay until the next wall-clock multiple of interval (*/30 -> :00 and :30)."""
    if now_ts is None:
        now_ts = time.time()
    remainder = now_ts % interval_seconds
    return interval_seconds - remainder


async def run_reconcile_scheduler(
        reconciler: TaskReconciler,
        *,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
) -> None:
    """
    Fire reconciler.run_once on every interval slot until cancelled.

    The run happens in a worker thread so HTTP requests keep being served.
    A slow run is not awaited by the timer: the next slot fires on schedule
    even if the previous run is still going.
    """
    interval = max(0.01, float(interval_seconds))
    logger.debug("Job scheduler started - checking for overdue tasks every %ss", interval)

    running: set[asyncio.Task] = set()
    try:
        while True:
            await asyncio.sleep(seconds_until_next_slot(interval))
            run = asyncio.create_task(_fire(reconciler))
            running.add(run)
            run.add_done_callback(running.discard)
    finally:
        for run in running:
            run.cancel()


async def _fire(reconciler: TaskReconciler) -> None:
    try:
        await asyncio.to_thread(reconciler.run_once)
    except Exception:
        logger.exception("Reconcile run failed")
