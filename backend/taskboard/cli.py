"""Command line entry point: run the API server or the overdue task sweep."""

import asyncio
from typing import Optional

import typer
import uvicorn

from .core.config import Settings
from .core.logging_setup import setup_logging
from .db.session import build_engine, init_db
from .services.reconcile import TaskReconciler, run_reconcile_scheduler

app = typer.Typer(
    name="taskboard",
    help="Users and tasks API with a periodic overdue task sweep",
    no_args_is_help=True,
)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: HOST setting)"),
    port: Optional[int] = typer.Option(None, help="Listen port (default: PORT setting)"),
) -> None:
    """Run the HTTP API."""
    settings = Settings()
    setup_logging(settings.LOG_LEVEL)

    from .main import create_app

    uvicorn.run(
        create_app(settings),
        host=host or settings.HOST,
        port=port or settings.PORT,
        log_config=None,
    )


@app.command()
def reconcile(
    once: bool = typer.Option(False, "--once", help="Run a single sweep and exit"),
) -> None:
    """Mark overdue pending tasks as done, every RECONCILE_INTERVAL_MINUTES."""
    settings = Settings()
    setup_logging(settings.LOG_LEVEL)

    engine = build_engine(settings.DATABASE_URL)
    if not init_db(engine):
        raise typer.Exit(code=1)
    reconciler = TaskReconciler(engine)

    if once:
        report = reconciler.run_once()
        typer.echo(f"selected={report.selected} done={len(report.completed)} failed={len(report.failed)}")
        if report.failed:
            raise typer.Exit(code=1)
        return

    try:
        asyncio.run(
            run_reconcile_scheduler(
                reconciler,
                interval_seconds=settings.RECONCILE_INTERVAL_MINUTES * 60,
            )
        )
    except KeyboardInterrupt:
        typer.echo("Stopped")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
