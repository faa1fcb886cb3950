"""Logfire setup for the API process and the migration runner.

Services log through logfire directly:

    with logfire.span("invite_service.consume_invite", code=code.masked()):
        logfire.info("Invite consumed", invite_id=str(invite.id))

Codes are always masked before they reach a log line.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from gatehouse import __version__
from gatehouse.config import Settings


def _should_send(settings: Settings) -> bool:
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for this process.

    Telemetry leaves the process only when a token is configured, unless
    OBSERVABILITY__SEND_TO_LOGFIRE overrides it.
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name="gatehouse",
        service_version=__version__,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        git_sha=settings.git_sha,
    )


def _request_attributes(request, attributes):
    """Add method, path and client host to request spans."""
    extra = {"path": request.url.path}
    method = getattr(request, "method", None)
    if method is not None:
        extra["method"] = method
    if request.client:
        extra["client_host"] = request.client.host
    return {**attributes, **extra}


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by ``app``."""
    logfire.instrument_fastapi(app, request_attributes_mapper=_request_attributes)
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement run through ``engine``."""
    # Async engines are instrumented through their sync core
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.info("SQLAlchemy instrumented")
