"""Logfire setup for the Senatus API, its migrations script and its tests.

Every service and repository call opens a span named after the operation
(``vote_service.cast_vote``, ``vote.upsert``) and logs outcomes with keyword
attributes, so a vote can be followed from the HTTP request down to the SQL
statement:

    with logfire.span("vote_service.cast_vote", question_id=str(question_id)):
        logfire.info("Vote cast", question_id=str(question_id), voter_id=voter_id)

Scripts call ``configure_logfire`` once at start-up; ``create_app`` then
instruments FastAPI and the persistence provider instruments the engine.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from senatus.config import ObservabilitySettings, Settings

# Probed by load balancers every few seconds; not worth a trace each
_UNTRACED_PATHS = "/health"


def should_send_to_logfire(observability: ObservabilitySettings) -> bool:
    """Decide whether telemetry leaves the process.

    An explicit ``send_to_logfire`` wins; otherwise having a token means
    sending. Without either, output stays on the console.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the current process.

    The deployed commit (``git_sha``) is attached as the service version so
    traces from different releases can be told apart.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send_to_logfire(settings.observability)

    config_kwargs = {
        "service_name": "senatus-api",
        "service_version": settings.git_sha,
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }
    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        git_sha=settings.git_sha,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace API requests except health probes.

    Each request span carries the method, path and client host, which is
    enough to tie a burst of duplicate vote requests to one client.
    """

    def _map_request_attributes(request, attributes):
        result = {**attributes}
        if hasattr(request, "method"):
            result["method"] = request.method
        if hasattr(request, "url"):
            result["path"] = request.url.path
        if hasattr(request, "client") and request.client:
            result["client_host"] = request.client.host
        return result

    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_map_request_attributes,
        excluded_urls=_UNTRACED_PATHS,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through the engine.

    Statements carry a span-context comment, so slow vote upserts found in
    PostgreSQL logs can be matched back to their request.
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
