#!/usr/bin/env python3
"""Upgrade the database schema to head, reporting failures to Logfire."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from senatus.config import Settings
from senatus.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    with logfire.span("migrations.upgrade", environment=settings.environment):
        try:
            command.upgrade(Config("alembic.ini"), "head")
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The deploy must not continue against a half-migrated schema
            raise

    logfire.info("Database schema is at head")
    return 0


if __name__ == "__main__":
    sys.exit(main())
