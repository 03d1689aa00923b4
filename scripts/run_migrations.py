#!/usr/bin/env python3
"""Apply Alembic migrations before the API and worker start.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c1f0e7a9b2d
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from summit.config import Settings
from summit.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    revision = argv[0] if argv else "head"
    settings = Settings()
    configure_logfire(settings, service_name="summit-migrations")

    config = Config("alembic.ini")
    with logfire.span("migrations.upgrade", revision=revision):
        try:
            command.upgrade(config, revision)
        except Exception as e:
            logfire.error(
                "Schema upgrade failed",
                revision=revision,
                error=str(e),
                _exc_info=sys.exc_info(),
            )
            # A deploy must not continue on a half-migrated schema
            raise
    logfire.info("Schema upgraded", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
