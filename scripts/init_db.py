"""Create all tables for the current ORM models (development databases).

Usage:
    python -m scripts.init_db
Requires DATABASE_URL. Existing tables are left untouched.
"""

import asyncio
import sys

import app.infrastructure.persistence.database as database
import app.infrastructure.persistence.models  # noqa: F401  (registers tables on Base)


async def main() -> None:
    """Run Base.metadata.create_all on the configured database."""
    database._ensure_engine()
    if database.engine is None:
        print("DATABASE_URL not configured", file=sys.stderr)
        sys.exit(1)
    async with database.engine.begin() as conn:
        await conn.run_sync(database.Base.metadata.create_all)
    await database.dispose_engine()
    print("Done. Tables: " + ", ".join(sorted(database.Base.metadata.tables)))


if __name__ == "__main__":
    asyncio.run(main())
