# scripts/init_db.py
"""One-time database setup.

    python scripts/init_db.py            # create the five tables
    python scripts/init_db.py --drop     # drop them if they exist, then create
    python scripts/init_db.py --seed     # ... and load the sample rows
    python scripts/init_db.py --sql      # print the DDL, touch nothing
"""
import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add project root to sys.path to allow importing from app
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.core.config import settings
from app.core.db import SessionLocal, create_schema, engine, render_ddl, reset_schema
from app.core.logging import configure_logging
from app.services.seed import is_seeded, seed_sample_data

logger = logging.getLogger("init_db")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create the clinic booking schema.")
    parser.add_argument("--drop", action="store_true", help="drop existing tables first")
    parser.add_argument("--seed", action="store_true", help="insert the sample data")
    parser.add_argument("--sql", action="store_true", help="print the DDL instead of executing it")
    return parser


async def run(args: argparse.Namespace) -> int:
    if args.sql:
        print(render_ddl(engine.dialect))
        return 0

    try:
        if args.drop:
            await reset_schema(engine)
        else:
            await create_schema(engine)

        if args.seed:
            async with SessionLocal() as db:
                if await is_seeded(db):
                    logger.info("Sample data already present, skipping")
                else:
                    await seed_sample_data(db)
    finally:
        await engine.dispose()

    logger.info("-- Database schema created successfully --")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(settings.LOG_LEVEL)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
