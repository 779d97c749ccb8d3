import logging
from collections.abc import AsyncGenerator
from datetime import datetime, timezone

from sqlalchemy import DateTime, MetaData, event, func
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from app.core.config import settings

logger = logging.getLogger(__name__)

# constraint names match the ones created by alembic/versions/0001
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


def utcnow() -> datetime:
    # naive UTC, matching the DATETIME columns
    return datetime.now(timezone.utc).replace(tzinfo=None)


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=utcnow, server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utcnow, server_default=func.now(), onupdate=utcnow, nullable=False
    )


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def make_engine(url: str, echo: bool = False) -> AsyncEngine:
    if url.startswith("sqlite"):
        eng = create_async_engine(url, echo=echo)
        # sqlite ignores REFERENCES clauses unless switched on per connection
        event.listen(eng.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return eng
    return create_async_engine(url, echo=echo, pool_pre_ping=True)


engine = make_engine(settings.async_database_url, echo=settings.SQL_ECHO)
SessionLocal = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with SessionLocal() as session:
        yield session


async def create_schema(eng: AsyncEngine) -> None:
    """Create the five tables in FK order (specializations ... appointments)."""
    import app.models  # noqa: F401  populates Base.metadata

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Created tables: %s", ", ".join(t.name for t in Base.metadata.sorted_tables))


async def drop_schema(eng: AsyncEngine) -> None:
    """Drop whatever tables exist, appointments first."""
    import app.models  # noqa: F401

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.info("Dropped tables: %s", ", ".join(t.name for t in reversed(Base.metadata.sorted_tables)))


async def reset_schema(eng: AsyncEngine) -> None:
    await drop_schema(eng)
    await create_schema(eng)


def render_ddl(dialect) -> str:
    """CREATE TABLE / CREATE INDEX statements in FK order, for review or manual setup."""
    from sqlalchemy.schema import CreateIndex, CreateTable
    import app.models  # noqa: F401

    stmts = []
    for table in Base.metadata.sorted_tables:
        stmts.append(str(CreateTable(table).compile(dialect=dialect)).strip() + ";")
        for idx in sorted(table.indexes, key=lambda i: i.name):
            stmts.append(str(CreateIndex(idx).compile(dialect=dialect)).strip() + ";")
    return "\n\n".join(stmts)
