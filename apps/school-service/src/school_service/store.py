from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from devkit.db import AsyncDatabaseManager, Base, create_all_tables
from sqlalchemy import Float, Integer, Text, UniqueConstraint, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Mapped, mapped_column

from school_service.errors import SchoolAlreadyExistsError, SchoolStoreError

logger = logging.getLogger(__name__)

# the sqlite driver raises UnicodeEncodeError itself when binding lone surrogates
_STORE_ERRORS = (SQLAlchemyError, UnicodeError)


@dataclass
class School:
    id: int
    name: str
    address: str
    latitude: float
    longitude: float


class SchoolORM(Base):
    __tablename__ = "school"
    __table_args__ = (
        UniqueConstraint("name", "address", name="uq_school_name_address"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)


class SchoolStore:
    def __init__(self, database_url: str) -> None:
        self._db = AsyncDatabaseManager(database_url)
        self._ready_lock = asyncio.Lock()
        self._write_lock = asyncio.Lock()
        self._orm_ready = False

    async def ensure_ready(self) -> None:
        async with self._ready_lock:
            if self._orm_ready:
                return
            await self._db.connect()
            await create_all_tables(self._db.engine, Base.metadata)
            self._orm_ready = True
        logger.info("school_store_ready", extra={"component": "school_store"})

    async def close(self) -> None:
        await self._db.disconnect()
        self._orm_ready = False

    async def find_by_identity(self, name: str, address: str) -> School | None:
        await self._ensure_ready_or_fail()

        async def _run(session):
            query = select(SchoolORM).where(SchoolORM.name == name, SchoolORM.address == address)
            row = (await session.scalars(query)).first()
            return self._to_entity(row) if row else None

        return await self._run_or_fail(_run, operation="find_by_identity")

    async def insert(self, name: str, address: str, latitude: float, longitude: float) -> School:
        await self._ensure_ready_or_fail()

        async def _run(session):
            row = SchoolORM(name=name, address=address, latitude=float(latitude), longitude=float(longitude))
            session.add(row)
            await session.flush()
            return self._to_entity(row)

        async with self._write_lock:
            try:
                return await self._db.run_with_session(_run)
            except IntegrityError as exc:
                raise SchoolAlreadyExistsError("school already exists") from exc
            except _STORE_ERRORS as exc:
                logger.error(
                    "school_store_error",
                    extra={"component": "school_store", "operation": "insert", "error": str(exc)},
                )
                raise SchoolStoreError("insert failed") from exc

    async def list_all(self) -> list[School]:
        await self._ensure_ready_or_fail()

        async def _run(session):
            rows = (await session.scalars(select(SchoolORM).order_by(SchoolORM.id))).all()
            return [self._to_entity(row) for row in rows]

        return await self._run_or_fail(_run, operation="list_all")

    async def _ensure_ready_or_fail(self) -> None:
        try:
            await self.ensure_ready()
        except SQLAlchemyError as exc:
            logger.error(
                "school_store_error",
                extra={"component": "school_store", "operation": "ensure_ready", "error": str(exc)},
            )
            raise SchoolStoreError("database unavailable") from exc

    async def _run_or_fail(self, fn, *, operation: str):
        try:
            return await self._db.run_with_session(fn)
        except _STORE_ERRORS as exc:
            logger.error(
                "school_store_error",
                extra={"component": "school_store", "operation": operation, "error": str(exc)},
            )
            raise SchoolStoreError(f"{operation} failed") from exc

    def _to_entity(self, row: SchoolORM) -> School:
        return School(
            id=row.id,
            name=row.name,
            address=row.address,
            latitude=row.latitude,
            longitude=row.longitude,
        )
