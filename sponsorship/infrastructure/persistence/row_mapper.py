"""Generic row mapper: dataclass record shapes <-> table rows.

Field names are matched to column names case-insensitively and validated
against the table before any statement runs. Fields holding UNSET are
skipped; None maps to NULL.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any, TypeVar

from sqlalchemy import Column, ColumnElement, MetaData, Table, and_, delete, insert, select, text, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from sponsorship.application.dtos.unset import UNSET
from sponsorship.domain.exceptions import RowMapperException, StoreException
from sponsorship.infrastructure.persistence.database import Base
from sponsorship.shared.utils.datetime import ensure_utc

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RowMapper:
    """Read/insert/update/delete helpers over the tables in a MetaData.

    Store failures are logged and raised as StoreException; IntegrityError
    (unique/PK violations) propagates unchanged so repositories can map it
    to a domain conflict.
    """

    def __init__(self, db: AsyncSession, metadata: MetaData | None = None) -> None:
        self.db = db
        self.metadata = metadata if metadata is not None else Base.metadata

    def _table(self, name: str) -> Table:
        table = self.metadata.tables.get(name)
        if table is None:
            raise RowMapperException(f"unknown table: {name}", name)
        return table

    @staticmethod
    def _columns(table: Table, shape: type) -> list[tuple[str, Column[Any]]]:
        """Pair each field of shape with its column; raise if a field has none."""
        if not dataclasses.is_dataclass(shape):
            raise RowMapperException(
                f"record shape {shape!r} is not a dataclass", table.name
            )
        by_name = {col.name.lower(): col for col in table.columns}
        pairs: list[tuple[str, Column[Any]]] = []
        for f in dataclasses.fields(shape):
            col = by_name.get(f.name.lower())
            if col is None:
                raise RowMapperException(
                    f"invalid column: {f.name} for record type {shape.__name__}",
                    table.name,
                )
            pairs.append((f.name, col))
        return pairs

    def _assignments(self, table: Table, record: Any) -> dict[str, Any]:
        """Column name -> value for every field of record that is not UNSET."""
        values: dict[str, Any] = {}
        for field_name, col in self._columns(table, type(record)):
            value = getattr(record, field_name)
            if value is not UNSET:
                values[col.name] = value
        return values

    def _predicate(self, table: Table, record: Any) -> ColumnElement[bool]:
        values = self._assignments(table, record)
        if not values:
            raise RowMapperException(
                "refusing to write without a predicate (all fields UNSET)", table.name
            )
        clauses = [
            table.c[name].is_(None) if value is None else table.c[name] == value
            for name, value in values.items()
        ]
        return and_(*clauses)

    @staticmethod
    def _decode(shape: type[T], row: Mapping[str, Any]) -> T:
        fields_by_column = {f.name.lower(): f.name for f in dataclasses.fields(shape)}  # type: ignore[arg-type]
        kwargs: dict[str, Any] = {}
        for key, value in row.items():
            field_name = fields_by_column.get(key.lower())
            if field_name is None:
                logger.warning(
                    "Column %s not found in record type %s; value discarded",
                    key,
                    shape.__name__,
                )
                continue
            kwargs[field_name] = ensure_utc(value) if isinstance(value, datetime) else value
        return shape(**kwargs)

    async def execute(
        self, operation: str, table: str, stmt: Any, params: Mapping[str, Any] | None = None
    ) -> Any:
        """Run stmt; store failures other than IntegrityError become StoreException."""
        try:
            if params:
                return await self.db.execute(stmt, dict(params))
            return await self.db.execute(stmt)
        except IntegrityError:
            raise
        except SQLAlchemyError as e:
            logger.error("Database %s on %s failed: %s", operation, table, e)
            raise StoreException(f"{operation} {table}") from e

    async def select(
        self,
        table_name: str,
        shape: type[T],
        where: str | None = None,
        params: Mapping[str, Any] | None = None,
        *,
        limit: int | None = None,
    ) -> list[T]:
        """Return rows of table_name as shape instances, ordered by primary key.

        Args:
            table_name: Table to read.
            shape: Dataclass whose field names are (a subset of) the columns.
            where: SQL predicate with named binds, e.g. ``"uid = :uid"``;
                None, "" or "*" selects every row.
            params: Values for the named binds in where.
            limit: Optional maximum number of rows.
        """
        table = self._table(table_name)
        columns = self._columns(table, shape)
        stmt = select(*(col for _, col in columns)).order_by(*table.primary_key.columns)
        if where and where != "*":
            stmt = stmt.where(text(where))
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.execute("select", table_name, stmt, params)
        return [self._decode(shape, row) for row in result.mappings()]

    async def insert(self, table_name: str, record: Any) -> None:
        """Insert one row built from the non-UNSET fields of record."""
        table = self._table(table_name)
        values = self._assignments(table, record)
        await self.execute("insert", table_name, insert(table).values(**values))

    async def update(self, table_name: str, values: Any, where: Any) -> int:
        """Set the non-UNSET fields of values on rows matching where. Returns rowcount."""
        table = self._table(table_name)
        assignments = self._assignments(table, values)
        if not assignments:
            raise RowMapperException("nothing to update (all fields UNSET)", table_name)
        stmt = update(table).where(self._predicate(table, where)).values(**assignments)
        result = await self.execute("update", table_name, stmt)
        return int(result.rowcount or 0)

    async def delete(self, table_name: str, where: Any) -> int:
        """Delete rows matching the non-UNSET fields of where. Returns rowcount."""
        table = self._table(table_name)
        stmt = delete(table).where(self._predicate(table, where))
        result = await self.execute("delete", table_name, stmt)
        return int(result.rowcount or 0)
