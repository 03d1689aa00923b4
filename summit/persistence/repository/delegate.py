"""PostgreSQL implementation of Delegate repository."""

from typing import Any, Optional

from sqlalchemy import Select, and_, delete, func, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from summit.domain.error import DuplicateDelegateError
from summit.domain.model import Delegate
from summit.domain.model.common import utcnow
from summit.domain.repository import (
    LIFECYCLE_FIELDS,
    DelegateFilter,
    DelegateRepository,
    GroupField,
)
from summit.domain.value import DelegateId, DelegateStatus
from summit.persistence.mappers import (
    changes_to_columns,
    delegate_to_dict,
    row_to_delegate,
)
from summit.persistence.tables import delegates_table


def _apply_filters(stmt: Select, filters: DelegateFilter) -> Select:
    """Add WHERE clauses for each filter that is set."""
    if filters.event_id is not None:
        stmt = stmt.where(delegates_table.c.event_id == filters.event_id)
    if filters.delegate_type is not None:
        stmt = stmt.where(
            delegates_table.c.delegate_type == filters.delegate_type.value
        )
    if filters.attendance_mode is not None:
        stmt = stmt.where(
            delegates_table.c.attendance_mode == filters.attendance_mode.value
        )
    if filters.event_year is not None:
        stmt = stmt.where(delegates_table.c.event_year == filters.event_year)
    return stmt


class PostgresDelegateRepository(DelegateRepository):
    """PostgreSQL implementation of DelegateRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, delegate_id: DelegateId) -> Optional[Delegate]:
        """Find a delegate by ID."""
        stmt = select(delegates_table).where(delegates_table.c.id == delegate_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_delegate(dict(row)) if row else None

    async def find_by_email(
        self, email: str, event_year: int | None = None
    ) -> Optional[Delegate]:
        """Find a delegate by email, most recent event year first."""
        stmt = select(delegates_table).where(delegates_table.c.email == email)
        if event_year is not None:
            stmt = stmt.where(delegates_table.c.event_year == event_year)
        stmt = stmt.order_by(
            delegates_table.c.event_year.desc(), delegates_table.c.created_at.desc()
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_delegate(dict(row)) if row else None

    async def exists_by_email_and_year(
        self, email: str, event_year: int, exclude_id: DelegateId | None = None
    ) -> bool:
        """Check whether a registration exists for an email and event year."""
        stmt = select(delegates_table.c.id).where(
            and_(
                delegates_table.c.email == email,
                delegates_table.c.event_year == event_year,
            )
        )
        if exclude_id is not None:
            stmt = stmt.where(delegates_table.c.id != exclude_id)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def find_all(
        self, filters: DelegateFilter, limit: int = 10, offset: int = 0
    ) -> list[Delegate]:
        """Find delegates matching filters, newest first."""
        stmt = _apply_filters(select(delegates_table), filters)
        stmt = (
            stmt.order_by(delegates_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        rows = result.mappings().all()
        return [row_to_delegate(dict(row)) for row in rows]

    async def count(self, filters: DelegateFilter) -> int:
        """Count delegates matching filters."""
        stmt = _apply_filters(
            select(func.count()).select_from(delegates_table), filters
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_grouped_by(
        self, field: GroupField, filters: DelegateFilter
    ) -> dict[str, int]:
        """Count delegates grouped by a column."""
        column = delegates_table.c[field]
        stmt = _apply_filters(select(column, func.count()), filters).group_by(column)
        result = await self.session.execute(stmt)
        return {value: count for value, count in result.all()}

    async def save(self, delegate: Delegate) -> Delegate:
        """Save a delegate (create or update).

        Raises:
            DuplicateDelegateError: If the email is already registered for the
                event year
        """
        delegate_dict = delegate_to_dict(delegate)

        existing = await self.find_by_id(delegate.id)

        if existing:
            stmt = (
                update(delegates_table)
                .where(delegates_table.c.id == delegate.id)
                .values(**delegate_dict)
            )
        else:
            stmt = insert(delegates_table).values(**delegate_dict)
        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError as e:
            raise DuplicateDelegateError(delegate.email, delegate.event_year) from e
        return delegate

    async def update_fields(
        self, delegate_id: DelegateId, changes: dict[str, Any]
    ) -> Optional[Delegate]:
        """UPDATE ... SET <changed columns> RETURNING."""
        touched = LIFECYCLE_FIELDS.intersection(changes)
        if touched:
            raise ValueError(f"Lifecycle fields cannot be updated: {sorted(touched)}")

        values = changes_to_columns({**changes, "updated_at": utcnow()})
        stmt = (
            update(delegates_table)
            .where(delegates_table.c.id == delegate_id)
            .values(**values)
            .returning(delegates_table)
        )
        try:
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            await self.session.flush()
        except IntegrityError as e:
            if "email" in changes and "event_year" in changes:
                raise DuplicateDelegateError(
                    changes["email"], changes["event_year"]
                ) from e
            raise
        return row_to_delegate(dict(row)) if row else None

    async def update_if_status(
        self,
        delegate_id: DelegateId,
        allowed_statuses: set[DelegateStatus],
        changes: dict[str, Any],
    ) -> Optional[Delegate]:
        """Conditional UPDATE ... RETURNING guarded by the current status."""
        values = changes_to_columns({"updated_at": utcnow(), **changes})
        stmt = (
            update(delegates_table)
            .where(
                and_(
                    delegates_table.c.id == delegate_id,
                    delegates_table.c.status.in_(
                        [status.value for status in allowed_statuses]
                    ),
                )
            )
            .values(**values)
            .returning(delegates_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_delegate(dict(row)) if row else None

    async def add_push_token(self, delegate_id: DelegateId, token: str) -> bool:
        """Append the token unless it is already registered."""
        stmt = (
            update(delegates_table)
            .where(
                and_(
                    delegates_table.c.id == delegate_id,
                    ~delegates_table.c.push_tokens.contains([token]),
                )
            )
            .values(
                push_tokens=func.array_append(delegates_table.c.push_tokens, token),
                updated_at=utcnow(),
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        if result.rowcount:
            return True
        # Nothing updated: either the token was already present or no delegate
        return await self.find_by_id(delegate_id) is not None

    async def delete(self, delegate_id: DelegateId) -> bool:
        """Delete a delegate."""
        stmt = delete(delegates_table).where(delegates_table.c.id == delegate_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return bool(result.rowcount)

    async def commit(self) -> None:
        """Commit the current transaction."""
        await self.session.commit()
