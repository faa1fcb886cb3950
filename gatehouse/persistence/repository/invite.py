"""PostgreSQL implementation of Invite repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import delete, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from gatehouse.domain.model import Invite, InviteSummary
from gatehouse.domain.repository import InviteRepository
from gatehouse.domain.value import InviteCode, InviteId, ProfileId
from gatehouse.persistence.mappers import invite_to_dict, row_to_invite
from gatehouse.persistence.tables import invites_table, profiles_table


class PostgresInviteRepository(InviteRepository):
    """PostgreSQL implementation of InviteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, invite_id: InviteId) -> Optional[Invite]:
        """Find an invite by ID."""
        stmt = select(invites_table).where(invites_table.c.id == invite_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def find_by_code(self, code: InviteCode) -> Optional[Invite]:
        """Find an invite by its code.

        Args:
            code: Invite code to look up

        Returns:
            Invite if found, None otherwise
        """
        stmt = select(invites_table).where(invites_table.c.code == code.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def find_all(self) -> list[InviteSummary]:
        """List all invites joined with their profile names, newest first."""
        stmt = (
            select(invites_table, profiles_table.c.name.label("profile_name"))
            .join(profiles_table, profiles_table.c.id == invites_table.c.profile_id)
            .order_by(invites_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [
            InviteSummary(
                invite=row_to_invite(dict(row)), profile_name=row["profile_name"]
            )
            for row in result.mappings().all()
        ]

    async def find_by_profile(self, profile_id: ProfileId) -> list[Invite]:
        """List invites granting a profile, newest first."""
        stmt = (
            select(invites_table)
            .where(invites_table.c.profile_id == profile_id)
            .order_by(invites_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_invite(dict(row)) for row in result.mappings().all()]

    async def count_by_profile(self, profile_id: ProfileId) -> int:
        """Count invites referencing a profile."""
        stmt = (
            select(func.count())
            .select_from(invites_table)
            .where(invites_table.c.profile_id == profile_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def create(self, invite: Invite) -> Invite:
        """Insert an invite inside a savepoint.

        A unique violation on the code rolls back only the savepoint, so the
        request transaction can continue with another attempt.
        """
        async with self.session.begin_nested():
            await self.session.execute(
                insert(invites_table).values(**invite_to_dict(invite))
            )
        return invite

    async def update_limits(
        self,
        invite_id: InviteId,
        expires_at: datetime | None,
        max_uses: int | None,
    ) -> Optional[Invite]:
        """Replace expiry and limit if the limit still covers current usage."""
        stmt = update(invites_table).where(invites_table.c.id == invite_id)
        if max_uses is not None:
            stmt = stmt.where(invites_table.c.usage_count <= max_uses)
        stmt = stmt.values(expires_at=expires_at, max_uses=max_uses).returning(
            *invites_table.c
        )

        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def increment_usage(
        self, code: InviteCode, now: datetime
    ) -> Optional[Invite]:
        """Compare-and-increment the usage counter in one statement.

        Under READ COMMITTED a concurrent UPDATE of the same row blocks until
        the first commits, then PostgreSQL re-evaluates the WHERE clause
        against the new row version, so the limit holds for every racer.
        """
        stmt = (
            update(invites_table)
            .where(
                invites_table.c.code == code.root,
                or_(
                    invites_table.c.max_uses.is_(None),
                    invites_table.c.usage_count < invites_table.c.max_uses,
                ),
                or_(
                    invites_table.c.expires_at.is_(None),
                    invites_table.c.expires_at >= now,
                ),
            )
            .values(usage_count=invites_table.c.usage_count + 1)
            .returning(*invites_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def delete(self, invite_id: InviteId) -> bool:
        """Delete an invite."""
        stmt = delete(invites_table).where(invites_table.c.id == invite_id)
        result = await self.session.execute(stmt)
        return result.rowcount > 0
