"""PostgreSQL implementation of Profile repository."""

from typing import Optional

from sqlalchemy import delete, exists, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from gatehouse.domain.model import Profile, ProfileSummary
from gatehouse.domain.repository import ProfileRepository
from gatehouse.domain.value import ProfileId, ProfileName
from gatehouse.persistence.mappers import profile_to_dict, row_to_profile
from gatehouse.persistence.tables import invites_table, profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, profile_id: ProfileId) -> Optional[Profile]:
        """Find a profile by ID."""
        stmt = select(profiles_table).where(profiles_table.c.id == profile_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    async def find_by_name(self, name: ProfileName) -> Optional[Profile]:
        """Find a profile by name."""
        stmt = select(profiles_table).where(profiles_table.c.name == name.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    async def find_default(self) -> Optional[Profile]:
        """Find the default profile."""
        stmt = select(profiles_table).where(profiles_table.c.is_default.is_(True))
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    async def find_all_with_invite_counts(self) -> list[ProfileSummary]:
        """List profiles by name with a correlated invite count."""
        invite_count = (
            select(func.count(invites_table.c.id))
            .where(invites_table.c.profile_id == profiles_table.c.id)
            .scalar_subquery()
        )
        stmt = select(profiles_table, invite_count.label("invite_count")).order_by(
            profiles_table.c.name.asc()
        )
        result = await self.session.execute(stmt)
        return [
            ProfileSummary(
                profile=row_to_profile(dict(row)), invite_count=row["invite_count"]
            )
            for row in result.mappings().all()
        ]

    async def create(self, profile: Profile) -> Profile:
        """Insert a profile inside a savepoint."""
        async with self.session.begin_nested():
            await self.session.execute(
                insert(profiles_table).values(**profile_to_dict(profile))
            )
        return profile

    async def update(self, profile: Profile) -> Optional[Profile]:
        """Update name and template reference."""
        stmt = (
            update(profiles_table)
            .where(profiles_table.c.id == profile.id)
            .values(name=profile.name.root, template_user_ref=profile.template_user_ref)
            .returning(*profiles_table.c)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
            row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    async def delete_unreferenced(self, profile_id: ProfileId) -> bool:
        """Delete a non-default profile with no referencing invites.

        An invite inserted concurrently still trips the RESTRICT foreign key,
        raising IntegrityError after the savepoint is rolled back.
        """
        stmt = delete(profiles_table).where(
            profiles_table.c.id == profile_id,
            profiles_table.c.is_default.is_(False),
            ~exists().where(invites_table.c.profile_id == profile_id),
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        return result.rowcount > 0

    async def set_default(self, profile_id: ProfileId) -> bool:
        """Swap the default flag under row locks.

        Every profile row is locked in id order first, so concurrent calls
        queue behind each other instead of interleaving their clear and set
        statements. Readers see the old or the new default, never both or
        neither, because both statements commit together.
        """
        locked = await self.session.execute(
            select(profiles_table.c.id)
            .order_by(profiles_table.c.id)
            .with_for_update()
        )
        if profile_id not in {row.id for row in locked}:
            return False

        await self.session.execute(
            update(profiles_table)
            .where(
                profiles_table.c.is_default.is_(True),
                profiles_table.c.id != profile_id,
            )
            .values(is_default=False)
        )
        await self.session.execute(
            update(profiles_table)
            .where(profiles_table.c.id == profile_id)
            .values(is_default=True)
        )
        return True
