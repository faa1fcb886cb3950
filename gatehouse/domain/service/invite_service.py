"""Invite domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from gatehouse.domain.error import (
    ConflictError,
    ExhaustedError,
    InvalidOperationError,
    NotFoundError,
)
from gatehouse.domain.model import (
    Invite,
    InviteSummary,
    InviteVerification,
    Profile,
    Redemption,
)
from gatehouse.domain.model.common import as_utc, utc_now
from gatehouse.domain.repository import InviteRepository
from gatehouse.domain.value import (
    Actor,
    InviteCode,
    InviteId,
    InviteInvalidReason,
    InvitePatch,
    ProfileId,
)

from .base import Service
from .code_generator import CodeGenerator
from .profile_service import ProfileService

# invites.max_uses is a 32-bit integer column
MAX_USES_LIMIT = 2**31 - 1


class InviteService(Service):
    """Domain service for the invite lifecycle.

    ``verify_invite`` and ``consume_invite`` are public (called during
    registration by not-yet-registered users); everything else requires an
    administrator.
    """

    def __init__(
        self,
        invite_repository: InviteRepository,
        profile_service: ProfileService,
        code_generator: CodeGenerator,
        max_code_attempts: int = 3,
    ) -> None:
        """Initialize invite service.

        Args:
            invite_repository: Invite repository
            profile_service: Profile domain service
            code_generator: Invite code generator
            max_code_attempts: Codes to try before giving up on a collision
        """
        self.invite_repository = invite_repository
        self.profile_service = profile_service
        self.code_generator = code_generator
        self.max_code_attempts = max_code_attempts

    async def create_invite(
        self,
        actor: Actor,
        profile_id: ProfileId,
        expires_at: datetime | None = None,
        max_uses: int | None = None,
    ) -> Invite:
        """Create an invite granting a profile.

        Args:
            actor: Administrator creating the invite (recorded as creator)
            profile_id: Profile granted on redemption
            expires_at: Optional expiry
            max_uses: Optional positive usage limit

        Returns:
            Created invite with ``usage_count == 0``

        Raises:
            ForbiddenError: If the caller is not an administrator
            InvalidOperationError: If max_uses is not positive
            NotFoundError: If the profile does not exist
            ConflictError: If no unique code could be generated
        """
        with logfire.span(
            "invite_service.create_invite",
            created_by_id=str(actor.user_id),
            profile_id=str(profile_id),
            max_uses=max_uses,
        ):
            self.require_admin(actor, "create invites")
            self._validate_max_uses(max_uses)

            if await self.profile_service.find_profile(profile_id) is None:
                logfire.warn("Invite for unknown profile", profile_id=str(profile_id))
                raise NotFoundError("Profile", str(profile_id))

            created_at = utc_now()
            for attempt in range(1, self.max_code_attempts + 1):
                invite = Invite(
                    id=InviteId(uuid4()),
                    code=self.code_generator.generate(),
                    profile_id=profile_id,
                    created_by_id=actor.user_id,
                    created_at=created_at,
                    expires_at=as_utc(expires_at),
                    max_uses=max_uses,
                    usage_count=0,
                )
                try:
                    saved = await self.invite_repository.create(invite)
                except IntegrityError:
                    if await self.profile_service.find_profile(profile_id) is None:
                        raise NotFoundError("Profile", str(profile_id))
                    logfire.warn("Invite code collision", attempt=attempt)
                    continue

                logfire.info(
                    "Invite created",
                    invite_id=str(saved.id),
                    profile_id=str(profile_id),
                    code=saved.code.masked(),
                )
                return saved

            logfire.error(
                "Could not generate a unique invite code",
                attempts=self.max_code_attempts,
            )
            raise ConflictError(
                f"Could not generate a unique invite code after "
                f"{self.max_code_attempts} attempts"
            )

    async def list_invites(self, actor: Actor) -> list[InviteSummary]:
        """List all invites with their profile names, newest first."""
        with logfire.span("invite_service.list_invites"):
            self.require_admin(actor, "list invites")
            invites = await self.invite_repository.find_all()
            logfire.info("Invites listed", count=len(invites))
            return invites

    async def get_invite(self, actor: Actor, invite_id: InviteId) -> Invite:
        """Get an invite by ID.

        Raises:
            ForbiddenError: If the caller is not an administrator
            NotFoundError: If the invite does not exist
        """
        with logfire.span("invite_service.get_invite", invite_id=str(invite_id)):
            self.require_admin(actor, "view invite details")
            invite = await self.invite_repository.find_by_id(invite_id)
            if invite is None:
                raise NotFoundError("Invite", str(invite_id))
            return invite

    async def verify_invite(self, code: InviteCode) -> InviteVerification:
        """Check whether a code can currently be redeemed.

        Read-only. An unknown code is an error; an expired or used-up code
        is a normal negative result.

        Raises:
            NotFoundError: If the code does not exist
        """
        with logfire.span("invite_service.verify_invite", code=code.masked()):
            invite = await self.invite_repository.find_by_code(code)
            if invite is None:
                logfire.info("Unknown invite code", code=code.masked())
                raise NotFoundError("Invite", code.masked())

            reason = invite.invalid_reason(utc_now())
            if reason is not None:
                logfire.info(
                    "Invite not redeemable",
                    invite_id=str(invite.id),
                    reason=reason.value,
                )
                return InviteVerification(valid=False, reason=reason)

            profile = await self._profile_of(invite)
            return InviteVerification(valid=True, profile=profile)

    async def consume_invite(self, code: InviteCode) -> Redemption:
        """Redeem one use of a code.

        The expiry and limit checks happen inside the store's conditional
        increment, so concurrent redemptions of the same code can never
        exceed ``max_uses``. When nothing was incremented the invite is
        re-read only to report the right error. Never retried here.

        Raises:
            NotFoundError: If the code does not exist
            InvalidOperationError: If the invite has expired
            ExhaustedError: If the usage limit was already reached
        """
        with logfire.span("invite_service.consume_invite", code=code.masked()):
            now = utc_now()
            updated = await self.invite_repository.increment_usage(code, now)

            if updated is None:
                current = await self.invite_repository.find_by_code(code)
                if current is None:
                    logfire.info("Unknown invite code", code=code.masked())
                    raise NotFoundError("Invite", code.masked())

                if current.invalid_reason(now) == InviteInvalidReason.EXPIRED:
                    logfire.info("Expired invite redemption", invite_id=str(current.id))
                    raise InvalidOperationError(
                        "Invite has expired", reason=InviteInvalidReason.EXPIRED
                    )

                # Either exhausted now, or was exhausted at the moment of the
                # increment and the limit has since been raised.
                logfire.info(
                    "Exhausted invite redemption",
                    invite_id=str(current.id),
                    usage_count=current.usage_count,
                    max_uses=current.max_uses,
                )
                raise ExhaustedError(code.root)

            logfire.info(
                "Invite consumed",
                invite_id=str(updated.id),
                usage_count=updated.usage_count,
                max_uses=updated.max_uses,
            )
            profile = await self._profile_of(updated)
            return Redemption(invite=updated, profile=profile)

    async def update_invite(
        self, actor: Actor, invite_id: InviteId, patch: InvitePatch
    ) -> Invite:
        """Change an invite's expiry and/or usage limit.

        Fields not set on the patch are left unchanged; explicitly set
        ``None`` clears them. The code and profile cannot be changed.

        Raises:
            ForbiddenError: If the caller is not an administrator
            NotFoundError: If the invite does not exist
            InvalidOperationError: If max_uses is not positive or is below
                the current usage count
        """
        with logfire.span(
            "invite_service.update_invite",
            invite_id=str(invite_id),
            fields=sorted(patch.model_fields_set),
        ):
            self.require_admin(actor, "update invites")

            invite = await self.invite_repository.find_by_id(invite_id)
            if invite is None:
                raise NotFoundError("Invite", str(invite_id))

            expires_at = invite.expires_at
            if "expires_at" in patch.model_fields_set:
                expires_at = as_utc(patch.expires_at)

            max_uses = invite.max_uses
            if "max_uses" in patch.model_fields_set:
                max_uses = patch.max_uses
                self._validate_max_uses(max_uses)
                self._ensure_limit_covers_usage(max_uses, invite.usage_count)

            updated = await self.invite_repository.update_limits(
                invite_id, expires_at, max_uses
            )
            if updated is None:
                current = await self.invite_repository.find_by_id(invite_id)
                if current is None:
                    raise NotFoundError("Invite", str(invite_id))
                # A redemption landed between the read and the write
                self._ensure_limit_covers_usage(max_uses, current.usage_count)
                raise InvalidOperationError("Invite changed while being updated, retry")

            logfire.info(
                "Invite updated",
                invite_id=str(invite_id),
                expires_at=updated.expires_at,
                max_uses=updated.max_uses,
            )
            return updated

    async def delete_invite(self, actor: Actor, invite_id: InviteId) -> None:
        """Delete an invite.

        Raises:
            ForbiddenError: If the caller is not an administrator
            NotFoundError: If the invite does not exist
        """
        with logfire.span("invite_service.delete_invite", invite_id=str(invite_id)):
            self.require_admin(actor, "delete invites")
            if not await self.invite_repository.delete(invite_id):
                raise NotFoundError("Invite", str(invite_id))
            logfire.info("Invite deleted", invite_id=str(invite_id))

    async def _profile_of(self, invite: Invite) -> Profile:
        profile = await self.profile_service.find_profile(invite.profile_id)
        if profile is None:
            # Excluded by the foreign key; only reachable with a broken store
            logfire.error(
                "Invite references missing profile",
                invite_id=str(invite.id),
                profile_id=str(invite.profile_id),
            )
            raise NotFoundError("Profile", str(invite.profile_id))
        return profile

    @staticmethod
    def _validate_max_uses(max_uses: int | None) -> None:
        if max_uses is not None and max_uses < 1:
            raise InvalidOperationError(
                "max_uses must be a positive integer", max_uses=max_uses
            )
        if max_uses is not None and max_uses > MAX_USES_LIMIT:
            raise InvalidOperationError(
                f"max_uses must not exceed {MAX_USES_LIMIT}", max_uses=max_uses
            )

    @staticmethod
    def _ensure_limit_covers_usage(max_uses: int | None, usage_count: int) -> None:
        if max_uses is not None and usage_count > max_uses:
            raise InvalidOperationError(
                f"max_uses ({max_uses}) is below the current usage count "
                f"({usage_count})",
                usage_count=usage_count,
                max_uses=max_uses,
            )
