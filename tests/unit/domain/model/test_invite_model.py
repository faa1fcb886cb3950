"""Unit tests for derived invite validity."""

from datetime import timedelta
from uuid import uuid4

import pytest

from gatehouse.domain.model import Invite
from gatehouse.domain.model.common import utc_now
from gatehouse.domain.value import (
    InviteCode,
    InviteId,
    InviteInvalidReason,
    ProfileId,
    UserId,
)


def make_invite(**overrides) -> Invite:
    fields = {
        "id": InviteId(uuid4()),
        "code": InviteCode("abcdef123456"),
        "profile_id": ProfileId(uuid4()),
        "created_by_id": UserId(uuid4()),
    }
    fields.update(overrides)
    return Invite(**fields)


class TestInvalidReason:
    """Tests for Invite.invalid_reason."""

    def test_fresh_invite_is_valid(self):
        invite = make_invite()

        assert invite.invalid_reason(utc_now()) is None
        assert invite.remaining_uses is None

    def test_expired_invite(self):
        now = utc_now()
        invite = make_invite(expires_at=now - timedelta(seconds=1))

        assert invite.invalid_reason(now) == InviteInvalidReason.EXPIRED

    def test_expiry_equal_to_now_is_still_valid(self):
        now = utc_now()
        invite = make_invite(expires_at=now)

        assert invite.invalid_reason(now) is None

    @pytest.mark.parametrize(
        "max_uses,usage_count,expected",
        [
            (1, 0, None),
            (1, 1, InviteInvalidReason.MAX_USES_REACHED),
            (3, 2, None),
            (None, 1000, None),
        ],
    )
    def test_usage_limit(self, max_uses, usage_count, expected):
        invite = make_invite(max_uses=max_uses, usage_count=usage_count)

        assert invite.invalid_reason(utc_now()) == expected

    def test_expiry_reported_before_exhaustion(self):
        now = utc_now()
        invite = make_invite(
            expires_at=now - timedelta(days=1), max_uses=1, usage_count=1
        )

        assert invite.invalid_reason(now) == InviteInvalidReason.EXPIRED

    def test_remaining_uses(self):
        invite = make_invite(max_uses=5, usage_count=2)

        assert invite.remaining_uses == 3


class TestInviteCode:
    """Tests for the InviteCode value object."""

    def test_masked_hides_most_of_the_code(self):
        assert InviteCode("abcdef123456").masked() == "abcd..."

    def test_empty_code_rejected(self):
        with pytest.raises(ValueError):
            InviteCode("")
