"""initial_schema

Create the schema for Gatehouse:
- Profiles (named access templates, exactly one default)
- Invites (redeemable codes bound to a profile)

Revision ID: 3c9e1f7a2b40
Revises:
Create Date: 2026-10-17 09:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c9e1f7a2b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # PROFILES table
    # ========================================================================
    op.create_table(
        "profiles",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("template_user_ref", sa.String(255), nullable=True),
        sa.Column(
            "is_default", sa.Boolean(), nullable=False, server_default=sa.false()
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="profiles_name_key"),
    )
    # Store-level guard for the single default profile
    op.create_index(
        "uq_profiles_single_default",
        "profiles",
        ["is_default"],
        unique=True,
        postgresql_where=sa.text("is_default"),
    )

    # ========================================================================
    # INVITES table
    # ========================================================================
    op.create_table(
        "invites",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("code", sa.String(255), nullable=False),
        sa.Column("profile_id", sa.UUID(), nullable=False),
        sa.Column("created_by_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("expires_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("max_uses", sa.Integer(), nullable=True),
        sa.Column("usage_count", sa.Integer(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("code", name="invites_code_key"),
        sa.ForeignKeyConstraint(
            ["profile_id"],
            ["profiles.id"],
            name="invites_profile_id_fkey",
            ondelete="RESTRICT",
        ),
        sa.CheckConstraint(
            "max_uses IS NULL OR max_uses > 0", name="max_uses_positive"
        ),
        sa.CheckConstraint("usage_count >= 0", name="usage_count_non_negative"),
        sa.CheckConstraint(
            "max_uses IS NULL OR usage_count <= max_uses",
            name="usage_within_limit",
        ),
    )
    op.create_index("idx_invites_profile_id", "invites", ["profile_id"])
    op.create_index(
        "idx_invites_created_at", "invites", [sa.text("created_at DESC")]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_invites_created_at", table_name="invites")
    op.drop_index("idx_invites_profile_id", table_name="invites")
    op.drop_table("invites")
    op.drop_index("uq_profiles_single_default", table_name="profiles")
    op.drop_table("profiles")
