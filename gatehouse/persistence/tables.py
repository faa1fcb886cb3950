"""SQLAlchemy table definitions for Gatehouse.

These match the schema created by the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# PROFILES TABLE
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(100), nullable=False, unique=True),
    Column("template_user_ref", String(255), nullable=True),  # Opaque external ref
    Column("is_default", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
)

# At most one row may carry the default flag
Index(
    "uq_profiles_single_default",
    profiles_table.c.is_default,
    unique=True,
    postgresql_where=profiles_table.c.is_default,
)

# ============================================================================
# INVITES TABLE
# ============================================================================
invites_table = Table(
    "invites",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("code", String(255), nullable=False, unique=True),
    Column(
        "profile_id",
        UUID(as_uuid=True),
        ForeignKey("profiles.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column("created_by_id", UUID(as_uuid=True), nullable=False),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=True),
    Column("max_uses", Integer, nullable=True),
    Column("usage_count", Integer, nullable=False, server_default="0"),
    CheckConstraint("max_uses IS NULL OR max_uses > 0", name="max_uses_positive"),
    CheckConstraint("usage_count >= 0", name="usage_count_non_negative"),
    CheckConstraint(
        "max_uses IS NULL OR usage_count <= max_uses",
        name="usage_within_limit",
    ),
)

Index("idx_invites_profile_id", invites_table.c.profile_id)
Index("idx_invites_created_at", invites_table.c.created_at.desc())
