"""SQLAlchemy table definitions for sitehost.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# SITES TABLE
# ============================================================================
sites_table = Table(
    "sites",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(32), nullable=False),
    Column("password_hash", String(255), nullable=False),  # bcrypt, never plaintext
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # Enforces one site per username, even for concurrent signups
    UniqueConstraint("username", name="uq_sites_username"),
)

Index("idx_sites_created_at", sites_table.c.created_at.desc())

# ============================================================================
# TAGS TABLE (shared registry, one row per name)
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(25), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("name", name="uq_tags_name"),
)

# ============================================================================
# SITE_TAGS TABLE (junction table, position keeps the user's order)
# ============================================================================
site_tags_table = Table(
    "site_tags",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("site_id", UUID, ForeignKey("sites.id", ondelete="CASCADE"), nullable=False),
    Column("tag_id", UUID, ForeignKey("tags.id", ondelete="RESTRICT"), nullable=False),
    Column("position", Integer, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("site_id", "tag_id", name="uq_site_tag"),
)

Index("idx_site_tags_site_id", site_tags_table.c.site_id)
Index("idx_site_tags_tag_id", site_tags_table.c.tag_id)
