"""initial_schema

Create the schema for sitehost:
- Sites (one per username, bcrypt password hash)
- Tags (shared registry, one row per lowercase name)
- Site tags (junction, keeps the order tags were entered in)

Revision ID: 3f2c9a41d7b0
Revises:
Create Date: 2026-10-19 10:12:05.418230

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f2c9a41d7b0"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # SITES table
    # ========================================================================
    op.create_table(
        "sites",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("username", sa.String(32), nullable=False),  # Lowercase
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="uq_sites_username"),
    )
    op.create_index(
        "idx_sites_created_at", "sites", [sa.text("created_at DESC")]
    )

    # ========================================================================
    # TAGS table
    # ========================================================================
    op.create_table(
        "tags",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("name", sa.String(25), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_tags_name"),
    )

    # ========================================================================
    # SITE_TAGS table
    # ========================================================================
    op.create_table(
        "site_tags",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("site_id", sa.UUID(), nullable=False),
        sa.Column("tag_id", sa.UUID(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["site_id"], ["sites.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("site_id", "tag_id", name="uq_site_tag"),
    )
    op.create_index("idx_site_tags_site_id", "site_tags", ["site_id"])
    op.create_index("idx_site_tags_tag_id", "site_tags", ["tag_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_site_tags_tag_id", table_name="site_tags")
    op.drop_index("idx_site_tags_site_id", table_name="site_tags")
    op.drop_table("site_tags")
    op.drop_table("tags")
    op.drop_index("idx_sites_created_at", table_name="sites")
    op.drop_table("sites")
