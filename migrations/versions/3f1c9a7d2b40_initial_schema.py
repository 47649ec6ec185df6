"""initial_schema

Create the schema for assessment onboarding:
- Users
- Magic links (single-use login tokens)
- Invitations (manager-issued, accepted once)
- Assessment instances
- Manager relationships

Revision ID: 3f1c9a7d2b40
Revises:
Create Date: 2026-10-18 09:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Users
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(255), nullable=True),
        sa.Column("last_name", sa.String(255), nullable=True),
        sa.Column("role", sa.String(20), nullable=False, server_default="user"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sa.CheckConstraint(
            "role IN ('user', 'manager', 'admin', 'super_admin')",
            name="valid_user_role",
        ),
    )

    # Magic links
    op.create_table(
        "magic_links",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("token", sa.String(64), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("used", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.UniqueConstraint("token", name="uq_magic_links_token"),
    )
    op.create_index("idx_magic_links_email", "magic_links", ["email"])
    op.create_index("idx_magic_links_expires_at", "magic_links", ["expires_at"])
    # At most one unused link per email
    op.create_index(
        "uq_magic_links_active_email",
        "magic_links",
        ["email"],
        unique=True,
        postgresql_where=sa.text("used = false"),
    )

    # Invitations
    op.create_table(
        "invitations",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "manager_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("template_id", sa.Integer(), nullable=False),
        sa.Column("period_id", sa.Integer(), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(255), nullable=True),
        sa.Column("last_name", sa.String(255), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("token", sa.String(64), nullable=False),
        sa.Column(
            "invited_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column("accepted_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("reminder_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("last_reminder_sent", sa.DateTime(timezone=True), nullable=True),
        sa.Column("due_date", sa.Date(), nullable=True),
        sa.UniqueConstraint("token", name="uq_invitations_token"),
        sa.UniqueConstraint(
            "manager_id",
            "template_id",
            "period_id",
            "email",
            name="uq_invitation_target",
        ),
        sa.CheckConstraint(
            "status IN ('pending', 'accepted', 'declined', 'expired')",
            name="valid_invitation_status",
        ),
        sa.CheckConstraint(
            "(status = 'accepted') = (accepted_at IS NOT NULL)",
            name="accepted_at_iff_accepted",
        ),
        sa.CheckConstraint("reminder_count >= 0", name="reminder_count_non_negative"),
    )
    op.create_index("idx_invitations_manager_id", "invitations", ["manager_id"])
    op.create_index("idx_invitations_email", "invitations", ["email"])
    op.create_index(
        "idx_invitations_status_expires_at", "invitations", ["status", "expires_at"]
    )

    # Assessment instances
    op.create_table(
        "assessment_instances",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "user_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("period_id", sa.Integer(), nullable=False),
        sa.Column("template_id", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("started_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("due_date", sa.Date(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.CheckConstraint(
            "status IN ('pending', 'in_progress', 'completed', 'archived')",
            name="valid_assessment_instance_status",
        ),
    )
    op.create_index(
        "idx_assessment_instances_user_id", "assessment_instances", ["user_id"]
    )

    # Manager relationships
    op.create_table(
        "manager_relationships",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "manager_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "subordinate_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("period_id", sa.Integer(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.UniqueConstraint(
            "manager_id",
            "subordinate_id",
            "period_id",
            name="uq_manager_subordinate_period",
        ),
    )
    op.create_index(
        "idx_manager_relationships_manager_id",
        "manager_relationships",
        ["manager_id"],
    )
    op.create_index(
        "idx_manager_relationships_subordinate_id",
        "manager_relationships",
        ["subordinate_id"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("manager_relationships")
    op.drop_table("assessment_instances")
    op.drop_table("invitations")
    op.drop_table("magic_links")
    op.drop_table("users")
