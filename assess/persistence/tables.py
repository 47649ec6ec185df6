"""SQLAlchemy table definitions for assessments.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.

Column types are portable (Uuid, DateTime(timezone=True)) so the same
metadata also builds a SQLite schema for repository tests.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Uuid,
    UniqueConstraint,
    false,
    func,
    true,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("email", String(255), nullable=False, unique=True),  # Stored lowercase
    Column("first_name", String(255), nullable=True),
    Column("last_name", String(255), nullable=True),
    Column("role", String(20), nullable=False, server_default="user"),
    Column("is_active", Boolean, nullable=False, server_default=true()),
    Column(
        "created_at", DateTime(timezone=True), nullable=False, server_default=func.now()
    ),
    CheckConstraint(
        "role IN ('user', 'manager', 'admin', 'super_admin')", name="valid_user_role"
    ),
)

# ============================================================================
# MAGIC LINKS TABLE
# ============================================================================
magic_links_table = Table(
    "magic_links",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("email", String(255), nullable=False),
    Column("token", String(64), nullable=False, unique=True),
    Column("expires_at", DateTime(timezone=True), nullable=False),
    Column("used", Boolean, nullable=False, server_default=false()),
    Column(
        "created_at", DateTime(timezone=True), nullable=False, server_default=func.now()
    ),
)

Index("idx_magic_links_email", magic_links_table.c.email)
Index("idx_magic_links_expires_at", magic_links_table.c.expires_at)
# At most one unused link per email; concurrent issues collide here
Index(
    "uq_magic_links_active_email",
    magic_links_table.c.email,
    unique=True,
    postgresql_where=magic_links_table.c.used == false(),
    sqlite_where=magic_links_table.c.used == false(),
)

# ============================================================================
# INVITATIONS TABLE
# ============================================================================
invitations_table = Table(
    "invitations",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column(
        "manager_id", Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("template_id", Integer, nullable=False),  # External template catalogue
    Column("period_id", Integer, nullable=False),  # External period catalogue
    Column("email", String(255), nullable=False),  # Stored lowercase
    Column("first_name", String(255), nullable=True),
    Column("last_name", String(255), nullable=True),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column("token", String(64), nullable=False, unique=True),
    Column(
        "invited_at", DateTime(timezone=True), nullable=False, server_default=func.now()
    ),
    Column("accepted_at", DateTime(timezone=True), nullable=True),
    Column("expires_at", DateTime(timezone=True), nullable=False),
    Column("reminder_count", Integer, nullable=False, server_default="0"),
    Column("last_reminder_sent", DateTime(timezone=True), nullable=True),
    Column("due_date", Date, nullable=True),
    UniqueConstraint(
        "manager_id", "template_id", "period_id", "email", name="uq_invitation_target"
    ),
    CheckConstraint(
        "status IN ('pending', 'accepted', 'declined', 'expired')",
        name="valid_invitation_status",
    ),
    CheckConstraint(
        "(status = 'accepted') = (accepted_at IS NOT NULL)",
        name="accepted_at_iff_accepted",
    ),
    CheckConstraint("reminder_count >= 0", name="reminder_count_non_negative"),
)

Index("idx_invitations_manager_id", invitations_table.c.manager_id)
Index("idx_invitations_email", invitations_table.c.email)
Index(
    "idx_invitations_status_expires_at",
    invitations_table.c.status,
    invitations_table.c.expires_at,
)

# ============================================================================
# ASSESSMENT INSTANCES TABLE
# ============================================================================
assessment_instances_table = Table(
    "assessment_instances",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("user_id", Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("period_id", Integer, nullable=False),
    Column("template_id", Integer, nullable=False),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column("started_at", DateTime(timezone=True), nullable=True),
    Column("completed_at", DateTime(timezone=True), nullable=True),
    Column("due_date", Date, nullable=True),
    Column(
        "created_at", DateTime(timezone=True), nullable=False, server_default=func.now()
    ),
    CheckConstraint(
        "status IN ('pending', 'in_progress', 'completed', 'archived')",
        name="valid_assessment_instance_status",
    ),
)

Index("idx_assessment_instances_user_id", assessment_instances_table.c.user_id)

# ============================================================================
# MANAGER RELATIONSHIPS TABLE
# ============================================================================
manager_relationships_table = Table(
    "manager_relationships",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column(
        "manager_id", Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "subordinate_id",
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("period_id", Integer, nullable=False),
    Column(
        "created_at", DateTime(timezone=True), nullable=False, server_default=func.now()
    ),
    UniqueConstraint(
        "manager_id", "subordinate_id", "period_id", name="uq_manager_subordinate_period"
    ),
)

Index("idx_manager_relationships_manager_id", manager_relationships_table.c.manager_id)
Index(
    "idx_manager_relationships_subordinate_id",
    manager_relationships_table.c.subordinate_id,
)
