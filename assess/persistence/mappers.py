"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
with SQLAlchemy Core rather than ORM mapping.
"""

from datetime import datetime, timezone
from typing import Any, Dict
from uuid import UUID

from assess.domain.model import (
    AssessmentInstance,
    Invitation,
    MagicLink,
    ManagerRelationship,
    User,
)
from assess.domain.value import (
    AssessmentInstanceId,
    AssessmentInstanceStatus,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    MagicLinkId,
    MagicLinkToken,
    ManagerRelationshipId,
    PeriodId,
    TemplateId,
    UserId,
    UserRole,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive datetimes.

    SQLite returns naive datetimes; Postgres returns aware ones.
    """
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        email=row["email"],
        first_name=row.get("first_name"),
        last_name=row.get("last_name"),
        role=UserRole(row["role"]),
        is_active=row["is_active"],
        created_at=_utc(row["created_at"]),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "email": user.email,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "role": user.role.value,
        "is_active": user.is_active,
        "created_at": user.created_at,
    }


def row_to_magic_link(row: Dict[str, Any]) -> MagicLink:
    """Convert database row to MagicLink domain model."""
    return MagicLink(
        id=MagicLinkId(_uuid(row["id"])),
        email=row["email"],
        token=MagicLinkToken(row["token"]),
        expires_at=_utc(row["expires_at"]),
        used=row["used"],
        created_at=_utc(row["created_at"]),
    )


def magic_link_to_dict(magic_link: MagicLink) -> Dict[str, Any]:
    """Convert MagicLink domain model to database dict."""
    return {
        "id": magic_link.id,
        "email": magic_link.email,
        "token": magic_link.token.root,
        "expires_at": magic_link.expires_at,
        "used": magic_link.used,
        "created_at": magic_link.created_at,
    }


def row_to_invitation(row: Dict[str, Any]) -> Invitation:
    """Convert database row to Invitation domain model.

    Args:
        row: Database row as dict

    Returns:
        Invitation domain model
    """
    return Invitation(
        id=InvitationId(_uuid(row["id"])),
        manager_id=UserId(_uuid(row["manager_id"])),
        template_id=TemplateId(row["template_id"]),
        period_id=PeriodId(row["period_id"]),
        email=row["email"],
        first_name=row.get("first_name"),
        last_name=row.get("last_name"),
        status=InvitationStatus(row["status"]),
        token=InvitationToken(row["token"]),
        invited_at=_utc(row["invited_at"]),
        accepted_at=_utc(row.get("accepted_at")),
        expires_at=_utc(row["expires_at"]),
        reminder_count=row["reminder_count"],
        last_reminder_sent=_utc(row.get("last_reminder_sent")),
        due_date=row.get("due_date"),
    )


def invitation_to_dict(invitation: Invitation) -> Dict[str, Any]:
    """Convert Invitation domain model to database dict.

    Args:
        invitation: Invitation domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": invitation.id,
        "manager_id": invitation.manager_id,
        "template_id": invitation.template_id,
        "period_id": invitation.period_id,
        "email": invitation.email,
        "first_name": invitation.first_name,
        "last_name": invitation.last_name,
        "status": invitation.status.value,
        "token": invitation.token.root,
        "invited_at": invitation.invited_at,
        "accepted_at": invitation.accepted_at,
        "expires_at": invitation.expires_at,
        "reminder_count": invitation.reminder_count,
        "last_reminder_sent": invitation.last_reminder_sent,
        "due_date": invitation.due_date,
    }


def row_to_assessment_instance(row: Dict[str, Any]) -> AssessmentInstance:
    """Convert database row to AssessmentInstance domain model."""
    return AssessmentInstance(
        id=AssessmentInstanceId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        period_id=PeriodId(row["period_id"]),
        template_id=TemplateId(row["template_id"]),
        status=AssessmentInstanceStatus(row["status"]),
        started_at=_utc(row.get("started_at")),
        completed_at=_utc(row.get("completed_at")),
        due_date=row.get("due_date"),
        created_at=_utc(row["created_at"]),
    )


def assessment_instance_to_dict(instance: AssessmentInstance) -> Dict[str, Any]:
    """Convert AssessmentInstance domain model to database dict."""
    return {
        "id": instance.id,
        "user_id": instance.user_id,
        "period_id": instance.period_id,
        "template_id": instance.template_id,
        "status": instance.status.value,
        "started_at": instance.started_at,
        "completed_at": instance.completed_at,
        "due_date": instance.due_date,
        "created_at": instance.created_at,
    }


def row_to_manager_relationship(row: Dict[str, Any]) -> ManagerRelationship:
    """Convert database row to ManagerRelationship domain model."""
    return ManagerRelationship(
        id=ManagerRelationshipId(_uuid(row["id"])),
        manager_id=UserId(_uuid(row["manager_id"])),
        subordinate_id=UserId(_uuid(row["subordinate_id"])),
        period_id=PeriodId(row["period_id"]),
        created_at=_utc(row["created_at"]),
    )


def manager_relationship_to_dict(relationship: ManagerRelationship) -> Dict[str, Any]:
    """Convert ManagerRelationship domain model to database dict."""
    return relationship.model_dump()
