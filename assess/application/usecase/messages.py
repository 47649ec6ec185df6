"""Plain text bodies for outbound email."""

from assess.domain.model import Invitation

SIGNATURE = "-- The Assessment Tracker team"


def magic_link_message(url: str, ttl_hours: int) -> tuple[str, str]:
    """Subject and body for a login link."""
    body = (
        "Use the link below to sign in to Assessment Tracker.\n\n"
        f"{url}\n\n"
        f"The link works once and expires in {ttl_hours} hours. "
        "If you did not ask to sign in, you can ignore this email.\n\n"
        f"{SIGNATURE}\n"
    )
    return "Assessment Tracker - Login Link", body


def invitation_message(invitation: Invitation, url: str) -> tuple[str, str]:
    """Subject and body for a new invitation."""
    greeting = f"Hello {invitation.first_name}," if invitation.first_name else "Hello,"
    lines = [
        greeting,
        "",
        "You have been invited to complete an assessment.",
        "",
        url,
        "",
        f"This invitation expires on {invitation.expires_at:%Y-%m-%d}.",
    ]
    if invitation.due_date:
        lines.append(f"The assessment is due on {invitation.due_date:%Y-%m-%d}.")
    lines += ["", SIGNATURE, ""]
    return "Assessment Invitation", "\n".join(lines)


def reminder_message(invitation: Invitation, url: str) -> tuple[str, str]:
    """Subject and body for an invitation reminder."""
    greeting = f"Hello {invitation.first_name}," if invitation.first_name else "Hello,"
    body = (
        f"{greeting}\n\n"
        "This is a reminder that an assessment invitation is waiting for you.\n\n"
        f"{url}\n\n"
        f"The invitation expires on {invitation.expires_at:%Y-%m-%d}.\n\n"
        f"{SIGNATURE}\n"
    )
    return "Assessment Reminder", body
