"""Plain-text renderings of notifications and profiles."""

from config.constants import MAX_NOTES_PREVIEW, NotificationType
from notifications.types import Notification
from profiles.models import Profile
from utils.formatting import format_list, truncate
from utils.time_utils import format_date

_ICONS = {
    NotificationType.PROFILE_SAVED: "✔",
    NotificationType.PHOTO_UPLOADED: "📷",
    NotificationType.NEWSLETTER_SUBSCRIBED: "✉",
}


def format_notification(notif: Notification) -> str:
    """One-line toast text, e.g. ``[!] Save Failed: Failed to save profile.``"""
    icon = "[!]" if notif.is_error else _ICONS.get(notif.type, "•")
    if notif.description:
        return f"{icon} {notif.title}: {notif.description}"
    return f"{icon} {notif.title}"


def format_profile(profile: Profile, display_name: str = "") -> list[str]:
    """Render a profile as display lines."""
    lines = []
    if display_name:
        lines.append(f"Health Profile: {display_name}")
    lines += [
        f"Date of birth: {format_date(profile.date_of_birth)}",
        f"Skin type: {profile.skin_type.value.title() if profile.skin_type else 'Not set'}",
        f"Skin issues: {format_list(profile.skin_issues)}",
        f"Allergies: {format_list(profile.allergies)}",
        f"Medical conditions: {format_list(profile.medical_conditions)}",
        f"Notes: {truncate(profile.notes, MAX_NOTES_PREVIEW) if profile.notes else 'None'}",
        f"Concern photo: {profile.concern_photo.url if profile.concern_photo else 'None'}",
    ]
    return lines
