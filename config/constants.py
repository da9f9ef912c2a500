"""Constants used across the application."""

import re
from enum import Enum


class SkinType(str, Enum):
    NORMAL = "normal"
    DRY = "dry"
    OILY = "oily"
    COMBINATION = "combination"
    SENSITIVE = "sensitive"


# Notification types
class NotificationType(str, Enum):
    PROFILE_SAVED = "profile_saved"
    PROFILE_SAVE_FAILED = "profile_save_failed"
    PHOTO_UPLOADED = "photo_uploaded"
    PHOTO_UPLOAD_FAILED = "photo_upload_failed"
    NEWSLETTER_SUBSCRIBED = "newsletter_subscribed"


# Toast variants
class NotificationVariant(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


class OperationState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SAVING = "saving"
    UPLOADING = "uploading"
    READY = "ready"


# Profile fields editable as ordered lists of entries
LIST_FIELDS = ("skin_issues", "allergies", "medical_conditions")

# Profile fields replaced wholesale through set_scalar
SCALAR_FIELDS = ("date_of_birth", "skin_type", "notes")

LIST_DELIMITER = ","

# User-facing notification copy
PROFILE_SAVED_TITLE = "Profile Saved"
PROFILE_SAVED_MESSAGE = "Customer health profile updated successfully."
SAVE_FAILED_TITLE = "Save Failed"
SAVE_FAILED_FALLBACK = "Failed to save profile."
PHOTO_UPLOADED_TITLE = "Photo Uploaded"
PHOTO_UPLOADED_MESSAGE = "Concern photo added to profile."
UPLOAD_FAILED_TITLE = "Upload Failed"

# Newsletter responses
NEWSLETTER_INVALID_EMAIL = "Valid email is required"
NEWSLETTER_ALREADY_SUBSCRIBED = "You are already subscribed!"

# Uploads
UPLOAD_TOO_LARGE = "file too large"
UPLOAD_NOT_IMAGE = "Only image files can be uploaded"
IMAGE_CONTENT_TYPE = re.compile(r"^image/[\w.+-]+$")

MAX_NOTES_PREVIEW = 200
