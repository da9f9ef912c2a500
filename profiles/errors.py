"""Profile editing failures, one per controller operation."""


class ProfileError(Exception):
    """Base class for failed profile operations. Wraps the collaborator error."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


class LoadError(ProfileError):
    """Loading failed. Logged only, never shown to the user."""


class PhotoUploadError(ProfileError):
    """Concern photo upload failed."""


class SaveError(ProfileError):
    """Saving the profile failed."""
