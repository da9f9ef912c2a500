"""Profile data classes and the server-side wire shape."""

from dataclasses import dataclass, field
from datetime import date
from typing import Annotated, Any

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field

from config.constants import SkinType
from utils.formatting import clean_entries
from utils.time_utils import parse_date


@dataclass(frozen=True)
class ConcernPhoto:
    """An uploaded skin-concern photo. url and asset_id always travel together."""
    url: str
    asset_id: str


@dataclass
class Profile:
    """Canonical in-memory customer health profile."""
    date_of_birth: date | None = None
    skin_type: SkinType | None = None
    skin_issues: list[str] = field(default_factory=list)
    allergies: list[str] = field(default_factory=list)
    medical_conditions: list[str] = field(default_factory=list)
    notes: str = ""
    concern_photo: ConcernPhoto | None = None

    def to_payload(self, subject_id: str, scope_id: str) -> dict[str, Any]:
        """Full-replace save payload in the backend's field names."""
        return {
            "user_id": subject_id,
            "salon_id": scope_id,
            "date_of_birth": self.date_of_birth.isoformat() if self.date_of_birth else "",
            "skin_type": self.skin_type.value if self.skin_type else "",
            "skin_issues": list(self.skin_issues),
            "allergies": list(self.allergies),
            "medical_conditions": list(self.medical_conditions),
            "notes": self.notes,
            "concern_photo_url": self.concern_photo.url if self.concern_photo else "",
            "concern_photo_public_id": self.concern_photo.asset_id if self.concern_photo else "",
        }


def _coerce_skin_type(value: Any) -> SkinType | None:
    if isinstance(value, SkinType):
        return value
    if isinstance(value, str):
        try:
            return SkinType(value.strip().lower())
        except ValueError:
            return None
    return None


def _coerce_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


EntryList = Annotated[list[str], BeforeValidator(clean_entries)]
Text = Annotated[str, BeforeValidator(_coerce_text)]


class ServerProfile(BaseModel):
    """Profile as the backend encodes it.

    Every field has a before-validator that accepts whatever the backend
    sends, so validation of a mapping never fails. List fields may arrive as
    comma-joined strings or arrays; both come out as lists of entries.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    date_of_birth: Annotated[date | None, BeforeValidator(parse_date)] = None
    skin_type: Annotated[SkinType | None, BeforeValidator(_coerce_skin_type)] = None
    skin_issues: EntryList = Field(default_factory=list)
    allergies: EntryList = Field(
        default_factory=list, validation_alias=AliasChoices("allergy_records", "allergies")
    )
    medical_conditions: EntryList = Field(default_factory=list)
    notes: Text = ""
    concern_photo_url: Text = ""
    concern_photo_public_id: Text = Field(
        default="", validation_alias=AliasChoices("concern_photo_public_id", "concern_photo_asset_id")
    )
