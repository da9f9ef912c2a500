"""Convert server profile representations into the canonical Profile."""

from collections.abc import Mapping
from typing import Any

import pydantic
import structlog

from profiles.models import ConcernPhoto, Profile, ServerProfile

log = structlog.get_logger(__name__)


def parse_server_profile(raw: Any) -> ServerProfile | None:
    """Deserialize a raw server value. None for absent or non-mapping input."""
    if raw is None:
        return None
    if isinstance(raw, ServerProfile):
        return raw
    if not isinstance(raw, Mapping):
        log.warning("profile_shape_unexpected", type=type(raw).__name__)
        return None
    try:
        return ServerProfile.model_validate(dict(raw))
    except pydantic.ValidationError as e:
        log.warning("profile_shape_invalid", errors=e.error_count())
        return None


def normalize(raw: Any) -> Profile:
    """Build a canonical Profile from any server representation. Never raises."""
    server = parse_server_profile(raw)
    if server is None:
        return Profile()

    photo = None
    url = server.concern_photo_url.strip()
    asset_id = server.concern_photo_public_id.strip()
    if url and asset_id:
        photo = ConcernPhoto(url=url, asset_id=asset_id)
    elif url or asset_id:
        log.debug("concern_photo_incomplete", has_url=bool(url), has_asset_id=bool(asset_id))

    return Profile(
        date_of_birth=server.date_of_birth,
        skin_type=server.skin_type,
        skin_issues=list(server.skin_issues),
        allergies=list(server.allergies),
        medical_conditions=list(server.medical_conditions),
        notes=server.notes,
        concern_photo=photo,
    )
