"""Newsletter subscription route."""

import structlog
from api.base import BaseApiClient, ValidationError
from config.constants import NEWSLETTER_INVALID_EMAIL
from utils.formatting import validate_email

log = structlog.get_logger(__name__)


class NewsletterClient(BaseApiClient):
    api_name = "newsletter"

    async def subscribe(self, email: str) -> str:
        """Subscribe an email address. Returns the backend's message.

        Subscribing twice is not an error; the backend answers with an
        "already subscribed" message instead.
        """
        address = validate_email(email)
        if address is None:
            raise ValidationError(400, NEWSLETTER_INVALID_EMAIL)
        data = await self._request("POST", "newsletter/subscribe", json={"email": address})
        message = data.get("message", "") if isinstance(data, dict) else ""
        log.info("newsletter_subscribed", email=address)
        return message
