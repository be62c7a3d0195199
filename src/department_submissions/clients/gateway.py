"""Gateway that forwards normalized submissions to the portal's proxy."""

import logging
from typing import Any

from schemas.drafts import EntityType

from .client import Client

logger = logging.getLogger(__name__)

FALLBACK_MESSAGES: dict[str, str] = {
    "project": "Failed to submit project",
    "research": "Failed to submit research",
    "journal": "Failed to submit article",
}


class SubmissionGateway(Client):
    """Posts submission payloads to ``/api/submissions/<entity_type>``.

    Stateless apart from the pooled HTTP connection: any 2xx response is a
    success and its parsed body is returned; anything else raises.

    Example:
        config = {"base_url": "http://127.0.0.1:5000"}
        async with SubmissionGateway(config) as gateway:
            data = await gateway.submit("journal", payload)
    """

    API_PATH = "/api/submissions/{entity_type}"

    async def submit(self, entity_type: EntityType, payload: dict[str, Any]) -> Any:
        """Submit one payload.

        Args:
            entity_type: One of "project", "research" or "journal"
            payload: Normalized JSON payload

        Returns:
            The parsed upstream body (``{}`` when empty or not JSON)

        Raises:
            ValueError: If entity_type is not a known submission type
            UpstreamError: If the proxy answers with a non-2xx status
            NetworkError: If the proxy cannot be reached
        """
        if entity_type not in FALLBACK_MESSAGES:
            raise ValueError(f"Unknown submission type: {entity_type}")

        logger.info(f"Submitting {entity_type} to {self.base_url}")
        return await self.post(
            self.API_PATH.format(entity_type=entity_type),
            payload,
            fallback=FALLBACK_MESSAGES[entity_type],
        )
