"""Client the proxy uses to relay submissions to the upstream content API."""

from typing import Any

from .client import Client, parse_json


class UpstreamClient(Client):
    """Forwards a JSON body and hands back the upstream status and body as-is.

    Unlike the other clients, a non-2xx answer is not an error here: the
    proxy relays it to its own caller unchanged.
    """

    async def forward(self, path: str, payload: Any) -> tuple[int, Any]:
        """POST ``payload`` to ``path``.

        Returns:
            (status_code, parsed body); the body is ``{}`` when not JSON

        Raises:
            NetworkError: If the upstream cannot be reached
        """
        response = await self._send(
            "POST",
            path,
            json=payload,
            headers={"Cache-Control": "no-store"},
        )
        return response.status_code, parse_json(response)
