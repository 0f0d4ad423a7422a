import logging
from typing import Any, Dict, Optional

import requests

from webhook.errors import TransportError
from webhook.models import WebhookResponse

logger = logging.getLogger(__name__)


class WebhookClient:
    """Low-level HTTP client for the automation webhook (GET with query parameters)."""

    def __init__(self, base_url: str, session: Optional[requests.Session] = None):
        self.base_url = base_url
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json, text/plain, */*"})

    def get(self, params: Dict[str, Any], timeout: float) -> WebhookResponse:
        """
        Issue exactly one GET. HTTP error statuses are returned, not raised:
        the backend uses them to report workflow results.
        """
        logger.info(
            f"GET webhook navigate={params.get('navigate')} message={params.get('message')!r}"
        )
        try:
            resp = self.session.get(self.base_url, params=params, timeout=timeout)
        except requests.Timeout as e:
            logger.error(f"Webhook call timed out after {timeout}s: {e}")
            raise TransportError(f"Request timed out after {timeout}s", timed_out=True) from e
        except requests.RequestException as e:
            logger.error(f"Webhook call failed: {e}")
            raise TransportError(f"Request failed: {e}") from e

        body = self._parse_body(resp)
        elapsed = resp.elapsed.total_seconds() if resp.elapsed is not None else 0.0
        logger.debug(f"Webhook answered {resp.status_code} in {elapsed:.2f}s: {body!r}")
        return WebhookResponse(status_code=resp.status_code, body=body, elapsed=elapsed)

    @staticmethod
    def _parse_body(resp: requests.Response) -> Any:
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            return resp.text

    def close(self) -> None:
        self.session.close()
