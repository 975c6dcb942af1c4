"""HTTP transport – the only place that touches the network."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import requests

from script_automation.domain.errors import InvalidResponseShape, TransportError

logger = logging.getLogger(__name__)


class Transport(ABC):
    """POST a JSON payload and return the decoded JSON body."""

    @abstractmethod
    def post_json(
        self,
        url: str,
        headers: Dict[str, str],
        payload: Dict[str, Any],
        timeout: float,
    ) -> Dict[str, Any]:
        """Raise TransportError on network/status failures, InvalidResponseShape on non-JSON bodies."""
        pass


class RequestsTransport(Transport):
    """Blocking transport backed by a requests.Session."""

    def __init__(self, session: Optional[requests.Session] = None):
        self._session = session or requests.Session()

    def post_json(self, url, headers, payload, timeout):
        try:
            response = self._session.post(url, headers=headers, json=payload, timeout=timeout)
        except requests.exceptions.Timeout as e:
            raise TransportError(f"Request timed out after {timeout}s: {e}") from e
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Request failed: {e}") from e

        logger.debug("POST %s -> %s", url, response.status_code)
        if not 200 <= response.status_code < 300:
            error_text = response.text[:500] if response.text else ""
            raise TransportError(
                f"API returned status {response.status_code}: {error_text}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise InvalidResponseShape(f"Response body is not JSON: {e}", payload=response.text[:500]) from e
