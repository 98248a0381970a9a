"""
HTTP client for the materials REST API.

Wraps a ``requests.Session`` and turns every failure mode into a
ServiceError subclass so callers only ever handle one hierarchy:

- transport failures (refused connection, DNS, timeout) -> ApiConnectionError
- non-2xx responses -> ApiResponseError, carrying the server's message
- bodies that are not JSON -> MalformedResponseError

Example usage:
    from src.services.api_client import ApiClient

    client = ApiClient.from_config()
    payload = client.get("/materials")
"""

import logging
from typing import Any, Optional

import requests

from src.services.exceptions import (
    ApiConnectionError,
    ApiResponseError,
    MalformedResponseError,
)
from src.services.logging_utils import get_service_logger, log_operation
from src.utils.config import Config, get_config
from src.utils.constants import SERVER_MESSAGE_KEY

logger = get_service_logger(__name__)


def extract_server_message(response: requests.Response) -> Optional[str]:
    """
    Pull the human-readable message out of an error response body.

    Args:
        response: Response with a non-2xx status

    Returns:
        The body's message field, or None when absent, blank or not JSON
    """
    try:
        body = response.json()
    except ValueError:
        return None

    if not isinstance(body, dict):
        return None

    message = body.get(SERVER_MESSAGE_KEY)
    if isinstance(message, str) and message.strip():
        return message.strip()
    return None


class ApiClient:
    """
    JSON-over-HTTP client bound to one API base URL.

    Attributes:
        base_url: API root without trailing slash
        timeout: Seconds to wait for a response, None to wait indefinitely
        session: Underlying requests session (shared connection pool)
    """

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: API root, e.g. "http://localhost:5000/api"
            timeout: Request timeout in seconds (None disables it)
            session: Optional pre-built session (tests inject a mock here)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> "ApiClient":
        """Build a client from application configuration."""
        config = config or get_config()
        return cls(config.api_base_url, timeout=config.api_timeout)

    def url_for(self, path: str) -> str:
        """Join a resource path onto the base URL."""
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{self.base_url}{path}"

    def request(self, method: str, path: str, json: Any = None) -> Any:
        """
        Send a request and decode the JSON response.

        Args:
            method: HTTP method
            path: Resource path relative to the base URL
            json: Optional body, serialized as JSON

        Returns:
            Decoded JSON body, or None for an empty body

        Raises:
            ApiConnectionError: If the server could not be reached
            ApiResponseError: If the server returned a non-2xx status
            MalformedResponseError: If a non-empty body is not valid JSON
        """
        url = self.url_for(path)
        logger.debug(f"{method} {url}")

        try:
            response = self.session.request(method, url, json=json, timeout=self.timeout)
        except requests.RequestException as e:
            log_operation(logger, "api_request", "unreachable", logging.WARNING, method=method, url=url)
            raise ApiConnectionError(url, e) from e

        if not 200 <= response.status_code < 300:
            log_operation(
                logger,
                "api_request",
                "http_error",
                logging.WARNING,
                method=method,
                url=url,
                status_code=response.status_code,
            )
            raise ApiResponseError(
                response.status_code,
                server_message=extract_server_message(response),
                url=url,
            )

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError(f"{method} {url} returned a non-JSON body") from e

    def get(self, path: str) -> Any:
        return self.request("GET", path)

    def post(self, path: str, json: Any = None) -> Any:
        return self.request("POST", path, json=json)

    def put(self, path: str, json: Any = None) -> Any:
        return self.request("PUT", path, json=json)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)

    def close(self) -> None:
        """Release pooled connections."""
        self.session.close()
