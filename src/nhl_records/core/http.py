"""
Shared HTTP client infrastructure for the NHL records API.

Provides BaseApiClient with envelope unwrapping and a typed error taxonomy.
Requests are synchronous and sequential: each call blocks until the
response has been received and parsed.

Usage:
    class MyClient(BaseApiClient):
        BASE_URL = "https://records.nhl.com/site/api"

        def get_data(self) -> list[dict]:
            return self._get_data("/franchise")
"""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class RecordsAPIError(Exception):
    """Base exception for records API errors."""

    def __init__(
        self,
        message: str,
        code: str = "RECORDS_API_ERROR",
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class TransportError(RecordsAPIError):
    """DNS, connection or timeout failure before a response was received."""

    def __init__(self, message: str):
        super().__init__(message, code="TRANSPORT_ERROR")


class ProtocolError(RecordsAPIError):
    """The server answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message, code="PROTOCOL_ERROR", status_code=status_code)


class ParseError(RecordsAPIError):
    """The response body is not valid JSON."""

    def __init__(self, message: str):
        super().__init__(message, code="PARSE_ERROR")


class SchemaError(RecordsAPIError):
    """The JSON envelope or a record in it has an unexpected shape."""

    def __init__(self, message: str):
        super().__init__(message, code="SCHEMA_ERROR")


# ---------------------------------------------------------------------------
# Base client
# ---------------------------------------------------------------------------

class BaseApiClient:
    """
    Synchronous HTTP client base.

    Subclasses set BASE_URL and add endpoint-specific methods.
    Use as a context manager:

        with MyClient() as client:
            rows = client._get_data("/endpoint")

    Or with lazy initialisation:

        client = MyClient()
        rows = client._get_data("/endpoint")  # client auto-creates on first use
        client.close()
    """

    BASE_URL: str = ""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        headers: dict[str, str] | None = None,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self._base_url = (base_url or self.BASE_URL).rstrip("/")
        self._default_headers = headers or {}
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.Client | None = None

    # -- Lifecycle -----------------------------------------------------------

    def __enter__(self) -> "BaseApiClient":
        self._client = self._build_client()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _build_client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self._base_url,
            headers=self._default_headers,
            timeout=httpx.Timeout(self._timeout),
            transport=self._transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def client(self) -> httpx.Client:
        """Return the HTTP client, lazily creating it if needed."""
        if self._client is None or self._client.is_closed:
            self._client = self._build_client()
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()
        self._client = None

    # -- HTTP methods --------------------------------------------------------

    def _get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """
        Make a GET request and return the decoded JSON body.

        Raises:
            TransportError: If no response was received (including timeouts)
            ProtocolError: If the response status is not 2xx
            ParseError: If the body is not UTF-8 JSON
        """
        logger.debug(f"GET {self._base_url}{path} params={params}")

        try:
            response = self.client.get(path, params=params)
        except httpx.RequestError as e:
            logger.error(f"Request error for {path}: {e}")
            raise TransportError(f"Request failed: {e}") from e

        if not response.is_success:
            status = response.status_code
            logger.error(f"HTTP {status} for {path}")
            raise ProtocolError(
                f"HTTP {status}: {response.text[:200]}",
                status_code=status,
            )

        try:
            return response.json()
        except ValueError as e:
            # json.JSONDecodeError and UnicodeDecodeError are both ValueErrors
            logger.error(f"Invalid JSON body for {path}: {e}")
            raise ParseError(f"Invalid JSON in response from {path}: {e}") from e

    def _get_data(
        self,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """
        GET an envelope of the form {"data": [...], "total": n} and return
        the data array. The total count is ignored.

        Raises:
            SchemaError: If the body is not an object with a list-valued
                "data" attribute of objects
        """
        body = self._get(path, params=params)

        if not isinstance(body, dict):
            raise SchemaError(f"Expected a JSON object from {path}, got {type(body).__name__}")
        if "data" not in body:
            raise SchemaError(f"Response from {path} has no 'data' attribute")

        data = body["data"]
        if not isinstance(data, list):
            raise SchemaError(f"'data' from {path} is {type(data).__name__}, expected a list")

        for index, row in enumerate(data):
            if not isinstance(row, dict):
                raise SchemaError(f"Row {index} from {path} is not an object")

        logger.debug(f"{path}: {len(data)} rows")
        return data
