"""HTTP client for the /dns-query endpoint."""

import logging
from urllib.parse import urlsplit

import httpx
from pydantic import ValidationError

from dohresolver.core.models import AnswerRecord, LookupResult, RecordType

logger = logging.getLogger(__name__)

CONNECTION_ERROR = "Could not connect to the server."
GENERIC_DNS_ERROR = "DNS error"


def normalize_name(text: str) -> str:
    """Return the hostname of a URL, or ``text`` itself when it is not one.

    Absolute (``https://host/path``) and scheme-relative (``//host``) URLs
    are recognised. Anything else, including bare domains and IP addresses,
    passes through unchanged.
    """
    value = text.strip()
    if "://" in value or value.startswith("//"):
        try:
            hostname = urlsplit(value).hostname
        except ValueError:
            hostname = None
        if hostname:
            return hostname
    return value


class DoHClient:
    """Client for a doh-resolver API."""

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport
        self._http_client: httpx.AsyncClient | None = None

    async def connect(self) -> None:
        """Initialize HTTP client."""
        self._http_client = httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self.transport
        )

    async def disconnect(self) -> None:
        """Close HTTP client."""
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> "DoHClient":
        await self.connect()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.disconnect()

    @property
    def http_client(self) -> httpx.AsyncClient:
        if not self._http_client:
            raise RuntimeError("Client not connected. Call connect() first.")
        return self._http_client

    async def lookup(
        self,
        name: str,
        record_type: RecordType | str = RecordType.A,
        normalize: bool = True,
    ) -> LookupResult:
        """Query the endpoint and interpret its envelope."""
        if isinstance(record_type, RecordType):
            record_type = record_type.value
        query_name = normalize_name(name) if normalize else name

        try:
            response = await self.http_client.get(
                "/dns-query", params={"name": query_name, "type": record_type}
            )
            body = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.debug(f"Request to {self.base_url} failed: {e}")
            return LookupResult(ok=False, error=CONNECTION_ERROR)

        return parse_envelope(body)


def parse_envelope(body) -> LookupResult:
    """Interpret a response body.

    Anything but ``Status == 0`` is a failure, reported with the envelope
    ``Comment``, the validation ``error`` or a generic message.
    """
    if not isinstance(body, dict) or body.get("Status") != 0:
        message = None
        if isinstance(body, dict):
            message = body.get("Comment") or body.get("error")
        return LookupResult(ok=False, error=message or GENERIC_DNS_ERROR)

    try:
        answers = [AnswerRecord.model_validate(item) for item in body.get("Answer") or []]
    except ValidationError as e:
        logger.debug(f"Malformed Answer in response: {e}")
        return LookupResult(ok=False, error=GENERIC_DNS_ERROR)

    return LookupResult(ok=True, answers=answers)
