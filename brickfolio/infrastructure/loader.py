"""Collection document loader.

Fetches ``sets.json`` once at session start, either over HTTP or from
a local file, and parses it into ``LegoSet`` records.
"""

from pathlib import Path

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError

from brickfolio.catalog.models import LegoSet
from brickfolio.domain.exceptions import CollectionLoadError
from brickfolio.infrastructure.config import settings

logger = structlog.get_logger()

_SETS_ADAPTER = TypeAdapter(list[LegoSet])


def parse_collection(payload: bytes | str, source: str) -> list[LegoSet]:
    """Parse a collection document.

    Args:
        payload: Raw JSON array of set records.
        source: Where the payload came from, for error messages.

    Returns:
        Parsed sets in document order.

    Raises:
        CollectionLoadError: If the document is not a valid set array.
    """
    try:
        return _SETS_ADAPTER.validate_json(payload)
    except ValidationError as e:
        raise CollectionLoadError(
            source, f"invalid collection document ({e.error_count()} errors)"
        ) from e


class CollectionLoader:
    """Loads the collection from a URL or a file path.

    Example usage:
        loader = CollectionLoader("https://example.com/sets.json")
        sets = await loader.load()
    """

    def __init__(
        self,
        source: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize loader.

        Args:
            source: URL or path of the document, defaults to settings.
            timeout: HTTP timeout in seconds, defaults to settings.
            transport: Optional httpx transport (used by tests).
        """
        self.source = source or settings.data_source
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._transport = transport

    @property
    def is_remote(self) -> bool:
        """Check whether the source is an HTTP(S) URL."""
        return self.source.startswith(("http://", "https://"))

    async def load(self) -> list[LegoSet]:
        """Fetch and parse the collection.

        Returns:
            Parsed sets.

        Raises:
            CollectionLoadError: On any fetch or parse failure.
        """
        logger.info("Loading collection", source=self.source)
        payload = await (self._fetch() if self.is_remote else self._read())
        sets = parse_collection(payload, self.source)
        logger.info("Collection loaded", source=self.source, set_count=len(sets))
        return sets

    async def _fetch(self) -> bytes:
        """Download the document over HTTP."""
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.get(self.source)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise CollectionLoadError(self.source, str(e) or type(e).__name__) from e

        if response.status_code != 200:
            raise CollectionLoadError(
                self.source, f"unexpected status {response.status_code}"
            )
        return response.content

    async def _read(self) -> bytes:
        """Read the document from disk."""
        try:
            return Path(self.source).read_bytes()
        except OSError as e:
            raise CollectionLoadError(self.source, e.strerror or str(e)) from e
