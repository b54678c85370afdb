"""Read EAD documents from files or over HTTP."""

from pathlib import Path

import requests
from loguru import logger

from ead_outline.config import HTTP_TIMEOUT
from ead_outline.core.document import EadDocument, parse_ead
from ead_outline.errors import EadSourceError
from ead_outline.protocols import DocumentSource


class FileSource:
    """EAD document stored on disk."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).expanduser()

    def read(self) -> bytes:
        try:
            return self.path.read_bytes()
        except FileNotFoundError as exc:
            msg = f"Finding aid not found: {self.path}"
            raise EadSourceError(msg) from exc


class HttpSource:
    """EAD document served over HTTP, e.g. a repository datastream."""

    def __init__(
        self,
        url: str,
        *,
        timeout: float = HTTP_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.sess = session or requests.Session()

    def read(self) -> bytes:
        logger.debug("Fetching finding aid: {!r}", self.url)
        r = self.sess.get(self.url, timeout=self.timeout)
        r.raise_for_status()
        return r.content


def open_source(location: str) -> DocumentSource:
    """Pick a source for a path or an http(s) URL."""
    if location.startswith(("http://", "https://")):
        return HttpSource(location)
    return FileSource(location)


def read_document(source: DocumentSource) -> EadDocument:
    """Read and parse the document behind a source."""
    return parse_ead(source.read())
