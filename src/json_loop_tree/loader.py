"""Document loading: JSON text, files, streams and http(s) URLs.

Every function here returns the parsed JSON value untouched; validation is
the builder's job.  Any failure to obtain or parse the document is raised as
``DocumentLoadError`` chained to the underlying exception.

URLs are fetched with ``httpx``.  Callers may pass their own ``httpx.Client``
(for shared connection pools, proxies or a ``MockTransport`` in tests); when
omitted, a short-lived client is created per call.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import IO, Any

import httpx

from json_loop_tree.errors import DocumentLoadError

logger = logging.getLogger(__name__)

__all__ = ["fetch_document", "load_document", "read_document"]

Source = str | os.PathLike[str] | IO[str] | IO[bytes]

_URL_SCHEMES = ("http://", "https://")


def read_document(text: str | bytes, origin: str = "<string>") -> Any:
    """Parse JSON text into a document.

    Raises:
        DocumentLoadError: If text is not valid JSON or nests beyond what the
            parser supports.
    """
    try:
        return json.loads(text)
    except ValueError as exc:
        raise DocumentLoadError(f"{origin}: invalid JSON: {exc}") from exc
    except RecursionError as exc:
        raise DocumentLoadError(f"{origin}: document nested too deeply") from exc


def fetch_document(
    url: str,
    client: httpx.Client | None = None,
    timeout: float = 10.0,
) -> Any:
    """GET ``url`` and parse the response body as JSON.

    Args:
        url:     An ``http://`` or ``https://`` URL.
        client:  Optional client to issue the request with.  It is not closed.
        timeout: Request timeout in seconds, used only for the internal client.

    Raises:
        DocumentLoadError: On transport errors, non-2xx status or invalid JSON.
    """
    logger.debug("Fetching document from %s", url)
    try:
        if client is None:
            with httpx.Client(timeout=timeout, follow_redirects=True) as own:
                response = own.get(url)
        else:
            response = client.get(url)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        raise DocumentLoadError(f"{url}: {exc}") from exc
    return read_document(response.content, origin=url)


def load_document(source: Source, client: httpx.Client | None = None) -> Any:
    """Load a document from a URL, a file path or an open stream.

    Strings starting with ``http://`` or ``https://`` are fetched; any other
    string or path-like is read as a UTF-8 file; objects with ``read()`` are
    consumed as streams.

    Raises:
        DocumentLoadError: If the source cannot be read or is not valid JSON.
    """
    if isinstance(source, str) and source.startswith(_URL_SCHEMES):
        return fetch_document(source, client=client)

    if hasattr(source, "read"):
        origin = str(getattr(source, "name", "<stream>"))
        try:
            data = source.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentLoadError(f"{origin}: {exc}") from exc
        return read_document(data, origin=origin)

    path = Path(source)
    logger.debug("Reading document from %s", path)
    try:
        data = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentLoadError(f"{path}: {exc}") from exc
    return read_document(data, origin=str(path))
