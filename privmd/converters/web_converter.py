"""
Remote PDF Fetcher

Downloads a PDF from an http(s) URL so it can go through the same
conversion path as a local file. The declared content type is taken from
the response header; the body is never sniffed.
"""

import os
from urllib.parse import unquote, urlparse

import requests

from ..errors import FetchError
from ..fragments import SourceFile


class WebConverter:
    """Fetches remote documents into SourceFile objects."""

    DEFAULT_TIMEOUT = 30
    HEADERS = {
        "User-Agent": (
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/120.0.0.0 Safari/537.36"
        ),
        "Accept": "application/pdf,*/*;q=0.8",
    }

    @staticmethod
    def can_handle(source: str) -> bool:
        try:
            p = urlparse(source)
            return p.scheme in ("http", "https") and bool(p.netloc)
        except ValueError:
            return False

    @staticmethod
    def fetch(url: str, timeout: int = DEFAULT_TIMEOUT) -> SourceFile:
        """
        Download `url`.

        Raises:
            FetchError: on connection problems or a non-2xx response.
        """
        try:
            resp = requests.get(
                url, headers=WebConverter.HEADERS, timeout=timeout, allow_redirects=True
            )
            resp.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(f"Could not download {url}: {e}") from e

        content_type = resp.headers.get("Content-Type", "")
        return SourceFile(
            name=_url_to_filename(resp.url or url),
            content_type=content_type.split(";", 1)[0].strip().lower(),
            data=resp.content,
        )


def _url_to_filename(url: str) -> str:
    """Last path segment of the URL, or an empty string for bare hosts."""
    path = urlparse(url).path
    return os.path.basename(unquote(path.rstrip("/")))
