from pathlib import Path

import requests

FETCH_TIMEOUT = 15


class SourceError(Exception):
    """Corpus could not be read."""


class UnknownMethodError(SourceError):
    pass


def read_file(path) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError(f"Cannot read file: {path}: {e}") from e


def read_url(url: str, timeout: float = FETCH_TIMEOUT) -> str:
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as e:
        raise SourceError(f"Cannot read URL: {url}: {e}") from e

    # requests falls back to ISO-8859-1 for text/* without a charset
    if "charset" not in r.headers.get("Content-Type", "").lower():
        r.encoding = "utf-8"
    return r.text


METHODS = {
    "file": read_file,
    "url": read_url,
}


def load_text(method: str, path) -> str:
    """
    Fetch the corpus for `method` ("file" or "url").

    Raises SourceError (or UnknownMethodError) with a message fit for the user.
    """
    reader = METHODS.get(method)
    if reader is None:
        raise UnknownMethodError(f"Unknown method: {method}")
    return reader(path)
