import logging
from typing import Union

from ._builder import UrlBuilder
from ._encoding import decode, enforce_str
from ._exceptions import MalformedUrlError
from ._models import Url
from ._paths import Path
from ._queries import Query
from ._schemes import Scheme

__all__ = ["builder", "http", "https", "parse"]

logger = logging.getLogger("immurl")


def builder(scheme: Union[Scheme, str], host: str) -> UrlBuilder:
    """
    Start building a URL for the given scheme and "host[:port]".

    Parameters:
        scheme: A `Scheme`, or a scheme name such as "https".
        host: The host, optionally followed by ":port". IPv6 addresses must
            be enclosed in brackets, eg. "[::1]:8080".
    """
    return UrlBuilder(scheme, host)


def http(host: str) -> UrlBuilder:
    return UrlBuilder(Scheme.HTTP, host)


def https(host: str) -> UrlBuilder:
    return UrlBuilder(Scheme.HTTPS, host)


def parse(url: str) -> Url:
    """
    Parse an absolute URL string, such as "https://example.com/a?b=c#d".

    Every component passes through the same validation as a built URL, and
    the result is equal to the URL that originally rendered the string.
    """
    url = enforce_str(url, name="url")
    scheme, sep, remainder = url.partition("://")
    if not sep or not scheme:
        raise MalformedUrlError(url, "expected 'scheme://' prefix.")

    remainder, _, fragment = remainder.partition("#")
    remainder, _, query = remainder.partition("?")
    idx = remainder.find("/")
    if idx == -1:
        authority, path = remainder, ""
    else:
        authority, path = remainder[:idx], remainder[idx:]

    logger.debug("parse url=%r", url)
    return (
        UrlBuilder(scheme, authority)
        .path(Path.from_encoded(path))
        .query(Query.from_encoded(query))
        .fragment(decode(fragment))
        .create()
    )
